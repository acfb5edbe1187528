"""사용자 목록 Excel 내보내기"""
import io

import pandas as pd
from django.utils import timezone

# 엑셀 컬럼 (헤더, 값 추출)
USER_EXPORT_COLUMNS = [
    ("ID", lambda u: u.id),
    ("사용자명", lambda u: u.username),
    ("닉네임", lambda u: u.nick_name),
    ("전화번호", lambda u: u.phone),
    ("이메일", lambda u: u.email),
    ("성별", lambda u: u.get_sex_display()),
    ("상태", lambda u: u.get_status_display()),
    ("부서", lambda u: u.dept.dept_name if u.dept else ""),
    ("직위", lambda u: u.post.post_name if u.post else ""),
    ("생성일시", lambda u: timezone.localtime(u.created_at).strftime("%Y-%m-%d %H:%M:%S")),
]


def export_users(users):
    """
    사용자 목록 → xlsx
    Returns: (BytesIO, 파일명)
    """
    rows = [[getter(user) for _, getter in USER_EXPORT_COLUMNS] for user in users]
    df = pd.DataFrame(rows, columns=[header for header, _ in USER_EXPORT_COLUMNS])

    buffer = io.BytesIO()
    df.to_excel(buffer, index=False, sheet_name="사용자", engine="openpyxl")
    buffer.seek(0)

    filename = f"사용자_{timezone.localtime().strftime('%Y%m%d%H%M%S')}.xlsx"
    return buffer, filename
