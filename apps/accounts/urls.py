from django.urls import path
from .views import (
    SysUserListView,
    SysUserProfileView,
    SysUserAvatarView,
    ChangePasswordView,
    SysUserView,
    SysUserStatusView,
    SysUserDetailView,
    SysUserInitView,
    UserRolePostView,
    SysUserExportView,
)

# 사용자 관리 API 엔드포인트 정의 (api/system/user/)
urlpatterns = [
    # 사용자 목록 (검색/필터/페이지)
    path("sysUserList/", SysUserListView.as_view(), name="sys-user-list"),

    # 내 정보
    path("profile/", SysUserProfileView.as_view(), name="sys-user-profile"),
    path("profileAvatar/", SysUserAvatarView.as_view(), name="sys-user-avatar"),
    path("updatePwd/", ChangePasswordView.as_view(), name="sys-user-update-pwd"),

    # 사용자 생성/수정/상태 변경
    path("sysUser/", SysUserView.as_view(), name="sys-user"),
    path("sysUser/changeStatus/", SysUserStatusView.as_view(), name="sys-user-status"),

    # 사용자 상세 조회, 삭제 ("1,2,3")
    path("sysUser/<str:user_ids>/", SysUserDetailView.as_view(), name="sys-user-detail"),

    # 역할/직위 조회
    path("getInit/", SysUserInitView.as_view(), name="sys-user-init"),
    path("getRoPo/", UserRolePostView.as_view(), name="sys-user-role-post"),

    # Excel 내보내기
    path("export/", SysUserExportView.as_view(), name="sys-user-export"),
]
