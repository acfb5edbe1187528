# 역할별 권한 코드 조회 (프론트 버튼/API 권한)

from apps.menus.models import Menu
from apps.menus.services import ADMIN_ROLE_KEY


# 역할 권한 조회 로직
def get_role_permission(role):
    if role is None:
        return []

    menus = Menu.objects.filter(status="0", menu_type__in=["F", "C"]).exclude(permission="")
    if role.role_key != ADMIN_ROLE_KEY:
        menus = menus.filter(rolemenu__role=role).distinct()

    permission = menus.order_by("sort", "id").values_list("permission", flat=True)

    return list(permission)
