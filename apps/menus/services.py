from .models import Menu
from .utils import nest_menus

# 모든 메뉴를 볼 수 있는 역할 키
ADMIN_ROLE_KEY = "admin"


# 역할이 접근 가능한 메뉴(디렉터리/메뉴)를 반환하는 함수.
def get_role_menus(role_key):
    menus = Menu.objects.filter(status="0", menu_type__in=["M", "C"])

    if role_key != ADMIN_ROLE_KEY:
        menus = menus.filter(rolemenu__role__role_key=role_key).distinct()

    return list(menus.order_by("sort", "id"))


# 역할별 메뉴 트리
def get_menu_tree_for_role(role_key):
    return nest_menus(get_role_menus(role_key))
