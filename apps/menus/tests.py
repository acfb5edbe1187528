from django.test import SimpleTestCase, TestCase
from rest_framework import status
from rest_framework.test import APITestCase

from apps.accounts.models import User, Role, RoleMenu
from apps.accounts.services.permission_service import get_role_permission
from .models import Menu
from .services import get_role_menus, get_menu_tree_for_role
from .utils import MenuNode, build_routes, nest_menus


def count_nodes(routes):
    return sum(1 + count_nodes(r["children"]) for r in routes)


def depth(routes):
    if not routes:
        return 0
    return 1 + max(depth(r["children"]) for r in routes)


class BuildRoutesTest(SimpleTestCase):
    """메뉴 → 프론트 라우트 변환 테스트"""

    def test_empty_forest(self):
        self.assertEqual(build_routes([]), [])

    def test_keeps_length_and_order(self):
        nodes = [MenuNode(path=f"/p{i}", menu_name=f"m{i}") for i in range(5)]

        routes = build_routes(nodes)

        self.assertEqual(len(routes), 5)
        self.assertEqual([r["path"] for r in routes], ["/p0", "/p1", "/p2", "/p3", "/p4"])
        self.assertEqual([r["meta"]["title"] for r in routes], ["m0", "m1", "m2", "m3", "m4"])

    def test_tree_shape_is_preserved(self):
        leaf = MenuNode(path="/a/b/c")
        nodes = [
            MenuNode(path="/a", children=[
                MenuNode(path="/a/b", children=[leaf]),
                MenuNode(path="/a/d"),
            ]),
            MenuNode(path="/e"),
        ]

        routes = build_routes(nodes)

        self.assertEqual(count_nodes(routes), 6)
        self.assertEqual(depth(routes), 3)
        self.assertEqual(len(routes[0]["children"]), 2)
        self.assertEqual(len(routes[0]["children"][0]["children"]), 1)
        self.assertEqual(routes[0]["children"][1]["children"], [])
        self.assertEqual(routes[1]["children"], [])

    def test_permission_split(self):
        routes = build_routes([
            MenuNode(permission="a,b,c"),
            MenuNode(permission=""),
            MenuNode(permission="a, b,a"),
        ])

        self.assertEqual(routes[0]["meta"]["auth"], ["a", "b", "c"])
        self.assertEqual(routes[1]["meta"]["auth"], [])
        # 공백/중복 그대로 유지
        self.assertEqual(routes[2]["meta"]["auth"], ["a", " b", "a"])

    def test_flag_sentinels(self):
        on = build_routes([MenuNode(is_hide="1", is_keep_alive="0", is_affix="0", is_frame="0")])[0]["meta"]
        off = build_routes([MenuNode(is_hide="0", is_keep_alive="1", is_affix="1", is_frame="1")])[0]["meta"]

        self.assertTrue(on["isHide"])
        self.assertTrue(on["isKeepAlive"])
        self.assertTrue(on["isAffix"])
        self.assertTrue(on["isFrame"])

        self.assertFalse(off["isHide"])
        self.assertFalse(off["isKeepAlive"])
        self.assertFalse(off["isAffix"])
        self.assertFalse(off["isFrame"])

    def test_link_and_icon_copied(self):
        meta = build_routes([MenuNode(is_link="https://example.com", icon="user")])[0]["meta"]

        self.assertEqual(meta["isLink"], "https://example.com")
        self.assertEqual(meta["icon"], "user")

    def test_system_menu_scenario(self):
        nodes = [
            MenuNode(
                path="/sys", component="Layout", menu_name="System",
                permission="sys:view,sys:edit",
                is_hide="1", is_keep_alive="0", is_affix="0", is_frame="0",
                icon="setting",
                children=[
                    MenuNode(
                        path="/sys/user", component="UserPage", menu_name="Users",
                        permission="",
                        is_hide="0", is_keep_alive="1", is_affix="1", is_frame="1",
                    ),
                ],
            ),
        ]

        routes = build_routes(nodes)

        self.assertEqual(len(routes), 1)
        root = routes[0]
        self.assertEqual(root["name"], "/sys")
        self.assertEqual(root["path"], "/sys")
        self.assertEqual(root["component"], "Layout")
        self.assertEqual(root["meta"]["title"], "System")
        self.assertEqual(root["meta"]["auth"], ["sys:view", "sys:edit"])
        self.assertEqual(root["meta"]["icon"], "setting")
        for flag in ("isHide", "isKeepAlive", "isAffix", "isFrame"):
            self.assertIs(root["meta"][flag], True)

        self.assertEqual(len(root["children"]), 1)
        child = root["children"][0]
        self.assertEqual(child["name"], "/sys/user")
        self.assertEqual(child["path"], "/sys/user")
        self.assertEqual(child["meta"]["auth"], [])
        for flag in ("isHide", "isKeepAlive", "isAffix", "isFrame"):
            self.assertIs(child["meta"][flag], False)
        self.assertEqual(child["children"], [])


class MenuTreeTest(TestCase):
    """역할별 메뉴 조회 / 트리 구성 테스트"""

    def setUp(self):
        self.admin_role = Role.objects.create(role_name="관리자", role_key="admin")
        self.common_role = Role.objects.create(role_name="일반", role_key="common")

        self.system = Menu.objects.create(menu_name="시스템", path="/system", menu_type="M", sort=1)
        self.user_menu = Menu.objects.create(
            menu_name="사용자", path="/system/user", menu_type="C", sort=1,
            parent=self.system, permission="system:user:list",
        )
        self.user_add = Menu.objects.create(
            menu_name="사용자 추가", menu_type="F", sort=1,
            parent=self.user_menu, permission="system:user:add",
        )
        self.menu_menu = Menu.objects.create(
            menu_name="메뉴", path="/system/menu", menu_type="C", sort=0,
            parent=self.system, permission="system:menu:list",
        )
        self.disabled = Menu.objects.create(
            menu_name="사용 중지", path="/system/old", menu_type="C", sort=2,
            parent=self.system, status="1", permission="system:old:list",
        )
        self.log = Menu.objects.create(menu_name="로그", path="/log", menu_type="M", sort=2)

        for menu in (self.system, self.user_menu, self.user_add, self.disabled):
            RoleMenu.objects.create(role=self.common_role, menu=menu)

    def test_nest_menus(self):
        tree = nest_menus(Menu.objects.filter(menu_type__in=["M", "C"], status="0").order_by("sort", "id"))

        self.assertEqual([m.path for m in tree], ["/system", "/log"])
        self.assertEqual([m.path for m in tree[0].children], ["/system/menu", "/system/user"])
        self.assertEqual(tree[1].children, [])

    def test_nest_menus_drops_orphans(self):
        tree = nest_menus([self.user_menu, self.log])

        self.assertEqual(tree, [self.log])

    def test_admin_sees_all_active_menus(self):
        menus = get_role_menus("admin")

        self.assertEqual(
            [m.path for m in menus],
            ["/system/menu", "/system", "/system/user", "/log"],
        )

    def test_role_menus_are_scoped(self):
        menus = get_role_menus("common")

        # 버튼 / 사용 중지 / 권한 없는 메뉴 제외
        self.assertEqual([m.path for m in menus], ["/system", "/system/user"])

    def test_menu_tree_for_role(self):
        routes = build_routes(get_menu_tree_for_role("common"))

        self.assertEqual(len(routes), 1)
        self.assertEqual(routes[0]["path"], "/system")
        self.assertEqual([c["path"] for c in routes[0]["children"]], ["/system/user"])
        self.assertEqual(routes[0]["children"][0]["meta"]["auth"], ["system:user:list"])

    def test_role_permission(self):
        self.assertEqual(
            get_role_permission(self.common_role),
            ["system:user:list", "system:user:add"],
        )
        self.assertEqual(
            get_role_permission(self.admin_role),
            ["system:menu:list", "system:user:list", "system:user:add"],
        )
        self.assertEqual(get_role_permission(None), [])


class UserMenuApiTest(APITestCase):
    """메뉴 라우트 API 테스트"""

    def setUp(self):
        self.role = Role.objects.create(role_name="일반", role_key="common")
        menu = Menu.objects.create(menu_name="대시보드", path="/dashboard", component="Dashboard", menu_type="C")
        RoleMenu.objects.create(role=self.role, menu=menu)

        self.user = User.objects.create_user(username="user1", password="testpass123", role=self.role)

    def test_routes(self):
        self.client.force_authenticate(user=self.user)

        response = self.client.get("/api/system/menu/routes/")

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(len(response.data["menus"]), 1)
        self.assertEqual(response.data["menus"][0]["component"], "Dashboard")

    def test_routes_without_role(self):
        user = User.objects.create_user(username="norole", password="testpass123")
        self.client.force_authenticate(user=user)

        response = self.client.get("/api/system/menu/routes/")

        self.assertEqual(response.data["menus"], [])

    def test_routes_requires_login(self):
        response = self.client.get("/api/system/menu/routes/")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data["error"]["code"], "ERR_001")
