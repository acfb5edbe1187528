from dataclasses import dataclass, field


@dataclass
class MenuNode:
    """DB 없이 라우트를 만들 때 쓰는 메뉴 노드 (Menu 모델과 같은 속성)"""
    path: str = ""
    component: str = ""
    menu_name: str = ""
    permission: str = ""
    is_link: str = ""
    is_hide: str = "0"
    is_keep_alive: str = "1"
    is_affix: str = "1"
    is_frame: str = "1"
    icon: str = ""
    children: list = field(default_factory=list)


# 평면 메뉴 목록 → 부모-자식 트리
def nest_menus(menus):
    menus = list(menus)
    menu_map = {}
    tree = []

    # 모든 메뉴 노드 준비
    for menu in menus:
        menu.children = []
        menu_map[menu.id] = menu

    # 메뉴 : 부모-자식 관계 연결 (부모가 목록에 없는 메뉴는 버림)
    for menu in menus:
        if menu.parent_id:
            parent = menu_map.get(menu.parent_id)
            if parent:
                parent.children.append(menu)
        else:
            tree.append(menu)

    return tree


# 프론트 라우트 트리 생성
def build_routes(menus):
    routes = []

    for menu in menus:
        # 권한 문자열 "a,b,c" → ["a", "b", "c"]
        auth = menu.permission.split(",") if menu.permission != "" else []

        routes.append({
            "name": menu.path,
            "path": menu.path,
            "component": menu.component,
            "meta": {
                "title": menu.menu_name,
                "isLink": menu.is_link,
                "isHide": menu.is_hide == "1",
                "isKeepAlive": menu.is_keep_alive == "0",
                "isAffix": menu.is_affix == "0",
                "isFrame": menu.is_frame == "0",
                "auth": auth,
                "icon": menu.icon,
            },
            "children": build_routes(getattr(menu, "children", None) or []),
        })

    return routes
