from drf_spectacular.utils import extend_schema
from rest_framework.decorators import api_view, permission_classes
from rest_framework.permissions import IsAuthenticated
from rest_framework.response import Response

from .services import get_menu_tree_for_role
from .utils import build_routes


# 메뉴 라우트 API
@extend_schema(summary="로그인 사용자 메뉴 라우트 조회", tags=["메뉴"])
@api_view(["GET"])
@permission_classes([IsAuthenticated])
def UserMenuView(request):
    role = request.user.role
    if role is None:
        return Response({"menus": []})

    # 역할별 메뉴 트리 → 프론트 라우트
    menu_tree = get_menu_tree_for_role(role.role_key)

    return Response({
        "menus": build_routes(menu_tree)
    })
