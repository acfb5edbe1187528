import logging

from django.utils import timezone
from drf_spectacular.utils import extend_schema
from rest_framework.permissions import AllowAny, IsAuthenticated
from rest_framework.response import Response
from rest_framework.views import APIView

from apps.accounts.serializers import SysUserSerializer
from apps.accounts.services.permission_service import get_role_permission
from apps.audit.services import create_login_log, LOGIN_SUCCESS_MSG, LOGOUT_SUCCESS_MSG
from apps.common.utils import get_client_ip
from apps.menus.services import get_menu_tree_for_role
from apps.menus.utils import build_routes
from .captcha import generate_captcha
from .serializers import LoginSerializer
from .tokens import create_token_for_user, get_token_expire, refresh_access_token

logger = logging.getLogger(__name__)


# 캡차 발급
class CaptchaView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(summary="캡차 발급", tags=["인증"])
    def get(self, request):
        captcha_id, image = generate_captcha()
        return Response({"base64Captcha": image, "captchaId": captcha_id})


# 토큰 갱신 (X-TOKEN 헤더 = refresh 토큰)
class RefreshTokenView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(summary="토큰 갱신", tags=["인증"])
    def get(self, request):
        token = refresh_access_token(request.headers.get("X-TOKEN"))
        return Response({"token": token, "expire": get_token_expire()})


# 로그인
class LoginView(APIView):
    permission_classes = [AllowAny]
    authentication_classes = []

    @extend_schema(summary="로그인", tags=["인증"], request=LoginSerializer)
    def post(self, request):
        serializer = LoginSerializer(data=request.data, context={"request": request})
        serializer.is_valid(raise_exception=True)
        user = serializer.validated_data["user"]

        # 로그인 성공 → 실패 횟수 초기화, 마지막 로그인 갱신
        user.failed_login_count = 0
        user.last_login = timezone.now()
        user.last_login_ip = get_client_ip(request)
        user.save(update_fields=["failed_login_count", "last_login", "last_login_ip"])

        token, refresh = create_token_for_user(user)

        # 프론트 권한 / 메뉴
        role = user.role
        permissions = get_role_permission(role)
        menus = build_routes(get_menu_tree_for_role(role.role_key)) if role else []

        create_login_log(request, user.username, LOGIN_SUCCESS_MSG, create_by=user.username)
        logger.info(f"로그인: {user.username}")

        return Response({
            "user": SysUserSerializer(user).data,
            "permissions": permissions,
            "menus": menus,
            "token": token,
            "refresh": refresh,
            "expire": get_token_expire(),
        })


# 로그아웃
class LogoutView(APIView):
    permission_classes = [IsAuthenticated]

    @extend_schema(summary="로그아웃", tags=["인증"])
    def post(self, request):
        create_login_log(request, request.user.username, LOGOUT_SUCCESS_MSG, with_location=False)
        return Response({"detail": "로그아웃 되었습니다."})
