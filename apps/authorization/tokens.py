# JWT 토큰 발급 / 갱신
import time

from django.conf import settings
from rest_framework_simplejwt.exceptions import TokenError
from rest_framework_simplejwt.tokens import RefreshToken

from utils.exceptions import AuthenticationFailedException

# 발급 시각보다 앞당긴 토큰 유효 시작 시각 (초)
NOT_BEFORE_SKEW = 1000


def get_token_expire():
    """access 토큰 만료 시각 (unix time)"""
    lifetime = settings.SIMPLE_JWT["ACCESS_TOKEN_LIFETIME"]
    return int(time.time()) + int(lifetime.total_seconds())


def create_token_for_user(user):
    """
    로그인 사용자 토큰 발급
    Returns: (access, refresh)
    """
    refresh = RefreshToken.for_user(user)

    # 커스텀 클레임 (access 토큰에도 복사됨)
    refresh["username"] = user.username
    refresh["role_id"] = user.role_id
    refresh["role_key"] = user.role.role_key if user.role else None
    refresh["dept_id"] = user.dept_id
    refresh["post_id"] = user.post_id
    refresh["nbf"] = int(time.time()) - NOT_BEFORE_SKEW

    return str(refresh.access_token), str(refresh)


def refresh_access_token(refresh_token):
    """refresh 토큰으로 access 토큰 재발급"""
    if not refresh_token:
        raise AuthenticationFailedException("토큰 갱신에 실패했습니다.")

    try:
        refresh = RefreshToken(refresh_token)
    except TokenError as e:
        raise AuthenticationFailedException("토큰 갱신에 실패했습니다.", detail=str(e))

    return str(refresh.access_token)
