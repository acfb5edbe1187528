from django.contrib.auth import authenticate
from django.db.models import F
from django.utils import timezone
from rest_framework import serializers

from apps.accounts.models import User
from apps.audit.services import create_login_log
from utils.exceptions import (
    AccountLockedException,
    AuthenticationFailedException,
    CaptchaException,
)
from .captcha import verify_captcha

# 로그인 실패 최대 허용 횟수
MAX_LOGIN_FAIL = 5


# 로그인 요청 데이터 검증 (캡차 → 계정 → 잠금/비활성)
class LoginSerializer(serializers.Serializer):
    username = serializers.CharField()
    password = serializers.CharField(write_only=True)
    captchaId = serializers.CharField()
    captcha = serializers.CharField()

    def validate(self, data):
        request = self.context["request"]
        username = data.get("username")
        password = data.get("password")

        if not verify_captcha(data.get("captchaId"), data.get("captcha")):
            raise CaptchaException()

        user = authenticate(request, username=username, password=password)

        # 로그인 실패
        if not user:
            qs = User.objects.filter(username=username)
            # 실패 횟수 증가 (존재하는 계정일 경우만)
            qs.update(
                failed_login_count=F("failed_login_count") + 1
            )

            user_obj = qs.first()
            remain = None

            if user_obj:
                # 로그인 남은 횟수 계산
                remain = max(MAX_LOGIN_FAIL - user_obj.failed_login_count, 0)

                # 로그인 잠금 발생 시
                if user_obj.failed_login_count >= MAX_LOGIN_FAIL:
                    qs.update(
                        is_locked=True,
                        locked_at=timezone.now()
                    )
                    create_login_log(request, username, "로그인 실패: 계정 잠금", status="1")
                    raise AccountLockedException(detail={"remain": 0})

            # 일반 실패
            create_login_log(request, username, "로그인 실패: 아이디 또는 비밀번호 불일치", status="1")
            raise AuthenticationFailedException(
                "아이디 또는 비밀번호가 올바르지 않습니다.",
                detail={"remain": remain},
            )

        # 이미 잠긴 계정
        if user.is_locked:
            create_login_log(request, username, "로그인 실패: 잠긴 계정", status="1")
            raise AccountLockedException(detail={"remain": 0})

        # 비활성 계정
        if not user.is_active:
            create_login_log(request, username, "로그인 실패: 비활성 계정", status="1")
            raise AuthenticationFailedException("비활성화된 계정입니다.")

        data["user"] = user
        return data
