from django.contrib.auth.backends import ModelBackend
from apps.accounts.models import User

# 잠금/비활성 여부는 LoginSerializer 에서 판단
class LoginBackend(ModelBackend):
    def authenticate(self, request, username=None, password=None, **kwargs):
        try:
            user = User.objects.get(username=username)
        except User.DoesNotExist:
            # 타이밍 차이 완화
            User().set_password(password)
            return None

        if user.check_password(password):
            return user
        return None
