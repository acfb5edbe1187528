from django.urls import path

from .views import CaptchaView, LoginView, LogoutView, RefreshTokenView

# 인증 API (api/system/user/)
urlpatterns = [
    path("getCaptcha/", CaptchaView.as_view(), name="captcha"),  # 캡차 발급
    path("login/", LoginView.as_view(), name="login"),  # 로그인
    path("refreshToken/", RefreshTokenView.as_view(), name="refresh-token"),  # 토큰 갱신
    path("logout/", LogoutView.as_view(), name="logout"),  # 로그아웃
]
