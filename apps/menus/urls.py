from django.urls import path

from .views import UserMenuView

urlpatterns = [
    path("routes/", UserMenuView, name="menu-routes"),  # 로그인 사용자 메뉴 라우트
]
