from django.conf import settings
from django.conf.urls.static import static
from django.contrib import admin
from django.urls import path, include

from drf_spectacular.views import (
    SpectacularAPIView,
    SpectacularSwaggerView,
)


urlpatterns = [
    path("admin/", admin.site.urls),

    # 인증 API (캡차, 로그인, 토큰 갱신, 로그아웃)
    path("api/system/user/", include("apps.authorization.urls")),

    # 사용자 관리 API
    path("api/system/user/", include("apps.accounts.urls")),

    # 메뉴 라우트 API
    path("api/system/menu/", include("apps.menus.urls")),

    # API 문서화 엔드포인트
    path("api/schema/", SpectacularAPIView.as_view(), name="schema"),
    path(
        "api/docs/",
        SpectacularSwaggerView.as_view(url_name="schema"),
        name="swagger-ui",
    ),
] + static(settings.MEDIA_URL, document_root=settings.MEDIA_ROOT)
