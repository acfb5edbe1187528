import environ
import os
from pathlib import Path
from datetime import timedelta
from corsheaders.defaults import default_headers
from dotenv import load_dotenv


# Build paths inside the project like this: BASE_DIR / 'subdir'.
BASE_DIR = Path(__file__).resolve().parent.parent

# env 초기화 (.env 파일에서 환경변수 로드)
load_dotenv(os.path.join(BASE_DIR, '.env'))
env = environ.Env()


# SECRET_KEY: 환경변수 우선, 없으면 개발용 기본값 사용
# ⚠️ 프로덕션에서는 반드시 환경변수로 안전한 키 설정 필요
SECRET_KEY = env('SECRET_KEY', default='dev-secret-do-not-use-in-production')
DEBUG = env.bool('DEBUG', default=False)

# ALLOWED_HOSTS 설정
# 운영 환경에서는 .env에서 ALLOWED_HOSTS를 명시적으로 설정하세요
ALLOWED_HOSTS = env.list("ALLOWED_HOSTS", default=["127.0.0.1", "localhost", "testserver"])


# Application definition
INSTALLED_APPS = [
    "django.contrib.admin",
    "django.contrib.auth",
    "django.contrib.contenttypes",
    "django.contrib.sessions",
    "django.contrib.messages",
    "django.contrib.staticfiles",
    "django_filters",
    "corsheaders",
    "rest_framework",
    "drf_spectacular",
    "apps.menus",           # 메뉴 관리
    "apps.accounts",        # 사용자 관리
    "apps.authorization",   # 인증 (캡차/로그인/토큰)
    "apps.audit",           # 로그인 로그
]

MIDDLEWARE = [
    "corsheaders.middleware.CorsMiddleware",  # 반드시 CommonMiddleware보다 위에
    "django.middleware.security.SecurityMiddleware",
    "django.contrib.sessions.middleware.SessionMiddleware",
    "django.middleware.common.CommonMiddleware",
    "django.middleware.csrf.CsrfViewMiddleware",
    "django.contrib.auth.middleware.AuthenticationMiddleware",
    "django.contrib.messages.middleware.MessageMiddleware",
    "django.middleware.clickjacking.XFrameOptionsMiddleware",
    "utils.middleware.access_log.AccessLogMiddleware",
]

ROOT_URLCONF = "config.urls"

TEMPLATES = [
    {
        "BACKEND": "django.template.backends.django.DjangoTemplates",
        "DIRS": [],
        "APP_DIRS": True,
        "OPTIONS": {
            "context_processors": [
                "django.template.context_processors.request",
                "django.contrib.auth.context_processors.auth",
                "django.contrib.messages.context_processors.messages",
            ],
        },
    },
]

WSGI_APPLICATION = "config.wsgi.application"


# Database
# https://docs.djangoproject.com/en/5.2/ref/settings/#databases

# 데이터베이스 설정 (DATABASE_URL, 기본값 sqlite)
DATABASES = {
    "default": env.db("DATABASE_URL", default=f"sqlite:///{BASE_DIR / 'db.sqlite3'}"),
}

# 캡차 저장소
CACHES = {
    "default": env.cache("CACHE_URL", default="locmemcache://"),
}


# Password validation
# https://docs.djangoproject.com/en/5.2/ref/settings/#auth-password-validators

AUTH_PASSWORD_VALIDATORS = [
    {
        "NAME": "django.contrib.auth.password_validation.MinimumLengthValidator",
        "OPTIONS": {"min_length": 6},
    },
]


# Internationalization
# https://docs.djangoproject.com/en/5.2/topics/i18n/

LANGUAGE_CODE = "ko-kr"

TIME_ZONE = "Asia/Seoul"

USE_I18N = True

USE_TZ = True


# Static files (CSS, JavaScript, Images)
# https://docs.djangoproject.com/en/5.2/howto/static-files/

STATIC_URL = "static/"
STATIC_ROOT = BASE_DIR / "static"

# 업로드 파일 (아바타: MEDIA_ROOT/uploadfile/)
MEDIA_URL = env("MEDIA_URL", default="/media/")
MEDIA_ROOT = Path(env("MEDIA_ROOT", default=str(BASE_DIR / "media")))

# Default primary key field type
# https://docs.djangoproject.com/en/5.2/ref/settings/#default-auto-field

DEFAULT_AUTO_FIELD = "django.db.models.BigAutoField"

# DB와 연결된 로그인 정보 호출
AUTH_USER_MODEL = "accounts.User"

# 로그인 로직 (있어야만 로그인 처리 가능)
AUTHENTICATION_BACKENDS = [
    "apps.accounts.backends.LoginBackend",
]

# SimpleJWT 설정
JWT_EXPIRE_TIME = env.int("JWT_EXPIRE_TIME", default=7 * 24 * 60 * 60)  # 초 (7일)
JWT_REFRESH_EXPIRE_TIME = env.int("JWT_REFRESH_EXPIRE_TIME", default=14 * 24 * 60 * 60)

SIMPLE_JWT = {
    "ACCESS_TOKEN_LIFETIME" : timedelta(seconds=JWT_EXPIRE_TIME),
    "REFRESH_TOKEN_LIFETIME" : timedelta(seconds=JWT_REFRESH_EXPIRE_TIME),
    "AUTH_HEADER_TYPES" : ("Bearer",),
    "ISSUER" : env("JWT_ISSUER", default="PandaX"),
    "UPDATE_LAST_LOGIN" : False,
}

# 캡차 설정
CAPTCHA_LENGTH = env.int("CAPTCHA_LENGTH", default=4)
CAPTCHA_TIMEOUT = env.int("CAPTCHA_TIMEOUT", default=300)  # 초

# 로그인 위치 조회 API (비워두면 조회 안 함)
IP_LOCATION_API_URL = env("IP_LOCATION_API_URL", default="")

# CORS 옵션 추가
# 허용할 오리진 지정
CORS_ALLOWED_ORIGINS = env.list("CORS_ALLOWED_ORIGINS", default=[
    "http://localhost:5173",   # Vite 개발 서버
    "http://127.0.0.1:5173",   # Vite 개발 서버
])

# 헤더 허용 (Authorization, X-TOKEN) : default_headers(기본 헤더) + 추가
CORS_ALLOW_HEADERS = list(default_headers) + [
    "authorization",
    "x-token",
]
# 쿠키를 포함한 cross-origin 요청
CORS_ALLOW_CREDENTIALS = True


# Swagger 설정
REST_FRAMEWORK = {
    "DEFAULT_SCHEMA_CLASS": "drf_spectacular.openapi.AutoSchema",
    "DEFAULT_AUTHENTICATION_CLASSES": [
        "rest_framework_simplejwt.authentication.JWTAuthentication",
    ],
    "DEFAULT_PERMISSION_CLASSES": (
        "rest_framework.permissions.IsAuthenticated",
    ),
    "DEFAULT_RENDERER_CLASSES": [
        "rest_framework.renderers.JSONRenderer",
    ],
    "EXCEPTION_HANDLER": "utils.exception_handlers.custom_exception_handler",
}

SPECTACULAR_SETTINGS = {
    "TITLE": "Panda Admin API",
    "DESCRIPTION": "관리자 시스템 사용자 관리 API",
    "VERSION": "1.0.0",
    "USE_SESSION_AUTH": False,
    "SERVE_INCLUDE_SCHEMA": False,  # 문서 로드시 자동 호출 방지
    "SECURITY_SCHEMES": {
        "bearerAuth": {
            "type": "http",
            "scheme": "bearer",
            "bearerFormat": "JWT",
        },
    },
}


# 로그 설정
LOG_LEVEL = env("LOG_LEVEL", default="INFO")

LOGGING = {
    "version": 1,
    "disable_existing_loggers": False,
    "formatters": {
        "verbose": {
            "format": "[{asctime}] {levelname} {name}: {message}",
            "style": "{",
        },
    },
    "handlers": {
        "console": {
            "class": "logging.StreamHandler",
            "formatter": "verbose",
        },
    },
    "loggers": {
        "access": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "apps": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
        "utils": {"handlers": ["console"], "level": LOG_LEVEL, "propagate": False},
    },
}
