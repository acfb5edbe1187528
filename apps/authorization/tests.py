import threading
import time
from unittest import mock

from django.core.cache import cache
from django.core.cache.backends.locmem import LocMemCache
from django.test import TestCase
from rest_framework import status
from rest_framework.test import APITestCase
from rest_framework_simplejwt.tokens import AccessToken

from apps.accounts.models import User, Role, RoleMenu
from apps.audit.models import LoginLog
from apps.menus.models import Menu
from .captcha import generate_captcha, verify_captcha, CAPTCHA_CACHE_PREFIX
from .serializers import MAX_LOGIN_FAIL
from .tokens import NOT_BEFORE_SKEW


CAPTCHA_URL = "/api/system/user/getCaptcha/"
LOGIN_URL = "/api/system/user/login/"
REFRESH_URL = "/api/system/user/refreshToken/"
LOGOUT_URL = "/api/system/user/logout/"


class CaptchaTest(TestCase):
    """캡차 발급 / 검증 테스트"""

    def setUp(self):
        cache.clear()

    def test_generate(self):
        captcha_id, image = generate_captcha()

        self.assertTrue(image.startswith("data:image/png;base64,"))
        answer = cache.get(f"{CAPTCHA_CACHE_PREFIX}{captcha_id}")
        self.assertEqual(len(answer), 4)
        self.assertTrue(answer.isdigit())

    def test_verify_is_one_shot(self):
        captcha_id, _ = generate_captcha()
        answer = cache.get(f"{CAPTCHA_CACHE_PREFIX}{captcha_id}")

        self.assertTrue(verify_captcha(captcha_id, f" {answer} "))
        self.assertFalse(verify_captcha(captcha_id, answer))

    def test_verify_concurrent_requests_pass_once(self):
        captcha_id, _ = generate_captcha()
        answer = cache.get(f"{CAPTCHA_CACHE_PREFIX}{captcha_id}")

        # 두 요청이 모두 값을 읽은 뒤에 삭제하도록 순서 고정
        barrier = threading.Barrier(2, timeout=5)
        original_get = LocMemCache.get

        def get_then_wait(cache_self, *args, **kwargs):
            value = original_get(cache_self, *args, **kwargs)
            barrier.wait()
            return value

        results = []

        def verify():
            results.append(verify_captcha(captcha_id, answer))

        with mock.patch.object(LocMemCache, "get", get_then_wait):
            threads = [threading.Thread(target=verify) for _ in range(2)]
            for t in threads:
                t.start()
            for t in threads:
                t.join()

        self.assertEqual(len(results), 2)
        self.assertEqual(results.count(True), 1)

    def test_verify_wrong_answer(self):
        captcha_id, _ = generate_captcha()

        self.assertFalse(verify_captcha(captcha_id, "wrong"))
        self.assertFalse(verify_captcha("unknown", "1234"))
        self.assertFalse(verify_captcha(None, "1234"))


class LoginTest(APITestCase):
    """로그인 / 토큰 갱신 / 로그아웃 API 테스트"""

    def setUp(self):
        cache.clear()
        self.role = Role.objects.create(role_name="일반", role_key="common")
        menu = Menu.objects.create(
            menu_name="사용자", path="/system/user", component="UserPage",
            menu_type="C", permission="system:user:list",
        )
        RoleMenu.objects.create(role=self.role, menu=menu)

        self.user = User.objects.create_user(
            username="user1",
            password="testpass123",
            nick_name="사용자1",
            role=self.role,
        )

    def get_captcha(self):
        response = self.client.get(CAPTCHA_URL)
        self.assertEqual(response.status_code, status.HTTP_200_OK)
        captcha_id = response.data["captchaId"]
        return captcha_id, cache.get(f"{CAPTCHA_CACHE_PREFIX}{captcha_id}")

    def login(self, username="user1", password="testpass123"):
        captcha_id, answer = self.get_captcha()
        return self.client.post(LOGIN_URL, {
            "username": username,
            "password": password,
            "captchaId": captcha_id,
            "captcha": answer,
        }, format="json")

    def test_login_success(self):
        response = self.login()

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(response.data["user"]["username"], "user1")
        self.assertNotIn("password", response.data["user"])
        self.assertEqual(response.data["permissions"], ["system:user:list"])
        self.assertEqual(response.data["menus"][0]["path"], "/system/user")
        self.assertIn("refresh", response.data)
        self.assertGreater(response.data["expire"], int(time.time()))

        claims = AccessToken(response.data["token"])
        self.assertEqual(claims["username"], "user1")
        self.assertEqual(claims["role_key"], "common")
        self.assertEqual(claims["role_id"], self.role.id)
        self.assertEqual(claims["iss"], "PandaX")
        self.assertLessEqual(claims["nbf"], int(time.time()) - NOT_BEFORE_SKEW + 5)

        self.user.refresh_from_db()
        self.assertEqual(self.user.failed_login_count, 0)
        self.assertIsNotNone(self.user.last_login)
        self.assertEqual(self.user.last_login_ip, "127.0.0.1")

        log = LoginLog.objects.get(username="user1")
        self.assertEqual(log.status, "0")
        self.assertEqual(log.msg, "로그인 성공")
        self.assertEqual(log.login_location, "내부 IP")

    def test_wrong_captcha(self):
        captcha_id, answer = self.get_captcha()

        response = self.client.post(LOGIN_URL, {
            "username": "user1",
            "password": "testpass123",
            "captchaId": captcha_id,
            "captcha": "x" + answer,
        }, format="json")

        self.assertEqual(response.status_code, status.HTTP_400_BAD_REQUEST)
        self.assertEqual(response.data["error"]["code"], "ERR_102")
        self.assertFalse(LoginLog.objects.exists())

    def test_wrong_password(self):
        response = self.login(password="wrongpass")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data["error"]["code"], "ERR_001")
        self.assertEqual(response.data["error"]["detail"], {"remain": MAX_LOGIN_FAIL - 1})

        self.user.refresh_from_db()
        self.assertEqual(self.user.failed_login_count, 1)
        self.assertEqual(LoginLog.objects.get().status, "1")

    def test_unknown_user(self):
        response = self.login(username="nobody")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertIsNone(response.data["error"]["detail"]["remain"])

    def test_lock_after_max_failures(self):
        for _ in range(MAX_LOGIN_FAIL - 1):
            response = self.login(password="wrongpass")
            self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

        response = self.login(password="wrongpass")
        self.assertEqual(response.status_code, status.HTTP_423_LOCKED)
        self.assertEqual(response.data["error"]["code"], "ERR_003")

        self.user.refresh_from_db()
        self.assertTrue(self.user.is_locked)
        self.assertIsNotNone(self.user.locked_at)

        # 잠긴 뒤에는 올바른 비밀번호도 거부
        response = self.login()
        self.assertEqual(response.status_code, status.HTTP_423_LOCKED)

    def test_disabled_user(self):
        self.user.status = "1"
        self.user.save()

        response = self.login()

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data["error"]["code"], "ERR_001")

    def test_refresh_token(self):
        refresh = self.login().data["refresh"]

        response = self.client.get(REFRESH_URL, HTTP_X_TOKEN=refresh)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        self.assertEqual(AccessToken(response.data["token"])["username"], "user1")
        self.assertIn("expire", response.data)

    def test_refresh_invalid_token(self):
        response = self.client.get(REFRESH_URL, HTTP_X_TOKEN="garbage")

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
        self.assertEqual(response.data["error"]["message"], "토큰 갱신에 실패했습니다.")

        response = self.client.get(REFRESH_URL)
        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)

    def test_logout(self):
        token = self.login().data["token"]
        self.client.credentials(HTTP_AUTHORIZATION=f"Bearer {token}")

        response = self.client.post(LOGOUT_URL)

        self.assertEqual(response.status_code, status.HTTP_200_OK)
        log = LoginLog.objects.filter(msg="로그아웃 성공").get()
        self.assertEqual(log.username, "user1")
        self.assertEqual(log.login_location, "")

    def test_logout_requires_login(self):
        response = self.client.post(LOGOUT_URL)

        self.assertEqual(response.status_code, status.HTTP_401_UNAUTHORIZED)
