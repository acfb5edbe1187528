from unittest import mock

import requests
from django.test import SimpleTestCase, TestCase, RequestFactory, override_settings

from apps.common.utils import get_client_ip, get_ip_location
from .models import LoginLog
from .services import create_login_log, parse_user_agent

CHROME_UA = (
    "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/120.0.0.0 Safari/537.36"
)


class UserAgentTest(SimpleTestCase):
    """User-Agent 파싱 테스트"""

    def test_chrome_on_windows(self):
        browser, os_name, platform = parse_user_agent(CHROME_UA)

        self.assertTrue(browser.startswith("Chrome 120"))
        self.assertEqual(os_name, "Windows 10")
        self.assertEqual(platform, "Other")

    def test_empty_user_agent(self):
        browser, os_name, platform = parse_user_agent("")

        self.assertEqual(browser, "Other")
        self.assertEqual(os_name, "Other")


class IpLocationTest(SimpleTestCase):
    """IP 위치 조회 테스트"""

    def test_internal_ip(self):
        self.assertEqual(get_ip_location("127.0.0.1"), "내부 IP")
        self.assertEqual(get_ip_location("192.168.0.10"), "내부 IP")

    def test_invalid_ip(self):
        self.assertEqual(get_ip_location(""), "알 수 없음")
        self.assertEqual(get_ip_location("not-an-ip"), "알 수 없음")

    @override_settings(IP_LOCATION_API_URL="")
    def test_lookup_disabled(self):
        with mock.patch("apps.common.utils.requests.get") as get:
            self.assertEqual(get_ip_location("8.8.8.8"), "알 수 없음")
        get.assert_not_called()

    @override_settings(IP_LOCATION_API_URL="http://ip.example.com/lookup")
    def test_lookup(self):
        with mock.patch("apps.common.utils.requests.get") as get:
            get.return_value.json.return_value = {"addr": "미국"}

            self.assertEqual(get_ip_location("8.8.8.8"), "미국")

        get.assert_called_once_with("http://ip.example.com/lookup", params={"ip": "8.8.8.8"}, timeout=3)

    @override_settings(IP_LOCATION_API_URL="http://ip.example.com/lookup")
    def test_lookup_failure(self):
        with mock.patch("apps.common.utils.requests.get", side_effect=requests.ConnectionError("down")):
            with self.assertLogs("apps.common.utils", level="WARNING"):
                self.assertEqual(get_ip_location("8.8.8.8"), "알 수 없음")

    def test_client_ip_from_forwarded_header(self):
        request = RequestFactory().get("/", HTTP_X_FORWARDED_FOR="203.0.113.5, 10.0.0.1")

        self.assertEqual(get_client_ip(request), "203.0.113.5")


class LoginLogTest(TestCase):
    """로그인 로그 기록 테스트"""

    def test_create_login_log(self):
        request = RequestFactory().post("/", HTTP_USER_AGENT=CHROME_UA)

        log = create_login_log(request, "user1", "로그인 실패", status="1")

        self.assertEqual(LoginLog.objects.count(), 1)
        self.assertEqual(log.username, "user1")
        self.assertEqual(log.ipaddr, "127.0.0.1")
        self.assertEqual(log.login_location, "내부 IP")
        self.assertEqual(log.status, "1")
        self.assertEqual(log.os, "Windows 10")
        self.assertEqual(log.remark, CHROME_UA)

    def test_without_location(self):
        request = RequestFactory().post("/")

        log = create_login_log(request, "user1", "로그아웃 성공", with_location=False)

        self.assertEqual(log.login_location, "")
        self.assertEqual(log.status, "0")
