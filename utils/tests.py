from django.http import HttpResponse
from django.test import SimpleTestCase, RequestFactory
from rest_framework.views import APIView

from utils.exception_handlers import custom_exception_handler
from utils.exceptions import ValidationException
from utils.middleware.access_log import AccessLogMiddleware


class AccessLogMiddlewareTest(SimpleTestCase):
    """요청 로그 미들웨어 테스트"""

    def setUp(self):
        self.factory = RequestFactory()

    def run_middleware(self, request, status_code=200):
        middleware = AccessLogMiddleware(lambda req: HttpResponse(status=status_code))
        return middleware(request)

    def test_masks_sensitive_params(self):
        request = self.factory.get(
            "/api/system/user/sysUserList/",
            {"username": "admin", "password": "secret1", "token": "abc.def", "captcha": "1234"},
        )

        with self.assertLogs("access", level="INFO") as logs:
            self.run_middleware(request)

        line = logs.output[0]
        self.assertIn("username=admin", line)
        self.assertIn("password=***", line)
        self.assertIn("token=***", line)
        self.assertIn("captcha=***", line)
        self.assertNotIn("secret1", line)
        self.assertNotIn("abc.def", line)
        self.assertNotIn("1234", line)

    def test_success_logs_info(self):
        with self.assertLogs("access", level="INFO") as logs:
            self.run_middleware(self.factory.get("/api/system/menu/routes/"))

        self.assertEqual(logs.records[0].levelname, "INFO")
        self.assertIn("GET /api/system/menu/routes/ 200", logs.output[0])
        self.assertIn("Anonymous", logs.output[0])

    def test_error_status_logs_warning(self):
        with self.assertLogs("access", level="INFO") as logs:
            self.run_middleware(self.factory.get("/api/system/user/sysUser/9/"), status_code=404)

        self.assertEqual(logs.records[0].levelname, "WARNING")
        self.assertIn(" 404 ", logs.output[0])


class BrokenView(APIView):
    def get(self, request):
        raise RuntimeError("boom")


class ExceptionHandlerTest(SimpleTestCase):
    """DRF 예외 핸들러 테스트"""

    def test_unexpected_exception(self):
        with self.assertLogs("utils.exception_handlers", level="ERROR"):
            response = custom_exception_handler(RuntimeError("boom"), {"view": BrokenView()})

        self.assertEqual(response.status_code, 500)
        self.assertEqual(response.data["error"]["code"], "ERR_500")
        self.assertIn("timestamp", response.data["error"])

    def test_panda_exception(self):
        exc = ValidationException("잘못된 값", field="userId")

        response = custom_exception_handler(exc, {"view": BrokenView()})

        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.data["error"]["code"], "ERR_101")
        self.assertEqual(response.data["error"]["field"], "userId")
