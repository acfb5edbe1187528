import time
import logging

from django.utils.deprecation import MiddlewareMixin

from apps.common.utils import get_client_ip

logger = logging.getLogger('access')

# 로그에서 값을 가릴 요청 파라미터
SENSITIVE_PARAMS = ('password', 'oldPassword', 'newPassword', 'captcha', 'token', 'secret')


def mask_query(request):
    """쿼리 문자열의 민감 정보 마스킹"""
    params = request.GET.copy()
    for key in SENSITIVE_PARAMS:
        if key in params:
            params[key] = '***'
    return params.urlencode(safe='*')


class AccessLogMiddleware(MiddlewareMixin):
    """모든 요청과 응답을 로깅하는 미들웨어"""

    def process_request(self, request):
        request.start_time = time.time()

    def process_response(self, request, response):
        # 실행 시간 계산
        duration = time.time() - getattr(request, 'start_time', time.time())

        path = request.path
        query = mask_query(request)
        if query:
            path = f"{path}?{query}"

        user = getattr(request, 'user', None)
        username = str(user) if user is not None and user.is_authenticated else 'Anonymous'

        message = f"{get_client_ip(request)} {username} {request.method} {path} {response.status_code} ({duration:.3f}s)"

        if response.status_code >= 400:
            logger.warning(message)
        else:
            logger.info(message)

        return response
