from rest_framework.views import exception_handler
from rest_framework.response import Response
from .exceptions import PandaException
from datetime import datetime, timezone
import logging

logger = logging.getLogger(__name__)

# HTTP 상태 코드 → 에러 코드
STATUS_ERROR_CODES = {
    401: 'ERR_001',
    403: 'ERR_002',
    404: 'ERR_201',
}


def _timestamp():
    return datetime.now(timezone.utc).strftime('%Y-%m-%dT%H:%M:%S.%fZ')


def custom_exception_handler(exc, context):
    """DRF 기본 핸들러 + Panda 커스텀 핸들러"""

    # Panda 커스텀 예외 처리
    if isinstance(exc, PandaException):
        logger.warning(f"Panda Exception: {exc.code} - {exc.message}", extra={
            'code': exc.code,
            'detail': exc.detail_info,
            'field': exc.field,
        })
        return Response(exc.get_full_details(), status=exc.status_code)

    # DRF 기본 예외 처리 (ValidationError, NotFound 등)
    response = exception_handler(exc, context)

    if response is not None:
        data = response.data
        message = '요청 처리 중 오류가 발생했습니다.'
        if isinstance(data, dict) and 'detail' in data:
            message = str(data['detail'])

        # DRF 예외를 표준 형식으로 변환
        error_detail = {
            'error': {
                'code': STATUS_ERROR_CODES.get(response.status_code, 'ERR_500'),
                'message': message,
                'timestamp': _timestamp()
            }
        }

        # ValidationError의 경우 field 정보 포함
        if isinstance(data, dict):
            for field, errors in data.items():
                if field != 'detail':
                    error_detail['error']['field'] = field
                    error_detail['error']['detail'] = str(errors[0]) if isinstance(errors, list) else str(errors)
                    error_detail['error']['code'] = 'ERR_101'
                    error_detail['error']['message'] = '입력값이 올바르지 않습니다.'
                    break
        elif isinstance(data, list) and data:
            error_detail['error']['detail'] = str(data[0])
            error_detail['error']['code'] = 'ERR_101'

        response.data = error_detail
        logger.warning(f"DRF Exception: {error_detail['error']['code']} - {error_detail['error']['message']}")
        return response

    # 예상치 못한 예외 (500 에러)
    logger.error(f"Unexpected Exception: {str(exc)}", exc_info=True, extra={
        'view': context.get('view'),
    })

    return Response({
        'error': {
            'code': 'ERR_500',
            'message': '서버 내부 오류가 발생했습니다. 관리자에게 문의해주세요.',
            'timestamp': _timestamp()
        }
    }, status=500)
