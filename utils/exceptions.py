from rest_framework.exceptions import APIException
from rest_framework import status
from datetime import datetime, timezone


class PandaException(APIException):
    """Panda Admin 기본 예외 클래스"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_code = 'ERR_500'
    default_detail = '서버 내부 오류가 발생했습니다.'

    def __init__(self, message=None, code=None, detail=None, field=None, status_code=None):
        super().__init__(detail=message or self.default_detail)
        self.code = code or self.default_code
        self.message = message or self.default_detail
        self.detail_info = detail
        self.field = field
        if status_code:
            self.status_code = status_code

    def get_full_details(self):
        error_detail = {
            'code': self.code,
            'message': self.message,
            'timestamp': datetime.now(timezone.utc).strftime('%Y-%m-%dT%H:%M:%S.%fZ')
        }
        if self.detail_info is not None:
            error_detail['detail'] = self.detail_info
        if self.field:
            error_detail['field'] = self.field
        return {'error': error_detail}


class AuthenticationFailedException(PandaException):
    """인증 실패 예외"""
    status_code = status.HTTP_401_UNAUTHORIZED
    default_code = 'ERR_001'
    default_detail = '인증에 실패했습니다. 다시 로그인해주세요.'


class PermissionDeniedException(PandaException):
    """권한 거부 예외"""
    status_code = status.HTTP_403_FORBIDDEN
    default_code = 'ERR_002'
    default_detail = '해당 작업을 수행할 권한이 없습니다.'


class AccountLockedException(PandaException):
    """계정 잠금 예외"""
    status_code = status.HTTP_423_LOCKED
    default_code = 'ERR_003'
    default_detail = '로그인 실패 횟수 초과로 계정이 잠겼습니다. 관리자에게 문의하세요.'


class ValidationException(PandaException):
    """유효성 검증 실패 예외"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_code = 'ERR_101'
    default_detail = '입력값이 올바르지 않습니다.'


class CaptchaException(PandaException):
    """캡차 검증 실패 예외"""
    status_code = status.HTTP_400_BAD_REQUEST
    default_code = 'ERR_102'
    default_detail = '캡차 인증에 실패했습니다.'


class ResourceNotFoundException(PandaException):
    """리소스 없음 예외"""
    status_code = status.HTTP_404_NOT_FOUND
    default_code = 'ERR_201'
    default_detail = '요청한 리소스를 찾을 수 없습니다.'

