# apps/common/utils.py
import ipaddress
import logging

import requests
from django.conf import settings

logger = logging.getLogger(__name__)

UNKNOWN_LOCATION = "알 수 없음"
INTERNAL_LOCATION = "내부 IP"


def get_client_ip(request):
    """
    클라이언트 실제 IP 주소 추출
    (프록시 / 로드밸런서 고려)
    """
    x_forwarded_for = request.META.get("HTTP_X_FORWARDED_FOR")
    if x_forwarded_for:
        # 첫 번째 IP가 실제 클라이언트 IP
        return x_forwarded_for.split(",")[0].strip()

    return request.META.get("REMOTE_ADDR")


def get_ip_location(ip):
    """
    IP 주소 → 지역명
    IP_LOCATION_API_URL 미설정 시 조회하지 않음
    """
    if not ip:
        return UNKNOWN_LOCATION

    try:
        addr = ipaddress.ip_address(ip)
    except ValueError:
        return UNKNOWN_LOCATION

    if addr.is_private or addr.is_loopback:
        return INTERNAL_LOCATION

    api_url = getattr(settings, "IP_LOCATION_API_URL", "")
    if not api_url:
        return UNKNOWN_LOCATION

    try:
        r = requests.get(api_url, params={"ip": ip}, timeout=3)
        r.raise_for_status()
        return r.json().get("addr") or UNKNOWN_LOCATION
    except (requests.RequestException, ValueError) as e:
        logger.warning(f"IP 위치 조회 실패: {ip} - {e}")
        return UNKNOWN_LOCATION


# BigAutoField 범위
MAX_ID = 2 ** 63 - 1


def parse_ids(ids_str):
    """
    "1,2,3" → [1, 2, 3]
    빈 항목은 건너뛰고, 숫자가 아니거나 ID 범위를 벗어난 항목은 ValueError
    """
    if not ids_str:
        return []

    ids = [int(part) for part in str(ids_str).split(",") if part.strip()]
    for value in ids:
        if not 0 < value <= MAX_ID:
            raise ValueError(f"ID 범위 초과: {value}")
    return ids
