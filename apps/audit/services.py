import logging

from django.utils import timezone
from user_agents import parse

from apps.common.utils import get_client_ip, get_ip_location
from .models import LoginLog

logger = logging.getLogger(__name__)

LOGIN_SUCCESS_MSG = "로그인 성공"
LOGOUT_SUCCESS_MSG = "로그아웃 성공"


def parse_user_agent(user_agent):
    """User-Agent → (browser, os, platform)"""
    ua = parse(user_agent or "")
    browser = f"{ua.browser.family} {ua.browser.version_string}".strip()
    os_name = f"{ua.os.family} {ua.os.version_string}".strip()
    return browser, os_name, ua.device.family


# Login Log 기록 유틸
def create_login_log(request, username, msg, status="0", create_by="", with_location=True):
    user_agent = request.META.get("HTTP_USER_AGENT", "")
    ip = get_client_ip(request)
    browser, os_name, platform = parse_user_agent(user_agent)

    log = LoginLog.objects.create(
        username=username or "",
        ipaddr=ip,
        login_location=get_ip_location(ip) if with_location else "",
        browser=browser,
        os=os_name,
        platform=platform,
        login_time=timezone.now(),
        status=status,
        remark=user_agent,
        msg=msg,
        create_by=create_by,
    )
    logger.info(f"LoginLog: {log.username} {msg} ({ip})")
    return log
