# 로그인 캡차 (Django cache 저장 + Pillow 이미지)
import base64
import io
import random
import secrets
import string
import uuid

from django.conf import settings
from django.core.cache import cache
from PIL import Image, ImageDraw, ImageFont

CAPTCHA_CACHE_PREFIX = "captcha:"
IMAGE_SIZE = (120, 40)


def _cache_key(captcha_id):
    return f"{CAPTCHA_CACHE_PREFIX}{captcha_id}"


def render_captcha_image(text):
    """캡차 문자열 → base64 PNG data URI"""
    width, height = IMAGE_SIZE
    image = Image.new("RGB", IMAGE_SIZE, (255, 255, 255))
    draw = ImageDraw.Draw(image)
    font = ImageFont.load_default()

    # 방해선
    for _ in range(5):
        start = (random.randint(0, width), random.randint(0, height))
        end = (random.randint(0, width), random.randint(0, height))
        draw.line([start, end], fill=(random.randint(120, 200),) * 3, width=1)

    step = width // (len(text) + 1)
    for i, ch in enumerate(text):
        x = step * (i + 1) - 4 + random.randint(-3, 3)
        y = height // 2 - 6 + random.randint(-6, 6)
        draw.text((x, y), ch, fill=(random.randint(0, 100), random.randint(0, 100), random.randint(0, 100)), font=font)

    # 노이즈 점
    for _ in range(60):
        draw.point((random.randint(0, width - 1), random.randint(0, height - 1)), fill=(0, 0, 0))

    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return "data:image/png;base64," + base64.b64encode(buf.getvalue()).decode("ascii")


def generate_captcha():
    """
    캡차 생성
    Returns: (captcha_id, base64 이미지)
    """
    captcha_id = uuid.uuid4().hex
    answer = "".join(secrets.choice(string.digits) for _ in range(settings.CAPTCHA_LENGTH))
    cache.set(_cache_key(captcha_id), answer, timeout=settings.CAPTCHA_TIMEOUT)
    return captcha_id, render_captcha_image(answer)


def verify_captcha(captcha_id, answer):
    """캡차 검증 (1회용: 검증 시 즉시 삭제)"""
    if not captcha_id or answer is None:
        return False

    key = _cache_key(captcha_id)
    stored = cache.get(key)
    if stored is None:
        return False

    # 동시 요청 중 실제로 삭제한 요청만 통과
    if not cache.delete(key):
        return False
    return stored.lower() == str(answer).strip().lower()
