from __future__ import annotations

import logging
from functools import lru_cache
from io import BytesIO

import requests
from django.conf import settings
from PIL import ImageFont

from .errors import UpstreamUnavailable

logger = logging.getLogger(__name__)

DEFAULT_FONT_URL = (
    "https://cdn.jsdelivr.net/fontsource/fonts/inter@latest/latin-400-normal.ttf"
)
DEFAULT_FONT_TIMEOUT = 10


def _font_url() -> str:
    return getattr(settings, "DOTCALENDAR_FONT_URL", None) or DEFAULT_FONT_URL


def _font_timeout() -> float:
    return getattr(settings, "DOTCALENDAR_FONT_TIMEOUT", DEFAULT_FONT_TIMEOUT)


@lru_cache(maxsize=1)
def get_font_data() -> bytes:
    """Fetch the caption font once per process.

    ``lru_cache`` does not store raised exceptions, so a failed fetch is retried
    by the next caller.
    """

    url = _font_url()
    logger.info("Fetching caption font from %s", url)
    try:
        response = requests.get(url, timeout=_font_timeout())
        response.raise_for_status()
    except requests.RequestException as exc:
        logger.warning("Caption font fetch failed: %s", exc)
        raise UpstreamUnavailable("Font load failed") from exc
    if not response.content:
        logger.warning("Caption font fetch returned an empty body")
        raise UpstreamUnavailable("Font load failed")
    logger.info("Caption font loaded (%d bytes)", len(response.content))
    return response.content


def clear_font_cache() -> None:
    get_font_data.cache_clear()


def caption_font(size: float) -> ImageFont.FreeTypeFont:
    try:
        return ImageFont.truetype(BytesIO(get_font_data()), size=max(1, round(size)))
    except OSError as exc:
        # Unreadable bytes are dropped so the next request refetches them.
        clear_font_cache()
        raise UpstreamUnavailable("Font load failed") from exc
