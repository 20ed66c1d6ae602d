from __future__ import annotations

import logging
from datetime import datetime, time, timedelta

from django.http import HttpResponse, HttpResponseBadRequest
from django.shortcuts import render
from django.urls import reverse
from django.utils import timezone
from django.utils.cache import patch_cache_control
from django.views.decorators.http import require_GET

from .calendars import MODE_LIFE, MODE_YEAR
from .errors import InvalidInput, UpstreamUnavailable
from .fonts import caption_font
from .forms import (
    DEFAULT_BACKGROUND,
    DEFAULT_FOREGROUND,
    DEFAULT_HEIGHT,
    DEFAULT_LIFE_EXPECTANCY,
    DEFAULT_WIDTH,
    FORMAT_SVG,
    WallpaperForm,
    wallpaper_query,
)
from .raster import render_png
from .svg import render_svg

logger = logging.getLogger(__name__)

DEFAULT_BIRTHDAY = "2000-01-01"
DEVICE_PRESETS = (
    (1290, 2796, "iPhone 14/15/16 Pro Max"),
    (1179, 2556, "iPhone 14/15/16 Pro"),
    (1170, 2532, "iPhone 13/14"),
    (1125, 2436, "iPhone X/XS/11 Pro"),
)


def _seconds_until_midnight(now) -> int:
    """The image only changes when the local date does."""

    local_now = timezone.localtime(now)
    tomorrow = local_now.date() + timedelta(days=1)
    midnight = timezone.make_aware(
        datetime.combine(tomorrow, time.min), timezone.get_current_timezone()
    )
    return max(0, int((midnight - local_now).total_seconds()))


def _first_form_error(form, default_message: str) -> str:
    if not form.errors:
        return default_message
    for errors in form.errors.values():
        if errors:
            return errors[0]
    return default_message


def _default_config(today) -> dict:
    return {
        "mode": MODE_YEAR,
        "width": DEFAULT_WIDTH,
        "height": DEFAULT_HEIGHT,
        "fg": f"#{DEFAULT_FOREGROUND}",
        "bg": f"#{DEFAULT_BACKGROUND}",
        "year": today.year,
        "birthday": DEFAULT_BIRTHDAY,
        "lifeExpectancyYears": DEFAULT_LIFE_EXPECTANCY,
        "showStats": False,
    }


def index(request):
    today = timezone.localdate()
    config = _default_config(today)
    wallpaper_url = request.build_absolute_uri(reverse("dotcalendar:wallpaper"))
    links = {}
    for mode in (MODE_YEAR, MODE_LIFE):
        form = WallpaperForm({**config, "mode": mode}, today=today)
        if form.is_valid():
            links[mode] = f"{wallpaper_url}?{wallpaper_query(form.cleaned_data)}"
    context = {
        "config": config,
        "wallpaper_url": wallpaper_url,
        "year_link": links.get(MODE_YEAR, wallpaper_url),
        "life_link": links.get(MODE_LIFE, wallpaper_url),
        "today": today,
        "device_presets": DEVICE_PRESETS,
    }
    return render(request, "dotcalendar/index.html", context)


@require_GET
def wallpaper(request):
    logger.debug("Wallpaper request: %s", request.GET.dict())
    now = timezone.now()
    form = WallpaperForm(request.GET, today=timezone.localdate(now))
    if not form.is_valid():
        message = _first_form_error(form, "Invalid wallpaper parameters.")
        logger.info("Rejected wallpaper request: %s", message)
        return HttpResponseBadRequest(message, content_type="text/plain")

    try:
        scene = form.build_scene()
        if form.cleaned_data["format"] == FORMAT_SVG:
            response = HttpResponse(render_svg(scene), content_type="image/svg+xml")
        else:
            font = caption_font(scene.caption.size) if scene.caption else None
            response = HttpResponse(render_png(scene, font), content_type="image/png")
    except InvalidInput as exc:
        logger.info("Rejected wallpaper request: %s", exc)
        return HttpResponseBadRequest(str(exc), content_type="text/plain")
    except UpstreamUnavailable as exc:
        logger.error("Wallpaper rendering unavailable: %s", exc)
        return HttpResponse(str(exc), status=503, content_type="text/plain")

    patch_cache_control(response, public=True, max_age=_seconds_until_midnight(now))
    return response
