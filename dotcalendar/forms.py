from __future__ import annotations

from datetime import date
from urllib.parse import urlencode

from django import forms
from django.conf import settings
from django.utils import timezone

from .calendars import MODE_LIFE, MODE_YEAR, CalendarScene, life_scene, profile_for, year_scene
from .colors import parse_hex_color
from .dates import parse_birthday
from .errors import InvalidInput

DEFAULT_WIDTH = 1290
DEFAULT_HEIGHT = 2796
DEFAULT_FOREGROUND = "FFFFFF"
DEFAULT_BACKGROUND = "000000"
DEFAULT_LIFE_EXPECTANCY = 80
DEFAULT_MAX_DIMENSION = 4096
MIN_YEAR, MAX_YEAR = 1, 9999
MIN_LIFE_EXPECTANCY, MAX_LIFE_EXPECTANCY = 1, 150

FORMAT_PNG = "png"
FORMAT_SVG = "svg"

TRUTHY = {"1", "true", "yes", "on"}


def _parse_int(value, default: int) -> int:
    try:
        return int(str(value).strip())
    except (TypeError, ValueError):
        return default


def _clamp(value: int, lower: int, upper: int) -> int:
    return max(lower, min(upper, value))


def _is_truthy(value) -> bool:
    return str(value or "").strip().lower() in TRUTHY


class WallpaperForm(forms.Form):
    """Parses the loosely typed query parameters of a wallpaper request.

    Missing or non-numeric values fall back to defaults and out-of-range values
    are clamped. Only values that cannot describe a calendar at all (a
    non-positive canvas, a malformed color, a bad birthday in life mode) are
    reported as errors.
    """

    mode = forms.CharField(required=False)
    width = forms.CharField(required=False)
    height = forms.CharField(required=False)
    fg = forms.CharField(required=False, strip=True)
    bg = forms.CharField(required=False, strip=True)
    year = forms.CharField(required=False)
    birthday = forms.CharField(required=False)
    lifeExpectancyYears = forms.CharField(required=False)
    showStats = forms.CharField(required=False)
    format = forms.CharField(required=False)
    preview = forms.CharField(required=False)

    def __init__(self, *args, today: date | None = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.today = today or timezone.localdate()

    def _clean_dimension(self, name: str, default: int) -> int:
        value = _parse_int(self.cleaned_data.get(name) or default, default)
        if value <= 0:
            raise forms.ValidationError(f"{name.capitalize()} must be a positive number.")
        limit = getattr(settings, "DOTCALENDAR_MAX_DIMENSION", DEFAULT_MAX_DIMENSION)
        return min(value, limit)

    def _clean_color(self, name: str, default: str) -> str:
        try:
            return parse_hex_color(self.cleaned_data.get(name), default)
        except InvalidInput as exc:
            raise forms.ValidationError(str(exc)) from exc

    def clean_mode(self):
        return MODE_LIFE if self.cleaned_data.get("mode") == MODE_LIFE else MODE_YEAR

    def clean_width(self):
        return self._clean_dimension("width", DEFAULT_WIDTH)

    def clean_height(self):
        return self._clean_dimension("height", DEFAULT_HEIGHT)

    def clean_fg(self):
        return self._clean_color("fg", DEFAULT_FOREGROUND)

    def clean_bg(self):
        return self._clean_color("bg", DEFAULT_BACKGROUND)

    def clean_year(self):
        year = _parse_int(self.cleaned_data.get("year"), self.today.year)
        return _clamp(year, MIN_YEAR, MAX_YEAR)

    def clean_lifeExpectancyYears(self):
        years = _parse_int(self.cleaned_data.get("lifeExpectancyYears"), DEFAULT_LIFE_EXPECTANCY)
        return _clamp(years, MIN_LIFE_EXPECTANCY, MAX_LIFE_EXPECTANCY)

    def clean_showStats(self):
        return _is_truthy(self.cleaned_data.get("showStats"))

    def clean_format(self):
        requested = (self.cleaned_data.get("format") or "").strip().lower()
        return FORMAT_SVG if requested == FORMAT_SVG else FORMAT_PNG

    def clean_preview(self):
        return _is_truthy(self.cleaned_data.get("preview"))

    def clean(self):
        cleaned = super().clean()
        if cleaned.get("mode") == MODE_LIFE:
            try:
                cleaned["birthday"] = parse_birthday(cleaned.get("birthday"))
            except InvalidInput as exc:
                self.add_error("birthday", str(exc))
        else:
            cleaned["birthday"] = None
        return cleaned

    def build_scene(self) -> CalendarScene:
        """Build the scene for a valid form. Raises ``InvalidInput`` on bad geometry."""

        data = self.cleaned_data
        profile = profile_for(data["mode"], preview=data["preview"])
        if data["mode"] == MODE_LIFE:
            return life_scene(
                data["width"],
                data["height"],
                data["birthday"],
                data["lifeExpectancyYears"],
                foreground=data["fg"],
                background=data["bg"],
                show_stats=data["showStats"],
                profile=profile,
                today=self.today,
            )
        return year_scene(
            data["width"],
            data["height"],
            data["year"],
            foreground=data["fg"],
            background=data["bg"],
            profile=profile,
            today=self.today,
        )


def wallpaper_query(cleaned: dict) -> str:
    """Canonical query string for a shareable wallpaper link."""

    params = {
        "mode": cleaned["mode"],
        "width": cleaned["width"],
        "height": cleaned["height"],
        "fg": cleaned["fg"].lstrip("#").upper(),
        "bg": cleaned["bg"].lstrip("#").upper(),
    }
    if cleaned["mode"] == MODE_LIFE:
        params["birthday"] = cleaned["birthday"].isoformat()
        params["lifeExpectancyYears"] = cleaned["lifeExpectancyYears"]
        params["showStats"] = "1" if cleaned["showStats"] else "0"
    else:
        params["year"] = cleaned["year"]
    return urlencode(params)
