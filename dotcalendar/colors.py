from __future__ import annotations

import re

from .errors import InvalidInput

_HEX_PATTERN = re.compile(r"^(?:[0-9a-fA-F]{3}|[0-9a-fA-F]{6})$")


def parse_hex_color(value: str | None, default: str) -> str:
    """Normalize ``RGB``/``RRGGBB`` (optionally prefixed with ``#``) to ``#rrggbb``."""

    trimmed = (value or "").strip().removeprefix("#")
    if not trimmed:
        trimmed = default.removeprefix("#")
    if not _HEX_PATTERN.match(trimmed):
        raise InvalidInput(f"Invalid color: {value}")
    if len(trimmed) == 3:
        trimmed = "".join(char * 2 for char in trimmed)
    return f"#{trimmed.lower()}"


def hex_to_rgb(color: str) -> tuple[int, int, int]:
    digits = color.lstrip("#")
    return int(digits[0:2], 16), int(digits[2:4], 16), int(digits[4:6], 16)
