"""Year and life calendars expressed as dot-grid scenes.

A scene is everything an output format needs to draw the calendar: the canvas,
colors, the computed layout, the classified cells and an optional caption. The
SVG and PNG renderers both consume scenes, so the geometry is computed once.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import date
from typing import Callable

from django.utils import timezone

from .dates import day_of_year, days_in_year, weeks_between
from .layout import Cell, GridLayout, compute_layout, layout_cells

MODE_YEAR = "year"
MODE_LIFE = "life"
MODES = (MODE_YEAR, MODE_LIFE)

YEAR_COLUMNS = 7
WEEKS_PER_YEAR = 52


@dataclass(frozen=True)
class RenderProfile:
    padding_fraction: float
    gap_ratio: float
    label_fraction: float
    empty_opacity: float
    stroke_ratio: float
    min_stroke: float
    caption_opacity: float
    caption_scale: float
    min_caption_size: float


WALLPAPER_YEAR = RenderProfile(
    padding_fraction=0.1,
    gap_ratio=0.5,
    label_fraction=0.05,
    empty_opacity=0.2,
    stroke_ratio=0.0,
    min_stroke=1.0,
    caption_opacity=0.5,
    caption_scale=2.0,
    min_caption_size=12.0,
)
WALLPAPER_LIFE = RenderProfile(
    padding_fraction=0.05,
    gap_ratio=0.5,
    label_fraction=0.05,
    empty_opacity=0.2,
    stroke_ratio=0.0,
    min_stroke=1.0,
    caption_opacity=0.5,
    caption_scale=2.0,
    min_caption_size=12.0,
)
PREVIEW_YEAR = RenderProfile(
    padding_fraction=0.02,
    gap_ratio=0.35,
    label_fraction=0.1,
    empty_opacity=0.35,
    stroke_ratio=0.12,
    min_stroke=0.3,
    caption_opacity=0.6,
    caption_scale=1.5,
    min_caption_size=8.0,
)
PREVIEW_LIFE = RenderProfile(
    padding_fraction=0.015,
    gap_ratio=0.3,
    label_fraction=0.1,
    empty_opacity=0.35,
    stroke_ratio=0.15,
    min_stroke=0.2,
    caption_opacity=0.6,
    caption_scale=2.0,
    min_caption_size=6.0,
)


def profile_for(mode: str, preview: bool = False) -> RenderProfile:
    if mode == MODE_LIFE:
        return PREVIEW_LIFE if preview else WALLPAPER_LIFE
    return PREVIEW_YEAR if preview else WALLPAPER_YEAR


@dataclass(frozen=True)
class Caption:
    text: str
    x: float
    y: float
    size: float
    opacity: float


@dataclass(frozen=True)
class CalendarScene:
    width: int
    height: int
    foreground: str
    background: str
    layout: GridLayout
    cells: tuple[Cell, ...]
    stroke_width: float
    empty_opacity: float
    caption: Caption | None = None

    @property
    def filled_count(self) -> int:
        return sum(1 for cell in self.cells if cell.filled)


def year_fill(year: int, today: date) -> Callable[[int], bool]:
    """Past years are complete, future years empty, the current year fills up to today."""

    if year < today.year:
        return lambda index: True
    if year > today.year:
        return lambda index: False
    elapsed = day_of_year(today)
    return lambda index: index + 1 <= elapsed


def life_fill(lived_cells: int) -> Callable[[int], bool]:
    return lambda index: index < lived_cells


def lived_weeks(birthday: date, today: date, total_cells: int) -> int:
    return min(max(0, weeks_between(birthday, today)), total_cells)


def lived_percentage(lived: int, total: int) -> int:
    if total <= 0:
        return 0
    return math.floor(lived / total * 100)


def _build_scene(
    width: int,
    height: int,
    cell_count: int,
    columns: int,
    is_filled: Callable[[int], bool],
    foreground: str,
    background: str,
    profile: RenderProfile,
    caption_text: str | None,
) -> CalendarScene:
    label_height = profile.label_fraction * min(width, height) if caption_text else 0
    layout = compute_layout(
        width,
        height,
        cell_count,
        columns,
        profile.padding_fraction,
        profile.gap_ratio,
        label_height=label_height,
    )
    caption = None
    if caption_text:
        size = min(
            label_height * 0.8,
            max(profile.min_caption_size, layout.dot_diameter * profile.caption_scale),
        )
        caption = Caption(
            text=caption_text,
            x=width / 2,
            y=layout.origin_y + layout.grid_height + label_height / 2,
            size=size,
            opacity=profile.caption_opacity,
        )
    return CalendarScene(
        width=width,
        height=height,
        foreground=foreground,
        background=background,
        layout=layout,
        cells=tuple(layout_cells(layout, is_filled)),
        stroke_width=max(profile.min_stroke, layout.dot_diameter * profile.stroke_ratio),
        empty_opacity=profile.empty_opacity,
        caption=caption,
    )


def year_scene(
    width: int,
    height: int,
    year: int,
    foreground: str = "#ffffff",
    background: str = "#000000",
    profile: RenderProfile = WALLPAPER_YEAR,
    today: date | None = None,
) -> CalendarScene:
    today = today or timezone.localdate()
    return _build_scene(
        width,
        height,
        days_in_year(year),
        YEAR_COLUMNS,
        year_fill(year, today),
        foreground,
        background,
        profile,
        str(year),
    )


def life_scene(
    width: int,
    height: int,
    birthday: date,
    life_expectancy: int,
    foreground: str = "#ffffff",
    background: str = "#000000",
    show_stats: bool = False,
    profile: RenderProfile = WALLPAPER_LIFE,
    today: date | None = None,
) -> CalendarScene:
    today = today or timezone.localdate()
    total = life_expectancy * WEEKS_PER_YEAR
    lived = lived_weeks(birthday, today, total)
    caption_text = f"{lived_percentage(lived, total)}% lived" if show_stats else None
    return _build_scene(
        width,
        height,
        total,
        WEEKS_PER_YEAR,
        life_fill(lived),
        foreground,
        background,
        profile,
        caption_text,
    )
