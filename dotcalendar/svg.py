from __future__ import annotations

from django.template.loader import render_to_string

from .calendars import CalendarScene

SVG_TEMPLATE = "dotcalendar/calendar.svg"


def _num(value: float) -> str:
    return f"{value:.2f}".rstrip("0").rstrip(".")


def scene_context(scene: CalendarScene) -> dict:
    radius = scene.layout.dot_diameter / 2
    # Empty dots are outlined inside their cell.
    outline_radius = max(radius - scene.stroke_width / 2, 0)
    dots = [
        {
            "cx": _num(cell.center_x),
            "cy": _num(cell.center_y),
            "r": _num(radius if cell.filled else outline_radius),
            "filled": cell.filled,
        }
        for cell in scene.cells
    ]
    caption = None
    if scene.caption:
        caption = {
            "text": scene.caption.text,
            "x": _num(scene.caption.x),
            "y": _num(scene.caption.y),
            "size": _num(scene.caption.size),
            "opacity": _num(scene.caption.opacity),
        }
    return {
        "width": scene.width,
        "height": scene.height,
        "foreground": scene.foreground,
        "background": scene.background,
        "stroke_width": _num(scene.stroke_width),
        "empty_opacity": _num(scene.empty_opacity),
        "dots": dots,
        "caption": caption,
    }


def render_svg(scene: CalendarScene) -> str:
    return render_to_string(SVG_TEMPLATE, scene_context(scene))
