from __future__ import annotations

from io import BytesIO

from PIL import Image, ImageDraw, ImageFont

from .calendars import CalendarScene
from .colors import hex_to_rgb


def _alpha(opacity: float) -> int:
    return max(0, min(255, round(opacity * 255)))


def render_image(scene: CalendarScene, font: ImageFont.ImageFont | None = None) -> Image.Image:
    """Draw the scene onto an RGB Pillow image."""

    if scene.caption and font is None:
        raise ValueError("A font is required to draw the caption.")

    foreground = hex_to_rgb(scene.foreground)
    base = Image.new("RGBA", (scene.width, scene.height), hex_to_rgb(scene.background) + (255,))
    overlay = Image.new("RGBA", base.size, (0, 0, 0, 0))
    draw = ImageDraw.Draw(overlay)

    radius = scene.layout.dot_diameter / 2
    outline = foreground + (_alpha(scene.empty_opacity),)
    outline_width = max(1, round(scene.stroke_width))
    for cell in scene.cells:
        box = (
            cell.center_x - radius,
            cell.center_y - radius,
            cell.center_x + radius,
            cell.center_y + radius,
        )
        if cell.filled:
            draw.ellipse(box, fill=foreground + (255,))
        else:
            draw.ellipse(box, outline=outline, width=outline_width)

    if scene.caption:
        left, top, right, bottom = draw.textbbox((0, 0), scene.caption.text, font=font)
        position = (
            scene.caption.x - (right - left) / 2 - left,
            scene.caption.y - (bottom - top) / 2 - top,
        )
        draw.text(
            position,
            scene.caption.text,
            font=font,
            fill=foreground + (_alpha(scene.caption.opacity),),
        )

    return Image.alpha_composite(base, overlay).convert("RGB")


def render_png(scene: CalendarScene, font: ImageFont.ImageFont | None = None) -> bytes:
    buffer = BytesIO()
    render_image(scene, font).save(buffer, format="PNG")
    return buffer.getvalue()
