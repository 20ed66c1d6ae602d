import math
from datetime import date, datetime, timedelta, timezone as dt_timezone
from io import BytesIO
from unittest import mock

import requests
from django.test import SimpleTestCase, override_settings
from django.urls import reverse
from PIL import Image, ImageFont

from .calendars import (
    PREVIEW_LIFE,
    PREVIEW_YEAR,
    WALLPAPER_LIFE,
    WALLPAPER_YEAR,
    life_scene,
    lived_percentage,
    lived_weeks,
    year_fill,
    year_scene,
)
from .colors import hex_to_rgb, parse_hex_color
from .dates import day_of_year, days_in_year, is_leap_year, parse_birthday, weeks_between
from .errors import InvalidInput, UpstreamUnavailable
from .fonts import caption_font, clear_font_cache, get_font_data
from .forms import WallpaperForm, wallpaper_query
from .layout import MIN_DOT_DIAMETER, available_area, cell_position, compute_layout, layout_cells
from .raster import render_image, render_png
from .svg import render_svg
from .views import DEVICE_PRESETS, _seconds_until_midnight

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
FIXED_NOW = datetime(2025, 2, 14, 12, 0, tzinfo=dt_timezone.utc)
FIXED_TODAY = FIXED_NOW.date()


def _font_response(content=b"font-bytes"):
    response = mock.Mock()
    response.content = content
    response.raise_for_status.return_value = None
    return response


class GridLayoutTests(SimpleTestCase):
    CASES = [
        (1290, 2796, 366, 7, 0.1, 0.5),
        (2796, 1290, 4160, 52, 0.05, 0.5),
        (300, 300, 10, 3, 0.0, 0.0),
        (640, 480, 1, 1, 0.2, 1.0),
        (500, 800, 100, 13, 0.05, 0.25),
        (1000, 200, 365, 7, 0.1, 0.35),
    ]

    def test_grid_never_overflows_available_area(self):
        for width, height, count, columns, padding, gap_ratio in self.CASES:
            with self.subTest(width=width, height=height, count=count, columns=columns):
                layout = compute_layout(width, height, count, columns, padding, gap_ratio)
                available_width, available_height = available_area(width, height, padding)
                self.assertLessEqual(layout.grid_width, available_width + 1e-9)
                self.assertLessEqual(layout.grid_height, available_height + 1e-9)

    def test_grid_and_caption_fit_available_area(self):
        canvases = [(1290, 2796), (1179, 2556), (2796, 1290), (126, 220), (600, 600)]
        for profile in (WALLPAPER_YEAR, WALLPAPER_LIFE, PREVIEW_YEAR, PREVIEW_LIFE):
            for width, height in canvases:
                with self.subTest(profile=profile, width=width, height=height):
                    label_height = profile.label_fraction * min(width, height)
                    for count, columns in ((366, 7), (4160, 52)):
                        layout = compute_layout(
                            width,
                            height,
                            count,
                            columns,
                            profile.padding_fraction,
                            profile.gap_ratio,
                            label_height=label_height,
                        )
                        available_width, available_height = available_area(
                            width, height, profile.padding_fraction
                        )
                        self.assertLessEqual(layout.grid_width, available_width + 1e-9)
                        self.assertLessEqual(
                            layout.grid_height + label_height, available_height + 1e-9
                        )
                        self.assertGreaterEqual(layout.origin_y, 0)

    def test_rows_and_cell_positions(self):
        for width, height, count, columns, padding, gap_ratio in self.CASES:
            with self.subTest(count=count, columns=columns):
                layout = compute_layout(width, height, count, columns, padding, gap_ratio)
                self.assertEqual(layout.rows, math.ceil(count / columns))
                cells = layout_cells(layout, lambda index: False)
                self.assertEqual(len(cells), count)
                for cell in cells:
                    self.assertEqual(cell.row, cell.index // columns)
                    self.assertEqual(cell.column, cell.index % columns)
                    self.assertTrue(0 <= cell.column < columns)

    def test_grid_extents_follow_dot_and_gap(self):
        layout = compute_layout(1290, 2796, 365, 7, 0.1, 0.5)
        self.assertAlmostEqual(layout.gap, layout.dot_diameter * 0.5)
        self.assertAlmostEqual(
            layout.grid_width, 7 * layout.dot_diameter + 6 * layout.gap
        )
        self.assertAlmostEqual(
            layout.grid_height, 53 * layout.dot_diameter + 52 * layout.gap
        )
        self.assertAlmostEqual(layout.origin_x, (1290 - layout.grid_width) / 2)
        self.assertAlmostEqual(layout.origin_y, (2796 - layout.grid_height) / 2)

    def test_square_grid_fills_canvas_without_padding(self):
        layout = compute_layout(100, 100, 4, 2, 0, 0)
        self.assertAlmostEqual(layout.dot_diameter, 50)
        centers = [
            (cell.center_x, cell.center_y)
            for cell in layout_cells(layout, lambda index: True)
        ]
        self.assertEqual(centers, [(25, 25), (75, 25), (25, 75), (75, 75)])

    def test_height_constraint_binds_on_wide_canvas(self):
        layout = compute_layout(1000, 100, 4, 2, 0, 1)
        self.assertAlmostEqual(layout.dot_diameter, 100 / 3)
        self.assertAlmostEqual(layout.grid_width, 100)
        self.assertAlmostEqual(layout.grid_height, 100)
        self.assertAlmostEqual(layout.origin_x, 450)
        self.assertAlmostEqual(layout.origin_y, 0)

    def test_label_space_is_reserved_below_grid(self):
        layout = compute_layout(100, 120, 4, 2, 0, 0, label_height=20)
        self.assertAlmostEqual(layout.dot_diameter, 50)
        self.assertAlmostEqual(layout.origin_y, 0)

    def test_dot_size_is_clamped_to_floor(self):
        layout = compute_layout(10, 10, 10000, 1, 0, 0)
        self.assertEqual(layout.dot_diameter, MIN_DOT_DIAMETER)

    def test_empty_grid_is_a_no_op(self):
        layout = compute_layout(300, 600, 0, 7, 0.1, 0.5)
        self.assertEqual(layout.rows, 0)
        self.assertEqual(layout.grid_height, 0)
        self.assertEqual(layout_cells(layout, lambda index: True), [])

    def test_invalid_geometry_is_rejected(self):
        with self.assertRaises(InvalidInput):
            compute_layout(100, 100, 10, 0, 0.1, 0.5)
        with self.assertRaises(InvalidInput):
            compute_layout(0, 100, 10, 7, 0.1, 0.5)
        with self.assertRaises(InvalidInput):
            compute_layout(100, -5, 10, 7, 0.1, 0.5)
        with self.assertRaises(InvalidInput):
            compute_layout(100, 100, 10, 7, 0.1, -0.5)
        with self.assertRaises(InvalidInput):
            compute_layout(100, 100, 10, 7, 0.5, 0.5)

    def test_cell_position_wraps_rows(self):
        self.assertEqual(cell_position(0, 7), (0, 0))
        self.assertEqual(cell_position(6, 7), (0, 6))
        self.assertEqual(cell_position(7, 7), (1, 0))
        self.assertEqual(cell_position(364, 7), (52, 0))


class DateHelperTests(SimpleTestCase):
    def test_leap_years(self):
        self.assertTrue(is_leap_year(2000))
        self.assertFalse(is_leap_year(1900))
        self.assertTrue(is_leap_year(2024))
        self.assertFalse(is_leap_year(2023))

    def test_days_in_year(self):
        self.assertEqual(days_in_year(2024), 366)
        self.assertEqual(days_in_year(2023), 365)

    def test_day_of_year_is_one_based(self):
        self.assertEqual(day_of_year(date(2025, 1, 1)), 1)
        self.assertEqual(day_of_year(date(2025, 2, 14)), 45)
        self.assertEqual(day_of_year(date(2024, 12, 31)), 366)

    def test_weeks_between_floors(self):
        self.assertEqual(weeks_between(date(2025, 1, 1), date(2025, 1, 14)), 1)
        self.assertEqual(weeks_between(date(2025, 1, 1), date(2025, 1, 15)), 2)
        self.assertEqual(weeks_between(date(2025, 1, 15), date(2025, 1, 1)), -2)

    def test_parse_birthday(self):
        self.assertEqual(parse_birthday("1990-05-17"), date(1990, 5, 17))
        self.assertEqual(parse_birthday(" 1990-05-17T08:30:00 "), date(1990, 5, 17))

    def test_parse_birthday_rejects_invalid_dates(self):
        for value in ["", None, "not-a-date", "2023-02-30", "17/05/1990"]:
            with self.subTest(value=value):
                with self.assertRaises(InvalidInput):
                    parse_birthday(value)


class YearCalendarTests(SimpleTestCase):
    def test_current_year_fills_elapsed_days(self):
        scene = year_scene(1290, 2796, 2025, today=FIXED_TODAY)
        self.assertEqual(len(scene.cells), 365)
        self.assertEqual(scene.filled_count, 45)
        self.assertTrue(all(cell.filled for cell in scene.cells[:45]))
        self.assertFalse(any(cell.filled for cell in scene.cells[45:]))

    def test_past_year_is_complete(self):
        scene = year_scene(1290, 2796, 2000, today=FIXED_TODAY)
        self.assertEqual(len(scene.cells), 366)
        self.assertEqual(scene.filled_count, 366)

    def test_future_year_is_empty(self):
        scene = year_scene(1290, 2796, 2030, today=FIXED_TODAY)
        self.assertEqual(scene.filled_count, 0)

    def test_leap_year_cell_count(self):
        self.assertEqual(len(year_scene(600, 1200, 2024, today=FIXED_TODAY).cells), 366)
        self.assertEqual(len(year_scene(600, 1200, 2023, today=FIXED_TODAY).cells), 365)

    def test_year_fill_predicate(self):
        predicate = year_fill(2025, FIXED_TODAY)
        self.assertTrue(predicate(44))
        self.assertFalse(predicate(45))

    def test_year_caption_is_centered_below_grid(self):
        scene = year_scene(1290, 2796, 2025, today=FIXED_TODAY)
        self.assertEqual(scene.caption.text, "2025")
        self.assertAlmostEqual(scene.caption.x, 645)
        self.assertGreater(scene.caption.y, scene.layout.origin_y + scene.layout.grid_height)
        self.assertLess(scene.caption.y, 2796)


class LifeCalendarTests(SimpleTestCase):
    def test_one_year_lived(self):
        birthday = FIXED_TODAY - timedelta(weeks=52)
        scene = life_scene(1290, 2796, birthday, 80, show_stats=True, today=FIXED_TODAY)
        self.assertEqual(len(scene.cells), 4160)
        self.assertEqual(scene.filled_count, 52)
        self.assertTrue(all(cell.filled for cell in scene.cells[:52]))
        self.assertFalse(any(cell.filled for cell in scene.cells[52:]))
        self.assertEqual(scene.caption.text, "1% lived")

    def test_lived_weeks_clamp_to_total(self):
        self.assertEqual(lived_weeks(date(1900, 1, 1), FIXED_TODAY, 4160), 4160)
        scene = life_scene(1290, 2796, date(1900, 1, 1), 80, show_stats=True, today=FIXED_TODAY)
        self.assertEqual(scene.filled_count, 4160)
        self.assertEqual(scene.caption.text, "100% lived")

    def test_future_birthday_has_nothing_lived(self):
        self.assertEqual(lived_weeks(date(2030, 1, 1), FIXED_TODAY, 4160), 0)

    def test_caption_only_with_stats(self):
        scene = life_scene(1290, 2796, date(2000, 1, 1), 80, today=FIXED_TODAY)
        self.assertIsNone(scene.caption)

    def test_grid_has_one_row_per_year(self):
        scene = life_scene(1290, 2796, date(2000, 1, 1), 90, today=FIXED_TODAY)
        self.assertEqual(scene.layout.columns, 52)
        self.assertEqual(scene.layout.rows, 90)

    def test_lived_percentage_floors(self):
        self.assertEqual(lived_percentage(52, 4160), 1)
        self.assertEqual(lived_percentage(4159, 4160), 99)
        self.assertEqual(lived_percentage(0, 0), 0)

    def test_preview_profile_uses_thicker_relative_outline(self):
        wallpaper = life_scene(1290, 2796, date(2000, 1, 1), 80, profile=WALLPAPER_LIFE, today=FIXED_TODAY)
        preview = life_scene(1290, 2796, date(2000, 1, 1), 80, profile=PREVIEW_LIFE, today=FIXED_TODAY)
        self.assertEqual(wallpaper.stroke_width, 1.0)
        self.assertAlmostEqual(preview.stroke_width, preview.layout.dot_diameter * 0.15)
        self.assertGreater(preview.empty_opacity, wallpaper.empty_opacity)


class ColorTests(SimpleTestCase):
    def test_parse_hex_color(self):
        self.assertEqual(parse_hex_color("FFFFFF", "000000"), "#ffffff")
        self.assertEqual(parse_hex_color("#1a2B3c", "000000"), "#1a2b3c")
        self.assertEqual(parse_hex_color("abc", "000000"), "#aabbcc")
        self.assertEqual(parse_hex_color("", "000000"), "#000000")
        self.assertEqual(parse_hex_color(None, "#FF0000"), "#ff0000")

    def test_malformed_colors_are_rejected(self):
        for value in ["zzzzzz", "12345", "#12", "red", "##fff", "###ffffff"]:
            with self.subTest(value=value):
                with self.assertRaises(InvalidInput):
                    parse_hex_color(value, "000000")

    def test_hex_to_rgb(self):
        self.assertEqual(hex_to_rgb("#ff8000"), (255, 128, 0))


class SvgRenderTests(SimpleTestCase):
    def test_one_circle_per_cell(self):
        scene = year_scene(700, 1400, 2025, today=FIXED_TODAY)
        svg = render_svg(scene)
        self.assertTrue(svg.startswith("<svg"))
        self.assertEqual(svg.count("<circle"), 365)
        self.assertEqual(svg.count('fill="none"'), 320)
        self.assertEqual(svg.count('fill="#ffffff"/>'), 45)
        self.assertIn(">2025</text>", svg)

    def test_colors_and_size_are_written(self):
        scene = life_scene(
            300, 600, date(2000, 1, 1), 80,
            foreground="#ff0000", background="#00ff00", today=FIXED_TODAY,
        )
        svg = render_svg(scene)
        self.assertIn('width="300" height="600"', svg)
        self.assertIn('fill="#00ff00"', svg)
        self.assertIn('stroke="#ff0000"', svg)
        self.assertNotIn("<text", svg)


class RasterRenderTests(SimpleTestCase):
    def test_filled_and_empty_dots(self):
        font = ImageFont.load_default()
        filled = render_image(year_scene(700, 1400, 2000, today=FIXED_TODAY), font)
        empty_scene = year_scene(700, 1400, 2030, today=FIXED_TODAY)
        empty = render_image(empty_scene, font)
        cell = empty_scene.cells[10]
        center = (round(cell.center_x), round(cell.center_y))

        self.assertEqual(filled.size, (700, 1400))
        self.assertEqual(filled.getpixel(center), (255, 255, 255))
        self.assertEqual(empty.getpixel(center), (0, 0, 0))
        self.assertEqual(filled.getpixel((0, 0)), (0, 0, 0))

    def test_png_bytes(self):
        scene = life_scene(300, 600, date(2000, 1, 1), 80, today=FIXED_TODAY)
        data = render_png(scene)
        self.assertTrue(data.startswith(PNG_SIGNATURE))
        self.assertEqual(Image.open(BytesIO(data)).size, (300, 600))

    def test_caption_requires_font(self):
        scene = year_scene(300, 600, 2025, today=FIXED_TODAY)
        with self.assertRaises(ValueError):
            render_png(scene)


@override_settings(DOTCALENDAR_FONT_URL="https://fonts.example.com/inter.ttf", DOTCALENDAR_FONT_TIMEOUT=3)
class FontLoaderTests(SimpleTestCase):
    def setUp(self):
        super().setUp()
        clear_font_cache()
        self.addCleanup(clear_font_cache)

    def test_font_is_fetched_once(self):
        with mock.patch("dotcalendar.fonts.requests.get", return_value=_font_response()) as get:
            self.assertEqual(get_font_data(), b"font-bytes")
            self.assertEqual(get_font_data(), b"font-bytes")
        get.assert_called_once_with("https://fonts.example.com/inter.ttf", timeout=3)

    def test_failed_fetch_is_retried_on_next_call(self):
        with mock.patch(
            "dotcalendar.fonts.requests.get",
            side_effect=[requests.ConnectionError("offline"), _font_response()],
        ) as get:
            with self.assertRaises(UpstreamUnavailable):
                get_font_data()
            self.assertEqual(get_font_data(), b"font-bytes")
        self.assertEqual(get.call_count, 2)

    def test_http_error_is_upstream_unavailable(self):
        response = _font_response()
        response.raise_for_status.side_effect = requests.HTTPError("404")
        with mock.patch("dotcalendar.fonts.requests.get", return_value=response):
            with self.assertRaises(UpstreamUnavailable):
                get_font_data()

    def test_unreadable_font_is_dropped(self):
        with mock.patch(
            "dotcalendar.fonts.requests.get", return_value=_font_response(b"not a font")
        ) as get:
            with self.assertRaises(UpstreamUnavailable):
                caption_font(24)
            with self.assertRaises(UpstreamUnavailable):
                caption_font(24)
        self.assertEqual(get.call_count, 2)


class WallpaperFormTests(SimpleTestCase):
    def _form(self, data):
        form = WallpaperForm(data, today=FIXED_TODAY)
        return form, form.is_valid()

    def test_defaults(self):
        form, valid = self._form({})
        self.assertTrue(valid)
        cleaned = form.cleaned_data
        self.assertEqual(cleaned["mode"], "year")
        self.assertEqual((cleaned["width"], cleaned["height"]), (1290, 2796))
        self.assertEqual((cleaned["fg"], cleaned["bg"]), ("#ffffff", "#000000"))
        self.assertEqual(cleaned["year"], 2025)
        self.assertEqual(cleaned["format"], "png")
        self.assertFalse(cleaned["preview"])

    def test_non_numeric_values_fall_back(self):
        form, valid = self._form(
            {"width": "wide", "height": "", "year": "soon", "lifeExpectancyYears": "many"}
        )
        self.assertTrue(valid)
        self.assertEqual(form.cleaned_data["width"], 1290)
        self.assertEqual(form.cleaned_data["height"], 2796)
        self.assertEqual(form.cleaned_data["year"], 2025)
        self.assertEqual(form.cleaned_data["lifeExpectancyYears"], 80)

    def test_out_of_range_values_are_clamped(self):
        form, valid = self._form({"width": "100000", "year": "0", "lifeExpectancyYears": "500"})
        self.assertTrue(valid)
        self.assertEqual(form.cleaned_data["width"], 4096)
        self.assertEqual(form.cleaned_data["year"], 1)
        self.assertEqual(form.cleaned_data["lifeExpectancyYears"], 150)

    def test_non_positive_dimensions_are_rejected(self):
        form, valid = self._form({"width": "0"})
        self.assertFalse(valid)
        self.assertIn("width", form.errors)
        form, valid = self._form({"height": "-10"})
        self.assertFalse(valid)
        self.assertIn("height", form.errors)

    def test_malformed_color_is_rejected(self):
        form, valid = self._form({"fg": "nothex"})
        self.assertFalse(valid)
        self.assertIn("fg", form.errors)

    def test_unknown_mode_and_format_fall_back(self):
        form, valid = self._form({"mode": "decade", "format": "gif"})
        self.assertTrue(valid)
        self.assertEqual(form.cleaned_data["mode"], "year")
        self.assertEqual(form.cleaned_data["format"], "png")

    def test_life_mode_requires_valid_birthday(self):
        form, valid = self._form({"mode": "life"})
        self.assertFalse(valid)
        self.assertEqual(form.errors["birthday"], ["Invalid birthday"])
        form, valid = self._form({"mode": "life", "birthday": "1990-13-01"})
        self.assertFalse(valid)

    def test_build_life_scene(self):
        form, valid = self._form(
            {"mode": "life", "birthday": "2024-02-16", "showStats": "1", "preview": "true"}
        )
        self.assertTrue(valid)
        scene = form.build_scene()
        self.assertEqual(scene.filled_count, 52)
        self.assertEqual(scene.caption.text, "1% lived")
        self.assertEqual(scene.empty_opacity, PREVIEW_LIFE.empty_opacity)

    def test_wallpaper_query(self):
        form, valid = self._form(
            {"mode": "life", "birthday": "1990-05-17", "fg": "#abc", "showStats": "yes"}
        )
        self.assertTrue(valid)
        self.assertEqual(
            wallpaper_query(form.cleaned_data),
            "mode=life&width=1290&height=2796&fg=AABBCC&bg=000000"
            "&birthday=1990-05-17&lifeExpectancyYears=80&showStats=1",
        )


@override_settings(TIME_ZONE="UTC")
class WallpaperViewTests(SimpleTestCase):
    def setUp(self):
        super().setUp()
        clear_font_cache()
        self.addCleanup(clear_font_cache)
        patcher = mock.patch("dotcalendar.views.timezone.now", return_value=FIXED_NOW)
        patcher.start()
        self.addCleanup(patcher.stop)
        self.url = reverse("dotcalendar:wallpaper")

    def test_year_svg(self):
        response = self.client.get(self.url, {"year": "2025", "format": "svg"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response["Content-Type"], "image/svg+xml")
        body = response.content.decode()
        self.assertEqual(body.count("<circle"), 365)
        self.assertEqual(body.count('fill="none"'), 320)

    def test_cache_lasts_until_midnight(self):
        response = self.client.get(self.url, {"format": "svg"})
        self.assertIn("public", response["Cache-Control"])
        self.assertIn("max-age=43200", response["Cache-Control"])

    def test_life_png_without_caption_needs_no_font(self):
        with mock.patch("dotcalendar.fonts.requests.get") as get:
            response = self.client.get(
                self.url,
                {"mode": "life", "birthday": "1990-05-17", "width": "300", "height": "600"},
            )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response["Content-Type"], "image/png")
        self.assertTrue(response.content.startswith(PNG_SIGNATURE))
        get.assert_not_called()

    def test_year_png_with_caption(self):
        with mock.patch(
            "dotcalendar.views.caption_font", return_value=ImageFont.load_default()
        ) as font:
            response = self.client.get(self.url, {"width": "300", "height": "600"})
        self.assertEqual(response.status_code, 200)
        self.assertEqual(Image.open(BytesIO(response.content)).size, (300, 600))
        font.assert_called_once()

    def test_life_stats_caption(self):
        response = self.client.get(
            self.url,
            {"mode": "life", "birthday": "2024-02-16", "showStats": "1", "format": "svg"},
        )
        self.assertEqual(response.status_code, 200)
        self.assertIn("1% lived", response.content.decode())

    def test_invalid_birthday_is_bad_request(self):
        response = self.client.get(self.url, {"mode": "life", "birthday": "nope"})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.content, b"Invalid birthday")

    def test_invalid_dimensions_are_bad_request(self):
        response = self.client.get(self.url, {"width": "-1"})
        self.assertEqual(response.status_code, 400)

    def test_font_failure_is_service_unavailable(self):
        with mock.patch(
            "dotcalendar.fonts.requests.get", side_effect=requests.ConnectionError("offline")
        ):
            response = self.client.get(self.url, {"width": "300", "height": "600"})
        self.assertEqual(response.status_code, 503)
        self.assertNotIn("Cache-Control", response)

    def test_only_get_is_allowed(self):
        response = self.client.post(self.url)
        self.assertEqual(response.status_code, 405)

    def test_index_renders_configurator(self):
        response = self.client.get(reverse("dotcalendar:index"))
        self.assertEqual(response.status_code, 200)
        self.assertContains(response, 'id="calendar-config"')
        self.assertContains(response, "mode=life")
        self.assertEqual(response.context["config"]["year"], 2025)

    def test_index_renders_device_presets(self):
        response = self.client.get(reverse("dotcalendar:index"))
        self.assertContains(response, '<select name="preset">')
        for width, height, label in DEVICE_PRESETS:
            self.assertContains(
                response, f'<option value="{width}x{height}">{label}</option>'
            )
        self.assertContains(response, "data-lock-time")


@override_settings(TIME_ZONE="UTC")
class CacheLifetimeTests(SimpleTestCase):
    def test_seconds_until_midnight(self):
        self.assertEqual(
            _seconds_until_midnight(datetime(2025, 2, 14, 23, 0, tzinfo=dt_timezone.utc)),
            3600,
        )

    def test_lifetime_never_crosses_midnight(self):
        self.assertEqual(
            _seconds_until_midnight(datetime(2025, 2, 14, 23, 59, 30, tzinfo=dt_timezone.utc)),
            30,
        )
