from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable

from .errors import InvalidInput

MIN_DOT_DIAMETER = 0.5


@dataclass(frozen=True)
class GridLayout:
    dot_diameter: float
    gap: float
    grid_width: float
    grid_height: float
    origin_x: float
    origin_y: float
    columns: int
    rows: int
    cell_count: int

    @property
    def pitch(self) -> float:
        """Distance between the centers of two neighbouring dots."""
        return self.dot_diameter + self.gap


@dataclass(frozen=True)
class Cell:
    index: int
    row: int
    column: int
    center_x: float
    center_y: float
    filled: bool


def cell_position(index: int, columns: int) -> tuple[int, int]:
    """Return the (row, column) a cell index occupies in a row-major grid."""
    return index // columns, index % columns


def available_area(
    canvas_width: float,
    canvas_height: float,
    padding_fraction: float,
    label_height: float = 0,
) -> tuple[float, float]:
    """Return the width and height left for dots once margins are removed."""

    padding = min(canvas_width, canvas_height) * padding_fraction
    return canvas_width - 2 * padding, canvas_height - 2 * padding - label_height


def _validate(canvas_width, canvas_height, columns, padding_fraction, gap_ratio) -> None:
    if canvas_width <= 0 or canvas_height <= 0:
        raise InvalidInput("Canvas width and height must be positive.")
    if columns <= 0:
        raise InvalidInput("The grid needs at least one column.")
    if gap_ratio < 0:
        raise InvalidInput("Gap ratio cannot be negative.")
    if not 0 <= padding_fraction < 0.5:
        raise InvalidInput("Padding must be a fraction between 0 and 0.5.")


def compute_layout(
    canvas_width: float,
    canvas_height: float,
    cell_count: int,
    columns: int,
    padding_fraction: float,
    gap_ratio: float,
    label_height: float = 0,
) -> GridLayout:
    """Fit ``cell_count`` equally sized dots into the canvas.

    The dot diameter is the largest one for which both the width and the height
    of the grid fit inside the padded canvas. ``label_height`` is reserved below
    the grid before centering, so grid and caption are centered as one block.
    """

    _validate(canvas_width, canvas_height, columns, padding_fraction, gap_ratio)
    available_width, available_height = available_area(
        canvas_width, canvas_height, padding_fraction, label_height
    )

    if cell_count <= 0:
        dot = max(MIN_DOT_DIAMETER, available_width / (columns + (columns - 1) * gap_ratio))
        return GridLayout(
            dot_diameter=dot,
            gap=dot * gap_ratio,
            grid_width=0.0,
            grid_height=0.0,
            origin_x=canvas_width / 2,
            origin_y=(canvas_height - label_height) / 2,
            columns=columns,
            rows=0,
            cell_count=0,
        )

    rows = math.ceil(cell_count / columns)
    dot_from_width = available_width / (columns + (columns - 1) * gap_ratio)
    dot_from_height = available_height / (rows + (rows - 1) * gap_ratio)
    dot = max(MIN_DOT_DIAMETER, min(dot_from_width, dot_from_height))
    gap = dot * gap_ratio
    grid_width = columns * dot + (columns - 1) * gap
    grid_height = rows * dot + (rows - 1) * gap

    return GridLayout(
        dot_diameter=dot,
        gap=gap,
        grid_width=grid_width,
        grid_height=grid_height,
        origin_x=(canvas_width - grid_width) / 2,
        origin_y=(canvas_height - grid_height - label_height) / 2,
        columns=columns,
        rows=rows,
        cell_count=cell_count,
    )


def layout_cells(layout: GridLayout, is_filled: Callable[[int], bool]) -> list[Cell]:
    """Place every cell of the layout and classify it with ``is_filled``."""

    radius = layout.dot_diameter / 2
    cells: list[Cell] = []
    for index in range(layout.cell_count):
        row, column = cell_position(index, layout.columns)
        cells.append(
            Cell(
                index=index,
                row=row,
                column=column,
                center_x=layout.origin_x + column * layout.pitch + radius,
                center_y=layout.origin_y + row * layout.pitch + radius,
                filled=bool(is_filled(index)),
            )
        )
    return cells
