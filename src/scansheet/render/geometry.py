#!/usr/bin/env python3
# Copyright (C) 2026 Alex Stoyanov
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation; either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with this program.
# If not, see <https://www.gnu.org/licenses/>.

from __future__ import annotations

import math
from dataclasses import dataclass

from ..core.errors import ConfigurationError

DEFAULT_COLUMNS = 4


@dataclass(frozen=True)
class CellBounds:
    x: float
    y: float
    width: float
    height: float

    @property
    def center_x(self) -> float:
        return self.x + self.width / 2

    def box(self) -> tuple[int, int, int, int]:
        """Integer pixel box (x0, y0, x1, y1) suitable for Image.crop."""
        return (
            int(self.x),
            int(self.y),
            int(self.x + self.width),
            int(self.y + self.height),
        )


@dataclass(frozen=True)
class PageGeometry:
    width_px: int
    height_px: int
    margin_px: float
    columns: int
    rows: int
    entry_count: int

    @property
    def left(self) -> float:
        return float(self.margin_px)

    @property
    def top(self) -> float:
        return float(self.margin_px)

    @property
    def right(self) -> float:
        return float(self.width_px) - self.margin_px

    @property
    def bottom(self) -> float:
        return float(self.height_px) - self.margin_px

    @property
    def cell_width(self) -> float:
        return (self.right - self.left) / self.columns

    @property
    def cell_height(self) -> float:
        return (self.bottom - self.top) / self.rows

    @property
    def capacity(self) -> int:
        return self.columns * self.rows

    def cell_bounds(self, index: int) -> CellBounds:
        if index < 0 or index >= self.entry_count:
            raise IndexError(f"cell index out of range: {index} (entries: {self.entry_count})")
        col = index % self.columns
        row = index // self.columns
        return CellBounds(
            x=self.left + col * self.cell_width,
            y=self.top + row * self.cell_height,
            width=self.cell_width,
            height=self.cell_height,
        )


def page_size_px(width_in: float, height_in: float, dpi: int) -> tuple[int, int]:
    if width_in <= 0 or height_in <= 0:
        raise ConfigurationError("page size must be positive")
    if dpi <= 0:
        raise ConfigurationError("page dpi must be positive")
    return int(width_in * dpi), int(height_in * dpi)


def compute_page_geometry(
    entry_count: int,
    page_width: int,
    page_height: int,
    margin: float,
    *,
    columns: int = DEFAULT_COLUMNS,
    max_rows: int | None = None,
) -> PageGeometry:
    if entry_count <= 0:
        raise ConfigurationError("catalogue is empty; nothing to lay out")
    if columns <= 0:
        raise ConfigurationError(f"grid columns must be positive, got {columns}")
    if margin < 0:
        raise ConfigurationError(f"page margin must not be negative, got {margin}")
    rows = math.ceil(entry_count / columns)
    if max_rows is not None and rows > max_rows:
        raise ConfigurationError(
            f"{entry_count} entries need {rows} rows of {columns}; "
            f"the page holds at most {max_rows} rows"
        )
    geometry = PageGeometry(
        width_px=int(page_width),
        height_px=int(page_height),
        margin_px=margin,
        columns=columns,
        rows=rows,
        entry_count=entry_count,
    )
    if geometry.cell_width <= 0 or geometry.cell_height <= 0:
        raise ConfigurationError(
            f"margin {margin}px leaves no room for cells on a "
            f"{geometry.width_px}x{geometry.height_px}px page"
        )
    return geometry
