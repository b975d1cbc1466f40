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

from dataclasses import dataclass

from PIL import Image, ImageDraw

from ..core.models import CatalogueEntry
from ..symbology.codec import EncodedSymbol
from .geometry import CellBounds
from .text import FontCache, font_line_height, wrap_lines_to_width

RGB = tuple[int, int, int]


@dataclass(frozen=True)
class CellStyle:
    top_padding: float = 6.0
    label_gap: float = 8.0
    line_gap: float = 12.0
    inner_margin: float = 6.0
    label_size: float = 11.0
    description_size: float = 8.0
    line_spacing: float = 1.3
    border_width: int = 1
    border_color: RGB = (230, 230, 230)
    text_color: RGB = (0, 0, 0)

    def text_width(self, bounds: CellBounds) -> float:
        return max(1.0, bounds.width - 2 * self.inner_margin)


def draw_cell_frame(draw: ImageDraw.ImageDraw, bounds: CellBounds, style: CellStyle) -> None:
    draw.rectangle(
        (bounds.x, bounds.y, bounds.x + bounds.width, bounds.y + bounds.height),
        outline=style.border_color,
        width=style.border_width,
    )


def compose_cell(
    image: Image.Image,
    bounds: CellBounds,
    symbol: EncodedSymbol,
    entry: CatalogueEntry,
    fonts: FontCache,
    style: CellStyle,
) -> None:
    """Draw frame, barcode, label and wrapped description into one cell.

    Label baseline sits label_gap below the barcode; the first description
    line starts line_gap below the label baseline.
    """
    draw = ImageDraw.Draw(image)
    draw_cell_frame(draw, bounds, style)

    symbol_x = int(bounds.center_x - symbol.width / 2)
    symbol_y = int(bounds.y + style.top_padding)
    image.paste(symbol.image.convert(image.mode), (symbol_x, symbol_y))

    label_y = symbol_y + symbol.height + style.label_gap
    label_font = fonts.face(style.label_size)
    draw.text(
        (bounds.center_x, label_y),
        entry.label,
        font=label_font,
        fill=style.text_color,
        anchor="ms",
    )

    desc_font = fonts.face(style.description_size)
    line_height = font_line_height(desc_font, style.line_spacing)
    lines = wrap_lines_to_width(desc_font, [entry.description], style.text_width(bounds))
    line_y = label_y + style.line_gap
    for line in lines:
        draw.text(
            (bounds.center_x, line_y),
            line,
            font=desc_font,
            fill=style.text_color,
            anchor="ma",
        )
        line_y += line_height
