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

from pathlib import Path

from PIL import Image, ImageDraw

from ..core.errors import EncodingError, ScalingError, SheetWriteError
from ..core.models import Catalogue
from ..symbology.codec import encode_symbol, scale_symbol, symbol_target_size
from .compositor import compose_cell, draw_cell_frame
from .geometry import PageGeometry, compute_page_geometry, page_size_px
from .text import FontCache
from .types import CellOutcome, Rendered, SheetConfig, SheetResult, Skipped

__all__ = ["render_sheet", "render_to_file", "sheet_geometry", "write_sheet"]

_BACKGROUND = (255, 255, 255)
_FOREGROUND = (0, 0, 0)


def sheet_geometry(entry_count: int, config: SheetConfig) -> PageGeometry:
    page = config.page
    width, height = page_size_px(page.width_in, page.height_in, page.dpi)
    return compute_page_geometry(
        entry_count,
        width,
        height,
        page.margin_px,
        columns=config.columns,
        max_rows=config.max_rows,
    )


def render_sheet(
    catalogue: Catalogue,
    config: SheetConfig | None = None,
    *,
    fonts: FontCache | None = None,
) -> SheetResult:
    """Lay out, encode and draw every catalogue entry on one page.

    Entries that fail to encode or scale keep their cell frame and are
    reported as Skipped; geometry problems raise before anything is drawn.
    """
    config = config or SheetConfig()
    geometry = sheet_geometry(len(catalogue), config)
    if fonts is None:
        fonts = FontCache(config.font_path)

    image = Image.new("RGB", (geometry.width_px, geometry.height_px), _BACKGROUND)
    draw = ImageDraw.Draw(image)
    if config.title:
        draw.text(
            (geometry.width_px / 2, geometry.margin_px / 2),
            config.title,
            font=fonts.face(config.title_size),
            fill=_FOREGROUND,
            anchor="mm",
        )

    target_w, target_h = symbol_target_size(
        geometry.cell_width,
        geometry.cell_height,
        config.symbol,
    )
    outcomes: list[CellOutcome] = []
    for index, entry in enumerate(catalogue):
        bounds = geometry.cell_bounds(index)
        try:
            raw = encode_symbol(entry.code)
        except EncodingError as exc:
            draw_cell_frame(draw, bounds, config.cell)
            outcomes.append(Skipped(index, entry, bounds, "encode", str(exc)))
            continue
        try:
            symbol = scale_symbol(
                raw,
                target_w,
                target_h,
                min_module_px=config.symbol.min_module_px,
            )
        except ScalingError as exc:
            draw_cell_frame(draw, bounds, config.cell)
            outcomes.append(Skipped(index, entry, bounds, "scale", str(exc)))
            continue
        compose_cell(image, bounds, symbol, entry, fonts, config.cell)
        outcomes.append(Rendered(index, entry, bounds, (symbol.width, symbol.height)))

    return SheetResult(image=image, geometry=geometry, outcomes=tuple(outcomes))


def write_sheet(result: SheetResult, path: str | Path) -> Path:
    output = Path(path)
    try:
        result.image.save(output)
    except (OSError, ValueError) as exc:
        raise SheetWriteError(f"failed to write sheet to {output}: {exc}") from exc
    return output


def render_to_file(
    catalogue: Catalogue,
    config: SheetConfig | None,
    path: str | Path,
    *,
    fonts: FontCache | None = None,
) -> SheetResult:
    result = render_sheet(catalogue, config, fonts=fonts)
    write_sheet(result, path)
    return result
