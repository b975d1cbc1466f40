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

from dataclasses import dataclass, field
from pathlib import Path
from typing import Literal, Sequence, Union

from PIL import Image

from ..core.models import CatalogueEntry
from ..symbology.codec import SymbolConfig
from .compositor import CellStyle
from .geometry import CellBounds, PageGeometry

DEFAULT_TITLE = "Vim Barcode Cheat Sheet (Scanner adds <CR>)"

SkipStage = Literal["encode", "scale"]


@dataclass(frozen=True)
class PageConfig:
    size: str = "A4"
    width_in: float = 8.27
    height_in: float = 11.69
    dpi: int = 300
    margin_px: float = 80.0


@dataclass(frozen=True)
class SheetConfig:
    page: PageConfig = field(default_factory=PageConfig)
    columns: int = 4
    max_rows: int | None = None
    title: str | None = DEFAULT_TITLE
    title_size: float = 24.0
    symbol: SymbolConfig = field(default_factory=SymbolConfig)
    cell: CellStyle = field(default_factory=CellStyle)
    font_path: Path | None = None


@dataclass(frozen=True)
class Rendered:
    index: int
    entry: CatalogueEntry
    bounds: CellBounds
    symbol_size: tuple[int, int]


@dataclass(frozen=True)
class Skipped:
    index: int
    entry: CatalogueEntry
    bounds: CellBounds
    stage: SkipStage
    reason: str


CellOutcome = Union[Rendered, Skipped]


@dataclass(frozen=True)
class SheetResult:
    image: Image.Image
    geometry: PageGeometry
    outcomes: Sequence[CellOutcome]

    @property
    def rendered(self) -> list[Rendered]:
        return [outcome for outcome in self.outcomes if isinstance(outcome, Rendered)]

    @property
    def skipped(self) -> list[Skipped]:
        return [outcome for outcome in self.outcomes if isinstance(outcome, Skipped)]
