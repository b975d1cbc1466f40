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
from typing import Sequence

from PIL import ImageFont

from ..core.errors import ConfigurationError


class FontCache:
    """Font faces keyed by pixel size, loaded once per render session."""

    def __init__(self, font_path: str | Path | None = None) -> None:
        self.font_path = Path(font_path) if font_path else None
        self._faces: dict[float, ImageFont.FreeTypeFont] = {}

    def face(self, size: float) -> ImageFont.FreeTypeFont:
        cached = self._faces.get(size)
        if cached is not None:
            return cached
        face = self._load(size)
        self._faces[size] = face
        return face

    def __len__(self) -> int:
        return len(self._faces)

    def _load(self, size: float) -> ImageFont.FreeTypeFont:
        if size <= 0:
            raise ConfigurationError(f"font size must be positive, got {size}")
        try:
            if self.font_path is not None:
                face = ImageFont.truetype(str(self.font_path), size)
            else:
                face = ImageFont.load_default(size=size)
        except OSError as exc:
            source = self.font_path or "default font"
            raise ConfigurationError(f"failed to load {source} at size {size}: {exc}") from exc
        if not isinstance(face, ImageFont.FreeTypeFont):
            raise ConfigurationError("Pillow was built without FreeType; scalable fonts required")
        return face


def _text_width(font: ImageFont.FreeTypeFont, text: str) -> float:
    return font.getlength(text)


def _split_word(font: ImageFont.FreeTypeFont, word: str, max_width: float) -> list[str]:
    """Break a word wider than max_width into character runs that fit."""
    pieces = [""]
    for ch in word:
        extended = pieces[-1] + ch
        if pieces[-1] and _text_width(font, extended) > max_width:
            pieces.append(ch)
        else:
            pieces[-1] = extended
    return pieces


def _wrap_line(font: ImageFont.FreeTypeFont, line: str, max_width: float) -> list[str]:
    rows: list[str] = []
    current = ""
    for word in line.split(" "):
        joined = f"{current} {word}" if current else word
        if _text_width(font, joined) <= max_width:
            current = joined
            continue
        if current:
            rows.append(current)
        # The last piece stays open so following words can join it.
        *full, current = _split_word(font, word, max_width)
        rows.extend(full)
    if current:
        rows.append(current)
    return rows


def wrap_lines_to_width(
    font: ImageFont.FreeTypeFont,
    lines: Sequence[str],
    max_width: float,
) -> list[str]:
    """Greedy word wrap measured in rendered pixels; blank lines are kept."""
    wrapped: list[str] = []
    for line in lines:
        wrapped.extend(_wrap_line(font, line, max_width) if line else [""])
    return wrapped


def font_line_height(font: ImageFont.FreeTypeFont, spacing: float = 1.0) -> float:
    ascent, descent = font.getmetrics()
    return float(ascent + descent) * spacing
