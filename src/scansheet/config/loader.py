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

import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path

from ..render.compositor import CellStyle
from ..render.types import DEFAULT_TITLE, PageConfig, SheetConfig
from ..symbology.codec import SymbolConfig
from .installer import DEFAULT_PAPER_SIZE, resolve_config_path

DEFAULT_OUTPUT_PATH = "vim-barcodes-a4.png"


@dataclass(frozen=True)
class UiDefaults:
    quiet: bool = False
    no_color: bool = False


@dataclass(frozen=True)
class CliDefaults:
    ui: UiDefaults = field(default_factory=UiDefaults)


@dataclass(frozen=True)
class AppConfig:
    path: Path
    sheet: SheetConfig
    output_path: Path
    cli_defaults: CliDefaults = field(default_factory=CliDefaults)

    @property
    def paper_size(self) -> str:
        return self.sheet.page.size


def load_app_config(
    path: str | Path | None = None,
    *,
    paper_size: str | None = None,
) -> AppConfig:
    config_path = resolve_config_path(path, paper_size=paper_size)
    data = _load_toml(config_path)
    sheet_cfg = _get_dict(data, "sheet")
    output = _parse_optional_unset_str(sheet_cfg.get("output"), field="sheet.output")
    return AppConfig(
        path=config_path,
        sheet=build_sheet_config(data),
        output_path=Path(output or DEFAULT_OUTPUT_PATH),
        cli_defaults=_parse_cli_defaults(data),
    )


def load_cli_defaults(
    path: str | Path | None = None,
    *,
    paper_size: str | None = None,
) -> CliDefaults:
    config_path = resolve_config_path(path, paper_size=paper_size)
    data = _load_toml(config_path)
    return _parse_cli_defaults(data)


def apply_title(config: AppConfig, title: str | None, *, no_title: bool = False) -> AppConfig:
    if no_title:
        return replace(config, sheet=replace(config.sheet, title=None))
    if title is None:
        return config
    return replace(config, sheet=replace(config.sheet, title=title))


def build_sheet_config(data: dict[str, object] | None = None) -> SheetConfig:
    data = data or {}
    sheet_cfg = _get_dict(data, "sheet")
    grid_cfg = _get_dict(data, "grid")
    fonts_cfg = _get_dict(data, "fonts")
    title = _parse_optional_unset_str(sheet_cfg.get("title", DEFAULT_TITLE), field="sheet.title")
    font_path = _parse_optional_unset_str(fonts_cfg.get("path"), field="fonts.path")
    return SheetConfig(
        page=build_page_config(_get_dict(data, "page")),
        columns=_parse_positive_int(grid_cfg.get("columns"), field="grid.columns", default=4),
        max_rows=_parse_optional_positive_int_or_unset_zero(
            grid_cfg.get("max_rows"),
            field="grid.max_rows",
        ),
        title=title,
        title_size=_parse_positive_float(
            sheet_cfg.get("title_size"), field="sheet.title_size", default=24.0
        ),
        symbol=build_symbol_config(_get_dict(data, "barcode")),
        cell=build_cell_style(_get_dict(data, "cell")),
        font_path=Path(font_path).expanduser() if font_path else None,
    )


def build_page_config(cfg: dict[str, object] | None = None) -> PageConfig:
    cfg = cfg or {}
    defaults = PageConfig()
    size = _parse_optional_unset_str(cfg.get("size"), field="page.size")
    return PageConfig(
        size=(size or DEFAULT_PAPER_SIZE).upper(),
        width_in=_parse_positive_float(
            cfg.get("width_in"), field="page.width_in", default=defaults.width_in
        ),
        height_in=_parse_positive_float(
            cfg.get("height_in"), field="page.height_in", default=defaults.height_in
        ),
        dpi=_parse_positive_int(cfg.get("dpi"), field="page.dpi", default=defaults.dpi),
        margin_px=_parse_non_negative_float(
            cfg.get("margin_px"), field="page.margin_px", default=defaults.margin_px
        ),
    )


def build_symbol_config(cfg: dict[str, object] | None = None) -> SymbolConfig:
    cfg = cfg or {}
    defaults = SymbolConfig()
    return SymbolConfig(
        width_ratio=_parse_ratio(
            cfg.get("width_ratio"), field="barcode.width_ratio", default=defaults.width_ratio
        ),
        height_ratio=_parse_ratio(
            cfg.get("height_ratio"), field="barcode.height_ratio", default=defaults.height_ratio
        ),
        min_module_px=_parse_positive_int(
            cfg.get("min_module_px"),
            field="barcode.min_module_px",
            default=defaults.min_module_px,
        ),
    )


def build_cell_style(cfg: dict[str, object] | None = None) -> CellStyle:
    cfg = cfg or {}
    defaults = CellStyle()
    return CellStyle(
        top_padding=_parse_non_negative_float(
            cfg.get("top_padding"), field="cell.top_padding", default=defaults.top_padding
        ),
        label_gap=_parse_non_negative_float(
            cfg.get("label_gap"), field="cell.label_gap", default=defaults.label_gap
        ),
        line_gap=_parse_non_negative_float(
            cfg.get("line_gap"), field="cell.line_gap", default=defaults.line_gap
        ),
        inner_margin=_parse_non_negative_float(
            cfg.get("inner_margin"), field="cell.inner_margin", default=defaults.inner_margin
        ),
        label_size=_parse_positive_float(
            cfg.get("label_size"), field="cell.label_size", default=defaults.label_size
        ),
        description_size=_parse_positive_float(
            cfg.get("description_size"),
            field="cell.description_size",
            default=defaults.description_size,
        ),
        line_spacing=_parse_positive_float(
            cfg.get("line_spacing"), field="cell.line_spacing", default=defaults.line_spacing
        ),
        border_width=_parse_positive_int(
            cfg.get("border_width"), field="cell.border_width", default=defaults.border_width
        ),
        border_color=_parse_color(
            cfg.get("border_color"), field="cell.border_color", default=defaults.border_color
        ),
    )


def _parse_cli_defaults(data: dict[str, object]) -> CliDefaults:
    return CliDefaults(ui=_parse_ui_defaults(_get_dict(data, "ui")))


def _parse_ui_defaults(cfg: dict[str, object]) -> UiDefaults:
    return UiDefaults(
        quiet=_parse_bool(cfg.get("quiet"), field="ui.quiet", default=False),
        no_color=_parse_bool(cfg.get("no_color"), field="ui.no_color", default=False),
    )


def _load_toml(path: Path) -> dict[str, object]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _get_dict(data: dict[str, object], key: str) -> dict[str, object]:
    value = data.get(key)
    if isinstance(value, dict):
        return value
    return {}


def _parse_optional_unset_str(value: object, *, field: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ValueError(f"{field} must be a string")
    normalized = value.strip()
    return normalized or None


def _parse_bool(value: object, *, field: str, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise ValueError(f"{field} must be a boolean")
    if isinstance(value, str):
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        raise ValueError(f"{field} must be a boolean")
    raise ValueError(f"{field} must be a boolean")


def _parse_optional_positive_int_or_unset_zero(value: object, *, field: str) -> int | None:
    if value is None:
        return None
    parsed = _parse_int_strict(value, field=field)
    if parsed == 0:
        return None
    if parsed < 0:
        raise ValueError(f"{field} must be a positive integer or 0")
    return parsed


def _parse_positive_int(value: object, *, field: str, default: int) -> int:
    if value is None:
        return default
    parsed = _parse_int_strict(value, field=field)
    if parsed <= 0:
        raise ValueError(f"{field} must be a positive integer")
    return parsed


def _parse_int_strict(value: object, *, field: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{field} must be an integer")
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not value.is_integer():
            raise ValueError(f"{field} must be an integer")
        return int(value)
    if isinstance(value, str):
        text = value.strip()
        if not text:
            raise ValueError(f"{field} must be an integer")
        try:
            return int(text)
        except ValueError as exc:
            raise ValueError(f"{field} must be an integer") from exc
    raise ValueError(f"{field} must be an integer")


def _parse_float_strict(value: object, *, field: str) -> float:
    if isinstance(value, bool):
        raise ValueError(f"{field} must be a number")
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            return float(value.strip())
        except ValueError as exc:
            raise ValueError(f"{field} must be a number") from exc
    raise ValueError(f"{field} must be a number")


def _parse_positive_float(value: object, *, field: str, default: float) -> float:
    if value is None:
        return default
    parsed = _parse_float_strict(value, field=field)
    if parsed <= 0:
        raise ValueError(f"{field} must be positive")
    return parsed


def _parse_non_negative_float(value: object, *, field: str, default: float) -> float:
    if value is None:
        return default
    parsed = _parse_float_strict(value, field=field)
    if parsed < 0:
        raise ValueError(f"{field} must not be negative")
    return parsed


def _parse_ratio(value: object, *, field: str, default: float) -> float:
    parsed = _parse_positive_float(value, field=field, default=default)
    if parsed > 1:
        raise ValueError(f"{field} must be between 0 and 1")
    return parsed


def _parse_color(
    value: object,
    *,
    field: str,
    default: tuple[int, int, int],
) -> tuple[int, int, int]:
    if value is None:
        return default
    if isinstance(value, (list, tuple)) and len(value) == 3:
        channels = tuple(_parse_int_strict(item, field=field) for item in value)
        if all(0 <= channel <= 255 for channel in channels):
            return (channels[0], channels[1], channels[2])
    raise ValueError(f"{field} must be a list of three integers between 0 and 255")
