#!/usr/bin/env python3
from __future__ import annotations

from dataclasses import dataclass

from barcode import Code128
from barcode.errors import BarcodeError
from PIL import Image

from ..core.errors import EncodingError, ScalingError

# Printable ASCII; codes with control or non-ASCII characters are rejected
SUPPORTED_CHARS = frozenset(chr(value) for value in range(0x20, 0x7F))

_BAR = 0
_SPACE = 255


@dataclass(frozen=True)
class SymbolConfig:
    width_ratio: float = 0.80
    height_ratio: float = 0.38
    min_module_px: int = 1


@dataclass(frozen=True)
class EncodedSymbol:
    code: str
    modules: str
    image: Image.Image

    @property
    def width(self) -> int:
        return self.image.width

    @property
    def height(self) -> int:
        return self.image.height

    @property
    def module_count(self) -> int:
        return len(self.modules)


def make_code128(code: str) -> Code128:
    return Code128(code)


def module_pattern(code: str) -> str:
    """Return the Code 128 bar/space sequence for code ("1" is a bar).

    The sequence includes start, checksum and stop symbols but no quiet zone.
    """
    if not code:
        raise EncodingError("cannot encode an empty code")
    unsupported = sorted({ch for ch in code if ch not in SUPPORTED_CHARS})
    if unsupported:
        shown = ", ".join(repr(ch) for ch in unsupported)
        raise EncodingError(f"unsupported characters in {code!r}: {shown}")
    try:
        built = make_code128(code).build()
    except BarcodeError as exc:
        raise EncodingError(f"cannot encode {code!r} as Code 128: {exc}") from exc
    return built[0]


def encode_symbol(code: str) -> EncodedSymbol:
    modules = module_pattern(code)
    image = Image.new("L", (len(modules), 1), _SPACE)
    image.putdata([_BAR if module == "1" else _SPACE for module in modules])
    return EncodedSymbol(code=code, modules=modules, image=image)


def scale_symbol(
    symbol: EncodedSymbol,
    width: int,
    height: int,
    *,
    min_module_px: int = 1,
) -> EncodedSymbol:
    """Scale a raw symbol to exactly width x height pixels.

    Every module gets the same integer width; leftover pixels are split
    evenly as white padding on both sides.
    """
    if width <= 0 or height <= 0:
        raise ScalingError(f"cannot scale {symbol.code!r} to {width}x{height}px")
    module_px = width // symbol.module_count
    if module_px < 1:
        raise ScalingError(
            f"cannot scale {symbol.code!r}: {symbol.module_count} modules "
            f"do not fit in {width}px"
        )
    if module_px < min_module_px:
        raise ScalingError(
            f"cannot scale {symbol.code!r}: module width {module_px}px "
            f"is below the minimum of {min_module_px}px"
        )
    bars = symbol.image.resize(
        (symbol.module_count * module_px, height),
        Image.Resampling.NEAREST,
    )
    scaled = Image.new("L", (width, height), _SPACE)
    scaled.paste(bars, ((width - bars.width) // 2, 0))
    return EncodedSymbol(code=symbol.code, modules=symbol.modules, image=scaled)


def symbol_target_size(
    cell_width: float,
    cell_height: float,
    config: SymbolConfig,
) -> tuple[int, int]:
    return int(cell_width * config.width_ratio), int(cell_height * config.height_ratio)
