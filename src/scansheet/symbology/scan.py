#!/usr/bin/env python3
from __future__ import annotations

import sys
from pathlib import Path
from typing import Any

import PIL.Image as pil_image
import zxingcpp

from ..render.geometry import CellBounds, PageGeometry


class BarcodeScanError(RuntimeError):
    pass


_IMAGE_SUFFIXES = {".png", ".jpg", ".jpeg", ".bmp", ".gif", ".tif", ".tiff", ".webp"}


def _module(name: str, default: Any) -> Any:
    return sys.modules.get(name, default)


def decode_image(image: pil_image.Image) -> list[str]:
    zxing_module = _module("zxingcpp", zxingcpp)
    results = zxing_module.read_barcodes(
        image,
        formats=zxing_module.BarcodeFormat.Code128,
    )
    return [result.text for result in results if getattr(result, "text", None)]


def decode_cell(
    image: pil_image.Image,
    bounds: CellBounds,
    *,
    upscale: int = 2,
) -> str | None:
    """Decode the first Code 128 symbol found inside one cell.

    Cells are upscaled with nearest-neighbour sampling so one-pixel modules
    stay crisp for the decoder.
    """
    cell = image.crop(bounds.box()).convert("L")
    if upscale > 1:
        cell = cell.resize(
            (cell.width * upscale, cell.height * upscale),
            pil_image.Resampling.NEAREST,
        )
    decoded = decode_image(cell)
    if not decoded:
        return None
    return decoded[0]


def scan_sheet(path: str | Path, geometry: PageGeometry) -> list[str | None]:
    source = Path(path)
    if not source.exists():
        raise BarcodeScanError(f"scan path not found: {source}")
    if source.suffix.lower() not in _IMAGE_SUFFIXES:
        raise BarcodeScanError(f"unsupported scan file type: {source}")
    image_module = _module("PIL.Image", pil_image)
    try:
        with image_module.open(source) as image:
            image.load()
            if image.size != (geometry.width_px, geometry.height_px):
                raise BarcodeScanError(
                    f"sheet is {image.width}x{image.height}px, expected "
                    f"{geometry.width_px}x{geometry.height_px}px for this config"
                )
            return [
                decode_cell(image, geometry.cell_bounds(index))
                for index in range(geometry.entry_count)
            ]
    except OSError as exc:
        raise BarcodeScanError(f"failed to read image: {source}") from exc
