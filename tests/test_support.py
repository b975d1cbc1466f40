import io
import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Generator
from unittest import mock

from PIL import Image

from scansheet.core.models import Catalogue
from scansheet.render.types import PageConfig, SheetConfig

try:
    import zxingcpp  # noqa: F401

    HAS_ZXING = True
except ImportError:
    HAS_ZXING = False

# =============================================================================
# Test Constants
# =============================================================================

SAMPLE_ROWS = (
    (":wq", ":wq", "Write & quit"),
    (":q!", ":q!", "Force quit without saving"),
    (":set number", "number", "Show line numbers"),
    (":%s/old/new/g", ":%s/old/new/g", "Substitute in whole file"),
    (":tabnew", ":tabnew", "New tab"),
)

BAD_CODE = "bad\x07code"

# 1200x600px: every sample code fits its cell at one pixel per module
SMALL_PAGE = PageConfig(size="TEST", width_in=8.0, height_in=4.0, dpi=150, margin_px=20)


# =============================================================================
# Builders
# =============================================================================


def sample_catalogue(*extra: tuple[str, str, str]) -> Catalogue:
    return Catalogue.from_rows((*SAMPLE_ROWS, *extra))


def catalogue_with_bad_entry(index: int = 1) -> Catalogue:
    rows = list(SAMPLE_ROWS)
    rows.insert(index, (BAD_CODE, "bad", "Contains a control character"))
    return Catalogue.from_rows(rows)


def small_sheet_config(**overrides: object) -> SheetConfig:
    values: dict[str, object] = {"page": SMALL_PAGE, "title": None}
    values.update(overrides)
    return SheetConfig(**values)  # type: ignore[arg-type]


# =============================================================================
# Image Helpers
# =============================================================================


def is_blank(image: Image.Image, box: tuple[int, int, int, int]) -> bool:
    low, high = image.crop(box).convert("L").getextrema()
    return low == 255 and high == 255


def darkest(image: Image.Image, box: tuple[int, int, int, int]) -> int:
    low, _high = image.crop(box).convert("L").getextrema()
    return low


def png_bytes(image: Image.Image) -> bytes:
    buf = io.BytesIO()
    image.save(buf, format="PNG")
    return buf.getvalue()


def pad_image(image: Image.Image, border: int = 40) -> Image.Image:
    padded = Image.new("L", (image.width + 2 * border, image.height + 2 * border), 255)
    padded.paste(image.convert("L"), (border, border))
    return padded


# =============================================================================
# Environment Helpers
# =============================================================================


@contextmanager
def temp_env(overrides: dict[str, str], *, clear: bool = False):
    with mock.patch.dict(os.environ, overrides, clear=clear):
        yield


@contextmanager
def isolated_config_home() -> Generator[Path, None, None]:
    with tempfile.TemporaryDirectory() as tmpdir:
        with temp_env({"XDG_CONFIG_HOME": tmpdir}):
            os.environ.pop("SCANSHEET_PAPER_SIZE", None)
            yield Path(tmpdir)
