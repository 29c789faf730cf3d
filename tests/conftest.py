from __future__ import annotations

import random
import sys
from io import BytesIO
from pathlib import Path
from typing import Callable

import pytest
from PIL import Image

from .helpers import build_pdf

PROJECT_ROOT = Path(__file__).resolve().parents[1]
PACKAGES_DIR = PROJECT_ROOT / "packages"
if str(PACKAGES_DIR) not in sys.path:
    sys.path.insert(0, str(PACKAGES_DIR))


@pytest.fixture()
def pdf_factory() -> Callable[..., bytes]:
    """Build a PDF whose page ``i`` is ``widths[i]`` points wide."""

    return build_pdf


@pytest.fixture()
def sample_pdf() -> bytes:
    # Five pages, identifiable by width: 100, 110, 120, 130, 140.
    return build_pdf([100 + 10 * index for index in range(5)])


@pytest.fixture()
def ten_page_pdf() -> bytes:
    return build_pdf([100 + 10 * index for index in range(10)])


@pytest.fixture()
def noisy_pdf() -> bytes:
    """Three pages of seeded noise so JPEG size tracks quality."""

    rng = random.Random(1234)
    frames = []
    for _ in range(3):
        pixels = bytes(rng.randrange(256) for _ in range(160 * 120 * 3))
        frames.append(Image.frombytes("RGB", (160, 120), pixels))
    buffer = BytesIO()
    frames[0].save(buffer, format="PDF", save_all=True, append_images=frames[1:], resolution=72.0)
    return buffer.getvalue()


@pytest.fixture()
def write_pdf(tmp_path: Path) -> Callable[[str, bytes], Path]:
    def _write(name: str, data: bytes) -> Path:
        path = tmp_path / name
        path.write_bytes(data)
        return path

    return _write
