from __future__ import annotations

from io import BytesIO

import pytest
from PIL import Image

from pdfdesk.core.exceptions import DocumentLoadError, RenderError
from pdfdesk.core.renderer import PageRenderer, jpeg_quality


@pytest.mark.parametrize(
    ("quality", "expected"),
    [(0.001, 1), (0.1, 10), (0.7, 70), (1.0, 100)],
)
def test_jpeg_quality_mapping(quality: float, expected: int) -> None:
    assert jpeg_quality(quality) == expected


def test_open_for_rendering_reports_page_count(sample_pdf: bytes) -> None:
    with PageRenderer().open_for_rendering(sample_pdf) as document:
        assert document.page_count == 5


def test_open_for_rendering_rejects_garbage() -> None:
    with pytest.raises(DocumentLoadError):
        PageRenderer().open_for_rendering(b"not a pdf")


def test_render_page_scales_raster(sample_pdf: bytes) -> None:
    renderer = PageRenderer()
    with renderer.open_for_rendering(sample_pdf) as document:
        raster = renderer.render_page(document, 1, scale=1.5)

    assert (raster.width, raster.height) == (150, 300)
    assert raster.mode == "RGB"
    assert len(raster.pixels) == raster.width * raster.height * 3
    assert raster.point_size == pytest.approx((100, 200))


@pytest.mark.parametrize("scale", [0, -1])
def test_render_page_wraps_invalid_scale(sample_pdf: bytes, scale: float) -> None:
    renderer = PageRenderer()
    with renderer.open_for_rendering(sample_pdf) as document:
        with pytest.raises(RenderError):
            renderer.render_page(document, 1, scale=scale)


def test_render_page_reports_exact_point_size(pdf_factory) -> None:
    renderer = PageRenderer()
    with renderer.open_for_rendering(pdf_factory([595.28], height=841.89)) as document:
        raster = renderer.render_page(document, 1, scale=1.5)

    assert raster.point_size == pytest.approx((595.28, 841.89), abs=0.01)


@pytest.mark.parametrize("page_number", [0, 6])
def test_render_page_out_of_range(sample_pdf: bytes, page_number: int) -> None:
    renderer = PageRenderer()
    with renderer.open_for_rendering(sample_pdf) as document:
        with pytest.raises(RenderError):
            renderer.render_page(document, page_number, scale=1.0)


def test_encode_produces_jpeg() -> None:
    pixels = bytes([200, 10, 10]) * (8 * 4)
    data = PageRenderer().encode(pixels, 8, 4, "jpeg", 0.5)

    assert data.startswith(b"\xff\xd8")
    with Image.open(BytesIO(data)) as image:
        assert image.format == "JPEG"
        assert image.size == (8, 4)


def test_encode_rejects_short_pixel_buffer() -> None:
    with pytest.raises(RenderError):
        PageRenderer().encode(b"\x00" * 5, 8, 4, "jpeg", 0.5)


def test_encode_rejects_unknown_format() -> None:
    with pytest.raises(RenderError):
        PageRenderer().encode(b"\x00" * 3, 1, 1, "webp", 0.5)
