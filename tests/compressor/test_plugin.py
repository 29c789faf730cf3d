from __future__ import annotations

import math

import pytest

from pdfdesk.core.exceptions import (
    DocumentLoadError,
    InvalidQualityError,
    InvalidScaleError,
    OperationCancelledError,
    RenderError,
)
from pdfdesk.core.renderer import PageRenderer
from pdfdesk.tools.common.interfaces import CancellationToken, ToolContext
from pdfdesk.tools.common.pipeline import Operation, create_tool
from pdfdesk.tools.compressor import compress_pdf, parse_quality, parse_scale

from ..helpers import read_pdf


def test_compress_tool_rasterizes_every_page(noisy_pdf: bytes) -> None:
    context = ToolContext(inputs=[noisy_pdf], options={"quality": 0.5})
    result = create_tool(Operation.COMPRESS, context).run()

    assert result.filename == "compressed.pdf"
    assert result.media_type == "application/pdf"
    assert result.page_count == 3

    for page in read_pdf(result.data).pages:
        assert float(page.mediabox.width) == pytest.approx(160, abs=1)
        assert float(page.mediabox.height) == pytest.approx(120, abs=1)
        xobjects = page["/Resources"]["/XObject"]
        assert len(xobjects) == 1
        image = next(iter(xobjects.values())).get_object()
        assert image["/Filter"] == "/DCTDecode"
        # Rendered at 1.5x the page size.
        assert image["/Width"] == 240
        assert image["/Height"] == 180


def test_compress_preserves_page_sizes(sample_pdf: bytes) -> None:
    output = read_pdf(compress_pdf(sample_pdf, 0.7))
    widths = [float(page.mediabox.width) for page in output.pages]
    assert widths == pytest.approx([100, 110, 120, 130, 140], abs=1)


def test_compress_keeps_fractional_page_sizes(pdf_factory) -> None:
    a4 = pdf_factory([595.28], height=841.89)
    page = read_pdf(compress_pdf(a4, 0.5)).pages[0]
    assert float(page.mediabox.width) == pytest.approx(595.28, abs=0.01)
    assert float(page.mediabox.height) == pytest.approx(841.89, abs=0.01)


def test_compress_size_grows_with_quality(noisy_pdf: bytes) -> None:
    low = compress_pdf(noisy_pdf, 0.2)
    high = compress_pdf(noisy_pdf, 0.9)
    assert len(low) < len(high)
    assert len(read_pdf(low).pages) == len(read_pdf(high).pages) == 3


def test_compress_reports_progress_per_page(noisy_pdf: bytes) -> None:
    events = []
    compress_pdf(noisy_pdf, 0.5, ToolContext(progress=events.append))

    assert [event.message for event in events] == [
        "Processing page 1 of 3...",
        "Processing page 2 of 3...",
        "Processing page 3 of 3...",
    ]
    assert [(event.current, event.total) for event in events] == [(1, 3), (2, 3), (3, 3)]


def test_compress_honours_scale_option(sample_pdf: bytes) -> None:
    context = ToolContext(inputs=[sample_pdf], options={"quality": 0.5, "scale": 1.0})
    result = create_tool(Operation.COMPRESS, context).run()
    first = read_pdf(result.data).pages[0]
    image = next(iter(first["/Resources"]["/XObject"].values())).get_object()
    assert image["/Width"] == 100
    assert float(first.mediabox.width) == pytest.approx(100, abs=1)


def test_compress_accepts_scale_as_string(sample_pdf: bytes) -> None:
    context = ToolContext(inputs=[sample_pdf], options={"quality": "0.5", "scale": "2"})
    result = create_tool(Operation.COMPRESS, context).run()
    first = read_pdf(result.data).pages[0]
    image = next(iter(first["/Resources"]["/XObject"].values())).get_object()
    assert image["/Width"] == 200
    assert float(first.mediabox.width) == pytest.approx(100, abs=0.01)


@pytest.mark.parametrize("scale", [0, -1, "0", "-1", "big", math.nan, math.inf, True])
def test_invalid_scale_fails_before_loading(scale: object) -> None:
    with pytest.raises(InvalidScaleError):
        compress_pdf(b"not a pdf", 0.5, scale=scale)  # type: ignore[arg-type]


def test_compress_tool_rejects_non_positive_scale(sample_pdf: bytes) -> None:
    context = ToolContext(inputs=[sample_pdf], options={"quality": 0.5, "scale": "0"})
    with pytest.raises(InvalidScaleError):
        create_tool(Operation.COMPRESS, context).run()
    assert "result" not in context.resources


def test_parse_scale_accepts_strings() -> None:
    assert parse_scale("2") == 2.0
    assert parse_scale(0.25) == 0.25
    assert isinstance(InvalidScaleError(0), ValueError)


def test_compress_cancellation_between_pages(noisy_pdf: bytes) -> None:
    token = CancellationToken()
    events = []

    def on_progress(event) -> None:
        events.append(event)
        token.cancel()

    with pytest.raises(OperationCancelledError):
        compress_pdf(noisy_pdf, 0.5, ToolContext(progress=on_progress, cancel_token=token))
    assert len(events) == 1


@pytest.mark.parametrize("quality", [0, -0.5, 1.5, math.nan, math.inf, "abc", None, True])
def test_invalid_quality_fails_before_loading(quality: object) -> None:
    with pytest.raises(InvalidQualityError):
        compress_pdf(b"not a pdf", quality)  # type: ignore[arg-type]


def test_parse_quality_accepts_strings_and_bounds() -> None:
    assert parse_quality("0.7") == pytest.approx(0.7)
    assert parse_quality(1) == 1.0
    assert isinstance(InvalidQualityError(0), ValueError)


def test_compress_tool_uses_default_quality(sample_pdf: bytes) -> None:
    context = ToolContext(inputs=[sample_pdf])
    result = create_tool(Operation.COMPRESS, context).run()
    assert result.page_count == 5


def test_compress_rejects_undecodable_input() -> None:
    with pytest.raises(DocumentLoadError):
        compress_pdf(b"not a pdf", 0.5)


def test_compress_propagates_render_failure(sample_pdf: bytes) -> None:
    class FailingRenderer(PageRenderer):
        def render_page(self, document, page_number, scale):
            raise RenderError(f"cannot render page {page_number}")

    context = ToolContext(
        inputs=[sample_pdf],
        options={"quality": 0.5},
        resources={"renderer": FailingRenderer()},
    )
    with pytest.raises(RenderError):
        create_tool(Operation.COMPRESS, context).run()
    assert "result" not in context.resources
