"""Lossy compression by rasterizing every page and re-encoding it as JPEG.

Each output page is a single image, so selectable text and vector graphics of
the source are not carried over. The trade is deliberate: page count and page
dimensions are preserved while the content becomes a fixed-resolution picture
whose size is governed by the JPEG ``quality``.
"""

from __future__ import annotations

import math

from ...core.config import load_settings
from ...core.document import PDF_MEDIA_TYPE, PdfDocument
from ...core.exceptions import InvalidQualityError, InvalidScaleError
from ...core.renderer import PageRenderer
from ...core.utils import get_logger
from ..common.interfaces import BaseTool, OptionSpec, ToolContext, ToolDescriptor, ToolOutput

LOGGER = get_logger("pdfdesk.tools.compress")

OUTPUT_FILENAME = "compressed.pdf"

DESCRIPTOR = ToolDescriptor(
    operation="compress",
    title="Compress PDF",
    description="Reduce the file size of your PDF.",
    options=(
        OptionSpec(
            name="quality",
            kind=float,
            default=0.7,
            help="Image quality (lower is smaller)",
            minimum=0.1,
            maximum=1.0,
        ),
    ),
)


def parse_quality(value: object) -> float:
    """Return ``value`` as a float in ``(0, 1]`` or raise :class:`InvalidQualityError`."""

    if isinstance(value, bool):
        raise InvalidQualityError(value)
    try:
        quality = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise InvalidQualityError(value) from exc
    if not math.isfinite(quality) or not 0 < quality <= 1:
        raise InvalidQualityError(value)
    return quality


def parse_scale(value: object) -> float:
    """Return ``value`` as a positive finite float or raise :class:`InvalidScaleError`."""

    if isinstance(value, bool):
        raise InvalidScaleError(value)
    try:
        scale = float(value)  # type: ignore[arg-type]
    except (TypeError, ValueError) as exc:
        raise InvalidScaleError(value) from exc
    if not math.isfinite(scale) or scale <= 0:
        raise InvalidScaleError(value)
    return scale


def compress_into_document(
    data: bytes,
    quality: float,
    context: ToolContext | None = None,
    *,
    renderer: PageRenderer | None = None,
    scale: float | str | None = None,
) -> PdfDocument:
    """Build a document whose pages are JPEG renderings of the pages of ``data``."""

    context = context or ToolContext()
    quality = parse_quality(quality)
    renderer = renderer or PageRenderer()
    scale = parse_scale(load_settings().render_scale if scale is None else scale)

    compressed = PdfDocument.create()
    with renderer.open_for_rendering(data) as source:
        total = source.page_count
        for page_number in range(1, total + 1):
            context.check_cancelled()
            context.report(
                f"Processing page {page_number} of {total}...",
                current=page_number,
                total=total,
            )
            raster = renderer.render_page(source, page_number, scale)
            encoded = renderer.encode(
                raster.pixels,
                raster.width,
                raster.height,
                "jpeg",
                quality,
                mode=raster.mode,
            )
            image = compressed.embed_image(encoded, "jpeg")
            width, height = raster.point_size
            page = compressed.add_page((width, height))
            compressed.draw_image(page, image, x=0, y=0, width=width, height=height)
            LOGGER.debug(
                "Page %d rendered at %sx%s px, %d JPEG bytes",
                page_number,
                raster.width,
                raster.height,
                len(encoded),
            )
    return compressed


def compress_pdf(
    data: bytes,
    quality: float,
    context: ToolContext | None = None,
    *,
    renderer: PageRenderer | None = None,
    scale: float | None = None,
) -> bytes:
    """Return the rasterized, JPEG re-encoded rendition of ``data``."""

    return compress_into_document(data, quality, context, renderer=renderer, scale=scale).save()


class CompressTool(BaseTool):
    name = "compress"
    descriptor = DESCRIPTOR

    def run(self) -> ToolOutput:
        context = self.context
        quality = parse_quality(context.option("quality", load_settings().default_quality))
        context.report("Compressing PDF...")
        source = self.single_input()
        compressed = compress_into_document(
            source,
            quality,
            context,
            renderer=context.resources.get("renderer"),
            scale=context.option("scale"),
        )
        result = ToolOutput(
            data=compressed.save(),
            filename=OUTPUT_FILENAME,
            media_type=PDF_MEDIA_TYPE,
            page_count=compressed.page_count,
        )
        LOGGER.info(
            "Compressed %d page(s) at quality %.2f: %d -> %d bytes",
            result.page_count,
            quality,
            len(source),
            result.size,
        )
        context.resources["result"] = result
        return result


__all__ = [
    "CompressTool",
    "compress_pdf",
    "compress_into_document",
    "parse_quality",
    "parse_scale",
    "DESCRIPTOR",
]
