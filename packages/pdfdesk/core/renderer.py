"""Page rasterization and JPEG encoding backed by pypdfium2 and Pillow."""

from __future__ import annotations

from dataclasses import dataclass
from io import BytesIO

import pypdfium2 as pdfium
from PIL import Image

from .exceptions import DocumentLoadError, RenderError
from .utils import get_logger

LOGGER = get_logger("pdfdesk.renderer")

_PIL_FORMATS = {"jpeg": "JPEG", "jpg": "JPEG"}


@dataclass(frozen=True, slots=True)
class RasterPage:
    """Pixels of one rendered page."""

    width: int
    height: int
    pixels: bytes
    mode: str = "RGB"
    scale: float = 1.0
    page_size: tuple[float, float] | None = None

    @property
    def point_size(self) -> tuple[float, float]:
        """Size of the source page in PDF points."""

        if self.page_size is not None:
            return self.page_size
        return self.width / self.scale, self.height / self.scale


class RenderableDocument:
    """Open pdfium document; close it (or use it as a context manager) when done."""

    def __init__(self, pdf: pdfium.PdfDocument) -> None:
        self._pdf = pdf

    @property
    def page_count(self) -> int:
        return len(self._pdf)

    def get_page(self, index: int) -> pdfium.PdfPage:
        return self._pdf[index]

    def close(self) -> None:
        self._pdf.close()

    def __enter__(self) -> "RenderableDocument":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()


def jpeg_quality(quality: float) -> int:
    """Map a ``(0, 1]`` quality onto Pillow's 1-100 JPEG scale."""

    return max(1, min(100, round(quality * 100)))


class PageRenderer:
    """Rasterizes pages and encodes the resulting pixels."""

    def open_for_rendering(self, data: bytes) -> RenderableDocument:
        try:
            pdf = pdfium.PdfDocument(data)
        except pdfium.PdfiumError as exc:
            LOGGER.error("Failed to open PDF for rendering: %s", exc)
            raise DocumentLoadError(f"Failed to open PDF for rendering: {exc}") from exc
        return RenderableDocument(pdf)

    def render_page(self, document: RenderableDocument, page_number: int, scale: float) -> RasterPage:
        """Render the 1-based ``page_number`` of ``document`` at ``scale``."""

        if not 1 <= page_number <= document.page_count:
            raise RenderError(
                f"Page {page_number} out of range for {document.page_count} page(s)"
            )
        try:
            page = document.get_page(page_number - 1)
            try:
                page_size = page.get_size()
                bitmap = page.render(scale=scale)
                image = bitmap.to_pil()
            finally:
                page.close()
        except (pdfium.PdfiumError, ValueError) as exc:
            LOGGER.error("Failed to render page %s: %s", page_number, exc)
            raise RenderError(f"Failed to render page {page_number}: {exc}") from exc

        if image.mode != "RGB":
            image = image.convert("RGB")
        return RasterPage(
            width=image.width,
            height=image.height,
            pixels=image.tobytes(),
            mode="RGB",
            scale=scale,
            page_size=(float(page_size[0]), float(page_size[1])),
        )

    def encode(
        self,
        pixels: bytes,
        width: int,
        height: int,
        fmt: str = "jpeg",
        quality: float = 0.7,
        *,
        mode: str = "RGB",
    ) -> bytes:
        """Encode raw ``pixels`` as a lossy image at ``quality``."""

        try:
            pil_format = _PIL_FORMATS[fmt.lower()]
        except KeyError as exc:
            raise RenderError(f"Unsupported image format: {fmt}") from exc

        buffer = BytesIO()
        try:
            image = Image.frombytes(mode, (width, height), pixels)
            image.save(buffer, format=pil_format, quality=jpeg_quality(quality))
        except (ValueError, OSError) as exc:
            LOGGER.error("Failed to encode %sx%s image: %s", width, height, exc)
            raise RenderError(f"Failed to encode image: {exc}") from exc
        return buffer.getvalue()


__all__ = ["PageRenderer", "RenderableDocument", "RasterPage", "jpeg_quality"]
