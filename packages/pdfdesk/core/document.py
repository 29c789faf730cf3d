"""Thin document object model over :mod:`pypdf` used by every pipeline.

A :class:`PdfDocument` wraps a :class:`pypdf.PdfWriter` so that freshly created
documents and documents decoded from bytes expose the same small surface:
page count, page import, page removal, JPEG embedding and serialization.
"""

from __future__ import annotations

from dataclasses import dataclass
from io import BytesIO
from typing import Iterable, List, Sequence

from PIL import Image, UnidentifiedImageError
from pypdf import PageObject, PasswordType, PdfReader, PdfWriter
from pypdf.generic import DecodedStreamObject, DictionaryObject, IndirectObject, NameObject, NumberObject

from .exceptions import DocumentLoadError
from .utils import get_logger

LOGGER = get_logger("pdfdesk.document")

PDF_MEDIA_TYPE = "application/pdf"

_COLOR_SPACES = {
    "L": "/DeviceGray",
    "RGB": "/DeviceRGB",
    "CMYK": "/DeviceCMYK",
}

PageSize = Sequence[float]


@dataclass(frozen=True, slots=True)
class EmbeddedImage:
    """Reference to an image XObject stored inside a document."""

    reference: IndirectObject
    width: int
    height: int


def _number(value: float) -> str:
    text = f"{value:.4f}".rstrip("0").rstrip(".")
    return text or "0"


class PdfDocument:
    """Mutable PDF document handle."""

    def __init__(self, writer: PdfWriter | None = None) -> None:
        self._writer = writer if writer is not None else PdfWriter()
        self._image_count = 0

    @classmethod
    def create(cls) -> "PdfDocument":
        return cls()

    @classmethod
    def load(cls, data: bytes) -> "PdfDocument":
        """Decode ``data`` into a document, raising :class:`DocumentLoadError` on failure."""

        try:
            reader = PdfReader(BytesIO(data))
            if reader.is_encrypted and reader.decrypt("") == PasswordType.NOT_DECRYPTED:
                raise DocumentLoadError("Encrypted PDF requires a password")
            writer = PdfWriter(clone_from=reader)
        except DocumentLoadError:
            raise
        except Exception as exc:
            LOGGER.error("Failed to load PDF document: %s", exc)
            raise DocumentLoadError(f"Failed to load PDF document: {exc}") from exc
        return cls(writer)

    @property
    def page_count(self) -> int:
        return len(self._writer.pages)

    def copy_pages(self, source: "PdfDocument", indices: Iterable[int]) -> List[PageObject]:
        """Return the pages of ``source`` at ``indices`` in the order given.

        Pages are imported into this document by :meth:`add_page`.
        """

        source_pages = source._writer.pages
        return [source_pages[index] for index in indices]

    def add_page(self, page: PageObject | PageSize) -> PageObject:
        """Append ``page``, or a blank page when given a ``(width, height)`` pair."""

        if isinstance(page, PageObject):
            return self._writer.add_page(page)
        width, height = page
        return self._writer.add_blank_page(width=width, height=height)

    def remove_page(self, index: int) -> None:
        if not 0 <= index < self.page_count:
            raise IndexError(f"Page index {index} out of range for {self.page_count} page(s)")
        del self._writer.pages[index]

    def embed_image(self, data: bytes, fmt: str = "jpeg") -> EmbeddedImage:
        """Store encoded image ``data`` as an image XObject without re-encoding it."""

        if fmt.lower() not in {"jpeg", "jpg"}:
            raise ValueError(f"Unsupported image format: {fmt}")
        try:
            with Image.open(BytesIO(data)) as image:
                width, height = image.size
                mode = image.mode
        except (UnidentifiedImageError, OSError) as exc:
            raise ValueError("Image data is not a readable JPEG") from exc
        try:
            color_space = _COLOR_SPACES[mode]
        except KeyError as exc:
            raise ValueError(f"Unsupported JPEG color mode: {mode}") from exc

        stream = DecodedStreamObject()
        stream.update(
            {
                NameObject("/Type"): NameObject("/XObject"),
                NameObject("/Subtype"): NameObject("/Image"),
                NameObject("/Width"): NumberObject(width),
                NameObject("/Height"): NumberObject(height),
                NameObject("/ColorSpace"): NameObject(color_space),
                NameObject("/BitsPerComponent"): NumberObject(8),
                NameObject("/Filter"): NameObject("/DCTDecode"),
            }
        )
        stream.set_data(data)
        reference = self._writer._add_object(stream)
        return EmbeddedImage(reference=reference, width=width, height=height)

    def draw_image(
        self,
        page: PageObject,
        image: EmbeddedImage,
        *,
        x: float,
        y: float,
        width: float,
        height: float,
    ) -> None:
        """Replace the contents of ``page`` with ``image`` drawn in the given box."""

        name = NameObject(f"/Im{self._image_count}")
        self._image_count += 1

        resources = page.get(NameObject("/Resources"))
        if resources is None:
            resources = DictionaryObject()
            page[NameObject("/Resources")] = resources
        resources = resources.get_object()
        xobjects = resources.get(NameObject("/XObject"))
        if xobjects is None:
            xobjects = DictionaryObject()
            resources[NameObject("/XObject")] = xobjects
        xobjects.get_object()[name] = image.reference

        operators = (
            f"q {_number(width)} 0 0 {_number(height)} {_number(x)} {_number(y)} cm {name} Do Q"
        )
        content = DecodedStreamObject()
        content.set_data(operators.encode("ascii"))
        page[NameObject("/Contents")] = self._writer._add_object(content)

    def save(self) -> bytes:
        buffer = BytesIO()
        self._writer.write(buffer)
        return buffer.getvalue()


__all__ = ["PdfDocument", "EmbeddedImage", "PDF_MEDIA_TYPE"]
