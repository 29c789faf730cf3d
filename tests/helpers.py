from __future__ import annotations

from io import BytesIO
from typing import Sequence

from pypdf import PdfReader, PdfWriter


def build_pdf(widths: Sequence[float], height: float = 200) -> bytes:
    writer = PdfWriter()
    for width in widths:
        writer.add_blank_page(width=width, height=height)
    writer.add_metadata({"/Producer": "pdfdesk-tests"})
    buffer = BytesIO()
    writer.write(buffer)
    return buffer.getvalue()


def read_pdf(data: bytes) -> PdfReader:
    return PdfReader(BytesIO(data))


def page_widths(data: bytes) -> list[int]:
    return [round(float(page.mediabox.width)) for page in read_pdf(data).pages]
