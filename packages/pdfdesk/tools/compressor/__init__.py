"""Compression tool exposed through the pdfdesk tools namespace."""

from __future__ import annotations

from .compress import (
    DESCRIPTOR,
    CompressTool,
    compress_into_document,
    compress_pdf,
    parse_quality,
    parse_scale,
)

__all__ = [
    "CompressTool",
    "compress_pdf",
    "compress_into_document",
    "parse_quality",
    "parse_scale",
    "DESCRIPTOR",
]
