"""Split tool exposed through the pdfdesk tools namespace."""

from __future__ import annotations

from .split import DESCRIPTOR, SplitTool, extract_into_document, split_pdf

__all__ = ["SplitTool", "split_pdf", "extract_into_document", "DESCRIPTOR"]
