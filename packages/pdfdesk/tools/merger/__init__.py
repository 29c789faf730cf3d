"""Merge tool exposed through the pdfdesk tools namespace."""

from __future__ import annotations

from .merge import DESCRIPTOR, MergeTool, merge_into_document, merge_pdfs

__all__ = ["MergeTool", "merge_pdfs", "merge_into_document", "DESCRIPTOR"]
