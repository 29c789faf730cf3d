"""Delete-pages tool exposed through the pdfdesk tools namespace."""

from __future__ import annotations

from .delete import DESCRIPTOR, DeleteTool, delete_from_document, delete_pages

__all__ = ["DeleteTool", "delete_pages", "delete_from_document", "DESCRIPTOR"]
