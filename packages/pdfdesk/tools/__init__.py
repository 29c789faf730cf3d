"""Namespace for the pdfdesk document editing tools."""

from __future__ import annotations

from .common.pipeline import Operation, create_tool, describe, descriptors

__all__ = ["Operation", "create_tool", "describe", "descriptors"]
