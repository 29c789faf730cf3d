"""Shared building blocks for pdfdesk tools."""
