"""Command line interface for pdfdesk."""
