"""Exception hierarchy shared by every pdfdesk tool."""

from __future__ import annotations

from typing import Iterable


class PdfDeskError(Exception):
    """Base exception for all errors raised by :mod:`pdfdesk`."""


class InvalidFileTypeError(PdfDeskError):
    """Raised when an uploaded file's extension is not accepted by a tool."""

    def __init__(self, name: str, accepted: Iterable[str]) -> None:
        self.name = name
        self.accepted = tuple(accepted)
        message = f"Invalid file type for {name!r}. Please upload {', '.join(self.accepted)} files."
        super().__init__(message)


class EmptyRangeError(PdfDeskError):
    """Raised when a page range specification is missing or blank."""

    def __init__(self) -> None:
        super().__init__("Page range is required.")


class NoValidPagesError(PdfDeskError):
    """Raised when no page survives parsing and validation."""


class DocumentLoadError(PdfDeskError):
    """Raised when input bytes cannot be decoded as a PDF document."""


class RenderError(PdfDeskError):
    """Raised when a page cannot be rasterized or encoded."""


class InvalidQualityError(PdfDeskError, ValueError):
    """Raised when a compression quality falls outside ``(0, 1]``."""

    def __init__(self, quality: object) -> None:
        self.quality = quality
        super().__init__(f"Compression quality must be a number in (0, 1], got {quality!r}")


class InvalidScaleError(PdfDeskError, ValueError):
    """Raised when a render scale is not a positive finite number."""

    def __init__(self, scale: object) -> None:
        self.scale = scale
        super().__init__(f"Render scale must be a positive number, got {scale!r}")


class SessionBusyError(PdfDeskError):
    """Raised when a session is asked to run while another run is in flight."""


class OperationCancelledError(PdfDeskError):
    """Raised when a running operation observes a cancellation request."""


__all__ = [
    "PdfDeskError",
    "InvalidFileTypeError",
    "EmptyRangeError",
    "NoValidPagesError",
    "DocumentLoadError",
    "RenderError",
    "InvalidQualityError",
    "InvalidScaleError",
    "SessionBusyError",
    "OperationCancelledError",
]
