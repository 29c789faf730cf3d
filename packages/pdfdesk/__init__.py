"""In-process PDF editing: merge, split, delete pages and compress."""

from __future__ import annotations

from typing import Iterable

from .core.document import PDF_MEDIA_TYPE, PdfDocument
from .core.exceptions import (
    DocumentLoadError,
    EmptyRangeError,
    InvalidFileTypeError,
    InvalidQualityError,
    InvalidScaleError,
    NoValidPagesError,
    OperationCancelledError,
    PdfDeskError,
    RenderError,
    SessionBusyError,
)
from .core.pages import parse_page_range, require_range_spec, validate_page_indices
from .core.renderer import PageRenderer
from .tools.common.interfaces import (
    CancellationToken,
    ProgressCallback,
    ProgressEvent,
    ToolContext,
    ToolDescriptor,
    ToolOutput,
)
from .tools.common.pipeline import Operation, create_tool, describe, descriptors
from .tools.common.session import EditingSession, UploadedFile
from .tools.compressor import compress_pdf
from .tools.deleter import delete_pages
from .tools.merger import merge_pdfs
from .tools.splitter import split_pdf

__version__ = "0.1.0"

__all__ = [
    "PDF_MEDIA_TYPE",
    "PdfDocument",
    "PageRenderer",
    "parse_page_range",
    "require_range_spec",
    "validate_page_indices",
    "merge_pdfs",
    "split_pdf",
    "delete_pages",
    "compress_pdf",
    "merge_documents",
    "split_document",
    "delete_document_pages",
    "compress_document",
    "Operation",
    "create_tool",
    "describe",
    "descriptors",
    "EditingSession",
    "UploadedFile",
    "CancellationToken",
    "ProgressCallback",
    "ProgressEvent",
    "ToolContext",
    "ToolDescriptor",
    "ToolOutput",
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


def merge_documents(inputs: Iterable[bytes], **hooks) -> ToolOutput:
    """Convenience wrapper around the merge tool."""

    context = ToolContext(inputs=list(inputs), **hooks)
    return create_tool(Operation.MERGE, context).run()


def split_document(input: bytes, page_range: str, **hooks) -> ToolOutput:
    """Convenience wrapper around the split tool."""

    context = ToolContext(inputs=[input], options={"range": page_range}, **hooks)
    return create_tool(Operation.SPLIT, context).run()


def delete_document_pages(input: bytes, page_range: str, **hooks) -> ToolOutput:
    """Convenience wrapper around the delete tool."""

    context = ToolContext(inputs=[input], options={"range": page_range}, **hooks)
    return create_tool(Operation.DELETE, context).run()


def compress_document(input: bytes, quality: float | None = None, **hooks) -> ToolOutput:
    """Convenience wrapper around the compression tool."""

    context = ToolContext(inputs=[input], options={"quality": quality}, **hooks)
    return create_tool(Operation.COMPRESS, context).run()
