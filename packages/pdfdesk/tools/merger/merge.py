"""Merge several PDF documents into one, preserving input order."""

from __future__ import annotations

from typing import Sequence

from ...core.document import PDF_MEDIA_TYPE, PdfDocument
from ...core.exceptions import NoValidPagesError
from ...core.utils import get_logger
from ..common.interfaces import BaseTool, ToolContext, ToolDescriptor, ToolOutput

LOGGER = get_logger("pdfdesk.tools.merge")

OUTPUT_FILENAME = "merged.pdf"

DESCRIPTOR = ToolDescriptor(
    operation="merge",
    title="Merge PDF",
    description="Combine multiple PDFs into one single document.",
    multiple=True,
)


def merge_into_document(files: Sequence[bytes], context: ToolContext | None = None) -> PdfDocument:
    """Concatenate every page of ``files`` into a new document."""

    context = context or ToolContext()
    if not files:
        raise NoValidPagesError("No input PDFs provided")

    merged = PdfDocument.create()
    for position, data in enumerate(files, start=1):
        context.check_cancelled()
        source = PdfDocument.load(data)
        LOGGER.debug("Appending %d page(s) from input %d", source.page_count, position)
        for page in merged.copy_pages(source, range(source.page_count)):
            merged.add_page(page)

    if merged.page_count == 0:
        raise NoValidPagesError("Input PDFs contain no pages")
    return merged


def merge_pdfs(files: Sequence[bytes], context: ToolContext | None = None) -> bytes:
    """Merge ``files`` in the order supplied and return the serialized result."""

    merged = merge_into_document(files, context)
    data = merged.save()
    LOGGER.info("Merged %d PDF(s) into %d page(s)", len(files), merged.page_count)
    return data


class MergeTool(BaseTool):
    name = "merge"
    descriptor = DESCRIPTOR

    def run(self) -> ToolOutput:
        context = self.context
        context.report("Merging PDFs...")
        merged = merge_into_document(list(context.inputs), context)
        result = ToolOutput(
            data=merged.save(),
            filename=OUTPUT_FILENAME,
            media_type=PDF_MEDIA_TYPE,
            page_count=merged.page_count,
        )
        LOGGER.info("Merged %d PDF(s) into %d page(s)", len(context.inputs), result.page_count)
        context.resources["result"] = result
        return result


__all__ = ["MergeTool", "merge_pdfs", "merge_into_document", "DESCRIPTOR"]
