"""Remove a range of pages from a PDF."""

from __future__ import annotations

from ...core.document import PDF_MEDIA_TYPE, PdfDocument
from ...core.pages import require_range_spec, resolve_page_range
from ...core.utils import get_logger
from ..common.interfaces import BaseTool, OptionSpec, ToolContext, ToolDescriptor, ToolOutput

LOGGER = get_logger("pdfdesk.tools.delete")

OUTPUT_FILENAME = "deleted.pdf"

DESCRIPTOR = ToolDescriptor(
    operation="delete",
    title="Delete Pages",
    description="Remove specific pages from a PDF.",
    options=(
        OptionSpec(
            name="range",
            kind=str,
            help="Pages to delete (e.g., 1-3, 5)",
        ),
    ),
)


def delete_from_document(data: bytes, spec: str | None, context: ToolContext | None = None) -> PdfDocument:
    """Load ``data`` and remove the pages selected by ``spec`` in place."""

    context = context or ToolContext()
    require_range_spec(spec)
    document = PdfDocument.load(data)
    indices = resolve_page_range(spec, document.page_count)
    context.check_cancelled()

    # Highest index first so earlier removals never shift a pending target.
    for index in reversed(indices):
        document.remove_page(index)
    LOGGER.debug("Removed page indices %s, %d page(s) left", indices, document.page_count)
    return document


def delete_pages(data: bytes, spec: str | None, context: ToolContext | None = None) -> bytes:
    """Return ``data`` serialized without the pages selected by ``spec``."""

    return delete_from_document(data, spec, context).save()


class DeleteTool(BaseTool):
    name = "delete"
    descriptor = DESCRIPTOR

    def run(self) -> ToolOutput:
        context = self.context
        spec = context.option("range")
        require_range_spec(spec)
        context.report("Deleting pages...")
        document = delete_from_document(self.single_input(), spec, context)
        result = ToolOutput(
            data=document.save(),
            filename=OUTPUT_FILENAME,
            media_type=PDF_MEDIA_TYPE,
            page_count=document.page_count,
        )
        LOGGER.info("Document has %d page(s) after deletion", result.page_count)
        context.resources["result"] = result
        return result


__all__ = ["DeleteTool", "delete_pages", "delete_from_document", "DESCRIPTOR"]
