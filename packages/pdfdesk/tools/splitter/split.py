"""Extract a range of pages from a PDF into a new document."""

from __future__ import annotations

from ...core.document import PDF_MEDIA_TYPE, PdfDocument
from ...core.pages import require_range_spec, resolve_page_range
from ...core.utils import get_logger
from ..common.interfaces import BaseTool, OptionSpec, ToolContext, ToolDescriptor, ToolOutput

LOGGER = get_logger("pdfdesk.tools.split")

OUTPUT_FILENAME = "split.pdf"

DESCRIPTOR = ToolDescriptor(
    operation="split",
    title="Split PDF",
    description="Extract a range of pages from a PDF file.",
    options=(
        OptionSpec(
            name="range",
            kind=str,
            help="Page range to extract (e.g., 1-3, 5, 8-10)",
        ),
    ),
)


def extract_into_document(data: bytes, spec: str | None, context: ToolContext | None = None) -> PdfDocument:
    """Copy the pages selected by ``spec`` into a new document.

    Pages are emitted in ascending page order whatever order ``spec`` lists
    them in.
    """

    context = context or ToolContext()
    require_range_spec(spec)
    source = PdfDocument.load(data)
    indices = resolve_page_range(spec, source.page_count)
    LOGGER.debug("Extracting page indices %s of %d", indices, source.page_count)

    extracted = PdfDocument.create()
    for page in extracted.copy_pages(source, indices):
        context.check_cancelled()
        extracted.add_page(page)
    return extracted


def split_pdf(data: bytes, spec: str | None, context: ToolContext | None = None) -> bytes:
    """Return the serialized document holding the pages selected by ``spec``."""

    return extract_into_document(data, spec, context).save()


class SplitTool(BaseTool):
    name = "split"
    descriptor = DESCRIPTOR

    def run(self) -> ToolOutput:
        context = self.context
        spec = context.option("range")
        require_range_spec(spec)
        context.report("Splitting PDF...")
        extracted = extract_into_document(self.single_input(), spec, context)
        result = ToolOutput(
            data=extracted.save(),
            filename=OUTPUT_FILENAME,
            media_type=PDF_MEDIA_TYPE,
            page_count=extracted.page_count,
        )
        LOGGER.info("Extracted %d page(s)", result.page_count)
        context.resources["result"] = result
        return result


__all__ = ["SplitTool", "split_pdf", "extract_into_document", "DESCRIPTOR"]
