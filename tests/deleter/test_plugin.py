from __future__ import annotations

import pytest

from pdfdesk.core.exceptions import EmptyRangeError, NoValidPagesError
from pdfdesk.tools.common.interfaces import ToolContext
from pdfdesk.tools.common.pipeline import Operation, create_tool
from pdfdesk.tools.deleter import delete_pages

from ..helpers import page_widths


def test_delete_tool_removes_pages(sample_pdf: bytes) -> None:
    context = ToolContext(inputs=[sample_pdf], options={"range": "2,4"})
    result = create_tool(Operation.DELETE, context).run()

    assert result.filename == "deleted.pdf"
    assert result.media_type == "application/pdf"
    assert result.page_count == 3
    assert page_widths(result.data) == [100, 120, 140]


@pytest.mark.parametrize("spec", ["2,4", "4,2", "4, 2, 2", "2, 4-4"])
def test_delete_is_independent_of_spec_order(sample_pdf: bytes, spec: str) -> None:
    assert page_widths(delete_pages(sample_pdf, spec)) == [100, 120, 140]


def test_delete_contiguous_range(sample_pdf: bytes) -> None:
    assert page_widths(delete_pages(sample_pdf, "1-3")) == [130, 140]


def test_delete_ignores_pages_outside_document(sample_pdf: bytes) -> None:
    assert page_widths(delete_pages(sample_pdf, "5, 9, 0")) == [100, 110, 120, 130]


def test_delete_every_page_leaves_empty_document(sample_pdf: bytes) -> None:
    assert page_widths(delete_pages(sample_pdf, "1-5")) == []


@pytest.mark.parametrize("spec", ["", "  "])
def test_delete_blank_range_fails_before_loading(spec: str) -> None:
    with pytest.raises(EmptyRangeError):
        delete_pages(b"not a pdf", spec)


def test_delete_without_valid_pages(sample_pdf: bytes) -> None:
    with pytest.raises(NoValidPagesError):
        delete_pages(sample_pdf, "6-9")
