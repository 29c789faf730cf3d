"""Closed dispatch from an :class:`Operation` to its tool implementation."""

from __future__ import annotations

from enum import Enum
from typing import Dict

from ..compressor.compress import CompressTool
from ..deleter.delete import DeleteTool
from ..merger.merge import MergeTool
from ..splitter.split import SplitTool
from .interfaces import BaseTool, ToolContext, ToolDescriptor


class Operation(str, Enum):
    """The fixed set of document editing operations."""

    MERGE = "merge"
    SPLIT = "split"
    DELETE = "delete"
    COMPRESS = "compress"


_TOOLS: Dict[Operation, type[BaseTool]] = {
    Operation.MERGE: MergeTool,
    Operation.SPLIT: SplitTool,
    Operation.DELETE: DeleteTool,
    Operation.COMPRESS: CompressTool,
}


def tool_class(operation: Operation | str) -> type[BaseTool]:
    return _TOOLS[Operation(operation)]


def create_tool(operation: Operation | str, context: ToolContext) -> BaseTool:
    return tool_class(operation)(context)


def describe(operation: Operation | str) -> ToolDescriptor:
    return tool_class(operation).descriptor


def descriptors() -> list[ToolDescriptor]:
    return [tool.descriptor for tool in _TOOLS.values()]


__all__ = ["Operation", "create_tool", "describe", "descriptors", "tool_class"]
