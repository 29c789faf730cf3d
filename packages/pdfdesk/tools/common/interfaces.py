"""Core interfaces and context objects shared by pdfdesk tools."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Sequence

from ...core.exceptions import NoValidPagesError, OperationCancelledError
from ...core.utils import get_logger

LOGGER = get_logger("pdfdesk.tools")


@dataclass(frozen=True, slots=True)
class ProgressEvent:
    """Observable progress signal emitted while a tool runs."""

    message: str
    current: int | None = None
    total: int | None = None


ProgressCallback = Callable[[ProgressEvent], None]


class CancellationToken:
    """Cooperative cancellation flag checked by tools between units of work."""

    def __init__(self) -> None:
        self._event = threading.Event()

    def cancel(self) -> None:
        self._event.set()

    @property
    def cancelled(self) -> bool:
        return self._event.is_set()


@dataclass(frozen=True, slots=True)
class OptionSpec:
    """Declares one user supplied option of a tool."""

    name: str
    kind: type
    default: Any = None
    help: str = ""
    minimum: float | None = None
    maximum: float | None = None


@dataclass(frozen=True, slots=True)
class ToolDescriptor:
    """Static metadata describing what a tool accepts."""

    operation: str
    title: str
    description: str
    extensions: tuple[str, ...] = (".pdf",)
    multiple: bool = False
    options: tuple[OptionSpec, ...] = ()

    def accepts(self, extension: str) -> bool:
        return extension.lower() in self.extensions


@dataclass(frozen=True, slots=True)
class ToolOutput:
    """Normalized result shared by the CLI and library wrappers."""

    data: bytes
    filename: str
    media_type: str
    page_count: int

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass
class ToolContext:
    """Holds the inputs and execution hooks for one tool invocation."""

    inputs: Sequence[bytes] = field(default_factory=list)
    options: Mapping[str, Any] = field(default_factory=dict)
    progress: ProgressCallback | None = None
    cancel_token: CancellationToken | None = None
    resources: dict[str, Any] = field(default_factory=dict)

    def option(self, name: str, default: Any = None) -> Any:
        value = self.options.get(name)
        return default if value is None else value

    def report(self, message: str, *, current: int | None = None, total: int | None = None) -> None:
        LOGGER.debug(message)
        if self.progress is not None:
            self.progress(ProgressEvent(message, current, total))

    def check_cancelled(self) -> None:
        if self.cancel_token is not None and self.cancel_token.cancelled:
            raise OperationCancelledError("Operation was cancelled")


class BaseTool:
    """Base class for the pdfdesk tools."""

    name: str
    descriptor: ToolDescriptor

    def __init__(self, context: ToolContext) -> None:
        self.context = context

    def single_input(self) -> bytes:
        if not self.context.inputs:
            raise NoValidPagesError("No input PDF provided")
        return self.context.inputs[0]

    def run(self) -> ToolOutput:  # pragma: no cover - to be implemented by subclasses
        raise NotImplementedError


__all__ = [
    "BaseTool",
    "CancellationToken",
    "OptionSpec",
    "ProgressCallback",
    "ProgressEvent",
    "ToolContext",
    "ToolDescriptor",
    "ToolOutput",
]
