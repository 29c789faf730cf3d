"""Caller-owned editing session: the selected tool and its uploaded files."""

from __future__ import annotations

import threading
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, List

from ...core.exceptions import InvalidFileTypeError, NoValidPagesError, SessionBusyError
from ...core.utils import file_extension, get_logger
from .interfaces import CancellationToken, ProgressCallback, ToolContext, ToolDescriptor, ToolOutput
from .pipeline import Operation, create_tool, describe

LOGGER = get_logger("pdfdesk.session")


@dataclass(frozen=True, slots=True)
class UploadedFile:
    name: str
    data: bytes

    @property
    def extension(self) -> str:
        return file_extension(self.name)

    @classmethod
    def from_path(cls, path: str | Path) -> "UploadedFile":
        source = Path(path)
        return cls(name=source.name, data=source.read_bytes())


@dataclass
class EditingSession:
    """Tracks one tool selection and enforces a single run in flight.

    Single-file tools keep only the most recently added file; multi-file tools
    accumulate files in the order they were added.
    """

    operation: Operation
    files: List[UploadedFile] = field(default_factory=list)
    options: dict[str, Any] = field(default_factory=dict)
    _lock: threading.Lock = field(default_factory=threading.Lock, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        self.operation = Operation(self.operation)

    @property
    def descriptor(self) -> ToolDescriptor:
        return describe(self.operation)

    @property
    def running(self) -> bool:
        return self._lock.locked()

    def add_files(self, files: Iterable[UploadedFile]) -> None:
        """Add ``files``, rejecting any whose extension the tool does not accept.

        Accepted files are kept even when others in the same batch are rejected;
        :class:`InvalidFileTypeError` is raised afterwards naming the first
        rejected file.
        """

        descriptor = self.descriptor
        incoming = list(files)
        valid = [item for item in incoming if descriptor.accepts(item.extension)]
        if descriptor.multiple:
            self.files.extend(valid)
        elif valid:
            self.files = [valid[0]]

        rejected = [item for item in incoming if item not in valid]
        if rejected:
            LOGGER.warning("Rejected %d file(s) with unsupported type", len(rejected))
            raise InvalidFileTypeError(rejected[0].name, descriptor.extensions)

    def remove_file(self, index: int) -> UploadedFile:
        return self.files.pop(index)

    def reset(self) -> None:
        if self.running:
            raise SessionBusyError("Cannot reset a session while an operation is running")
        self.files = []
        self.options = {}

    def run(
        self,
        *,
        progress: ProgressCallback | None = None,
        cancel_token: CancellationToken | None = None,
    ) -> ToolOutput:
        if not self._lock.acquire(blocking=False):
            raise SessionBusyError("An operation is already running for this session")
        try:
            if not self.files:
                raise NoValidPagesError("No input files provided")
            context = ToolContext(
                inputs=[item.data for item in self.files],
                options=dict(self.options),
                progress=progress,
                cancel_token=cancel_token,
            )
            LOGGER.debug("Running %s on %d file(s)", self.operation.value, len(self.files))
            return create_tool(self.operation, context).run()
        finally:
            self._lock.release()


__all__ = ["EditingSession", "UploadedFile"]
