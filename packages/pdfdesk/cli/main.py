"""Command line interface for the pdfdesk toolkit."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from ..core.config import load_settings
from ..core.exceptions import PdfDeskError
from ..core.utils import get_logger, resolve_path
from ..tools.common.interfaces import ProgressEvent
from ..tools.common.pipeline import descriptors
from .commands import compress, delete, merge, split

COMMAND_MODULES = [merge, split, delete, compress]

LOGGER = get_logger("pdfdesk.cli")


def _list_tools(_args) -> int:
    for descriptor in descriptors():
        options = ", ".join(option.name for option in descriptor.options) or "-"
        files = "multiple files" if descriptor.multiple else "one file"
        print(f"{descriptor.operation:<10} {descriptor.title}: {descriptor.description} ({files}; options: {options})")
    return 0


def _create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pdfdesk", description="pdfdesk CLI")
    subparsers = parser.add_subparsers(dest="command")
    subparsers.required = True
    for module in COMMAND_MODULES:
        module.configure_parser(subparsers)
    tools_parser = subparsers.add_parser("tools", help="List the available tools")
    tools_parser.set_defaults(handler=_list_tools)
    return parser


def _print_progress(event: ProgressEvent) -> None:
    print(event.message, file=sys.stderr)


def main(argv: Sequence[str] | None = None) -> int:
    parser = _create_parser()
    args = parser.parse_args(argv)
    logging.getLogger("pdfdesk").setLevel(load_settings().log_level)

    handler = getattr(args, "handler", None)
    if handler is not None:
        return handler(args)

    progress = _print_progress if getattr(args, "show_progress", False) else None
    try:
        session = args.build_session(args)
        result = session.run(progress=progress)
    except (PdfDeskError, OSError) as exc:
        LOGGER.debug("Command %s failed", args.command, exc_info=True)
        print(f"An error occurred: {exc}", file=sys.stderr)
        return 1

    destination = resolve_path(args.output or Path.cwd() / result.filename)
    destination.parent.mkdir(parents=True, exist_ok=True)
    destination.write_bytes(result.data)
    print(f"Wrote {result.page_count} page(s) to {destination}")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
