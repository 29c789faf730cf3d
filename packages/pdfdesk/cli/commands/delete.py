"""CLI helpers for the delete command."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...tools.common.pipeline import Operation
from ...tools.common.session import EditingSession, UploadedFile


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("delete", help="Remove pages from a PDF")
    parser.add_argument("input", help="Input PDF file")
    parser.add_argument("range", help="Pages to delete, e.g. '1-3, 5'")
    parser.add_argument("-o", "--output", help="Output PDF path (default: deleted.pdf)")
    parser.set_defaults(build_session=_build_session)


def _build_session(args) -> EditingSession:
    session = EditingSession(Operation.DELETE, options={"range": args.range})
    session.add_files([UploadedFile.from_path(args.input)])
    return session
