"""CLI helpers for merging PDFs."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...tools.common.pipeline import Operation
from ...tools.common.session import EditingSession, UploadedFile


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    parser = subparsers.add_parser("merge", help="Merge multiple PDFs into one")
    parser.add_argument("inputs", nargs="+", help="Input PDF files, in output order")
    parser.add_argument("-o", "--output", help="Output PDF path (default: merged.pdf)")
    parser.set_defaults(build_session=_build_session)


def _build_session(args) -> EditingSession:
    session = EditingSession(Operation.MERGE)
    session.add_files(UploadedFile.from_path(path) for path in args.inputs)
    return session
