"""CLI helpers for compressing PDF files."""

from __future__ import annotations

from argparse import ArgumentParser, _SubParsersAction

from ...core.config import load_settings
from ...tools.common.pipeline import Operation
from ...tools.common.session import EditingSession, UploadedFile


def configure_parser(subparsers: _SubParsersAction[ArgumentParser]) -> None:
    settings = load_settings()
    parser = subparsers.add_parser("compress", help="Compress a PDF by re-encoding its pages as JPEG")
    parser.add_argument("input", help="Input PDF file")
    parser.add_argument("-o", "--output", help="Output PDF path (default: compressed.pdf)")
    parser.add_argument(
        "--quality",
        type=float,
        default=settings.default_quality,
        help="JPEG quality in (0, 1], lower is smaller (default: %(default)s)",
    )
    parser.add_argument(
        "--scale",
        type=float,
        default=settings.render_scale,
        help="Rendering scale relative to the page size (default: %(default)s)",
    )
    parser.set_defaults(build_session=_build_session, show_progress=True)


def _build_session(args) -> EditingSession:
    session = EditingSession(
        Operation.COMPRESS,
        options={"quality": args.quality, "scale": args.scale},
    )
    session.add_files([UploadedFile.from_path(args.input)])
    return session
