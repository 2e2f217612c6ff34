#!/usr/bin/env python3
"""
PDF Engine - command line front end
Main entry point
"""
import argparse
import base64
import logging
import sys
from typing import List, Optional

from .core.errors import PDFEngineError
from .core.models import (
    HeaderFooterConfig,
    HeaderFooterSlot,
    Redaction,
    WatermarkConfig,
    WatermarkPosition,
    WatermarkType,
)
from .session import EditorSession
from .utils.settings import Settings
from .utils.tokens import DATE_FORMATS

logger = logging.getLogger(__name__)


def _open(path: str, password: Optional[str], settings: Settings) -> EditorSession:
    session = EditorSession(settings)
    session.load_file(path, password)
    return session


def _write(path: str, data: bytes):
    with open(path, 'wb') as f:
        f.write(data)
    logger.info(f"Wrote {len(data)} bytes to {path}")


def cmd_info(args, settings: Settings) -> int:
    session = _open(args.input, args.password, settings)
    doc = session.document
    print(f"Pages: {doc.page_count}")
    print(f"Size: {doc.get_size()} bytes")
    for index in range(doc.page_count):
        width, height = doc.get_page_size(index)
        print(f"  [{index}] {width:.0f} x {height:.0f} pt, rotation {doc.get_page_rotation(index)}")
    for entry in doc.get_outline():
        print(f"{'  ' * entry['level']}{entry['title']} -> page {entry['page']}")
    return 0


def cmd_watermark(args, settings: Settings) -> int:
    session = _open(args.input, args.password, settings)
    if args.image:
        with open(args.image, 'rb') as f:
            image_data = base64.b64encode(f.read()).decode('ascii')
        config = WatermarkConfig(type=WatermarkType.IMAGE, image_data=image_data)
    else:
        config = WatermarkConfig(type=WatermarkType.TEXT, text=args.text)

    config.position = WatermarkPosition(args.position)
    config.opacity = args.opacity
    config.rotation = args.rotation
    config.font_size = args.font_size
    config.color = args.color
    config.image_scale = args.image_scale

    session.watermarks.add_watermark(config)
    _write(args.output, session.document.save())
    return 0


def cmd_header_footer(args, settings: Settings) -> int:
    session = _open(args.input, args.password, settings)
    header = HeaderFooterSlot(args.header_left, args.header_center, args.header_right)
    header.enabled = any((header.left, header.center, header.right))
    footer = HeaderFooterSlot(args.footer_left, args.footer_center, args.footer_right)
    footer.enabled = any((footer.left, footer.center, footer.right))

    config = HeaderFooterConfig(
        header=header,
        footer=footer,
        font_size=args.font_size,
        margin=args.margin,
        date_format=args.date_format,
    )
    session.headers_footers.add_header_footer(config)
    _write(args.output, session.document.save())
    return 0


def cmd_split(args, settings: Settings) -> int:
    session = _open(args.input, args.password, settings)
    first, second = session.pages.split_pdf(args.at)
    _write(args.first, first)
    _write(args.second, second)
    return 0


def cmd_extract(args, settings: Settings) -> int:
    session = _open(args.input, args.password, settings)
    _write(args.output, session.pages.extract_pages(args.pages))
    return 0


def cmd_merge(args, settings: Settings) -> int:
    session = _open(args.inputs[0], args.password, settings)
    for path in args.inputs[1:]:
        with open(path, 'rb') as f:
            session.pages.merge_pdf(f.read())
    _write(args.output, session.document.save())
    return 0


def cmd_compress(args, settings: Settings) -> int:
    session = _open(args.input, args.password, settings)
    before = session.document.get_size()
    data = session.document.compress()
    _write(args.output, data)
    print(f"{before} -> {len(data)} bytes")
    return 0


def cmd_redact(args, settings: Settings) -> int:
    session = _open(args.input, args.password, settings)
    redactions = [Redaction(int(page), x, y, w, h) for page, x, y, w, h in args.region]
    applied = session.redactions.apply_redactions(redactions)
    print(f"Applied {applied} redaction(s)")
    _write(args.output, session.document.save())
    return 0


def cmd_rotate(args, settings: Settings) -> int:
    session = _open(args.input, args.password, settings)
    pages = args.pages if args.pages else range(session.document.page_count)
    for index in pages:
        session.pages.rotate_page(index, args.angle)
    _write(args.output, session.document.save())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pdf-engine", description="Edit PDF documents in memory")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="log more (repeat for debug)")
    parser.add_argument("--config", help="JSON settings file")
    sub = parser.add_subparsers(dest="command", required=True)

    def add(name, func, help_text, output=True):
        p = sub.add_parser(name, help=help_text)
        p.add_argument("input")
        if output:
            p.add_argument("output")
        p.add_argument("--password")
        p.set_defaults(func=func)
        return p

    add("info", cmd_info, "show page count, sizes and outline", output=False)

    p = add("watermark", cmd_watermark, "stamp a watermark on every page")
    source = p.add_mutually_exclusive_group()
    source.add_argument("--text", default="CONFIDENTIAL")
    source.add_argument("--image", help="PNG or JPEG file")
    p.add_argument("--position", default="center", choices=[pos.value for pos in WatermarkPosition])
    p.add_argument("--opacity", type=float, default=30, help="percent")
    p.add_argument("--rotation", type=float, default=-45)
    p.add_argument("--font-size", type=float, default=48)
    p.add_argument("--color", default="#9CA3AF")
    p.add_argument("--image-scale", type=float, default=0.5)

    p = add("header-footer", cmd_header_footer, "add running headers and footers")
    for slot in ("header", "footer"):
        for align in ("left", "center", "right"):
            p.add_argument(f"--{slot}-{align}", default="")
    p.add_argument("--font-size", type=float, default=10)
    p.add_argument("--margin", type=float, default=30)
    p.add_argument("--date-format", default="short", choices=DATE_FORMATS)

    p = sub.add_parser("split", help="split into two files before page index AT")
    p.add_argument("input")
    p.add_argument("at", type=int)
    p.add_argument("first")
    p.add_argument("second")
    p.add_argument("--password")
    p.set_defaults(func=cmd_split)

    p = add("extract", cmd_extract, "copy selected pages to a new file")
    p.add_argument("--pages", type=int, nargs="+", required=True, help="zero-based page indices")

    p = sub.add_parser("merge", help="append the pages of every input to the first")
    p.add_argument("output")
    p.add_argument("inputs", nargs="+")
    p.add_argument("--password", help="password of the first input")
    p.set_defaults(func=cmd_merge)

    add("compress", cmd_compress, "rewrite with maximum compression")

    p = add("redact", cmd_redact, "black out regions permanently")
    p.add_argument("--region", type=float, nargs=5, action="append", required=True,
                   metavar=("PAGE", "X", "Y", "W", "H"),
                   help="1-based page number and top-left based rectangle in points")

    p = add("rotate", cmd_rotate, "rotate pages")
    p.add_argument("--angle", type=int, default=90, choices=(90, 180, 270))
    p.add_argument("--pages", type=int, nargs="+", help="zero-based page indices (default: all)")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point"""
    args = build_parser().parse_args(argv)

    level = logging.WARNING
    if args.verbose == 1:
        level = logging.INFO
    elif args.verbose > 1:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    settings = Settings(args.config)
    try:
        return args.func(args, settings)
    except (PDFEngineError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
