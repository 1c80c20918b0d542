from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from pathlib import Path

from .config import DEFAULT_SELECTOR, ExtractorConfig
from .documents import StaticHtmlDocument, SwatchDocument, render_browser_document
from .extractor import SwatchExtractor
from .formatters import CONST_NAME_RE, format_extraction_errors
from .models import MalformedColorError

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_MALFORMED = 1
EXIT_INPUT = 2


def _const_name(value: str) -> str:
    if not CONST_NAME_RE.fullmatch(value):
        raise argparse.ArgumentTypeError(
            f"{value!r} is not an upper-case identifier (e.g. LEE_COLOR_GELS)"
        )
    return value


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="gel-scraper",
        description="Print color_gel! literals for the colour swatches on a saved filter listing page",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  gel-scraper lee_filters.html
  gel-scraper lee_filters.html --browser --skip-malformed
  gel-scraper lee_filters.html --const LEE_COLOR_GELS --output src/color/gel/lee.rs
  curl -s https://example.com/filters | gel-scraper -
        """,
    )
    parser.add_argument(
        "source",
        type=str,
        help="Path to a saved HTML page, or '-' to read the page from stdin",
    )
    parser.add_argument(
        "--selector",
        type=str,
        default=DEFAULT_SELECTOR,
        help=f"CSS selector for the swatch anchors (default: {DEFAULT_SELECTOR!r})",
    )
    parser.add_argument(
        "--browser",
        action="store_true",
        help="Render the page in headless Chromium via Playwright before reading it",
    )
    parser.add_argument(
        "--skip-malformed",
        action="store_true",
        help="Skip elements whose background color is not rgb(R, G, B) instead of aborting",
    )
    parser.add_argument(
        "--escape-names",
        action="store_true",
        help="Backslash-escape double quotes and backslashes in swatch names",
    )
    parser.add_argument(
        "--const",
        dest="const_name",
        type=_const_name,
        default=None,
        help="Wrap the literals in a Rust module exporting `pub const NAME: &[ColorGel]`",
    )
    parser.add_argument(
        "-o",
        "--output",
        type=Path,
        default=None,
        help="Write to this file instead of stdout",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("-v", "--verbose", action="store_true", help="Log debug details")
    verbosity.add_argument("-q", "--quiet", action="store_true", help="Only log errors")
    return parser


def _read_source(source: str) -> str:
    if source == "-":
        return sys.stdin.read()
    return Path(source).read_text(encoding="utf-8")


def load_document(html: str, config: ExtractorConfig, use_browser: bool) -> SwatchDocument:
    if use_browser:
        return asyncio.run(render_browser_document(html, config.selector, config))
    return StaticHtmlDocument(html)


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    level = logging.DEBUG if args.verbose else logging.ERROR if args.quiet else logging.INFO
    logging.basicConfig(level=level, format="%(levelname)s:%(message)s")

    config = ExtractorConfig(
        selector=args.selector,
        on_malformed="skip" if args.skip_malformed else "fail",
        escape_names=args.escape_names,
        const_name=args.const_name,
    )
    extractor = SwatchExtractor(config)

    try:
        html = _read_source(args.source)
    except (OSError, UnicodeDecodeError) as exc:
        logger.error("Could not read %s: %s", args.source, exc)
        return EXIT_INPUT

    try:
        document = load_document(html, config, args.browser)
    except (RuntimeError, TimeoutError) as exc:
        logger.error("Browser render failed: %s", exc)
        return EXIT_INPUT

    try:
        result = extractor.extract(document)
    except MalformedColorError as exc:
        logger.error("%s", exc)
        return EXIT_MALFORMED

    text = extractor.format(result)
    errors = format_extraction_errors(result)
    if errors:
        print(errors, file=sys.stderr)

    if args.output is not None:
        try:
            args.output.write_text(text + "\n" if text else "", encoding="utf-8")
        except OSError as exc:
            logger.error("Could not write %s: %s", args.output, exc)
            return EXIT_INPUT
        logger.info("Wrote %d swatch(es) to %s", len(result.swatches), args.output)
    elif text:
        print(text)

    return EXIT_OK
