"""Command line entry point: download a page, optionally select from it, print it."""

import argparse
import asyncio
import sys
from typing import Optional, Sequence

from scrape.core.config import settings
from scrape.core.errors import ScrapeError
from scrape.render.printer import print_content
from scrape.schemas import RequestOptions
from scrape.services.pipeline import run_pipeline

def _positive_int(value: str) -> int:
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"expected a positive count, got {value}")
    return number

def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="scrape", description="Simple tool to download and parse HTML")
    parser.add_argument("url", help="which page to download")
    parser.add_argument("selector", nargs="?", help="select html from the downloaded page (css selector)")
    parser.add_argument("-r", "--regex", help="apply regex to result")
    parser.add_argument("-a", "--attribute", help="select a certain attribute")
    parser.add_argument("-q", "--quiet", action="store_true", help="do not print progress or warnings")
    parser.add_argument("-m", "--mozilla", action="store_true", help="pretend to be Mozilla, like everyone else")
    parser.add_argument(
        "--headers",
        action="store_true",
        default=settings.PRINT_HEADERS,
        help="print response headers (env: HEADERS)",
    )
    parser.add_argument("-n", "--count", type=_positive_int, help="print count nodes only")
    parser.add_argument("--no-colors", action="store_true", help="turn off syntax highlighting")
    parser.add_argument("-t", "--theme", default=settings.THEME, help="color syntax highlighting theme")
    parser.add_argument("-l", "--lang", help="the syntax which should be used (default: auto-detect)")
    parser.add_argument("--version", action="version", version=f"%(prog)s {settings.VERSION}")
    return parser

def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    options = RequestOptions(
        emulate_browser=args.mozilla,
        show_response_headers=args.headers,
        quiet=args.quiet,
        verbose=settings.LOG_ENABLED,
    )

    try:
        content = asyncio.run(
            run_pipeline(
                args.url,
                options,
                selector=args.selector,
                attribute=args.attribute,
                count=args.count,
                regex=args.regex,
            )
        )
        print_content(content, theme=args.theme, no_colors=args.no_colors, lang=args.lang)
    except ScrapeError as e:
        print(str(e), file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130

    return 0

def run() -> None:
    sys.exit(main())

if __name__ == "__main__":
    run()
