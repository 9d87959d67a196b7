"""
Command line entry point: render a post body from a file or stdin.

    python -m hive_renderer post.md --author alice --permlink hello-world
"""

import argparse
import sys
from typing import List, Optional

from loguru import logger

from .config import BASE_URL
from .exceptions import SecurityError
from .logging_setup import configure_logging
from .models import PostContext, RendererOptions
from .renderer import DefaultRenderer

EXIT_OK = 0
EXIT_EMPTY_INPUT = 1
EXIT_SECURITY_ERROR = 2


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Render Hive post Markdown/HTML into safe HTML.")
    parser.add_argument(
        "file",
        nargs="?",
        help="Input file (defaults to stdin).",
    )
    parser.add_argument("--author", help="Post author, used in log messages.")
    parser.add_argument("--permlink", help="Post permlink, used in log messages.")
    parser.add_argument(
        "--no-images",
        action="store_true",
        help="Replace images with a placeholder instead of rendering them.",
    )
    parser.add_argument("--base-url", default=BASE_URL, help="Base URL of the hosting site.")
    parser.add_argument("--log-level", default=None, help="Loguru level for stderr output.")
    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(argv)
    configure_logging(level=args.log_level)

    if args.file:
        with open(args.file, encoding="utf-8") as handle:
            text = handle.read()
    else:
        text = sys.stdin.read()
    if not text.strip():
        logger.error("Nothing to render: input is empty")
        return EXIT_EMPTY_INPUT

    renderer = DefaultRenderer(
        RendererOptions(base_url=args.base_url, do_not_show_images=args.no_images)
    )
    post_context = PostContext(author=args.author, permlink=args.permlink)

    try:
        html = renderer.render(text, post_context)
    except SecurityError as e:
        logger.error(f"Render rejected{post_context.describe()}: {str(e)}")
        return EXIT_SECURITY_ERROR

    for error in renderer.get_sanitization_errors():
        logger.warning(f"Sanitization{post_context.describe()}: {error}")

    sys.stdout.write(html)
    if not html.endswith("\n"):
        sys.stdout.write("\n")
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
