"""Extract keyword suggestions for a text from the command line."""
from __future__ import annotations

import argparse
import json
import sys

from domain.errors import KeywordServiceError
from infrastructure.config import ServiceConfig, build_default_container
from ui.logging_utils import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument("text", help="Text to analyse, or '-' to read it from stdin.")
    parser.add_argument(
        "--no-cache",
        action="store_true",
        help="Always call the annotation service instead of serving a cached result.",
    )
    parser.add_argument(
        "--json",
        action="store_true",
        help="Print the keywords as a JSON document.",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    config = ServiceConfig.from_env()
    setup_logging(config)
    text = sys.stdin.read() if args.text == "-" else args.text

    container = build_default_container(config)
    try:
        annotations = container.keyword_service.get_keywords(text, use_cache=not args.no_cache)
    except KeywordServiceError as exc:
        print(exc.message, file=sys.stderr)
        return 1

    if args.json:
        payload = {"success": True, "keywords": [annotation.to_dict() for annotation in annotations]}
        print(json.dumps(payload, ensure_ascii=False, indent=2))
    else:
        for annotation in annotations:
            print(f"{annotation.keyword}\t{annotation.confidence:.3f}\t{annotation.uri}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
