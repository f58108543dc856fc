"""Command-line entrypoint."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from typing import Sequence

from openthesaurus.config import get_settings
from openthesaurus.logging import configure_logging
from openthesaurus.services.thesaurus import ThesaurusService
from openthesaurus.services.transport import build_client
from openthesaurus.utils.formatting import format_result, result_to_dict


def build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="openthesaurus",
        description="Look up synonyms on openthesaurus.de.",
    )
    parser.add_argument("query", nargs="+", help="word or phrase to look up")
    parser.add_argument("--json", action="store_true", help="print the result as JSON")
    parser.add_argument("-v", "--verbose", action="store_true", help="log debug output to stderr")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    args = build_arg_parser().parse_args(argv)
    settings = get_settings()
    level = logging.DEBUG if args.verbose else getattr(logging, settings.log_level)
    configure_logging(level)

    query = " ".join(args.query)
    with build_client(settings) as client:
        result = ThesaurusService(client, settings=settings).query(query)

    if result is None:
        print(f"No result available for {query!r}.", file=sys.stderr)
        return 1

    if args.json:
        print(json.dumps(result_to_dict(result), ensure_ascii=False, indent=2))
    else:
        print(format_result(result))
    return 0


if __name__ == "__main__":
    sys.exit(main())
