"""
Booster Odds Arg Parser to determine what actions to take
"""

import argparse
import pathlib
from typing import List, Optional


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    """
    Parse command line arguments from user to determine how to
    run the card pipeline.
    :param argv: Arguments to parse, defaults to sys.argv
    :return: Namespace of requests
    """
    parser = argparse.ArgumentParser("boosterodds")

    parser.add_argument(
        "input",
        type=pathlib.Path,
        metavar="BULK_FILE",
        help="Scryfall 'Default Cards' bulk JSON file (optionally gzipped).",
    )
    parser.add_argument(
        "--output-dir",
        "-o",
        type=pathlib.Path,
        default=None,
        help="Directory for processed-cards.ndjson, sets.json and sets/. "
        "Defaults to BOOSTERODDS_OUTPUT_PATH/output.",
    )
    parser.add_argument(
        "--language",
        "-l",
        type=str,
        default=None,
        help="Only keep printings in this language code (default from config, 'en').",
    )
    parser.add_argument(
        "--progress-interval",
        type=int,
        default=None,
        metavar="N",
        help="Log progress every N cards read. 0 disables progress lines.",
    )

    pretty_group = parser.add_mutually_exclusive_group()
    pretty_group.add_argument(
        "--pretty",
        "-p",
        dest="pretty",
        action="store_true",
        default=None,
        help="Indent the sets.json and per-set files.",
    )
    pretty_group.add_argument(
        "--minify",
        "-m",
        dest="pretty",
        action="store_false",
        help="Write the sets.json and per-set files without indentation.",
    )

    parsed_args = parser.parse_args(argv)

    if parsed_args.progress_interval is not None and parsed_args.progress_interval < 0:
        parser.error("--progress-interval must not be negative")

    return parsed_args
