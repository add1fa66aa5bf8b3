"""
Booster Odds output generator to write out contents to file & accessory methods
"""
import logging
import pathlib
from typing import Any, BinaryIO, Dict, Iterator

import orjson

from . import constants
from .classes import (
    BoosteroddsCardObject,
    BoosteroddsSetStatsObject,
    JsonObject,
)
from .utils import get_windows_safe_file_name

LOGGER = logging.getLogger(__name__)


def _default(obj: Any) -> Any:
    """
    orjson fallback for Booster Odds objects
    :param obj: Object orjson cannot serialize natively
    :return: Serializable form
    """
    if isinstance(obj, JsonObject):
        return obj.to_json()
    raise TypeError(f"Type is not JSON serializable: {type(obj).__name__}")


def _dump_options(pretty_print: bool) -> int:
    return orjson.OPT_INDENT_2 if pretty_print else 0


def write_compact_card(file: BinaryIO, card: BoosteroddsCardObject) -> None:
    """
    Append one compact card as a line of NDJSON
    :param file: Open binary output stream
    :param card: Card to write
    """
    file.write(orjson.dumps(card, default=_default))
    file.write(b"\n")


def write_to_file(
    write_file: pathlib.Path, file_contents: Any, pretty_print: bool
) -> None:
    """
    Dump content to a JSON file
    :param write_file: File to dump to
    :param file_contents: Contents to dump
    :param pretty_print: Pretty or minimal
    """
    write_file.parent.mkdir(parents=True, exist_ok=True)
    with write_file.open("wb") as file:
        file.write(
            orjson.dumps(
                file_contents, default=_default, option=_dump_options(pretty_print)
            )
        )


def write_set_stats(
    write_file: pathlib.Path,
    set_stats: Dict[str, BoosteroddsSetStatsObject],
    pretty_print: bool,
) -> None:
    """
    Dump the statistics table, keyed by set code
    :param write_file: Statistics file
    :param set_stats: Set code => statistics
    :param pretty_print: Pretty or minimal
    """
    LOGGER.info(f"Generating {write_file.name}")
    write_to_file(write_file, set_stats, pretty_print)
    LOGGER.debug(f"Finished Generating {write_file.name}")


def get_set_table_path(directory: pathlib.Path, set_code: str) -> pathlib.Path:
    """
    Location of a set's deduplicated table
    :param directory: Directory of per-set tables
    :param set_code: Set code
    :return: Path to the set's file
    """
    return directory.joinpath(f"{get_windows_safe_file_name(set_code)}.json")


def write_set_tables(
    directory: pathlib.Path,
    set_tables: Dict[str, Dict[str, BoosteroddsCardObject]],
    pretty_print: bool,
) -> int:
    """
    Dump one file per set, keyed by deduplication identity
    :param directory: Directory of per-set tables
    :param set_tables: Set code => (identity => card)
    :param pretty_print: Pretty or minimal
    :return: Number of set files written
    """
    LOGGER.info("Writing individual set files...")
    directory.mkdir(parents=True, exist_ok=True)

    sets_written = 0
    for set_code, cards in set_tables.items():
        write_to_file(get_set_table_path(directory, set_code), cards, pretty_print)
        sets_written += 1

        if sets_written % constants.SET_FILES_PROGRESS_INTERVAL == 0:
            LOGGER.info(f"  Written {sets_written:,} set files...")

    return sets_written


def load_set_stats(read_file: pathlib.Path) -> Dict[str, BoosteroddsSetStatsObject]:
    """
    Load the statistics table back for probability queries
    :param read_file: Statistics file
    :return: Set code => statistics
    """
    with read_file.open("rb") as file:
        content: Dict[str, Dict[str, Any]] = orjson.loads(file.read())

    return {
        set_code: BoosteroddsSetStatsObject.from_json(set_content)
        for set_code, set_content in content.items()
    }


def load_set_table(
    directory: pathlib.Path, set_code: str
) -> Dict[str, BoosteroddsCardObject]:
    """
    Load one set's deduplicated table
    :param directory: Directory of per-set tables
    :param set_code: Set code
    :return: Identity => card
    """
    with get_set_table_path(directory, set_code).open("rb") as file:
        content: Dict[str, Dict[str, Any]] = orjson.loads(file.read())

    return {
        identity: BoosteroddsCardObject.from_json(card_content)
        for identity, card_content in content.items()
    }


def iterate_compact_cards(read_file: pathlib.Path) -> Iterator[BoosteroddsCardObject]:
    """
    Lazily read back the compact card stream
    :param read_file: NDJSON file
    :return: Iterator of cards, in file order
    """
    with read_file.open("rb") as file:
        for line in file:
            if line.strip():
                yield BoosteroddsCardObject.from_json(orjson.loads(line))
