"""
Booster Odds Card Pipeline
Single pass over a Scryfall bulk snapshot: stream decode, filter,
emit compact cards as NDJSON, and accumulate per-set statistics.
"""

import dataclasses
import gzip
import logging
import pathlib
import shutil
from typing import Any, BinaryIO, Dict, Iterable, Iterator, Optional

import ijson

from . import constants
from .boosterodds_config import BoosteroddsConfig
from .card_filter import transform_card
from .classes import BoosteroddsCardObject, BoosteroddsSetStatsObject
from .output_generator import write_compact_card, write_set_stats, write_set_tables
from .set_aggregator import SetAggregator

LOGGER = logging.getLogger(__name__)

GZIP_MAGIC = b"\x1f\x8b"


@dataclasses.dataclass
class PipelineResult:
    """
    Counters and finalized tables of a pipeline run
    """

    read_count: int = 0
    kept_count: int = 0
    skipped_count: int = 0
    incomplete_count: int = 0
    set_stats: Dict[str, BoosteroddsSetStatsObject] = dataclasses.field(
        default_factory=dict
    )
    set_tables: Dict[str, Dict[str, BoosteroddsCardObject]] = dataclasses.field(
        default_factory=dict
    )
    set_files_written: int = 0
    compact_cards_path: Optional[pathlib.Path] = None
    set_stats_path: Optional[pathlib.Path] = None
    set_tables_path: Optional[pathlib.Path] = None


def stream_raw_cards(input_path: pathlib.Path) -> Iterator[Any]:
    """
    Lazily decode the top level array of a bulk file, one card at a time.
    Gzip compressed files are detected and decompressed on the fly.
    :param input_path: Scryfall bulk JSON (optionally gzipped)
    :return: Iterator of raw card objects
    """
    with input_path.open("rb") as raw_file:
        is_gzipped = raw_file.read(2) == GZIP_MAGIC
        raw_file.seek(0)

        if is_gzipped:
            with gzip.GzipFile(fileobj=raw_file) as gzip_file:
                yield from ijson.items(gzip_file, "item", use_float=True)
        else:
            yield from ijson.items(raw_file, "item", use_float=True)


def process_cards(
    raw_cards: Iterable[Any],
    output_file: BinaryIO,
    language: str,
    progress_interval: int = constants.DEFAULT_PROGRESS_INTERVAL,
) -> PipelineResult:
    """
    Filter every raw card, write kept ones to the compact stream
    and fold them into per-set statistics
    :param raw_cards: Raw Scryfall card objects, in snapshot order
    :param output_file: Open binary stream for compact NDJSON lines
    :param language: Language code to keep
    :param progress_interval: Log progress every N cards read
    :return: Counters and finalized per-set tables
    """
    result = PipelineResult()
    aggregator = SetAggregator()

    for raw_card in raw_cards:
        result.read_count += 1

        compact_card = transform_card(raw_card, language)
        if compact_card is not None:
            result.kept_count += 1
            write_compact_card(output_file, compact_card)
            aggregator.add_card(raw_card, compact_card)
        else:
            result.skipped_count += 1

        if progress_interval and result.read_count % progress_interval == 0:
            LOGGER.info(
                f"Read {result.read_count:,} | kept {result.kept_count:,} "
                f"| skipped {result.skipped_count:,}"
            )

    result.incomplete_count = aggregator.incomplete_count
    result.set_stats = aggregator.set_stats
    result.set_tables = aggregator.set_tables
    return result


def discard_partial_outputs(*paths: pathlib.Path) -> None:
    """
    Remove whatever a failed run left behind, outputs of
    an aborted run are never valid
    :param paths: Files or directories to remove
    """
    for path in paths:
        if path.is_dir():
            shutil.rmtree(path, ignore_errors=True)
        else:
            path.unlink(missing_ok=True)
        LOGGER.info(f"Discarded partial output {path}")


def run_pipeline(
    input_path: pathlib.Path,
    output_dir: Optional[pathlib.Path] = None,
    language: Optional[str] = None,
    pretty_print: Optional[bool] = None,
    progress_interval: Optional[int] = None,
) -> PipelineResult:
    """
    Turn a bulk snapshot into the compact card stream,
    the statistics table, and the per-set deduplicated tables.
    Any read or write failure aborts the run and discards its outputs.
    :param input_path: Scryfall bulk JSON
    :param output_dir: Where to write artifacts, defaults to config
    :param language: Language code to keep, defaults to config
    :param pretty_print: Indent JSON artifacts, defaults to config
    :param progress_interval: Log progress every N cards, defaults to config
    :return: Counters, tables and artifact locations
    """
    config = BoosteroddsConfig()
    output_dir = output_dir or config.output_path
    language = language or config.language
    pretty_print = config.pretty if pretty_print is None else pretty_print
    progress_interval = (
        config.progress_interval if progress_interval is None else progress_interval
    )

    compact_cards_path = output_dir.joinpath(constants.COMPACT_CARDS_FILE_NAME)
    set_stats_path = output_dir.joinpath(constants.SET_STATS_FILE_NAME)
    set_tables_path = output_dir.joinpath(constants.SET_TABLES_DIR_NAME)

    LOGGER.info(f"Reading:  {input_path}")
    LOGGER.info(f"Writing:  {compact_cards_path}")
    LOGGER.info(f"Sets:     {set_stats_path}")

    try:
        output_dir.mkdir(parents=True, exist_ok=True)
        # Per-set files of an earlier run would not match this run's statistics
        if set_tables_path.exists():
            shutil.rmtree(set_tables_path)
            LOGGER.info(f"Cleared previous set files in {set_tables_path}")

        with compact_cards_path.open("wb") as output_file:
            result = process_cards(
                stream_raw_cards(input_path), output_file, language, progress_interval
            )

        write_set_stats(set_stats_path, result.set_stats, pretty_print)
        result.set_files_written = write_set_tables(
            set_tables_path, result.set_tables, pretty_print
        )
    except Exception as error:
        LOGGER.error(f"Pipeline aborted: {error}")
        discard_partial_outputs(compact_cards_path, set_stats_path, set_tables_path)
        raise

    result.compact_cards_path = compact_cards_path
    result.set_stats_path = set_stats_path
    result.set_tables_path = set_tables_path

    LOGGER.info("=== Done ===")
    LOGGER.info(f"Total read:    {result.read_count:,}")
    LOGGER.info(f"Total kept:    {result.kept_count:,}")
    LOGGER.info(f"Total skipped: {result.skipped_count:,}")
    LOGGER.info(f"Not in stats:  {result.incomplete_count:,}")
    LOGGER.info(f"Total sets:    {len(result.set_stats):,}")
    LOGGER.info(f"Set files:     {result.set_files_written:,}")
    LOGGER.info(
        f"Output size:   {compact_cards_path.stat().st_size / 1024 / 1024:.2f} MB"
    )
    LOGGER.info(f"Sets size:     {set_stats_path.stat().st_size / 1024:.2f} KB")

    return result
