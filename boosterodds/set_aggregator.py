"""
Booster Odds per-set accumulation of statistics and deduplicated card tables
"""

import logging
from typing import Any, Dict

from .card_filter import get_dedup_identity, get_stats_bucket
from .classes import BoosteroddsCardObject, BoosteroddsSetStatsObject

LOGGER = logging.getLogger(__name__)


class SetAggregator:
    """
    Accumulator owned by a single pipeline run.
    Each distinct card identity of a set is counted exactly once,
    the first printing seen in stream order wins.
    """

    set_stats: Dict[str, BoosteroddsSetStatsObject]
    set_tables: Dict[str, Dict[str, BoosteroddsCardObject]]
    incomplete_count: int

    def __init__(self) -> None:
        self.set_stats = {}
        self.set_tables = {}
        self.incomplete_count = 0

    def add_card(
        self, raw_card: Dict[str, Any], compact_card: BoosteroddsCardObject
    ) -> bool:
        """
        Account for a kept printing
        :param raw_card: Raw Scryfall card object
        :param compact_card: Its compact form
        :return: True if the card was new to its set and got counted
        """
        set_code = raw_card.get("set")
        set_name = raw_card.get("set_name")
        identity = get_dedup_identity(raw_card)
        if not (
            isinstance(set_code, str)
            and set_code
            and isinstance(set_name, str)
            and set_name
            and identity
        ):
            self.incomplete_count += 1
            LOGGER.debug(
                f"Not aggregating {raw_card.get('id')}: "
                f"set={set_code!r} set_name={set_name!r} identity={identity!r}"
            )
            return False

        set_stats = self.set_stats.get(set_code)
        if set_stats is None:
            set_stats = BoosteroddsSetStatsObject(name=set_name)
            self.set_stats[set_code] = set_stats
        set_table = self.set_tables.setdefault(set_code, {})

        if identity in set_table:
            return False

        set_table[identity] = compact_card
        set_stats.add_card(get_stats_bucket(raw_card, compact_card.rarity))
        return True
