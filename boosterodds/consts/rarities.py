"""
Rarity constants.

Rarity is the per-card classification. StatsBucket is the per-set
statistics classification, which adds the basic land carve-out.
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class Rarity(Enum):
    """Booster rarities a card can be printed at."""

    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    MYTHIC = "mythic"


class StatsBucket(Enum):
    """Mutually exclusive population buckets of a set."""

    COMMON_LAND = "common_land"
    COMMON = "common"
    UNCOMMON = "uncommon"
    RARE = "rare"
    MYTHIC = "mythic"

    @classmethod
    def for_rarity(cls, rarity: Rarity) -> "StatsBucket":
        """Bucket a non-land card of the given rarity counts towards."""
        return cls(rarity.value)


ALLOWED_RARITIES: Final[frozenset[str]] = frozenset(r.value for r in Rarity)
