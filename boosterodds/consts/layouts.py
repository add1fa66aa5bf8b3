"""
Card layout constants and classifications.
"""

from __future__ import annotations

from enum import Enum
from typing import Final


class LayoutVariant(Enum):
    """Scryfall card layouts."""

    NORMAL = "normal"
    SPLIT = "split"
    FLIP = "flip"
    TRANSFORM = "transform"
    MODAL_DFC = "modal_dfc"
    MELD = "meld"
    LEVELER = "leveler"
    CLASS = "class"
    CASE = "case"
    SAGA = "saga"
    ADVENTURE = "adventure"
    MUTATE = "mutate"
    PROTOTYPE = "prototype"
    BATTLE = "battle"
    PLANAR = "planar"
    SCHEME = "scheme"
    VANGUARD = "vanguard"
    TOKEN = "token"
    DOUBLE_FACED_TOKEN = "double_faced_token"
    EMBLEM = "emblem"
    AUGMENT = "augment"
    HOST = "host"
    ART_SERIES = "art_series"
    REVERSIBLE_CARD = "reversible_card"
    AFTERMATH = "aftermath"


EXCLUDED_LAYOUTS: Final[frozenset[str]] = frozenset(
    {
        LayoutVariant.TOKEN.value,
        LayoutVariant.DOUBLE_FACED_TOKEN.value,
        LayoutVariant.EMBLEM.value,
        LayoutVariant.ART_SERIES.value,
        LayoutVariant.SCHEME.value,
        LayoutVariant.VANGUARD.value,
        LayoutVariant.PLANAR.value,
    }
)
"""Layouts that never come out of a booster pack."""
