"""
Booster Odds Constants Module.

Closed enumerations for rarities and layouts.

Usage:
    from boosterodds.consts import Rarity, EXCLUDED_LAYOUTS
"""

from __future__ import annotations

from boosterodds.consts.layouts import EXCLUDED_LAYOUTS, LayoutVariant
from boosterodds.consts.rarities import ALLOWED_RARITIES, Rarity, StatsBucket

__all__ = [
    "ALLOWED_RARITIES",
    "EXCLUDED_LAYOUTS",
    "LayoutVariant",
    "Rarity",
    "StatsBucket",
]
