"""Pytest configuration and fixtures for Booster Odds tests."""

import json
import pathlib
from typing import Any, Callable, Dict, List

import pytest

from boosterodds.boosterodds_config import BoosteroddsConfig
from boosterodds.classes import BoosteroddsSetStatsObject


def make_raw_card(**overrides: Any) -> Dict[str, Any]:
    """
    Minimal Scryfall card that passes every filter.
    Pass a key with value None to drop it from the card.
    """
    card: Dict[str, Any] = {
        "id": "0000aaaa-0000-0000-0000-000000000001",
        "oracle_id": "1111bbbb-0000-0000-0000-000000000001",
        "name": "Grizzly Bears",
        "lang": "en",
        "set": "tst",
        "set_name": "Test Set",
        "digital": False,
        "booster": True,
        "layout": "normal",
        "rarity": "common",
        "type_line": "Creature — Bear",
        "finishes": ["nonfoil", "foil"],
        "image_uris": {"normal": "https://cards.scryfall.io/normal/bears.jpg"},
        "prices": {"usd": "0.10", "usd_foil": "0.50", "eur": None, "eur_foil": None},
        "collector_number": "101",
    }
    for key, value in overrides.items():
        if value is None:
            card.pop(key, None)
        else:
            card[key] = value
    return card


@pytest.fixture
def raw_card() -> Callable[..., Dict[str, Any]]:
    """Factory for raw Scryfall cards."""
    return make_raw_card


@pytest.fixture
def write_bulk_file(tmp_path: pathlib.Path) -> Callable[[List[Any]], pathlib.Path]:
    """Write a bulk JSON array to a temporary file."""

    def _write(cards: List[Any], name: str = "default-cards.json") -> pathlib.Path:
        bulk_file = tmp_path / name
        bulk_file.write_text(json.dumps(cards), encoding="utf-8")
        return bulk_file

    return _write


@pytest.fixture
def temp_output_dir(
    tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch
) -> pathlib.Path:
    """
    Temporary output directory patched into the singleton config,
    so runs without an explicit output directory land here.
    """
    output_dir = tmp_path / "boosterodds_output"
    monkeypatch.setattr(BoosteroddsConfig(), "output_path", output_dir)
    return output_dir


@pytest.fixture
def sample_set_info() -> BoosteroddsSetStatsObject:
    """A 100 card set with 15 rares and 5 mythics."""
    return BoosteroddsSetStatsObject(
        name="Sample Set",
        total=100,
        common_land=0,
        common=50,
        uncommon=30,
        rare=15,
        mythic=5,
    )
