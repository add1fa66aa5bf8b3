"""
Booster Odds card filtering and compaction of raw Scryfall printings
"""

from typing import Any, Dict, Optional

from .classes import BoosteroddsCardObject, BoosteroddsPricesObject
from .consts import ALLOWED_RARITIES, EXCLUDED_LAYOUTS, Rarity, StatsBucket

BASIC_LAND_TYPE_PREFIXES = ("Basic Land", "Land")


def is_booster_card(card: Any, language: str) -> bool:
    """
    Determine if a raw printing can be opened in a booster pack
    of the requested language. Missing fields never raise, they
    simply fail the check they belong to.
    :param card: Raw Scryfall card object
    :param language: Language code to keep
    :return: Should the printing be kept
    """
    if not isinstance(card, dict):
        return False
    if card.get("lang") != language:
        return False
    if card.get("digital") is True:
        return False
    # Absent flag means the printing is available in boosters
    if card.get("booster") is False:
        return False
    layout = card.get("layout")
    # Missing layout is fine, a malformed one cannot be checked
    if layout is not None and (
        not isinstance(layout, str) or layout in EXCLUDED_LAYOUTS
    ):
        return False

    rarity = card.get("rarity")
    return isinstance(rarity, str) and rarity in ALLOWED_RARITIES


def get_image_url(card: Dict[str, Any]) -> Optional[str]:
    """
    Normal sized image of a printing, falling back to its first face
    :param card: Raw Scryfall card object
    :return: Image URL, if any
    """
    image_uris = card.get("image_uris")
    if isinstance(image_uris, dict) and image_uris.get("normal"):
        return str(image_uris["normal"])

    card_faces = card.get("card_faces")
    if isinstance(card_faces, list) and card_faces:
        face_image_uris = (
            card_faces[0].get("image_uris") if isinstance(card_faces[0], dict) else None
        )
        if isinstance(face_image_uris, dict) and face_image_uris.get("normal"):
            return str(face_image_uris["normal"])

    return None


def build_compact_card(card: Dict[str, Any]) -> BoosteroddsCardObject:
    """
    Compact a kept raw printing
    :param card: Raw Scryfall card object that passed is_booster_card
    :return: Compact card object
    """
    finishes = card.get("finishes")
    collector_number = card.get("collector_number")

    return BoosteroddsCardObject(
        identifier=card.get("id"),
        name=card.get("name"),
        set_code=card.get("set"),
        rarity=Rarity(card["rarity"]),
        finishes=list(finishes) if isinstance(finishes, list) else [],
        image_url=get_image_url(card),
        prices=BoosteroddsPricesObject.from_scryfall(card.get("prices")),
        collector_number=str(collector_number) if collector_number else None,
    )


def transform_card(
    card: Any, language: str
) -> Optional[BoosteroddsCardObject]:
    """
    Filter and compact a raw printing in one step
    :param card: Raw Scryfall card object
    :param language: Language code to keep
    :return: Compact card object, or None if filtered out
    """
    if not is_booster_card(card, language):
        return None

    return build_compact_card(card)


def is_basic_land(card: Dict[str, Any]) -> bool:
    """
    Commons typed as lands are counted in their own bucket,
    based on the raw type line
    :param card: Raw Scryfall card object
    :return: Is this a common land
    """
    type_line = card.get("type_line")
    if card.get("rarity") != Rarity.COMMON.value or not isinstance(type_line, str):
        return False

    return type_line.startswith(BASIC_LAND_TYPE_PREFIXES)


def get_stats_bucket(card: Dict[str, Any], rarity: Rarity) -> StatsBucket:
    """
    Determine which statistics bucket a kept printing belongs to
    :param card: Raw Scryfall card object
    :param rarity: Rarity of its compact card
    :return: Statistics bucket
    """
    if is_basic_land(card):
        return StatsBucket.COMMON_LAND

    return StatsBucket.for_rarity(rarity)


def get_dedup_identity(card: Dict[str, Any]) -> Optional[str]:
    """
    Cross printing identity used to count a card once per set
    :param card: Raw Scryfall card object
    :return: Oracle ID, else printing ID, else None
    """
    identity = card.get("oracle_id") or card.get("id")
    return str(identity) if identity else None
