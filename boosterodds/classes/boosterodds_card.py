"""
Booster Odds Compact Card Object
"""
from typing import Any, Dict, Iterable, List, Optional

from ..consts import Rarity
from .boosterodds_prices import BoosteroddsPricesObject
from .json_object import JsonObject


class BoosteroddsCardObject(JsonObject):
    """
    Booster Odds Compact Card Object
    One per kept printing, serialized with short keys
    """

    identifier: Optional[str]
    name: Optional[str]
    set_code: Optional[str]
    rarity: Rarity
    finishes: List[str]
    image_url: Optional[str]
    prices: Optional[BoosteroddsPricesObject]
    collector_number: Optional[str]

    json_key_map = {
        "identifier": "id",
        "name": "n",
        "set_code": "s",
        "rarity": "r",
        "finishes": "f",
        "image_url": "img",
        "prices": "p",
        "collector_number": "cn",
    }

    def __init__(
        self,
        identifier: Optional[str],
        name: Optional[str],
        set_code: Optional[str],
        rarity: Rarity,
        finishes: Optional[List[str]] = None,
        image_url: Optional[str] = None,
        prices: Optional[BoosteroddsPricesObject] = None,
        collector_number: Optional[str] = None,
    ) -> None:
        self.identifier = identifier
        self.name = name
        self.set_code = set_code
        self.rarity = rarity
        self.finishes = finishes or []
        self.image_url = image_url
        self.prices = prices
        self.collector_number = collector_number

    def build_keys_to_skip(self) -> Iterable[str]:
        return {key for key, value in self.__dict__.items() if value is None}

    def to_json(self) -> Dict[str, Any]:
        parent: Dict[str, Any] = super().to_json()
        parent["r"] = self.rarity.value
        if self.prices is not None:
            parent["p"] = self.prices.to_json()

        return parent

    @classmethod
    def from_json(cls, content: Dict[str, Any]) -> "BoosteroddsCardObject":
        """
        Rebuild a card from its serialized form
        :param content: One NDJSON line or per-set table value
        :return: Card object
        """
        prices = content.get("p")
        return cls(
            identifier=content.get("id"),
            name=content.get("n"),
            set_code=content.get("s"),
            rarity=Rarity(content["r"]),
            finishes=list(content.get("f", [])),
            image_url=content.get("img"),
            prices=BoosteroddsPricesObject(**prices) if prices else None,
            collector_number=content.get("cn"),
        )
