"""
Booster Odds Price Quadruple Object
"""
from typing import Any, Dict, Iterable, Optional

from ..utils import get_str_or_none
from .json_object import JsonObject


class BoosteroddsPricesObject(JsonObject):
    """
    Booster Odds Price Quadruple Object
    Two currencies, each for nonfoil and foil
    """

    eur: Optional[str]
    usd: Optional[str]
    eur_foil: Optional[str]
    usd_foil: Optional[str]

    def __init__(
        self,
        eur: Optional[str] = None,
        usd: Optional[str] = None,
        eur_foil: Optional[str] = None,
        usd_foil: Optional[str] = None,
    ) -> None:
        self.eur = eur
        self.usd = usd
        self.eur_foil = eur_foil
        self.usd_foil = usd_foil

    @classmethod
    def from_scryfall(
        cls, prices: Optional[Dict[str, Any]]
    ) -> Optional["BoosteroddsPricesObject"]:
        """
        Build the quadruple from a Scryfall "prices" object
        :param prices: Scryfall prices, may be missing
        :return: Price object, or None if no price is present at all
        """
        if not isinstance(prices, dict):
            return None

        price_object = cls(
            eur=get_str_or_none(prices.get("eur")),
            usd=get_str_or_none(prices.get("usd")),
            eur_foil=get_str_or_none(prices.get("eur_foil")),
            usd_foil=get_str_or_none(prices.get("usd_foil")),
        )
        if price_object.is_empty():
            return None

        return price_object

    def is_empty(self) -> bool:
        """
        :return: True if none of the four prices are set
        """
        return not (self.eur or self.usd or self.eur_foil or self.usd_foil)

    def build_keys_to_skip(self) -> Iterable[str]:
        return {key for key, value in self.__dict__.items() if value is None}
