"""
Booster Odds Set Statistics Object
"""
from typing import Any, Dict

from ..consts import Rarity, StatsBucket
from .json_object import JsonObject


class BoosteroddsSetStatsObject(JsonObject):
    """
    Booster Odds Set Statistics Object
    Population of distinct cards per rarity bucket for one set.
    total always equals the sum of the five buckets.
    """

    name: str
    total: int
    common_land: int
    common: int
    uncommon: int
    rare: int
    mythic: int

    def __init__(
        self,
        name: str,
        total: int = 0,
        common_land: int = 0,
        common: int = 0,
        uncommon: int = 0,
        rare: int = 0,
        mythic: int = 0,
    ) -> None:
        self.name = name
        self.total = total
        self.common_land = common_land
        self.common = common
        self.uncommon = uncommon
        self.rare = rare
        self.mythic = mythic

    def add_card(self, bucket: StatsBucket) -> None:
        """
        Count one more distinct card in this set
        :param bucket: Bucket the card falls into
        """
        self.total += 1
        setattr(self, bucket.value, getattr(self, bucket.value) + 1)

    def get_bucket_count(self, bucket: StatsBucket) -> int:
        """
        :param bucket: Bucket to read
        :return: Number of distinct cards in that bucket
        """
        count: int = getattr(self, bucket.value)
        return count

    def get_population(self, rarity: Rarity) -> int:
        """
        Population a card of this rarity is drawn from in its booster slot.
        Basic lands are carved out of the common population.
        :param rarity: Rarity of the card
        :return: Number of distinct cards sharing that slot
        """
        return self.get_bucket_count(StatsBucket.for_rarity(rarity))

    def is_consistent(self) -> bool:
        """
        :return: True if total matches the sum of all buckets
        """
        return self.total == sum(
            self.get_bucket_count(bucket) for bucket in StatsBucket
        )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, BoosteroddsSetStatsObject):
            return NotImplemented
        return self.__dict__ == other.__dict__

    def __repr__(self) -> str:
        return f"BoosteroddsSetStatsObject({self.__dict__})"

    @classmethod
    def from_json(cls, content: Dict[str, Any]) -> "BoosteroddsSetStatsObject":
        """
        Rebuild set statistics from the statistics table
        :param content: One value of sets.json
        :return: Set statistics, missing buckets default to zero
        """
        return cls(
            name=content.get("name", ""),
            total=int(content.get("total", 0)),
            common_land=int(content.get("common_land", 0)),
            common=int(content.get("common", 0)),
            uncommon=int(content.get("uncommon", 0)),
            rare=int(content.get("rare", 0)),
            mythic=int(content.get("mythic", 0)),
        )
