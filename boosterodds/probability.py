"""
Booster Odds Probability Model

Pull probabilities for a single card based on the play booster structure:
- 1-4 rare/mythic slots (1: 70%, 2: 27%, 3: 2%, 4: 1%)
- 3-5 uncommon slots (average 4)
- 6-9 common slots (average 7.5)

Packs are treated as independent draws (sampling with replacement),
which is what downstream consumers are calibrated against.
"""

import math
from typing import Final, Tuple, Union

from . import constants
from .classes import BoosteroddsSetStatsObject
from .consts import Rarity

RARE_SLOT_DISTRIBUTION: Final[Tuple[Tuple[int, float], ...]] = (
    (1, 0.70),
    (2, 0.27),
    (3, 0.02),
    (4, 0.01),
)
"""Number of rare/mythic slots in a pack, with its probability."""

MYTHIC_SLOT_RATE: Final[float] = 1 / 8
RARE_SLOT_RATE: Final[float] = 7 / 8
AVERAGE_UNCOMMON_SLOTS: Final[float] = 4
AVERAGE_COMMON_SLOTS: Final[float] = 7.5

RarityLike = Union[Rarity, str]


def _to_rarity(rarity: RarityLike) -> Rarity:
    """
    Accept a Rarity or its string value
    :param rarity: Rarity to coerce
    :return: Rarity member
    :raises ValueError: If it is not a booster rarity
    """
    if isinstance(rarity, Rarity):
        return rarity
    return Rarity(rarity)


def _rare_slot_probability(population: int, slot_rate: float) -> float:
    """
    Chance of a specific card from the rare/mythic slots, summed over
    every possible number of rare/mythic slots in the pack
    :param population: Distinct cards sharing the slot rate
    :param slot_rate: Share of rare/mythic slots this rarity occupies
    :return: Per-pack probability
    """
    if population == 0:
        return 0.0

    chance_per_slot = slot_rate * (1 / population)

    total_probability = 0.0
    for slots, slots_probability in RARE_SLOT_DISTRIBUTION:
        total_probability += slots_probability * (
            1 - math.pow(1 - chance_per_slot, slots)
        )
    return total_probability


def _fixed_slot_probability(population: int, average_slots: float) -> float:
    if population == 0:
        return 0.0

    return 1 - math.pow(1 - 1 / population, average_slots)


def per_pack_probability(
    set_info: BoosteroddsSetStatsObject, rarity: RarityLike
) -> float:
    """
    Probability of pulling a specific card in a single pack
    :param set_info: Statistics of the card's set
    :param rarity: Rarity of the card
    :return: Probability in [0, 1]
    """
    rarity = _to_rarity(rarity)
    population = set_info.get_population(rarity)

    if rarity is Rarity.MYTHIC:
        return _rare_slot_probability(population, MYTHIC_SLOT_RATE)
    if rarity is Rarity.RARE:
        return _rare_slot_probability(population, RARE_SLOT_RATE)
    if rarity is Rarity.UNCOMMON:
        return _fixed_slot_probability(population, AVERAGE_UNCOMMON_SLOTS)
    if rarity is Rarity.COMMON:
        return _fixed_slot_probability(population, AVERAGE_COMMON_SLOTS)

    raise ValueError(f"Unsupported rarity {rarity}")


def _check_pack_count(num_packs: float) -> None:
    if num_packs < 0:
        raise ValueError(f"Pack count must not be negative, got {num_packs}")


def calculate_pull_probability(
    set_info: BoosteroddsSetStatsObject, rarity: RarityLike, num_packs: float
) -> float:
    """
    Probability of pulling at least one copy of a card in N packs
    :param set_info: Statistics of the card's set
    :param rarity: Rarity of the card
    :param num_packs: Packs opened
    :return: Probability in [0, 1]
    :raises ValueError: If num_packs is negative
    """
    _check_pack_count(num_packs)
    probability_per_pack = per_pack_probability(set_info, rarity)

    if probability_per_pack == 0:
        return 0.0

    return 1 - math.pow(1 - probability_per_pack, num_packs)


def calculate_expected_copies(
    set_info: BoosteroddsSetStatsObject, rarity: RarityLike, num_packs: float
) -> float:
    """
    Expected number of copies of a card after opening N packs
    :param set_info: Statistics of the card's set
    :param rarity: Rarity of the card
    :param num_packs: Packs opened
    :return: Expected copies
    :raises ValueError: If num_packs is negative
    """
    _check_pack_count(num_packs)
    return num_packs * per_pack_probability(set_info, rarity)


def calculate_packs_needed(
    set_info: BoosteroddsSetStatsObject,
    rarity: RarityLike,
    target_probability: float,
) -> float:
    """
    Smallest number of packs reaching a target pull probability
    :param set_info: Statistics of the card's set
    :param rarity: Rarity of the card
    :param target_probability: Desired probability, in [0, 1)
    :return: Pack count, or infinity if the card cannot be pulled
    :raises ValueError: If target_probability is outside [0, 1)
    """
    if not 0 <= target_probability < 1:
        raise ValueError(
            f"Target probability must be in [0, 1), got {target_probability}"
        )

    probability_per_pack = per_pack_probability(set_info, rarity)

    if probability_per_pack == 0:
        return math.inf
    if target_probability == 0:
        return 0
    # Single card in its slot: every pack has it
    if probability_per_pack >= 1:
        return 1

    packs = math.log(1 - target_probability) / math.log(1 - probability_per_pack)
    return math.ceil(packs)


def calculate_boxes_needed(
    set_info: BoosteroddsSetStatsObject,
    rarity: RarityLike,
    target_probability: float,
) -> float:
    """
    Number of booster boxes reaching a target pull probability
    :param set_info: Statistics of the card's set
    :param rarity: Rarity of the card
    :param target_probability: Desired probability, in [0, 1)
    :return: Box count, or infinity if the card cannot be pulled
    :raises ValueError: If target_probability is outside [0, 1)
    """
    packs_needed = calculate_packs_needed(set_info, rarity, target_probability)
    if math.isinf(packs_needed):
        return math.inf

    return math.ceil(packs_needed / constants.PACKS_PER_BOX)
