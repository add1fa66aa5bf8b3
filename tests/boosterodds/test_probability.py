import math

import pytest

from boosterodds.classes import BoosteroddsSetStatsObject
from boosterodds.consts import Rarity
from boosterodds.probability import (
    calculate_boxes_needed,
    calculate_expected_copies,
    calculate_packs_needed,
    calculate_pull_probability,
    per_pack_probability,
)


def _rare_slot_reference(population: int, rate: float) -> float:
    chance = rate / population
    return (
        0.70 * (1 - (1 - chance) ** 1)
        + 0.27 * (1 - (1 - chance) ** 2)
        + 0.02 * (1 - (1 - chance) ** 3)
        + 0.01 * (1 - (1 - chance) ** 4)
    )


def test_rare_per_pack(sample_set_info):
    probability = per_pack_probability(sample_set_info, Rarity.RARE)
    assert probability == pytest.approx(_rare_slot_reference(15, 7 / 8))
    assert probability == pytest.approx(0.0769, abs=1e-4)


def test_rare_over_a_box_and_a_bit(sample_set_info):
    assert calculate_pull_probability(sample_set_info, Rarity.RARE, 36) == pytest.approx(
        0.944, abs=1e-3
    )
    assert calculate_expected_copies(sample_set_info, Rarity.RARE, 36) == pytest.approx(
        2.77, abs=1e-2
    )


def test_mythic_per_pack(sample_set_info):
    probability = per_pack_probability(sample_set_info, Rarity.MYTHIC)
    assert probability == pytest.approx(_rare_slot_reference(5, 1 / 8))
    assert probability == pytest.approx(0.03326, abs=1e-5)


def test_one_pack_equals_per_pack(sample_set_info):
    for rarity in Rarity:
        assert calculate_pull_probability(sample_set_info, rarity, 1) == pytest.approx(
            per_pack_probability(sample_set_info, rarity), rel=1e-12
        )


def test_uncommon_and_common(sample_set_info):
    assert per_pack_probability(sample_set_info, Rarity.UNCOMMON) == pytest.approx(
        1 - (1 - 1 / 30) ** 4
    )
    assert per_pack_probability(sample_set_info, Rarity.COMMON) == pytest.approx(
        1 - (1 - 1 / 50) ** 7.5
    )


def test_common_population_excludes_lands():
    with_lands = BoosteroddsSetStatsObject("Lands", 60, 10, 50, 0, 0, 0)
    without_lands = BoosteroddsSetStatsObject("No Lands", 50, 0, 50, 0, 0, 0)
    assert per_pack_probability(with_lands, Rarity.COMMON) == per_pack_probability(
        without_lands, Rarity.COMMON
    )


def test_string_rarities_are_accepted(sample_set_info):
    assert per_pack_probability(sample_set_info, "rare") == per_pack_probability(
        sample_set_info, Rarity.RARE
    )


@pytest.mark.parametrize("rarity", ["common_land", "special", ""])
def test_unknown_rarity_is_rejected(sample_set_info, rarity):
    with pytest.raises(ValueError):
        per_pack_probability(sample_set_info, rarity)


@pytest.mark.parametrize("rarity", list(Rarity))
def test_zero_packs_is_zero(sample_set_info, rarity):
    assert calculate_pull_probability(sample_set_info, rarity, 0) == 0
    assert calculate_expected_copies(sample_set_info, rarity, 0) == 0


@pytest.mark.parametrize("rarity", list(Rarity))
def test_pull_probability_is_non_decreasing(sample_set_info, rarity):
    probabilities = [
        calculate_pull_probability(sample_set_info, rarity, packs)
        for packs in range(0, 200)
    ]
    assert probabilities == sorted(probabilities)
    assert all(0 <= p <= 1 for p in probabilities)


@pytest.mark.parametrize("packs", [0, 1, 6, 36, 540])
def test_expected_copies_is_linear(sample_set_info, packs):
    for rarity in Rarity:
        assert calculate_expected_copies(
            sample_set_info, rarity, packs
        ) == packs * per_pack_probability(sample_set_info, rarity)


def test_zero_population_bucket():
    no_mythics = BoosteroddsSetStatsObject("No Mythics", 10, 0, 5, 3, 2, 0)

    assert per_pack_probability(no_mythics, Rarity.MYTHIC) == 0
    for packs in (0, 1, 36, 10_000):
        assert calculate_pull_probability(no_mythics, Rarity.MYTHIC, packs) == 0
        assert calculate_expected_copies(no_mythics, Rarity.MYTHIC, packs) == 0
    for target in (0.0, 0.5, 0.99):
        assert calculate_packs_needed(no_mythics, Rarity.MYTHIC, target) == math.inf
        assert calculate_boxes_needed(no_mythics, Rarity.MYTHIC, target) == math.inf


def test_packs_needed(sample_set_info):
    packs = calculate_packs_needed(sample_set_info, Rarity.RARE, 0.9)
    probability = per_pack_probability(sample_set_info, Rarity.RARE)

    assert packs == math.ceil(math.log(1 - 0.9) / math.log(1 - probability))
    assert calculate_pull_probability(sample_set_info, Rarity.RARE, packs) >= 0.9
    assert calculate_pull_probability(sample_set_info, Rarity.RARE, packs - 1) < 0.9


def test_packs_needed_for_zero_target(sample_set_info):
    assert calculate_packs_needed(sample_set_info, Rarity.MYTHIC, 0) == 0
    assert calculate_boxes_needed(sample_set_info, Rarity.MYTHIC, 0) == 0


def test_packs_needed_when_every_pack_has_the_card():
    single_uncommon = BoosteroddsSetStatsObject("Tiny", 1, 0, 0, 1, 0, 0)
    assert per_pack_probability(single_uncommon, Rarity.UNCOMMON) == 1
    assert calculate_packs_needed(single_uncommon, Rarity.UNCOMMON, 0.99) == 1


@pytest.mark.parametrize("target", [1.0, 1.5, -0.1])
def test_packs_needed_rejects_invalid_targets(sample_set_info, target):
    with pytest.raises(ValueError):
        calculate_packs_needed(sample_set_info, Rarity.RARE, target)
    with pytest.raises(ValueError):
        calculate_boxes_needed(sample_set_info, Rarity.RARE, target)


def test_negative_pack_count_is_rejected(sample_set_info):
    with pytest.raises(ValueError):
        calculate_pull_probability(sample_set_info, Rarity.RARE, -1)
    with pytest.raises(ValueError):
        calculate_expected_copies(sample_set_info, Rarity.RARE, -1)


def test_boxes_needed(sample_set_info):
    packs = calculate_packs_needed(sample_set_info, Rarity.MYTHIC, 0.95)
    assert calculate_boxes_needed(sample_set_info, Rarity.MYTHIC, 0.95) == math.ceil(
        packs / 30
    )
    assert calculate_boxes_needed(sample_set_info, Rarity.COMMON, 0.5) == 1
