"""属性规则测试。"""
from pet_terminal.pet.models import MoodState, PetStats, StatChange
from pet_terminal.pet.stats import (
    apply_changes,
    boost_all,
    calculate_mood,
    changes_from_deltas,
    clamp,
    needs_care,
    round_half_up,
)


def test_clamp() -> None:
    assert clamp(-5) == 0
    assert clamp(130) == 100
    assert clamp(42) == 42


def test_round_half_up() -> None:
    assert round_half_up(2.5) == 3
    assert round_half_up(0.5) == 1
    assert round_half_up(0.49) == 0
    assert round_half_up(6.7) == 7


def test_apply_changes_clamps_each_step() -> None:
    stats = PetStats(hunger=90, energy=5)
    out = apply_changes(stats, [StatChange(stat="hunger", delta=25), StatChange(stat="energy", delta=-20)])
    assert out.hunger == 100
    assert out.energy == 0
    # 原对象不变
    assert stats.hunger == 90


def test_boost_all() -> None:
    out = boost_all(PetStats(hunger=50, health=98), 5)
    assert out.hunger == 55
    assert out.health == 100
    assert out.energy == 100


def test_changes_from_deltas_skips_zero() -> None:
    changes = changes_from_deltas(hunger=5, energy=0, happiness=-3)
    assert [(c.stat, c.delta) for c in changes] == [("hunger", 5), ("happiness", -3)]


def test_calculate_mood_order() -> None:
    assert calculate_mood(PetStats(), is_sleeping=True) == MoodState.SLEEPY
    assert calculate_mood(PetStats(health=20, energy=10), False) == MoodState.SICK
    assert calculate_mood(PetStats(energy=10, hunger=10), False) == MoodState.SLEEPY
    assert calculate_mood(PetStats(hunger=10), False) == MoodState.ANGRY


def test_calculate_mood_average_bands() -> None:
    assert calculate_mood(PetStats(), False) == MoodState.EXCITED
    # 平均值高但精力不够兴奋
    assert calculate_mood(PetStats(energy=60), False) == MoodState.HAPPY
    assert calculate_mood(PetStats(hunger=60, happiness=60, cleanliness=60), False) == MoodState.HAPPY
    assert calculate_mood(PetStats(hunger=45, happiness=45, cleanliness=45), False) == MoodState.SAD
    assert calculate_mood(PetStats(hunger=30, happiness=30, cleanliness=30), False) == MoodState.ANGRY


def test_needs_care_thresholds() -> None:
    assert needs_care(PetStats()) is False
    assert needs_care(PetStats(hunger=30, happiness=30, cleanliness=30, health=40, energy=20)) is False
    assert needs_care(PetStats(hunger=29)) is True
    assert needs_care(PetStats(health=39)) is True
    assert needs_care(PetStats(energy=19)) is True
