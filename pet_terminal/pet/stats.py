"""属性规则：钳制、增减、心情与是否需要照顾。"""
import math
from typing import Iterable

from pet_terminal.config import STAT_MAX, STAT_MIN
from pet_terminal.pet.models import STAT_NAMES, MoodState, PetStats, StatChange


def clamp(value: float) -> int:
    """所有属性写入都经过这里。"""
    return int(max(STAT_MIN, min(STAT_MAX, value)))


def round_half_up(value: float) -> int:
    """0.5 向上取整（内置 round 为银行家舍入）。"""
    return math.floor(value + 0.5)


def apply_changes(stats: PetStats, changes: Iterable[StatChange]) -> PetStats:
    """按顺序叠加变化并逐次钳制，返回新对象。"""
    values = stats.model_dump()
    for change in changes:
        values[change.stat] = clamp(values[change.stat] + change.delta)
    return PetStats(**values)


def boost_all(stats: PetStats, amount: int) -> PetStats:
    return apply_changes(stats, [StatChange(stat=name, delta=amount) for name in STAT_NAMES])


def changes_from_deltas(**deltas: int) -> list[StatChange]:
    """把稀疏的增量表转为变化列表，忽略 0 与缺省项。"""
    return [StatChange(stat=name, delta=deltas[name]) for name in STAT_NAMES if deltas.get(name)]


def calculate_mood(stats: PetStats, is_sleeping: bool) -> MoodState:
    if is_sleeping:
        return MoodState.SLEEPY
    if stats.health < 30:
        return MoodState.SICK
    if stats.energy < 20:
        return MoodState.SLEEPY
    if stats.hunger < 20:
        return MoodState.ANGRY

    avg = (stats.happiness + stats.hunger + stats.cleanliness) / 3
    if avg >= 80 and stats.energy > 60:
        return MoodState.EXCITED
    if avg >= 60:
        return MoodState.HAPPY
    if avg >= 40:
        return MoodState.SAD
    return MoodState.ANGRY


def needs_care(stats: PetStats) -> bool:
    """任一属性过低即需要照顾（健康与精力阈值不同）。"""
    return (
        stats.hunger < 30
        or stats.happiness < 30
        or stats.health < 40
        or stats.cleanliness < 30
        or stats.energy < 20
    )
