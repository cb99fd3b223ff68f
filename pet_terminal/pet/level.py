"""等级与经验曲线（纯函数）。

xp_for_level(n) 是到达第 n 级所需的累计经验：100 * n * 1.5^(n-1)，1 级为 0。
"""
import math

from pet_terminal.pet.stats import round_half_up

LEVEL_TITLES = (
    (5, "Baby"),
    (10, "Young"),
    (20, "Adult"),
    (30, "Expert"),
    (50, "Master"),
)


def xp_for_level(level: int) -> int:
    if level <= 1:
        return 0
    return math.floor(100 * level * 1.5 ** (level - 1))


def xp_to_next_level(level: int, xp: int) -> int:
    return max(0, xp_for_level(level + 1) - xp)


def level_progress(level: int, xp: int) -> int:
    """当前等级内的进度百分比。"""
    base = xp_for_level(level)
    span = xp_for_level(level + 1) - base
    if span <= 0:
        return 100
    return min(100, round_half_up((xp - base) / span * 100))


def check_level_up(level: int, xp: int) -> bool:
    return xp >= xp_for_level(level + 1)


def calculate_new_level(level: int, xp: int) -> int:
    """一次获得大量经验时可连升多级。"""
    while check_level_up(level, xp):
        level += 1
    return level


def level_title(level: int) -> str:
    for upper, title in LEVEL_TITLES:
        if level <= upper:
            return title
    return "Legend"


def stat_bonus(level: int) -> int:
    """仅用于展示。"""
    return level // 5 * 5
