"""离线时间衰减：根据经过的小时数计算新属性与提醒。

纯计算，不读写存档。睡眠时精力恢复而不是衰减。
"""
from typing import List, Optional

from pydantic import BaseModel, Field

from pet_terminal.pet.models import PetStats, StatChange
from pet_terminal.pet.stats import clamp, round_half_up


class DecayConfig(BaseModel):
    """每小时衰减量。"""
    hunger_per_hour: float = 3
    happiness_per_hour: float = 0.67
    cleanliness_per_hour: float = 0.125
    energy_per_hour: float = 2
    sleep_energy_per_hour: float = 10
    # 饱腹/快乐/清洁任一低于阈值时健康才会下降
    critical_threshold: int = 10
    health_per_hour_when_critical: float = 2

    def scaled(self, rate: float) -> "DecayConfig":
        """按用户配置的倍率缩放衰减速度（睡眠恢复不变）。"""
        return self.model_copy(update={
            "hunger_per_hour": self.hunger_per_hour * rate,
            "happiness_per_hour": self.happiness_per_hour * rate,
            "cleanliness_per_hour": self.cleanliness_per_hour * rate,
            "energy_per_hour": self.energy_per_hour * rate,
            "health_per_hour_when_critical": self.health_per_hour_when_critical * rate,
        })


class TimeSyncResult(BaseModel):
    """一次衰减结算的结果。"""
    hours_passed: float
    stat_changes: List[StatChange] = Field(default_factory=list)
    health_decay_triggered: bool = False
    warnings: List[str] = Field(default_factory=list)
    new_stats: Optional[PetStats] = None


class TimeDecay:
    """衰减计算器。"""

    def __init__(self, config: Optional[DecayConfig] = None):
        self.config = config or DecayConfig()

    def calculate(self, hours: float, stats: PetStats, is_sleeping: bool) -> TimeSyncResult:
        result = TimeSyncResult(hours_passed=hours, new_stats=stats.model_copy())
        if hours <= 0:
            return result

        cfg = self.config
        values = stats.model_dump()

        def shift(stat: str, delta: int) -> None:
            values[stat] = clamp(values[stat] + delta)
            if delta:
                result.stat_changes.append(StatChange(stat=stat, delta=delta))

        shift("hunger", -round_half_up(hours * cfg.hunger_per_hour))
        shift("happiness", -round_half_up(hours * cfg.happiness_per_hour))
        shift("cleanliness", -round_half_up(hours * cfg.cleanliness_per_hour))
        if is_sleeping:
            shift("energy", round_half_up(hours * cfg.sleep_energy_per_hour))
        else:
            shift("energy", -round_half_up(hours * cfg.energy_per_hour))

        warnings = []
        critical = cfg.critical_threshold
        if values["hunger"] < critical or values["happiness"] < critical or values["cleanliness"] < critical:
            shift("health", -round_half_up(hours * cfg.health_per_hour_when_critical))
            result.health_decay_triggered = True
            warnings.append(f"健康 {values['health']}% - 宠物需要照顾！")

        if values["hunger"] < 20:
            warnings.append(f"饱腹 {values['hunger']}% - 宠物饿坏了！")
        if values["happiness"] < 20:
            warnings.append(f"快乐 {values['happiness']}% - 宠物很沮丧！")
        if values["cleanliness"] < 20:
            warnings.append(f"清洁 {values['cleanliness']}% - 宠物太脏了！")
        if values["energy"] < 15 and not is_sleeping:
            warnings.append(f"精力 {values['energy']}% - 宠物累坏了！")

        result.new_stats = PetStats(**values)
        result.warnings = warnings
        return result


def is_abandoned(stats: PetStats, hours: float) -> bool:
    """平均属性低于 20 且超过 48 小时（不含 48）无人照顾。"""
    return stats.average() < 20 and hours > 48


def severity(hours: float) -> str:
    if hours < 1:
        return "none"
    if hours < 6:
        return "low"
    if hours < 24:
        return "medium"
    if hours < 72:
        return "high"
    return "critical"


def format_duration(hours: float) -> str:
    """把小时数格式化为 “3h 20m” / “2d 5h” 这类短文本。"""
    if hours < 1:
        minutes = round_half_up(hours * 60)
        return f"{minutes}m"
    if hours < 24:
        h = int(hours)
        m = round_half_up((hours - h) * 60)
        return f"{h}h" if m == 0 else f"{h}h {m}m"
    days = int(hours // 24)
    h = round_half_up(hours % 24)
    return f"{days}d" if h == 0 else f"{days}d {h}h"


def time_message(hours: float) -> str:
    if hours < 0.01:
        return "刚刚"
    return f"{format_duration(hours)}前"
