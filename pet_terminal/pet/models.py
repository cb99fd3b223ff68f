"""宠物属性、存档记录与动作结果数据模型。"""
from datetime import date, datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from pet_terminal.config import STAT_MAX, STAT_MIN
from pet_terminal.items.models import InventoryEntry

STAT_NAMES = ("hunger", "happiness", "health", "cleanliness", "energy")


class PetSpecies(str, Enum):
    """可选物种。"""
    CAT = "cat"
    DOG = "dog"
    RABBIT = "rabbit"
    HAMSTER = "hamster"
    BIRD = "bird"
    DRAGON = "dragon"


class MoodState(str, Enum):
    """心情，由属性与睡眠状态推导，不单独修改。"""
    HAPPY = "happy"
    SAD = "sad"
    SICK = "sick"
    ANGRY = "angry"
    SLEEPY = "sleepy"
    EXCITED = "excited"


class PetStats(BaseModel):
    """五项属性，均在 [0, 100]。hunger 表示饱腹度，越高越好。"""
    hunger: int = Field(STAT_MAX, ge=STAT_MIN, le=STAT_MAX, description="饱腹度")
    happiness: int = Field(STAT_MAX, ge=STAT_MIN, le=STAT_MAX, description="快乐")
    health: int = Field(STAT_MAX, ge=STAT_MIN, le=STAT_MAX, description="健康")
    cleanliness: int = Field(STAT_MAX, ge=STAT_MIN, le=STAT_MAX, description="清洁")
    energy: int = Field(STAT_MAX, ge=STAT_MIN, le=STAT_MAX, description="精力")

    def average(self) -> float:
        return sum(getattr(self, name) for name in STAT_NAMES) / len(STAT_NAMES)


class StatChange(BaseModel):
    """单项属性变化。"""
    stat: str = Field(..., description="属性名，见 STAT_NAMES")
    delta: int = Field(..., description="变化量，负数为减少")


class ActionResult(BaseModel):
    """一次动作的结果，失败时不产生任何修改。"""
    success: bool
    message: str
    stat_changes: List[StatChange] = Field(default_factory=list)
    xp_gained: int = 0
    level_up: bool = False
    new_level: Optional[int] = None


class CoinEntry(BaseModel):
    """金币流水，负数表示花费。"""
    amount: int
    reason: str = Field(..., description="来源标签，见 CoinReason")
    timestamp: datetime


class PetRecord(BaseModel):
    """存档中唯一的一只宠物。"""
    id: str = Field(..., description="宠物唯一 ID")
    name: str = Field(..., description="宠物名字")
    species: PetSpecies = Field(default=PetSpecies.CAT, description="物种")
    level: int = Field(1, ge=1)
    experience: int = Field(0, ge=0, description="累计经验，升级不清零")
    stats: PetStats = Field(default_factory=PetStats)
    mood: MoodState = Field(default=MoodState.HAPPY)
    is_sleeping: bool = False
    birth_date: datetime
    last_interaction: datetime
    last_updated: datetime = Field(..., description="上次结算衰减的时间")
    last_save_time: Optional[datetime] = Field(None, description="存储层写入时间")
    total_interactions: int = 0
    inventory: List[InventoryEntry] = Field(default_factory=list)
    coins: int = Field(0, ge=0)
    coin_history: List[CoinEntry] = Field(default_factory=list)
    # Git 奖励追踪
    last_rewarded_commit: Optional[str] = Field(None, description="上次奖励的提交短哈希")
    git_commit_count: int = 0
    git_streak: int = 0
    last_git_reward_date: Optional[date] = Field(None, description="连续天数的基准日期")

    model_config = ConfigDict(use_enum_values=True)
