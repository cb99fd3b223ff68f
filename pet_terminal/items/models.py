"""物品定义与金币来源数据模型。"""
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ItemType(str, Enum):
    """物品类别。"""
    FOOD = "food"           # 食物
    TOY = "toy"             # 玩具
    CLEANING = "cleaning"   # 清洁用品
    MEDICINE = "medicine"   # 药品


class ItemRarity(str, Enum):
    COMMON = "common"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"


class CoinReason(str, Enum):
    """金币流水的来源标签。"""
    FEED = "feed"
    PLAY = "play"
    CLEAN = "clean"
    HEAL = "heal"
    SLEEP = "sleep"
    LEVEL_UP = "level_up"
    GIT_COMMIT_NORMAL = "git_commit_normal"
    GIT_COMMIT_FEATURE = "git_commit_feature"
    GIT_COMMIT_BUG_FIX = "git_commit_bug_fix"
    GIT_COMMIT_REFACTOR = "git_commit_refactor"
    GIT_LARGE_BONUS = "git_large_bonus"
    GIT_STREAK_DAILY = "git_streak_daily"
    GIT_STREAK_7 = "git_streak_7"
    GIT_STREAK_30 = "git_streak_30"
    PURCHASE = "purchase"   # 花费，金额为负
    GIFT = "gift"


class ItemEffect(BaseModel):
    """使用物品时对属性的稀疏增量，缺省为 0。"""
    hunger: int = 0
    happiness: int = 0
    health: int = 0
    cleanliness: int = 0
    energy: int = 0


class ItemDefinition(BaseModel):
    """物品目录中的一项（静态数据，运行时不修改）。"""
    id: str = Field(..., description="物品 ID")
    name: str = Field(..., description="显示名称")
    type: ItemType
    rarity: ItemRarity = ItemRarity.COMMON
    description: str = ""
    emoji: str = ""
    effect: ItemEffect = Field(default_factory=ItemEffect)
    xp_reward: int = Field(0, ge=0)
    price: Optional[int] = Field(None, description="商店售价；无则不出售")

    model_config = ConfigDict(use_enum_values=True, frozen=True)


class InventoryEntry(BaseModel):
    """背包中的一种物品，数量恒为正。"""
    item_id: str
    quantity: int = Field(..., gt=0)
