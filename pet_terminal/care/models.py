"""一键照顾与自动补货的数据模型。"""
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from pet_terminal.pet.models import PetStats


class CareAction(str, Enum):
    FEED = "feed"
    PLAY = "play"
    CLEAN = "clean"
    HEAL = "heal"
    NONE = "none"


class CareNeed(BaseModel):
    """一项需要处理的属性不足，priority 越大越先处理。"""
    stat: str
    threshold: int
    action: CareAction
    item_id: str = Field(..., description="首选物品")
    item_name: str
    priority: int

    model_config = ConfigDict(use_enum_values=True)


class StatTransition(BaseModel):
    stat: str
    before: int
    after: int


class CareActionResult(BaseModel):
    action: CareAction
    item_id: str
    item_name: str
    success: bool
    stat_changes: List[StatTransition] = Field(default_factory=list)
    reason: Optional[str] = Field(None, description="失败原因")

    model_config = ConfigDict(use_enum_values=True)


class CareResult(BaseModel):
    """至少一个动作成功即视为成功。"""
    success: bool
    actions_taken: List[CareActionResult] = Field(default_factory=list)
    stats_before: PetStats
    stats_after: PetStats
    coins_spent: int = 0
    items_used: int = 0


class AutoPurchaseRule(BaseModel):
    """库存低于 min_quantity 且金币不少于 max_cost 时补货。"""
    item_id: str
    min_quantity: int
    max_cost: int


class PurchasedItem(BaseModel):
    item_id: str
    item_name: str
    quantity: int
    cost: int


class AutoPurchaseResult(BaseModel):
    purchased: bool = False
    items: List[PurchasedItem] = Field(default_factory=list)
    total_cost: int = 0
