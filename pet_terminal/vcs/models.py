"""Git 提交与奖励数据模型。"""
from datetime import datetime
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CommitType(str, Enum):
    """按提交信息关键字分类。"""
    BUG_FIX = "bug_fix"
    FEATURE = "feature"
    REFACTOR = "refactor"
    NORMAL = "normal"


class ChangeStats(BaseModel):
    """git show --shortstat 的统计。"""
    files_changed: int = 0
    lines_added: int = 0
    lines_deleted: int = 0


class CommitInfo(BaseModel):
    """git log 中的一条提交。行数统计取不到时为 None。"""
    hash: str = Field(..., description="完整哈希")
    short_hash: str = Field(..., description="前 7 位")
    message: str = ""
    author: str = ""
    date: datetime = Field(..., description="作者时间，带作者时区")
    files_changed: Optional[int] = None
    lines_added: Optional[int] = None
    lines_deleted: Optional[int] = None

    def with_stats(self, stats: Optional[ChangeStats]) -> "CommitInfo":
        if stats is None:
            return self
        return self.model_copy(update=stats.model_dump())


class CommitRewardCalc(BaseModel):
    """单个提交的奖励计算（未入账）。"""
    commit_type: CommitType
    base_coins: int
    base_xp: int
    night_bonus: bool = False
    large_bonus: bool = False
    total_coins: int
    total_xp: int
    bonus_reasons: List[str] = Field(default_factory=list)

    model_config = ConfigDict(use_enum_values=True)


class CommitReward(BaseModel):
    """已入账的单个提交奖励，供展示。"""
    short_hash: str
    message: str
    type: CommitType
    coins: int
    xp: int
    bonuses: List[str] = Field(default_factory=list)

    model_config = ConfigDict(use_enum_values=True)


class GitProcessResult(BaseModel):
    """一次提交对账的结果；失败时不修改宠物。"""
    success: bool
    new_commits: int = 0
    total_coins: int = 0
    total_xp: int = 0
    streak: int = 0
    streak_bonus: int = 0
    level_up: bool = False
    rewards: List[CommitReward] = Field(default_factory=list)
    error: Optional[str] = None
