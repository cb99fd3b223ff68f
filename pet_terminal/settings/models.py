"""用户配置数据模型（config.json）。越界的值在读取时整体回退为默认配置。"""
from pydantic import BaseModel, Field

from pet_terminal.config import DECAY_RATE_MAX, DECAY_RATE_MIN, STAT_MAX, STAT_MIN


class AutoCareThresholds(BaseModel):
    """属性低于阈值时一键照顾会处理。"""
    hunger: int = Field(70, ge=STAT_MIN, le=STAT_MAX, description="饱腹")
    happiness: int = Field(60, ge=STAT_MIN, le=STAT_MAX, description="快乐")
    cleanliness: int = Field(60, ge=STAT_MIN, le=STAT_MAX, description="清洁")
    energy: int = Field(50, ge=STAT_MIN, le=STAT_MAX, description="精力，仅用于展示")
    health: int = Field(70, ge=STAT_MIN, le=STAT_MAX, description="健康")


class AutoCareConfig(BaseModel):
    enabled: bool = Field(False, description="是否允许自动补货")
    auto_feed: bool = Field(False, description="查看状态时若饿了自动喂食")
    thresholds: AutoCareThresholds = Field(default_factory=AutoCareThresholds)


class UserConfig(BaseModel):
    """缺省字段由 pydantic 补全，旧配置文件可直接读取。"""
    decay_rate: float = Field(1.0, ge=DECAY_RATE_MIN, le=DECAY_RATE_MAX, description="衰减倍率，1.0 为正常速度")
    auto_care: AutoCareConfig = Field(default_factory=AutoCareConfig)
