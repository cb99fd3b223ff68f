"""用户配置的读写与校验。"""
import sys
from pathlib import Path
from typing import List, Optional

from pet_terminal.config import DATA_DIR, DECAY_RATE_MAX, DECAY_RATE_MIN, STAT_MAX, STAT_MIN, USER_CONFIG_FILE
from pet_terminal.settings.models import AutoCareThresholds, UserConfig

THRESHOLD_STATS = tuple(AutoCareThresholds.model_fields)


def validate(config: UserConfig) -> List[str]:
    """返回配置中的问题列表，空列表表示合法。"""
    errors = []
    if not DECAY_RATE_MIN <= config.decay_rate <= DECAY_RATE_MAX:
        errors.append(f"decay_rate 应在 {DECAY_RATE_MIN} ~ {DECAY_RATE_MAX} 之间")
    for stat, value in config.auto_care.thresholds.model_dump().items():
        if not STAT_MIN <= value <= STAT_MAX:
            errors.append(f"阈值 {stat} 应在 {STAT_MIN} ~ {STAT_MAX} 之间")
    return errors


class ConfigStore:
    """config.json；文件缺失或损坏时使用默认配置。"""

    def __init__(self, base_dir: Optional[Path] = None):
        self.base_dir = base_dir or DATA_DIR

    def _path(self) -> Path:
        return self.base_dir / USER_CONFIG_FILE

    def load(self) -> UserConfig:
        path = self._path()
        if not path.exists():
            return UserConfig()
        try:
            with open(path, "r", encoding="utf-8") as f:
                return UserConfig.model_validate_json(f.read())
        except (OSError, ValueError) as e:
            print(f"[宠物-配置] 配置文件无效，使用默认值: {e}", file=sys.stderr, flush=True)
            return UserConfig()

    def save(self, config: UserConfig) -> None:
        self.base_dir.mkdir(parents=True, exist_ok=True)
        with open(self._path(), "w", encoding="utf-8") as f:
            f.write(config.model_dump_json(indent=2))

    def set_decay_rate(self, rate: float) -> UserConfig:
        config = self.load()
        config.decay_rate = max(DECAY_RATE_MIN, min(DECAY_RATE_MAX, rate))
        self.save(config)
        return config

    def set_threshold(self, stat: str, value: int) -> UserConfig:
        if stat not in THRESHOLD_STATS:
            raise ValueError(f"未知属性: {stat}")
        config = self.load()
        setattr(config.auto_care.thresholds, stat, max(STAT_MIN, min(STAT_MAX, value)))
        self.save(config)
        return config

    def set_auto_care_enabled(self, enabled: bool) -> UserConfig:
        config = self.load()
        config.auto_care.enabled = enabled
        self.save(config)
        return config

    def set_auto_feed(self, enabled: bool) -> UserConfig:
        config = self.load()
        config.auto_care.auto_feed = enabled
        self.save(config)
        return config

    def reset(self) -> UserConfig:
        config = UserConfig()
        self.save(config)
        return config
