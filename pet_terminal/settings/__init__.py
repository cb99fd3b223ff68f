"""用户配置。"""
from pet_terminal.settings.models import AutoCareConfig, AutoCareThresholds, UserConfig
from pet_terminal.settings.store import ConfigStore, validate

__all__ = [
    "AutoCareConfig",
    "AutoCareThresholds",
    "ConfigStore",
    "UserConfig",
    "validate",
]
