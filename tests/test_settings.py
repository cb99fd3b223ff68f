"""用户配置测试。"""
import tempfile
from pathlib import Path

import pytest
from pydantic import ValidationError

from pet_terminal.settings.models import AutoCareThresholds, UserConfig
from pet_terminal.settings.store import ConfigStore, validate


def test_defaults_when_missing() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        config = ConfigStore(base_dir=Path(tmp)).load()
        assert config.decay_rate == 1.0
        assert config.auto_care.enabled is False
        t = config.auto_care.thresholds
        assert (t.hunger, t.happiness, t.cleanliness, t.energy, t.health) == (70, 60, 60, 50, 70)


def test_set_decay_rate_clamped() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        store = ConfigStore(base_dir=Path(tmp))
        assert store.set_decay_rate(10).decay_rate == 5.0
        assert store.set_decay_rate(0).decay_rate == 0.1
        store.set_decay_rate(2)
        assert ConfigStore(base_dir=Path(tmp)).load().decay_rate == 2


def test_set_threshold() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        store = ConfigStore(base_dir=Path(tmp))
        assert store.set_threshold("hunger", 150).auto_care.thresholds.hunger == 100
        assert store.set_threshold("health", 40).auto_care.thresholds.health == 40
        assert store.load().auto_care.thresholds.health == 40
        with pytest.raises(ValueError):
            store.set_threshold("mana", 10)


def test_auto_care_toggle_and_reset() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        store = ConfigStore(base_dir=Path(tmp))
        store.set_auto_care_enabled(True)
        assert store.load().auto_care.enabled is True
        store.reset()
        assert store.load() == UserConfig()


def test_corrupt_and_partial_files() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "config.json"
        store = ConfigStore(base_dir=Path(tmp))
        path.write_text("{oops", encoding="utf-8")
        assert store.load() == UserConfig()

        path.write_text('{"decay_rate": 2.5}', encoding="utf-8")
        config = store.load()
        assert config.decay_rate == 2.5
        assert config.auto_care.thresholds.hunger == 70


def test_validate() -> None:
    assert validate(UserConfig()) == []
    assert len(validate(UserConfig.model_construct(decay_rate=9, auto_care=UserConfig().auto_care))) == 1
    config = UserConfig()
    config.auto_care.thresholds.energy = -1
    assert len(validate(config)) == 1


def test_out_of_range_values_rejected() -> None:
    with pytest.raises(ValidationError):
        UserConfig(decay_rate=-2)
    with pytest.raises(ValidationError):
        UserConfig(decay_rate=9)
    with pytest.raises(ValidationError):
        AutoCareThresholds(hunger=101)


def test_out_of_range_file_falls_back_to_defaults() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "config.json"
        store = ConfigStore(base_dir=Path(tmp))

        path.write_text('{"decay_rate": -2}', encoding="utf-8")
        assert store.load().decay_rate == 1.0

        path.write_text('{"auto_care": {"thresholds": {"health": -5}}}', encoding="utf-8")
        assert store.load() == UserConfig()


def test_set_auto_feed() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        store = ConfigStore(base_dir=Path(tmp))
        assert store.load().auto_care.auto_feed is False
        store.set_auto_feed(True)
        assert store.load().auto_care.auto_feed is True
