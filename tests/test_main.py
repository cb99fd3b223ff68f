"""命令行入口测试。"""
import io
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

from pet_terminal.main import App, main
from pet_terminal.pet import actions
from pet_terminal.pet.models import PetStats
from pet_terminal.pet.pet import Pet
from pet_terminal.settings.store import ConfigStore
from pet_terminal.storage.store import PetStore


def test_cli_flow(capsys) -> None:
    with tempfile.TemporaryDirectory() as tmp:
        home = ["--home", tmp]
        assert main(home + ["status"]) == 1
        assert main(home + ["init", "--name", "Mochi", "--species", "dog"]) == 0
        assert main(home + ["init"]) == 1
        assert "Mochi" in capsys.readouterr().out

        # 刚领养时饱腹已满
        assert main(home + ["feed"]) == 1
        assert main(home + ["play"]) == 0
        assert main(home + ["status"]) == 0
        assert main(home + ["inventory"]) == 0
        assert main(home + ["use", "rock"]) == 1
        assert main(home + ["use", "fish"]) == 0

        assert main(home + ["shop"]) == 0
        assert main(home + ["shop", "buy", "soap", "2"]) == 0
        store = PetStore(base_dir=Path(tmp))
        record = store.get_pet()
        assert record.name == "Mochi"
        assert record.species == "dog"
        assert record.coins == 31

        assert main(home + ["sleep"]) == 0
        assert main(home + ["use", "fish"]) == 1
        assert main(home + ["care"]) == 0
        assert main(home + ["sync"]) == 0

        assert main(home + ["release", "--yes"]) == 0
        assert store.has_pet() is False


def test_cli_config() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        home = ["--home", tmp]
        assert main(home + ["config"]) == 0
        assert main(home + ["config", "set-decay", "9"]) == 0
        assert main(home + ["config", "set-threshold", "hunger", "80"]) == 0
        assert main(home + ["config", "auto-care", "on"]) == 0
        config = ConfigStore(base_dir=Path(tmp)).load()
        assert config.decay_rate == 5.0
        assert config.auto_care.thresholds.hunger == 80
        assert config.auto_care.enabled is True
        assert main(home + ["config", "reset"]) == 0
        assert ConfigStore(base_dir=Path(tmp)).load().decay_rate == 1.0


def test_first_run_guide_shown_once(capsys) -> None:
    with tempfile.TemporaryDirectory() as tmp:
        home = ["--home", tmp]
        assert main(home + ["init"]) == 0
        assert "新手指南" in capsys.readouterr().out
        assert main(home + ["release", "--yes"]) == 0
        assert main(home + ["init"]) == 0
        assert "新手指南" not in capsys.readouterr().out


def test_release_cancelled_on_closed_stdin(monkeypatch) -> None:
    with tempfile.TemporaryDirectory() as tmp:
        home = ["--home", tmp]
        assert main(home + ["init"]) == 0
        monkeypatch.setattr("sys.stdin", io.StringIO(""))
        assert main(home + ["release"]) == 0
        assert PetStore(base_dir=Path(tmp)).has_pet() is True


def test_status_auto_feeds_when_enabled(capsys) -> None:
    with tempfile.TemporaryDirectory() as tmp:
        home = ["--home", tmp]
        now = datetime.now(timezone.utc)
        store = PetStore(base_dir=Path(tmp))
        store.save_pet(actions.new_record(now).model_copy(update={"stats": PetStats(hunger=20)}))

        assert main(home + ["status"]) == 0
        assert store.get_pet().stats.hunger == 20

        assert main(home + ["config", "auto-feed", "on"]) == 0
        capsys.readouterr()
        assert main(home + ["status"]) == 0
        assert "自动喂食" in capsys.readouterr().out
        assert store.get_pet().stats.hunger == 50


def test_out_of_range_decay_rate_ignored() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        base = Path(tmp)
        (base / "config.json").write_text('{"decay_rate": -2}', encoding="utf-8")
        app = App(base)
        assert app.config.decay_rate == 1.0

        start = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)
        app.store.save_pet(actions.new_record(start).model_copy(update={"stats": PetStats(hunger=40)}))
        pet = Pet.load(app.store, app.catalog, app.decay)
        pet.sync_time(start + timedelta(hours=5))
        assert pet.stats.hunger == 25
