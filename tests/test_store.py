"""存档读写测试。"""
import json
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

from pet_terminal.pet.models import PetSpecies
from pet_terminal.pet.pet import Pet
from pet_terminal.storage.store import PetStore

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def test_store_empty() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        store = PetStore(base_dir=Path(tmp))
        assert store.has_pet() is False
        assert store.get_pet() is None
        assert store.is_first_run() is True


def test_create_save_load() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        store = PetStore(base_dir=Path(tmp))
        pet = Pet.create_new(store, "小白", PetSpecies.DOG, now=NOW)
        assert store.has_pet() is True
        assert pet.record.last_save_time is not None

        loaded = store.get_pet()
        assert loaded.id == pet.record.id
        assert loaded.name == "小白"
        assert loaded.species == "dog"
        assert loaded.inventory == pet.record.inventory

        data = json.loads((Path(tmp) / "pet.json").read_text(encoding="utf-8"))
        assert set(data) == {"pet", "settings"}
        assert data["settings"]["version"] == "1.0.0"
        assert not (Path(tmp) / "pet.json.tmp").exists()


def test_load_does_not_decay() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        store = PetStore(base_dir=Path(tmp))
        Pet.create_new(store, now=NOW)
        pet = Pet.load(store)
        assert pet.record.last_updated == NOW
        assert pet.stats.hunger == 100

        pet.sync_time(NOW + timedelta(hours=10))
        assert store.get_pet().stats.hunger == 70


def test_actions_persist() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        store = PetStore(base_dir=Path(tmp))
        pet = Pet.create_new(store, now=NOW)
        pet.play(NOW)
        assert store.get_pet().stats.energy == 80
        assert pet.spend_coins(10, NOW) is True
        assert store.get_pet().coins == 40


def test_delete_pet() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        store = PetStore(base_dir=Path(tmp))
        pet = Pet.create_new(store, now=NOW)
        store.mark_onboarded()
        pet.release()
        assert store.has_pet() is False
        assert Pet.load(store) is None
        # 放生不影响首次运行标记
        assert store.is_first_run() is False


def test_corrupt_documents_read_as_no_pet() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        path = Path(tmp) / "pet.json"
        store = PetStore(base_dir=Path(tmp))
        for content in ["", "{not json", '{"pet": {"name": 1}}', "[1, 2]"]:
            path.write_text(content, encoding="utf-8")
            assert store.get_pet() is None
            assert store.has_pet() is False

        # 损坏的存档可以被新宠物覆盖
        Pet.create_new(store, now=NOW)
        assert store.has_pet() is True


def test_onboarding_flag_survives_saves() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        store = PetStore(base_dir=Path(tmp))
        store.mark_onboarded()
        Pet.create_new(store, now=NOW)
        assert store.is_first_run() is False
