"""物品目录、背包与商店测试。"""
from datetime import datetime, timezone

from pet_terminal.items.catalog import ItemCatalog
from pet_terminal.items.inventory import Inventory
from pet_terminal.items.models import CoinReason, InventoryEntry, ItemType
from pet_terminal.items.shop import Shop, coin_reward
from pet_terminal.pet import actions
from pet_terminal.pet.pet import Pet

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def test_catalog() -> None:
    catalog = ItemCatalog()
    assert len(catalog.all()) == 18
    assert "fish" in catalog
    assert "rock" not in catalog
    fish = catalog.get("fish")
    assert fish.price == 10
    assert fish.effect.hunger == 30
    assert len(catalog.by_type(ItemType.FOOD)) == 5
    assert catalog.name_of("rock") == "rock"


def test_inventory_add_remove() -> None:
    inv = Inventory([InventoryEntry(item_id="fish", quantity=2)])
    inv.add("ball", 3)
    assert inv.quantity("ball") == 3
    assert inv.has("fish", 2) is True
    assert inv.has("fish", 3) is False

    assert inv.remove("fish", 3) is False
    assert inv.quantity("fish") == 2
    assert inv.remove("fish", 2) is True
    assert inv.quantity("fish") == 0
    assert [e.item_id for e in inv.entries()] == ["ball"]


def test_inventory_entries_sorted_and_counts() -> None:
    inv = Inventory()
    assert inv.is_empty() is True
    inv.add("soap", 1)
    inv.add("fish", 4)
    inv.add("ball", 2)
    inv.add("cake", 0)
    assert [e.item_id for e in inv.entries()] == ["fish", "ball", "soap"]
    assert inv.unique_count() == 3
    assert inv.total_count() == 7
    inv.clear()
    assert inv.is_empty() is True


def test_inventory_by_type() -> None:
    catalog = ItemCatalog()
    inv = Inventory(ItemCatalog.starting_inventory())
    assert inv.has_type(ItemType.FOOD, catalog) is True
    assert [e.item_id for e in inv.entries_of_type(ItemType.TOY, catalog)] == ["ball"]
    inv.remove("medicine")
    assert inv.has_type(ItemType.MEDICINE, catalog) is False


def test_coin_rewards() -> None:
    assert coin_reward(CoinReason.FEED) == 1
    assert coin_reward(CoinReason.LEVEL_UP) == 20
    assert coin_reward(CoinReason.GIT_STREAK_30) == 50
    assert coin_reward(CoinReason.GIFT) == 0


def test_shop_listing() -> None:
    shop = Shop(ItemCatalog())
    assert len(shop.items()) == 18
    assert len(shop.items(ItemType.CLEANING)) == 4
    assert set(shop.by_category()) == {"Food", "Toys", "Cleaning", "Medicine"}
    assert shop.price("golden_apple") == 200
    assert shop.price("rock") is None
    assert shop.can_afford("fish", 10) is True
    assert shop.can_afford("fish", 9) is False
    assert shop.max_affordable("fish", 35) == 3


def test_purchase() -> None:
    catalog = ItemCatalog()
    shop = Shop(catalog)
    pet = Pet(actions.new_record(NOW), catalog=catalog)

    result = shop.purchase(pet, "fish", 2)
    assert result.success is True
    assert result.coins_spent == 20
    assert result.remaining_coins == 30
    assert pet.inventory.quantity("fish") == 5
    assert pet.record.coin_history[-1].amount == -20


def test_purchase_failures_do_not_mutate() -> None:
    shop = Shop(ItemCatalog())
    pet = Pet(actions.new_record(NOW))
    before = pet.snapshot()

    assert shop.purchase(pet, "elixir", 2).success is False
    assert shop.purchase(pet, "rock").success is False
    assert shop.purchase(pet, "fish", 0).success is False
    assert pet.record == before
