"""一键照顾与自动补货测试。"""
from datetime import datetime, timezone

from pet_terminal.care.auto_care import AutoCare
from pet_terminal.care.models import CareAction
from pet_terminal.items.catalog import ItemCatalog
from pet_terminal.items.models import InventoryEntry
from pet_terminal.items.shop import Shop
from pet_terminal.pet import actions
from pet_terminal.pet.models import PetStats
from pet_terminal.pet.pet import Pet
from pet_terminal.settings.models import AutoCareConfig, AutoCareThresholds

NOW = datetime(2026, 3, 1, 12, 0, tzinfo=timezone.utc)


def make_pet(inventory=None, coins: int = 50, **stats) -> Pet:
    update = {"stats": PetStats(**stats), "coins": coins}
    if inventory is not None:
        update["inventory"] = [InventoryEntry(item_id=k, quantity=v) for k, v in inventory.items()]
    return Pet(actions.new_record(NOW).model_copy(update=update))


def test_assess_needs_order() -> None:
    care = AutoCare()
    stats = PetStats(hunger=10, happiness=10, health=10, cleanliness=10)
    needs = care.assess_needs(stats, is_sleeping=False)
    assert [n.stat for n in needs] == ["hunger", "health", "happiness", "cleanliness"]
    assert [n.priority for n in needs] == [100, 90, 70, 60]
    assert needs[0].item_id == "fish"
    assert needs[0].item_name == "Fresh Fish"


def test_assess_needs_sleeping_and_healthy() -> None:
    care = AutoCare()
    assert care.assess_needs(PetStats(hunger=10), is_sleeping=True) == []
    assert care.assess_needs(PetStats(), is_sleeping=False) == []


def test_assess_needs_custom_thresholds() -> None:
    care = AutoCare(AutoCareConfig(thresholds=AutoCareThresholds(hunger=90)))
    needs = care.assess_needs(PetStats(hunger=85), is_sleeping=False)
    assert [n.stat for n in needs] == ["hunger"]


def test_one_click_care_order() -> None:
    pet = make_pet(hunger=20, happiness=20)
    result = AutoCare().one_click_care(pet, NOW)
    assert result.success is True
    assert [a.action for a in result.actions_taken] == [CareAction.FEED.value, CareAction.PLAY.value]
    feed, play = result.actions_taken
    assert (feed.stat_changes[0].before, feed.stat_changes[0].after) == (20, 50)
    # 鱼先加了 5 点快乐
    assert (play.stat_changes[0].before, play.stat_changes[0].after) == (25, 45)
    assert result.items_used == 2
    assert result.stats_before.hunger == 20
    assert result.stats_after.hunger == 50
    assert pet.inventory.quantity("fish") == 2
    assert pet.inventory.quantity("ball") == 1


def test_one_click_care_uses_fallback() -> None:
    pet = make_pet(inventory={"treat": 1, "premium_food": 1}, hunger=20)
    result = AutoCare().one_click_care(pet, NOW)
    assert result.actions_taken[0].item_id == "premium_food"
    assert result.actions_taken[0].success is True
    assert pet.inventory.quantity("premium_food") == 0
    assert pet.inventory.quantity("treat") == 1


def test_one_click_care_failure_does_not_block() -> None:
    pet = make_pet(inventory={"ball": 1}, hunger=20, happiness=20)
    result = AutoCare().one_click_care(pet, NOW)
    feed, play = result.actions_taken
    assert feed.success is False
    assert feed.reason
    assert feed.stat_changes == []
    assert play.success is True
    assert result.success is True
    assert result.items_used == 1


def test_one_click_care_nothing_available() -> None:
    pet = make_pet(inventory={}, hunger=20)
    result = AutoCare().one_click_care(pet, NOW)
    assert result.success is False
    assert pet.stats.hunger == 20


def test_auto_purchase_disabled() -> None:
    pet = make_pet(inventory={})
    result = AutoCare().auto_purchase(pet, Shop(ItemCatalog()))
    assert result.purchased is False
    assert pet.coins == 50


def test_auto_purchase_restocks() -> None:
    pet = make_pet(inventory={})
    care = AutoCare(AutoCareConfig(enabled=True))
    result = care.auto_purchase(pet, Shop(ItemCatalog()))
    assert result.purchased is True
    assert [(p.item_id, p.quantity) for p in result.items] == [("fish", 4), ("soap", 1)]
    assert result.total_cost == 50
    assert pet.coins == 0
    assert pet.inventory.quantity("fish") == 4
    assert pet.inventory.quantity("soap") == 1


def test_auto_purchase_skips_stocked_items() -> None:
    pet = make_pet()
    result = AutoCare(AutoCareConfig(enabled=True)).auto_purchase(pet, Shop(ItemCatalog()))
    assert result.purchased is False
    assert pet.coins == 50


def test_can_afford_auto_care() -> None:
    care = AutoCare()
    assert care.can_afford_auto_care(make_pet()) is True
    assert care.can_afford_auto_care(make_pet(inventory={}, coins=50)) is True
    assert care.can_afford_auto_care(make_pet(inventory={}, coins=10)) is False


def test_suggestions() -> None:
    care = AutoCare()
    tips = care.suggestions(make_pet())
    assert any("Git" in t for t in tips)
    assert not any("pet care" in t for t in tips)

    tips = care.suggestions(make_pet(hunger=10))
    assert any("pet care" in t for t in tips)

    tips = care.suggestions(make_pet(inventory={}, coins=150))
    assert any("pet shop" in t for t in tips)


def test_auto_feed_only_when_enabled_and_hungry() -> None:
    pet = make_pet(hunger=20, happiness=20)
    assert AutoCare().auto_feed(pet, NOW) is None
    assert pet.stats.hunger == 20

    care = AutoCare(AutoCareConfig(auto_feed=True))
    fed = care.auto_feed(pet, NOW)
    assert fed.success is True
    assert (fed.stat_changes[0].before, fed.stat_changes[0].after) == (20, 50)
    # 只处理饱腹，快乐不动用玩具
    assert pet.inventory.quantity("ball") == 2
    assert care.auto_feed(make_pet(), NOW) is None


def test_auto_feed_skips_sleeping_pet() -> None:
    pet = make_pet(hunger=20)
    pet.sleep(NOW)
    assert AutoCare(AutoCareConfig(auto_feed=True)).auto_feed(pet, NOW) is None
    assert pet.inventory.quantity("fish") == 3
