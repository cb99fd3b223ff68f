"""宠物状态转换（纯函数）。

每个公开函数接收一份 PetRecord 和当前时间，返回新的 PetRecord 与结果，
不修改入参、不读写存档。被拒绝的动作原样返回入参记录。
"""
import uuid
from datetime import datetime
from typing import List, Optional, Tuple

from pet_terminal.config import (
    COIN_HISTORY_LIMIT,
    DEFAULT_PET_NAME,
    LEVEL_UP_STAT_BONUS,
    STARTING_COINS,
)
from pet_terminal.items.catalog import ItemCatalog
from pet_terminal.items.inventory import Inventory
from pet_terminal.items.models import CoinReason, ItemType
from pet_terminal.items.shop import ITEM_COIN_REASONS, coin_reward
from pet_terminal.pet import level as level_calc
from pet_terminal.pet.decay import TimeDecay, TimeSyncResult
from pet_terminal.pet.models import ActionResult, CoinEntry, PetRecord, PetSpecies, PetStats, StatChange
from pet_terminal.pet.stats import apply_changes, boost_all, calculate_mood, changes_from_deltas

FEED_CHANGES = changes_from_deltas(hunger=25, happiness=4, health=2, cleanliness=-4, energy=-2)
PLAY_CHANGES = changes_from_deltas(hunger=-5, happiness=23, health=1, cleanliness=-4, energy=-20)
CLEAN_CHANGES = changes_from_deltas(hunger=-2, happiness=5, health=3, cleanliness=35, energy=-3)
HEAL_CHANGES = changes_from_deltas(hunger=-3, happiness=2, health=30, cleanliness=5, energy=-5)
WAKE_CHANGES = changes_from_deltas(hunger=-5, happiness=8, health=5, cleanliness=-2, energy=80)

FEED_XP = 10
PLAY_XP = 15
CLEAN_XP = 8
HEAL_XP = 20
SLEEP_XP = 5

Transition = Tuple[PetRecord, ActionResult]


def generate_pet_id(now: datetime) -> str:
    return f"pet_{int(now.timestamp() * 1000)}_{uuid.uuid4().hex[:7]}"


def new_record(now: datetime, name: str = DEFAULT_PET_NAME, species: PetSpecies = PetSpecies.CAT) -> PetRecord:
    """新宠物：属性全满、初始背包与金币。"""
    return PetRecord(
        id=generate_pet_id(now),
        name=name.strip() or DEFAULT_PET_NAME,
        species=species,
        birth_date=now,
        last_interaction=now,
        last_updated=now,
        inventory=ItemCatalog.starting_inventory(),
        coins=STARTING_COINS,
    )


def _rejected(record: PetRecord, message: str) -> Transition:
    return record, ActionResult(success=False, message=message)


def _earn(rec: PetRecord, amount: int, reason: CoinReason, now: datetime) -> None:
    rec.coins += amount
    rec.coin_history.append(CoinEntry(amount=amount, reason=reason.value, timestamp=now))
    if len(rec.coin_history) > COIN_HISTORY_LIMIT:
        rec.coin_history = rec.coin_history[-COIN_HISTORY_LIMIT:]


def _add_experience(rec: PetRecord, amount: int, now: datetime) -> bool:
    """加经验；升级时全属性 +5 并发放一次升级金币。"""
    rec.experience += amount
    new_level = level_calc.calculate_new_level(rec.level, rec.experience)
    if new_level <= rec.level:
        return False
    rec.level = new_level
    rec.stats = boost_all(rec.stats, LEVEL_UP_STAT_BONUS)
    _earn(rec, coin_reward(CoinReason.LEVEL_UP), CoinReason.LEVEL_UP, now)
    return True


def _touch(rec: PetRecord, now: datetime) -> None:
    rec.last_interaction = now
    rec.total_interactions += 1


def _refresh_mood(rec: PetRecord) -> None:
    rec.mood = calculate_mood(rec.stats, rec.is_sleeping)


def _perform(record: PetRecord, changes: List[StatChange], xp: int, verb: str, now: datetime) -> Transition:
    rec = record.model_copy(deep=True)
    old_level = rec.level
    rec.stats = apply_changes(rec.stats, changes)
    _add_experience(rec, xp, now)
    _refresh_mood(rec)
    _touch(rec, now)

    level_up = rec.level > old_level
    message = f"{rec.name} {verb}，很开心！"
    if level_up:
        message = f"升级了！{rec.name} 现在是 {rec.level} 级！"
    return rec, ActionResult(
        success=True,
        message=message,
        stat_changes=changes,
        xp_gained=xp,
        level_up=level_up,
        new_level=rec.level,
    )


def _sleeping_message(record: PetRecord) -> str:
    return f"{record.name} 正在睡觉，先叫醒它吧。"


def feed(record: PetRecord, now: datetime) -> Transition:
    if record.is_sleeping:
        return _rejected(record, _sleeping_message(record))
    if record.stats.hunger >= 95:
        return _rejected(record, f"{record.name} 已经吃饱了！")
    return _perform(record, FEED_CHANGES, FEED_XP, "吃饱了", now)


def play(record: PetRecord, now: datetime) -> Transition:
    if record.is_sleeping:
        return _rejected(record, _sleeping_message(record))
    if record.stats.energy < 15:
        return _rejected(record, f"{record.name} 太累了，玩不动，让它休息一下。")
    return _perform(record, PLAY_CHANGES, PLAY_XP, "玩耍了一会儿", now)


def clean(record: PetRecord, now: datetime) -> Transition:
    if record.is_sleeping:
        return _rejected(record, _sleeping_message(record))
    if record.stats.cleanliness >= 95:
        return _rejected(record, f"{record.name} 已经很干净了！")
    return _perform(record, CLEAN_CHANGES, CLEAN_XP, "洗了个澡", now)


def heal(record: PetRecord, now: datetime) -> Transition:
    if record.is_sleeping:
        return _rejected(record, _sleeping_message(record))
    if record.stats.health >= 90:
        return _rejected(record, f"{record.name} 已经很健康了！")
    return _perform(record, HEAL_CHANGES, HEAL_XP, "接受了治疗", now)


def sleep(record: PetRecord, now: datetime) -> Transition:
    """睡觉/起床切换，不做任何限制。"""
    if not record.is_sleeping:
        rec = record.model_copy(deep=True)
        rec.is_sleeping = True
        old_level = rec.level
        _add_experience(rec, SLEEP_XP, now)
        _refresh_mood(rec)
        _touch(rec, now)
        return rec, ActionResult(
            success=True,
            message=f"{rec.name} 睡着了，嘘……",
            xp_gained=SLEEP_XP,
            level_up=rec.level > old_level,
            new_level=rec.level,
        )

    awake = record.model_copy(update={"is_sleeping": False})
    rec, result = _perform(awake, WAKE_CHANGES, SLEEP_XP, "醒来了", now)
    if not result.level_up:
        result.message = f"{rec.name} 睡醒了，精神饱满！"
    return rec, result


def use_item(record: PetRecord, item_id: str, catalog: ItemCatalog, now: datetime) -> Transition:
    """使用背包中的物品。不检查睡眠状态，由调用方决定。"""
    item = catalog.get(item_id)
    if item is None:
        return _rejected(record, f"未知物品：{item_id}")
    inventory = Inventory(record.inventory)
    if not inventory.has(item_id):
        return _rejected(record, f"背包里没有 {item.name}！")

    inventory.remove(item_id, 1)
    rec = record.model_copy(deep=True)
    rec.inventory = inventory.entries()
    reason = ITEM_COIN_REASONS[ItemType(item.type)]
    coins = coin_reward(reason)
    if coins > 0:
        _earn(rec, coins, reason, now)

    changes = changes_from_deltas(**item.effect.model_dump())
    return _perform(rec, changes, item.xp_reward, f"用了 {item.name}", now)


def add_item(record: PetRecord, item_id: str, quantity: int = 1) -> PetRecord:
    inventory = Inventory(record.inventory)
    inventory.add(item_id, quantity)
    return record.model_copy(update={"inventory": inventory.entries()}, deep=True)


def earn_coins(record: PetRecord, amount: int, reason: CoinReason, now: datetime) -> PetRecord:
    rec = record.model_copy(deep=True)
    _earn(rec, amount, reason, now)
    return rec


def spend_coins(record: PetRecord, amount: int, now: datetime) -> Tuple[PetRecord, bool]:
    """余额不足返回 (原记录, False)。"""
    if amount < 0 or record.coins < amount:
        return record, False
    rec = record.model_copy(deep=True)
    rec.coins -= amount
    rec.coin_history.append(CoinEntry(amount=-amount, reason=CoinReason.PURCHASE.value, timestamp=now))
    if len(rec.coin_history) > COIN_HISTORY_LIMIT:
        rec.coin_history = rec.coin_history[-COIN_HISTORY_LIMIT:]
    return rec, True


def add_experience(record: PetRecord, amount: int, now: datetime) -> Tuple[PetRecord, bool]:
    rec = record.model_copy(deep=True)
    leveled = _add_experience(rec, amount, now)
    _refresh_mood(rec)
    return rec, leveled


def apply_stat_bonus(record: PetRecord, changes: List[StatChange]) -> PetRecord:
    """绕过动作流程直接加属性（例如 Git 提交的陪伴奖励）。"""
    rec = record.model_copy(deep=True)
    rec.stats = apply_changes(rec.stats, changes)
    _refresh_mood(rec)
    return rec


def sync_time(record: PetRecord, now: datetime, decay: TimeDecay, min_hours: float) -> Tuple[PetRecord, Optional[TimeSyncResult]]:
    """结算离线衰减；经过时间不足 min_hours 时返回 (原记录, None)。"""
    hours = hours_since(record, now)
    if hours < min_hours:
        return record, None
    result = decay.calculate(hours, record.stats, record.is_sleeping)
    rec = record.model_copy(deep=True)
    if result.new_stats is not None:
        rec.stats = result.new_stats
    _refresh_mood(rec)
    rec.last_updated = now
    return rec, result


def hours_since(record: PetRecord, now: datetime) -> float:
    return (now - record.last_updated).total_seconds() / 3600


def current_stats(record: PetRecord) -> PetStats:
    return record.stats.model_copy()
