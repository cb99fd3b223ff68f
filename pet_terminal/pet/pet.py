"""宠物聚合：把纯状态转换串起来，并在边界处统一写盘。"""
from datetime import datetime, timezone
from typing import TYPE_CHECKING, List, Optional

from pet_terminal.config import DEFAULT_PET_NAME, MIN_SYNC_HOURS
from pet_terminal.items.catalog import ItemCatalog
from pet_terminal.items.inventory import Inventory
from pet_terminal.items.models import CoinReason
from pet_terminal.pet import actions
from pet_terminal.pet import level as level_calc
from pet_terminal.pet.decay import TimeDecay, TimeSyncResult
from pet_terminal.pet.models import ActionResult, MoodState, PetRecord, PetSpecies, PetStats, StatChange
from pet_terminal.pet.stats import calculate_mood, needs_care

if TYPE_CHECKING:
    from pet_terminal.storage.store import PetStore


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Pet:
    """
    单只宠物。状态全部在 PetRecord 中，本类只负责：
    调用 actions 中的纯函数、替换记录、成功时写盘。
    store 为 None 时只在内存中运行（测试用）。
    """

    def __init__(
        self,
        record: PetRecord,
        store: Optional["PetStore"] = None,
        catalog: Optional[ItemCatalog] = None,
        decay: Optional[TimeDecay] = None,
    ):
        self._record = record
        self.store = store
        self.catalog = catalog or ItemCatalog()
        self.decay = decay or TimeDecay()

    @classmethod
    def create_new(
        cls,
        store: Optional["PetStore"] = None,
        name: str = DEFAULT_PET_NAME,
        species: PetSpecies = PetSpecies.CAT,
        now: Optional[datetime] = None,
        catalog: Optional[ItemCatalog] = None,
        decay: Optional[TimeDecay] = None,
    ) -> "Pet":
        """创建新宠物并立即保存。"""
        pet = cls(actions.new_record(now or utcnow(), name, species), store, catalog, decay)
        pet.save()
        return pet

    @classmethod
    def load(
        cls,
        store: "PetStore",
        catalog: Optional[ItemCatalog] = None,
        decay: Optional[TimeDecay] = None,
    ) -> Optional["Pet"]:
        """读取存档中的宠物；不结算衰减，调用方需随后调用 sync_time()。"""
        record = store.get_pet()
        if record is None:
            return None
        return cls(record, store, catalog, decay)

    # ----- 持久化 -----

    def save(self) -> None:
        if self.store is not None:
            self._record = self.store.save_pet(self._record)

    def release(self) -> None:
        """放生：清空存档槽位，不可恢复。"""
        if self.store is not None:
            self.store.delete_pet()

    def update_record(self, record: PetRecord) -> None:
        """用外部计算出的新记录替换当前状态并写盘（Git 奖励等）。"""
        self._record = record
        self.save()

    def _apply(self, record: PetRecord, result: ActionResult) -> ActionResult:
        if result.success:
            self._record = record
            self.save()
        return result

    # ----- 动作 -----

    def feed(self, now: Optional[datetime] = None) -> ActionResult:
        return self._apply(*actions.feed(self._record, now or utcnow()))

    def play(self, now: Optional[datetime] = None) -> ActionResult:
        return self._apply(*actions.play(self._record, now or utcnow()))

    def clean(self, now: Optional[datetime] = None) -> ActionResult:
        return self._apply(*actions.clean(self._record, now or utcnow()))

    def heal(self, now: Optional[datetime] = None) -> ActionResult:
        return self._apply(*actions.heal(self._record, now or utcnow()))

    def sleep(self, now: Optional[datetime] = None) -> ActionResult:
        return self._apply(*actions.sleep(self._record, now or utcnow()))

    def use_item(self, item_id: str, now: Optional[datetime] = None) -> ActionResult:
        return self._apply(*actions.use_item(self._record, item_id, self.catalog, now or utcnow()))

    def add_item(self, item_id: str, quantity: int = 1) -> None:
        self._record = actions.add_item(self._record, item_id, quantity)
        self.save()

    def earn_coins(self, amount: int, reason: CoinReason, now: Optional[datetime] = None) -> None:
        self._record = actions.earn_coins(self._record, amount, reason, now or utcnow())
        self.save()

    def spend_coins(self, amount: int, now: Optional[datetime] = None) -> bool:
        """余额不足返回 False，余额与流水都不变。"""
        record, ok = actions.spend_coins(self._record, amount, now or utcnow())
        if ok:
            self._record = record
            self.save()
        return ok

    def apply_stat_bonus(self, changes: List[StatChange]) -> None:
        self._record = actions.apply_stat_bonus(self._record, changes)
        self.save()

    # ----- 时间 -----

    def sync_time(self, now: Optional[datetime] = None) -> Optional[TimeSyncResult]:
        """
        结算自上次更新以来的衰减。
        不足 1 分钟返回 None；只有属性确实变化时才写盘。
        """
        record, result = actions.sync_time(self._record, now or utcnow(), self.decay, MIN_SYNC_HOURS)
        if result is None:
            return None
        self._record = record
        if result.stat_changes:
            self.save()
        return result

    def hours_since_update(self, now: Optional[datetime] = None) -> float:
        return actions.hours_since(self._record, now or utcnow())

    # ----- 查询 -----

    @property
    def record(self) -> PetRecord:
        return self._record

    def snapshot(self) -> PetRecord:
        """只读快照（深拷贝）。"""
        return self._record.model_copy(deep=True)

    @property
    def name(self) -> str:
        return self._record.name

    @property
    def stats(self) -> PetStats:
        return actions.current_stats(self._record)

    @property
    def level(self) -> int:
        return self._record.level

    @property
    def experience(self) -> int:
        return self._record.experience

    @property
    def is_sleeping(self) -> bool:
        return self._record.is_sleeping

    @property
    def coins(self) -> int:
        return self._record.coins

    @property
    def inventory(self) -> Inventory:
        """背包视图；修改请走 add_item / use_item。"""
        return Inventory(self._record.inventory)

    @property
    def git_streak(self) -> int:
        return self._record.git_streak

    @property
    def git_commit_count(self) -> int:
        return self._record.git_commit_count

    def current_mood(self) -> MoodState:
        return calculate_mood(self._record.stats, self._record.is_sleeping)

    def needs_care(self) -> bool:
        return needs_care(self._record.stats)

    def level_progress(self) -> int:
        return level_calc.level_progress(self._record.level, self._record.experience)

    def xp_to_next_level(self) -> int:
        return level_calc.xp_to_next_level(self._record.level, self._record.experience)

    def level_title(self) -> str:
        return level_calc.level_title(self._record.level)

    def today_coins(self, now: Optional[datetime] = None) -> int:
        """今天（按 now 的时区）赚到的金币，只统计保留窗口内的流水。"""
        now = now or utcnow()
        today = now.date()
        return sum(
            e.amount for e in self._record.coin_history
            if e.amount > 0 and e.timestamp.astimezone(now.tzinfo).date() == today
        )

    def total_coins_earned(self) -> int:
        return sum(e.amount for e in self._record.coin_history if e.amount > 0)
