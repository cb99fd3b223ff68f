"""一键照顾：按优先级处理属性不足，缺首选物品时依次尝试替代品。"""
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from pet_terminal.care.models import (
    AutoPurchaseResult,
    AutoPurchaseRule,
    CareAction,
    CareActionResult,
    CareNeed,
    CareResult,
    PurchasedItem,
    StatTransition,
)
from pet_terminal.items.catalog import ItemCatalog
from pet_terminal.items.inventory import Inventory
from pet_terminal.items.shop import Shop
from pet_terminal.pet.models import PetStats
from pet_terminal.pet.pet import Pet
from pet_terminal.settings.models import AutoCareConfig

# (属性, 动作, 首选物品, 优先级)
CARE_RULES: Tuple[Tuple[str, CareAction, str, int], ...] = (
    ("hunger", CareAction.FEED, "fish", 100),
    ("health", CareAction.HEAL, "medicine", 90),
    ("happiness", CareAction.PLAY, "ball", 70),
    ("cleanliness", CareAction.CLEAN, "soap", 60),
)

FALLBACK_ITEMS: Dict[CareAction, Tuple[str, ...]] = {
    CareAction.FEED: ("premium_food", "treat", "steak"),
    CareAction.PLAY: ("squeaky_toy", "frisbee", "stuffed_animal"),
    CareAction.CLEAN: ("shampoo", "brush"),
    CareAction.HEAL: ("bandage", "elixir"),
}

AUTO_PURCHASE_RULES = (
    AutoPurchaseRule(item_id="fish", min_quantity=2, max_cost=20),
    AutoPurchaseRule(item_id="ball", min_quantity=1, max_cost=25),
    AutoPurchaseRule(item_id="soap", min_quantity=1, max_cost=15),
    AutoPurchaseRule(item_id="medicine", min_quantity=1, max_cost=35),
)


class AutoCare:

    def __init__(self, config: Optional[AutoCareConfig] = None, catalog: Optional[ItemCatalog] = None):
        self.config = config or AutoCareConfig()
        self.catalog = catalog or ItemCatalog()

    def assess_needs(self, stats: PetStats, is_sleeping: bool) -> List[CareNeed]:
        """睡觉时不打扰，返回空列表。"""
        if is_sleeping:
            return []
        thresholds = self.config.thresholds
        needs = []
        for stat, action, item_id, priority in CARE_RULES:
            threshold = getattr(thresholds, stat)
            if getattr(stats, stat) < threshold:
                needs.append(CareNeed(
                    stat=stat,
                    threshold=threshold,
                    action=action,
                    item_id=item_id,
                    item_name=self.catalog.name_of(item_id),
                    priority=priority,
                ))
        return sorted(needs, key=lambda n: n.priority, reverse=True)

    def find_alternative(self, action: CareAction, inventory: Inventory) -> Optional[str]:
        for item_id in FALLBACK_ITEMS.get(action, ()):
            if inventory.has(item_id):
                return item_id
        return None

    def _perform(self, pet: Pet, need: CareNeed, now: Optional[datetime]) -> CareActionResult:
        before = getattr(pet.stats, need.stat)
        item_id = need.item_id
        if not pet.inventory.has(item_id):
            item_id = self.find_alternative(CareAction(need.action), pet.inventory)
            if item_id is None:
                return CareActionResult(
                    action=need.action,
                    item_id=need.item_id,
                    item_name=need.item_name,
                    success=False,
                    reason=f"没有 {need.item_name} 了，去商店看看吧！",
                )

        result = pet.use_item(item_id, now)
        after = getattr(pet.stats, need.stat)
        return CareActionResult(
            action=need.action,
            item_id=item_id,
            item_name=self.catalog.name_of(item_id),
            success=result.success,
            stat_changes=[StatTransition(stat=need.stat, before=before, after=after)],
            reason=None if result.success else result.message,
        )

    def one_click_care(self, pet: Pet, now: Optional[datetime] = None) -> CareResult:
        """依次处理所有需求，单个失败不影响后续。"""
        stats_before = pet.stats
        taken = [self._perform(pet, need, now) for need in self.assess_needs(stats_before, pet.is_sleeping)]
        used = sum(1 for a in taken if a.success)
        return CareResult(
            success=used > 0,
            actions_taken=taken,
            stats_before=stats_before,
            stats_after=pet.stats,
            items_used=used,
        )

    def auto_feed(self, pet: Pet, now: Optional[datetime] = None) -> Optional[CareActionResult]:
        """开启 auto_feed 且饱腹低于阈值时喂一次；无需喂食时返回 None。"""
        if not self.config.auto_feed:
            return None
        for need in self.assess_needs(pet.stats, pet.is_sleeping):
            if CareAction(need.action) == CareAction.FEED:
                return self._perform(pet, need, now)
        return None

    def auto_purchase(self, pet: Pet, shop: Shop) -> AutoPurchaseResult:
        """库存不足时自动补货，每次最多买 min_quantity 的两倍。"""
        if not self.config.enabled:
            return AutoPurchaseResult()

        coins = pet.coins
        result = AutoPurchaseResult()
        for rule in AUTO_PURCHASE_RULES:
            price = shop.price(rule.item_id)
            if not price or pet.inventory.quantity(rule.item_id) >= rule.min_quantity or coins < rule.max_cost:
                continue
            quantity = min((coins - result.total_cost) // price, rule.min_quantity * 2)
            if quantity <= 0:
                continue
            purchase = shop.purchase(pet, rule.item_id, quantity)
            if purchase.success:
                result.items.append(PurchasedItem(
                    item_id=rule.item_id,
                    item_name=self.catalog.name_of(rule.item_id),
                    quantity=quantity,
                    cost=purchase.coins_spent,
                ))
                result.total_cost += purchase.coins_spent
        result.purchased = bool(result.items)
        return result

    def can_afford_auto_care(self, pet: Pet) -> bool:
        """缺货的物品是否都买得起。"""
        inventory = pet.inventory
        for rule in AUTO_PURCHASE_RULES:
            if inventory.quantity(rule.item_id) < rule.min_quantity and pet.coins < rule.max_cost:
                return False
        return True

    def suggestions(self, pet: Pet) -> List[str]:
        tips = []
        inventory = pet.inventory
        if pet.needs_care():
            tips.append("💡 试试 'pet care' 一键照顾")
        low_stock = (
            inventory.quantity("fish") < 2
            or inventory.quantity("ball") < 1
            or inventory.quantity("soap") < 1
        )
        if pet.coins > 100 and low_stock:
            tips.append("💡 金币充足，去商店逛逛：'pet shop'")
        if pet.git_streak == 0 and pet.git_commit_count == 0:
            tips.append("💡 提交 Git 代码也能照顾宠物！")
        if pet.is_sleeping and pet.stats.energy < 80:
            tips.append("💡 让宠物多睡会儿，恢复精力")
        return tips
