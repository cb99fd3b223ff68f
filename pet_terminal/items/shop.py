"""商店：价格查询、购买与金币奖励表。"""
from typing import TYPE_CHECKING, Dict, List, Optional

from pydantic import BaseModel

from pet_terminal.items.catalog import ItemCatalog
from pet_terminal.items.models import CoinReason, ItemDefinition, ItemType

if TYPE_CHECKING:
    from pet_terminal.pet.pet import Pet

CATEGORY_NAMES = {
    ItemType.FOOD: "Food",
    ItemType.TOY: "Toys",
    ItemType.CLEANING: "Cleaning",
    ItemType.MEDICINE: "Medicine",
}

COIN_REWARDS = {
    # 日常互动只给少量金币
    CoinReason.FEED: 1,
    CoinReason.PLAY: 1,
    CoinReason.CLEAN: 1,
    CoinReason.HEAL: 1,
    CoinReason.SLEEP: 1,
    CoinReason.LEVEL_UP: 20,
    CoinReason.GIT_COMMIT_NORMAL: 5,
    CoinReason.GIT_COMMIT_FEATURE: 8,
    CoinReason.GIT_COMMIT_BUG_FIX: 10,
    CoinReason.GIT_COMMIT_REFACTOR: 6,
    CoinReason.GIT_LARGE_BONUS: 5,
    CoinReason.GIT_STREAK_DAILY: 1,
    CoinReason.GIT_STREAK_7: 10,
    CoinReason.GIT_STREAK_30: 50,
}

# 使用物品时按类别发放的金币来源
ITEM_COIN_REASONS = {
    ItemType.FOOD: CoinReason.FEED,
    ItemType.TOY: CoinReason.PLAY,
    ItemType.CLEANING: CoinReason.CLEAN,
    ItemType.MEDICINE: CoinReason.HEAL,
}


def coin_reward(reason: CoinReason) -> int:
    return COIN_REWARDS.get(reason, 0)


class PurchaseResult(BaseModel):
    success: bool
    message: str
    coins_spent: int = 0
    item_id: Optional[str] = None
    quantity: int = 0
    remaining_coins: Optional[int] = None


class Shop:
    """有正价的物品都上架。"""

    def __init__(self, catalog: ItemCatalog):
        self.catalog = catalog
        self._items: Dict[str, ItemDefinition] = {
            item.id: item for item in catalog.all() if item.price is not None and item.price > 0
        }

    def items(self, category: Optional[ItemType] = None) -> List[ItemDefinition]:
        if category is None:
            return list(self._items.values())
        return [item for item in self._items.values() if item.type == category]

    def by_category(self) -> Dict[str, List[ItemDefinition]]:
        grouped: Dict[str, List[ItemDefinition]] = {}
        for item in self._items.values():
            grouped.setdefault(CATEGORY_NAMES.get(ItemType(item.type), "Other"), []).append(item)
        return grouped

    def price(self, item_id: str) -> Optional[int]:
        item = self._items.get(item_id)
        return item.price if item else None

    def can_afford(self, item_id: str, coins: int) -> bool:
        price = self.price(item_id)
        return price is not None and coins >= price

    def max_affordable(self, item_id: str, coins: int) -> int:
        price = self.price(item_id)
        if not price:
            return 0
        return coins // price

    def purchase(self, pet: "Pet", item_id: str, quantity: int = 1) -> PurchaseResult:
        """先扣款再入包；金币不足时不做任何修改。"""
        price = self.price(item_id)
        if price is None:
            return PurchaseResult(success=False, message=f"商店里没有 {item_id}")
        if quantity < 1:
            return PurchaseResult(success=False, message="购买数量至少为 1")
        total = price * quantity
        if not pet.spend_coins(total):
            return PurchaseResult(
                success=False,
                message=f"金币不足：需要 {total}，当前 {pet.coins}",
                remaining_coins=pet.coins,
            )
        pet.add_item(item_id, quantity)
        return PurchaseResult(
            success=True,
            message=f"购买了 {self.catalog.name_of(item_id)} x{quantity}",
            coins_spent=total,
            item_id=item_id,
            quantity=quantity,
            remaining_coins=pet.coins,
        )
