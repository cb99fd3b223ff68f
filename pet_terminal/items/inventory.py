"""背包：按物品 ID 计数的多重集合，数量为 0 的条目直接移除。"""
from typing import Dict, Iterable, List, Optional

from pet_terminal.items.catalog import ItemCatalog
from pet_terminal.items.models import InventoryEntry, ItemType


class Inventory:

    def __init__(self, entries: Optional[Iterable[InventoryEntry]] = None):
        self._items: Dict[str, int] = {}
        for entry in entries or []:
            if entry.quantity > 0:
                self._items[entry.item_id] = self._items.get(entry.item_id, 0) + entry.quantity

    def quantity(self, item_id: str) -> int:
        return self._items.get(item_id, 0)

    def has(self, item_id: str, quantity: int = 1) -> bool:
        return self.quantity(item_id) >= quantity

    def has_type(self, item_type: ItemType, catalog: ItemCatalog) -> bool:
        return bool(self.entries_of_type(item_type, catalog))

    def add(self, item_id: str, quantity: int = 1) -> None:
        if quantity <= 0:
            return
        self._items[item_id] = self.quantity(item_id) + quantity

    def remove(self, item_id: str, quantity: int = 1) -> bool:
        """数量不足时返回 False 且不做修改。"""
        if quantity <= 0:
            return True
        current = self.quantity(item_id)
        if current < quantity:
            return False
        if current == quantity:
            del self._items[item_id]
        else:
            self._items[item_id] = current - quantity
        return True

    def entries(self) -> List[InventoryEntry]:
        """按数量从多到少排列。"""
        items = sorted(self._items.items(), key=lambda kv: kv[1], reverse=True)
        return [InventoryEntry(item_id=k, quantity=v) for k, v in items]

    def entries_of_type(self, item_type: ItemType, catalog: ItemCatalog) -> List[InventoryEntry]:
        out = []
        for entry in self.entries():
            item = catalog.get(entry.item_id)
            if item and item.type == item_type:
                out.append(entry)
        return out

    def unique_count(self) -> int:
        return len(self._items)

    def total_count(self) -> int:
        return sum(self._items.values())

    def is_empty(self) -> bool:
        return not self._items

    def clear(self) -> None:
        self._items.clear()
