"""物品目录、背包与商店。"""
from pet_terminal.items.catalog import ItemCatalog
from pet_terminal.items.inventory import Inventory
from pet_terminal.items.models import CoinReason, InventoryEntry, ItemDefinition, ItemEffect, ItemRarity, ItemType
from pet_terminal.items.shop import PurchaseResult, Shop, coin_reward

__all__ = [
    "ItemCatalog",
    "Inventory",
    "CoinReason",
    "InventoryEntry",
    "ItemDefinition",
    "ItemEffect",
    "ItemRarity",
    "ItemType",
    "PurchaseResult",
    "Shop",
    "coin_reward",
]
