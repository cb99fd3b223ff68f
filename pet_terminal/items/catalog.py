"""物品目录：进程启动时构建一次，只读。"""
from typing import Dict, List, Optional

from pet_terminal.items.models import InventoryEntry, ItemDefinition, ItemType

ITEM_DATA = [
    # 食物
    {"id": "fish", "name": "Fresh Fish", "type": "food", "rarity": "common", "emoji": "🐟",
     "description": "A delicious fish. Restores hunger well.",
     "effect": {"hunger": 30, "happiness": 5, "health": 2}, "xp_reward": 10, "price": 10},
    {"id": "premium_food", "name": "Premium Pet Food", "type": "food", "rarity": "common", "emoji": "🥫",
     "description": "Nutritious pet food. Good for daily feeding.",
     "effect": {"hunger": 20, "happiness": 3, "health": 1}, "xp_reward": 8, "price": 5},
    {"id": "steak", "name": "Juicy Steak", "type": "food", "rarity": "rare", "emoji": "🥩",
     "description": "A high-quality steak. Very filling!",
     "effect": {"hunger": 40, "happiness": 10, "health": 3}, "xp_reward": 15, "price": 25},
    {"id": "treat", "name": "Yummy Treat", "type": "food", "rarity": "common", "emoji": "🦴",
     "description": "A small snack. Not very filling but makes pets happy!",
     "effect": {"hunger": 10, "happiness": 15, "health": -2}, "xp_reward": 8, "price": 8},
    {"id": "cake", "name": "Birthday Cake", "type": "food", "rarity": "epic", "emoji": "🎂",
     "description": "A special cake for celebrations!",
     "effect": {"hunger": 25, "happiness": 30, "health": -5, "energy": 5}, "xp_reward": 25, "price": 50},
    # 玩具
    {"id": "ball", "name": "Tennis Ball", "type": "toy", "rarity": "common", "emoji": "🎾",
     "description": "A simple ball for playing fetch.",
     "effect": {"happiness": 20, "energy": -15}, "xp_reward": 12, "price": 15},
    {"id": "frisbee", "name": "Frisbee", "type": "toy", "rarity": "common", "emoji": "🥏",
     "description": "Great for outdoor play!",
     "effect": {"happiness": 25, "energy": -20, "health": 2}, "xp_reward": 15, "price": 20},
    {"id": "laser_pointer", "name": "Laser Pointer", "type": "toy", "rarity": "rare", "emoji": "🔴",
     "description": "Endless entertainment for curious pets!",
     "effect": {"happiness": 35, "energy": -10}, "xp_reward": 20, "price": 30},
    {"id": "squeaky_toy", "name": "Squeaky Toy", "type": "toy", "rarity": "common", "emoji": "🦖",
     "description": "Makes funny noises when chewed.",
     "effect": {"happiness": 18, "energy": -12}, "xp_reward": 10, "price": 12},
    {"id": "stuffed_animal", "name": "Stuffed Animal", "type": "toy", "rarity": "rare", "emoji": "🧸",
     "description": "A soft toy for snuggling.",
     "effect": {"happiness": 15, "energy": 5}, "xp_reward": 12, "price": 25},
    # 清洁用品
    {"id": "soap", "name": "Pet Soap", "type": "cleaning", "rarity": "common", "emoji": "🧼",
     "description": "Basic soap for cleaning your pet.",
     "effect": {"cleanliness": 35, "happiness": -3}, "xp_reward": 8, "price": 10},
    {"id": "shampoo", "name": "Fancy Shampoo", "type": "cleaning", "rarity": "rare", "emoji": "🧴",
     "description": "Smells great and cleans thoroughly!",
     "effect": {"cleanliness": 50, "happiness": 5}, "xp_reward": 12, "price": 20},
    {"id": "brush", "name": "Grooming Brush", "type": "cleaning", "rarity": "common", "emoji": "🪮",
     "description": "Keep your pet looking neat and tidy.",
     "effect": {"cleanliness": 20, "happiness": 8}, "xp_reward": 6, "price": 8},
    {"id": "perfume", "name": "Pet Perfume", "type": "cleaning", "rarity": "epic", "emoji": "🌸",
     "description": "Makes your pet smell wonderful!",
     "effect": {"cleanliness": 40, "happiness": 15}, "xp_reward": 15, "price": 40},
    # 药品
    {"id": "bandage", "name": "Bandage", "type": "medicine", "rarity": "common", "emoji": "🩹",
     "description": "A simple bandage for minor injuries.",
     "effect": {"health": 20}, "xp_reward": 15, "price": 15},
    {"id": "medicine", "name": "Medicine", "type": "medicine", "rarity": "rare", "emoji": "💊",
     "description": "Tastes bad but works well!",
     "effect": {"health": 40, "happiness": -5}, "xp_reward": 20, "price": 30},
    {"id": "elixir", "name": "Health Elixir", "type": "medicine", "rarity": "epic", "emoji": "🧪",
     "description": "A magical potion that restores health completely!",
     "effect": {"health": 60, "happiness": 5}, "xp_reward": 30, "price": 50},
    {"id": "golden_apple", "name": "Golden Apple", "type": "medicine", "rarity": "legendary", "emoji": "🍎",
     "description": "A legendary fruit that restores all stats!",
     "effect": {"health": 100, "hunger": 30, "happiness": 20, "cleanliness": 20, "energy": 20},
     "xp_reward": 100, "price": 200},
]

STARTING_INVENTORY = {"fish": 3, "ball": 2, "soap": 2, "medicine": 1}


class ItemCatalog:
    """按 ID 查询物品定义。"""

    def __init__(self, items: Optional[List[dict]] = None):
        self._items: Dict[str, ItemDefinition] = {}
        for raw in items if items is not None else ITEM_DATA:
            item = ItemDefinition.model_validate(raw)
            self._items[item.id] = item

    def get(self, item_id: str) -> Optional[ItemDefinition]:
        return self._items.get(item_id)

    def __contains__(self, item_id: str) -> bool:
        return item_id in self._items

    def all(self) -> List[ItemDefinition]:
        return list(self._items.values())

    def by_type(self, item_type: ItemType) -> List[ItemDefinition]:
        return [item for item in self._items.values() if item.type == item_type]

    def name_of(self, item_id: str) -> str:
        item = self.get(item_id)
        return item.name if item else item_id

    @staticmethod
    def starting_inventory() -> List[InventoryEntry]:
        """新宠物的初始背包。"""
        return [InventoryEntry(item_id=k, quantity=v) for k, v in STARTING_INVENTORY.items()]
