"""终端纯文本输出。只负责格式化，不修改任何状态。"""
from datetime import datetime
from typing import Iterable, List, Optional

from pet_terminal.care.models import AutoPurchaseResult, CareActionResult, CareResult
from pet_terminal.items.catalog import ItemCatalog
from pet_terminal.items.inventory import Inventory
from pet_terminal.items.shop import PurchaseResult, Shop
from pet_terminal.pet.decay import TimeSyncResult, is_abandoned, severity, time_message
from pet_terminal.pet.models import STAT_NAMES, ActionResult, StatChange
from pet_terminal.pet.pet import Pet
from pet_terminal.settings.models import UserConfig
from pet_terminal.vcs.models import CommitType, GitProcessResult
from pet_terminal.vcs.rewards import COMMIT_TYPE_NAMES

STAT_LABELS = {
    "hunger": "饱腹",
    "happiness": "快乐",
    "health": "健康",
    "cleanliness": "清洁",
    "energy": "精力",
}

MOOD_LABELS = {
    "happy": "😊 开心",
    "sad": "😢 难过",
    "sick": "🤒 生病",
    "angry": "😠 生气",
    "sleepy": "😴 困倦",
    "excited": "🤩 兴奋",
}

SPECIES_EMOJI = {
    "cat": "🐱",
    "dog": "🐶",
    "rabbit": "🐰",
    "hamster": "🐹",
    "bird": "🐦",
    "dragon": "🐲",
}


def progress_bar(value: int, width: int = 20) -> str:
    value = max(0, min(100, value))
    filled = round(width * value / 100)
    return "█" * filled + "░" * (width - filled) + f" {value:3d}%"


def format_stat_changes(changes: Iterable[StatChange]) -> str:
    parts = [f"{STAT_LABELS.get(c.stat, c.stat)} {c.delta:+d}" for c in changes]
    return "  ".join(parts)


def render_action(result: ActionResult) -> str:
    if not result.success:
        return f"✗ {result.message}"
    lines = [f"✓ {result.message}"]
    if result.stat_changes:
        lines.append(f"  {format_stat_changes(result.stat_changes)}")
    if result.xp_gained:
        lines.append(f"  经验 +{result.xp_gained}")
    if result.level_up:
        lines.append(f"  🎉 升到 {result.new_level} 级！全属性 +5")
    return "\n".join(lines)


def render_status(pet: Pet, now: Optional[datetime] = None) -> str:
    record = pet.record
    stats = pet.stats
    emoji = SPECIES_EMOJI.get(record.species, "🐾")
    mood = pet.current_mood().value
    lines = [
        f"{emoji} {record.name}  Lv.{record.level} {pet.level_title()}"
        + ("  💤" if record.is_sleeping else ""),
        f"心情: {MOOD_LABELS.get(mood, mood)}",
        "",
    ]
    for name in STAT_NAMES:
        lines.append(f"  {STAT_LABELS[name]}  {progress_bar(getattr(stats, name))}")
    lines += [
        "",
        f"经验: {record.experience}（距下一级 {pet.xp_to_next_level()}）  {progress_bar(pet.level_progress(), 10)}",
        f"金币: {pet.coins} 🪙  今日 +{pet.today_coins(now)}",
        f"互动次数: {record.total_interactions}  Git 连续 {record.git_streak} 天 / 共 {record.git_commit_count} 次提交",
    ]
    if pet.needs_care():
        lines.append("⚠ 宠物需要照顾！")
    return "\n".join(lines)


def render_sync(result: Optional[TimeSyncResult]) -> str:
    if result is None:
        return "刚刚照顾过，没有变化。"
    lines = [f"上次见面是 {time_message(result.hours_passed)}（{severity(result.hours_passed)}）"]
    if result.stat_changes:
        lines.append(f"  {format_stat_changes(result.stat_changes)}")
    lines += [f"  ⚠ {w}" for w in result.warnings]
    if result.new_stats and is_abandoned(result.new_stats, result.hours_passed):
        lines.append("  宠物感觉被遗忘了……快陪陪它吧。")
    return "\n".join(lines)


def render_inventory(inventory: Inventory, catalog: ItemCatalog) -> str:
    if inventory.is_empty():
        return "背包是空的，去商店看看吧。"
    lines = [f"背包（{inventory.unique_count()} 种 / {inventory.total_count()} 件）"]
    for entry in inventory.entries():
        item = catalog.get(entry.item_id)
        label = f"{item.emoji} {item.name}" if item else entry.item_id
        lines.append(f"  {label} x{entry.quantity}  [{entry.item_id}]")
    return "\n".join(lines)


def render_shop(shop: Shop, coins: int) -> str:
    lines = [f"商店  你有 {coins} 🪙"]
    for category, items in shop.by_category().items():
        lines.append(f"\n{category}")
        for item in items:
            mark = " " if shop.can_afford(item.id, coins) else "✗"
            lines.append(f" {mark} {item.emoji} {item.name:<18} {item.price:>4} 🪙  [{item.id}]")
    return "\n".join(lines)


def render_purchase(result: PurchaseResult) -> str:
    if not result.success:
        return f"✗ {result.message}"
    return f"✓ {result.message}，花费 {result.coins_spent} 🪙，剩余 {result.remaining_coins} 🪙"


def render_git(result: GitProcessResult) -> str:
    if not result.success:
        return f"✗ {result.error}"
    if not result.new_commits:
        return f"没有新的提交。连续 {result.streak} 天 🔥"
    lines = [f"发现 {result.new_commits} 个新提交："]
    for reward in result.rewards:
        kind = COMMIT_TYPE_NAMES.get(CommitType(reward.type), reward.type)
        lines.append(f"  {reward.short_hash} [{kind}] {reward.message}  +{reward.coins} 🪙 +{reward.xp} 经验")
        lines += [f"    {b}" for b in reward.bonuses]
    if result.streak_bonus:
        lines.append(f"  🔥 连续提交奖励 +{result.streak_bonus} 🪙")
    lines.append(f"合计 +{result.total_coins} 🪙 +{result.total_xp} 经验，连续 {result.streak} 天")
    if result.level_up:
        lines.append("🎉 升级了！")
    return "\n".join(lines)


def render_care_action(action: CareActionResult) -> str:
    if not action.success:
        return f"✗ {action.item_name}: {action.reason}"
    changes = ", ".join(
        f"{STAT_LABELS.get(c.stat, c.stat)} {c.before}→{c.after}" for c in action.stat_changes
    )
    return f"✓ {action.item_name}: {changes}"


def render_care(result: CareResult, purchase: Optional[AutoPurchaseResult] = None) -> str:
    lines: List[str] = []
    if not result.actions_taken:
        lines.append("宠物状态很好，不需要照顾。")
    lines += [render_care_action(action) for action in result.actions_taken]
    if purchase and purchase.purchased:
        bought = ", ".join(f"{p.item_name} x{p.quantity}" for p in purchase.items)
        lines.append(f"🛒 自动补货：{bought}（{purchase.total_cost} 🪙）")
    return "\n".join(lines)


def render_config(config: UserConfig) -> str:
    t = config.auto_care.thresholds
    return "\n".join([
        f"衰减倍率: {config.decay_rate}",
        f"自动补货: {'开' if config.auto_care.enabled else '关'}",
        f"自动喂食: {'开' if config.auto_care.auto_feed else '关'}",
        "照顾阈值: "
        + "  ".join(f"{STAT_LABELS[name]} {getattr(t, name)}" for name in STAT_NAMES),
    ])
