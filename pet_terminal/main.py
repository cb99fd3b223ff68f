"""终端宠物入口：pet <命令>。

每条命令都是一次完整的 读存档 → 结算衰减 → 执行 → 写存档。
"""
import argparse
import sys
from pathlib import Path
from typing import List, Optional, Tuple

from pet_terminal import __version__
from pet_terminal.care.auto_care import AutoCare
from pet_terminal.config import DATA_DIR, DEFAULT_PET_NAME, MAX_NAME_LENGTH, ensure_dirs
from pet_terminal.items.catalog import ItemCatalog
from pet_terminal.items.shop import Shop
from pet_terminal.pet.decay import DecayConfig, TimeDecay, TimeSyncResult
from pet_terminal.pet.models import PetSpecies
from pet_terminal.pet.pet import Pet
from pet_terminal.settings.models import AutoCareThresholds
from pet_terminal.settings.store import ConfigStore, validate
from pet_terminal.storage.store import PetStore
from pet_terminal.ui import render
from pet_terminal.vcs.monitor import GitMonitor
from pet_terminal.vcs.rewards import check_git_commits

SIMPLE_ACTIONS = {
    "feed": "喂食",
    "play": "玩耍",
    "clean": "洗澡",
    "heal": "治疗",
    "sleep": "睡觉 / 叫醒",
}

FIRST_RUN_GUIDE = """\
新手指南：
  pet status    看看它现在怎么样
  pet feed      喂食（还有 play / clean / heal / sleep）
  pet shop      用金币买物品，pet use ITEM 使用
  pet git       在 Git 仓库里提交代码也能领奖励
  pet care      一键照顾"""


class App:
    """一次命令调用共享的依赖。"""

    def __init__(self, data_dir: Optional[Path] = None):
        self.store = PetStore(data_dir)
        self.config_store = ConfigStore(data_dir)
        self.config = self.config_store.load()
        self.catalog = ItemCatalog()
        self.shop = Shop(self.catalog)
        self.decay = TimeDecay(DecayConfig().scaled(self.config.decay_rate))

    def load_pet(self) -> Tuple[Optional[Pet], Optional[TimeSyncResult]]:
        """读取宠物并结算衰减；没有宠物时返回 (None, None)。"""
        pet = Pet.load(self.store, self.catalog, self.decay)
        if pet is None:
            return None, None
        return pet, pet.sync_time()


def _no_pet() -> int:
    print("还没有宠物，先运行 pet init 领养一只吧。")
    return 1


def cmd_init(app: App, args: argparse.Namespace) -> int:
    if app.store.has_pet():
        print("你已经有一只宠物了。想重新开始请先 pet release。")
        return 1
    name = args.name.strip()
    if len(name) > MAX_NAME_LENGTH:
        print(f"名字最多 {MAX_NAME_LENGTH} 个字符。")
        return 2
    first_run = app.store.is_first_run()
    pet = Pet.create_new(app.store, name, PetSpecies(args.species), catalog=app.catalog, decay=app.decay)
    app.store.mark_onboarded()
    print(f"🎉 欢迎 {pet.name} 来到你的终端！")
    print(render.render_status(pet))
    if first_run:
        print(FIRST_RUN_GUIDE)
    return 0


def cmd_status(app: App, args: argparse.Namespace) -> int:
    pet, _ = app.load_pet()
    if pet is None:
        return _no_pet()
    auto_care = AutoCare(app.config.auto_care, app.catalog)
    fed = auto_care.auto_feed(pet)
    if fed is not None:
        print(f"🍽 自动喂食 {render.render_care_action(fed)}")
    print(render.render_status(pet))
    for tip in auto_care.suggestions(pet):
        print(tip)
    return 0


def cmd_action(app: App, args: argparse.Namespace) -> int:
    pet, _ = app.load_pet()
    if pet is None:
        return _no_pet()
    result = getattr(pet, args.command)()
    print(render.render_action(result))
    return 0 if result.success else 1


def cmd_sync(app: App, args: argparse.Namespace) -> int:
    pet, result = app.load_pet()
    if pet is None:
        return _no_pet()
    print(render.render_sync(result))
    return 0


def cmd_inventory(app: App, args: argparse.Namespace) -> int:
    pet, _ = app.load_pet()
    if pet is None:
        return _no_pet()
    print(render.render_inventory(pet.inventory, app.catalog))
    print(f"金币: {pet.coins} 🪙")
    return 0


def cmd_use(app: App, args: argparse.Namespace) -> int:
    pet, _ = app.load_pet()
    if pet is None:
        return _no_pet()
    if pet.is_sleeping:
        print(f"✗ {pet.name} 正在睡觉，先叫醒它吧。")
        return 1
    result = pet.use_item(args.item)
    print(render.render_action(result))
    return 0 if result.success else 1


def cmd_shop(app: App, args: argparse.Namespace) -> int:
    pet, _ = app.load_pet()
    if pet is None:
        return _no_pet()
    if args.action != "buy":
        print(render.render_shop(app.shop, pet.coins))
        return 0
    if not args.item:
        print("用法: pet shop buy ITEM [QTY]")
        return 2
    result = app.shop.purchase(pet, args.item, args.quantity)
    print(render.render_purchase(result))
    return 0 if result.success else 1


def cmd_git(app: App, args: argparse.Namespace) -> int:
    pet, _ = app.load_pet()
    if pet is None:
        return _no_pet()
    result = check_git_commits(pet, GitMonitor())
    print(render.render_git(result))
    return 0 if result.success else 1


def cmd_care(app: App, args: argparse.Namespace) -> int:
    pet, _ = app.load_pet()
    if pet is None:
        return _no_pet()
    if pet.is_sleeping:
        print(f"{pet.name} 正在睡觉，等它醒来再照顾吧。")
        return 0
    auto_care = AutoCare(app.config.auto_care, app.catalog)
    result = auto_care.one_click_care(pet)
    purchase = auto_care.auto_purchase(pet, app.shop)
    print(render.render_care(result, purchase))
    return 0


def cmd_release(app: App, args: argparse.Namespace) -> int:
    pet, _ = app.load_pet()
    if pet is None:
        print("你还没有宠物。")
        return 1
    if not args.yes:
        try:
            answer = input(f"确定要永远告别 {pet.name} 吗？输入 yes 确认: ")
        except EOFError:
            answer = ""
        if answer.strip().lower() != "yes":
            print(f"已取消，{pet.name} 很高兴继续陪着你！")
            return 0
    pet.release()
    print(f"{pet.name} 回到了大自然……想再养一只时运行 pet init。")
    return 0


def cmd_config(app: App, args: argparse.Namespace) -> int:
    store = app.config_store
    action = args.action or "show"
    if action == "set-decay":
        config = store.set_decay_rate(args.value)
    elif action == "set-threshold":
        config = store.set_threshold(args.stat, args.value)
    elif action == "auto-care":
        config = store.set_auto_care_enabled(args.state == "on")
    elif action == "auto-feed":
        config = store.set_auto_feed(args.state == "on")
    elif action == "reset":
        config = store.reset()
    else:
        config = app.config
    print(render.render_config(config))
    for problem in validate(config):
        print(f"⚠ {problem}")
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="pet", description="在终端里养一只宠物，写代码也能照顾它。")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument("--home", type=Path, default=None, help=f"数据目录（默认 {DATA_DIR}）")
    sub = parser.add_subparsers(dest="command", required=True)

    p = sub.add_parser("init", help="领养一只新宠物")
    p.add_argument("--name", default=DEFAULT_PET_NAME, help="宠物名字")
    p.add_argument("--species", default=PetSpecies.CAT.value, choices=[s.value for s in PetSpecies])
    p.set_defaults(func=cmd_init)

    sub.add_parser("status", help="查看状态").set_defaults(func=cmd_status)
    for action, help_text in SIMPLE_ACTIONS.items():
        sub.add_parser(action, help=help_text).set_defaults(func=cmd_action)
    sub.add_parser("sync", help="结算离开期间的变化").set_defaults(func=cmd_sync)
    sub.add_parser("inventory", help="查看背包").set_defaults(func=cmd_inventory)

    p = sub.add_parser("use", help="使用背包中的物品")
    p.add_argument("item", help="物品 ID")
    p.set_defaults(func=cmd_use)

    p = sub.add_parser("shop", help="逛商店 / 购买")
    p.add_argument("action", nargs="?", choices=["buy"])
    p.add_argument("item", nargs="?")
    p.add_argument("quantity", nargs="?", type=int, default=1)
    p.set_defaults(func=cmd_shop)

    sub.add_parser("git", help="领取 Git 提交奖励").set_defaults(func=cmd_git)
    sub.add_parser("care", help="一键照顾").set_defaults(func=cmd_care)

    p = sub.add_parser("release", help="放生宠物（不可恢复）")
    p.add_argument("--yes", action="store_true", help="跳过确认")
    p.set_defaults(func=cmd_release)

    p = sub.add_parser("config", help="查看或修改配置")
    config_sub = p.add_subparsers(dest="action")
    config_sub.add_parser("show")
    c = config_sub.add_parser("set-decay")
    c.add_argument("value", type=float)
    c = config_sub.add_parser("set-threshold")
    c.add_argument("stat", choices=list(AutoCareThresholds.model_fields))
    c.add_argument("value", type=int)
    c = config_sub.add_parser("auto-care")
    c.add_argument("state", choices=["on", "off"])
    c = config_sub.add_parser("auto-feed")
    c.add_argument("state", choices=["on", "off"])
    config_sub.add_parser("reset")
    p.set_defaults(func=cmd_config)
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    if args.home is None:
        ensure_dirs()
    app = App(args.home)
    return args.func(app, args)


if __name__ == "__main__":
    sys.exit(main())
