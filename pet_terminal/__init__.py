"""终端宠物：在命令行里养一只会随时间变化、靠 Git 提交获得奖励的宠物。"""
__version__ = "1.0.0"
