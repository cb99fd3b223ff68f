"""终端宠物全局配置与路径。"""
import os
from pathlib import Path

# 数据目录：存档、用户配置（可用 PET_TERMINAL_HOME 覆盖，便于测试与多存档）
DATA_DIR = Path(os.environ.get("PET_TERMINAL_HOME") or Path.home() / ".pet-terminal")
PET_DB_FILE = "pet.json"
USER_CONFIG_FILE = "config.json"
SAVE_VERSION = "1.0.0"

# 新宠物默认值
DEFAULT_PET_NAME = "Buddy"
STARTING_COINS = 50
MAX_NAME_LENGTH = 20

# 属性范围
STAT_MIN = 0
STAT_MAX = 100

# 金币流水最多保留条数（更早的丢弃，累计统计仅在窗口内准确）
COIN_HISTORY_LIMIT = 100

# 升级奖励：每项属性 +5
LEVEL_UP_STAT_BONUS = 5

# 距上次更新不足 1 分钟不做衰减结算
MIN_SYNC_HOURS = 1 / 60

# Git 首次同步时回溯的提交数
GIT_BACKFILL_LIMIT = 50
# 大提交阈值（增删行数之和）
LARGE_COMMIT_LINES = 100
# 深夜提交：22:00 ~ 次日 06:00
NIGHT_OWL_START_HOUR = 22
NIGHT_OWL_END_HOUR = 6
GIT_TIMEOUT_SECONDS = 30

# 衰减倍率可调范围
DECAY_RATE_MIN = 0.1
DECAY_RATE_MAX = 5.0


def ensure_dirs() -> None:
    """确保数据目录存在。"""
    DATA_DIR.mkdir(parents=True, exist_ok=True)
