"""提交奖励对账：把新提交换算成金币、经验与属性加成，每个提交只奖励一次。

reconcile_commits 是纯函数；check_git_commits 负责调用 GitMonitor 并写回宠物。
"""
from datetime import date, datetime
from typing import List, Optional, Tuple

from pet_terminal.config import LARGE_COMMIT_LINES, NIGHT_OWL_END_HOUR, NIGHT_OWL_START_HOUR
from pet_terminal.items.models import CoinReason
from pet_terminal.items.shop import coin_reward
from pet_terminal.pet import actions
from pet_terminal.pet.models import PetRecord, StatChange
from pet_terminal.pet.pet import Pet, utcnow
from pet_terminal.pet.stats import changes_from_deltas
from pet_terminal.vcs.models import CommitInfo, CommitReward, CommitRewardCalc, CommitType, GitProcessResult
from pet_terminal.vcs.monitor import GitMonitor

# 按优先级检查：修复 > 功能 > 重构
BUG_FIX_KEYWORDS = ("fix", "bug", "bugfix", "修复")
FEATURE_KEYWORDS = ("feat", "add", "feature", "新", "新增")
REFACTOR_KEYWORDS = ("refactor", "重构", "clean", "优化")

# (金币, 经验)
BASE_REWARDS = {
    CommitType.BUG_FIX: (10, 20),
    CommitType.FEATURE: (8, 15),
    CommitType.REFACTOR: (6, 12),
    CommitType.NORMAL: (5, 10),
}

COMMIT_COIN_REASONS = {
    CommitType.BUG_FIX: CoinReason.GIT_COMMIT_BUG_FIX,
    CommitType.FEATURE: CoinReason.GIT_COMMIT_FEATURE,
    CommitType.REFACTOR: CoinReason.GIT_COMMIT_REFACTOR,
    CommitType.NORMAL: CoinReason.GIT_COMMIT_NORMAL,
}

LARGE_COMMIT_XP = 10

COMMIT_TYPE_NAMES = {
    CommitType.BUG_FIX: "Bug 修复",
    CommitType.FEATURE: "新功能",
    CommitType.REFACTOR: "重构",
    CommitType.NORMAL: "普通提交",
}


def classify_commit(message: str) -> CommitType:
    lower = message.lower()
    if any(k in lower for k in BUG_FIX_KEYWORDS):
        return CommitType.BUG_FIX
    if any(k in lower for k in FEATURE_KEYWORDS):
        return CommitType.FEATURE
    if any(k in lower for k in REFACTOR_KEYWORDS):
        return CommitType.REFACTOR
    return CommitType.NORMAL


def is_night_commit(when: datetime) -> bool:
    """22:00（含）到 06:00（不含），按提交者本地时间。"""
    return when.hour >= NIGHT_OWL_START_HOUR or when.hour < NIGHT_OWL_END_HOUR


def is_large_commit(lines_added: int, lines_deleted: int) -> bool:
    return lines_added + lines_deleted >= LARGE_COMMIT_LINES


def calculate_reward(commit: CommitInfo) -> CommitRewardCalc:
    commit_type = classify_commit(commit.message)
    base_coins, base_xp = BASE_REWARDS[commit_type]
    total_coins, total_xp = base_coins, base_xp
    reasons = []

    night = is_night_commit(commit.date)
    if night:
        total_coins *= 2
        reasons.append("🦉 夜猫子奖励：金币翻倍！")

    # 取不到行数统计时跳过大提交奖励
    lines = (commit.lines_added or 0) + (commit.lines_deleted or 0)
    large = is_large_commit(commit.lines_added or 0, commit.lines_deleted or 0)
    if large:
        total_coins += coin_reward(CoinReason.GIT_LARGE_BONUS)
        total_xp += LARGE_COMMIT_XP
        reasons.append(f"📦 大提交奖励！（{lines} 行）")

    return CommitRewardCalc(
        commit_type=commit_type,
        base_coins=base_coins,
        base_xp=base_xp,
        night_bonus=night,
        large_bonus=large,
        total_coins=total_coins,
        total_xp=total_xp,
        bonus_reasons=reasons,
    )


def companion_bonus(streak: int) -> List[StatChange]:
    """写代码也算陪伴宠物：每个提交都加饱腹与快乐，连续天数越长加得越多。"""
    hunger, happiness = 15, 10
    if streak >= 7:
        hunger, happiness = hunger + 5, happiness + 5
    elif streak >= 3:
        hunger, happiness = hunger + 2, happiness + 2
    return changes_from_deltas(hunger=hunger, happiness=happiness)


def update_streak(streak: int, last_date: Optional[date], commit_date: date) -> Tuple[int, date]:
    """按最早的新提交日期更新连续天数，返回 (streak, 基准日期)。"""
    if last_date is None:
        return 1, commit_date
    day_diff = (commit_date - last_date).days
    if day_diff == 0:
        return streak, last_date
    if day_diff == 1:
        return streak + 1, commit_date
    return 1, commit_date


def streak_bonus(streak: int) -> Tuple[int, Optional[CoinReason]]:
    if streak >= 30:
        return coin_reward(CoinReason.GIT_STREAK_30), CoinReason.GIT_STREAK_30
    if streak >= 7:
        return coin_reward(CoinReason.GIT_STREAK_7), CoinReason.GIT_STREAK_7
    if streak > 1:
        return streak, CoinReason.GIT_STREAK_DAILY
    return 0, None


def filter_new_commits(commits: List[CommitInfo], marker: Optional[str]) -> List[CommitInfo]:
    """去掉已奖励的提交（与标记完全相等），按时间从旧到新排序。"""
    fresh = [c for c in commits if not marker or marker not in (c.hash, c.short_hash)]
    return sorted(fresh, key=lambda c: c.date)


def reconcile_commits(
    record: PetRecord,
    commits: List[CommitInfo],
    now: datetime,
) -> Tuple[PetRecord, GitProcessResult]:
    fresh = filter_new_commits(commits, record.last_rewarded_commit)
    if not fresh:
        return record, GitProcessResult(success=True, streak=record.git_streak)

    rec = record
    old_level = record.level
    prior_streak = record.git_streak
    rewards = []
    total_coins = total_xp = 0

    for commit in fresh:
        calc = calculate_reward(commit)
        commit_type = CommitType(calc.commit_type)
        large_coins = coin_reward(CoinReason.GIT_LARGE_BONUS) if calc.large_bonus else 0
        rec = actions.earn_coins(rec, calc.total_coins - large_coins, COMMIT_COIN_REASONS[commit_type], now)
        if large_coins:
            rec = actions.earn_coins(rec, large_coins, CoinReason.GIT_LARGE_BONUS, now)
        rec, _ = actions.add_experience(rec, calc.total_xp, now)

        bonus = companion_bonus(prior_streak)
        rec = actions.apply_stat_bonus(rec, bonus)
        deltas = {c.stat: c.delta for c in bonus}
        bonuses = calc.bonus_reasons + [
            f"💚 {rec.name} 看你写代码很开心！（饱腹 +{deltas['hunger']}，快乐 +{deltas['happiness']}）"
        ]

        rewards.append(CommitReward(
            short_hash=commit.short_hash,
            message=commit.message,
            type=commit_type,
            coins=calc.total_coins,
            xp=calc.total_xp,
            bonuses=bonuses,
        ))
        total_coins += calc.total_coins
        total_xp += calc.total_xp

    rec = rec.model_copy(deep=True)
    rec.git_streak, rec.last_git_reward_date = update_streak(
        prior_streak, record.last_git_reward_date, fresh[0].date.date()
    )
    rec.last_rewarded_commit = fresh[-1].short_hash
    rec.git_commit_count += len(fresh)

    bonus_coins, bonus_reason = streak_bonus(rec.git_streak)
    if bonus_reason is not None and bonus_coins > 0:
        rec = actions.earn_coins(rec, bonus_coins, bonus_reason, now)
        total_coins += bonus_coins

    return rec, GitProcessResult(
        success=True,
        new_commits=len(fresh),
        total_coins=total_coins,
        total_xp=total_xp,
        streak=rec.git_streak,
        streak_bonus=bonus_coins,
        level_up=rec.level > old_level,
        rewards=rewards,
    )


def check_git_commits(pet: Pet, monitor: GitMonitor, now: Optional[datetime] = None) -> GitProcessResult:
    """读取新提交并发放奖励；git 不可用或不在仓库内时不修改宠物。"""
    if not monitor.is_available():
        return GitProcessResult(success=False, streak=pet.git_streak, error="未找到 git，请先安装 git")
    if not monitor.is_inside_repository():
        return GitProcessResult(
            success=False,
            streak=pet.git_streak,
            error="当前目录不是 Git 仓库，可用 git init 初始化",
        )

    marker = pet.record.last_rewarded_commit
    commits = monitor.commits_since(marker) if marker else monitor.all_commits()
    record, result = reconcile_commits(pet.record, commits, now or utcnow())
    if result.new_commits:
        pet.update_record(record)
    return result
