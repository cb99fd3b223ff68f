"""Git 提交监测与奖励对账。"""
from pet_terminal.vcs.models import ChangeStats, CommitInfo, CommitReward, CommitRewardCalc, CommitType, GitProcessResult
from pet_terminal.vcs.monitor import GitMonitor
from pet_terminal.vcs.rewards import calculate_reward, check_git_commits, classify_commit, reconcile_commits

__all__ = [
    "ChangeStats",
    "CommitInfo",
    "CommitReward",
    "CommitRewardCalc",
    "CommitType",
    "GitMonitor",
    "GitProcessResult",
    "calculate_reward",
    "check_git_commits",
    "classify_commit",
    "reconcile_commits",
]
