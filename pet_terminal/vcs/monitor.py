"""Git 仓库读取：提交日志与增删行数统计。

所有 git 调用都经过 runner（默认 subprocess.run），便于测试替换。
出错时打印到 stderr 并返回空结果，调用方据此不做任何奖励。
"""
import re
import subprocess
import sys
from datetime import datetime
from pathlib import Path
from typing import Callable, List, Optional

from pet_terminal.config import GIT_BACKFILL_LIMIT, GIT_TIMEOUT_SECONDS
from pet_terminal.vcs.models import ChangeStats, CommitInfo

LOG_FORMAT = "--pretty=format:%H|%s|%an|%aI"

_FILES_RE = re.compile(r"(\d+)\s+files?\s+changed")
_INSERTIONS_RE = re.compile(r"(\d+)\s+insertions?\(\+\)")
_DELETIONS_RE = re.compile(r"(\d+)\s+deletions?\(-\)")


def _log(message: str) -> None:
    print(f"[宠物-Git] {message}", file=sys.stderr, flush=True)


def find_repository(start_path: Path) -> Optional[Path]:
    """从 start_path 向上查找包含 .git 的目录。"""
    current = start_path.resolve()
    for candidate in (current, *current.parents):
        if (candidate / ".git").exists():
            return candidate
    return None


def parse_log(output: str) -> List[CommitInfo]:
    """
    解析 `%H|%s|%an|%aI` 格式的日志。
    提交信息里可能含有 |，因此哈希取第一段，作者与日期取最后两段。
    """
    commits = []
    for line in output.strip().splitlines():
        if line.count("|") < 3:
            continue
        full_hash, rest = line.split("|", 1)
        message, author, date_str = rest.rsplit("|", 2)
        commits.append(CommitInfo(
            hash=full_hash,
            short_hash=full_hash[:7],
            message=message,
            author=author,
            date=datetime.fromisoformat(date_str.strip()),
        ))
    return commits


def parse_shortstat(output: str) -> ChangeStats:
    """例：' 3 files changed, 45 insertions(+), 12 deletions(-)'"""
    stats = ChangeStats()
    if m := _FILES_RE.search(output):
        stats.files_changed = int(m.group(1))
    if m := _INSERTIONS_RE.search(output):
        stats.lines_added = int(m.group(1))
    if m := _DELETIONS_RE.search(output):
        stats.lines_deleted = int(m.group(1))
    return stats


class GitMonitor:
    """只读地访问当前目录所在的 Git 仓库。"""

    def __init__(
        self,
        start_path: Optional[Path] = None,
        runner: Callable[..., subprocess.CompletedProcess] = subprocess.run,
    ):
        self.runner = runner
        self.repo_path = find_repository(Path(start_path or Path.cwd()))

    def _git(self, *args: str, quiet: bool = False) -> Optional[str]:
        """执行 git 子命令，成功返回 stdout，失败返回 None。"""
        try:
            result = self.runner(
                ["git", *args],
                cwd=str(self.repo_path) if self.repo_path else None,
                capture_output=True,
                text=True,
                timeout=GIT_TIMEOUT_SECONDS,
            )
        except FileNotFoundError:
            _log("未找到 git，请先安装: https://git-scm.com/downloads")
            return None
        except subprocess.TimeoutExpired:
            _log(f"git {args[0]} 超时")
            return None
        if result.returncode != 0:
            if not quiet:
                err = (result.stderr or result.stdout or "").strip()
                if "not a git repository" in err:
                    _log("当前目录不是 Git 仓库，可用 git init 初始化")
                else:
                    _log(f"git {args[0]} 失败: {err}")
            return None
        return result.stdout

    def is_available(self) -> bool:
        return self._git("--version", quiet=True) is not None

    def is_inside_repository(self) -> bool:
        return self.repo_path is not None

    def latest_commits(self, limit: int = 20) -> List[CommitInfo]:
        """最近 limit 个提交（新→旧），不含行数统计。"""
        if not self.repo_path:
            return []
        output = self._git("log", "-n", str(limit), LOG_FORMAT)
        return parse_log(output) if output else []

    def change_stats(self, commit_hash: str) -> Optional[ChangeStats]:
        if not self.repo_path:
            return None
        output = self._git("show", commit_hash, "--shortstat", "--format=", quiet=True)
        if output is None:
            return None
        return parse_shortstat(output)

    def _with_stats(self, commits: List[CommitInfo]) -> List[CommitInfo]:
        return [c.with_stats(self.change_stats(c.hash)) for c in commits]

    def all_commits(self, limit: int = GIT_BACKFILL_LIMIT) -> List[CommitInfo]:
        """首次同步用：最近 limit 个提交，带行数统计。"""
        return self._with_stats(self.latest_commits(limit))

    def commits_since(self, marker: str) -> List[CommitInfo]:
        """marker..HEAD 之间的提交（不含 marker），带行数统计。"""
        if not self.repo_path:
            return []
        output = self._git("log", f"{marker}..HEAD", LOG_FORMAT)
        if not output:
            return []
        return self._with_stats(parse_log(output))
