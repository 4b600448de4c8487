"""Git working-tree status collection and staging.

Parses ``git status --porcelain=v1 -z`` into per-file records, builds colored
checkbox labels for them, and applies a selection back to the index with
``git add`` / ``git restore --staged``.
"""

from __future__ import annotations

import logging
import subprocess
from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace
from pathlib import Path

from .checkbox.items import Choice, Item, Items
from .ui_theme import UITheme, paint

logger = logging.getLogger(__name__)

GIT_QUERY_TIMEOUT_SECONDS = 5.0
GIT_UPDATE_TIMEOUT_SECONDS = 60.0

STAGED = "staged"
UNSTAGED = "unstaged"

_KIND_BY_CODE: dict[str, str] = {
    "M": "modified",
    "D": "deleted",
    "A": "added",
    "R": "renamed",
    "C": "copied",
    "?": "untracked",
    "!": "ignored",
    "U": "conflict",
}


class GitError(RuntimeError):
    """A git command could not be run or exited with a failure status."""


@dataclass(frozen=True)
class FileStatus:
    """One changed path from ``git status``.

    ``raw_status`` is the two-letter porcelain code. A file counts as staged
    when its index column is neither blank nor ``?``; ``kind`` is read from the
    index column for staged files and from the worktree column otherwise.
    """

    filename: str
    raw_status: str
    staging: str
    kind: str | None
    checked: bool


@dataclass(frozen=True)
class StagePlan:
    add: tuple[str, ...] = ()
    unstage: tuple[str, ...] = ()

    def commands(self) -> list[list[str]]:
        """Return the git argument lists this plan would run, in order."""
        out: list[list[str]] = []
        if self.add:
            out.append(["add", "--", *self.add])
        if self.unstage:
            out.append(["restore", "--staged", "--", *self.unstage])
        return out


def _run_git(
    cwd: Path,
    args: list[str],
    timeout_seconds: float,
    *,
    capture: bool = True,
) -> subprocess.CompletedProcess[str]:
    logger.debug("git %s", " ".join(args))
    try:
        return subprocess.run(
            ["git", "-C", str(cwd), *args],
            stdout=subprocess.PIPE if capture else None,
            stderr=subprocess.PIPE if capture else None,
            text=True,
            encoding="utf-8",
            errors="replace",
            check=False,
            timeout=timeout_seconds,
        )
    except (OSError, subprocess.TimeoutExpired) as exc:
        raise GitError(f"could not run git {args[0]}: {exc}") from exc


def _checked_git(cwd: Path, args: list[str], timeout_seconds: float) -> str:
    proc = _run_git(cwd, args, timeout_seconds)
    if proc.returncode != 0:
        detail = (proc.stderr or "").strip() or f"exit status {proc.returncode}"
        logger.warning("git %s failed: %s", args[0], detail)
        raise GitError(f"git {args[0]} failed: {detail}")
    return proc.stdout


def find_work_tree_root(cwd: Path) -> Path | None:
    """Return the top of the work tree containing ``cwd``, or ``None``.

    Porcelain paths are relative to this root, so every later git call runs
    from it. Bare repositories and ``.git`` internals count as outside.
    """
    try:
        proc = _run_git(
            cwd,
            ["rev-parse", "--is-inside-work-tree", "--show-toplevel"],
            GIT_QUERY_TIMEOUT_SECONDS,
        )
    except GitError:
        return None
    if proc.returncode != 0:
        return None

    lines = [line.strip() for line in proc.stdout.splitlines() if line.strip()]
    if len(lines) < 2 or lines[0] != "true":
        return None
    return Path(lines[1]).resolve()


def _iter_porcelain_records(output: str) -> list[tuple[str, str]]:
    records: list[tuple[str, str]] = []
    tokens = output.split("\0")
    index = 0
    while index < len(tokens):
        token = tokens[index]
        index += 1
        if not token:
            continue
        if len(token) < 4 or token[2] != " ":
            continue

        status = token[:2]
        records.append((status, token[3:]))

        # Renamed/copied entries carry an extra token with the source path;
        # the first path token is the destination.
        if "R" in status or "C" in status:
            index += 1

    return records


def parse_porcelain(output: str) -> list[FileStatus]:
    """Parse ``--porcelain=v1 -z`` output into records sorted by filename."""
    files: list[FileStatus] = []
    for raw_status, filename in _iter_porcelain_records(output):
        index_code, worktree_code = raw_status[0], raw_status[1]
        staged = index_code not in {" ", "?"}
        kind = _KIND_BY_CODE.get(index_code if staged else worktree_code)
        files.append(
            FileStatus(
                filename=filename,
                raw_status=raw_status,
                staging=STAGED if staged else UNSTAGED,
                kind=kind,
                checked=staged,
            )
        )
    files.sort(key=lambda file: file.filename)
    return files


def collect_file_statuses(cwd: Path) -> list[FileStatus]:
    output = _checked_git(
        cwd,
        ["status", "--porcelain=v1", "-z", "--untracked-files=normal"],
        GIT_QUERY_TIMEOUT_SECONDS,
    )
    return parse_porcelain(output)


def status_color(status: str | bool | None, theme: UITheme) -> str:
    """Map a staging state, file kind, or ``True`` (checked) to a theme color."""
    if status is True or status == STAGED:
        return theme.git_staged
    if status in {"renamed", "copied"}:
        return theme.git_moved
    if status == "ignored":
        return theme.git_ignored
    if status in {"added", "deleted"}:
        return theme.git_added_deleted
    if status == "modified":
        return theme.git_modified
    if status == "conflict":
        return theme.git_conflict
    return theme.git_untracked


def display_label(file: FileStatus, theme: UITheme, checked: bool | None = None) -> str:
    """Build ``[XY] filename (kind)``; the badge turns green while checked."""
    is_checked = file.checked if checked is None else checked
    badge = paint(status_color(True if is_checked else file.kind, theme), f"[{file.raw_status}]", theme)
    kind = paint(status_color(file.kind, theme), file.kind or file.staging, theme)
    return f"{badge} {file.filename} ({kind})"


def build_choices(files: Sequence[FileStatus], theme: UITheme) -> list[Choice]:
    return [
        Choice(value=file.filename, label=display_label(file, theme), checked=file.checked)
        for file in files
    ]


def relabel_hook(files: Iterable[FileStatus], theme: UITheme):
    """Return a post-toggle hook that recolors each label from its checked flag."""
    by_name = {file.filename: file for file in files}

    def relabel(items: Items) -> Items:
        out: list[Item] = []
        for item in items:
            file = by_name.get(item.value)
            if file is None:
                out.append(item)
                continue
            out.append(replace(item, label=display_label(file, theme, checked=item.checked)))
        return tuple(out)

    return relabel


def is_fully_staged(file: FileStatus) -> bool:
    """True when the index holds the change and the work tree adds nothing to it."""
    return file.staging == STAGED and file.raw_status[1] == " "


def plan_changes(files: Iterable[FileStatus], selected: Iterable[str]) -> StagePlan:
    """Stage selected files and unstage unselected files that were staged.

    Selected files that are already fully staged are left alone: adding them
    again changes nothing, and for a staged deletion the path no longer
    matches anything git could add.
    """
    chosen = set(selected)
    add: list[str] = []
    unstage: list[str] = []
    for file in files:
        if file.filename in chosen:
            if not is_fully_staged(file):
                add.append(file.filename)
        elif file.staging == STAGED:
            unstage.append(file.filename)
    return StagePlan(add=tuple(add), unstage=tuple(unstage))


def apply_plan(plan: StagePlan, cwd: Path) -> None:
    for args in plan.commands():
        _checked_git(cwd, args, GIT_UPDATE_TIMEOUT_SECONDS)


def print_status(cwd: Path) -> None:
    """Run ``git status`` with output going straight to the terminal."""
    _run_git(cwd, ["status"], GIT_QUERY_TIMEOUT_SECONDS, capture=False)
