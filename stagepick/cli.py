"""Command-line front door for stagepick.

Finds the git work tree, lists changed files in a checkbox prompt, and stages
the checked files while unstaging the ones the user unchecked.
"""

from __future__ import annotations

import argparse
import logging
import os
import shlex
import sys
from pathlib import Path

from .checkbox import CheckboxConfig, NotATerminalError, checkbox
from .config import PromptDefaults, load_prompt_defaults, save_prompt_defaults
from .git_status import (
    GitError,
    apply_plan,
    build_choices,
    collect_file_statuses,
    find_work_tree_root,
    plan_changes,
    print_status,
    relabel_hook,
)
from .ui_theme import available_theme_names, paint, resolve_theme

logger = logging.getLogger(__name__)

DEFAULT_MESSAGE = "Select for staging:"
DEFAULT_INSTRUCTIONS = " > press <a> to toggle all"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _positive_int(value: str) -> int:
    """argparse type for positive integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed <= 0:
        raise argparse.ArgumentTypeError("value must be >= 1")
    return parsed


def configure_logging(verbose: bool, log_file: Path | None) -> None:
    """Send log records to ``log_file`` or stderr; DEBUG when ``verbose``."""
    if log_file is not None:
        handler: logging.Handler = logging.FileHandler(log_file, encoding="utf-8")
    else:
        handler = logging.StreamHandler(sys.stderr)
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        handlers=[handler],
        force=True,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="stagepick",
        description="Interactively choose which changed files are staged in a git work tree.",
    )
    parser.add_argument("path", nargs="?", default=None, help="Directory inside the work tree. Defaults to cwd.")
    parser.add_argument("-m", "--message", default=DEFAULT_MESSAGE, help="Prompt message.")
    parser.add_argument("--page-size", type=_positive_int, default=None, help="Rows shown at once.")
    parser.add_argument(
        "--loop",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Wrap the cursor around the ends of the list.",
    )
    parser.add_argument("--required", action="store_true", help="Refuse to submit an empty selection.")
    parser.add_argument(
        "--theme",
        default=None,
        help=f"UI theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output.")
    parser.add_argument("--dry-run", action="store_true", help="Print the git commands instead of running them.")
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Store --page-size, --loop and --theme as defaults for later runs.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details.")
    parser.add_argument("--log-file", type=Path, default=None, help="Write log records to this file.")
    return parser


def resolve_defaults(args: argparse.Namespace) -> PromptDefaults:
    """Merge CLI flags over persisted defaults."""
    stored = load_prompt_defaults()
    return PromptDefaults(
        page_size=args.page_size if args.page_size is not None else stored.page_size,
        loop=args.loop if args.loop is not None else stored.loop,
        theme=args.theme or stored.theme,
    )


def main(argv: list[str] | None = None) -> None:
    """Parse CLI arguments, run the staging prompt, and apply the selection.

    Exits with a message when the path is not inside a git work tree, and
    with status 130 when the prompt is interrupted.
    """
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose, args.log_file)

    defaults = resolve_defaults(args)
    if args.save_defaults:
        save_prompt_defaults(defaults)
    theme = resolve_theme(defaults.theme, no_color=args.no_color or bool(os.environ.get("NO_COLOR")))

    path = Path(args.path) if args.path is not None else Path.cwd()
    if not path.is_dir():
        raise SystemExit(f"Not a directory: {path}")
    root = find_work_tree_root(path)
    if root is None:
        raise SystemExit("❌ This is not a git repository.")

    try:
        files = collect_file_statuses(root)
    except GitError as exc:
        raise SystemExit(str(exc)) from exc
    if not files:
        print("✅ There are no files to stage or unstage.")
        return
    logger.debug("%d changed files under %s", len(files), root)

    config = CheckboxConfig(
        message=args.message,
        choices=build_choices(files, theme),
        page_size=defaults.page_size,
        loop=defaults.loop,
        required=args.required,
        instructions=paint(theme.help_dim, DEFAULT_INSTRUCTIONS, theme),
        # Badges recolor on <space> only; <a>, <i> and digit jumps leave labels as drawn.
        on_toggle=relabel_hook(files, theme),
        theme=theme,
    )
    try:
        selected = checkbox(config)
    except KeyboardInterrupt:
        raise SystemExit(130) from None
    except NotATerminalError as exc:
        raise SystemExit(str(exc)) from exc

    plan = plan_changes(files, selected)
    if args.dry_run:
        for command in plan.commands():
            print(shlex.join(["git", *command]))
        return

    try:
        apply_plan(plan, root)
    except GitError as exc:
        raise SystemExit(str(exc)) from exc
    print_status(root)


if __name__ == "__main__":
    main()
