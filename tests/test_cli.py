"""CLI wiring tests for ``stagepick.cli.main``.

Git and the interactive prompt are replaced with mocks so these tests check
option handling, exit paths, and how the selection reaches the staging plan.
"""

from __future__ import annotations

import io
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path
from unittest import mock

from stagepick import cli
from stagepick.checkbox import NotATerminalError
from stagepick.config import PromptDefaults
from stagepick.git_status import GitError, StagePlan, parse_porcelain

FILES = parse_porcelain("M  staged.py\0 M edited.py\0")


class CliTests(unittest.TestCase):
    def setUp(self) -> None:
        self._tmp = tempfile.TemporaryDirectory()
        self.addCleanup(self._tmp.cleanup)
        self.root = Path(self._tmp.name).resolve()
        patches = {
            "find_work_tree_root": mock.patch("stagepick.cli.find_work_tree_root", return_value=self.root),
            "collect": mock.patch("stagepick.cli.collect_file_statuses", return_value=list(FILES)),
            "checkbox": mock.patch("stagepick.cli.checkbox", return_value=["edited.py"]),
            "apply_plan": mock.patch("stagepick.cli.apply_plan"),
            "print_status": mock.patch("stagepick.cli.print_status"),
            "defaults": mock.patch("stagepick.cli.load_prompt_defaults", return_value=PromptDefaults()),
            "save": mock.patch("stagepick.cli.save_prompt_defaults"),
            "logging": mock.patch("stagepick.cli.configure_logging"),
        }
        self.mocks = {}
        for name, patcher in patches.items():
            self.mocks[name] = patcher.start()
            self.addCleanup(patcher.stop)

    def _main(self, *argv: str) -> str:
        out = io.StringIO()
        with redirect_stdout(out):
            cli.main([str(self.root), *argv])
        return out.getvalue()

    def test_selection_is_planned_and_applied(self) -> None:
        self._main()

        self.mocks["apply_plan"].assert_called_once_with(
            StagePlan(add=("edited.py",), unstage=("staged.py",)),
            self.root,
        )
        self.mocks["print_status"].assert_called_once_with(self.root)

    def test_prompt_config_uses_defaults_and_flags(self) -> None:
        self._main("--page-size", "5", "--loop", "--required", "--no-color", "-m", "Pick files")

        config = self.mocks["checkbox"].call_args.args[0]
        self.assertEqual(config.message, "Pick files")
        self.assertEqual(config.page_size, 5)
        self.assertTrue(config.loop)
        self.assertTrue(config.required)
        self.assertEqual(config.theme.name, "plain")
        self.assertEqual(config.instructions, cli.DEFAULT_INSTRUCTIONS)
        self.assertEqual([choice.value for choice in config.choices], ["edited.py", "staged.py"])
        self.assertEqual([choice.checked for choice in config.choices], [False, True])
        self.assertIsNotNone(config.on_toggle)

    def test_builtin_cli_defaults(self) -> None:
        self._main()

        config = self.mocks["checkbox"].call_args.args[0]
        self.assertEqual(config.message, "Select for staging:")
        self.assertEqual(config.page_size, 20)
        self.assertFalse(config.loop)
        self.assertFalse(config.required)

    def test_dry_run_prints_commands_without_applying(self) -> None:
        output = self._main("--dry-run")

        self.assertEqual(
            output.splitlines(),
            ["git add -- edited.py", "git restore --staged -- staged.py"],
        )
        self.mocks["apply_plan"].assert_not_called()

    def test_save_defaults_persists_merged_options(self) -> None:
        self._main("--page-size", "8", "--theme", "ocean", "--save-defaults")

        self.mocks["save"].assert_called_once_with(PromptDefaults(page_size=8, loop=False, theme="ocean"))

    def test_not_a_repository_exits(self) -> None:
        self.mocks["find_work_tree_root"].return_value = None

        with self.assertRaises(SystemExit) as ctx:
            self._main()
        self.assertIn("not a git repository", str(ctx.exception.code))
        self.mocks["checkbox"].assert_not_called()

    def test_clean_tree_reports_and_skips_prompt(self) -> None:
        self.mocks["collect"].return_value = []

        output = self._main()

        self.assertIn("There are no files to stage or unstage.", output)
        self.mocks["checkbox"].assert_not_called()

    def test_interrupt_exits_with_130(self) -> None:
        self.mocks["checkbox"].side_effect = KeyboardInterrupt

        with self.assertRaises(SystemExit) as ctx:
            self._main()
        self.assertEqual(ctx.exception.code, 130)
        self.mocks["apply_plan"].assert_not_called()

    def test_non_terminal_exits_with_message(self) -> None:
        self.mocks["checkbox"].side_effect = NotATerminalError("needs a terminal")

        with self.assertRaises(SystemExit) as ctx:
            self._main()
        self.assertEqual(ctx.exception.code, "needs a terminal")

    def test_git_failure_exits_with_message(self) -> None:
        self.mocks["apply_plan"].side_effect = GitError("git add failed: boom")

        with self.assertRaises(SystemExit) as ctx:
            self._main()
        self.assertEqual(ctx.exception.code, "git add failed: boom")
        self.mocks["print_status"].assert_not_called()

    def test_rejects_non_positive_page_size(self) -> None:
        with mock.patch("sys.stderr", new_callable=io.StringIO):
            with self.assertRaises(SystemExit):
                self._main("--page-size", "0")


if __name__ == "__main__":
    unittest.main()
