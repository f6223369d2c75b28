import logging
import subprocess
import unittest
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import patch

from stamp.vcs.git_client import GitClient, GitError


class DummyProc(SimpleNamespace):
    returncode: int = 0
    stdout: str = ""
    stderr: str = ""


class TestGitClientDetection(unittest.TestCase):
    def test_inside_work_tree(self) -> None:
        with patch.object(GitClient, "_run", autospec=True) as mock_run:
            mock_run.return_value = DummyProc(returncode=0, stdout="true\n", stderr="")
            client = GitClient(Path("/repo"))
            self.assertTrue(client.is_inside_work_tree())
            mock_run.assert_called_once_with(client, ["rev-parse", "--is-inside-work-tree"], check=True)

    def test_not_a_repository(self) -> None:
        with patch.object(GitClient, "_run", autospec=True) as mock_run:
            mock_run.side_effect = GitError("fatal: not a git repository")
            self.assertFalse(GitClient(Path("/tmp")).is_inside_work_tree())

    def test_inside_git_dir_is_not_a_work_tree(self) -> None:
        with patch.object(GitClient, "_run", autospec=True) as mock_run:
            mock_run.return_value = DummyProc(returncode=0, stdout="false\n", stderr="")
            self.assertFalse(GitClient(Path("/repo/.git")).is_inside_work_tree())

    def test_not_a_repository_logs_nothing_above_debug(self) -> None:
        proc = subprocess.CompletedProcess(["git"], 128, stdout="", stderr="fatal: not a git repository\n")
        with patch("stamp.vcs.git_client.subprocess.run", return_value=proc):
            with self.assertLogs("stamp.vcs.git_client", level="DEBUG") as logs:
                self.assertFalse(GitClient(Path("/tmp")).is_inside_work_tree())
        self.assertTrue(all(r.levelno == logging.DEBUG for r in logs.records))

    def test_missing_git_executable(self) -> None:
        with patch("stamp.vcs.git_client.subprocess.run", side_effect=FileNotFoundError("git")):
            self.assertFalse(GitClient(Path("/repo")).is_inside_work_tree())


class TestGitClientChangedFiles(unittest.TestCase):
    def _client_with(self, outputs):
        calls = []

        def fake_run(self, args, check=True):
            calls.append(args)
            result = outputs[tuple(args)]
            if isinstance(result, Exception):
                raise result
            return DummyProc(returncode=0, stdout=result, stderr="")

        patcher = patch.object(GitClient, "_run", autospec=True, side_effect=fake_run)
        patcher.start()
        self.addCleanup(patcher.stop)
        return GitClient(Path("/repo")), calls

    def test_staged_files_preferred(self) -> None:
        client, calls = self._client_with({
            ("diff", "--name-only", "--cached", "-z"): "src/a.py\0src/b.py\0",
            ("diff", "--name-only", "-z"): "other.py\0",
        })
        self.assertEqual(client.list_changed_files(), ["src/a.py", "src/b.py"])
        self.assertEqual(calls, [["diff", "--name-only", "--cached", "-z"]])

    def test_falls_back_to_unstaged(self) -> None:
        client, calls = self._client_with({
            ("diff", "--name-only", "--cached", "-z"): "",
            ("diff", "--name-only", "-z"): "docs/readme.md\0",
        })
        self.assertEqual(client.list_changed_files(), ["docs/readme.md"])
        self.assertEqual(len(calls), 2)

    def test_fallback_can_be_disabled(self) -> None:
        client, calls = self._client_with({
            ("diff", "--name-only", "--cached", "-z"): "",
            ("diff", "--name-only", "-z"): "docs/readme.md\0",
        })
        self.assertEqual(client.list_changed_files(fallback_to_unstaged=False), [])
        self.assertEqual(calls, [["diff", "--name-only", "--cached", "-z"]])

    def test_failure_degrades_to_empty_list(self) -> None:
        client, _ = self._client_with({
            ("diff", "--name-only", "--cached", "-z"): GitError("fatal: bad revision"),
        })
        self.assertEqual(client.list_changed_files(), [])

    def test_nothing_changed(self) -> None:
        client, _ = self._client_with({
            ("diff", "--name-only", "--cached", "-z"): "",
            ("diff", "--name-only", "-z"): "",
        })
        self.assertEqual(client.list_changed_files(), [])

    def test_non_ascii_and_spaced_paths_are_kept_verbatim(self) -> None:
        client, _ = self._client_with({
            ("diff", "--name-only", "--cached", "-z"): "caf\u00e9/men\u00fc.py\0docs/my notes.md\0",
        })
        self.assertEqual(client.list_changed_files(), ["caf\u00e9/men\u00fc.py", "docs/my notes.md"])

    def test_listing_failure_is_logged_quietly(self) -> None:
        client, _ = self._client_with({
            ("diff", "--name-only", "--cached", "-z"): GitError("error: unknown option 'cached'\nusage: git diff --no-index"),
        })
        with self.assertLogs("stamp.vcs.git_client", level="DEBUG") as logs:
            self.assertEqual(client.list_changed_files(), [])
        self.assertTrue(all(r.levelno == logging.DEBUG for r in logs.records))
        self.assertTrue(all("usage:" not in r.getMessage() for r in logs.records))


class TestGitClientRun(unittest.TestCase):
    def test_run_raises_on_failure(self) -> None:
        proc = subprocess.CompletedProcess(["git"], 128, stdout="", stderr="fatal: boom\n")
        with patch("stamp.vcs.git_client.subprocess.run", return_value=proc):
            with self.assertRaises(GitError) as ctx:
                GitClient(Path("/repo"))._run(["status"])
        self.assertEqual(str(ctx.exception), "fatal: boom")

    def test_run_without_check_returns_result(self) -> None:
        proc = subprocess.CompletedProcess(["git"], 1, stdout="out", stderr="")
        with patch("stamp.vcs.git_client.subprocess.run", return_value=proc) as mock_run:
            result = GitClient(Path("/repo"))._run(["status"], check=False)
        self.assertIs(result, proc)
        self.assertEqual(mock_run.call_args[0][0], ["git", "status"])
        self.assertEqual(mock_run.call_args[1]["cwd"], Path("/repo"))


class TestGitClientCommit(unittest.TestCase):
    def test_commit_passes_message_as_single_argument(self) -> None:
        message = 'fix(core): handle "quotes" and $VARS'
        proc = subprocess.CompletedProcess(["git"], 0)
        with patch("stamp.vcs.git_client.subprocess.run", return_value=proc) as mock_run:
            GitClient(Path("/repo")).commit(message)
        args, kwargs = mock_run.call_args
        self.assertEqual(args[0], ["git", "commit", "-m", message])
        self.assertEqual(kwargs["cwd"], Path("/repo"))
        # output is inherited from the terminal, not captured
        self.assertNotIn("stdout", kwargs)
        self.assertNotIn("stderr", kwargs)

    def test_commit_failure_raises(self) -> None:
        proc = subprocess.CompletedProcess(["git"], 1)
        with patch("stamp.vcs.git_client.subprocess.run", return_value=proc):
            with self.assertRaises(GitError):
                GitClient(Path("/repo")).commit("feat: x")

    def test_commit_without_git_raises(self) -> None:
        with patch("stamp.vcs.git_client.subprocess.run", side_effect=FileNotFoundError("git")):
            with self.assertRaises(GitError):
                GitClient(Path("/repo")).commit("feat: x")


if __name__ == "__main__":
    unittest.main()
