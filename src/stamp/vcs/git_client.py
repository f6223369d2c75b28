"""
Git client implementation for stamp.

This module wraps the few Git operations the composer needs: checking
that the current directory is a work tree, listing changed files and
committing. All captured subprocess calls go through :meth:`GitClient._run`
so that unit tests can mock them easily.
"""

from __future__ import annotations

import logging
import subprocess
from pathlib import Path
from typing import List


logger = logging.getLogger(__name__)
# Attach a null handler to avoid logging errors when the root logger is not
# configured. Logs will propagate to the root when configured by the CLI.
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class GitError(Exception):
    """Raised when a Git command fails."""

    pass


class GitClient:
    """Client for interacting with a Git repository."""

    def __init__(self, repo_root: Path) -> None:
        self.repo_root = repo_root

    # ------------------------------------------------------------------
    # Basic Git commands
    # ------------------------------------------------------------------
    def _run(self, args: List[str], check: bool = True) -> subprocess.CompletedProcess:
        """Run a Git command in the repository root and capture its output.

        Raises
        ------
        GitError
            If Git cannot be executed, or if the command exits with a
            non-zero status when ``check`` is True.
        """
        full_cmd = ["git"] + args
        logger.debug("Executing Git command: %s", " ".join(full_cmd))
        try:
            result = subprocess.run(
                full_cmd,
                cwd=self.repo_root,
                stdout=subprocess.PIPE,
                stderr=subprocess.PIPE,
                text=True,
                encoding="utf-8",
                errors="replace",
            )
        except OSError as e:
            logger.debug("Unable to execute Git: %s", e)
            raise GitError(f"Unable to execute git: {e}") from e

        # Failures stay at DEBUG here; callers choose what the user sees.
        if check and result.returncode != 0:
            logger.debug(
                "Git command failed: %s\nSTDOUT: %s\nSTDERR: %s",
                " ".join(full_cmd),
                result.stdout,
                result.stderr,
            )
            raise GitError(result.stderr.strip() or result.stdout.strip())
        return result

    # ------------------------------------------------------------------
    # Repository detection
    # ------------------------------------------------------------------
    def is_inside_work_tree(self) -> bool:
        """Return True if ``repo_root`` lies inside a Git work tree."""
        try:
            result = self._run(["rev-parse", "--is-inside-work-tree"], check=True)
        except GitError:
            return False
        return result.stdout.strip() == "true"

    # ------------------------------------------------------------------
    # Change detection
    # ------------------------------------------------------------------
    @staticmethod
    def _split_names(output: str) -> List[str]:
        """Split NUL separated ``-z`` output, which git never quotes."""
        return [name for name in output.split("\0") if name]

    def get_staged_files(self) -> List[str]:
        """Return the paths staged for the next commit."""
        result = self._run(["diff", "--name-only", "--cached", "-z"], check=True)
        return self._split_names(result.stdout)

    def get_unstaged_files(self) -> List[str]:
        """Return tracked paths modified in the work tree but not staged."""
        result = self._run(["diff", "--name-only", "-z"], check=True)
        return self._split_names(result.stdout)

    def list_changed_files(self, fallback_to_unstaged: bool = True) -> List[str]:
        """Get the list of changed files.

        Staged files are preferred. When nothing is staged and
        ``fallback_to_unstaged`` is True, unstaged modifications are
        returned instead. A failing Git command is not fatal: it is
        reported as "no changed files" and only logged at DEBUG level.

        Returns
        -------
        List[str]
            Changed paths relative to the repository root, possibly empty.
        """
        try:
            files = self.get_staged_files()
            if not files and fallback_to_unstaged:
                logger.debug("No staged changes; falling back to unstaged changes")
                files = self.get_unstaged_files()
        except GitError as exc:
            reason = str(exc).splitlines()[0] if str(exc) else "unknown error"
            logger.debug("Could not list changed files: %s", reason)
            return []
        return files

    # ------------------------------------------------------------------
    # Committing
    # ------------------------------------------------------------------
    def commit(self, message: str) -> None:
        """Create a commit with the given message.

        The message is passed as a single argument, never through a shell.
        Git's output and any hooks it runs share the calling terminal.

        Raises
        ------
        GitError
            If Git cannot be executed or the commit fails.
        """
        full_cmd = ["git", "commit", "-m", message]
        logger.debug("Executing Git command: %s", " ".join(full_cmd))
        try:
            result = subprocess.run(full_cmd, cwd=self.repo_root)
        except OSError as e:
            logger.error("Unable to execute Git: %s", e)
            raise GitError(f"Unable to execute git: {e}") from e
        if result.returncode != 0:
            logger.error("Git commit failed with exit code %s", result.returncode)
            raise GitError(f"git commit failed with exit code {result.returncode}")
