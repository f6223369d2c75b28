"""
Version control system (VCS) integration.

This package contains the client used to check for a Git working tree,
list changed files and create the final commit.
"""

from .git_client import GitClient, GitError  # noqa: F401
