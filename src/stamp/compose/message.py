"""
Conventional commit types and message assembly.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional, Union


class CommitType(str, Enum):
    """The closed set of commit types offered to the user.

    Member order is the order of the selection menu.
    """

    FEAT = "feat"
    FIX = "fix"
    DOCS = "docs"
    STYLE = "style"
    REFACTOR = "refactor"
    TEST = "test"
    CHORE = "chore"
    PERF = "perf"

    @property
    def label(self) -> str:
        """Menu label, e.g. ``feat - new feature``."""
        return f"{self.value} - {_DESCRIPTIONS[self.value]}"


_DESCRIPTIONS = {
    "feat": "new feature",
    "fix": "bug fix",
    "docs": "documentation",
    "style": "formatting",
    "refactor": "refactoring",
    "test": "tests",
    "chore": "maintenance",
    "perf": "performance improvement",
}

DESCRIPTION_REQUIRED = "Description is required"


def validate_description(text: str) -> Optional[str]:
    """Return an error message if ``text`` is blank, otherwise ``None``."""
    if not text.strip():
        return DESCRIPTION_REQUIRED
    return None


def assemble_message(commit_type: Union[CommitType, str], scope: str, description: str) -> str:
    """Build the final commit message.

    Parameters
    ----------
    commit_type : CommitType or str
        The selected commit type.
    scope : str
        Sanitized scope token; an empty string means "no scope".
    description : str
        Non-empty description. Surrounding whitespace is removed.

    Returns
    -------
    str
        ``type: description`` or ``type(scope): description``.
    """
    type_value = commit_type.value if isinstance(commit_type, CommitType) else commit_type
    description = description.strip()
    if not scope:
        return f"{type_value}: {description}"
    return f"{type_value}({scope}): {description}"
