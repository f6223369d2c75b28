"""
Data models for module grouping.

The :class:`ModuleGroup` represents the changed files that belong to one
logical module of the repository, as shown to the user before the scope
is chosen.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List


@dataclass
class ModuleGroup:
    """Representation of a module and its changed files.

    Attributes
    ----------
    key : str
        The module key (``src``, ``packages/foo``, ``(unknown)``...).
    files : List[str]
        Changed files belonging to the module, sorted.
    """

    key: str
    files: List[str] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.files)
