"""
Classification of changed file paths into module keys.

A module key is the top-level directory of a path, or the top two levels
for monorepo containers such as ``packages/`` and ``apps/``. Flat
top-level grouping is too coarse there: the interesting unit is the
individual package, not the shared container directory.
"""

from __future__ import annotations

from typing import List

UNKNOWN_MODULE = "(unknown)"

# Container directories whose direct children are the real modules.
MONOREPO_ROOTS = frozenset({"packages", "apps"})


def split_segments(path: str) -> List[str]:
    """Split a repository-relative path into its non-empty segments.

    Both ``/`` and ``\\`` are accepted as separators, so leading,
    trailing and repeated separators never produce empty segments.
    """
    return [part for part in path.replace("\\", "/").split("/") if part]


def classify_path(path: str) -> str:
    """Return the module key for ``path``.

    Parameters
    ----------
    path : str
        Path of a changed file relative to the repository root.

    Returns
    -------
    str
        ``packages/<name>`` or ``apps/<name>`` for monorepo layouts, the
        first segment otherwise, and ``(unknown)`` when the path has no
        segments at all.
    """
    parts = split_segments(path)
    if not parts:
        return UNKNOWN_MODULE
    if parts[0] in MONOREPO_ROOTS and len(parts) >= 2:
        return "/".join(parts[:2])
    return parts[0]
