"""
Scope suggestion and sanitizing.

Unlike the module classifier, which picks a single representative key per
path, the scope extractor surfaces every directory level of every changed
path as a candidate: a commit may be scoped to ``src``, ``core`` or
``cache`` equally well.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Iterable, List, Set, Tuple, Union

from stamp.grouping.module_classifier import split_segments

_WHITESPACE_RUN = re.compile(r"\s+")
_DISALLOWED_CHARS = re.compile(r"[^a-zA-Z0-9._-]")


def extract_scope_candidates(paths: Iterable[str]) -> List[str]:
    """Collect every directory segment of ``paths`` as a scope candidate.

    Parameters
    ----------
    paths : Iterable[str]
        Changed file paths relative to the repository root.

    Returns
    -------
    List[str]
        Unique directory segments sorted in ascending order. File names
        (the last segment of each path) are never included.
    """
    scopes: Set[str] = set()
    for path in paths:
        scopes.update(split_segments(path)[:-1])
    return sorted(scopes)


def sanitize_scope(raw: str) -> str:
    """Normalize free-form user input into a scope token.

    Whitespace runs become a single hyphen before any other character is
    stripped, so ``"my scope"`` turns into ``my-scope`` rather than
    ``myscope``. Only ASCII letters, digits, ``.``, ``_`` and ``-`` are
    kept; the result may be empty.
    """
    token = _WHITESPACE_RUN.sub("-", raw.strip())
    return _DISALLOWED_CHARS.sub("", token)


@dataclass(frozen=True)
class NoCandidates:
    """No directory information is available; ask for free text only."""


@dataclass(frozen=True)
class OneCandidate:
    """A single candidate, offered as an advisory hint."""

    value: str


@dataclass(frozen=True)
class ManyCandidates:
    """Several candidates, offered as a menu."""

    values: Tuple[str, ...]


ScopeSuggestion = Union[NoCandidates, OneCandidate, ManyCandidates]


def suggest_scope(candidates: Iterable[str]) -> ScopeSuggestion:
    """Pick the scope prompt variant based on the number of candidates."""
    values = tuple(candidates)
    if not values:
        return NoCandidates()
    if len(values) == 1:
        return OneCandidate(values[0])
    return ManyCandidates(values)
