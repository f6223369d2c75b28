"""
Partitioning of changed files into module groups for display.
"""

from __future__ import annotations

from typing import Dict, Iterable, List

from .group_model import ModuleGroup
from .module_classifier import classify_path


def group_by_module(paths: Iterable[str]) -> List[ModuleGroup]:
    """Group ``paths`` by their module key.

    Files inside each group are sorted, and the groups themselves are
    returned in lexicographic order of their keys so that console output
    is reproducible regardless of the order git reported the files in.
    """
    buckets: Dict[str, List[str]] = {}
    for path in paths:
        buckets.setdefault(classify_path(path), []).append(path)
    return [ModuleGroup(key=key, files=sorted(buckets[key])) for key in sorted(buckets)]
