"""
Grouping logic for changed files.

This package maps changed file paths to module keys and partitions them
into display groups. See :mod:`stamp.grouping.module_classifier` and
:mod:`stamp.grouping.module_grouper` for details.
"""

from .group_model import ModuleGroup  # noqa: F401
from .module_classifier import classify_path, split_segments  # noqa: F401
from .module_grouper import group_by_module  # noqa: F401
