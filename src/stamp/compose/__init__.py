"""
Commit message composition.

This package holds the pure composition engine (scope extraction and
sanitizing, message assembly) and the :class:`CompositionSession` that
drives it through the interactive prompts.
"""

from .message import CommitType, assemble_message, validate_description  # noqa: F401
from .scope import (  # noqa: F401
    ManyCandidates,
    NoCandidates,
    OneCandidate,
    extract_scope_candidates,
    sanitize_scope,
    suggest_scope,
)
from .session import CANCELLED, CompositionSession, SessionResult, SessionState  # noqa: F401
