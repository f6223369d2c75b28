"""
Composition session orchestrating a single commit message.

The session walks through the states ``START -> TYPE_SELECTED ->
FILES_LISTED -> SCOPE_RESOLVED -> DESCRIPTION_CAPTURED ->
MESSAGE_ASSEMBLED`` and ends in one of ``COMMITTED``,
``DRY_RUN_REPORTED``, ``ABORTED`` or ``CANCELLED``. All interaction with
the terminal and with git goes through collaborators passed to the
constructor, so the session itself can be driven entirely from tests.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Callable, List, Optional, Protocol, Sequence

from stamp.grouping.group_model import ModuleGroup
from stamp.grouping.module_grouper import group_by_module

from .message import CommitType, assemble_message, validate_description
from .scope import (
    ManyCandidates,
    NoCandidates,
    OneCandidate,
    extract_scope_candidates,
    sanitize_scope,
    suggest_scope,
)


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


class _Cancelled:
    """Marker returned by a prompter when the user interrupts a prompt."""

    def __repr__(self) -> str:
        return "CANCELLED"

    def __bool__(self) -> bool:
        return False


CANCELLED = _Cancelled()

# Menu value for the "(custom)" entry of the scope menu.
CUSTOM_SCOPE = "__custom__"


@dataclass(frozen=True)
class MenuOption:
    """One entry of a selection menu."""

    value: Any
    label: str


class Prompter(Protocol):
    """Interactive input collaborator.

    Each method is a single suspension point and returns either the
    user's answer or :data:`CANCELLED`.
    """

    def select(self, message: str, options: Sequence[MenuOption], default: Any = None) -> Any:
        ...

    def text(
        self,
        message: str,
        default: str = "",
        validate: Optional[Callable[[str], Optional[str]]] = None,
    ) -> Any:
        ...

    def confirm(self, message: str, default: bool = True) -> Any:
        ...


class Reporter(Protocol):
    """Output collaborator for what the session wants to show the user."""

    def show_changed_files(self, groups: List[ModuleGroup]) -> None:
        ...

    def show_selected_scope(self, raw_scope: str) -> None:
        ...

    def show_message(self, message: str) -> None:
        ...

    def show_dry_run(self) -> None:
        ...

    def show_committed(self, message: str) -> None:
        ...

    def show_aborted(self) -> None:
        ...


class _SilentReporter:
    def show_changed_files(self, groups: List[ModuleGroup]) -> None:
        pass

    def show_selected_scope(self, raw_scope: str) -> None:
        pass

    def show_message(self, message: str) -> None:
        pass

    def show_dry_run(self) -> None:
        pass

    def show_committed(self, message: str) -> None:
        pass

    def show_aborted(self) -> None:
        pass


class SessionState(str, Enum):
    START = "start"
    TYPE_SELECTED = "type_selected"
    FILES_LISTED = "files_listed"
    SCOPE_RESOLVED = "scope_resolved"
    DESCRIPTION_CAPTURED = "description_captured"
    MESSAGE_ASSEMBLED = "message_assembled"
    COMMITTED = "committed"
    DRY_RUN_REPORTED = "dry_run_reported"
    ABORTED = "aborted"
    CANCELLED = "cancelled"


@dataclass
class SessionResult:
    """Outcome of a composition session.

    Attributes
    ----------
    state : SessionState
        The terminal state the session ended in.
    commit_type : Optional[CommitType]
        Selected type, ``None`` if the session was cancelled first.
    raw_scope : Optional[str]
        Scope text as entered or selected, before sanitizing.
    scope : Optional[str]
        Sanitized scope token.
    description : Optional[str]
        Description as entered.
    message : Optional[str]
        The assembled commit message.
    files : List[str]
        Changed files reported by the file source.
    groups : List[ModuleGroup]
        ``files`` grouped by module, in display order.
    """

    state: SessionState = SessionState.START
    commit_type: Optional[CommitType] = None
    raw_scope: Optional[str] = None
    scope: Optional[str] = None
    description: Optional[str] = None
    message: Optional[str] = None
    files: List[str] = field(default_factory=list)
    groups: List[ModuleGroup] = field(default_factory=list)

    @property
    def cancelled(self) -> bool:
        return self.state is SessionState.CANCELLED


class CompositionSession:
    """Drive one commit message from type selection to commit.

    Parameters
    ----------
    prompter : Prompter
        Source of user answers.
    list_changed_files : Callable[[], Sequence[str]]
        Returns the changed files; an empty sequence is a valid answer.
    execute_commit : Callable[[str], Any]
        Called once with the final message when the user confirms.
    dry_run : bool
        When True, the message is only reported and never committed.
    reporter : Reporter, optional
        Receives display events. Defaults to a reporter that shows
        nothing.
    """

    def __init__(
        self,
        prompter: Prompter,
        list_changed_files: Callable[[], Sequence[str]],
        execute_commit: Callable[[str], Any],
        dry_run: bool = False,
        reporter: Optional[Reporter] = None,
    ) -> None:
        self.prompter = prompter
        self.list_changed_files = list_changed_files
        self.execute_commit = execute_commit
        self.dry_run = dry_run
        self.reporter = reporter if reporter is not None else _SilentReporter()

    def run(self) -> SessionResult:
        """Run the session to a terminal state and return the outcome."""
        result = SessionResult()

        commit_type = self.prompter.select(
            "Select commit type",
            [MenuOption(value=t, label=t.label) for t in CommitType],
        )
        if commit_type is CANCELLED:
            return self._cancel(result)
        result.commit_type = CommitType(commit_type)
        self._advance(result, SessionState.TYPE_SELECTED)

        result.files = list(self.list_changed_files())
        result.groups = group_by_module(result.files)
        self.reporter.show_changed_files(result.groups)
        candidates = extract_scope_candidates(result.files)
        self._advance(result, SessionState.FILES_LISTED)

        raw_scope = self.resolve_scope(candidates)
        if raw_scope is CANCELLED:
            return self._cancel(result)
        result.raw_scope = raw_scope
        self.reporter.show_selected_scope(raw_scope)
        result.scope = sanitize_scope(raw_scope)
        self._advance(result, SessionState.SCOPE_RESOLVED)

        description = self.prompter.text("Description (required)", validate=validate_description)
        if description is CANCELLED:
            return self._cancel(result)
        result.description = description
        self._advance(result, SessionState.DESCRIPTION_CAPTURED)

        result.message = assemble_message(result.commit_type, result.scope, description)
        self.reporter.show_message(result.message)
        self._advance(result, SessionState.MESSAGE_ASSEMBLED)

        if self.dry_run:
            self.reporter.show_dry_run()
            self._advance(result, SessionState.DRY_RUN_REPORTED)
            return result

        confirmed = self.prompter.confirm("Commit with this message?", default=True)
        if confirmed is CANCELLED:
            return self._cancel(result)
        if not confirmed:
            self.reporter.show_aborted()
            self._advance(result, SessionState.ABORTED)
            return result

        self.execute_commit(result.message)
        self.reporter.show_committed(result.message)
        self._advance(result, SessionState.COMMITTED)
        return result

    def resolve_scope(self, candidates: Sequence[str]) -> Any:
        """Ask for a scope using a prompt that fits the candidate count.

        Returns the raw scope text or :data:`CANCELLED`. A single
        candidate is only shown as a hint: submitting an empty answer
        means no scope, not the suggested one.
        """
        suggestion = suggest_scope(candidates)
        if isinstance(suggestion, NoCandidates):
            return self.prompter.text("Scope (optional)", default="")
        if isinstance(suggestion, OneCandidate):
            return self.prompter.text(
                f"Scope (optional) [suggested: {suggestion.value}]", default=""
            )
        if isinstance(suggestion, ManyCandidates):
            options = [MenuOption(value=c, label=c) for c in suggestion.values]
            options.append(MenuOption(value="", label="(none)"))
            options.append(MenuOption(value=CUSTOM_SCOPE, label="(custom)"))
            picked = self.prompter.select("Select scope (or custom)", options)
            if picked == CUSTOM_SCOPE:
                return self.prompter.text("Scope (optional, free text)", default="")
            return picked
        raise TypeError(f"Unexpected scope suggestion: {suggestion!r}")

    # ------------------------------------------------------------------
    # State bookkeeping
    # ------------------------------------------------------------------
    @staticmethod
    def _advance(result: SessionResult, state: SessionState) -> None:
        logger.debug("Session state: %s -> %s", result.state.value, state.value)
        result.state = state

    @staticmethod
    def _cancel(result: SessionResult) -> SessionResult:
        logger.debug("Session cancelled in state %s", result.state.value)
        return SessionResult(state=SessionState.CANCELLED)
