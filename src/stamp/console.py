"""
Terminal interaction for stamp.

This module provides the status print helpers, the click based
:class:`ClickPrompter` used by the composition session to ask questions,
and the :class:`ConsoleReporter` that shows changed files and the final
message. Interrupting any prompt (Ctrl-C or end of input) makes click
raise :class:`click.Abort`, which the prompter turns into
:data:`~stamp.compose.session.CANCELLED`.
"""

from __future__ import annotations

from typing import Any, Callable, List, Optional, Sequence

import click

from stamp.compose.session import CANCELLED, MenuOption
from stamp.grouping.group_model import ModuleGroup


# ---------------------------------------------------------------------------
# Status display utilities
# ---------------------------------------------------------------------------

def print_info(message: str, indent: int = 0):
    """Print an info message."""
    prefix = "  " * indent
    click.echo(f"{prefix}ℹ {message}", err=False)


def print_success(message: str, indent: int = 0):
    """Print a success message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✓ {message}", err=False)


def print_warning(message: str, indent: int = 0):
    """Print a warning message."""
    prefix = "  " * indent
    click.echo(f"{prefix}⚠ {message}", err=False)


def print_error(message: str, indent: int = 0):
    """Print an error message."""
    prefix = "  " * indent
    click.echo(f"{prefix}✗ {message}", err=True)


# ---------------------------------------------------------------------------
# Prompting
# ---------------------------------------------------------------------------

class ClickPrompter:
    """Ask the user questions on the terminal using click."""

    def select(self, message: str, options: Sequence[MenuOption], default: Any = None) -> Any:
        """Show a numbered menu and return the value of the chosen option.

        Parameters
        ----------
        message : str
            Question shown above the menu.
        options : Sequence[MenuOption]
            Menu entries in display order.
        default : Any, optional
            Value preselected when the user just presses Enter. The first
            option is used when omitted.

        Returns
        -------
        Any
            The ``value`` of the chosen option, or ``CANCELLED``.
        """
        values = [option.value for option in options]
        default_index = values.index(default) + 1 if default in values else 1

        click.echo(f"\n{click.style('?', fg='green', bold=True)} {message}")
        for idx, option in enumerate(options, start=1):
            click.echo(f"   {idx:>2}) {option.label}")
        try:
            choice = click.prompt(
                "   Enter number",
                type=click.IntRange(1, len(options)),
                default=default_index,
                show_default=True,
            )
        except click.Abort:
            return CANCELLED
        return options[choice - 1].value

    def text(
        self,
        message: str,
        default: str = "",
        validate: Optional[Callable[[str], Optional[str]]] = None,
    ) -> Any:
        """Read a line of free text.

        When ``validate`` returns an error message the warning is shown
        and the question is asked again.
        """
        while True:
            try:
                value = click.prompt(
                    f"{click.style('?', fg='green', bold=True)} {message}",
                    default=default,
                    show_default=bool(default),
                    type=str,
                )
            except click.Abort:
                return CANCELLED
            error = validate(value) if validate is not None else None
            if error:
                print_warning(error, indent=1)
                continue
            return value

    def confirm(self, message: str, default: bool = True) -> Any:
        """Ask a yes/no question."""
        try:
            return click.confirm(
                f"{click.style('?', fg='green', bold=True)} {message}", default=default
            )
        except click.Abort:
            return CANCELLED


# ---------------------------------------------------------------------------
# Reporting
# ---------------------------------------------------------------------------

class ConsoleReporter:
    """Show session progress on standard output."""

    def show_changed_files(self, groups: List[ModuleGroup]) -> None:
        if not groups:
            click.echo("Changed files: none")
            return

        click.echo("\nChanged files (by module):")
        for group in groups:
            click.echo(f"\n[{click.style(group.key, fg='cyan', bold=True)}] ({len(group.files)})")
            for path in group.files:
                click.echo(f"- {path}")

    def show_selected_scope(self, raw_scope: str) -> None:
        print_info(f"Selected scope: {raw_scope or 'none'}")

    def show_message(self, message: str) -> None:
        click.echo("\ncommit message:")
        click.echo(click.style(message, bold=True))

    def show_dry_run(self) -> None:
        click.echo("\n[dry-run] commit was not executed.")

    def show_committed(self, message: str) -> None:
        print_success(f"Committed: {message}")

    def show_aborted(self) -> None:
        print_warning("Commit cancelled; nothing was committed.")
