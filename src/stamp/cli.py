"""
Command line interface for stamp.

This module defines the ``main`` function which is used as the entry
point when executing the ``stamp`` command. It checks for a Git work
tree, wires the Git client and the terminal prompts into a
:class:`~stamp.compose.session.CompositionSession`, and maps the outcome
to an exit code.
"""

from __future__ import annotations

import logging
from pathlib import Path

import click

from stamp import __version__
from stamp.compose.session import CompositionSession
from stamp.config.settings import ConfigError, load_settings
from stamp.console import ClickPrompter, ConsoleReporter, print_error
from stamp.vcs.git_client import GitClient, GitError

# Create a module-level logger with a null handler. Messages reach the
# root logger once main() configures it.
logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


# ---------------------------------------------------------------------------
# Exit codes
# ---------------------------------------------------------------------------
EXIT_SUCCESS = 0
EXIT_GENERIC_ERROR = 1
EXIT_NO_REPO = EXIT_GENERIC_ERROR

PROG_NAME = "stamp"


def _fail(message: str) -> None:
    click.echo(f"{PROG_NAME}: {message}", err=True)


@click.command()
@click.option("--dry-run", "dry_run", is_flag=True, help="Compose and print the message without committing.")
@click.option("--verbose", is_flag=True, help="Enable verbose (debug) output.")
@click.version_option(version=__version__, prog_name=PROG_NAME)
def main(dry_run: bool, verbose: bool) -> None:
    """Compose a conventional commit message interactively and commit it."""
    ctx = click.get_current_context(silent=True)

    try:
        settings = load_settings(dry_run=dry_run, verbose=verbose)
    except ConfigError as exc:
        _fail(f"configuration error: {exc}")
        ctx.exit(EXIT_GENERIC_ERROR)

    # Use force=True so that handlers are reconfigured on repeated
    # invocations (important for tests).
    logging.basicConfig(
        level=logging.DEBUG if settings.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        force=True,
    )
    logger.debug("Settings: %s", settings)

    try:
        client = GitClient(Path.cwd())

        if not settings.dry_run and not client.is_inside_work_tree():
            print_error("not a git repository")
            raise click.exceptions.Exit(EXIT_NO_REPO)

        session = CompositionSession(
            prompter=ClickPrompter(),
            list_changed_files=lambda: client.list_changed_files(
                fallback_to_unstaged=settings.fallback_to_unstaged
            ),
            execute_commit=client.commit,
            dry_run=settings.dry_run,
            reporter=ConsoleReporter(),
        )
        result = session.run()
        logger.debug("Session finished in state %s", result.state.value)

        raise click.exceptions.Exit(EXIT_SUCCESS)

    except click.exceptions.Exit:
        # Click uses its own Exit exception; re-raise to let Click handle it
        raise
    except KeyboardInterrupt:
        # Ctrl-C outside a prompt, e.g. while a commit hook runs
        logger.debug("Interrupted by user")
        ctx.exit(EXIT_SUCCESS)
    except GitError as exc:
        logger.error("Git failure: %s", exc)
        _fail(str(exc))
        ctx.exit(EXIT_GENERIC_ERROR)
    except Exception as exc:
        # Catch any other unhandled errors
        logger.exception("Unhandled error: %s", exc)
        _fail(str(exc) or exc.__class__.__name__)
        ctx.exit(EXIT_GENERIC_ERROR)

