"""
Settings loader for stamp.

Settings are transient: they are assembled once per invocation from the
command line flags and the process environment, then passed explicitly
to the composition session. Recognised environment variables:

``STAMP_DRY_RUN``
    Compose and print the message without committing.
``STAMP_VERBOSE``
    Enable debug logging.
``STAMP_NO_UNSTAGED_FALLBACK``
    Only consider staged files when suggesting scopes.

Boolean values accept ``1/0``, ``true/false``, ``yes/no`` and ``on/off``
in any case. Any other value raises :class:`ConfigError`.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping, Optional


logger = logging.getLogger(__name__)
if not logger.handlers:
    logger.addHandler(logging.NullHandler())


ENV_DRY_RUN = "STAMP_DRY_RUN"
ENV_VERBOSE = "STAMP_VERBOSE"
ENV_NO_UNSTAGED_FALLBACK = "STAMP_NO_UNSTAGED_FALLBACK"

_TRUE_VALUES = {"1", "true", "yes", "on"}
_FALSE_VALUES = {"0", "false", "no", "off", ""}


class ConfigError(Exception):
    """Raised when an environment setting has an invalid value."""

    pass


@dataclass(frozen=True)
class Settings:
    """Settings for one composition session.

    Attributes
    ----------
    dry_run : bool
        Skip the repository check, the confirmation and the commit.
    verbose : bool
        Log at DEBUG level.
    fallback_to_unstaged : bool
        List unstaged changes when nothing is staged.
    """

    dry_run: bool = False
    verbose: bool = False
    fallback_to_unstaged: bool = True


def _env_flag(environ: Mapping[str, str], name: str) -> bool:
    raw = environ.get(name)
    if raw is None:
        return False
    value = raw.strip().lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    logger.error("Invalid value for %s: %r", name, raw)
    raise ConfigError(f"'{name}' must be a boolean flag (got {raw!r})")


def load_settings(
    dry_run: bool = False,
    verbose: bool = False,
    environ: Optional[Mapping[str, str]] = None,
) -> Settings:
    """Build :class:`Settings` from command line flags and the environment.

    Args:
        dry_run: Value of the ``--dry-run`` flag.
        verbose: Value of the ``--verbose`` flag.
        environ: Environment mapping; defaults to ``os.environ``.

    Returns:
        The merged settings. A flag given on the command line always wins
        over the environment.

    Raises:
        ConfigError: If a ``STAMP_*`` variable holds an invalid value.
    """
    env = os.environ if environ is None else environ
    settings = Settings(
        dry_run=dry_run or _env_flag(env, ENV_DRY_RUN),
        verbose=verbose or _env_flag(env, ENV_VERBOSE),
        fallback_to_unstaged=not _env_flag(env, ENV_NO_UNSTAGED_FALLBACK),
    )
    logger.debug("Loaded settings: %s", settings)
    return settings
