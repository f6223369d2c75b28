"""
Session settings for stamp.

There is no configuration file; settings come from command line flags
and ``STAMP_*`` environment variables. See :mod:`stamp.config.settings`
for details.
"""

from .settings import ConfigError, Settings, load_settings  # noqa: F401
