# topmark:header:start
#
#   project      : mdtitle
#   file         : constants.py
#   file_relpath : src/mdtitle/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""mdtitle Constants."""

from __future__ import annotations

from importlib.metadata import version as get_version

MDTITLE_VERSION: str = get_version("mdtitle")

# Environment variable consulted by `mdtitle.config.logging.resolve_env_log_level`
LOG_LEVEL_ENV_VAR: str = "MDTITLE_LOG_LEVEL"

DEFAULT_TITLE_MESSAGE: str = "Auto-Title:"
DEFAULT_TAB_SPACE_SIZE: int = 4
MAX_TAB_SPACE_SIZE: int = 255

# Prefix of the synthetic top-level outline line
TITLE_PREFIX: str = "# "
OUTLINE_BULLET: str = "* "

SOURCE_ENCODING: str = "utf-8"
