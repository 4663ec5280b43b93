# topmark:header:start
#
#   project      : mdtitle
#   file         : __init__.py
#   file_relpath : src/mdtitle/config/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration and logging for mdtitle.

Re-exports the run configuration types so callers can write
``from mdtitle.config import Config, MutableConfig``.
"""

from __future__ import annotations

from mdtitle.config.model import Config, MutableConfig

__all__ = [
    "Config",
    "MutableConfig",
]
