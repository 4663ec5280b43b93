# topmark:header:start
#
#   project      : mdtitle
#   file         : __init__.py
#   file_relpath : src/mdtitle/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""mdtitle command line interface (Click)."""

from __future__ import annotations
