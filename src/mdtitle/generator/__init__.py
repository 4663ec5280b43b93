# topmark:header:start
#
#   project      : mdtitle
#   file         : __init__.py
#   file_relpath : src/mdtitle/generator/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Outline generation: heading detection, staging, and the title generator."""

from __future__ import annotations

from mdtitle.generator.headings import Heading, match_heading
from mdtitle.generator.outline import Outline, build_outline
from mdtitle.generator.staging import staging_path_for
from mdtitle.generator.title_generator import TitleGenerator

__all__ = [
    "Heading",
    "Outline",
    "TitleGenerator",
    "build_outline",
    "match_heading",
    "staging_path_for",
]
