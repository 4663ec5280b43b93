# topmark:header:start
#
#   project      : mdtitle
#   file         : headings.py
#   file_relpath : src/mdtitle/generator/headings.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ATX heading detection and outline entry rendering.

Only single-line ATX headings are recognized: a run of one or more ``#`` at
the start of the line, at least one whitespace character, then text that does
not start with whitespace. Setext headings and fenced code blocks are not
special-cased.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import TYPE_CHECKING

from mdtitle.constants import OUTLINE_BULLET, TITLE_PREFIX

if TYPE_CHECKING:
    from re import Pattern

HEADING_RE: Pattern[str] = re.compile(r"^(?P<level>#+)\s+(?P<text>\S.*)$")


@dataclass(frozen=True, slots=True)
class Heading:
    """A heading matched in the source document.

    Attributes:
        level (int): Number of leading ``#`` characters (1-based).
        text (str): Remainder of the line after the separating whitespace.
    """

    level: int
    text: str

    def render(self, tab_space_size: int) -> str:
        """Render this heading as an indented outline bullet.

        A level-1 heading has no indent; each further level adds
        ``tab_space_size`` spaces.
        """
        indent: str = " " * (tab_space_size * (self.level - 1))
        return f"{indent}{OUTLINE_BULLET}{self.text}"


def match_heading(line: str) -> Heading | None:
    """Return the `Heading` for ``line``, or None when it is not a heading line."""
    m = HEADING_RE.match(line)
    if m is None:
        return None
    return Heading(level=len(m.group("level")), text=m.group("text"))


def render_title(title_message: str) -> str:
    """Render the synthetic top-level title that opens the outline."""
    return f"{TITLE_PREFIX}{title_message}"
