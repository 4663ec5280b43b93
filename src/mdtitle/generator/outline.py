# topmark:header:start
#
#   project      : mdtitle
#   file         : outline.py
#   file_relpath : src/mdtitle/generator/outline.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Outline construction (pure, no file I/O).

`build_outline` walks the source lines once and produces the outline entries
and the document body. When the first heading is to be skipped, the scan runs
a two-state machine:

    NORMAL --(first heading, skip requested)--> INSIDE_SKIPPED
    INSIDE_SKIPPED --(any further heading)--> NORMAL

Lines seen while INSIDE_SKIPPED are dropped from the body; the skipped heading
itself is dropped from the outline.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from mdtitle.config.logging import get_logger
from mdtitle.generator.headings import Heading, match_heading, render_title

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator

logger = get_logger(__name__)


class SkipState(str, Enum):
    """Position of the scan relative to the skipped first section."""

    NORMAL = "normal"
    INSIDE_SKIPPED = "inside_skipped"


@dataclass
class Outline:
    """Result of one outline pass.

    Attributes:
        entries (list[str]): Rendered outline lines, synthetic title first.
        body (list[str]): Source lines kept in the document body (no line terminators).
        headings (list[Heading]): Headings that produced an outline entry, in source order.
    """

    entries: list[str] = field(default_factory=lambda: [])
    body: list[str] = field(default_factory=lambda: [])
    headings: list[Heading] = field(default_factory=lambda: [])

    def iter_lines(self) -> Iterator[str]:
        """Yield the output lines: outline, one blank line, then the body."""
        yield from self.entries
        yield ""
        yield from self.body

    def render(self) -> str:
        """Return the full output text, every line ``\\n``-terminated."""
        return "".join(f"{line}\n" for line in self.iter_lines())


def build_outline(
    lines: Iterable[str],
    *,
    title_message: str,
    tab_space_size: int,
    skip_first_title: bool = False,
) -> Outline:
    """Build the outline and body for ``lines``.

    Args:
        lines (Iterable[str]): Source lines without line terminators.
        title_message (str): Text of the synthetic top-level title.
        tab_space_size (int): Spaces per nesting level.
        skip_first_title (bool): Drop the first heading and its section.

    Returns:
        Outline: Entries (title first, then headings in source order) and body.
    """
    outline = Outline(entries=[render_title(title_message)])
    state: SkipState = SkipState.NORMAL
    first_title_consumed: bool = not skip_first_title

    for line in lines:
        heading: Heading | None = match_heading(line)
        if heading is not None:
            if not first_title_consumed:
                logger.debug("Skipping first heading section: %r", heading.text)
                state = SkipState.INSIDE_SKIPPED
                first_title_consumed = True
                continue
            if state is SkipState.INSIDE_SKIPPED:
                logger.trace("Leaving skipped section at heading %r", heading.text)
            state = SkipState.NORMAL
            outline.headings.append(heading)
            outline.entries.append(heading.render(tab_space_size))
        if state is SkipState.NORMAL:
            outline.body.append(line)

    logger.debug(
        "Outline built: %d heading(s), %d body line(s)",
        len(outline.headings),
        len(outline.body),
    )
    return outline
