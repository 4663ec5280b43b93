# topmark:header:start
#
#   project      : mdtitle
#   file         : model.py
#   file_relpath : src/mdtitle/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Run configuration model.

This module defines:
    - `Config`: an immutable snapshot of one generation run.
    - `MutableConfig`: a mutable builder populated from defaults and CLI
      arguments; it is frozen into `Config` and can be thawed back for edits.

Scope:
    - *In scope*: data shapes, field defaults, validation on freeze.
    - *Out of scope*: configuration files. mdtitle is configured from the
      command line only.

Immutability:
    - `Config` is ``frozen=True`` to prevent accidental mutation during a run.
      Use `Config.thaw` -> edit -> `MutableConfig.freeze` for safe updates.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from mdtitle.config.logging import get_logger
from mdtitle.constants import (
    DEFAULT_TAB_SPACE_SIZE,
    DEFAULT_TITLE_MESSAGE,
    MAX_TAB_SPACE_SIZE,
)

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class Config:
    """Immutable configuration for a single generation run.

    Attributes:
        source_path (Path): Document to read headings and body from.
        destination_path (Path): Where the rewritten document is written.
            Equal to ``source_path`` for in-place updates.
        title_message (str): Text of the synthetic top-level outline line.
        tab_space_size (int): Number of spaces per outline nesting level.
        skip_first_title (bool): Drop the first heading and its section from
            both outline and body.
    """

    source_path: Path
    destination_path: Path
    title_message: str = DEFAULT_TITLE_MESSAGE
    tab_space_size: int = DEFAULT_TAB_SPACE_SIZE
    skip_first_title: bool = False

    @property
    def in_place(self) -> bool:
        """Return True when the destination is the source document itself."""
        return self.destination_path == self.source_path

    def thaw(self) -> MutableConfig:
        """Return a mutable copy of this configuration."""
        return MutableConfig(
            source_path=self.source_path,
            destination_path=self.destination_path,
            title_message=self.title_message,
            tab_space_size=self.tab_space_size,
            skip_first_title=self.skip_first_title,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a plain-dict rendition, mainly for debug logging."""
        return {
            "source_path": str(self.source_path),
            "destination_path": str(self.destination_path),
            "title_message": self.title_message,
            "tab_space_size": self.tab_space_size,
            "skip_first_title": self.skip_first_title,
        }


@dataclass
class MutableConfig:
    """Mutable configuration builder.

    ``destination_path`` left as ``None`` means "write back to the source".
    """

    source_path: Path | None = None
    destination_path: Path | None = None
    title_message: str = DEFAULT_TITLE_MESSAGE
    tab_space_size: int = DEFAULT_TAB_SPACE_SIZE
    skip_first_title: bool = False

    @classmethod
    def from_defaults(cls) -> MutableConfig:
        """Return a builder holding the built-in defaults."""
        return cls()

    def apply_cli_args(self, args: Mapping[str, Any]) -> MutableConfig:
        """Overlay values parsed from the command line.

        Keys are the Click parameter names (``file``, ``result_file``,
        ``title_message``, ``tab_space_size``, ``skip_first_title``). Missing
        or ``None`` values leave the current setting untouched.

        Args:
            args (Mapping[str, Any]): Parsed CLI parameters.

        Returns:
            MutableConfig: ``self``, to allow chaining.
        """
        if args.get("file") is not None:
            self.source_path = Path(args["file"])
        if args.get("result_file") is not None:
            self.destination_path = Path(args["result_file"])
        if args.get("title_message") is not None:
            self.title_message = str(args["title_message"])
        if args.get("tab_space_size") is not None:
            self.tab_space_size = int(args["tab_space_size"])
        if args.get("skip_first_title") is not None:
            self.skip_first_title = bool(args["skip_first_title"])
        logger.trace("MutableConfig after CLI overlay: %s", self)
        return self

    def freeze(self) -> Config:
        """Validate and return an immutable `Config`.

        Raises:
            ValueError: If no source path is set or the tab size is outside 0..255.
        """
        if self.source_path is None or str(self.source_path) == "":
            raise ValueError("A source file path is required")
        if not 0 <= self.tab_space_size <= MAX_TAB_SPACE_SIZE:
            raise ValueError(
                f"tab_space_size must be between 0 and {MAX_TAB_SPACE_SIZE}, "
                f"got {self.tab_space_size}"
            )
        return Config(
            source_path=self.source_path,
            destination_path=self.destination_path or self.source_path,
            title_message=self.title_message,
            tab_space_size=self.tab_space_size,
            skip_first_title=self.skip_first_title,
        )
