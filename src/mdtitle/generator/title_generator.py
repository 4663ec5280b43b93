# topmark:header:start
#
#   project      : mdtitle
#   file         : title_generator.py
#   file_relpath : src/mdtitle/generator/title_generator.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Title generator: read, outline, stage, promote.

A `TitleGenerator` is bound to one source document. A run has three phases:

1. `TitleGenerator.create` derives the staging path next to the source.
2. `TitleGenerator.generate` reads the source, builds the outline and body,
   and writes the result into the staging file. Nothing else is touched.
3. `TitleGenerator.finish` copies the staging file over the destination and
   deletes the staging file.

Use the generator as a context manager: leaving the ``with`` block deletes
any staging file that was not promoted, including one left behind by an
earlier interrupted run, so failed runs do not leave artifacts behind.

Example:
    ```python
    with TitleGenerator.create(Path("README.md"), "Contents", 2) as gen:
        gen.generate(skip_first_title=True).finish(Path("README.md"))
    ```
"""

from __future__ import annotations

import io
import shutil
from pathlib import Path
from typing import IO, TYPE_CHECKING

from mdtitle.config.logging import get_logger
from mdtitle.config.model import MutableConfig
from mdtitle.constants import (
    DEFAULT_TAB_SPACE_SIZE,
    DEFAULT_TITLE_MESSAGE,
    SOURCE_ENCODING,
)
from mdtitle.errors import FileIOError, IOStep, ReadError
from mdtitle.generator.outline import Outline, build_outline
from mdtitle.generator.staging import staging_path_for

if TYPE_CHECKING:
    from types import TracebackType

    from mdtitle.config.logging import MdtitleLogger
    from mdtitle.config.model import Config

logger: MdtitleLogger = get_logger(__name__)


class TitleGenerator:
    """Prepends a generated outline to a single document.

    Attributes:
        config (Config): Run configuration.
        staging_path (Path): Derived staging file, sibling of the source.
    """

    config: Config
    staging_path: Path

    def __init__(self, config: Config) -> None:
        self.config = config
        self.staging_path = staging_path_for(config.source_path)

    @classmethod
    def create(
        cls,
        source_path: Path,
        title_message: str = DEFAULT_TITLE_MESSAGE,
        tab_space_size: int = DEFAULT_TAB_SPACE_SIZE,
    ) -> TitleGenerator:
        """Return a generator bound to ``source_path``.

        Args:
            source_path (Path): Document to process.
            title_message (str): Text of the synthetic top-level outline line.
            tab_space_size (int): Spaces per nesting level (0..255).

        Returns:
            TitleGenerator: A generator writing back to ``source_path`` by default.

        Raises:
            PathError: If no staging path can be derived from ``source_path``.
        """
        mcfg: MutableConfig = MutableConfig(
            source_path=Path(source_path),
            title_message=title_message,
            tab_space_size=tab_space_size,
        )
        return cls(mcfg.freeze())

    @classmethod
    def from_config(cls, config: Config) -> TitleGenerator:
        """Return a generator for a fully resolved `Config`."""
        return cls(config)

    # --- context manager ---------------------------------------------------

    def __enter__(self) -> TitleGenerator:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if exc is None:
            self.discard()
            return
        # Do not let a cleanup failure mask the error that aborted the run.
        try:
            self.discard()
        except FileIOError as cleanup_exc:
            logger.error("Cleanup after failed run also failed: %s", cleanup_exc)

    # --- operations --------------------------------------------------------

    def generate(self, skip_first_title: bool | None = None) -> TitleGenerator:
        """Build the outline and write the transformed document to the staging file.

        Args:
            skip_first_title (bool | None): Drop the first heading and its
                section. ``None`` uses ``config.skip_first_title``.

        Returns:
            TitleGenerator: ``self``, so `finish` can be chained.

        Raises:
            FileIOError: If the source cannot be opened or read, or the staging
                file cannot be opened or written.
            ReadError: If a source line is not valid text.
        """
        skip: bool = self.config.skip_first_title if skip_first_title is None else skip_first_title
        source_path: Path = self.config.source_path
        logger.debug("Generating outline for %s (skip_first_title=%s)", source_path, skip)

        try:
            source = source_path.open("rb")
        except OSError as exc:
            raise FileIOError(IOStep.OPEN_SOURCE, source_path, exc) from exc

        with source:
            try:
                staging = self.staging_path.open("w", encoding=SOURCE_ENCODING, newline="")
            except OSError as exc:
                raise FileIOError(IOStep.OPEN_STAGING, self.staging_path, exc) from exc
            logger.trace("Opened staging file %s", self.staging_path)

            with staging:
                lines: list[str] = self._read_lines(source)
                outline: Outline = build_outline(
                    lines,
                    title_message=self.config.title_message,
                    tab_space_size=self.config.tab_space_size,
                    skip_first_title=skip,
                )
                try:
                    staging.write(outline.render())
                    staging.flush()
                except OSError as exc:
                    raise FileIOError(IOStep.WRITE, self.staging_path, exc) from exc

        logger.debug(
            "Staged %d outline entries and %d body lines in %s",
            len(outline.entries),
            len(outline.body),
            self.staging_path,
        )
        return self

    def finish(self, destination_path: Path | None = None) -> None:
        """Promote the staging file to ``destination_path`` and delete it.

        The destination is created or truncated. It may be the source itself.

        Args:
            destination_path (Path | None): Target document. ``None`` uses
                ``config.destination_path``.

        Raises:
            FileIOError: If the copy or the staging file deletion fails.
        """
        destination: Path = (
            self.config.destination_path if destination_path is None else Path(destination_path)
        )
        try:
            shutil.copyfile(self.staging_path, destination)
        except OSError as exc:
            raise FileIOError(IOStep.COPY, destination, exc) from exc
        logger.debug("Copied %s to %s", self.staging_path, destination)

        try:
            self.staging_path.unlink()
        except OSError as exc:
            raise FileIOError(IOStep.DELETE, self.staging_path, exc) from exc
        logger.trace("Removed staging file %s", self.staging_path)

    def discard(self) -> None:
        """Delete the staging file if it exists.

        A staging file left behind by an earlier, interrupted run on the same
        source is removed as well. Idempotent.

        Raises:
            FileIOError: If the staging file exists but cannot be deleted.
        """
        try:
            self.staging_path.unlink()
        except FileNotFoundError:
            return
        except OSError as exc:
            raise FileIOError(IOStep.DELETE, self.staging_path, exc) from exc
        logger.debug("Discarded staging file %s", self.staging_path)

    # --- helpers -----------------------------------------------------------

    def _read_lines(self, source: IO[bytes]) -> list[str]:
        """Return the source lines without their terminators.

        The whole file is decoded in one pass so a decode failure can be
        pinned to the line that holds the offending byte.
        """
        source_path: Path = self.config.source_path
        try:
            data: bytes = source.read()
        except OSError as exc:
            raise FileIOError(IOStep.READ, source_path, exc) from exc

        try:
            text: str = data.decode(SOURCE_ENCODING)
        except UnicodeDecodeError as exc:
            # exc.start marks the first bad byte; everything before it decodes.
            prefix: str = data[: exc.start].decode(SOURCE_ENCODING)
            line_number: int = io.StringIO(prefix, newline=None).getvalue().count("\n") + 1
            raise ReadError(source_path, line_number, exc) from exc

        lines: list[str] = [
            raw[:-1] if raw.endswith("\n") else raw for raw in io.StringIO(text, newline=None)
        ]
        logger.trace("Read %d line(s) from %s", len(lines), source_path)
        return lines
