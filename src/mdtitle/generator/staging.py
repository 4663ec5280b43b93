# topmark:header:start
#
#   project      : mdtitle
#   file         : staging.py
#   file_relpath : src/mdtitle/generator/staging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Staging file naming.

The staging file lives next to the source and is named after it:
``<stem>_<sha256(stem)>[.<ext>]``. Stem and extension are split at the last
dot of the file name, independent of `pathlib` suffix rules. The digest is
computed over the UTF-8 bytes of the stem only, so the same stem always yields
the same staging name.
"""

from __future__ import annotations

import hashlib
from pathlib import Path

from mdtitle.config.logging import get_logger
from mdtitle.errors import PathError

logger = get_logger(__name__)


def stem_digest(stem: str) -> str:
    """Return the lowercase SHA-256 hex digest of ``stem``."""
    return hashlib.sha256(stem.encode("utf-8")).hexdigest()


def split_name(name: str) -> tuple[str, str | None]:
    """Split a file name into stem and extension at its last dot.

    A leading dot does not start an extension (``.profile`` has none). A
    trailing dot yields an empty extension (``foo.`` -> ``("foo", "")``).

    Args:
        name (str): File name without directory.

    Returns:
        tuple[str, str | None]: The stem and the extension, or ``None`` when
        the name has no extension.
    """
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem:
        return name, None
    return stem, ext


def staging_path_for(path: Path) -> Path:
    """Return the staging file path derived from ``path``.

    Args:
        path (Path): Source document path.

    Returns:
        Path: Sibling path ``<stem>_<hex>`` or ``<stem>_<hex>.<ext>``.

    Raises:
        PathError: If ``path`` has no file name (``/``, ``.``, ``..``) or its
            name cannot be encoded as UTF-8.
    """
    if path.name in ("", ".", ".."):
        raise PathError(path, "path has no file name")

    stem, ext = split_name(path.name)
    try:
        digest: str = stem_digest(stem)
        if ext is not None:
            ext.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise PathError(path, "file name is not valid UTF-8") from exc

    staging_name: str = f"{stem}_{digest}" if ext is None else f"{stem}_{digest}.{ext}"
    staging: Path = path.with_name(staging_name)
    logger.trace("Staging path for %s: %s", path, staging)
    return staging
