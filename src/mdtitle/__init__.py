# topmark:header:start
#
#   project      : mdtitle
#   file         : __init__.py
#   file_relpath : src/mdtitle/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""mdtitle package.

mdtitle prepends a generated outline (table of contents) to Markdown-like
documents. It scans ATX-style ``#`` headings, renders them as an indented
bullet list below a synthetic title line, and rewrites the document through a
staging file so that a failed run never touches the destination.
"""

from __future__ import annotations
