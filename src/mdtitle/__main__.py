# topmark:header:start
#
#   project      : mdtitle
#   file         : __main__.py
#   file_relpath : src/mdtitle/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running mdtitle via ``python -m mdtitle``.

It delegates directly to :func:`mdtitle.cli.main.cli`, so the module and the
``mdtitle`` console script share a single entry point.

Examples:
    Prepend an outline to a README in place::

        python -m mdtitle --file README.md
"""

from __future__ import annotations

from mdtitle.cli.main import cli

if __name__ == "__main__":
    cli()
