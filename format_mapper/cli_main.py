"""CLI entry point for format-mapper.

``python -m format_mapper.cli_main`` runs the same click group as the
``format-mapper`` console script.
"""

from __future__ import annotations

from .cli import app

__all__ = ["app"]


if __name__ == "__main__":  # pragma: no cover - manual CLI invocation
    app()
