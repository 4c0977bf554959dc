"""Console entrypoint for the rasterart application.

This module delegates to :mod:`rasterart.cli` so that running
``python -m rasterart`` or the installed ``rasterart`` console script
executes the same application code.
"""

from __future__ import annotations

from rasterart.cli import main as cli_main


def main() -> None:
    """Application entrypoint (delegates to :func:`rasterart.cli.main`)."""
    cli_main()


if __name__ == "__main__":
    main()
