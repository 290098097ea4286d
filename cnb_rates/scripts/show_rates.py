"""CLI entry point for printing today's CNB rates."""

from __future__ import annotations

import sys

from cnb_rates.cli import main

if __name__ == "__main__":  # pragma: no cover - thin wrapper
    sys.exit(main())
