#!/usr/bin/env python3
"""Entry point for the webdbg URL resolution tool."""

from python.webdbg.cli import main


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
