"""Convenience launcher so users can run `python -m notifysendall`."""

from __future__ import annotations

from notifysendall.cli import main_all


if __name__ == "__main__":  # pragma: no cover
    main_all()
