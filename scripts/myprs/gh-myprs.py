#!/usr/bin/env python3
"""Thin compatibility entrypoint for running gh-myprs from a checkout."""

from __future__ import annotations

from myprs_core.app import main


if __name__ == "__main__":
    raise SystemExit(main())
