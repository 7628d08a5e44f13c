#!/usr/bin/env python3
"""
Allow running robber as a module: python -m robber
"""

from robber.cli import main

if __name__ == "__main__":
    raise SystemExit(main())
