#!/usr/bin/env python3
"""
PR Status Dashboard
Shows your open PRs and their CI status across GitHub repositories.
"""

import sys

from pr_status.cli import main


if __name__ == "__main__":
    sys.exit(main())
