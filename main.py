#!/usr/bin/env python3
"""
tfcomponents - run without installing: ``python main.py status``.
"""

import sys

from tfcomponents.cli import main


if __name__ == "__main__":
    sys.exit(main())
