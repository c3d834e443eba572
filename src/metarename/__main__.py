"""Allow ``python -m metarename``."""

import sys

from metarename.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
