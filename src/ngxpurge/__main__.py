"""Allow ``python -m ngxpurge``."""

import sys

from ngxpurge.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
