"""Allow running as ``python -m sexptree``."""

import sys

from sexptree.cli import main

if __name__ == "__main__":
    sys.exit(main())
