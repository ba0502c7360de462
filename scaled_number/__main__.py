"""Entry point for ``python -m scaled_number``."""

import sys

from scaled_number.cli import main

if __name__ == "__main__":
    sys.exit(main())
