#  Copyright (c) 2025 Tom Villani, Ph.D.
"""Allow ``python -m nbast``."""

import sys

from nbast.cli import main

if __name__ == "__main__":
    sys.exit(main())
