"""Allow ``python -m cddbtool``."""

import sys

from cddbtool.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
