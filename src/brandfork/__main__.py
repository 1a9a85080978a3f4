"""Allow ``python -m brandfork``."""

import sys

from brandfork.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
