"""Allow ``python -m playrank``."""

import sys

from playrank.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
