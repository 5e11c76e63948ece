"""Allow ``python -m canonpath``."""

import sys

from canonpath.ui.cli.cli import main

if __name__ == "__main__":
    sys.exit(main())
