"""Allow ``python -m rcargo`` to run the CLI."""

import sys

from rcargo.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
