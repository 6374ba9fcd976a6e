"""Allow ``python -m tickbar``."""

import sys

from tickbar.cli.main import main

if __name__ == "__main__":
    sys.exit(main())
