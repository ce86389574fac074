"""Allow `python -m printdiff OLD NEW`."""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
