"""Allow running the contact directory with ``python -m contacts_app``."""

import sys

from .cli.main import main

if __name__ == "__main__":
    sys.exit(main())
