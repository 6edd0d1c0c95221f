"""Entry point for ``python -m intlextract``."""

import sys

from intlextract.cli import main

if __name__ == "__main__":
    sys.exit(main())
