"""Allow running BrandPulse with ``python -m brandpulse``."""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
