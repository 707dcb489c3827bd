# simple_gpio/__main__.py
# Version: 1.0.0

import sys

from .main import main

if __name__ == "__main__":
    sys.exit(main())
