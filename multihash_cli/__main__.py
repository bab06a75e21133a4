"""
Module execution entry point.

Allows running with: python -m multihash_cli
"""

import sys
from multihash_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
