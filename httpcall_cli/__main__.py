"""
Module execution entry point.

Allows running with: python -m httpcall_cli
"""

import sys
from httpcall_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
