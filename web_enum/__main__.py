"""
Main entry point for the web_enum package.

Allows running the enumerator as: python -m web_enum
"""

import sys

from web_enum.cli import main

if __name__ == "__main__":
    sys.exit(main())
