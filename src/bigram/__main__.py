"""
Bigram package entry point.

Allows running: python -m bigram PATH
"""
import sys
from .cli import main

if __name__ == "__main__":
    sys.exit(main())
