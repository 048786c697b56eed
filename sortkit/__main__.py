"""Expose the sortkit benchmark via ``python -m sortkit``."""
import sys
from .sortkit_entry import main

if __name__ == '__main__':
    sys.exit(main())
