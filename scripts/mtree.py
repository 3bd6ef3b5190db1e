#!/usr/bin/env python
"""
Print a directory as a bounded tree without installing the package
Run from project root: python scripts/mtree.py -D 3 src
"""
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / 'src'))

from mtree.cli import main

if __name__ == "__main__":
    sys.exit(main())
