#!/usr/bin/env python
"""Command-line entry point for mtree"""

import sys
from pathlib import Path
from typing import List, Optional

from .config import Config
from .run import run
from .utils.logger import setup_logger


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    config = Config.from_args(argv)

    log_dir, log_file = None, None
    if config.log_file:
        log_path = Path(config.log_file)
        log_dir, log_file = log_path.parent, log_path.name
    setup_logger('mtree', log_dir=log_dir, log_file=log_file, level=config.log_level)

    return run(config)


if __name__ == "__main__":
    sys.exit(main())
