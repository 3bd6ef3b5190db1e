import logging
import sys
from typing import Optional, TextIO

from .config import Config, Mode
from .render import render_directory

logger = logging.getLogger(__name__)


def run(config: Config, stream: Optional[TextIO] = None) -> int:
    """
    Print the config's message or error, or render its tree

    Returns:
        Process exit code: 1 for an error config, 0 otherwise
    """
    out = stream if stream is not None else sys.stdout

    if config.mode == Mode.MESSAGE:
        print(config.message, file=out)
        return 0

    if config.mode == Mode.ERROR:
        print(f"Error: {config.error}", file=out)
        return 1

    complete = render_directory(
        config.root_dir,
        config.max_depth,
        max_dir_length=config.max_dir_length,
        max_total_length=config.max_total_length,
        stream=out
    )
    if not complete:
        logger.info(f"Output for {config.root_dir} was truncated by the total limit")
    return 0
