"""
Bounded depth-first tree rendering

The renderer walks a directory depth-first and prints one line per entry,
drawing vertical continuation glyphs for ancestors that still have siblings
below them. Three limits bound the walk: depth, entries per directory and
total entries. Hitting the total limit stops the whole walk and prints a
truncation marker; overflowing a single directory prints an overflow marker
for that directory and the walk carries on.
"""

import logging
import os
import sys
import time
from pathlib import Path
from typing import List, Optional, TextIO, Tuple

from ..utils.limit import BoundedCounter

logger = logging.getLogger(__name__)

CONTINUATION = '│   '
PADDING = '    '
TEE = '├── '
CORNER = '└── '

MORE_BELOW_SUFFIX = ' [...]'
RESTRICTED_PLACEHOLDER = '[[RESTRICTED]]'
TRUNCATION_MARKER = '...'


def display_name(name: str) -> str:
    """Make a filesystem name printable, replacing undecodable bytes"""
    return name.encode('utf-8', 'surrogateescape').decode('utf-8', 'replace')


class TreeRenderer:
    """Render a directory tree bounded by depth, per-directory and total limits"""

    def __init__(
            self,
            root_dir: str,
            max_depth: int,
            max_dir_length: Optional[int] = None,
            max_total_length: Optional[int] = None,
            stream: Optional[TextIO] = None
    ):
        if max_depth < 1:
            raise ValueError(f"max_depth must be at least 1, got {max_depth}")

        self.root_dir = root_dir
        self.max_depth = max_depth
        self.max_dir_length = max_dir_length
        self.max_total_length = max_total_length
        self.stream = stream

        self._reset_state()

    def _reset_state(self):
        self.depth = BoundedCounter(self.max_depth)
        # One per-directory counter per depth, so a parent's count survives
        # while one of its subdirectories is being listed. Both per-depth
        # lists grow as the walk reaches new depths.
        self.dir_lengths = []
        self.total = BoundedCounter(self.max_total_length)
        self.draw_continuation = []
        self.truncated_depth = 0
        self.start_time = time.perf_counter()

    def _print(self, line: str):
        print(line, file=self.stream if self.stream is not None else sys.stdout)

    def render(self) -> bool:
        """
        Render the whole tree followed by a summary line

        Returns:
            True if every entry was rendered, False if the total limit cut it short
        """
        self._reset_state()
        logger.debug(
            f"Rendering {self.root_dir} (depth={self.max_depth}, "
            f"dir_length={self.max_dir_length}, total_length={self.max_total_length})"
        )

        self._print(self.root_dir)

        complete = self.scan_directory(Path(self.root_dir))
        if not complete:
            self.render_limit_reached()

        elapsed = time.perf_counter() - self.start_time
        self._print(f"{self.total.count} files and directories displayed in {elapsed:.2f} seconds")

        logger.debug(f"Rendered {self.total.count} entries, complete={complete}")
        return complete

    def list_entries(self, path: Path) -> List[Tuple[str, bool]]:
        """
        Read a directory fully into memory as (name, is_dir) pairs sorted by name

        Raises:
            OSError: if the directory cannot be listed
        """
        entries = []
        with os.scandir(path) as it:
            for entry in it:
                try:
                    is_dir = entry.is_dir()
                except OSError:
                    is_dir = False
                entries.append((entry.name, is_dir))

        entries.sort(key=lambda item: item[0])
        return entries

    def scan_directory(self, path: Path) -> bool:
        """
        Render the entries of one directory and, within the depth limit, their subtrees

        Args:
            path: Directory to list

        Returns:
            False if the total limit was exhausted somewhere in this subtree
        """
        depth = self.depth.count
        if depth == len(self.draw_continuation):
            self.draw_continuation.append(True)
            self.dir_lengths.append(BoundedCounter(self.max_dir_length))

        try:
            entries = self.list_entries(path)
        except OSError as e:
            logger.warning(f"Cannot list {path}: {e}")
            self.draw_continuation[depth] = False
            if not self.render_line(RESTRICTED_PLACEHOLDER, is_last=True, is_dir=False):
                self.truncated_depth = depth
                return False
            return True

        dir_length = self.dir_lengths[depth]
        dir_length.reset()

        for index, (name, is_dir) in enumerate(entries):
            if not dir_length.is_under_limit():
                self.render_dir_limit_reached(len(entries) - index)
                break

            is_last = index == len(entries) - 1
            self.draw_continuation[depth] = not is_last

            if not self.render_line(name, is_last, is_dir):
                self.truncated_depth = depth
                return False
            dir_length.increment()

            if is_dir and depth + 1 < self.max_depth:
                self.depth.increment()
                try:
                    complete = self.scan_directory(path / name)
                finally:
                    self.depth.decrement()
                if not complete:
                    return False

        dir_length.reset()
        return True

    def _prefix(self, depth: int) -> str:
        return ''.join(
            CONTINUATION if draw else PADDING
            for draw in self.draw_continuation[:depth]
        )

    def render_line(self, name: str, is_last: bool, is_dir: bool) -> bool:
        """
        Print one entry at the current depth

        Returns:
            False without printing anything if the total limit is exhausted
        """
        if not self.total.is_under_limit():
            return False
        self.total.increment()

        line = self._prefix(self.depth.count)
        line += CORNER if is_last else TEE
        line += display_name(name)
        if is_dir and self.depth.is_at_limit():
            line += MORE_BELOW_SUFFIX

        self._print(line)
        return True

    def render_dir_limit_reached(self, hidden: int):
        """Close a directory listing that overflowed the per-directory limit"""
        self._print(f"{self._prefix(self.depth.count)}{CORNER}{TRUNCATION_MARKER} {hidden} more")

    def render_limit_reached(self):
        """Mark the point where the total limit stopped the walk"""
        self._print(self._prefix(self.truncated_depth) + TRUNCATION_MARKER)


def render_directory(
        root_dir: str,
        max_depth: int,
        max_dir_length: Optional[int] = None,
        max_total_length: Optional[int] = None,
        stream: Optional[TextIO] = None
) -> bool:
    """
    Render root_dir as a tree to stream (stdout by default)

    Args:
        root_dir: Directory to render, printed verbatim as the first line
        max_depth: Number of directory levels to list (at least 1)
        max_dir_length: Maximum entries rendered from any one directory
        max_total_length: Maximum entries rendered in total

    Returns:
        True if the tree was rendered completely
    """
    renderer = TreeRenderer(
        root_dir,
        max_depth,
        max_dir_length=max_dir_length,
        max_total_length=max_total_length,
        stream=stream
    )
    return renderer.render()
