"""
Filesystem walker for jarsearch.

This module traverses a directory tree depth-first and yields every regular
file it finds. Directory entries are visited in name order so repeated runs
over the same tree produce the same sequence. Traversal uses an explicit
stack instead of recursion, and directories reached through symbolic links
are entered at most once.
"""

import os
from pathlib import Path
from typing import Dict, Iterator, List, Optional, Set, Tuple
import logging

from ..models.config import SearchConfig


logger = logging.getLogger(__name__)


class RootNotFoundError(Exception):
    """Raised internally when the search root is missing or not a directory."""


class FSWalker:
    """
    Filesystem walker that yields regular files under a root directory.

    Problems with individual directories are logged and skipped; they never
    stop the walk.
    """

    def __init__(self, config: Optional[SearchConfig] = None):
        """
        Initialize the filesystem walker.

        Args:
            config: Search configuration; defaults are used when omitted
        """
        self.config = config or SearchConfig()
        self._stats = self._empty_stats()
        self._errors: List[str] = []

    @staticmethod
    def _empty_stats() -> Dict[str, int]:
        return {
            'directories_traversed': 0,
            'files_scanned': 0,
            'directories_skipped': 0,
            'errors': 0
        }

    def walk(self, root: str) -> Iterator[Path]:
        """
        Walk a directory tree and yield regular file paths.

        Args:
            root: Root directory to walk

        Yields:
            Paths of regular files, depth-first in name order
        """
        root_path = Path(root)
        try:
            self._check_root(root_path)
        except RootNotFoundError as e:
            self._record_error(str(e))
            return

        logger.debug(f"Walking directory tree: {root_path}")
        visited: Set[Tuple[int, int]] = set()
        self._mark_visited(root_path, visited)

        stack: List[Iterator[os.DirEntry]] = [self._list_directory(root_path)]
        while stack:
            entry = next(stack[-1], None)
            if entry is None:
                stack.pop()
                continue

            try:
                is_dir = entry.is_dir(follow_symlinks=self.config.follow_symlinks)
                is_file = not is_dir and entry.is_file(follow_symlinks=True)
            except OSError as e:
                self._record_error(f"Cannot stat {entry.path}: {e}")
                continue

            if is_dir:
                dir_path = Path(entry.path)
                if not self._mark_visited(dir_path, visited):
                    logger.debug(f"Skipping already visited directory (link cycle): {dir_path}")
                    self._stats['directories_skipped'] += 1
                    continue
                stack.append(self._list_directory(dir_path))
            elif is_file:
                self._stats['files_scanned'] += 1
                yield Path(entry.path)

    def _check_root(self, root_path: Path) -> None:
        if not root_path.exists() or not root_path.is_dir():
            raise RootNotFoundError(f"Directory does not exist or is not a directory: {root_path}")

    def _mark_visited(self, dir_path: Path, visited: Set[Tuple[int, int]]) -> bool:
        """
        Record a directory as visited.

        Returns:
            False if the directory was already visited
        """
        try:
            st = dir_path.stat()
        except OSError:
            # Unstattable directories fail again in _list_directory and are reported there
            return True
        key = (st.st_dev, st.st_ino)
        if key in visited:
            return False
        visited.add(key)
        return True

    def _list_directory(self, dir_path: Path) -> Iterator[os.DirEntry]:
        """
        List a directory's entries sorted by name.

        The directory handle is closed before the entries are returned.
        """
        try:
            with os.scandir(dir_path) as it:
                entries = sorted(it, key=lambda e: e.name)
        except OSError as e:
            self._record_error(f"Cannot read directory {dir_path}: {e}")
            self._stats['directories_skipped'] += 1
            return iter(())

        self._stats['directories_traversed'] += 1
        return iter(entries)

    def _record_error(self, message: str) -> None:
        logger.warning(message)
        self._errors.append(message)
        self._stats['errors'] += 1

    def get_errors(self) -> List[str]:
        """Warnings reported during the walk, in order."""
        return list(self._errors)

    def get_stats(self) -> Dict[str, int]:
        """
        Get statistics about the walk.

        Returns:
            Dictionary containing operation statistics
        """
        return self._stats.copy()

