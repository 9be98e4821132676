import os
from typing import Iterable, Iterator, List, Optional

from scass.core.errors import RootAccessError
from scass.core.utils.logging import get_logger
from scass.core.utils.path import PathUtils


class FileWalker:
    """
    Enumerates regular files below a root directory.

    Directories are traversed, never yielded. Symlinks to regular files are
    yielded; symlinked directories are not descended into. A root that is a
    regular file is walked as that single file. An unreadable root raises
    RootAccessError; unreadable entries below it are logged and skipped.
    Paths listed in ``exclude`` (e.g. the report being written) are never yielded.
    """

    def __init__(
            self,
            file_types: Optional[Iterable[str]] = None,
            exclude: Optional[Iterable[str]] = None,
            logger=None):
        self.logger = logger or get_logger("scass.walker")
        # Exact, case-sensitive extension match; an empty list admits everything.
        self.include_ext = set(file_types or ())
        self.include_all = not self.include_ext
        self.exclude = [p for p in (exclude or ()) if p]
        self._exclude_names = {os.path.basename(p) for p in self.exclude}

    def accepts(self, path: str) -> bool:
        if self._is_excluded(path):
            return False
        if self.include_all:
            return True
        return PathUtils.extension(path) in self.include_ext

    def _is_excluded(self, path: str) -> bool:
        # Name check first: realpath costs syscalls.
        if os.path.basename(path) not in self._exclude_names:
            return False
        return any(PathUtils.same_file(path, p) for p in self.exclude)

    def check_root(self, root: str) -> None:
        if os.path.isfile(root):
            return
        try:
            with os.scandir(root):
                pass
        except OSError as e:
            raise RootAccessError(root, e) from e

    def iter_files(self, root: str) -> Iterator[str]:
        if os.path.isfile(root):
            if self.accepts(root):
                yield root
            return

        # Explicit stack: directory depth is not bounded by the recursion limit.
        pending: List[str] = [root]
        while pending:
            current_dir = pending.pop()
            try:
                with os.scandir(current_dir) as it:
                    entries = sorted(it, key=lambda e: e.name)
            except OSError as e:
                if current_dir == root:
                    raise RootAccessError(root, e) from e
                self.logger.warning("path access failed", path=current_dir, error=str(e))
                continue

            subdirs = []
            for entry in entries:
                try:
                    if entry.is_dir(follow_symlinks=False):
                        subdirs.append(entry.path)
                    elif entry.is_file(follow_symlinks=True) and self.accepts(entry.path):
                        yield entry.path
                except OSError as e:
                    self.logger.warning("path access failed", path=entry.path, error=str(e))
            # Reverse so the stack pops subdirectories in name order.
            pending.extend(reversed(subdirs))
