import concurrent.futures
import os
import threading
from typing import Iterable, Optional, Sequence

from scass.core.channel import ResultChannel
from scass.core.constants import RESULT_CHANNEL_CAPACITY
from scass.core.models import Match
from scass.core.patterns import Pattern
from scass.core.search.scanner import FileScanner
from scass.core.search.walker import FileWalker
from scass.core.utils.logging import get_logger


def _default_max_workers() -> int:
    return max(1, int(os.cpu_count() or 1))


class ScanStatus:
    """Counters shared between the supervisor and the worker callbacks."""

    def __init__(self):
        self._lock = threading.Lock()
        self.files_queued = 0
        self.files_scanned = 0
        self.files_failed = 0
        self.matches = 0

    def record_queued(self) -> None:
        with self._lock:
            self.files_queued += 1

    def record_done(self, matches: int) -> None:
        with self._lock:
            self.files_scanned += 1
            self.matches += matches

    def record_failed(self) -> None:
        with self._lock:
            self.files_failed += 1

    def to_meta(self) -> dict:
        with self._lock:
            return {
                "files_queued": self.files_queued,
                "files_scanned": self.files_scanned,
                "files_failed": self.files_failed,
                "matches": self.matches,
            }


class ScanCoordinator:
    """
    Fans file scans out over a fixed worker pool and fans their matches in to a
    single bounded ResultChannel.

    run() returns the channel immediately; a supervisor thread closes it once
    every scan has finished, which is the consumer's only end-of-stream signal.
    """

    def __init__(
            self,
            capacity: int = RESULT_CHANNEL_CAPACITY,
            max_workers: Optional[int] = None,
            logger=None):
        self.capacity = capacity
        self.max_workers = max_workers or _default_max_workers()
        self.logger = logger or get_logger("scass.coordinator")
        self.status = ScanStatus()
        self.error: Optional[BaseException] = None
        self._thread: Optional[threading.Thread] = None

    def run(
            self,
            root: str,
            file_types: Optional[Iterable[str]],
            patterns: Sequence[Pattern],
            context_lines: int = 0,
            exclude_paths: Optional[Iterable[str]] = None) -> ResultChannel[Match]:
        if self._thread is not None:
            raise RuntimeError("ScanCoordinator.run() may only be called once")
        walker = FileWalker(file_types, exclude=exclude_paths, logger=self.logger)
        # Root failures are fatal and must surface before any worker starts.
        walker.check_root(root)
        scanner = FileScanner(patterns, context_lines, logger=self.logger)
        channel: ResultChannel[Match] = ResultChannel(self.capacity)
        self._thread = threading.Thread(
            target=self._supervise,
            args=(root, walker, scanner, channel),
            name="scass-supervisor",
            daemon=True,
        )
        self._thread.start()
        return channel

    def join(self, timeout: Optional[float] = None) -> dict:
        """Wait for the supervisor; re-raise its failure, else return the scan summary."""
        if self._thread is not None:
            self._thread.join(timeout=timeout)
        if self.error is not None:
            raise self.error
        return self.status.to_meta()

    def _supervise(
            self,
            root: str,
            walker: FileWalker,
            scanner: FileScanner,
            channel: ResultChannel[Match]) -> None:
        try:
            # Leaving the executor block waits for every submitted scan.
            with concurrent.futures.ThreadPoolExecutor(
                    max_workers=self.max_workers,
                    thread_name_prefix="scass-scan") as executor:
                for path in walker.iter_files(root):
                    if channel.aborted:
                        break
                    self.status.record_queued()
                    future = executor.submit(scanner.scan, path, channel.put)
                    future.add_done_callback(
                        lambda f, p=path: self._on_scan_done(p, f))
        except BaseException as e:
            self.error = e
            self.logger.error("scan supervisor failed", root=root, error=str(e))
        finally:
            channel.close()

    def _on_scan_done(self, path: str, future: concurrent.futures.Future) -> None:
        exc = future.exception()
        if exc is not None:
            self.status.record_failed()
            self.logger.error("scan task failed", path=path, error=str(exc))
            return
        self.status.record_done(future.result())
