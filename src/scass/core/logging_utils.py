"""
Lifecycle logging for long-running scass operations.

Events are emitted as structlog key/value pairs: the event name is
"<operation> started|completed|failed" and the context travels as fields,
so JSON output stays machine-readable.
"""

import time
from typing import Optional


class LogContext:
    """
    Context manager logging the start, completion or failure of an operation.

    Usage:
        with LogContext(logger, "search run", root="src"):
            ...

        # event="search run started"   root=src
        # event="search run completed" root=src elapsed_ms=12.3
        # or, when the block raises:
        # event="search run failed"    root=src elapsed_ms=4.1 error=... error_type=...

    Exceptions are never swallowed. A ``None`` logger disables logging.
    """

    def __init__(
        self,
        logger: Optional[object],
        operation: str,
        log_start: bool = True,
        log_end: bool = True,
        **fields
    ):
        self.logger = logger
        self.operation = operation
        self.log_start = log_start
        self.log_end = log_end
        self.fields = fields
        self._started = 0.0

    def _elapsed_ms(self) -> float:
        return round((time.perf_counter() - self._started) * 1000, 1)

    def __enter__(self):
        self._started = time.perf_counter()
        if self.logger is not None and self.log_start:
            self.logger.info(f"{self.operation} started", **self.fields)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        if self.logger is None:
            return False
        if exc_type is not None:
            self.logger.error(
                f"{self.operation} failed",
                error=str(exc_val),
                error_type=exc_type.__name__,
                elapsed_ms=self._elapsed_ms(),
                **self.fields,
            )
            return False
        if self.log_end:
            self.logger.info(f"{self.operation} completed", elapsed_ms=self._elapsed_ms(), **self.fields)
        return False
