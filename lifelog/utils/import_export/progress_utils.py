"""
Progress reporting and cooperative scheduling for long-running imports.
"""
import threading
import time
from typing import Callable, Optional

from lifelog.core.config import settings
from lifelog.core.exceptions import ImportCancelledError

ProgressCallback = Callable[[int, int], None]


def create_throttled_progress_callback(
    callback: ProgressCallback,
    min_interval_seconds: Optional[float] = None,
) -> ProgressCallback:
    """
    Wrap a progress callback so it fires at most once per interval.

    The first update and the final update (processed >= total) are always
    forwarded.
    """
    interval = (
        settings.progress_throttle_seconds
        if min_interval_seconds is None
        else min_interval_seconds
    )
    last_sent: Optional[float] = None

    def throttled(processed: int, total: int) -> None:
        nonlocal last_sent
        now = time.monotonic()
        is_final = total > 0 and processed >= total
        if last_sent is None or is_final or now - last_sent >= interval:
            last_sent = now
            callback(processed, total)

    return throttled


class ImportCheckpoint:
    """
    Periodic yield point inside the row loop.

    Every ``every`` rows the checkpoint checks for cancellation and sleeps
    briefly so a host event loop or UI thread gets scheduling turns. No I/O
    happens while parked.
    """

    def __init__(
        self,
        every: Optional[int] = None,
        sleep_seconds: Optional[float] = None,
        cancel_event: Optional[threading.Event] = None,
        on_yield: Optional[Callable[[], None]] = None,
    ):
        self.every = every or settings.import_yield_every
        self.sleep_seconds = (
            settings.import_yield_sleep_seconds if sleep_seconds is None else sleep_seconds
        )
        self.cancel_event = cancel_event
        self.on_yield = on_yield
        self.yields = 0

    @property
    def cancelled(self) -> bool:
        return self.cancel_event is not None and self.cancel_event.is_set()

    def raise_if_cancelled(self) -> None:
        if self.cancelled:
            raise ImportCancelledError()

    def tick(self, processed: int) -> None:
        """Called after each row; yields when ``processed`` hits the batch boundary."""
        if processed > 0 and processed % self.every == 0:
            self.checkpoint()

    def checkpoint(self) -> None:
        self.raise_if_cancelled()
        time.sleep(self.sleep_seconds)
        self.yields += 1
        if self.on_yield:
            self.on_yield()
        self.raise_if_cancelled()
