"""Terminal size queries and SIGWINCH-driven resize notifications."""

from __future__ import annotations

import os
import queue
import signal
import sys
import time
from dataclasses import dataclass
from typing import Iterator

from imprev_renderer.errors import TerminalQueryError
from imprev_renderer.models import TerminalGeometry


def query_terminal_size(fd: int | None = None) -> TerminalGeometry:
    """Current (columns, rows) of the terminal behind ``fd`` (stdout by default).

    COLUMNS and LINES are not consulted.
    """
    try:
        if fd is None:
            fd = sys.stdout.fileno()
        size = os.get_terminal_size(fd)
    except (OSError, ValueError) as exc:
        raise TerminalQueryError(f"Unable to determine terminal size: {exc}") from exc
    if size.columns <= 0 or size.lines <= 0:
        raise TerminalQueryError(f"Unable to determine terminal size: got {size.columns}x{size.lines}")
    return TerminalGeometry(columns=size.columns, rows=size.lines)


@dataclass(frozen=True)
class ResizeEvent:
    signum: int
    received_at: float
    coalesced: int = 0


class ResizeNotifier:
    """Blocking stream of terminal geometry change notifications.

    The signal handler runs on the main thread and only enqueues; consumers
    iterate on any thread and block in ``Queue.get`` between events.
    """

    def __init__(self) -> None:
        self._queue: queue.Queue[ResizeEvent] = queue.Queue()
        self._previous_handler = None
        self._installed = False

    @staticmethod
    def supported() -> bool:
        return hasattr(signal, "SIGWINCH")

    @property
    def installed(self) -> bool:
        return self._installed

    def install(self) -> bool:
        """Subscribe to SIGWINCH. Must be called from the main thread."""
        if self._installed:
            return True
        if not self.supported():
            return False
        self._previous_handler = signal.signal(signal.SIGWINCH, self._handle)
        self._installed = True
        return True

    def uninstall(self) -> None:
        if not self._installed:
            return
        signal.signal(signal.SIGWINCH, self._previous_handler or signal.SIG_DFL)
        self._previous_handler = None
        self._installed = False

    def _handle(self, signum: int, _frame) -> None:
        self.notify(signum)

    def notify(self, signum: int = 0) -> None:
        self._queue.put_nowait(ResizeEvent(signum=signum, received_at=time.monotonic()))

    def pending(self) -> int:
        return self._queue.qsize()

    def _drain(self) -> int:
        drained = 0
        while True:
            try:
                self._queue.get_nowait()
            except queue.Empty:
                return drained
            drained += 1

    def __iter__(self) -> Iterator[ResizeEvent]:
        while True:
            event = self._queue.get()
            # A burst of resizes only needs the final geometry.
            coalesced = self._drain()
            yield ResizeEvent(signum=event.signum, received_at=event.received_at, coalesced=coalesced)
