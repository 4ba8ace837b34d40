"""Render loop that redraws the image whenever the terminal is resized."""

from __future__ import annotations

import sys
import threading
from dataclasses import dataclass
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Callable, Iterable, TextIO

from imprev_renderer import (
    EXIT_HINT,
    FrameBuildError,
    SourceImage,
    TargetDimensions,
    TerminalGeometry,
    TerminalQueryError,
    build_frame,
    clear_screen,
    fit_to_terminal,
    write_frame,
)
from imprev_renderer.fit import DEFAULT_HEIGHT_SCALE

from .logging_setup import get_logger


class ControllerState(str, Enum):
    INITIALIZING = "Initializing"
    RENDERING = "Rendering"
    WAITING = "Waiting"


@dataclass
class RenderStatus:
    state: ControllerState = ControllerState.INITIALIZING
    passes_rendered: int = 0
    passes_skipped: int = 0
    geometry: TerminalGeometry | None = None
    target: TargetDimensions | None = None
    last_error: str | None = None


class ResizeController:
    def __init__(
        self,
        image: SourceImage,
        query_size: Callable[[], TerminalGeometry],
        out: TextIO | None = None,
        height_scale: float = DEFAULT_HEIGHT_SCALE,
        exit_hint: str | None = EXIT_HINT,
        clear_on_resize: bool = True,
    ) -> None:
        self.image = image
        self.query_size = query_size
        self.out = out or sys.stdout
        self.height_scale = height_scale
        self.exit_hint = exit_hint
        self.clear_on_resize = clear_on_resize

        self._status = RenderStatus()
        self._lock = threading.RLock()
        self._events: list[dict[str, Any]] = []
        self._listener: threading.Thread | None = None
        self._logger = get_logger()

    @property
    def status(self) -> RenderStatus:
        return self._status

    def recent_events(self, limit: int = 200) -> list[dict[str, Any]]:
        with self._lock:
            return self._events[-limit:]

    def _log_event(self, event: str, **fields: Any) -> None:
        row = {
            "ts_utc": datetime.now(timezone.utc).isoformat(),
            "event": event,
            "state": self._status.state.value,
        }
        row.update(fields)
        with self._lock:
            self._events.append(row)
            if len(self._events) > 1000:
                self._events = self._events[-1000:]

    def _skip(self, event: str, exc: Exception) -> bool:
        self._status.passes_skipped += 1
        self._status.last_error = str(exc)
        self._status.state = ControllerState.WAITING
        self._log_event(event, error=str(exc))
        self._logger.error("%s", exc, extra={"event": event})
        return False

    def render_pass(self) -> bool:
        """Query, fit, build, and draw one frame. Returns True if a frame was drawn.

        Failures are reported and leave the controller ready for the next pass.
        """
        with self._lock:
            self._status.state = ControllerState.RENDERING
            try:
                geometry = self.query_size()
            except TerminalQueryError as exc:
                return self._skip("render_skipped", exc)

            try:
                target = fit_to_terminal(geometry, self.image.size, self.height_scale)
                grid = build_frame(self.image, target)
            except (FrameBuildError, ValueError) as exc:
                return self._skip("render_failed", exc)

            try:
                write_frame(grid, self.out, exit_hint=self.exit_hint)
            except OSError as exc:
                return self._skip("render_failed", exc)

            self._status.passes_rendered += 1
            self._status.geometry = geometry
            self._status.target = target
            self._status.last_error = None
            self._status.state = ControllerState.WAITING
            self._log_event(
                "render_ok",
                columns=geometry.columns,
                rows=geometry.rows,
                width=target.width,
                height=target.height,
            )
            self._logger.debug(
                "rendered %dx%d into %dx%d terminal",
                target.width,
                target.height,
                geometry.columns,
                geometry.rows,
                extra={"event": "render_ok"},
            )
            return True

    def handle_resize(self) -> bool:
        with self._lock:
            self._log_event("resize")
            if self.clear_on_resize:
                clear_screen(self.out)
            return self.render_pass()

    def listen(self, notifications: Iterable[Any]) -> None:
        """Redraw once per notification until the stream ends.

        A live SIGWINCH stream never ends, so in production this runs for the
        life of the process.
        """
        self._status.state = ControllerState.WAITING
        for _event in notifications:
            self.handle_resize()

    def start(self, notifications: Iterable[Any]) -> threading.Thread:
        if self._listener is not None and self._listener.is_alive():
            return self._listener
        self._listener = threading.Thread(
            target=self.listen,
            args=(notifications,),
            name="imprev-resize-listener",
            daemon=True,
        )
        self._log_event("listener_started")
        self._listener.start()
        return self._listener

    def run_forever(self, notifications: Iterable[Any]) -> None:
        """Initial render on the calling thread, then redraw on every resize.

        Blocks until the listener finishes, which for a live notification
        stream means until the process is interrupted.
        """
        self.render_pass()
        listener = self.start(notifications)
        listener.join()
