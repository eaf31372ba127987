"""Application skeleton: init, per-frame update and render, quit."""

from __future__ import annotations

import abc
import logging
import time
from typing import Callable, Optional

logger = logging.getLogger(__name__)


class AppError(Exception):
    """Raised by an application when it cannot start or stop cleanly."""


class App(abc.ABC):
    """Base class for a windowed application driven by an event loop."""

    def __init__(
        self,
        width: int,
        height: int,
        major: int = 3,
        minor: int = 3,
        samples: int = 0,
        clock: Callable[[], float] = time.monotonic,
        finish: Optional[Callable[[], None]] = None,
    ) -> None:
        self.width = width
        self.height = height
        self.major = major
        self.minor = minor
        self.samples = samples
        self.sync = True
        self.time = 0.0
        self.delta = 0.0
        self._clock = clock
        self._finish = finish
        self._start = clock()
        self._last = self._start

    @abc.abstractmethod
    def init(self) -> None:
        """Create the application's resources; raise AppError on failure."""

    @abc.abstractmethod
    def quit(self) -> None:
        """Release the application's resources; raise AppError on failure."""

    def update(self, time: float, delta: float) -> bool:
        """Record the frame times (milliseconds). Return False to stop."""
        self.time = time
        self.delta = delta
        return True

    @abc.abstractmethod
    def render(self) -> bool:
        """Draw a frame. Return True to continue, False to close."""

    def _tick(self) -> tuple[float, float]:
        now = self._clock()
        elapsed = (now - self._start) * 1000.0
        delta = (now - self._last) * 1000.0
        self._last = now
        return elapsed, delta

    def prerender(self) -> bool:
        """Called before each frame; forwards the clock to update()."""
        elapsed, delta = self._tick()
        return self.update(elapsed, delta)

    def postrender(self) -> bool:
        """Called after each frame. Return False to stop."""
        return True

    def vsync_off(self) -> None:
        """Stop waiting for each frame to finish."""
        logger.info("sync + vsync  OFF...")
        self.sync = False

    def run(self, events: Callable[[], bool], present: Callable[[], None]) -> None:
        """Run init, the frame loop while ``events()`` is true, then quit."""
        self.init()
        while events():
            if not self.prerender():
                break
            if not self.render():
                break
            if not self.postrender():
                break
            present()
            if self.sync and self._finish is not None:
                self._finish()
        self.quit()