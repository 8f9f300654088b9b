"""
progress.py

Console progress dots shown while a page is fetched and scored.

The indicator runs in a daemon thread that prints one dot per interval and
waits on a ``threading.Event``; :meth:`DotProgress.stop` sets the event and
joins the thread. It never touches the pipeline's data.
"""

from __future__ import annotations

import sys
import threading
from typing import Optional, TextIO


class DotProgress:
    """
    Print a dot every ``interval`` seconds until stopped.

    Usage
    -----
        with DotProgress("Please be patient while the website is being parsed"):
            result = analyze_url(url)
    """

    def __init__(
        self,
        message: str = "",
        interval: float = 0.25,
        stream: Optional[TextIO] = None,
        enabled: bool = True,
    ) -> None:
        if interval <= 0:
            raise ValueError("interval must be > 0")
        self.message = message
        self.interval = interval
        self.stream = stream or sys.stdout
        self.enabled = enabled
        self.dots_printed = 0
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> "DotProgress":
        if not self.enabled or self.running:
            return self
        if self.message:
            self._write(self.message)
        self._stop_event.clear()
        self._thread = threading.Thread(
            target=self._run, name="phrasedensity-progress", daemon=True
        )
        self._thread.start()
        return self

    def stop(self) -> None:
        """Signal the thread and wait for it to finish its current tick."""
        self._stop_event.set()
        if self._thread is not None:
            self._thread.join()
            self._thread = None

    def _run(self) -> None:
        # wait() returns True as soon as stop() sets the event
        while not self._stop_event.wait(self.interval):
            self._write(".")
            self.dots_printed += 1

    def _write(self, text: str) -> None:
        self.stream.write(text)
        self.stream.flush()

    def __enter__(self) -> "DotProgress":
        return self.start()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()
