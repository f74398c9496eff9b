"""A shared, thread-safe log written to an append-only text file."""

from __future__ import annotations

import sys
import threading
import time
from typing import Callable, ClassVar, Optional, TextIO

DEFAULT_LOG_PATH = "system.log"


class Logger:
    """Appends timestamped messages to a log file."""

    _instance: ClassVar[Optional["Logger"]] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self, path: str = DEFAULT_LOG_PATH, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self._file: Optional[TextIO]
        try:
            self._file = open(path, "a", encoding="utf-8")
        except OSError:
            print("Error: Unable to open log file.", file=sys.stderr)
            self._file = None

    @classmethod
    def instance(cls) -> "Logger":
        """The shared logger, created on first use."""
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    cls._instance = cls()
        return cls._instance

    def log(self, message: str) -> None:
        with self._lock:
            if self._file is None:
                return
            stamp = time.ctime(self._clock())
            self._file.write(f"[{stamp}\n] {message}\n")
            self._file.flush()

    def close(self) -> None:
        with self._lock:
            if self._file is not None:
                self._file.close()
                self._file = None
            if Logger._instance is self:
                Logger._instance = None

    def __enter__(self) -> "Logger":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()