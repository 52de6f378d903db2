"""Fixed-delay background loops on dedicated threads."""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RestartPolicy:
    """Restart a crashed loop after an exponentially growing delay."""

    max_restarts: int = 3
    backoff_ms: int = 100
    backoff_factor: float = 2.0
    max_backoff_ms: int = 10_000

    def __post_init__(self) -> None:
        if self.max_restarts < 0:
            raise ValueError("max_restarts must not be negative")
        if self.backoff_ms < 0 or self.max_backoff_ms < 0:
            raise ValueError("backoff must not be negative")
        if self.backoff_factor < 1:
            raise ValueError("backoff_factor must be at least 1")

    def delay_ms(self, attempt: int) -> int:
        """Delay before restart number ``attempt`` (zero based)."""
        delay = self.backoff_ms * (self.backoff_factor ** attempt)
        return int(min(delay, self.max_backoff_ms))


class PeriodicTask:
    """Runs ``action`` forever, waiting ``interval_ms`` after each run.

    The wait starts once the action returns, so the effective cadence is the
    interval plus the action's own duration. ``stop()`` interrupts the wait.
    """

    def __init__(
        self,
        name: str,
        action: Callable[[], object],
        interval_ms: int,
        *,
        run_immediately: bool = False,
        restart_policy: Optional[RestartPolicy] = None,
    ) -> None:
        if interval_ms <= 0:
            raise ValueError("interval_ms must be positive")
        self.name = name
        self.action = action
        self.interval_ms = interval_ms
        self.run_immediately = run_immediately
        self.restart_policy = restart_policy
        self.failure: Optional[BaseException] = None
        self.restarts = 0
        self._iterations = 0
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None

    @property
    def iterations(self) -> int:
        return self._iterations

    @property
    def is_running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self) -> None:
        if self._thread is not None:
            raise RuntimeError(f"Task {self.name!r} was already started.")
        self._thread = threading.Thread(target=self._run, name=self.name, daemon=True)
        self._thread.start()
        logger.info(
            "Started periodic task",
            extra={"task": self.name, "interval_ms": self.interval_ms},
        )

    def stop(self, timeout: Optional[float] = None) -> None:
        self._stop_event.set()
        if self._thread is not None and self._thread is not threading.current_thread():
            self._thread.join(timeout)

    def _wait(self, milliseconds: float) -> bool:
        """Sleep unless stopped; True means the task should exit."""
        return self._stop_event.wait(milliseconds / 1000)

    def _run(self) -> None:
        while True:
            try:
                self._loop()
                break
            except Exception as exc:
                self.failure = exc
                logger.exception("Periodic task crashed", extra={"task": self.name})
                policy = self.restart_policy
                if policy is None or self.restarts >= policy.max_restarts:
                    break
                delay = policy.delay_ms(self.restarts)
                self.restarts += 1
                logger.warning(
                    "Restarting periodic task",
                    extra={
                        "task": self.name,
                        "restart_attempt": self.restarts,
                        "backoff_ms": delay,
                    },
                )
                if self._wait(delay):
                    break
        logger.info("Periodic task stopped", extra={"task": self.name})

    def _loop(self) -> None:
        if not self.run_immediately and self._wait(self.interval_ms):
            return
        while not self._stop_event.is_set():
            self.action()
            self._iterations += 1
            if self._wait(self.interval_ms):
                return
