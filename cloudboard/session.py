"""Telemetry session: owns the simulator lifecycle for one dashboard view.

A background thread waits on a stop event for one tick interval at a time and
applies a random-walk step to the current sample. Every mutation happens under
the session lock and re-checks the run's stop event, so once ``stop()`` has
returned no further tick (or listener callback) can land.

Samples are immutable; each tick publishes a new one, so ``snapshot()`` never
observes a half-updated value.
"""

import logging
import math
import random
import threading
from typing import Callable, List, Optional

from cloudboard.insights import generate
from cloudboard.models import (
    DEFAULT_TICK_INTERVAL_MS,
    SEED_SAMPLE,
    MetricSample,
    SessionSnapshot,
)
from cloudboard.simulator import tick

logger = logging.getLogger(__name__)

_JOIN_TIMEOUT_SECONDS = 5.0

TickListener = Callable[[MetricSample], None]


class SessionConfigError(Exception):
    """Raised when a session is misconfigured."""


class TelemetrySession:
    """Idle/Running lifecycle around the metrics simulator.

    ``start()`` while running is a no-op; ``stop()`` while idle is a no-op.
    After ``stop()`` the last sample and insight list stay readable until
    the next ``start()`` resets them to the seed values.
    """

    def __init__(
        self,
        interval_ms: float = DEFAULT_TICK_INTERVAL_MS,
        rng=None,
        seed_sample: MetricSample = SEED_SAMPLE,
    ):
        if (
            isinstance(interval_ms, bool)
            or not isinstance(interval_ms, (int, float))
            or not math.isfinite(interval_ms)
            or interval_ms <= 0
        ):
            raise SessionConfigError(
                f"tick interval must be a positive finite number of milliseconds, got {interval_ms!r}"
            )
        self._interval = interval_ms / 1000.0
        self._rng = rng if rng is not None else random.Random()
        self._seed_sample = seed_sample

        self._lock = threading.RLock()
        self._stop_event = threading.Event()
        self._stop_event.set()
        self._thread: Optional[threading.Thread] = None
        self._listeners: List[TickListener] = []

        self._sample = seed_sample
        self._insights = ()
        self._ticks = 0

    @property
    def running(self) -> bool:
        with self._lock:
            return not self._stop_event.is_set()

    def start(self) -> None:
        """Reset to the seed sample, load insights, and begin ticking."""
        with self._lock:
            if not self._stop_event.is_set():
                logger.debug("[SESSION] start() ignored, already running")
                return
            self._check_rng()

            self._sample = self._seed_sample
            self._insights = tuple(generate())
            self._ticks = 0

            # Each run gets its own event so a lingering thread from a
            # previous run can never resume.
            stop_event = threading.Event()
            self._stop_event = stop_event
            self._thread = threading.Thread(
                target=self._tick_loop,
                args=(stop_event,),
                daemon=True,
                name="telemetry-session",
            )
            self._thread.start()
        logger.info(
            "[SESSION] Started interval=%.3fs insights=%d",
            self._interval, len(self._insights),
        )

    def stop(self) -> None:
        """Cancel ticking. No tick is applied after this returns."""
        with self._lock:
            if self._stop_event.is_set():
                logger.debug("[SESSION] stop() ignored, not running")
                return
            self._stop_event.set()
            thread, self._thread = self._thread, None
            ticks = self._ticks

        if thread is not None and thread is not threading.current_thread():
            thread.join(timeout=_JOIN_TIMEOUT_SECONDS)
        logger.info("[SESSION] Stopped after %d tick(s)", ticks)

    def advance(self) -> bool:
        """Apply one tick now. Returns False (and does nothing) when idle."""
        with self._lock:
            return self._apply_tick(self._stop_event)

    def snapshot(self) -> SessionSnapshot:
        with self._lock:
            return SessionSnapshot(
                metrics=self._sample,
                insights=self._insights,
                running=not self._stop_event.is_set(),
                ticks=self._ticks,
            )

    def subscribe(self, listener: TickListener) -> None:
        """Register a callback that receives each new sample."""
        with self._lock:
            if listener not in self._listeners:
                self._listeners.append(listener)

    def unsubscribe(self, listener: TickListener) -> None:
        with self._lock:
            if listener in self._listeners:
                self._listeners.remove(listener)

    # -- internal helpers -----------------------------------------------------

    def _check_rng(self) -> None:
        missing = [
            name for name in ("uniform", "randint")
            if not callable(getattr(self._rng, name, None))
        ]
        if missing:
            raise SessionConfigError(
                f"randomness source {self._rng!r} is missing: {', '.join(missing)}"
            )

    def _tick_loop(self, stop_event: threading.Event) -> None:
        while not stop_event.wait(self._interval):
            with self._lock:
                self._apply_tick(stop_event)

    def _apply_tick(self, stop_event: threading.Event) -> bool:
        # Caller holds self._lock.
        if stop_event.is_set():
            return False

        self._sample = tick(self._sample, self._rng)
        self._ticks += 1
        logger.debug("[SESSION] Tick %d %s", self._ticks, self._sample)

        for listener in list(self._listeners):
            if stop_event.is_set():
                break
            try:
                listener(self._sample)
            except Exception:
                logger.exception("[SESSION] Tick listener %r failed", listener)
        return True
