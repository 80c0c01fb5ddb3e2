from __future__ import annotations

import threading

from spaceapi_server.schemas.status import SpaceStatus
from spaceapi_server.services.clock import Clock, SystemClock, TimerHandle

# longest keep-open window; longer waits overflow the timer thread
MAX_KEEP_OPEN_SEC = 30 * 24 * 3600


class StatusGuard:
    """Owns the open/closed status of the space.

    Every read and write goes through one lock. Keep-open commands arm a
    one-shot timer tagged with the current epoch; any later command bumps the
    epoch, so a timer armed earlier finds a mismatch and does nothing.
    """

    def __init__(self, clock: Clock | None = None) -> None:
        self._clock = clock or SystemClock()
        self._lock = threading.Lock()
        self._state = SpaceStatus(last_change=self._clock.now())
        self._revert: TimerHandle | None = None

    def _cancel_revert(self) -> None:
        if self._revert is not None:
            self._revert.cancel()
            self._revert = None

    def _set(self, *, is_open: bool, opened_until: float | None, now: float) -> int:
        # caller holds the lock
        self._cancel_revert()
        if self._state.is_open != is_open:
            self._state.last_change = now
        self._state.is_open = is_open
        self._state.opened_until = opened_until
        self._state.epoch += 1
        return self._state.epoch

    def _read(self) -> SpaceStatus:
        closed_epoch = None
        with self._lock:
            now = self._clock.now()
            until = self._state.opened_until
            # deadline passed but the timer thread has not run yet
            if self._state.is_open and until is not None and now >= until:
                closed_epoch = self._set(is_open=False, opened_until=None, now=now)
            status = self._state.model_copy()
        if closed_epoch is not None:
            print(f"[SPACE][lazy_close] epoch={closed_epoch}", flush=True)
        return status

    def open(self) -> None:
        with self._lock:
            epoch = self._set(is_open=True, opened_until=None, now=self._clock.now())
        print(f"[SPACE][open] epoch={epoch}", flush=True)

    def close(self) -> None:
        with self._lock:
            epoch = self._set(is_open=False, opened_until=None, now=self._clock.now())
        print(f"[SPACE][close] epoch={epoch}", flush=True)

    def keep_open(self, duration: float) -> float:
        duration = float(max(min(duration, MAX_KEEP_OPEN_SEC), 0))
        with self._lock:
            now = self._clock.now()
            expiry = now + duration
            epoch = self._set(is_open=True, opened_until=expiry, now=now)
            self._revert = self._clock.call_later(duration, lambda: self._on_deadline(epoch))
        print(f"[SPACE][keep_open] duration={duration:.0f} until={expiry:.0f} epoch={epoch}", flush=True)
        return expiry

    def _on_deadline(self, epoch: int) -> None:
        with self._lock:
            if epoch != self._state.epoch or not self._state.is_open:
                stale = True
            else:
                stale = False
                self._revert = None
                self._set(is_open=False, opened_until=None, now=self._clock.now())
        if stale:
            print(f"[SPACE][stale_timer] epoch={epoch}", flush=True)
        else:
            print(f"[SPACE][auto_close] epoch={epoch}", flush=True)

    def is_open(self) -> bool:
        return self._read().is_open

    def expires_at(self) -> float | None:
        return self._read().opened_until

    def snapshot(self) -> SpaceStatus:
        return self._read()

    def shutdown(self) -> None:
        with self._lock:
            self._cancel_revert()
