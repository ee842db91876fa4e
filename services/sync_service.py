# services/sync_service.py
"""Load-then-debounced-save pipeline for one user's document.

The load must settle before any save is allowed, and a slow load that
completes after the session moved on (logout, user switch) is dropped.
Saves collapse: every mutation replaces the pending timer, so only the last
snapshot inside the quiet period is written.
"""
import logging
import threading
from typing import Any, Callable, Optional

from core.config import save_debounce_seconds
from core.models import Bundle, coerce_bundle, empty_bundle, snapshot
from data_access.user_docs_repo import load_user_data, save_user_data

logger = logging.getLogger(__name__)

TimerFactory = Callable[..., Any]


class DebouncedSaver:
    """Cancellable pending-write token around a single timer."""

    def __init__(self, save_fn: Callable[[Bundle], None], delay: float,
                 timer_factory: TimerFactory = threading.Timer):
        self._save_fn = save_fn
        self._delay = delay
        self._timer_factory = timer_factory
        self._timer = None
        self._pending: Optional[Bundle] = None
        self._lock = threading.Lock()

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def schedule(self, payload: Bundle) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._pending = payload
            timer = self._timer_factory(self._delay, self._fire, args=(payload,))
            timer.daemon = True
            self._timer = timer
            timer.start()

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._pending = None

    def _fire(self, payload: Bundle) -> None:
        with self._lock:
            # a newer schedule() or cancel() already replaced this payload
            if self._pending is not payload:
                return
            self._timer = None
            self._pending = None
        self._write(payload)

    def _write(self, payload: Bundle) -> None:
        try:
            self._save_fn(payload)
        except Exception as e:
            # next mutation reschedules; nothing is shown to the user
            logger.warning("Background save failed: %s", e)


class SyncSession:
    def __init__(self, username: str,
                 loader: Callable[[str], Any] = load_user_data,
                 saver: Callable[[str, Bundle], None] = save_user_data,
                 delay: Optional[float] = None,
                 timer_factory: TimerFactory = threading.Timer):
        self.username = username
        self._loader = loader
        self._generation = 0
        self.loaded = False
        self.can_save = False
        self.closed = False
        self._saver = DebouncedSaver(
            lambda payload: saver(username, payload),
            save_debounce_seconds() if delay is None else delay,
            timer_factory,
        )

    @property
    def save_pending(self) -> bool:
        return self._saver.pending

    def begin_load(self) -> int:
        self._generation += 1
        self.loaded = False
        self.can_save = False
        self._saver.cancel()
        return self._generation

    def is_current(self, token: int) -> bool:
        return not self.closed and token == self._generation

    def finish_load(self, token: int, raw: Any) -> Optional[Bundle]:
        if not self.is_current(token):
            logger.debug("Dropping stale load for %s", self.username)
            return None
        self.loaded = True
        self.can_save = True
        return coerce_bundle(raw)

    def fail_load(self, token: int, error: Exception) -> Optional[Bundle]:
        if not self.is_current(token):
            return None
        logger.warning("Load failed for %s, starting empty: %s", self.username, error)
        self.loaded = True
        # never overwrite remote data we could not read
        self.can_save = False
        return empty_bundle()

    def load(self) -> Optional[Bundle]:
        token = self.begin_load()
        try:
            raw = self._loader(self.username)
        except Exception as e:
            return self.fail_load(token, e)
        return self.finish_load(token, raw)

    def notify_mutation(self, bundle: Bundle) -> bool:
        if self.closed or not self.loaded or not self.can_save:
            return False
        self._saver.schedule(snapshot(bundle))
        return True

    def close(self) -> None:
        self.closed = True
        self._generation += 1
        self._saver.cancel()
