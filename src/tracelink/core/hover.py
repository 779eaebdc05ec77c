"""
Debounced hover state for a single vertex.

Pointer leave is not reported immediately: the un-hover is deferred by
HOVER_DEBOUNCE_SECONDS and cancelled if the pointer comes back first, so
moving across a vertex's own children does not make the highlight flicker.

States:
    IDLE             hovered=False, no timer
    HOVERED          hovered=True,  no timer
    PENDING_UNHOVER  hovered=True,  timer armed

Only IDLE -> HOVERED and PENDING_UNHOVER -> IDLE are reported to the
notifier, so it never sees the same value twice in a row. Teardown while
hovered reports a final un-hover.
"""

import itertools
import logging
import threading
from enum import StrEnum
from typing import Any, Callable, Dict, Optional, Protocol, Tuple

from ..config import HOVER_DEBOUNCE_SECONDS
from .types import ViewModifier

logger = logging.getLogger(__name__)

SetViewModifier = Callable[[str, ViewModifier, bool], Any]


class HoverPhase(StrEnum):
    IDLE = "idle"
    HOVERED = "hovered"
    PENDING_UNHOVER = "pending_unhover"


class Scheduler(Protocol):
    """Schedules single-shot callbacks."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> Any:
        ...

    def cancel(self, handle: Any) -> None:
        ...


class ThreadingScheduler:
    """Runs callbacks on daemon ``threading.Timer`` threads."""

    def call_later(self, delay: float, callback: Callable[[], None]) -> threading.Timer:
        timer = threading.Timer(delay, callback)
        timer.daemon = True
        timer.start()
        return timer

    def cancel(self, handle: threading.Timer) -> None:
        handle.cancel()


class ManualScheduler:
    """
    Virtual clock scheduler.

    Nothing fires until ``advance()`` or ``run_all()`` is called, which makes
    debounce timing deterministic in tests and lets an embedding event loop
    drive timers itself.
    """

    def __init__(self):
        self.now = 0.0
        self._ids = itertools.count(1)
        self._timers: Dict[int, Tuple[float, Callable[[], None]]] = {}

    @property
    def pending_count(self) -> int:
        return len(self._timers)

    def call_later(self, delay: float, callback: Callable[[], None]) -> int:
        handle = next(self._ids)
        self._timers[handle] = (self.now + delay, callback)
        return handle

    def cancel(self, handle: int) -> None:
        self._timers.pop(handle, None)

    def advance(self, seconds: float) -> None:
        """Move the clock forward, firing due timers in order."""
        target = self.now + seconds
        while True:
            due = [(when, handle) for handle, (when, _) in self._timers.items() if when <= target]
            if not due:
                break
            when, handle = min(due)
            _, callback = self._timers.pop(handle)
            self.now = when
            callback()
        self.now = target

    def run_all(self) -> None:
        """Fire every pending timer, including ones armed while firing."""
        while self._timers:
            when = min(when for when, _ in self._timers.values())
            self.advance(max(0.0, when - self.now))


class HoverStateMachine:
    """
    Hovered flag of one vertex with a debounced un-hover.

    Args:
        vertex_key: Key passed to the notifier.
        set_view_modifier: Notifier called as
            ``(vertex_key, ViewModifier.HOVERED, hovered)``.
        scheduler: Timer source; a ThreadingScheduler by default.
        delay: Seconds between pointer leave and the un-hover.
    """

    def __init__(
        self,
        vertex_key: str,
        set_view_modifier: SetViewModifier,
        scheduler: Optional[Scheduler] = None,
        delay: float = HOVER_DEBOUNCE_SECONDS,
    ):
        self.vertex_key = vertex_key
        self._set_view_modifier = set_view_modifier
        self._scheduler = scheduler or ThreadingScheduler()
        self._delay = delay

        self._phase = HoverPhase.IDLE
        self._timer: Any = None
        # Bumped whenever a timer is armed or cancelled; stale callbacks compare against it
        self._generation = 0
        self._torn_down = False
        self._lock = threading.RLock()
        self._logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @property
    def phase(self) -> HoverPhase:
        return self._phase

    @property
    def hovered(self) -> bool:
        return self._phase is not HoverPhase.IDLE

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def enter(self) -> None:
        """Pointer entered the vertex."""
        with self._lock:
            if self._torn_down:
                return
            if self._phase is HoverPhase.IDLE:
                self._transition(HoverPhase.HOVERED)
                self._notify(True)
            elif self._phase is HoverPhase.PENDING_UNHOVER:
                self._cancel_timer()
                self._transition(HoverPhase.HOVERED)

    def leave(self) -> None:
        """Pointer left the vertex; un-hover after the debounce delay."""
        with self._lock:
            if self._torn_down or self._phase is HoverPhase.IDLE:
                return
            self._cancel_timer()
            generation = self._generation
            self._timer = self._scheduler.call_later(self._delay, lambda: self._on_timeout(generation))
            self._transition(HoverPhase.PENDING_UNHOVER)

    def teardown(self) -> None:
        """Release the timer and report a final un-hover if still hovered."""
        with self._lock:
            if self._torn_down:
                return
            self._torn_down = True
            self._cancel_timer()
            if self.hovered:
                self._transition(HoverPhase.IDLE)
                self._notify(False)

    def _on_timeout(self, generation: int) -> None:
        with self._lock:
            if self._torn_down or generation != self._generation:
                return
            if self._phase is not HoverPhase.PENDING_UNHOVER:
                return
            self._timer = None
            self._generation += 1
            self._transition(HoverPhase.IDLE)
            self._notify(False)

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._scheduler.cancel(self._timer)
            self._timer = None
        self._generation += 1

    def _transition(self, phase: HoverPhase) -> None:
        self._logger.debug(f"{self.vertex_key}: {self._phase} -> {phase}")
        self._phase = phase

    def _notify(self, hovered: bool) -> None:
        self._set_view_modifier(self.vertex_key, ViewModifier.HOVERED, hovered)
