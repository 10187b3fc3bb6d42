"""Cancellable repeating timers driven by pygame's event queue."""

import itertools

import pygame


class RepeatingTimer:
    """Posts a tick event every period_ms and calls callback when that event is dispatched."""

    def __init__(self, event_type, timer_id, period_ms, callback):
        self.event_type = event_type
        self.timer_id = timer_id
        self.period_ms = period_ms
        self.callback = callback
        self.active = False

    def start(self):
        self.active = True
        pygame.time.set_timer(pygame.event.Event(self.event_type, timer_id=self.timer_id), self.period_ms)

    def cancel(self):
        """Stop the timer, including any tick already waiting in the queue."""
        if not self.active:
            return
        self.active = False
        pygame.time.set_timer(self.event_type, 0)
        pygame.event.clear(self.event_type)

    def owns(self, event):
        return event.type == self.event_type and getattr(event, "timer_id", None) == self.timer_id

    def fire(self):
        if self.active:
            self.callback()


class TimerPool:
    """Hands out timers, each on its own user event type, and routes tick events to them."""

    def __init__(self, first_event_type=pygame.USEREVENT + 1):
        self._next_event_type = first_event_type
        self._ids = itertools.count(1)
        self._timers = {}

    def schedule(self, period_ms, callback):
        """Start a repeating timer and return it; call cancel() on it to stop."""
        # A dead timer's event type is free again; stale ticks carry the old timer_id.
        event_type = next(
            (t.event_type for t in self._timers.values() if not t.active),
            None,
        )
        if event_type is None:
            event_type = self._next_event_type
            self._next_event_type += 1
        timer = RepeatingTimer(event_type, next(self._ids), period_ms, callback)
        self._timers[event_type] = timer
        timer.start()
        return timer

    def dispatch(self, event):
        """Fire the timer owning event. Returns True if the event was a timer tick."""
        timer = self._timers.get(event.type)
        if timer is None:
            return False
        if timer.owns(event):
            timer.fire()
        return True
