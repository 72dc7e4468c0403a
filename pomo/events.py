"""
events.py – input events, tick synthesis and the dispatch loop
"""

from __future__ import annotations

import asyncio
import time
from dataclasses import dataclass
from enum import Enum
from typing import AsyncIterable, AsyncIterator, Callable, Optional, Union

from rich.text import Text

from pomo.render import Theme, render_frame
from pomo.timer import PomodoroTimer

TICK_INTERVAL = 1.0


@dataclass(frozen=True)
class KeyPress:
    char: str


@dataclass(frozen=True)
class Resize:
    width: int
    height: int


@dataclass(frozen=True)
class Tick:
    pass


Event = Union[KeyPress, Resize, Tick]


class Action(Enum):
    NONE = "none"
    REDRAW = "redraw"
    BELL = "bell"
    QUIT = "quit"


# ── input source ─────────────────────────────────────────────────────────
class TickClock:
    """
    Counts whole tick intervals of real (monotonic) time.

    Only whole intervals are consumed; the fractional remainder carries over
    to the next call, so a slow frame delays a tick but never loses one.
    """

    def __init__(self, interval: float = TICK_INTERVAL, clock: Callable[[], float] = time.monotonic):
        self.interval = interval
        self._clock = clock
        self._next = clock() + interval

    def due(self) -> int:
        now = self._clock()
        if now < self._next:
            return 0
        count = int((now - self._next) // self.interval) + 1
        self._next += count * self.interval
        return count

    def time_left(self) -> float:
        return max(0.0, self._next - self._clock())

    def reset(self) -> None:
        """Start a fresh interval from now, dropping any partial one."""
        self._next = self._clock() + self.interval


class InputSource:
    """
    Endless async stream of events.

    Keys and resizes are push()ed by the terminal as they happen and come out
    immediately; a Tick is produced for every interval that elapses while
    waiting.
    """

    def __init__(self, interval: float = TICK_INTERVAL, clock: Callable[[], float] = time.monotonic):
        self._queue: asyncio.Queue[Event] = asyncio.Queue()
        self.ticks = TickClock(interval, clock)

    def push(self, event: Event) -> None:
        self._queue.put_nowait(event)

    def reset_clock(self) -> None:
        self.ticks.reset()

    def __aiter__(self) -> AsyncIterator[Event]:
        return self._events()

    async def _events(self) -> AsyncIterator[Event]:
        while True:
            for _ in range(self.ticks.due()):
                yield Tick()
            try:
                event = await asyncio.wait_for(
                    self._queue.get(), timeout=self.ticks.time_left()
                )
            except asyncio.TimeoutError:
                continue
            yield event


# ── dispatch ─────────────────────────────────────────────────────────────
class EventLoop:
    """Applies one event at a time to the timer and says what to do next."""

    def __init__(
        self,
        timer: PomodoroTimer,
        theme: Theme,
        width: int = 80,
        height: int = 24,
        on_resume: Optional[Callable[[], None]] = None,
    ):
        self.timer = timer
        self.theme = theme
        self.width = width
        self.height = height
        self.on_resume = on_resume

    def handle(self, event: Event) -> Action:
        if isinstance(event, Tick):
            if not self.timer.running:
                return Action.NONE
            return Action.BELL if self.timer.tick() else Action.REDRAW

        if isinstance(event, Resize):
            self.width, self.height = event.width, event.height
            return Action.REDRAW

        if isinstance(event, KeyPress):
            if event.char == "q":
                return Action.QUIT
            if event.char in ("p", "s"):
                was_running = self.timer.running
                if event.char == "p":
                    self.timer.toggle_pause()
                else:
                    self.timer.resume()
                # paused time must not count towards the next tick
                if self.timer.running and not was_running and self.on_resume:
                    self.on_resume()
                return Action.REDRAW

        return Action.NONE

    def frame(self) -> Text:
        return render_frame(self.timer.snapshot(), self.width, self.height, self.theme)


async def run_loop(
    source: AsyncIterable[Event],
    loop: EventLoop,
    draw: Callable[[Text], None],
    bell: Optional[Callable[[], None]] = None,
) -> int:
    """Pull events in arrival order until quit; return the exit status."""
    draw(loop.frame())
    async for event in source:
        action = loop.handle(event)
        if action is Action.QUIT:
            return 0
        if action is Action.BELL and bell is not None:
            bell()
        if action is not Action.NONE:
            draw(loop.frame())
    return 0
