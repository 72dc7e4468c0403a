"""
app.py – full-screen textual front end for the pomodoro timer
"""

from __future__ import annotations

import time
from typing import Callable

from rich.text import Text
from textual import events, log
from textual.app import App, ComposeResult
from textual.widgets import Static

from pomo.events import EventLoop, InputSource, KeyPress, Resize, run_loop
from pomo.render import theme_for
from pomo.timer import Configuration, PomodoroTimer


class PomodoroApp(App):
    """
    Owns the terminal for the lifetime of the timer.

    textual switches to raw mode and the alternate screen in run() and puts
    the terminal back however the app ends. Keys and resizes are forwarded to
    the InputSource; the event loop runs as a worker and draws into a single
    Static that fills the screen.
    """

    CSS = """
    Screen { layout: vertical; }
    #gauge { width: 1fr; height: 1fr; }
    """

    def __init__(
        self,
        config: Configuration,
        bell: bool = True,
        autostart: bool = False,
        clock: Callable[[], float] = time.monotonic,
    ):
        super().__init__()
        self.pomodoro = PomodoroTimer(config, running=autostart)
        self.input_source = InputSource(clock=clock)
        self.event_loop = EventLoop(
            self.pomodoro,
            theme_for(config.dark_mode),
            on_resume=self.input_source.reset_clock,
        )
        self._ring_bell = bell

    def compose(self) -> ComposeResult:
        yield Static(id="gauge")

    def on_mount(self) -> None:
        # the first frame must already fit the real screen
        self.event_loop.handle(Resize(self.size.width, self.size.height))
        self.run_worker(self._drive(), exclusive=True)

    async def _drive(self) -> None:
        code = await run_loop(self.input_source, self.event_loop, self._draw, self._phase_changed)
        log(f"quit with status {code}")
        self.exit(return_code=code)

    def _draw(self, frame: Text) -> None:
        self.query_one("#gauge", Static).update(frame)

    def _phase_changed(self) -> None:
        log(f"phase -> {self.pomodoro.phase.value}, cycles={self.pomodoro.completed_work_cycles}")
        if self._ring_bell:
            self.bell()

    # ── terminal events ──────────────────────────────────────────────────
    def on_key(self, event: events.Key) -> None:
        if event.character:
            self.input_source.push(KeyPress(event.character))

    def on_resize(self, event: events.Resize) -> None:
        log(f"resize {event.size.width}x{event.size.height}")
        self.input_source.push(Resize(event.size.width, event.size.height))
