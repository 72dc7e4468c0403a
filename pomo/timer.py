"""
timer.py – the pomodoro state machine (no terminal, no clock)
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Phase(str, Enum):
    WORK = "work"
    SHORT_BREAK = "short_break"
    LONG_BREAK = "long_break"

    @property
    def label(self) -> str:
        return _LABELS[self]


_LABELS = {
    Phase.WORK: "Work",
    Phase.SHORT_BREAK: "Short break",
    Phase.LONG_BREAK: "Long break",
}


@dataclass(frozen=True)
class Configuration:
    """Validated settings; durations are in minutes."""

    work_minutes: int = 25
    short_break_minutes: int = 5
    long_break_minutes: int = 20
    cycles_before_long_break: int = 4
    dark_mode: bool = False

    def duration(self, phase: Phase) -> int:
        """Return the length of *phase* in seconds."""
        if phase is Phase.WORK:
            return self.work_minutes * 60
        if phase is Phase.SHORT_BREAK:
            return self.short_break_minutes * 60
        return self.long_break_minutes * 60


@dataclass(frozen=True)
class TimerSnapshot:
    phase: Phase
    remaining: int
    duration: int
    running: bool
    started: bool
    completed_work_cycles: int
    cycles_before_long_break: int

    @property
    def ratio(self) -> float:
        return self.remaining / self.duration if self.duration else 0.0

    @property
    def cycle_number(self) -> int:
        return self.completed_work_cycles + 1


class PomodoroTimer:
    """
    Work / short break / long break cycle counted down in one-second ticks.
    The owner calls tick() once per elapsed second.
    """

    def __init__(self, config: Configuration, running: bool = False):
        self.config = config
        self.phase = Phase.WORK
        self.remaining = config.duration(Phase.WORK)
        self.running = running
        self.started = running
        self.completed_work_cycles = 0

    @property
    def duration(self) -> int:
        return self.config.duration(self.phase)

    def snapshot(self) -> TimerSnapshot:
        return TimerSnapshot(
            phase=self.phase,
            remaining=self.remaining,
            duration=self.duration,
            running=self.running,
            started=self.started,
            completed_work_cycles=self.completed_work_cycles,
            cycles_before_long_break=self.config.cycles_before_long_break,
        )

    # ── controls ─────────────────────────────────────────────────────────
    def restart(self) -> None:
        """Resume counting; the current phase and remaining time are kept."""
        self.running = True
        self.started = True

    def pause(self) -> None:
        self.running = False

    def resume(self) -> None:
        """Same as restart(); bound to the start key."""
        self.restart()

    def toggle_pause(self) -> None:
        if self.running:
            self.pause()
        else:
            self.restart()

    # ── clock ────────────────────────────────────────────────────────────
    def tick(self) -> bool:
        """
        Count one second down.

        Returns True if this tick finished the phase and a new one began.
        """
        if not self.running:
            return False

        if self.remaining > 0:
            self.remaining -= 1

        if self.remaining > 0:
            return False

        self._advance_phase()
        return True

    def _advance_phase(self) -> None:
        if self.phase is Phase.WORK:
            if self.completed_work_cycles + 1 < self.config.cycles_before_long_break:
                self.completed_work_cycles += 1
                self.phase = Phase.SHORT_BREAK
            else:
                self.completed_work_cycles = 0
                self.phase = Phase.LONG_BREAK
        else:
            self.phase = Phase.WORK
        self.remaining = self.duration
