"""
render.py – turn a timer snapshot into one full-screen gauge frame
"""

from __future__ import annotations

from dataclasses import dataclass

from rich.color import Color, blend_rgb
from rich.color_triplet import ColorTriplet
from rich.style import Style
from rich.text import Text

from pomo.timer import Phase, TimerSnapshot

# ── palette ──────────────────────────────────────────────────────────────
RED = ColorTriplet(255, 0, 0)
GREEN = ColorTriplet(0, 255, 0)
LIGHT_BLUE = ColorTriplet(102, 178, 255)
LIGHT_GREEN = ColorTriplet(144, 238, 144)
GRAY = ColorTriplet(128, 128, 128)
WHITE = ColorTriplet(255, 255, 255)
BLACK = ColorTriplet(0, 0, 0)

START_HINT = "Press 's' to start, 'p' to pause, 'q' to quit"
FOOTER = "p pause | s start | q quit"


@dataclass(frozen=True)
class Theme:
    background: ColorTriplet
    text: ColorTriplet
    work_start: ColorTriplet = RED
    work_end: ColorTriplet = GREEN
    short_break: ColorTriplet = LIGHT_BLUE
    long_break: ColorTriplet = LIGHT_GREEN
    idle: ColorTriplet = GRAY


NORMAL = Theme(background=WHITE, text=BLACK)
DARK = Theme(background=BLACK, text=WHITE)


def theme_for(dark_mode: bool) -> Theme:
    return DARK if dark_mode else NORMAL


# ── pure helpers ─────────────────────────────────────────────────────────
def format_time(seconds_left: int) -> str:
    m, s = divmod(max(0, seconds_left), 60)
    return f"{m:02d}:{s:02d}"


def clamp(x: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, x))


def interpolate(start: ColorTriplet, end: ColorTriplet, ratio: float) -> ColorTriplet:
    """
    Colour for *ratio* of time remaining: 1.0 gives *start*, 0.0 gives *end*.
    Each channel moves linearly (and monotonically) between the two.
    """
    return blend_rgb(end, start, clamp(ratio, 0.0, 1.0))


def phase_color(snapshot: TimerSnapshot, theme: Theme) -> ColorTriplet:
    if not snapshot.started:
        return theme.idle
    if snapshot.phase is Phase.WORK:
        return interpolate(theme.work_start, theme.work_end, snapshot.ratio)
    if snapshot.phase is Phase.SHORT_BREAK:
        return theme.short_break
    return theme.long_break


def label_for(snapshot: TimerSnapshot) -> str:
    if not snapshot.started:
        return START_HINT

    clock = format_time(snapshot.remaining)
    if not snapshot.running:
        return f"PAUSED {clock}"

    total = snapshot.cycles_before_long_break
    if snapshot.phase is Phase.WORK:
        return f"{Phase.WORK.label}: {clock} - Cycle {snapshot.cycle_number}/{total}"
    if snapshot.phase is Phase.SHORT_BREAK:
        # the break belongs to the cycle that just finished
        return (
            f"{Phase.SHORT_BREAK.label}: {clock} - "
            f"Cycle {snapshot.completed_work_cycles}/{total}"
        )
    return f"{Phase.LONG_BREAK.label}: {clock}"


def _bar_row(width: int, filled: int, bar: Style, empty: Style, overlay: str = "") -> Text:
    row = Text(overlay[:width].center(width)) if overlay else Text(" " * width)
    row.stylize(bar, 0, filled)
    row.stylize(empty, filled, width)
    return row


# ── frame ────────────────────────────────────────────────────────────────
def render_frame(snapshot: TimerSnapshot, width: int, height: int, theme: Theme) -> Text:
    """Return a complete *width* × *height* (or smaller) frame for *snapshot*.

    The whole area is a gauge; the label sits on its middle row. A key hint
    footer is added when there is room for it, and dropped first when there
    is not.
    """
    if width <= 0 or height <= 0:
        return Text()

    color = Color.from_triplet(phase_color(snapshot, theme))
    background = Color.from_triplet(theme.background)
    foreground = Color.from_triplet(theme.text)

    bar = Style(color=foreground, bgcolor=color, bold=True)
    empty = Style(color=foreground, bgcolor=background, bold=True)

    progress = clamp(1.0 - snapshot.ratio, 0.0, 1.0)
    filled = int(width * progress)

    show_footer = height >= 3 and width >= len(FOOTER)
    bar_rows = height - 1 if show_footer else height
    label_row = bar_rows // 2
    label = label_for(snapshot)

    rows = [
        _bar_row(width, filled, bar, empty, label if i == label_row else "")
        for i in range(bar_rows)
    ]
    if show_footer:
        footer = Text(FOOTER.center(width))
        footer.stylize(Style(color=foreground, bgcolor=background, dim=True), 0, width)
        rows.append(footer)

    return Text("\n").join(rows)
