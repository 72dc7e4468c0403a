from rich.cells import cell_len

from pomo.render import (
    DARK,
    FOOTER,
    GREEN,
    NORMAL,
    RED,
    START_HINT,
    format_time,
    interpolate,
    label_for,
    phase_color,
    render_frame,
    theme_for,
)
from pomo.timer import Configuration, Phase, PomodoroTimer


def running_timer(**kwargs) -> PomodoroTimer:
    return PomodoroTimer(Configuration(**kwargs), running=True)


def test_format_time() -> None:
    assert format_time(0) == "00:00"
    assert format_time(25 * 60) == "25:00"
    assert format_time(61) == "01:01"
    assert format_time(90 * 60) == "90:00"


def test_interpolate_endpoints() -> None:
    assert interpolate(RED, GREEN, 1.0) == RED
    assert interpolate(RED, GREEN, 0.0) == GREEN


def test_interpolate_is_monotonic() -> None:
    colors = [interpolate(RED, GREEN, r / 100) for r in range(100, -1, -1)]
    for before, after in zip(colors, colors[1:]):
        assert after.red <= before.red
        assert after.green >= before.green
        assert after.blue == 0


def test_work_color_moves_towards_green() -> None:
    timer = running_timer(work_minutes=1)
    assert phase_color(timer.snapshot(), NORMAL) == RED

    for _ in range(59):
        timer.tick()
    late = phase_color(timer.snapshot(), NORMAL)
    assert late.green > late.red


def test_break_colors_are_fixed() -> None:
    timer = running_timer(work_minutes=1)
    for _ in range(60):
        timer.tick()
    assert timer.phase is Phase.SHORT_BREAK
    assert phase_color(timer.snapshot(), DARK) == DARK.short_break

    timer.tick()
    assert phase_color(timer.snapshot(), DARK) == DARK.short_break


def test_idle_color_before_start() -> None:
    timer = PomodoroTimer(Configuration())
    assert phase_color(timer.snapshot(), NORMAL) == NORMAL.idle


def test_labels() -> None:
    timer = PomodoroTimer(Configuration(work_minutes=1, cycles_before_long_break=2))
    assert label_for(timer.snapshot()) == START_HINT

    timer.restart()
    assert label_for(timer.snapshot()) == "Work: 01:00 - Cycle 1/2"

    for _ in range(60):
        timer.tick()
    assert label_for(timer.snapshot()) == "Short break: 05:00 - Cycle 1/2"

    timer.pause()
    assert label_for(timer.snapshot()) == "PAUSED 05:00"


def test_long_break_label() -> None:
    timer = running_timer(work_minutes=1, long_break_minutes=15, cycles_before_long_break=1)
    for _ in range(60):
        timer.tick()
    assert label_for(timer.snapshot()) == "Long break: 15:00"


def test_theme_for() -> None:
    assert theme_for(True) is DARK
    assert theme_for(False) is NORMAL


def test_frame_fits_any_size() -> None:
    snapshot = running_timer().snapshot()
    for width in range(1, 60):
        for height in range(1, 8):
            lines = render_frame(snapshot, width, height, NORMAL).plain.split("\n")
            assert len(lines) <= height
            assert all(cell_len(line) <= width for line in lines)


def test_degenerate_size_renders_nothing() -> None:
    snapshot = running_timer().snapshot()
    assert render_frame(snapshot, 0, 10, NORMAL).plain == ""
    assert render_frame(snapshot, 10, 0, NORMAL).plain == ""


def test_frame_layout() -> None:
    frame = render_frame(running_timer().snapshot(), 60, 9, DARK)
    lines = frame.plain.split("\n")

    assert len(lines) == 9
    assert all(len(line) == 60 for line in lines)
    assert lines[-1].strip() == FOOTER
    assert lines[4].strip() == "Work: 25:00 - Cycle 1/4"


def test_footer_dropped_when_too_narrow() -> None:
    lines = render_frame(running_timer().snapshot(), 10, 5, NORMAL).plain.split("\n")
    assert len(lines) == 5
    assert all(FOOTER not in line for line in lines)


def test_one_line_frame_is_truncated_label() -> None:
    frame = render_frame(running_timer().snapshot(), 4, 1, NORMAL)
    assert frame.plain == "Work"
