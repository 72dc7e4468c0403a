"""
cli.py – command line entry point for the terminal pomodoro timer
"""

from __future__ import annotations

import argparse
import sys

from rich.console import Console

from pomo.timer import Configuration

DEFAULT_WORK_MINUTES = 25
DEFAULT_SHORT_BREAK_MINUTES = 5
DEFAULT_LONG_BREAK_MINUTES = 20
DEFAULT_CYCLES = 4

console = Console(stderr=True)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pomo",
        description="Full-screen terminal Pomodoro timer.",
        epilog="Keys: s start/resume, p pause/resume, q quit.",
    )
    parser.add_argument(
        "-w", "--work-time",
        type=int,
        default=DEFAULT_WORK_MINUTES,
        help=f"Length of a work interval in minutes (default: {DEFAULT_WORK_MINUTES})",
    )
    parser.add_argument(
        "-s", "--short-wait-time",
        type=int,
        default=DEFAULT_SHORT_BREAK_MINUTES,
        help=f"Length of a short break in minutes (default: {DEFAULT_SHORT_BREAK_MINUTES})",
    )
    parser.add_argument(
        "-l", "--long-wait-time",
        type=int,
        default=DEFAULT_LONG_BREAK_MINUTES,
        help=f"Length of a long break in minutes (default: {DEFAULT_LONG_BREAK_MINUTES})",
    )
    parser.add_argument(
        "-c", "--cycles",
        type=int,
        default=DEFAULT_CYCLES,
        help=f"Work intervals before a long break (default: {DEFAULT_CYCLES})",
    )
    parser.add_argument(
        "--dark-mode",
        action="store_true",
        help="Use the dark colour theme.",
    )
    parser.add_argument(
        "--bell",
        action=argparse.BooleanOptionalAction,
        default=True,
        help="Ring the terminal bell when a phase ends (default: on).",
    )
    parser.add_argument(
        "--autostart",
        action="store_true",
        help="Start counting immediately instead of waiting for 's'.",
    )
    return parser


def parse_config(argv: list[str] | None = None) -> tuple[Configuration, argparse.Namespace]:
    parser = build_parser()
    args = parser.parse_args(argv)

    for flag, value in (
        ("--work-time", args.work_time),
        ("--short-wait-time", args.short_wait_time),
        ("--long-wait-time", args.long_wait_time),
        ("--cycles", args.cycles),
    ):
        if value < 1:
            parser.error(f"{flag} must be at least 1, got {value}")

    config = Configuration(
        work_minutes=args.work_time,
        short_break_minutes=args.short_wait_time,
        long_break_minutes=args.long_wait_time,
        cycles_before_long_break=args.cycles,
        dark_mode=args.dark_mode,
    )
    return config, args


def main(argv: list[str] | None = None) -> int:
    config, args = parse_config(argv)

    from pomo.app import PomodoroApp

    app = PomodoroApp(config, bell=args.bell, autostart=args.autostart)
    try:
        app.run()
    except OSError as exc:
        console.print(f"[bold red]Error:[/bold red] terminal I/O failed: {exc}")
        return 1
    except KeyboardInterrupt:
        return 130
    return app.return_code or 0


if __name__ == "__main__":
    sys.exit(main())
