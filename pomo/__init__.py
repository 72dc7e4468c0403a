"""
pomo – a full-screen Pomodoro timer for the terminal
"""

from pomo.timer import Configuration, Phase, PomodoroTimer

__version__ = "0.1.0"

__all__ = ["Configuration", "Phase", "PomodoroTimer", "__version__"]
