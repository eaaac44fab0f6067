"""PID control loop and its timer collaborators."""

from .pid import SETTLING_BAND, Controller, limiter
from .timers import ManualClock, StopwatchTimer, Timer

__all__ = [
    "SETTLING_BAND",
    "Controller",
    "ManualClock",
    "StopwatchTimer",
    "Timer",
    "limiter",
]
