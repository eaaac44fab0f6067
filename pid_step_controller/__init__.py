"""Discrete-time PID controller with step-response tracking."""

__version__ = "0.1.0"

from .config import ControllerConfig, PlantConfig, SimulationConfig
from .control import Controller, ManualClock, StopwatchTimer, limiter
from .metrics import StepResponseMetrics, log_step_response

__all__ = [
    "Controller",
    "ControllerConfig",
    "ManualClock",
    "PlantConfig",
    "SimulationConfig",
    "StepResponseMetrics",
    "StopwatchTimer",
    "limiter",
    "log_step_response",
]
