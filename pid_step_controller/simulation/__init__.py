"""Closed-loop step-response simulation on simulated time."""

from .plant import FirstOrderPlant
from .step_runner import StepResponseResult, run_step_response

__all__ = ["FirstOrderPlant", "StepResponseResult", "run_step_response"]
