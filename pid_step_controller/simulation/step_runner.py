"""Run a controller against a simulated plant for one setpoint step."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, Optional

import numpy as np

from ..config import SimulationConfig
from ..control.pid import Controller
from ..control.timers import ManualClock
from ..metrics.step_response import MetricsReporter, StepResponseMetrics
from .plant import FirstOrderPlant


@dataclass
class StepResponseResult:
    """Sampled closed-loop trajectory and the metrics the controller recorded."""

    setpoint: float
    t: np.ndarray
    process_variable: np.ndarray
    control_variable: np.ndarray
    metrics: StepResponseMetrics

    def to_dict(self) -> Dict[str, Any]:
        return {
            "setpoint": self.setpoint,
            "metrics": self.metrics.to_dict(),
            "samples": len(self.t),
            "t": [round(float(v), 6) for v in self.t],
            "process_variable": [float(v) for v in self.process_variable],
            "control_variable": [float(v) for v in self.control_variable],
        }


def run_step_response(
    config: SimulationConfig,
    reporter: Optional[MetricsReporter] = None,
) -> StepResponseResult:
    """Drive a first-order plant from its initial value toward ``config.setpoint``.

    Time is simulated with a ``ManualClock`` advanced by ``config.dt`` before
    every ``calc``, so results are deterministic.
    """
    if config.dt <= 0:
        raise ValueError(f"Simulation dt must be positive, got {config.dt}")
    if config.duration < 0:
        raise ValueError(f"Simulation duration must be non-negative, got {config.duration}")

    clock = ManualClock()
    controller = Controller.from_config(config.controller, clock=clock, reporter=reporter)
    plant = FirstOrderPlant(
        gain=config.plant.gain,
        time_constant=config.plant.time_constant,
        initial_value=config.plant.initial_value,
    )

    n = config.n_samples
    t = np.zeros(n)
    pv = np.zeros(n)
    cv = np.zeros(n)

    controller.target_setpoint(config.setpoint)
    logging.info(
        "Step response: setpoint=%.3f (clamped %.3f), dt=%.4fs, samples=%d",
        config.setpoint,
        controller.setpoint,
        config.dt,
        n,
    )
    for k in range(n):
        clock.advance(config.dt)
        measurement = plant.value
        control = controller.calc(measurement)
        plant.step(control, config.dt)
        t[k] = clock.now
        pv[k] = measurement
        cv[k] = control

    if not controller.has_settled():
        logging.warning("Process variable did not settle within %.2fs", config.duration)

    return StepResponseResult(
        setpoint=controller.setpoint,
        t=t,
        process_variable=pv,
        control_variable=cv,
        metrics=controller.metrics,
    )
