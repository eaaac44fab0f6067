"""Step-response performance metrics and the default reporter."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Callable, Dict, Optional


@dataclass(frozen=True)
class StepResponseMetrics:
    """Metrics of one step response.

    ``peak_time`` and ``settling_time`` are ``None`` until observed.
    ``percent_overshoot`` is the ``pv / setpoint`` ratio of the recorded peak,
    ``0.0`` when the process variable never exceeded the setpoint. A sample
    replaces the peak only when its fractional excess ``pv / setpoint - 1`` is
    above the stored ratio, so after a first peak of 1.1 a later ratio of 1.3
    is not recorded.
    """

    peak_time: Optional[float] = None
    percent_overshoot: float = 0.0
    settling_time: Optional[float] = None

    @property
    def settled(self) -> bool:
        return self.settling_time is not None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "peak_time": self.peak_time,
            "percent_overshoot": self.percent_overshoot,
            "settling_time": self.settling_time,
            "settled": self.settled,
        }


MetricsReporter = Callable[[StepResponseMetrics], None]


def _fmt(value: Optional[float]) -> str:
    return "n/a" if value is None else f"{value:.4f}"


def log_step_response(metrics: StepResponseMetrics) -> None:
    logging.info("Peak Time Tp: %s", _fmt(metrics.peak_time))
    logging.info("Percent Overshoot %%OS: %.4f", metrics.percent_overshoot)
    logging.info("Settling Time Ts: %s", _fmt(metrics.settling_time))
