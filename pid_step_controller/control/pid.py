"""PID controller with anti-windup, input/output clamping and step-response tracking."""

from __future__ import annotations

import copy
import logging
from typing import TYPE_CHECKING, Callable, Optional

from ..metrics.step_response import MetricsReporter, StepResponseMetrics, log_step_response
from .timers import StopwatchTimer, Timer

if TYPE_CHECKING:
    from ..config import ControllerConfig

SETTLING_BAND = 0.05


def limiter(value: float, lower: float, upper: float) -> float:
    """Clamp ``value`` to ``[lower, upper]``.

    Equal bounds disable clamping. With inverted bounds the lower bound is
    tested first, so values below ``lower`` return ``lower`` and any remaining
    value above ``upper`` returns ``upper``.
    """
    if lower == upper:
        return value
    if value < lower:
        return lower
    if value > upper:
        return upper
    return value


class Controller:
    """Discrete PID controller driven by elapsed time between samples.

    Features:
    - Setpoint clamping to the input limits
    - Integral accumulated over measured sample intervals, clamped to the
      output limits (anti-windup)
    - Derivative taken on the setpoint, not the measurement
    - Output clamping
    - Peak time, percent overshoot and settling time of each step response

    Each pair of limits is disabled while its bounds are equal.
    """

    def __init__(
        self,
        kp: float = 0.0,
        ki: float = 0.0,
        kd: float = 0.0,
        input_min: float = 0.0,
        input_max: float = 0.0,
        output_min: float = 0.0,
        output_max: float = 0.0,
        *,
        sample_timer: Optional[Timer] = None,
        performance_timer: Optional[Timer] = None,
        clock: Optional[Callable[[], float]] = None,
        reporter: Optional[MetricsReporter] = None,
    ) -> None:
        self._sample_timer = sample_timer if sample_timer is not None else StopwatchTimer(clock)
        self._performance_timer = (
            performance_timer if performance_timer is not None else StopwatchTimer(clock)
        )
        self._reporter = reporter if reporter is not None else log_step_response

        self.set_gains(kp, ki, kd)
        self.set_input_limits(input_min, input_max)
        self.set_output_limits(output_min, output_max)
        self.reset()

    @classmethod
    def from_config(
        cls,
        config: "ControllerConfig",
        *,
        sample_timer: Optional[Timer] = None,
        performance_timer: Optional[Timer] = None,
        clock: Optional[Callable[[], float]] = None,
        reporter: Optional[MetricsReporter] = None,
    ) -> "Controller":
        return cls(
            config.kp,
            config.ki,
            config.kd,
            config.input_min,
            config.input_max,
            config.output_min,
            config.output_max,
            sample_timer=sample_timer,
            performance_timer=performance_timer,
            clock=clock,
            reporter=reporter,
        )

    # -- configuration ---------------------------------------------------

    def set_gains(self, kp: float, ki: float, kd: float) -> None:
        self._kp = kp
        self._ki = ki
        self._kd = kd

    def set_input_limits(self, lower: float, upper: float) -> None:
        self._input_min = lower
        self._input_max = upper

    def set_output_limits(self, lower: float, upper: float) -> None:
        self._output_min = lower
        self._output_max = upper

    # -- read API --------------------------------------------------------

    @property
    def setpoint(self) -> float:
        return self._setpoint

    @property
    def last_setpoint(self) -> float:
        return self._last_setpoint

    @property
    def kp(self) -> float:
        return self._kp

    @property
    def ki(self) -> float:
        return self._ki

    @property
    def kd(self) -> float:
        return self._kd

    @property
    def input_limits(self) -> tuple[float, float]:
        return (self._input_min, self._input_max)

    @property
    def output_limits(self) -> tuple[float, float]:
        return (self._output_min, self._output_max)

    @property
    def integrator(self) -> float:
        return self._integrator

    @property
    def peak_time(self) -> Optional[float]:
        return self._peak_time

    @property
    def percent_overshoot(self) -> float:
        return self._percent_overshoot

    @property
    def settling_time(self) -> Optional[float]:
        return self._settling_time

    @property
    def metrics(self) -> StepResponseMetrics:
        return StepResponseMetrics(
            peak_time=self._peak_time,
            percent_overshoot=self._percent_overshoot,
            settling_time=self._settling_time,
        )

    def has_settled(self) -> bool:
        return self._settling_time is not None

    # -- target / state --------------------------------------------------

    def target_setpoint(self, setpoint: float) -> None:
        """Set the value to track and begin a new step response."""
        self._setpoint = limiter(setpoint, self._input_min, self._input_max)
        self._peak_time = None
        self._settling_time = None
        self._percent_overshoot = 0.0
        self._sample_timer.start()
        self._performance_timer.start()

    def reset(self) -> None:
        """Clear setpoint, integrator and metrics. Gains and limits are kept."""
        self._setpoint = 0.0
        self._last_setpoint = 0.0
        self._integrator = 0.0
        self._peak_time: Optional[float] = None
        self._settling_time: Optional[float] = None
        self._percent_overshoot = 0.0
        self._sample_timer.stop()
        self._performance_timer.stop()

    def copy(self) -> "Controller":
        """Return an independent controller with the same configuration and state."""
        other = copy.copy(self)
        other._sample_timer = copy.copy(self._sample_timer)
        other._performance_timer = copy.copy(self._performance_timer)
        return other

    # -- computation -----------------------------------------------------

    def calc(self, process_variable: float) -> float:
        """Compute the control output for the latest measurement.

        Args:
            process_variable: Measured value of the controlled process

        Returns:
            Control output, clamped to the output limits
        """
        self._sample_timer.stop()
        sampling_time = self._sample_timer.elapsed()

        self._track_performance(process_variable)

        error = self._setpoint - process_variable
        differentiator = 0.0
        if sampling_time > 0:
            differentiator = (self._setpoint - self._last_setpoint) / sampling_time
            self._integrator += error * sampling_time
        # limits may have changed since the last sample
        self._integrator = limiter(self._integrator, self._output_min, self._output_max)

        control_variable = (
            self._kp * error + self._ki * self._integrator - self._kd * differentiator
        )
        control_variable = limiter(control_variable, self._output_min, self._output_max)

        self._last_setpoint = self._setpoint
        self._sample_timer.start()
        return control_variable

    def _track_performance(self, process_variable: float) -> None:
        if self._setpoint == 0:
            logging.debug("Setpoint is zero, skipping overshoot/settling tracking")
            return

        ratio = process_variable / self._setpoint
        percent = ratio - 1
        if percent > self._percent_overshoot and percent > 0:
            self._percent_overshoot = ratio
            self._peak_time = self._performance_timer.elapsed()

        if abs(percent) < SETTLING_BAND and self._settling_time is None:
            self._performance_timer.stop()
            self._settling_time = self._performance_timer.elapsed()
            self._report()

    def _report(self) -> None:
        try:
            self._reporter(self.metrics)
        except Exception:
            logging.exception("Step-response reporter failed")
