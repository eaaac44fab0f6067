"""Step-response metrics."""

from .step_response import MetricsReporter, StepResponseMetrics, log_step_response

__all__ = ["MetricsReporter", "StepResponseMetrics", "log_step_response"]
