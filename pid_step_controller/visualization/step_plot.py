"""
Step-response plot.

Shows the process variable against the setpoint with the settling band, the
peak and settling markers when they were observed, and the control output on
a second axes.
"""

from pathlib import Path
from typing import Optional, Union

import numpy as np
import matplotlib

matplotlib.use('Agg')
import matplotlib.pyplot as plt

from ..control.pid import SETTLING_BAND
from ..simulation.step_runner import StepResponseResult


def plot_step_response(result: StepResponseResult,
                       output_path: Optional[Union[str, Path]] = None):
    """Plot a step response, optionally saving it to ``output_path``."""
    fig, (ax_pv, ax_cv) = plt.subplots(2, 1, figsize=(12, 8), sharex=True)

    t = result.t
    sp = result.setpoint
    ax_pv.plot(t, result.process_variable, 'b-', linewidth=1.5, label='Process variable')
    ax_pv.axhline(sp, color='k', linestyle='--', linewidth=1, label='Setpoint')
    if sp != 0:
        band = abs(sp) * SETTLING_BAND
        ax_pv.fill_between(t, sp - band, sp + band, color='green', alpha=0.15,
                           label=f'±{SETTLING_BAND:.0%} band')

    metrics = result.metrics
    if metrics.peak_time is not None:
        ax_pv.plot(metrics.peak_time, metrics.percent_overshoot * sp, 'rv', markersize=9,
                   label=f'Peak Tp={metrics.peak_time:.3f}s')
    if metrics.settling_time is not None:
        ax_pv.axvline(metrics.settling_time, color='green', linestyle=':',
                      label=f'Settled Ts={metrics.settling_time:.3f}s')

    ax_pv.set_ylabel('Process variable')
    ax_pv.set_title('Step response')
    ax_pv.grid(True, alpha=0.3)
    ax_pv.legend(loc='lower right')

    ax_cv.plot(t, result.control_variable, 'm-', linewidth=1.2)
    ax_cv.set_xlabel('Time (s)')
    ax_cv.set_ylabel('Control variable')
    ax_cv.grid(True, alpha=0.3)
    if len(t):
        ax_cv.set_xlim(0, float(np.max(t)))

    plt.tight_layout()
    if output_path is not None:
        plt.savefig(output_path, dpi=150, bbox_inches='tight')
    return fig
