"""
Visualization tools for step responses.
"""

from .step_plot import plot_step_response

__all__ = [
    'plot_step_response',
]
