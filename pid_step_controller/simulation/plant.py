"""First-order process model used to close the loop in simulation."""

from __future__ import annotations


class FirstOrderPlant:
    """First-order lag ``dy/dt = (gain * u - y) / time_constant``.

    Integrated with explicit Euler, so ``dt`` should stay well below
    ``time_constant``.
    """

    def __init__(
        self,
        gain: float = 1.0,
        time_constant: float = 1.0,
        initial_value: float = 0.0,
    ) -> None:
        if time_constant <= 0:
            raise ValueError(f"Plant time constant must be positive, got {time_constant}")
        self.gain = gain
        self.time_constant = time_constant
        self.initial_value = initial_value
        self.value = initial_value

    def step(self, control: float, dt: float) -> float:
        self.value += (self.gain * control - self.value) / self.time_constant * dt
        return self.value

    def reset(self) -> None:
        self.value = self.initial_value
