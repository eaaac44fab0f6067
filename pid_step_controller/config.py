"""Configuration models and YAML loading."""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml


@dataclass
class ControllerConfig:
    kp: float = 0.0
    ki: float = 0.0
    kd: float = 0.0
    # equal bounds disable clamping
    input_min: float = 0.0
    input_max: float = 0.0
    output_min: float = 0.0
    output_max: float = 0.0

    @property
    def input_limits(self) -> tuple[float, float]:
        return (self.input_min, self.input_max)

    @property
    def output_limits(self) -> tuple[float, float]:
        return (self.output_min, self.output_max)


@dataclass
class PlantConfig:
    gain: float = 1.0
    time_constant: float = 1.0
    initial_value: float = 0.0


@dataclass
class SimulationConfig:
    setpoint: float = 1.0
    dt: float = 0.01
    duration: float = 10.0
    controller: ControllerConfig = field(default_factory=ControllerConfig)
    plant: PlantConfig = field(default_factory=PlantConfig)

    @property
    def n_samples(self) -> int:
        return int(round(self.duration / self.dt))


def _section(raw: Dict[str, Any], key: str, path: Path) -> Dict[str, Any]:
    value = raw.get(key) or {}
    if not isinstance(value, dict):
        raise ValueError(f"Invalid '{key}' section in config: {path}")
    return value


def load_controller_config(raw: Dict[str, Any]) -> ControllerConfig:
    limits_in = raw.get("input_limits") or [raw.get("input_min", 0.0), raw.get("input_max", 0.0)]
    limits_out = raw.get("output_limits") or [
        raw.get("output_min", 0.0),
        raw.get("output_max", 0.0),
    ]
    for limits in (limits_in, limits_out):
        if not isinstance(limits, (list, tuple)) or len(limits) != 2:
            raise ValueError("Controller limits must be [lower, upper] pairs")
    return ControllerConfig(
        kp=float(raw.get("kp", 0.0)),
        ki=float(raw.get("ki", 0.0)),
        kd=float(raw.get("kd", 0.0)),
        input_min=float(limits_in[0]),
        input_max=float(limits_in[1]),
        output_min=float(limits_out[0]),
        output_max=float(limits_out[1]),
    )


def load_simulation_config(path: Path) -> SimulationConfig:
    if not path.exists():
        return SimulationConfig()
    raw = yaml.safe_load(path.read_text())
    if raw is None:
        return SimulationConfig()
    if not isinstance(raw, dict):
        raise ValueError(f"Invalid simulation config: {path}")

    plant_raw = _section(raw, "plant", path)
    return SimulationConfig(
        setpoint=float(raw.get("setpoint", 1.0)),
        dt=float(raw.get("dt", 0.01)),
        duration=float(raw.get("duration", 10.0)),
        controller=load_controller_config(_section(raw, "controller", path)),
        plant=PlantConfig(
            gain=float(plant_raw.get("gain", 1.0)),
            time_constant=float(plant_raw.get("time_constant", 1.0)),
            initial_value=float(plant_raw.get("initial_value", 0.0)),
        ),
    )


def apply_simulation_overrides(
    config: SimulationConfig,
    *,
    setpoint: Optional[float] = None,
    dt: Optional[float] = None,
    duration: Optional[float] = None,
    kp: Optional[float] = None,
    ki: Optional[float] = None,
    kd: Optional[float] = None,
) -> SimulationConfig:
    controller = replace(
        config.controller,
        kp=kp if kp is not None else config.controller.kp,
        ki=ki if ki is not None else config.controller.ki,
        kd=kd if kd is not None else config.controller.kd,
    )
    return replace(
        config,
        setpoint=setpoint if setpoint is not None else config.setpoint,
        dt=dt if dt is not None else config.dt,
        duration=duration if duration is not None else config.duration,
        controller=controller,
    )
