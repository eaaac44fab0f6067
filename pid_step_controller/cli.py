"""Command line for running simulated step responses and the built-in tests."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from .config import SimulationConfig, apply_simulation_overrides, load_simulation_config
from .utils import ensure_dir, utc_timestamp, write_json


def _prompt(text: str, default: Optional[str] = None) -> str:
    label = f"{text} [{default}]: " if default is not None else f"{text}: "
    value = input(label).strip()
    return value if value else (default or "")


def _prompt_float(text: str, default: float) -> float:
    raw = _prompt(text, f"{default}")
    try:
        return float(raw)
    except ValueError:
        return default


def _resolve_config(args: argparse.Namespace) -> SimulationConfig:
    config = load_simulation_config(Path(args.config))
    return apply_simulation_overrides(
        config,
        setpoint=args.setpoint,
        dt=args.dt,
        duration=args.duration,
        kp=args.kp,
        ki=args.ki,
        kd=args.kd,
    )


def run_simulation(config: SimulationConfig, out: Path, plot: bool) -> Path:
    from .simulation.step_runner import run_step_response

    result = run_step_response(config)
    out_dir = out / f"step_{utc_timestamp()}"
    ensure_dir(out_dir)
    write_json(out_dir / "step_response.json", result.to_dict())
    if plot:
        import matplotlib.pyplot as plt

        from .visualization.step_plot import plot_step_response

        fig = plot_step_response(result, out_dir / "step_response.png")
        plt.close(fig)
    logging.info("Wrote step response to %s", out_dir)
    return out_dir


def do_simulate(args: argparse.Namespace) -> None:
    run_simulation(_resolve_config(args), Path(args.out), args.plot)


def do_test(_args: argparse.Namespace) -> bool:
    from .control import test_pid
    from .simulation import test_simulation

    ok = True
    for module in (test_pid, test_simulation):
        ok = module.main() == 0 and ok
    return ok


def run_menu(base_args: argparse.Namespace) -> None:
    while True:
        print("\n=== PID Step Response CLI ===")
        print("1) Simulate step response")
        print("2) Run tests")
        print("0) Exit")
        choice = _prompt("Select", "1")
        if choice == "0":
            return
        if choice == "2":
            do_test(base_args)
            continue
        if choice != "1":
            print("Unknown option.")
            continue

        config = load_simulation_config(Path(base_args.config))
        config = apply_simulation_overrides(
            config,
            setpoint=_prompt_float("Setpoint", config.setpoint),
            kp=_prompt_float("Kp", config.controller.kp),
            ki=_prompt_float("Ki", config.controller.ki),
            kd=_prompt_float("Kd", config.controller.kd),
            duration=_prompt_float("Duration (s)", config.duration),
        )
        plot = _prompt("Save plot? (y/n)", "y").lower().startswith("y")
        run_simulation(config, Path(_prompt("Output dir", "outputs")), plot)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="PID step response CLI.")
    parser.add_argument("--config", default="configs/controller.yaml", help="Simulation config YAML")
    parser.add_argument("--menu", action="store_true", help="Launch interactive menu")

    subparsers = parser.add_subparsers(dest="command")

    sim_cmd = subparsers.add_parser("simulate", help="Simulate a closed-loop step response")
    sim_cmd.add_argument("--setpoint", type=float)
    sim_cmd.add_argument("--dt", type=float)
    sim_cmd.add_argument("--duration", type=float)
    sim_cmd.add_argument("--kp", type=float)
    sim_cmd.add_argument("--ki", type=float)
    sim_cmd.add_argument("--kd", type=float)
    sim_cmd.add_argument("--out", default="outputs")
    sim_cmd.add_argument("--plot", action="store_true", help="Save step_response.png")

    subparsers.add_parser("test", help="Run automated controller tests")

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    logging.basicConfig(level=logging.INFO, format="[%(levelname)s] %(message)s")
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None or args.menu:
        run_menu(args)
        return 0

    if args.command == "simulate":
        do_simulate(args)
        return 0
    if args.command == "test":
        return 0 if do_test(args) else 1

    return 1


if __name__ == "__main__":
    raise SystemExit(main())
