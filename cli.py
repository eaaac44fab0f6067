#!/usr/bin/env python3
"""Entry point for the PID step response CLI."""

from pid_step_controller.cli import main


if __name__ == "__main__":
    raise SystemExit(main())
