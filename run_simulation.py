#!/usr/bin/env python3
"""CLI entrypoint for the sector market simulation.

Usage::

    python run_simulation.py --config config/default.yaml
    python run_simulation.py --config config/default.yaml --turns 50 --seed 7 --output-dir results/

The simulation loads a YAML configuration file, loads the market catalogs,
then plays the configured number of sessions with the configured strategy.
The run name is derived automatically from the config file name (e.g.
``default.yaml`` -> ``default``).
"""

from __future__ import annotations

import argparse
import logging
import sys

from pydantic import ValidationError

from models.config import ConfigurationError, SimulationConfig
from simulation.runner import SimulationRunner
from strategies.registry import available_strategies


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Run a turn-based sector market simulation.",
    )
    parser.add_argument(
        "--config",
        required=True,
        type=str,
        help="Path to the YAML configuration file.",
    )
    parser.add_argument(
        "--output-dir",
        default="results",
        type=str,
        help="Directory where simulation results will be written (default: results/).",
    )
    parser.add_argument(
        "--turns",
        type=int,
        default=None,
        help="Override the number of turns per session.",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Override the base random seed.",
    )
    parser.add_argument(
        "--strategy",
        choices=available_strategies(),
        default=None,
        help="Override the trading strategy.",
    )
    parser.add_argument(
        "--log-level",
        default="INFO",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging verbosity (default: INFO).",
    )
    return parser.parse_args(argv)


def _setup_logging(level: str) -> None:
    """Configure root logger with a clean format."""
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
    )


def _apply_overrides(config: SimulationConfig, args: argparse.Namespace) -> SimulationConfig:
    update: dict = {}
    if args.turns is not None:
        update["num_turns"] = args.turns
    if args.seed is not None:
        update["seed"] = args.seed
    if args.strategy is not None:
        update["strategy"] = {"name": args.strategy}
    if not update:
        return config
    try:
        return SimulationConfig.model_validate({**config.model_dump(), **update})
    except ValidationError as exc:
        raise ConfigurationError(f"Invalid command-line override: {exc}") from exc


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    _setup_logging(args.log_level)

    logger = logging.getLogger(__name__)
    logger.info("Loading config from '%s'...", args.config)

    try:
        config = _apply_overrides(SimulationConfig.from_yaml(args.config), args)
        runner = SimulationRunner(
            config,
            config_yaml_path=args.config,
            output_dir=args.output_dir,
        )
        runner.run()
    except (ConfigurationError, FileNotFoundError) as exc:
        logger.error("Cannot start simulation: %s", exc)
        return 2
    return 0


if __name__ == "__main__":
    sys.exit(main())
