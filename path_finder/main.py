"""Command line entry point: load a grid map, search it and show the result."""

from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Any, Optional, Sequence

import yaml

from .config import CONFIG, Config, LoggingConfig, load_config
from .core.grid import find_target
from .persistence.grid_file import GridFormatError, load_grid_map, save_result, validate_start
from .systems.search.astar import find_path
from .utils.cli.terminal_view import print_grid, render_grid


logger = logging.getLogger(__name__)

EXIT_FOUND = 0
EXIT_NO_PATH = 1
EXIT_BAD_INPUT = 2

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(cfg: LoggingConfig, level_override: str | None = None) -> None:
    """Apply the root level and any per-module levels from ``cfg``."""

    level_str = (level_override or cfg.global_level).upper()
    numeric_level = getattr(logging, level_str, logging.INFO)
    logging.basicConfig(level=numeric_level, format=LOG_FORMAT, force=True)

    for module_name, module_level in cfg.module_levels.items():
        module_numeric_level = getattr(logging, str(module_level).upper(), None)
        if module_numeric_level is not None:
            logging.getLogger(module_name).setLevel(module_numeric_level)
        else:
            logger.warning("Invalid log level '%s' for module '%s' in config.", module_level, module_name)


def parse_marker(value: str) -> Any:
    """Interpret a command line marker with YAML scalar rules (``0`` -> int)."""

    return yaml.safe_load(value)


def parse_position(value: str) -> tuple[int, int]:
    """Parse ``"row,column"`` into a tuple."""

    parts = value.replace(" ", "").split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(f"expected ROW,COLUMN, got {value!r}")
    try:
        return int(parts[0]), int(parts[1])
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected integers in {value!r}") from None


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="path-finder",
        description="Find the shortest four-directional path to a target cell on a grid.",
    )
    parser.add_argument("grid_file", type=Path, help="YAML or JSON grid map (optionally .gz)")
    parser.add_argument("--start", type=parse_position, default=None, help="Start as ROW,COLUMN")
    parser.add_argument("--target", type=parse_marker, default=None, help="Target cell marker")
    parser.add_argument("--obstacle", type=parse_marker, default=None, help="Obstacle cell marker")
    parser.add_argument("--step-cost", type=int, default=None, help="Cost of a single move")
    parser.add_argument("--config", type=Path, default=None, help="Alternative config.yaml")
    parser.add_argument("--output", type=Path, default=None, help="Write the result as JSON")
    parser.add_argument("--no-render", action="store_true", help="Do not draw the grid")
    parser.add_argument("--no-colour", action="store_true", help="Draw without ANSI colours")
    parser.add_argument("--log-level", default=None, help="Override the configured log level")
    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.config is not None and not args.config.is_file():
        print(f"error: config file {args.config} not found")
        return EXIT_BAD_INPUT
    try:
        cfg: Config = load_config(args.config) if args.config else CONFIG
    except (ValueError, yaml.YAMLError) as exc:
        print(f"error: invalid config {args.config}: {exc}")
        return EXIT_BAD_INPUT
    configure_logging(cfg.logging, args.log_level)

    try:
        grid_map = load_grid_map(args.grid_file)
        start_value = args.start if args.start is not None else grid_map.start
        if start_value is None:
            raise GridFormatError("no start position given on the command line or in the grid map")
        start = validate_start(start_value, grid_map.grid)
    except OSError as exc:
        logger.error("Unable to read grid map %s: %s", args.grid_file, exc)
        print(f"error: {exc}")
        return EXIT_BAD_INPUT
    except GridFormatError as exc:
        print(f"error: {exc}")
        return EXIT_BAD_INPUT

    target_marker = args.target if args.target is not None else grid_map.target
    if target_marker is None:
        target_marker = cfg.markers.target
    obstacle_marker = args.obstacle if args.obstacle is not None else grid_map.obstacle
    if obstacle_marker is None:
        obstacle_marker = cfg.markers.obstacle
    step_cost = args.step_cost if args.step_cost is not None else cfg.search.step_cost
    if step_cost <= 0:
        print(f"error: --step-cost must be positive, got {step_cost}")
        return EXIT_BAD_INPUT

    result = find_path(target_marker, obstacle_marker, start, grid_map.grid, step_cost=step_cost)
    target = find_target(grid_map.grid, target_marker)

    if not args.no_render:
        print_grid(
            render_grid(
                grid_map.grid,
                result.path,
                obstacle_marker=obstacle_marker,
                target=target,
                start=start,
                colour=cfg.render.colour and not args.no_colour,
                path_glyph=cfg.render.path_glyph,
            )
        )

    if args.output is not None:
        save_result(result, args.output, gzip_compress=args.output.suffix == ".gz")
        logger.info("Result written to %s", args.output)

    if result.found:
        print(f"Path found: {result.length} steps")
        print(" -> ".join(f"({r},{c})" for r, c in result.path))
        return EXIT_FOUND

    if target is None:
        print(f"No path: target {target_marker!r} not present in grid")
    else:
        print(f"No path: target {target_marker!r} is unreachable from {tuple(start)}")
    return EXIT_NO_PATH


if __name__ == "__main__":
    raise SystemExit(main())
