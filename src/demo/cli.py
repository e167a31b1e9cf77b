"""
projectiles — запуск демонстрационной симуляции снаряда

Usage:
    projectiles [--speed 1.0] [--max-ticks 10000] [--ppm out.ppm --width 900 --height 550] [-v]

Каждая позиция логируется; по завершении печатается число tick.
С --ppm траектория рисуется на canvas и сохраняется в PPM (P3).
Любая ошибка ядра логируется и даёт код выхода 1.
"""

import argparse
import logging
from pathlib import Path

from src.core.errors import RayTracerError
from src.demo.projectile import MAX_TICKS_DEFAULT, ProjectileConfig, plot_trajectory, simulate
from src.utils.log import get_logger, setup_logging

logger = get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="projectiles",
        description="Simulate a projectile under constant gravity and wind",
    )
    parser.add_argument("--speed", type=float, default=1.0, help="Initial speed in units/tick (default: 1.0)")
    parser.add_argument(
        "--max-ticks",
        type=int,
        default=MAX_TICKS_DEFAULT,
        help=f"Stop after this many ticks (default: {MAX_TICKS_DEFAULT})",
    )
    parser.add_argument("--ppm", type=Path, help="Plot the trajectory and write it to this PPM file")
    parser.add_argument("--width", type=int, default=900, help="Canvas width for --ppm (default: 900)")
    parser.add_argument("--height", type=int, default=550, help="Canvas height for --ppm (default: 550)")
    parser.add_argument("--log-dir", type=Path, help="Also write logs to <log-dir>/raytracer.log")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log every tick (DEBUG)")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, log_dir=args.log_dir)

    config = ProjectileConfig(speed=args.speed, max_ticks=args.max_ticks)

    try:
        proj, env = config.build()
        positions = []
        for state in simulate(env, proj, config.max_ticks):
            positions.append(state.position)
            logger.info("proj new position: %r", state.position)

        if args.ppm is not None:
            canvas = plot_trajectory(positions, args.width, args.height)
            args.ppm.write_text(canvas.to_ppm(), encoding="ascii")
            logger.info("Wrote %dx%d trajectory to %s", args.width, args.height, args.ppm)
    except RayTracerError as e:
        logger.error("Simulation failed: %s", e)
        return 1
    except OSError as e:
        logger.error("Could not write %s: %s", args.ppm, e)
        return 1

    print(f"mission accomplished in {len(positions)} ticks!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
