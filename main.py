"""
Pond Simulation - Console Mode

Main entry point: runs pikes and carps in a small pond and draws every tick.
With no flags it runs the classic 10x10 pond, 5 pikes, 20 carps, 20 ticks.
"""

import argparse
import logging
import sys

from pond_sim.config import SimulationConfig
from pond_sim.core.pond import PondError
from pond_sim.simulation import PredatorPreySimulation, run_simulation

logger = logging.getLogger(__name__)


def positive_int(value: str) -> int:
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {value}")
    return number


def non_negative_int(value: str) -> int:
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be zero or more, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description='Pike and carp pond simulation')
    parser.add_argument('--ticks', type=non_negative_int, default=None,
                        help=f'Ticks to simulate (default {SimulationConfig.NUM_TICKS})')
    parser.add_argument('--width', type=positive_int, default=None, help='Pond width in cells')
    parser.add_argument('--height', type=positive_int, default=None, help='Pond height in cells')
    parser.add_argument('--pikes', type=non_negative_int, default=None, help='Initial pike count')
    parser.add_argument('--carps', type=non_negative_int, default=None, help='Initial carp count')
    parser.add_argument('--seed', type=int, default=None, help='Random seed for a repeatable run')
    parser.add_argument('--delay', type=float, default=None,
                        help=f'Seconds between frames (default {SimulationConfig.TICK_DELAY})')
    parser.add_argument('--no-clear', action='store_true',
                        help='Do not clear the terminal between frames')
    parser.add_argument('--plot', action='store_true',
                        help='Also show a matplotlib window')
    parser.add_argument('--log-level', default='WARNING',
                        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        help='Logging level (default WARNING)')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(levelname)s:%(name)s:%(message)s",
    )

    config = SimulationConfig.overrides(
        num_ticks=args.ticks,
        grid_width=args.width,
        grid_height=args.height,
        initial_pike_count=args.pikes,
        initial_carp_count=args.carps,
        random_seed=args.seed,
        tick_delay=args.delay,
        clear_screen=False if args.no_clear else None,
    )
    logger.info("Configuration:\n%s", config.summary())

    visualizer = None
    try:
        simulation = PredatorPreySimulation(config)
        if args.plot:
            from pond_sim.visualizer import PondVisualizer
            visualizer = PondVisualizer(config)
        run_simulation(simulation, visualizer=visualizer)
    except PondError as e:
        logger.error("Simulation aborted: %s", e)
        return 1
    except KeyboardInterrupt:
        print("\n\nSimulation interrupted by user")
        return 130
    finally:
        if visualizer is not None:
            visualizer.close()

    return 0


if __name__ == "__main__":
    sys.exit(main())
