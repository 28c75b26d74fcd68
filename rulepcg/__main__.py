"""Command line driver: grow a cave map and print every iteration."""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Sequence

from rulepcg import config
from rulepcg.environment.generators.automaton import AutomatonParams
from rulepcg.environment.generators.drunk_walker import WalkerParams
from rulepcg.environment.generators.pipeline import (
    GenerationContext,
    create_cave_pipeline,
)
from rulepcg.render import format_map

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rulepcg",
        description="Cellular automata and drunk walker map generation",
    )
    parser.add_argument("--width", type=int, default=config.MAP_WIDTH)
    parser.add_argument("--height", type=int, default=config.MAP_HEIGHT)
    parser.add_argument(
        "--seed",
        default=config.RANDOM_SEED,
        metavar="SEED",
        help=(
            "Master seed; any string is accepted (e.g. 42 or burrow). "
            "Omit for a different map every run"
        ),
    )
    parser.add_argument("--iterations", type=int, default=config.ITERATIONS)
    parser.add_argument("--density", type=float, default=config.NOISE_DENSITY)

    automaton = parser.add_argument_group("cellular automaton")
    automaton.add_argument("--radius", type=int, default=config.AUTOMATON_RADIUS)
    automaton.add_argument(
        "--threshold", type=float, default=config.AUTOMATON_THRESHOLD
    )

    walker = parser.add_argument_group("drunk walker")
    walker.add_argument("--walks", type=int, default=config.WALKER_WALK_COUNT)
    walker.add_argument("--steps", type=int, default=config.WALKER_STEPS_PER_WALK)
    walker.add_argument(
        "--room-size",
        type=int,
        nargs=2,
        metavar=("X", "Y"),
        default=(config.WALKER_ROOM_SIZE_X, config.WALKER_ROOM_SIZE_Y),
    )
    walker.add_argument(
        "--prob-room", type=float, default=config.WALKER_PROB_GENERATE_ROOM
    )
    walker.add_argument(
        "--prob-room-increase", type=float, default=config.WALKER_PROB_INCREASE_ROOM
    )
    walker.add_argument(
        "--prob-turn", type=float, default=config.WALKER_PROB_CHANGE_DIRECTION
    )
    walker.add_argument(
        "--prob-turn-increase",
        type=float,
        default=config.WALKER_PROB_INCREASE_CHANGE,
    )
    walker.add_argument(
        "--vary",
        action="store_true",
        help="Re-draw walk and step counts on every iteration",
    )

    parser.add_argument("-v", "--verbose", action="store_true")
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.width < 1 or args.height < 1:
        parser.error(f"map must be at least 1x1, got {args.width}x{args.height}")

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format=config.LOG_FORMAT,
    )

    room_x, room_y = args.room_size
    try:
        automaton_params = AutomatonParams(radius=args.radius, threshold=args.threshold)
        walker_params = WalkerParams(
            walk_count=args.walks,
            steps_per_walk=args.steps,
            room_size_x=room_x,
            room_size_y=room_y,
            prob_generate_room=args.prob_room,
            prob_increase_room=args.prob_room_increase,
            prob_change_direction=args.prob_turn,
            prob_increase_change=args.prob_turn_increase,
        )
    except ValueError as e:
        parser.error(str(e))

    def print_iteration(ctx: GenerationContext) -> None:
        if ctx.iteration == 0:
            print("\nInitial map state:")
        else:
            print(f"\n--- Iteration {ctx.iteration} ---")
        print(format_map(ctx.grid))

    try:
        generator = create_cave_pipeline(
            args.width,
            args.height,
            seed=args.seed,
            iterations=args.iterations,
            automaton_params=automaton_params,
            walker_params=walker_params,
            noise_density=args.density,
            vary=args.vary,
            on_iteration=print_iteration,
            report_initial=True,
        )
    except ValueError as e:
        parser.error(str(e))

    print("--- CELLULAR AUTOMATA AND DRUNK AGENT SIMULATION ---")
    generator.generate()

    print("\n--- Simulation Finished ---")
    return 0


if __name__ == "__main__":
    sys.exit(main())
