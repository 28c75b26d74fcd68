"""Factory functions for creating pre-configured pipelines.

Currently implemented:
- "cave": Random noise, then repeated automaton smoothing and drunk walks
- "corridors": Empty grid carved by repeated drunk walks only
"""

from __future__ import annotations

from rulepcg import config
from rulepcg.environment.generators.automaton import AutomatonParams
from rulepcg.environment.generators.drunk_walker import WalkerParams
from rulepcg.types import GridPos, RandomSeed

from .layers import (
    CellularAutomataLayer,
    DrunkWalkLayer,
    IterationLayer,
    NoiseFillLayer,
)
from .layers.iteration import IterationCallback
from .pipeline import PipelineGenerator

PIPELINE_NAMES = ("cave", "corridors")


def create_pipeline(
    name: str,
    width: int,
    height: int,
    seed: RandomSeed = None,
) -> PipelineGenerator:
    """Create a pre-configured pipeline by name.

    Available pipelines:
    - "cave": Noise fill followed by automaton + walker iterations
    - "corridors": Walker iterations over an empty grid

    Args:
        name: Name of the pipeline configuration to use.
        width: Map width in cells.
        height: Map height in cells.
        seed: Optional random seed for deterministic generation.

    Returns:
        A configured PipelineGenerator ready to generate maps.

    Raises:
        ValueError: If the pipeline name is not recognized.
    """
    if name == "cave":
        return create_cave_pipeline(width, height, seed)
    if name == "corridors":
        return create_corridor_pipeline(width, height, seed)
    raise ValueError(f"Unknown pipeline name: {name!r}")


def create_cave_pipeline(
    width: int,
    height: int,
    seed: RandomSeed = None,
    iterations: int | None = None,
    automaton_params: AutomatonParams | None = None,
    walker_params: WalkerParams | None = None,
    walker_start: GridPos | None = None,
    noise_density: float | None = None,
    vary: bool = False,
    on_iteration: IterationCallback | None = None,
    report_initial: bool = False,
) -> PipelineGenerator:
    """Create the cave pipeline.

    The cave pipeline generates:
    1. Random occupied/empty noise (NoiseFillLayer)
    2. ``iterations`` rounds of:
       a. One cellular automata smoothing step (CellularAutomataLayer)
       b. Drunk walks from wherever the walker stopped (DrunkWalkLayer)

    Args:
        width: Map width in cells.
        height: Map height in cells.
        seed: Optional random seed for deterministic generation.
        iterations: Number of rounds. If None, uses config.ITERATIONS.
        automaton_params: Smoothing parameters. Defaults from config.
        walker_params: Walker parameters. Defaults from config.
        walker_start: Walker start cell. Defaults to the grid centre.
        noise_density: Initial occupied fraction. Defaults from config.
        vary: Re-draw walker counts on every round.
        on_iteration: Called with the context after every round.
        report_initial: Also call on_iteration once before the first round.

    Returns:
        A configured PipelineGenerator.
    """
    if iterations is None:
        iterations = config.ITERATIONS
    if noise_density is None:
        noise_density = config.NOISE_DENSITY

    layers = [
        # 1. Random starting state
        NoiseFillLayer(density=noise_density),
        # 2. Smooth, then carve, over and over
        IterationLayer(
            [
                CellularAutomataLayer(automaton_params),
                DrunkWalkLayer(walker_params, start=walker_start, vary=vary),
            ],
            iterations=iterations,
            on_iteration=on_iteration,
            report_initial=report_initial,
        ),
    ]

    return PipelineGenerator(
        layers=layers,
        map_width=width,
        map_height=height,
        seed=seed,
    )


def create_corridor_pipeline(
    width: int,
    height: int,
    seed: RandomSeed = None,
    iterations: int | None = None,
    walker_params: WalkerParams | None = None,
    on_iteration: IterationCallback | None = None,
) -> PipelineGenerator:
    """Create a walker-only pipeline over an initially empty grid."""
    if iterations is None:
        iterations = config.ITERATIONS

    layers = [
        IterationLayer(
            [DrunkWalkLayer(walker_params)],
            iterations=iterations,
            on_iteration=on_iteration,
        ),
    ]

    return PipelineGenerator(
        layers=layers,
        map_width=width,
        map_height=height,
        seed=seed,
    )
