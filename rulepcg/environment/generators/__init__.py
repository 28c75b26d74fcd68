"""Map generation algorithms for rulepcg.

Two grid transformations form the core:
- GridAutomaton: One cellular automata smoothing step
- DrunkWalker: Random walks that carve corridors and rooms

Pipeline-based generation composes them into iterative runs:
- PipelineGenerator: Applies GenerationLayers to a shared context
- create_pipeline: Pre-configured pipelines by name ("cave", "corridors")
"""

from .automaton import AutomatonParams, GridAutomaton, automaton_step
from .base import BaseMapGenerator, GeneratedMapData
from .drunk_walker import (
    DrunkWalker,
    Heading,
    WalkerParams,
    WalkerState,
    carve_room,
    drunk_walk,
)
from .pipeline import (
    CellularAutomataLayer,
    DrunkWalkLayer,
    GenerationContext,
    GenerationLayer,
    IterationLayer,
    NoiseFillLayer,
    PipelineGenerator,
    create_cave_pipeline,
    create_pipeline,
)

__all__ = [
    "AutomatonParams",
    "BaseMapGenerator",
    "CellularAutomataLayer",
    "DrunkWalkLayer",
    "DrunkWalker",
    "GeneratedMapData",
    "GenerationContext",
    "GenerationLayer",
    "GridAutomaton",
    "Heading",
    "IterationLayer",
    "NoiseFillLayer",
    "PipelineGenerator",
    "WalkerParams",
    "WalkerState",
    "automaton_step",
    "carve_room",
    "create_cave_pipeline",
    "create_pipeline",
    "drunk_walk",
]
