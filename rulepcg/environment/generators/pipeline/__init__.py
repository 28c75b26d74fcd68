"""Pipeline-based map generation system.

This package provides a layered architecture for iterative map generation.
Each layer transforms a shared GenerationContext, and the pipeline outputs
GeneratedMapData.

Example usage:
    from rulepcg.environment.generators.pipeline import create_pipeline

    generator = create_pipeline("cave", width=20, height=10, seed=7)
    map_data = generator.generate()

The pipeline can also be assembled manually for custom configurations:
    from rulepcg.environment.generators.pipeline import (
        CellularAutomataLayer,
        DrunkWalkLayer,
        IterationLayer,
        NoiseFillLayer,
        PipelineGenerator,
    )

    generator = PipelineGenerator(
        layers=[
            NoiseFillLayer(density=0.45),
            IterationLayer([CellularAutomataLayer(), DrunkWalkLayer()], 3),
        ],
        map_width=40,
        map_height=20,
    )
"""

from .context import GenerationContext
from .factory import (
    PIPELINE_NAMES,
    create_cave_pipeline,
    create_corridor_pipeline,
    create_pipeline,
)
from .layer import GenerationLayer
from .layers import (
    CellularAutomataLayer,
    DrunkWalkLayer,
    IterationLayer,
    NoiseFillLayer,
)
from .pipeline import PipelineGenerator

__all__ = [
    "PIPELINE_NAMES",
    "CellularAutomataLayer",
    "DrunkWalkLayer",
    "GenerationContext",
    "GenerationLayer",
    "IterationLayer",
    "NoiseFillLayer",
    "PipelineGenerator",
    "create_cave_pipeline",
    "create_corridor_pipeline",
    "create_pipeline",
]
