"""Generation layers for the pipeline map generator.

Each layer transforms the GenerationContext in a specific way:
- Terrain layers: Seed the grid with noise and smooth it
- Corridor layers: Carve paths and rooms with a drunk walker
- Iteration layers: Repeat other layers a fixed number of times
"""

from .corridors import DrunkWalkLayer
from .iteration import IterationLayer
from .terrain import CellularAutomataLayer, NoiseFillLayer

__all__ = [
    "CellularAutomataLayer",
    "DrunkWalkLayer",
    "IterationLayer",
    "NoiseFillLayer",
]
