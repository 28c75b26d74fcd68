"""Rule-based procedural map generation.

Combines a cellular-automata smoothing pass with a drunk-walk corridor
carver to grow cave-like occupancy grids.
"""

__version__ = "0.1.0"
