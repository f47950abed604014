"""schedsim runners.

Orchestrates simulation execution for a single policy and for a
side-by-side policy comparison.
"""

from schedsim.runner.simulation import SimulationRunner
from schedsim.runner.comparison import ComparisonRunner

__all__ = [
    "SimulationRunner",
    "ComparisonRunner",
]
