"""schedsim metrics tracking.

Accumulates queue statistics during a run and computes the final report.
"""

from schedsim.metrics.accumulator import StatisticsAccumulator, cpu_utilization, truncating_mean

__all__ = [
    "StatisticsAccumulator",
    "cpu_utilization",
    "truncating_mean",
]
