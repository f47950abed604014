"""schedsim simulation environment.

The tick engine and workload loading utilities.
"""

from schedsim.environment.engine import SchedulerEnv
from schedsim.environment.loader import WorkloadConfig, WorkloadLoader, load_processes

__all__ = [
    "SchedulerEnv",
    "WorkloadConfig",
    "WorkloadLoader",
    "load_processes",
]
