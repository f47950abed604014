"""schedsim data models.

Core data structures used throughout schedsim for representing tasks,
processes, policy transitions, per-tick observations, violations, and run
results.
"""

from schedsim.data_models.task import Task
from schedsim.data_models.process import MLFQPriorityDescriptor, Process, ProcessStatistics
from schedsim.data_models.transition import Transition
from schedsim.data_models.observation import Observation
from schedsim.data_models.violation import Violation
from schedsim.data_models.result import ComparisonResult, ProcessReport, RunResult

__all__ = [
    "Task",
    "Process",
    "ProcessStatistics",
    "MLFQPriorityDescriptor",
    "Transition",
    "Observation",
    "Violation",
    "ProcessReport",
    "RunResult",
    "ComparisonResult",
]
