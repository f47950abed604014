"""schedsim - Discrete-time CPU scheduling simulator (FCFS, SJF, MLFQ)."""

# Data models
from schedsim.data_models.task import Task
from schedsim.data_models.process import MLFQPriorityDescriptor, Process, ProcessStatistics
from schedsim.data_models.transition import Transition
from schedsim.data_models.observation import Observation
from schedsim.data_models.violation import Violation
from schedsim.data_models.result import ComparisonResult, ProcessReport, RunResult

# Environment
from schedsim.environment.engine import SchedulerEnv
from schedsim.environment.loader import WorkloadConfig, WorkloadLoader, load_processes

# Policies
from schedsim.policies import (
    AVAILABLE_POLICIES,
    FCFSPolicy,
    MLFQPolicy,
    Policy,
    SJFPolicy,
    get_policy,
    list_policies,
)

# Validation
from schedsim.validation.checker import InvariantChecker

# Metrics
from schedsim.metrics.accumulator import StatisticsAccumulator

# IO
from schedsim.io.formatter import ReportFormatter

# Runners
from schedsim.runner.simulation import SimulationRunner
from schedsim.runner.comparison import ComparisonRunner

# API
from schedsim.api import run_simulation

# Workloads
from schedsim.workloads import AVAILABLE_WORKLOADS, get_workload, list_workloads

__version__ = "0.1.0"

__all__ = [
    # Data models
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
    # Environment
    "SchedulerEnv",
    "WorkloadConfig",
    "WorkloadLoader",
    "load_processes",
    # Policies
    "Policy",
    "FCFSPolicy",
    "SJFPolicy",
    "MLFQPolicy",
    "AVAILABLE_POLICIES",
    "get_policy",
    "list_policies",
    # Validation
    "InvariantChecker",
    # Metrics
    "StatisticsAccumulator",
    # IO
    "ReportFormatter",
    # Runners
    "SimulationRunner",
    "ComparisonRunner",
    # API
    "run_simulation",
    # Workloads
    "AVAILABLE_WORKLOADS",
    "get_workload",
    "list_workloads",
]
