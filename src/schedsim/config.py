"""schedsim configuration constants.

This module contains all configuration defaults and constants used throughout schedsim.
Users can override these values by passing parameters to the API functions.
"""

from pathlib import Path


def get_project_root() -> Path:
    """Get the absolute path to the schedsim project root directory.

    The project root is identified by the presence of pyproject.toml.
    This keeps the default results and workloads directories stable
    regardless of where schedsim commands are run from.

    Returns:
        Path: Absolute path to project root directory

    Raises:
        RuntimeError: If pyproject.toml cannot be found
    """
    current = Path(__file__).resolve().parent

    for parent in [current] + list(current.parents):
        if (parent / "pyproject.toml").exists():
            return parent

    # Source checkout without pyproject.toml next to it
    if current.name == "schedsim" and current.parent.name == "src":
        return current.parent.parent

    raise RuntimeError("Could not find schedsim project root (pyproject.toml not found)")


# Results directory - absolute path to ensure single source of truth
RESULTS_DIR = get_project_root() / "results"
"""Absolute path to results directory. Saved run results land here by default."""

DEFAULT_WORKLOADS_DIR = get_project_root() / "workloads"
"""Directory containing workload JSON files."""

DEFAULT_WORKLOAD = "cop4600"
"""Built-in workload used when none is given."""

# Workload table bounds
MAX_TASKS_PER_PROCESS = 50
"""Maximum values per workload row (CPU and I/O bursts combined)."""

DEFAULT_PROCESS_COUNT = 8
"""Number of processes in the built-in dataset."""

# MLFQ settings
DEFAULT_TIME_QUANTUM = 5
"""Ticks per MLFQ priority level used in the promotion threshold."""

DEFAULT_MAX_PRIORITY = 3
"""Highest MLFQ priority level a process can reach."""

DEFAULT_START_PRIORITY = 1
"""MLFQ priority level every process starts at."""

# Policies
DEFAULT_POLICIES = ["fcfs", "sjf", "mlfq"]
"""Policies run when none are requested, in report order."""

# Output settings
DEFAULT_RESULTS_FILENAME_PATTERN = "schedsim_results_{timestamp}.json"
"""Pattern for auto-generated result filenames. {timestamp} will be replaced."""

TRACE_FILENAME = "trace.json"
"""Per-tick trace file written inside a trace directory."""
