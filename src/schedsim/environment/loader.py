"""Workload loader for schedsim workload files."""

import json
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, field_validator

from schedsim.config import DEFAULT_WORKLOAD, MAX_TASKS_PER_PROCESS
from schedsim.data_models.process import Process
from schedsim.workloads import get_workload

logger = logging.getLogger("schedsim.environment.loader")


class WorkloadConfig(BaseModel):
    """Validated workload: one row of burst lengths per process."""

    name: str = Field(default="custom", description="Workload name used in reports")
    processes: list[list[int]] = Field(
        default_factory=list,
        description="Per-process burst lengths, alternating CPU and I/O, CPU first",
    )

    @field_validator("processes", mode="before")
    @classmethod
    def validate_rows(cls, v: Any) -> list[list[int]]:
        """Apply the row terminator rule and table bounds."""
        if not isinstance(v, list):
            raise ValueError("processes must be a list of rows")

        rows: list[list[int]] = []
        for i, raw_row in enumerate(v):
            if not isinstance(raw_row, list):
                raise ValueError(f"Row {i} must be a list of integers")

            row: list[int] = []
            for value in raw_row[:MAX_TASKS_PER_PROCESS]:
                if isinstance(value, bool) or not isinstance(value, int):
                    raise ValueError(f"Row {i} contains a non-integer value: {value!r}")
                # A non-positive value ends the row
                if value <= 0:
                    break
                row.append(value)

            if not row:
                raise ValueError(f"Row {i} has no tasks (first value must be a positive CPU burst)")
            rows.append(row)

        return rows

    @classmethod
    def from_builtin(cls, name: str | None = None) -> "WorkloadConfig":
        """Build a config from the built-in workload catalog."""
        name = name or DEFAULT_WORKLOAD
        return cls(name=name, processes=get_workload(name))

    @property
    def process_count(self) -> int:
        return len(self.processes)


def load_processes(config: WorkloadConfig, processes: list[Process]) -> list[Process]:
    """
    Reset a process table in place from a workload.

    Existing Process objects are reused; the table only grows or shrinks
    when the workload has a different number of rows.

    Args:
        config: Validated workload
        processes: Process table to reset (mutated)

    Returns:
        The same list, now holding one freshly reset process per row
    """
    if len(processes) > config.process_count:
        del processes[config.process_count:]
    while len(processes) < config.process_count:
        processes.append(Process(index=len(processes)))

    for index, (process, row) in enumerate(zip(processes, config.processes)):
        process.index = index
        process.reset(row)

    return processes


class WorkloadLoader:
    """Loads and validates schedsim workload files."""

    def __init__(self, workloads_dir: str | Path = "workloads") -> None:
        """
        Initialize the workload loader.

        Args:
            workloads_dir: Path to the workloads directory
        """
        self.workloads_dir = Path(workloads_dir)
        if not self.workloads_dir.exists():
            raise ValueError(f"Workloads directory not found: {self.workloads_dir}")

    def load(self, path: str | Path) -> WorkloadConfig:
        """
        Load and validate a workload JSON file.

        Args:
            path: Path to the workload file (absolute or relative to workloads_dir)

        Returns:
            Validated WorkloadConfig object

        Raises:
            FileNotFoundError: If workload file doesn't exist
            pydantic.ValidationError: If workload file is invalid
            json.JSONDecodeError: If JSON is malformed
        """
        workload_path = Path(path)

        if not workload_path.is_absolute() and not workload_path.exists():
            workload_path = self.workloads_dir / workload_path

        if not workload_path.exists():
            raise FileNotFoundError(f"Workload file not found: {workload_path}")

        with open(workload_path) as f:
            raw_config = json.load(f)

        # Files without a name are named after themselves
        if isinstance(raw_config, dict):
            raw_config.setdefault("name", workload_path.stem)

        config = WorkloadConfig.model_validate(raw_config)
        logger.debug(f"Loaded workload '{config.name}' with {config.process_count} processes")
        return config

    def list_workloads(self) -> list[Path]:
        """
        List all workload files in the workloads directory.

        Returns:
            Sorted list of paths to workload files
        """
        return sorted(self.workloads_dir.rglob("*.json"))
