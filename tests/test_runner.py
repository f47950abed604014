"""Tests for SimulationRunner and ComparisonRunner."""

import json

import pytest

from schedsim.config import TRACE_FILENAME
from schedsim.environment.engine import SchedulerEnv
from schedsim.environment.loader import WorkloadConfig
from schedsim.policies import FCFSPolicy, MLFQPolicy
from schedsim.runner.comparison import ComparisonRunner
from schedsim.runner.simulation import SimulationRunner


@pytest.fixture
def dataset():
    """The built-in eight-process dataset."""
    return WorkloadConfig.from_builtin()


def test_simulation_runner_single_io():
    """Test a full run of CPU 5, I/O 3, CPU 2."""
    env = SchedulerEnv(WorkloadConfig(name="single_io", processes=[[5, 3, 2]]), FCFSPolicy())

    result = SimulationRunner(env).run()

    assert result.total_time == 10
    assert result.cpu_utilization == pytest.approx(70.0)
    assert result.processes[0].turnaround_time == 10
    assert result.consistent
    assert result.execution_time is not None


def test_simulation_runner_is_reusable():
    """Test running the same runner twice gives the same result."""
    env = SchedulerEnv(WorkloadConfig(processes=[[3, 2, 4], [5]]), FCFSPolicy())
    runner = SimulationRunner(env)

    first = runner.run()
    second = runner.run()

    assert first.processes == second.processes
    assert first.total_time == second.total_time
    assert runner.metrics.ticks_recorded == second.ticks


def test_simulation_runner_writes_trace(tmp_path):
    """Test the per-tick trace is saved."""
    env = SchedulerEnv(WorkloadConfig(name="two", processes=[[3], [2]]), FCFSPolicy())

    result = SimulationRunner(env).run(trace_dir=tmp_path)

    trace_file = tmp_path / "fcfs" / TRACE_FILENAME
    assert trace_file.exists()
    with open(trace_file) as f:
        trace = json.load(f)

    assert trace["policy"] == "FCFS"
    assert trace["workload"] == "two"
    assert trace["consistent"] is True
    # Initial observation plus one per tick
    assert len(trace["ticks"]) == result.ticks + 1
    assert trace["ticks"][0]["cpu_queue"] == [0, 1]
    assert trace["ticks"][-1]["completed"] == [0, 1]


def test_simulation_runner_empty_workload():
    """Test an empty workload runs zero ticks."""
    env = SchedulerEnv(WorkloadConfig(processes=[]), FCFSPolicy())

    result = SimulationRunner(env).run()

    assert result.ticks == 0
    assert result.total_time == 0
    assert result.cpu_utilization == 0.0


def test_comparison_runner_default_policies(dataset):
    """Test all three policies run on the dataset with no violations."""
    comparison = ComparisonRunner(dataset).run_all()

    assert comparison.workload == "cop4600"
    assert [r.policy for r in comparison.results] == ["FCFS", "SJF", "MLFQ"]
    for result in comparison.results:
        assert result.consistent, result.violations
        assert len(result.processes) == 8
        assert result.total_time == result.ticks
        for row in result.processes:
            assert row.turnaround_time == row.waiting_time + row.burst_time + row.io_time


def test_comparison_runs_are_independent(dataset):
    """Test a policy gives the same result alone and after other runs."""
    alone = ComparisonRunner(dataset, ["mlfq"]).run_all().results[0]
    after = ComparisonRunner(dataset, ["fcfs", "sjf", "mlfq"]).run_all().get("mlfq")

    assert alone.processes == after.processes
    assert alone.cpu_utilization == after.cpu_utilization


def test_comparison_runner_accepts_instances(dataset):
    """Test policies can be passed as configured instances."""
    runner = ComparisonRunner(dataset, [MLFQPolicy(time_quantum=2), "fcfs"])
    comparison = runner.run_all()

    assert [r.policy for r in comparison.results] == ["MLFQ", "FCFS"]


def test_comparison_runner_unknown_policy(dataset):
    """Test unknown policy names are rejected."""
    with pytest.raises(ValueError, match="Unknown policy"):
        ComparisonRunner(dataset, ["lottery"])
