"""Tests for InvariantChecker."""

import pytest

from schedsim.environment.engine import SchedulerEnv
from schedsim.environment.loader import WorkloadConfig
from schedsim.policies import FCFSPolicy, MLFQPolicy
from schedsim.validation.checker import InvariantChecker


@pytest.fixture
def env():
    """Three-process environment right after reset."""
    env = SchedulerEnv(WorkloadConfig(processes=[[3, 2, 1], [2], [4]]), FCFSPolicy())
    env.reset()
    return env


def test_clean_state_has_no_violations(env):
    """Test a freshly reset environment passes every check."""
    assert InvariantChecker().check(env) == []


def test_clean_run_has_no_violations(env):
    """Test a full run passes every check on every tick."""
    checker = InvariantChecker()
    while not env.done:
        env.step()
        assert checker.check(env) == []


def test_queue_overlap_detected(env):
    """Test a process in both queues is reported."""
    env.io_queue.append(env.cpu_queue[0])

    violations = InvariantChecker().check(env)

    assert [v.type for v in violations] == ["queue_overlap"]
    assert violations[0].details["processes"] == [0]


def test_queue_duplicate_detected(env):
    """Test a process listed twice in one queue is reported."""
    env.cpu_queue.append(1)

    types = [v.type for v in InvariantChecker().check(env)]

    assert "queue_duplicate" in types


def test_lost_process_detected(env):
    """Test a process missing from every queue is reported."""
    env.cpu_queue.remove(2)

    violations = InvariantChecker().check(env)

    assert [v.type for v in violations] == ["lost_process"]
    assert violations[0].details["processes"] == [2]


def test_response_change_detected(env):
    """Test a response time changing after it was set is reported."""
    checker = InvariantChecker()
    env.step()
    assert checker.check(env) == []

    env.processes[0].stats.response_time = 5
    violations = checker.check(env)

    assert [v.type for v in violations] == ["response_changed"]
    assert violations[0].details == {"process": 1, "old": 0, "new": 5}


def test_priority_decrease_detected():
    """Test an MLFQ priority going down is reported."""
    env = SchedulerEnv(WorkloadConfig(processes=[[16]]), MLFQPolicy())
    env.reset()
    checker = InvariantChecker()
    checker.check(env)

    env.processes[0].mlfq.priority = 2
    assert checker.check(env) == []

    env.processes[0].mlfq.priority = 1
    types = [v.type for v in checker.check(env)]
    assert types == ["priority_decreased"]


def test_priority_overflow_detected():
    """Test an MLFQ priority above the maximum is reported."""
    env = SchedulerEnv(WorkloadConfig(processes=[[16]]), MLFQPolicy())
    env.reset()
    env.processes[0].mlfq.priority = 4

    types = [v.type for v in InvariantChecker().check(env)]
    assert types == ["priority_overflow"]


def test_checker_reset_forgets_history(env):
    """Test reset clears the remembered response times."""
    checker = InvariantChecker()
    env.step()
    checker.check(env)

    env.reset()
    checker.reset()
    assert checker.check(env) == []
