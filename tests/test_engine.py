"""Tests for SchedulerEnv."""

import pytest

from schedsim.data_models.transition import Transition
from schedsim.environment.engine import SchedulerEnv
from schedsim.environment.loader import WorkloadConfig
from schedsim.policies import FCFSPolicy


def run_to_end(env: SchedulerEnv, limit: int = 1000) -> int:
    """Step until done; return number of ticks."""
    env.reset()
    steps = 0
    while not env.done:
        env.step()
        steps += 1
        assert steps <= limit, "simulation did not terminate"
    return steps


@pytest.fixture
def single_io_env():
    """One process: CPU 5, I/O 3, CPU 2."""
    config = WorkloadConfig(name="single_io", processes=[[5, 3, 2]])
    return SchedulerEnv(config, FCFSPolicy())


@pytest.fixture
def two_process_env():
    """Two CPU-only processes: P1 = 3, P2 = 2."""
    config = WorkloadConfig(name="two", processes=[[3], [2]])
    return SchedulerEnv(config, FCFSPolicy())


def test_env_initialization(single_io_env):
    """Test environment initialization."""
    env = single_io_env
    assert env.clock == 0
    assert env.cpu_busy_time == 0
    assert env.processes == []


def test_env_reset(two_process_env):
    """Test all processes start ready in table order."""
    obs = two_process_env.reset()

    assert obs.time == 0
    assert obs.cpu_queue == [0, 1]
    assert obs.io_queue == []
    assert obs.completed == []
    assert all(p.stats.response_time == -1 for p in two_process_env.processes)


def test_first_tick_serves_head(two_process_env):
    """Test the head is served and the rest wait."""
    env = two_process_env
    env.reset()

    obs, done = env.step()

    p1, p2 = env.processes
    assert obs.served == 0
    assert obs.time == 1
    assert not done
    assert p1.current_task.duration == 2
    assert p1.stats.burst_time == 1
    assert p1.stats.response_time == 0
    assert p2.stats.waiting_time == 1
    assert env.cpu_busy_time == 1


def test_single_process_with_io(single_io_env):
    """Test CPU 5, I/O 3, CPU 2 under FCFS."""
    env = single_io_env
    env.reset()

    for _ in range(5):
        obs, _ = env.step()
    # CPU burst finished at the tick boundary 5, now in I/O
    assert obs.time == 5
    assert obs.cpu_queue == []
    assert obs.io_queue == [0]

    for _ in range(3):
        obs, _ = env.step()
    # I/O finished on tick 7, back in the ready queue for tick 8
    assert obs.time == 8
    assert obs.cpu_queue == [0]
    assert obs.io_returns == [0]

    for _ in range(2):
        obs, done = env.step()
    assert done
    assert obs.finished_this_tick == [0]

    stats = env.processes[0].stats
    assert stats.waiting_time == 0
    assert stats.burst_time == 7
    assert stats.io_time == 3
    assert stats.completion_time == 10
    assert stats.response_time == 0
    assert env.cpu_busy_time == 7
    assert env.clock == 10
    assert len(env.processes[0].done) == 3


def test_two_processes_fcfs(two_process_env):
    """Test P1 then P2 with P2 waiting for P1's burst."""
    env = two_process_env
    steps = run_to_end(env)

    p1, p2 = env.processes
    assert steps == 5
    assert p1.stats.completion_time == 3
    assert p1.stats.response_time == 0
    assert p1.stats.waiting_time == 0
    assert p2.stats.waiting_time == 3
    assert p2.stats.response_time == 3
    assert p2.stats.completion_time == 5
    assert env.completed == [0, 1]


def test_trailing_io_burst_finishes_process():
    """Test a process whose last task is I/O finishes from the I/O queue."""
    env = SchedulerEnv(WorkloadConfig(processes=[[2, 3]]), FCFSPolicy())
    run_to_end(env)

    stats = env.processes[0].stats
    assert stats.burst_time == 2
    assert stats.io_time == 3
    assert stats.completion_time == 5
    assert env.completed == [0]
    assert env.cpu_queue == []
    assert env.io_queue == []


def test_parallel_io():
    """Test several processes make I/O progress in the same tick."""
    env = SchedulerEnv(WorkloadConfig(processes=[[1, 4, 1], [1, 4, 1]]), FCFSPolicy())
    env.reset()

    env.step()  # P1 CPU
    env.step()  # P2 CPU, P1 I/O
    obs, _ = env.step()  # both in I/O

    assert obs.io_queue == [0, 1]
    assert env.processes[0].stats.io_time == 2
    assert env.processes[1].stats.io_time == 1


def test_empty_workload_is_done_immediately():
    """Test a workload without processes needs no ticks."""
    env = SchedulerEnv(WorkloadConfig(processes=[]), FCFSPolicy())
    obs = env.reset()

    assert env.done
    assert obs.cpu_queue == []
    assert env.clock == 0


def test_reset_after_run(single_io_env):
    """Test reset restores the initial state in place."""
    env = single_io_env
    run_to_end(env)
    process = env.processes[0]

    obs = env.reset()

    assert env.processes[0] is process
    assert env.clock == 0
    assert env.cpu_busy_time == 0
    assert obs.cpu_queue == [0]
    assert process.stats.burst_time == 0
    assert [t.duration for t in process.tasks] == [5, 3, 2]


def test_transition_for_non_head_is_ignored(two_process_env):
    """Test a transition naming a non-head process changes nothing."""
    env = two_process_env
    env.reset()

    env.apply_transition(Transition(type="demote", process=1, priority=2))

    assert env.cpu_queue == [0, 1]
    assert env.io_queue == []


def test_complete_unfinished_burst_is_ignored(two_process_env):
    """Test completing a burst that still has time left changes nothing."""
    env = two_process_env
    env.reset()

    env.apply_transition(Transition(type="complete_burst", process=0))

    assert env.cpu_queue == [0, 1]
    assert env.processes[0].done == []


def test_transition_on_empty_queue_is_ignored():
    """Test queue underrun is a no-op."""
    env = SchedulerEnv(WorkloadConfig(processes=[]), FCFSPolicy())
    env.reset()

    env.apply_transition(Transition(type="complete_burst", process=0))

    assert env.cpu_queue == []


def test_reorder_must_be_permutation(two_process_env):
    """Test reorders that drop or add processes are ignored."""
    env = two_process_env
    env.reset()

    env.apply_transition(Transition(type="reorder", order=[1]))
    assert env.cpu_queue == [0, 1]

    env.apply_transition(Transition(type="reorder", order=[1, 0]))
    assert env.cpu_queue == [1, 0]


def test_queues_never_overlap():
    """Test queue disjointness and conservation on the default dataset."""
    env = SchedulerEnv(WorkloadConfig.from_builtin(), FCFSPolicy())
    env.reset()
    everyone = set(range(8))

    while not env.done:
        env.step()
        cpu, io, done = set(env.cpu_queue), set(env.io_queue), set(env.completed)
        assert not cpu & io
        assert cpu | io | done == everyone
        assert not (cpu | io) & done


def test_state_summary(two_process_env):
    """Test state summary."""
    env = two_process_env
    env.reset()
    env.step()

    summary = env.get_state_summary()
    assert summary["time"] == 1
    assert summary["cpu_busy_time"] == 1
    assert summary["ready"] == 2
    assert summary["io_wait"] == 0
    assert summary["completed"] == 0
    assert summary["total_processes"] == 2
