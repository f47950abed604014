"""Tests for the run_simulation API and the CLI."""

import json

import pytest

from schedsim import cli
from schedsim.api import resolve_workload, run_simulation
from schedsim.environment.loader import WorkloadConfig


def test_resolve_workload_variants(tmp_path):
    """Test every supported workload reference resolves."""
    assert resolve_workload().name == "cop4600"
    assert resolve_workload("single_io").processes == [[5, 3, 2]]
    assert resolve_workload([[4, 0]]).processes == [[4]]

    config = WorkloadConfig(name="given", processes=[[1]])
    assert resolve_workload(config) is config

    workload_file = tmp_path / "from_file.json"
    workload_file.write_text(json.dumps({"processes": [[2, 2, 2]]}))
    loaded = resolve_workload(str(workload_file))
    assert loaded.name == "from_file"
    assert loaded.processes == [[2, 2, 2]]


def test_resolve_workload_missing_file(tmp_path):
    """Test a missing workload file is reported."""
    with pytest.raises(FileNotFoundError):
        resolve_workload(str(tmp_path / "missing.json"))


def test_run_simulation_basic():
    """Test a programmatic run over a custom workload."""
    results = run_simulation(workload=[[5], [2], [3]], policies=["fcfs", "sjf"])

    assert results["workload"] == "custom"
    assert [r["policy"] for r in results["results"]] == ["FCFS", "SJF"]
    assert results["consistent"] is True
    assert results["best"]["avg_waiting_time"] == "SJF"
    assert "output_file" not in results

    fcfs = results["comparison"].get("fcfs")
    assert fcfs.avg_waiting_time == 4


def test_run_simulation_mlfq_settings():
    """Test MLFQ settings are passed through."""
    results = run_simulation(workload="long_cpu_burst", policies=["mlfq"], time_quantum=2)

    # Promotions at burst 4, 6 and every demotion costs one waiting tick
    row = results["results"][0]["processes"][0]
    assert row["burst_time"] == 16
    assert row["waiting_time"] == 2


def test_run_simulation_invalid_mlfq_settings():
    """Test inconsistent MLFQ settings are rejected."""
    with pytest.raises(ValueError):
        run_simulation(policies=["mlfq"], start_priority=5)


def test_run_simulation_unknown_policy():
    """Test unknown policies are rejected."""
    with pytest.raises(ValueError, match="Unknown policy"):
        run_simulation(policies=["lottery"])


def test_run_simulation_saves_results(tmp_path):
    """Test results are written to the given path."""
    output = tmp_path / "out" / "results.json"

    results = run_simulation(
        workload="two_cpu_bound",
        policies=["fcfs"],
        output_path=str(output),
        save_results=True,
    )

    assert results["output_file"] == str(output)
    with open(output) as f:
        data = json.load(f)
    assert data["config"]["policies"] == ["FCFS"]
    assert data["config"]["workload"]["processes"] == [[3], [2]]
    assert data["results"][0]["total_time"] == 5


def test_cli_run_text(capsys):
    """Test the run command prints the report table."""
    cli.main(["run", "--workload", "single_io", "--policies", "fcfs", "--quiet"])

    out = capsys.readouterr().out
    assert "[FCFS]" in out
    assert "P1 | 0 | 10 | 0" in out
    assert "CPU Utilization: 70%" in out


def test_cli_run_json(capsys):
    """Test the run command JSON output."""
    cli.main(["run", "--workload", "two_cpu_bound", "--format", "json"])

    data = json.loads(capsys.readouterr().out)
    assert [r["policy"] for r in data["results"]] == ["FCFS", "SJF", "MLFQ"]


def test_cli_unknown_policy_exits():
    """Test errors exit with status 1."""
    with pytest.raises(SystemExit) as exc_info:
        cli.main(["run", "--policies", "lottery"])
    assert exc_info.value.code == 1


def test_cli_parse_policies():
    """Test policy selection parsing."""
    assert cli.parse_policies(None) == ["fcfs", "sjf", "mlfq"]
    assert cli.parse_policies("all") == ["fcfs", "sjf", "mlfq"]
    assert cli.parse_policies("MLFQ, fcfs") == ["mlfq", "fcfs"]
    with pytest.raises(ValueError):
        cli.parse_policies(" , ")


def test_cli_list_commands(capsys):
    """Test the listing commands."""
    cli.main(["list-policies"])
    out = capsys.readouterr().out
    assert "fcfs" in out and "sjf" in out and "mlfq" in out

    cli.main(["list-workloads"])
    out = capsys.readouterr().out
    assert "cop4600" in out
    assert "(default)" in out


def test_cli_no_command_exits():
    """Test running without a command prints help and exits 1."""
    with pytest.raises(SystemExit) as exc_info:
        cli.main([])
    assert exc_info.value.code == 1
