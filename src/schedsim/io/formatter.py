"""Report formatter for converting run results to text."""

import json

from schedsim.data_models.result import ComparisonResult, RunResult


class ReportFormatter:
    """
    Converts RunResult objects to report text.

    Format includes:
    - Policy header, e.g. [FCFS]
    - One row per process: waiting, turnaround and response time
    - Column averages
    - Total time and CPU utilization
    """

    def format(self, result: RunResult) -> str:
        """
        Convert a run result to the report table.

        Args:
            result: RunResult object

        Returns:
            Report text
        """
        lines = []

        lines.append("")
        lines.append(f"[{result.policy}]")
        lines.append("P  | Tw  | Ttr | Tr")
        lines.append("-" * 21)

        for row in result.processes:
            lines.append(
                f"P{row.process} | {row.waiting_time} | "
                f"{row.turnaround_time} | {row.response_time}"
            )

        lines.append("-" * 21)
        lines.append(
            f"AVG| {result.avg_waiting_time} | "
            f"{result.avg_turnaround_time} | {result.avg_response_time}"
        )
        lines.append("")

        lines.append(f"Total time needed to complete all processes: {result.total_time}")
        lines.append(f"CPU Utilization: {result.cpu_utilization:g}%")
        lines.append("")

        return "\n".join(lines)

    def format_all(self, comparison: ComparisonResult) -> str:
        """Concatenate the report tables of every run in a comparison."""
        return "\n".join(self.format(result) for result in comparison.results)

    def format_comparison(self, comparison: ComparisonResult) -> str:
        """
        Format a one-row-per-policy summary of a comparison.

        Args:
            comparison: ComparisonResult object

        Returns:
            Summary table text
        """
        lines = []

        lines.append("=" * 70)
        lines.append(f"POLICY COMPARISON: workload {comparison.workload}")
        lines.append("=" * 70)
        lines.append(
            f"{'Policy':<8}{'Avg Tw':>10}{'Avg Ttr':>10}{'Avg Tr':>10}"
            f"{'Total':>10}{'CPU %':>10}{'Ready':>10}"
        )
        lines.append("-" * 70)

        for result in comparison.results:
            lines.append(
                f"{result.policy:<8}{result.avg_waiting_time:>10}"
                f"{result.avg_turnaround_time:>10}{result.avg_response_time:>10}"
                f"{result.total_time:>10}{result.cpu_utilization:>10.2f}"
                f"{result.avg_ready_queue:>10.2f}"
            )

        lines.append("-" * 70)

        if comparison.results:
            best_wait = comparison.best_by("avg_waiting_time")
            best_turnaround = comparison.best_by("avg_turnaround_time")
            best_util = comparison.best_by("cpu_utilization")
            lines.append(f"Lowest avg waiting time:    {best_wait.policy}")
            lines.append(f"Lowest avg turnaround time: {best_turnaround.policy}")
            lines.append(f"Highest CPU utilization:    {best_util.policy}")

        inconsistent = [r.policy for r in comparison.results if not r.consistent]
        if inconsistent:
            lines.append(f"INVARIANT VIOLATIONS in: {', '.join(inconsistent)}")

        lines.append("=" * 70)

        return "\n".join(lines)

    def format_compact(self, comparison: ComparisonResult) -> str:
        """
        Format a comparison as JSON.

        Useful for piping results into other tools.

        Args:
            comparison: ComparisonResult object

        Returns:
            JSON string representation
        """
        return json.dumps(comparison.model_dump(), indent=2)
