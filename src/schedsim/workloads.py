"""Built-in workload catalog for schedsim."""

from typing import Dict, List, Optional

from schedsim.config import DEFAULT_WORKLOAD

# Rows alternate CPU burst, I/O burst, CPU burst, ... and always start and
# end with a CPU burst.
BUILTIN_WORKLOADS: Dict[str, List[List[int]]] = {
    "cop4600": [
        [5, 27, 3, 31, 5, 43, 4, 18, 6, 22, 4, 26, 3, 24, 4],
        [4, 48, 5, 44, 7, 42, 12, 37, 9, 76, 4, 41, 9, 31, 7, 43, 8],
        [8, 33, 12, 41, 18, 65, 14, 21, 4, 61, 15, 18, 14, 26, 5, 31, 6],
        [3, 35, 4, 41, 5, 45, 3, 51, 4, 61, 5, 54, 6, 82, 5, 77, 3],
        [16, 24, 17, 21, 5, 36, 16, 26, 7, 31, 13, 28, 11, 21, 6, 13, 3, 11, 4],
        [11, 22, 4, 8, 5, 10, 6, 12, 7, 14, 9, 18, 12, 24, 15, 30, 8],
        [14, 46, 17, 41, 11, 42, 15, 21, 4, 32, 7, 19, 16, 33, 10],
        [4, 14, 5, 33, 6, 51, 14, 73, 16, 87, 6],
    ],
    "single_io": [
        [5, 3, 2],
    ],
    "two_cpu_bound": [
        [3],
        [2],
    ],
    "long_cpu_burst": [
        [16],
    ],
    "io_heavy": [
        [2, 20, 2, 20, 2],
        [3, 15, 3, 15, 3],
        [1, 30, 1],
        [6, 4, 6],
    ],
}

AVAILABLE_WORKLOADS = sorted(BUILTIN_WORKLOADS)


def list_workloads() -> List[str]:
    """
    Return list of all built-in workload names.

    Returns:
        List of workload names
    """
    return AVAILABLE_WORKLOADS.copy()


def get_workload(name: Optional[str] = None) -> List[List[int]]:
    """
    Get a copy of a built-in workload table.

    Args:
        name: Workload name, or None for the default dataset

    Returns:
        List of rows, one per process

    Raises:
        ValueError: If the workload name is unknown
    """
    name = name or DEFAULT_WORKLOAD
    if name not in BUILTIN_WORKLOADS:
        raise ValueError(
            f"Unknown workload: '{name}'. "
            f"Available workloads: {', '.join(AVAILABLE_WORKLOADS)}"
        )
    return [list(row) for row in BUILTIN_WORKLOADS[name]]
