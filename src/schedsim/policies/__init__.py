"""schedsim scheduling policies.

FCFS, SJF and MLFQ share one tick engine and differ only in the queue
transitions they request after each tick.
"""

from typing import List

from schedsim.policies.base import Policy
from schedsim.policies.fcfs import FCFSPolicy
from schedsim.policies.sjf import SJFPolicy
from schedsim.policies.mlfq import MLFQPolicy

POLICY_CLASSES = {
    "fcfs": FCFSPolicy,
    "sjf": SJFPolicy,
    "mlfq": MLFQPolicy,
}

AVAILABLE_POLICIES = list(POLICY_CLASSES)


def list_policies() -> List[str]:
    """
    Return list of all available policy names.

    Returns:
        List of policy names, in report order
    """
    return AVAILABLE_POLICIES.copy()


def get_policy(name: str, **kwargs) -> Policy:
    """
    Build a policy by name.

    Args:
        name: Policy name (case-insensitive): fcfs, sjf or mlfq
        **kwargs: Constructor arguments (MLFQ settings)

    Returns:
        Policy instance

    Raises:
        ValueError: If the policy name is unknown
    """
    key = name.strip().lower()
    if key not in POLICY_CLASSES:
        raise ValueError(
            f"Unknown policy: '{name}'. "
            f"Available policies: {', '.join(AVAILABLE_POLICIES)}"
        )
    return POLICY_CLASSES[key](**kwargs)


__all__ = [
    "Policy",
    "FCFSPolicy",
    "SJFPolicy",
    "MLFQPolicy",
    "AVAILABLE_POLICIES",
    "list_policies",
    "get_policy",
]
