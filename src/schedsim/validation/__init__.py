"""schedsim validation utilities.

Runtime checking of queue and statistics invariants.
"""

from schedsim.validation.checker import InvariantChecker

__all__ = [
    "InvariantChecker",
]
