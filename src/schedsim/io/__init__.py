"""schedsim input/output utilities.

Rendering of run results as report tables and JSON.
"""

from schedsim.io.formatter import ReportFormatter

__all__ = [
    "ReportFormatter",
]
