"""Assessment execution infrastructure.

This package provides the simple runner for executing assessments:
- run_assessment(): Main entry point for running any registered calculator mode

Assessments follow a simple pattern:
- Constructor: __init__(snapshot, config)
- Run method: run() -> dict[str, DataFrame]
"""

from sludge.runner.runner import run_assessment

__all__ = [
    "run_assessment",
]
