"""Calculator assessments.

Each module in this package runs one calculator mode end to end
(current result plus its sensitivity sweeps) following the pattern:
- Constructor: __init__(snapshot, config)
- Run method: run() -> dict[str, DataFrame]
"""
