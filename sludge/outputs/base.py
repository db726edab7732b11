"""Base output strategy interface for calculator results."""

from pathlib import Path
from typing import Protocol

import pandas as pd


class OutputStrategy(Protocol):
    """Protocol for output strategies that serialize assessment DataFrames.

    Design note: Output strategies are separate from assessments. Assessments
    return a dict of DataFrames and the caller decides when/where to write
    them using an appropriate strategy.
    """

    def write(self, frames: dict[str, pd.DataFrame], output_dir: Path, prefix: str) -> list[Path]:
        """Write assessment DataFrames to files.

        Args:
            frames: Result sets keyed by name (e.g. "results", "sensitivity_fcr")
            output_dir: Directory where files should be written
            prefix: File name prefix, typically the calculator mode

        Returns:
            Paths of the written files, in the order of frames

        Raises:
            IOError: If writing fails
            ValueError: If frames cannot be serialized
        """
        ...
