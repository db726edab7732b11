"""CSV output strategy for calculator results.

Writes one CSV per result set so each sensitivity sweep can be loaded
directly by a charting tool.
"""

import logging
from pathlib import Path

import pandas as pd

logger = logging.getLogger(__name__)


class CSVOutputStrategy:
    """Writes assessment DataFrames to CSV files named <prefix>_<key>.csv."""

    def write(self, frames: dict[str, pd.DataFrame], output_dir: Path, prefix: str) -> list[Path]:
        """Write each DataFrame to its own CSV file.

        Args:
            frames: Result sets keyed by name
            output_dir: Directory where CSV files should be written (created if missing)
            prefix: File name prefix

        Returns:
            Paths of the written CSV files

        Raises:
            IOError: If writing fails
            ValueError: If there is nothing to write
        """
        if not frames:
            raise ValueError("Cannot write CSV: no result sets")

        output_dir.mkdir(parents=True, exist_ok=True)

        paths = []
        for name, df in frames.items():
            output_path = output_dir / f"{prefix}_{name}.csv"
            df.to_csv(output_path, index=False)
            logger.debug(f"Wrote {output_path} ({len(df)} rows)")
            paths.append(output_path)

        logger.info(f"Wrote {len(paths)} CSV file(s) to {output_dir}")
        return paths
