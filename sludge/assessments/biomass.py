"""Sustainable biomass assessment (biomass mode)."""

import logging
import time

import pandas as pd

from sludge.calculators import compute_biomass, sweep_frames
from sludge.config import DEFAULT_CONFIG, CalculatorConfig
from sludge.models.enums import CalculatorMode
from sludge.models.params import ParameterSnapshot

logger = logging.getLogger(__name__)


class BiomassAssessment:
    """Biomass mode assessment.

    Derives the fish biomass a hectare can sustain under the nitrogen cap and
    charts how it responds to the R ratio, sludge TS and FCR.
    """

    mode = CalculatorMode.BIOMASS

    def __init__(self, snapshot: ParameterSnapshot, config: CalculatorConfig | None = None):
        self.snapshot = snapshot
        self.config = config or DEFAULT_CONFIG

    def run(self) -> dict[str, pd.DataFrame]:
        """Run the biomass calculation and its sweeps.

        Returns:
            Dictionary with:
            - "results": single-row DataFrame of CalculationResults
            - "sensitivity_r_ratio", "sensitivity_ts_sludge", "sensitivity_fcr":
              sweep DataFrames with columns x, label, y (y in kg/ha/yr)
        """
        logger.info("Running biomass assessment")
        t_total = time.perf_counter()

        t0 = time.perf_counter()
        results = compute_biomass(
            self.snapshot.digestate,
            self.snapshot.agronomic,
            self.snapshot.mixture,
            self.snapshot.biomass,
        )
        logger.info(f"[timing] compute_biomass: {time.perf_counter() - t0:.3f}s")

        if results.total_biomass == 0:
            logger.warning(
                "Sustainable biomass is 0; check for zero nitrogen content, "
                "inoculum VS, sludge production rate or FCR"
            )

        t0 = time.perf_counter()
        frames = sweep_frames(self.mode, self.snapshot, self.config.sweeps)
        logger.info(f"[timing] sensitivity sweeps: {time.perf_counter() - t0:.3f}s")

        logger.info(
            f"Biomass assessment complete in {time.perf_counter() - t_total:.3f}s: "
            f"{results.total_biomass:.0f} kg/ha/yr"
        )
        return {"results": pd.DataFrame([results.model_dump()]), **frames}
