"""Required spreading area assessment (land mode)."""

import logging
import time

import pandas as pd

from sludge.calculators import compute_area, sweep_frames
from sludge.config import DEFAULT_CONFIG, CalculatorConfig
from sludge.models.enums import CalculatorMode
from sludge.models.params import ParameterSnapshot

logger = logging.getLogger(__name__)


class LandAssessment:
    """Land mode assessment.

    Derives the agricultural area needed to spread the nitrogen produced by
    the snapshot's target biomass, and charts how that area responds to the
    biomass, sludge TS and FCR.
    """

    mode = CalculatorMode.LAND

    def __init__(self, snapshot: ParameterSnapshot, config: CalculatorConfig | None = None):
        self.snapshot = snapshot
        self.config = config or DEFAULT_CONFIG

    def run(self) -> dict[str, pd.DataFrame]:
        """Run the area calculation and its sweeps.

        Returns:
            Dictionary with:
            - "results": single-row DataFrame of AreaCalculationResults
              (plus the target_biomass it was computed for)
            - "sensitivity_target_biomass", "sensitivity_ts_sludge",
              "sensitivity_fcr": sweep DataFrames with columns x, label, y (y in ha)
        """
        logger.info(f"Running land assessment for {self.snapshot.target_biomass:.0f} kg biomass")
        t_total = time.perf_counter()

        t0 = time.perf_counter()
        results = compute_area(
            self.snapshot.target_biomass,
            self.snapshot.digestate,
            self.snapshot.agronomic,
            self.snapshot.mixture,
            self.snapshot.biomass,
        )
        logger.info(f"[timing] compute_area: {time.perf_counter() - t0:.3f}s")

        if results.required_area_ha == 0 and self.snapshot.target_biomass > 0:
            logger.warning(
                "Required area is 0 for a non-zero biomass; check sludge TS, "
                "inoculum VS and the nitrogen cap"
            )

        t0 = time.perf_counter()
        frames = sweep_frames(self.mode, self.snapshot, self.config.sweeps)
        logger.info(f"[timing] sensitivity sweeps: {time.perf_counter() - t0:.3f}s")

        logger.info(
            f"Land assessment complete in {time.perf_counter() - t_total:.3f}s: "
            f"{results.required_area_ha:.2f} ha"
        )
        row = {"target_biomass": self.snapshot.target_biomass, **results.model_dump()}
        return {"results": pd.DataFrame([row]), **frames}
