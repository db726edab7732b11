"""Assessment execution

This module provides a runner for the calculator mode assessments.
"""

import logging

import pandas as pd

from sludge.assessments.biomass import BiomassAssessment
from sludge.assessments.land import LandAssessment
from sludge.config import CalculatorConfig
from sludge.models.enums import CalculatorMode
from sludge.models.params import ParameterSnapshot

logger = logging.getLogger(__name__)

# Single-row frame of headline results every assessment must return
RESULTS_KEY = "results"


ASSESSMENT_TYPES: dict[str, type] = {
    CalculatorMode.BIOMASS.value: BiomassAssessment,
    CalculatorMode.LAND.value: LandAssessment,
}


def run_assessment(
    mode: CalculatorMode | str,
    snapshot: ParameterSnapshot,
    config: CalculatorConfig | None = None,
) -> dict[str, pd.DataFrame]:
    """Run a calculator assessment and return results as DataFrames.

    This is the main entry point for executing assessments. It looks up the
    assessment class for the mode, instantiates it, and executes it.

    Args:
        mode: Calculator mode (CalculatorMode or its value, e.g. "biomass", "land")
        snapshot: Parameter snapshot to calculate from
        config: Calculator configuration (defaults to DEFAULT_CONFIG)

    Returns:
        Dictionary of DataFrames from the assessment, e.g.:
        {
            "results": DataFrame(...),
            "sensitivity_fcr": DataFrame(...)
        }

    Raises:
        KeyError: If the mode is not registered
        ValueError: If assessment.run() fails, returns anything but DataFrames,
            or omits the single-row "results" frame
    """
    mode_name = mode.value if isinstance(mode, CalculatorMode) else mode
    logger.info(f"Running assessment: {mode_name}")

    assessment_class = ASSESSMENT_TYPES.get(mode_name)
    if assessment_class is None:
        supported = ", ".join(ASSESSMENT_TYPES)
        msg = f"Assessment type {mode_name} not supported (expected one of: {supported})"
        raise KeyError(msg)

    logger.info(f"Instantiating {assessment_class.__name__}")
    try:
        assessment = assessment_class(snapshot, config)
    except Exception as e:
        logger.error(f"Assessment instantiation failed: {e}")
        msg = f"Failed to instantiate assessment '{mode_name}'"
        raise ValueError(msg) from e

    logger.info(f"Executing {mode_name}.run()")
    try:
        dataframes = assessment.run()
    except Exception as e:
        logger.error(f"Assessment execution failed: {e}")
        msg = f"Assessment '{mode_name}' execution failed"
        raise ValueError(msg) from e

    if not isinstance(dataframes, dict):
        msg = (
            f"Assessment '{mode_name}'.run() must return a dict, "
            f"got {type(dataframes).__name__}"
        )
        raise ValueError(msg)

    for key, value in dataframes.items():
        if not isinstance(value, pd.DataFrame):
            msg = (
                f"Assessment '{mode_name}'.run() returned invalid value for key '{key}': "
                f"expected DataFrame, got {type(value).__name__}"
            )
            raise ValueError(msg)

    if RESULTS_KEY not in dataframes:
        msg = f"Assessment '{mode_name}'.run() returned no '{RESULTS_KEY}' frame"
        raise ValueError(msg)

    if len(dataframes[RESULTS_KEY]) != 1:
        msg = (
            f"Assessment '{mode_name}'.run() must return a single-row '{RESULTS_KEY}' "
            f"frame, got {len(dataframes[RESULTS_KEY])} rows"
        )
        raise ValueError(msg)

    sweeps = [key for key in dataframes if key != RESULTS_KEY]
    logger.info(f"Assessment '{mode_name}' returned results and {len(sweeps)} sweep(s): {sweeps}")

    return dataframes
