"""Unit tests for the biomass mode assessment."""

import logging

import pytest

from sludge.assessments.biomass import BiomassAssessment
from sludge.config import CalculatorConfig, SweepConfig


def test_run_returns_results_and_sweeps(snapshot):
    """Test the results row and one frame per charted sweep."""
    frames = BiomassAssessment(snapshot).run()

    assert list(frames) == [
        "results",
        "sensitivity_r_ratio",
        "sensitivity_ts_sludge",
        "sensitivity_fcr",
    ]
    results = frames["results"]
    assert len(results) == 1
    assert results["total_biomass"].iloc[0] == pytest.approx(3469.81, abs=0.01)
    assert results["mt_tons"].iloc[0] == pytest.approx(121.9512, abs=1e-4)
    assert len(frames["sensitivity_ts_sludge"]) == 17


def test_run_uses_configured_sweeps(snapshot):
    """Test sweep ranges come from the assessment's config."""
    config = CalculatorConfig(sweeps=SweepConfig(r_ratio_start=5, r_ratio_stop=10))

    frames = BiomassAssessment(snapshot, config).run()

    assert list(frames["sensitivity_r_ratio"]["x"]) == [5.0, 6.0, 7.0, 8.0, 9.0, 10.0]


def test_zero_biomass_warns(snapshot, caplog):
    """Test a degenerate snapshot logs a warning instead of failing."""
    biomass = snapshot.biomass.model_copy(update={"fcr": 0.0})
    degenerate = snapshot.model_copy(update={"biomass": biomass})

    with caplog.at_level(logging.WARNING, logger="sludge.assessments.biomass"):
        frames = BiomassAssessment(degenerate).run()

    assert frames["results"]["total_biomass"].iloc[0] == 0.0
    assert "Sustainable biomass is 0" in caplog.text
