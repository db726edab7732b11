"""Regression test fixtures.

Reference results for the worked scenarios the calculator front end was
validated against.
"""

import pytest


@pytest.fixture
def tolerance() -> dict[str, float]:
    """Numerical tolerance for comparing outputs.

    Returns:
        Dictionary of tolerances for different value types
    """
    return {
        "absolute": 0.01,  # kg or ha
        "relative": 1e-6,
    }


@pytest.fixture
def biomass_reference() -> dict[str, float]:
    """Biomass mode results for the default parameters."""
    return {
        "ts_gl": 34.0,
        "n_tot_gl": 1.394,
        "mt_tons": 121.951219,
        "min_interventions": 3.048780,
        "ms_kg": 38167.938931,
        "mi_kg": 83783.280581,
        "total_biomass": 3469.812630,
    }


@pytest.fixture
def land_reference() -> dict[str, float]:
    """Land mode results for 5000 kg of fish with the default parameters."""
    return {
        "target_biomass": 5000.0,
        "total_ts_sludge": 660.0,
        "ms_kg": 55000.0,
        "mt_kg": 175731.707317,
        "total_nitrogen_kg": 244.97,
        "required_area_ha": 1.441,
        "n_tot_gl": 1.394,
    }
