"""Shared fixtures: the calculator's default parameter snapshot."""

import pytest

from sludge.models import (
    AgronomicParams,
    BiomassParams,
    DigestateParams,
    MixtureParams,
    ParameterSnapshot,
)


@pytest.fixture
def digestate() -> DigestateParams:
    """Default digestate composition."""
    return DigestateParams(ts_percent=3.4, n_tot_percent_ts=4.1)


@pytest.fixture
def agronomic() -> AgronomicParams:
    """ZVN nitrogen cap and default per-event load."""
    return AgronomicParams(max_nitrogen_load=170.0, single_intervention_load=40.0)


@pytest.fixture
def mixture() -> MixtureParams:
    """Default co-digestion mixture."""
    return MixtureParams(
        r_ratio=10.0,
        ts_inoculum=5.5,
        vs_inoculum=4.1,
        ts_sludge=1.2,
        vs_sludge=0.9,
    )


@pytest.fixture
def biomass() -> BiomassParams:
    """Default sludge production rate and FCR."""
    return BiomassParams(sludge_production_rate=0.12, fcr=1.1)


@pytest.fixture
def snapshot(digestate, agronomic, mixture, biomass) -> ParameterSnapshot:
    """Default snapshot with a 5000 kg land mode biomass."""
    return ParameterSnapshot(
        digestate=digestate,
        agronomic=agronomic,
        mixture=mixture,
        biomass=biomass,
        target_biomass=5000.0,
    )
