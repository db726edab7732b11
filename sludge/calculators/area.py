"""Required spreading area calculation (land mode).

Runs the biomass mode chain in reverse: from a fish biomass to the sludge it
produces, the digestate that sludge ends up in, and the land needed to spread
that digestate's nitrogen under the cap.
"""

from sludge.calculators.digestate import calculate_digestate_concentrations
from sludge.calculators.guards import mixing_factor, safe_divide
from sludge.config import CONSTANTS
from sludge.models.params import AgronomicParams, BiomassParams, DigestateParams, MixtureParams
from sludge.models.results import AreaCalculationResults


def compute_area(
    target_biomass: float,
    digestate: DigestateParams,
    agronomic: AgronomicParams,
    mixture: MixtureParams,
    biomass: BiomassParams,
) -> AreaCalculationResults:
    """Calculate the agricultural area needed to absorb a biomass's nitrogen.

    Formula:
        n_tot_gl = TS% * 10 * N_tot(%TS) / 100
        ts_sludge_kg = biomass * FCR * P
        ms_kg = ts_sludge_kg / (TS_sludge / 100)
        mt_kg = ms_kg * (1 + R * VS_sludge / VS_inoculum)
        nitrogen_kg = mt_kg * n_tot_gl / 1000
        area_ha = nitrogen_kg / N_max

    Each step is the algebraic inverse of the matching step in
    compute_biomass, so compute_area(compute_biomass(...).total_biomass * h)
    gives back h hectares.

    Args:
        target_biomass: Fish biomass to support (kg)
        digestate: Digestate composition
        agronomic: Nitrogen cap (single_intervention_load is unused here)
        mixture: Co-digestion mixture parameters
        biomass: Sludge production rate and feed conversion ratio

    Returns:
        AreaCalculationResults with full-precision values.
    """
    _, n_tot_gl = calculate_digestate_concentrations(
        digestate.ts_percent, digestate.n_tot_percent_ts
    )

    total_ts_sludge = target_biomass * biomass.fcr * biomass.sludge_production_rate
    ms_kg = safe_divide(total_ts_sludge, mixture.ts_sludge / CONSTANTS.PERCENT)
    mt_kg = ms_kg * mixing_factor(mixture.r_ratio, mixture.vs_sludge, mixture.vs_inoculum)

    total_nitrogen_kg = mt_kg * (n_tot_gl / CONSTANTS.GRAMS_PER_KILOGRAM)
    required_area_ha = safe_divide(total_nitrogen_kg, agronomic.max_nitrogen_load)

    return AreaCalculationResults(
        total_ts_sludge=total_ts_sludge,
        ms_kg=ms_kg,
        mt_kg=mt_kg,
        total_nitrogen_kg=total_nitrogen_kg,
        required_area_ha=required_area_ha,
        n_tot_gl=n_tot_gl,
    )
