"""Sustainable biomass calculation (biomass mode).

Works forward from the nitrogen cap: how much digestate a hectare can take,
how much of that is RAS sludge, and how much fish produces that sludge.
"""

from sludge.calculators.digestate import calculate_digestate_concentrations
from sludge.calculators.guards import mixing_factor, safe_divide
from sludge.config import CONSTANTS
from sludge.models.params import AgronomicParams, BiomassParams, DigestateParams, MixtureParams
from sludge.models.results import CalculationResults


def compute_biomass(
    digestate: DigestateParams,
    agronomic: AgronomicParams,
    mixture: MixtureParams,
    biomass: BiomassParams,
) -> CalculationResults:
    """Calculate the fish biomass sustainable under the nitrogen cap.

    Formula:
        ts_gl = TS% * 10
        n_tot_gl = ts_gl * N_tot(%TS) / 100
        mt_tons = N_max / n_tot_gl
        min_interventions = mt_tons / single_intervention_load
        mt_kg = mt_tons * 1000
        ms_kg = mt_kg / (1 + R * VS_sludge / VS_inoculum)
        mi_kg = mt_kg - ms_kg
        ts_sludge_kg = ms_kg * TS_sludge / 100
        total_biomass = (ts_sludge_kg / P) / FCR

    Because mt_tons is normalised by the per-hectare nitrogen cap, every mass
    and the headline biomass are per hectare per year.

    Every division is guarded: a denominator <= 0 makes that quotient 0, so
    this function never raises and never returns inf/NaN for finite inputs.

    Args:
        digestate: Digestate composition
        agronomic: Nitrogen cap and per-event spreading load
        mixture: Co-digestion mixture parameters
        biomass: Sludge production rate and feed conversion ratio

    Returns:
        CalculationResults with full-precision values.
    """
    ts_gl, n_tot_gl = calculate_digestate_concentrations(
        digestate.ts_percent, digestate.n_tot_percent_ts
    )

    mt_tons = safe_divide(agronomic.max_nitrogen_load, n_tot_gl)
    min_interventions = safe_divide(mt_tons, agronomic.single_intervention_load)
    mt_kg = mt_tons * CONSTANTS.KILOGRAMS_PER_TONNE

    factor = mixing_factor(mixture.r_ratio, mixture.vs_sludge, mixture.vs_inoculum)
    ms_kg = safe_divide(mt_kg, factor)
    mi_kg = mt_kg - ms_kg

    total_ts_sludge = (ms_kg * mixture.ts_sludge) / CONSTANTS.PERCENT
    feed_kg = safe_divide(total_ts_sludge, biomass.sludge_production_rate)
    total_biomass = safe_divide(feed_kg, biomass.fcr)

    return CalculationResults(
        ts_gl=ts_gl,
        n_tot_gl=n_tot_gl,
        mt_tons=mt_tons,
        min_interventions=min_interventions,
        ms_kg=ms_kg,
        mi_kg=mi_kg,
        total_biomass=total_biomass,
    )
