"""Display formatting for headline results.

Values are rounded here for presentation only, at the precision the
calculator front end shows them.
"""

from sludge.config import CONSTANTS
from sludge.models.results import AreaCalculationResults, CalculationResults


def biomass_summary(
    results: CalculationResults, max_nitrogen_load: float
) -> list[tuple[str, str]]:
    """Format biomass mode results as (label, value) rows, headline first."""
    return [
        ("Sustainable biomass", f"{results.total_biomass:,.0f} kg/ha/yr"),
        ("Nitrogen limit", f"{max_nitrogen_load:g} kg N/ha/yr"),
        ("Total digestate", f"{results.mt_tons:.1f} t"),
        ("Sludge mass", f"{results.ms_kg:,.0f} kg"),
        ("Spreading events", f"{results.min_interventions:.1f}"),
        ("Inoculum mass", f"{results.mi_kg:,.0f} kg"),
    ]


def area_summary(
    results: AreaCalculationResults, target_biomass: float, max_nitrogen_load: float
) -> list[tuple[str, str]]:
    """Format land mode results as (label, value) rows, headline first."""
    return [
        ("Required area", f"{results.required_area_ha:.2f} ha"),
        ("Fish biomass", f"{target_biomass:,.0f} kg"),
        ("Total nitrogen", f"{results.total_nitrogen_kg:.1f} kg N"),
        ("Total digestate", f"{results.mt_kg / CONSTANTS.KILOGRAMS_PER_TONNE:.1f} t"),
        ("Sludge mass", f"{results.ms_kg:,.0f} kg"),
        ("Nitrogen limit", f"{max_nitrogen_load:g} kg/ha"),
    ]
