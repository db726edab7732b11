"""Result models produced by the mass-balance calculators.

Results are derived, never stored: they are rebuilt from the current
parameter snapshot on every recomputation.
"""

from pydantic import BaseModel, ConfigDict, Field


class CalculationResults(BaseModel):
    """Biomass mode results (sustainable biomass under the nitrogen cap).

    Attributes:
        ts_gl: Digestate total solids concentration (g/L)
        n_tot_gl: Digestate nitrogen concentration (g/L)
        mt_tons: Digestate allowed per hectare per year (t)
        min_interventions: Spreading events needed at the per-event load
        ms_kg: Sludge share of the digestate mass (kg)
        mi_kg: Inoculum share of the digestate mass (kg)
        total_biomass: Sustainable fish biomass (kg/ha/yr)
    """

    model_config = ConfigDict(frozen=True)

    ts_gl: float = Field(description="Digestate total solids (g/L)")
    n_tot_gl: float = Field(description="Digestate total nitrogen (g/L)")
    mt_tons: float = Field(description="Total digestate mass (t/ha/yr)")
    min_interventions: float = Field(description="Minimum spreading events")
    ms_kg: float = Field(description="Sludge mass (kg)")
    mi_kg: float = Field(description="Inoculum mass (kg)")
    total_biomass: float = Field(description="Sustainable biomass (kg/ha/yr)")


class AreaCalculationResults(BaseModel):
    """Land mode results (spreading area needed for a given biomass).

    Attributes:
        total_ts_sludge: Sludge total solids produced (kg)
        ms_kg: Wet sludge mass (kg)
        mt_kg: Total digestate mass (kg)
        total_nitrogen_kg: Nitrogen in the digestate (kg N)
        required_area_ha: Land needed to stay under the nitrogen cap (ha)
        n_tot_gl: Digestate nitrogen concentration (g/L)
    """

    model_config = ConfigDict(frozen=True)

    total_ts_sludge: float = Field(description="Sludge total solids (kg)")
    ms_kg: float = Field(description="Sludge mass (kg)")
    mt_kg: float = Field(description="Total digestate mass (kg)")
    total_nitrogen_kg: float = Field(description="Total nitrogen (kg N)")
    required_area_ha: float = Field(description="Required spreading area (ha)")
    n_tot_gl: float = Field(description="Digestate total nitrogen (g/L)")
