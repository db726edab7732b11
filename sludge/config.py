"""Configuration and constants for the RAS AD-Sludge calculator.

This module defines the fixed conversion factors, the default parameter
snapshot and the sensitivity sweep ranges used by both calculators.

Includes configuration for:
- Default input parameters (DefaultParameters with SLUDGE_ prefix)
- Sensitivity sweep ranges and display precision (SweepConfig with SWEEP_ prefix)
- Top-level calculator settings (CalculatorConfig with CALC_ prefix)

Configuration can be overridden via:
1. Environment variables (e.g., SLUDGE_FCR=1.3, SWEEP_R_RATIO_STOP=30)
2. .env file in the current directory
3. Default values in code
"""

from dataclasses import dataclass

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from sludge.models.enums import SweepVariable
from sludge.models.params import (
    AgronomicParams,
    BiomassParams,
    DigestateParams,
    MixtureParams,
    ParameterSnapshot,
    SweepRange,
)


@dataclass(frozen=True)
class PhysicalConstants:
    """Physical constants and conversion factors used in the mass balance.

    These are NOT configurable - they represent fixed conversion factors
    and the volatile-solids heuristic of the sludge model.

    All attributes are immutable (frozen=True prevents modification).
    """

    # Unit conversion factors
    PERCENT: float = 100.0
    GRAMS_PER_LITRE_PER_PERCENT: float = 10.0  # digestate density ~1 kg/L
    KILOGRAMS_PER_TONNE: float = 1_000.0
    GRAMS_PER_KILOGRAM: float = 1_000.0

    # Co-digestion volatile-solids heuristic: VS ~ 75% of TS for RAS sludge
    VS_TO_TS_RATIO: float = 0.75
    VS_SLUDGE_DECIMALS: int = 2


# Module-level singleton for physical constants
CONSTANTS = PhysicalConstants()


class DefaultParameters(BaseSettings):
    """Default input parameters loaded into a fresh parameter store.

    Can be overridden via environment variables with SLUDGE_ prefix, e.g.
    SLUDGE_TS_PERCENT, SLUDGE_MAX_NITROGEN_LOAD, SLUDGE_TARGET_BIOMASS.

    Attributes:
        ts_percent: Digestate total solids (%)
        n_tot_percent_ts: Digestate total nitrogen (% of TS)
        max_nitrogen_load: Nitrogen ceiling (kg N/ha/yr, 170 in ZVN)
        single_intervention_load: Digestate per spreading event (t/ha)
        r_ratio: Inoculum-to-substrate ratio on volatile solids
        ts_inoculum: Inoculum total solids (%)
        vs_inoculum: Inoculum volatile solids (%)
        ts_sludge: Sludge total solids (%)
        vs_sludge: Sludge volatile solids (%)
        sludge_production_rate: kg TS sludge per kg feed
        fcr: Feed conversion ratio (kg feed / kg biomass)
        target_biomass: Fish biomass for land mode (kg)
    """

    model_config = SettingsConfigDict(
        env_prefix="SLUDGE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    ts_percent: float = Field(default=3.4, description="Digestate total solids (%)")
    n_tot_percent_ts: float = Field(default=4.1, description="Digestate total N (% TS)")
    max_nitrogen_load: float = Field(
        default=170.0, description="Maximum nitrogen load (kg N/ha/yr)"
    )
    single_intervention_load: float = Field(
        default=40.0, description="Digestate per spreading event (t/ha)"
    )
    r_ratio: float = Field(default=10.0, description="Inoculum/substrate ratio on VS")
    ts_inoculum: float = Field(default=5.5, description="Inoculum total solids (%)")
    vs_inoculum: float = Field(default=4.1, description="Inoculum volatile solids (%)")
    ts_sludge: float = Field(default=1.2, description="Sludge total solids (%)")
    vs_sludge: float = Field(default=0.9, description="Sludge volatile solids (%)")
    sludge_production_rate: float = Field(
        default=0.12, description="Sludge production (kg TS / kg feed)"
    )
    fcr: float = Field(default=1.1, description="Feed conversion ratio (kg/kg)")
    target_biomass: float = Field(default=5000.0, description="Land mode fish biomass (kg)")

    def to_snapshot(self) -> ParameterSnapshot:
        """Build the parameter snapshot these defaults describe."""
        return ParameterSnapshot(
            digestate=DigestateParams(
                ts_percent=self.ts_percent,
                n_tot_percent_ts=self.n_tot_percent_ts,
            ),
            agronomic=AgronomicParams(
                max_nitrogen_load=self.max_nitrogen_load,
                single_intervention_load=self.single_intervention_load,
            ),
            mixture=MixtureParams(
                r_ratio=self.r_ratio,
                ts_inoculum=self.ts_inoculum,
                vs_inoculum=self.vs_inoculum,
                ts_sludge=self.ts_sludge,
                vs_sludge=self.vs_sludge,
            ),
            biomass=BiomassParams(
                sludge_production_rate=self.sludge_production_rate,
                fcr=self.fcr,
            ),
            target_biomass=self.target_biomass,
        )


class SweepConfig(BaseSettings):
    """Sensitivity sweep ranges and display precision.

    Can be overridden via environment variables with SWEEP_ prefix:
    - SWEEP_R_RATIO_START / _STOP / _STEP
    - SWEEP_TS_SLUDGE_START / _STOP / _STEP
    - SWEEP_FCR_START / _STOP / _STEP
    - SWEEP_TARGET_BIOMASS_START / _STOP / _STEP
    - SWEEP_BIOMASS_DECIMALS, SWEEP_AREA_DECIMALS

    Both ends of every range are inclusive.
    """

    model_config = SettingsConfigDict(
        env_prefix="SWEEP_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    r_ratio_start: float = Field(default=1.0, description="First R ratio sample")
    r_ratio_stop: float = Field(default=20.0, description="Last R ratio sample")
    r_ratio_step: float = Field(default=1.0, gt=0, description="R ratio increment")

    ts_sludge_start: float = Field(default=0.8, description="First sludge TS sample (%)")
    ts_sludge_stop: float = Field(default=2.4, description="Last sludge TS sample (%)")
    ts_sludge_step: float = Field(default=0.1, gt=0, description="Sludge TS increment (%)")

    fcr_start: float = Field(default=0.8, description="First FCR sample")
    fcr_stop: float = Field(default=1.25, description="Last FCR sample")
    fcr_step: float = Field(default=0.05, gt=0, description="FCR increment")

    target_biomass_start: float = Field(default=1000.0, description="First biomass sample (kg)")
    target_biomass_stop: float = Field(default=20000.0, description="Last biomass sample (kg)")
    target_biomass_step: float = Field(default=1000.0, gt=0, description="Biomass increment (kg)")

    biomass_decimals: int = Field(
        default=0, ge=0, description="Display precision for biomass sweep outputs"
    )
    area_decimals: int = Field(
        default=2, ge=0, description="Display precision for area sweep outputs"
    )

    def range_for(self, variable: SweepVariable) -> SweepRange:
        """Get the configured sample range for a sweep variable."""
        prefix = variable.value
        return SweepRange(
            start=getattr(self, f"{prefix}_start"),
            stop=getattr(self, f"{prefix}_stop"),
            step=getattr(self, f"{prefix}_step"),
        )


class CalculatorConfig(BaseSettings):
    """Top-level calculator configuration.

    Can be overridden via environment variables with CALC_ prefix:
    - CALC_LOG_LEVEL
    - SLUDGE_* variables for the nested default parameters
    - SWEEP_* variables for the nested sweep configuration
    """

    model_config = SettingsConfigDict(
        env_prefix="CALC_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    defaults: DefaultParameters = Field(
        default_factory=DefaultParameters, description="Default input parameters"
    )
    sweeps: SweepConfig = Field(
        default_factory=SweepConfig, description="Sensitivity sweep configuration"
    )
    log_level: str = Field(default="INFO", description="Root log level for the CLI")


DEFAULT_CONFIG = CalculatorConfig()
