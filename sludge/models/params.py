"""Input parameter models for the sludge mass balance.

These models are immutable value objects. They deliberately carry no range
validators: out-of-range and zero values must reach the calculators, which
degrade them to zero outputs instead of failing.

Every field accepts its snake_case name or the camelCase alias used by the
presentation layer (e.g. ``ts_percent`` or ``tsPercent``).
"""

import numpy as np
from pydantic import BaseModel, ConfigDict, Field, model_validator

from sludge.models.enums import ParamGroup


class DigestateParams(BaseModel):
    """Laboratory composition of the digestate.

    Attributes:
        ts_percent: Total solids of the digestate (% by mass)
        n_tot_percent_ts: Total nitrogen as a percentage of total solids
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    ts_percent: float = Field(alias="tsPercent", description="Digestate total solids (%)")
    n_tot_percent_ts: float = Field(
        alias="nTotPercentTS", description="Total nitrogen (% of total solids)"
    )


class AgronomicParams(BaseModel):
    """Agronomic limits on digestate spreading.

    Attributes:
        max_nitrogen_load: Regulatory nitrogen ceiling (kg N/ha/yr)
        single_intervention_load: Digestate applied per spreading event (t/ha)
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    max_nitrogen_load: float = Field(
        alias="maxNitrogenLoad", description="Nitrogen ceiling (kg N/ha/yr)"
    )
    single_intervention_load: float = Field(
        alias="singleInterventionLoad", description="Digestate per event (t/ha)"
    )


class MixtureParams(BaseModel):
    """Co-digestion mixture of RAS sludge and inoculum.

    Attributes:
        r_ratio: Inoculum-to-substrate ratio on volatile solids
        ts_inoculum: Inoculum total solids (%)
        vs_inoculum: Inoculum volatile solids (%)
        ts_sludge: Sludge total solids (%)
        vs_sludge: Sludge volatile solids (%), normally derived from ts_sludge
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    r_ratio: float = Field(alias="rRatio", description="Inoculum/substrate ratio on VS")
    ts_inoculum: float = Field(alias="tsInoculum", description="Inoculum total solids (%)")
    vs_inoculum: float = Field(alias="vsInoculum", description="Inoculum volatile solids (%)")
    ts_sludge: float = Field(alias="tsSludge", description="Sludge total solids (%)")
    vs_sludge: float = Field(alias="vsSludge", description="Sludge volatile solids (%)")


class BiomassParams(BaseModel):
    """Fish production parameters.

    Attributes:
        sludge_production_rate: kg of sludge total solids produced per kg feed
        fcr: Feed conversion ratio (kg feed per kg biomass gain)
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    sludge_production_rate: float = Field(
        alias="sludgeProductionRate", description="Sludge production (kg TS / kg feed)"
    )
    fcr: float = Field(description="Feed conversion ratio (kg/kg)")


class ParameterSnapshot(BaseModel):
    """Complete set of calculator inputs at one point in time.

    Snapshots are never mutated; an edit produces a new snapshot.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    digestate: DigestateParams
    agronomic: AgronomicParams
    mixture: MixtureParams
    biomass: BiomassParams
    target_biomass: float = Field(
        default=0.0, alias="targetBiomass", description="Land mode fish biomass (kg)"
    )

    def group(self, group: ParamGroup) -> BaseModel:
        """Get the parameter model for a group."""
        return getattr(self, group.value)

    def with_group(self, group: ParamGroup, params: BaseModel) -> "ParameterSnapshot":
        """Return a copy of this snapshot with one group replaced."""
        return self.model_copy(update={group.value: params})


class SweepRange(BaseModel):
    """Inclusive, evenly spaced sample range for a sensitivity sweep.

    Attributes:
        start: First sample value
        stop: Last sample value (included when reachable by whole steps)
        step: Increment between samples
    """

    model_config = ConfigDict(frozen=True)

    start: float
    stop: float
    step: float = Field(gt=0)

    @model_validator(mode="after")
    def _check_order(self) -> "SweepRange":
        if self.stop < self.start:
            msg = f"Sweep range stop ({self.stop}) is below start ({self.start})"
            raise ValueError(msg)
        return self

    def __len__(self) -> int:
        # Tolerance keeps an end point that float division lands just short of
        return int(np.floor((self.stop - self.start) / self.step + 1e-9)) + 1

    def samples(self) -> np.ndarray:
        """Sample values, generated by index so float drift never drops the end point."""
        values = self.start + self.step * np.arange(len(self))
        return np.round(values, 10)


class SweepPoint(BaseModel):
    """One (x, y) point of a sensitivity sweep.

    Attributes:
        x: Swept parameter value
        y: Headline output at that value, rounded for display
        label: x formatted for chart axes
    """

    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    label: str
