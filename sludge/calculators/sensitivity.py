"""Sensitivity sweeps over one input parameter.

A sweep holds every parameter of a snapshot fixed except one, re-runs the
mode's calculator at each sample of that parameter and yields (x, y) points
for charting. Sweeps are lazy and restartable: each iteration recomputes the
points from the captured snapshot and range.
"""

from collections.abc import Iterator

import numpy as np
import pandas as pd

from sludge.calculators.area import compute_area
from sludge.calculators.biomass import compute_biomass
from sludge.config import CONSTANTS, DEFAULT_CONFIG, SweepConfig
from sludge.models.enums import CalculatorMode, SweepVariable
from sludge.models.params import ParameterSnapshot, SweepPoint, SweepRange

# Variables charted per calculator mode, in display order
SWEEPS_BY_MODE: dict[CalculatorMode, tuple[SweepVariable, ...]] = {
    CalculatorMode.BIOMASS: (
        SweepVariable.R_RATIO,
        SweepVariable.TS_SLUDGE,
        SweepVariable.FCR,
    ),
    CalculatorMode.LAND: (
        SweepVariable.TARGET_BIOMASS,
        SweepVariable.TS_SLUDGE,
        SweepVariable.FCR,
    ),
}

LABEL_FORMATS: dict[SweepVariable, str] = {
    SweepVariable.R_RATIO: "{:.0f}",
    SweepVariable.TS_SLUDGE: "{:.1f}",
    SweepVariable.FCR: "{:.2f}",
    SweepVariable.TARGET_BIOMASS: "{:.0f}",
}


def default_sweeps(mode: CalculatorMode) -> tuple[SweepVariable, ...]:
    """Get the sweep variables charted for a calculator mode."""
    return SWEEPS_BY_MODE[mode]


def apply_sample(
    variable: SweepVariable, snapshot: ParameterSnapshot, value: float
) -> ParameterSnapshot:
    """Return a copy of the snapshot with the swept parameter set to value.

    Sweeping sludge TS also moves sludge VS with it (VS = 0.75 * TS, unrounded),
    since the two are measured together on the same sludge.
    """
    if variable is SweepVariable.R_RATIO:
        mixture = snapshot.mixture.model_copy(update={"r_ratio": value})
        return snapshot.model_copy(update={"mixture": mixture})

    if variable is SweepVariable.TS_SLUDGE:
        mixture = snapshot.mixture.model_copy(
            update={"ts_sludge": value, "vs_sludge": value * CONSTANTS.VS_TO_TS_RATIO}
        )
        return snapshot.model_copy(update={"mixture": mixture})

    if variable is SweepVariable.FCR:
        biomass = snapshot.biomass.model_copy(update={"fcr": value})
        return snapshot.model_copy(update={"biomass": biomass})

    return snapshot.model_copy(update={"target_biomass": value})


def evaluate(mode: CalculatorMode, snapshot: ParameterSnapshot) -> float:
    """Run the mode's calculator and return its headline output.

    Returns:
        Sustainable biomass (kg/ha/yr) in biomass mode, required area (ha)
        in land mode. Full precision.
    """
    if mode is CalculatorMode.BIOMASS:
        return compute_biomass(
            snapshot.digestate, snapshot.agronomic, snapshot.mixture, snapshot.biomass
        ).total_biomass

    return compute_area(
        snapshot.target_biomass,
        snapshot.digestate,
        snapshot.agronomic,
        snapshot.mixture,
        snapshot.biomass,
    ).required_area_ha


class SensitivitySweep:
    """Finite, restartable sequence of sweep points.

    Iterating recomputes every point from the captured snapshot, so the
    sequence can be consumed any number of times with identical results.
    """

    def __init__(
        self,
        variable: SweepVariable,
        sweep_range: SweepRange,
        snapshot: ParameterSnapshot,
        mode: CalculatorMode,
        decimals: int,
    ):
        self.variable = variable
        self.sweep_range = sweep_range
        self.snapshot = snapshot
        self.mode = mode
        self.decimals = decimals

    def __iter__(self) -> Iterator[SweepPoint]:
        for value in self.sweep_range.samples():
            yield self._point(float(value))

    def __len__(self) -> int:
        return len(self.sweep_range)

    def _point(self, x: float) -> SweepPoint:
        y = evaluate(self.mode, apply_sample(self.variable, self.snapshot, x))
        return SweepPoint(
            x=x,
            # Rounding is for display only; the calculators run at full precision
            y=float(np.round(y, self.decimals)),
            label=LABEL_FORMATS[self.variable].format(x),
        )

    def points(self) -> list[SweepPoint]:
        """Materialise the sweep as a list."""
        return list(self)

    def to_frame(self) -> pd.DataFrame:
        """Materialise the sweep as a DataFrame with columns x, label, y."""
        return pd.DataFrame(
            [point.model_dump() for point in self], columns=["x", "label", "y"]
        )


def sweep(
    variable: SweepVariable,
    sweep_range: SweepRange | None,
    snapshot: ParameterSnapshot,
    mode: CalculatorMode = CalculatorMode.BIOMASS,
    config: SweepConfig | None = None,
) -> SensitivitySweep:
    """Build a sensitivity sweep of one variable around a snapshot.

    Args:
        variable: Parameter to vary
        sweep_range: Samples to take, or None for the configured range
        snapshot: Fixed values for every other parameter
        mode: Calculator whose headline output is plotted
        config: Sweep configuration (ranges and display precision)

    Returns:
        A lazy SensitivitySweep; nothing is computed until it is iterated.

    Raises:
        ValueError: If a target biomass sweep is requested in biomass mode,
            where biomass is the output rather than an input
    """
    if variable is SweepVariable.TARGET_BIOMASS and mode is CalculatorMode.BIOMASS:
        msg = "Target biomass can only be swept in land mode"
        raise ValueError(msg)

    config = config or DEFAULT_CONFIG.sweeps
    if sweep_range is None:
        sweep_range = config.range_for(variable)
    decimals = config.biomass_decimals if mode is CalculatorMode.BIOMASS else config.area_decimals

    return SensitivitySweep(
        variable=variable,
        sweep_range=sweep_range,
        snapshot=snapshot,
        mode=mode,
        decimals=decimals,
    )


def sweep_frames(
    mode: CalculatorMode,
    snapshot: ParameterSnapshot,
    config: SweepConfig | None = None,
) -> dict[str, pd.DataFrame]:
    """Run every sweep charted for a mode.

    Returns:
        Dictionary keyed "sensitivity_<variable>" with one DataFrame per sweep,
        in display order.
    """
    return {
        f"sensitivity_{variable.value}": sweep(
            variable, None, snapshot, mode=mode, config=config
        ).to_frame()
        for variable in default_sweeps(mode)
    }
