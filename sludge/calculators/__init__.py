"""Mass-balance calculators for RAS sludge spreading.

This package contains pure functions for the sludge/digestate mass balance.
All calculators are stateless, never raise on numeric input and guard every
division against zero denominators.
"""

from sludge.calculators.area import compute_area
from sludge.calculators.biomass import compute_biomass
from sludge.calculators.digestate import calculate_digestate_concentrations
from sludge.calculators.guards import mixing_factor, safe_divide
from sludge.calculators.sensitivity import (
    SensitivitySweep,
    default_sweeps,
    sweep,
    sweep_frames,
)

__all__ = [
    "compute_biomass",
    "compute_area",
    "calculate_digestate_concentrations",
    "mixing_factor",
    "safe_divide",
    "SensitivitySweep",
    "default_sweeps",
    "sweep",
    "sweep_frames",
]
