"""Domain models for the sludge mass balance."""

from sludge.models.enums import CalculatorMode, ParamGroup, SweepVariable
from sludge.models.params import (
    AgronomicParams,
    BiomassParams,
    DigestateParams,
    MixtureParams,
    ParameterSnapshot,
    SweepPoint,
    SweepRange,
)
from sludge.models.results import AreaCalculationResults, CalculationResults

__all__ = [
    "CalculatorMode",
    "ParamGroup",
    "SweepVariable",
    "DigestateParams",
    "AgronomicParams",
    "MixtureParams",
    "BiomassParams",
    "ParameterSnapshot",
    "SweepRange",
    "SweepPoint",
    "CalculationResults",
    "AreaCalculationResults",
]
