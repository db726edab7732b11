"""Enumerations shared by the calculators, sweeps and parameter store."""

from enum import Enum


class CalculatorMode(Enum):
    """Which direction the mass balance is run in.

    BIOMASS derives the sustainable fish biomass per hectare from the
    nitrogen cap; LAND derives the spreading area needed for a given biomass.
    """

    BIOMASS = "biomass"
    LAND = "land"


class SweepVariable(Enum):
    """Independent variables a sensitivity sweep can vary.

    Values double as the field prefix in SweepConfig.
    """

    R_RATIO = "r_ratio"
    TS_SLUDGE = "ts_sludge"
    FCR = "fcr"
    TARGET_BIOMASS = "target_biomass"  # land mode only


class ParamGroup(Enum):
    """Parameter groups editable through the parameter store."""

    DIGESTATE = "digestate"
    AGRONOMIC = "agronomic"
    MIXTURE = "mixture"
    BIOMASS = "biomass"
