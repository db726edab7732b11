"""Digestate concentration calculations shared by both calculator modes."""

from sludge.config import CONSTANTS


def calculate_digestate_concentrations(
    ts_percent: float,
    n_tot_percent_ts: float,
) -> tuple[float, float]:
    """Convert digestate composition from percentages to g/L.

    Assumes a digestate density of about 1 kg/L so that 1% by mass is 10 g/L.

    Formula:
        ts_gl = TS% * 10
        n_tot_gl = ts_gl * N_tot(%TS) / 100

    Args:
        ts_percent: Digestate total solids (% by mass)
        n_tot_percent_ts: Total nitrogen as % of total solids

    Returns:
        Tuple of (ts_gl, n_tot_gl).
    """
    ts_gl = ts_percent * CONSTANTS.GRAMS_PER_LITRE_PER_PERCENT
    n_tot_gl = (ts_gl * n_tot_percent_ts) / CONSTANTS.PERCENT
    return ts_gl, n_tot_gl
