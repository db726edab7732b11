"""Guarded arithmetic shared by the mass-balance calculators.

Every division in the mass balance goes through these helpers so that a
zero, negative or missing denominator yields 0 instead of inf/NaN.
"""


def safe_divide(numerator: float, denominator: float) -> float:
    """Divide, returning 0.0 unless the denominator is strictly positive.

    NaN denominators fail the comparison and also return 0.0.
    """
    if denominator > 0:
        return numerator / denominator
    return 0.0


def mixing_factor(r_ratio: float, vs_sludge: float, vs_inoculum: float) -> float:
    """Digestate-to-sludge mass factor of the co-digestion mixture.

    Formula:
        factor = 1 + R * VS_sludge / VS_inoculum

    The inoculum mass is ``(factor - 1) * sludge mass`` so the total
    digestate mass is ``factor * sludge mass``.

    Returns:
        The factor, or 0.0 when VS_inoculum is not positive (mixture
        undefined) or the factor itself is not positive (e.g. a negative R).
        Both calculators treat a 0.0 factor as "no digestate".
    """
    if not vs_inoculum > 0:
        return 0.0
    factor = 1 + (r_ratio * vs_sludge) / vs_inoculum
    return factor if factor > 0 else 0.0
