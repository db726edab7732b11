"""Nutrient mass-balance calculator for RAS sludge spreading.

Two calculators share one parameter model:
- biomass mode: sustainable fish biomass per hectare under a nitrogen cap
- land mode: spreading area needed for the nitrogen of a given biomass
"""
