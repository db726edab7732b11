"""Output strategies for calculator results."""

from sludge.outputs.base import OutputStrategy
from sludge.outputs.csv import CSVOutputStrategy
from sludge.outputs.summary import area_summary, biomass_summary

__all__ = ["OutputStrategy", "CSVOutputStrategy", "area_summary", "biomass_summary"]
