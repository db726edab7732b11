"""Parameter store and field-edit boundary.

The presentation layer owns one ParameterStore. Each edit parses the raw
text, derives dependent fields and replaces the current snapshot wholesale,
so readers always see a consistent set of inputs. The calculators are then
re-run against the new snapshot.
"""

import logging
import math
import re

from pydantic import BaseModel

from sludge.calculators.area import compute_area
from sludge.calculators.biomass import compute_biomass
from sludge.config import CONSTANTS, DEFAULT_CONFIG, DefaultParameters
from sludge.models.enums import ParamGroup
from sludge.models.params import MixtureParams, ParameterSnapshot
from sludge.models.results import AreaCalculationResults, CalculationResults

logger = logging.getLogger(__name__)

# Longest leading decimal literal, as a form field's number parser reads it
_NUMERIC_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def parse_numeric(raw_value: str | float | int | None) -> float:
    """Parse a form value as a float, substituting 0 for anything unusable.

    Leading whitespace is ignored and trailing text after a numeric prefix is
    dropped ("12.5 kg" -> 12.5). Empty, non-numeric and non-finite values
    become 0.0.
    """
    if raw_value is None:
        return 0.0
    if isinstance(raw_value, (int, float)):
        value = float(raw_value)
        return value if math.isfinite(value) else 0.0

    match = _NUMERIC_PREFIX.match(raw_value.strip())
    if match is None:
        return 0.0

    value = float(match.group(0))
    return value if math.isfinite(value) else 0.0


def derive_vs_sludge(ts_sludge: float) -> float:
    """Sludge volatile solids from total solids (VS ~ 75% of TS), 2 decimals."""
    return round(ts_sludge * CONSTANTS.VS_TO_TS_RATIO, CONSTANTS.VS_SLUDGE_DECIMALS)


def sync_derived_fields(mixture: MixtureParams, edited_field: str) -> MixtureParams:
    """Apply the one-way ts_sludge -> vs_sludge derivation after an edit.

    Only an edit of ts_sludge triggers it; editing vs_sludge directly is kept
    as entered and never changes ts_sludge.
    """
    if edited_field != "ts_sludge":
        return mixture
    return mixture.model_copy(update={"vs_sludge": derive_vs_sludge(mixture.ts_sludge)})


def resolve_field_name(model: BaseModel, field_name: str) -> str:
    """Map a snake_case name or camelCase alias to the model's field name.

    Raises:
        KeyError: If the model has no such field
    """
    for name, info in type(model).model_fields.items():
        if field_name in (name, info.alias):
            return name
    msg = f"{type(model).__name__} has no field '{field_name}'"
    raise KeyError(msg)


class ParameterStore:
    """Holds the current parameter snapshot and applies field edits.

    There is a single writer (the input handler); every edit produces a new
    immutable snapshot rather than mutating the old one.
    """

    def __init__(
        self,
        snapshot: ParameterSnapshot | None = None,
        defaults: DefaultParameters | None = None,
    ):
        self._defaults = defaults or DEFAULT_CONFIG.defaults
        self._snapshot = snapshot or self._defaults.to_snapshot()

    @property
    def snapshot(self) -> ParameterSnapshot:
        """The current parameter snapshot."""
        return self._snapshot

    def on_field_change(
        self,
        group: ParamGroup | str,
        field_name: str,
        raw_value: str | float | None,
    ) -> ParameterSnapshot:
        """Apply an edit of one field from the presentation layer.

        Args:
            group: Parameter group holding the field
            field_name: Field name, snake_case or camelCase
            raw_value: Raw text from the form; unparseable text becomes 0

        Returns:
            The new current snapshot.

        Raises:
            KeyError: If the field does not exist in the group
            ValueError: If the group name is unknown
        """
        group = ParamGroup(group)
        params = self._snapshot.group(group)
        name = resolve_field_name(params, field_name)
        value = parse_numeric(raw_value)

        params = params.model_copy(update={name: value})
        if group is ParamGroup.MIXTURE:
            params = sync_derived_fields(params, name)

        self._snapshot = self._snapshot.with_group(group, params)
        logger.debug(f"Set {group.value}.{name}={value} (raw {raw_value!r})")
        return self._snapshot

    def set_target_biomass(self, raw_value: str | float | None) -> ParameterSnapshot:
        """Apply an edit of the land mode target biomass."""
        value = parse_numeric(raw_value)
        self._snapshot = self._snapshot.model_copy(update={"target_biomass": value})
        logger.debug(f"Set target_biomass={value} (raw {raw_value!r})")
        return self._snapshot

    def reset(self) -> ParameterSnapshot:
        """Restore the configured default parameters."""
        self._snapshot = self._defaults.to_snapshot()
        return self._snapshot

    def compute_biomass(self) -> CalculationResults:
        """Run the biomass mode calculator on the current snapshot."""
        snapshot = self._snapshot
        return compute_biomass(
            snapshot.digestate, snapshot.agronomic, snapshot.mixture, snapshot.biomass
        )

    def compute_area(self) -> AreaCalculationResults:
        """Run the land mode calculator on the current snapshot."""
        snapshot = self._snapshot
        return compute_area(
            snapshot.target_biomass,
            snapshot.digestate,
            snapshot.agronomic,
            snapshot.mixture,
            snapshot.biomass,
        )
