"""Unit tests for the parameter store and form value parsing."""

import pytest

from sludge.config import DefaultParameters
from sludge.models import ParamGroup
from sludge.store import ParameterStore, derive_vs_sludge, parse_numeric, resolve_field_name


class TestParseNumeric:
    """Tests for lenient form value parsing."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("12.5", 12.5),
            ("  7", 7.0),
            ("12.5 kg", 12.5),
            (".5", 0.5),
            ("-3", -3.0),
            ("1e3", 1000.0),
            ("1.2.3", 1.2),
            (4, 4.0),
            (2.5, 2.5),
        ],
    )
    def test_numeric_values(self, raw, expected):
        assert parse_numeric(raw) == expected

    @pytest.mark.parametrize(
        "raw",
        [
            "",
            "   ",
            "abc",
            "kg 12",
            "inf",
            "1e999",
            "\u0661\u0662",  # Arabic-Indic digits
            "\uff11\uff12",  # fullwidth digits
            None,
            float("nan"),
            float("inf"),
        ],
    )
    def test_unusable_values_become_zero(self, raw):
        assert parse_numeric(raw) == 0.0


class TestDerivedFields:
    """Tests for the sludge TS to VS derivation."""

    @pytest.mark.parametrize("ts_sludge", ["0.8", "1.2", "1.6", "2", "2.4"])
    def test_ts_edit_derives_vs(self, ts_sludge):
        store = ParameterStore()

        snapshot = store.on_field_change(ParamGroup.MIXTURE, "ts_sludge", ts_sludge)

        expected = round(float(ts_sludge) * 0.75, 2)
        assert snapshot.mixture.vs_sludge == expected
        assert derive_vs_sludge(float(ts_sludge)) == expected

    def test_vs_edit_does_not_change_ts(self):
        store = ParameterStore()

        snapshot = store.on_field_change(ParamGroup.MIXTURE, "vs_sludge", "0.5")

        assert snapshot.mixture.vs_sludge == 0.5
        assert snapshot.mixture.ts_sludge == 1.2

    def test_vs_edit_after_ts_edit_is_kept(self):
        store = ParameterStore()
        store.on_field_change(ParamGroup.MIXTURE, "ts_sludge", "2")

        snapshot = store.on_field_change(ParamGroup.MIXTURE, "vs_sludge", "1.7")

        assert snapshot.mixture.ts_sludge == 2.0
        assert snapshot.mixture.vs_sludge == 1.7

    def test_unparseable_ts_zeroes_vs(self):
        store = ParameterStore()

        snapshot = store.on_field_change(ParamGroup.MIXTURE, "ts_sludge", "n/a")

        assert snapshot.mixture.ts_sludge == 0.0
        assert snapshot.mixture.vs_sludge == 0.0


class TestParameterStore:
    """Tests for field edits and snapshot replacement."""

    def test_starts_from_defaults(self, snapshot):
        assert ParameterStore().snapshot == snapshot

    def test_edit_by_camel_case_alias_and_group_name(self):
        store = ParameterStore()

        snapshot = store.on_field_change("digestate", "nTotPercentTS", "5")

        assert snapshot.digestate.n_tot_percent_ts == 5.0

    def test_edit_replaces_snapshot(self):
        store = ParameterStore()
        before = store.snapshot

        after = store.on_field_change(ParamGroup.BIOMASS, "fcr", "1.3")

        assert before.biomass.fcr == 1.1
        assert after.biomass.fcr == 1.3
        assert store.snapshot is after

    def test_unknown_field(self):
        with pytest.raises(KeyError, match="no field 'fcr'"):
            ParameterStore().on_field_change(ParamGroup.MIXTURE, "fcr", "1")

    def test_unknown_group(self):
        with pytest.raises(ValueError):
            ParameterStore().on_field_change("hatchery", "fcr", "1")

    def test_edit_recomputes_results(self):
        store = ParameterStore()
        base = store.compute_biomass().total_biomass

        store.on_field_change(ParamGroup.AGRONOMIC, "max_nitrogen_load", "340")

        assert store.compute_biomass().total_biomass == pytest.approx(2 * base)

    def test_zero_edit_gives_zero_output(self):
        store = ParameterStore()

        store.on_field_change(ParamGroup.MIXTURE, "vs_inoculum", "")

        assert store.compute_biomass().total_biomass == 0.0
        assert store.compute_area().required_area_ha == 0.0

    def test_set_target_biomass(self):
        store = ParameterStore()

        store.set_target_biomass("10000")

        assert store.snapshot.target_biomass == 10000.0
        assert store.compute_area().required_area_ha == pytest.approx(2.882, abs=1e-3)

    def test_reset(self):
        store = ParameterStore(defaults=DefaultParameters(fcr=1.3))
        store.on_field_change(ParamGroup.BIOMASS, "fcr", "2")

        snapshot = store.reset()

        assert snapshot.biomass.fcr == 1.3


def test_resolve_field_name(mixture):
    """Test names and aliases resolve to the field name."""
    assert resolve_field_name(mixture, "tsSludge") == "ts_sludge"
    assert resolve_field_name(mixture, "ts_sludge") == "ts_sludge"
