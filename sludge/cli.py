"""Command line front end for the RAS AD-Sludge calculator.

A thin consumer of the calculators for local use: every option edits the
default parameter snapshot through the same ParameterStore a UI would use,
so editing --ts-sludge derives VS sludge unless --vs-sludge is also given.

Usage:
    sludge-calc biomass
    sludge-calc biomass --fcr 1.3 --r-ratio 8 --output-dir out/
    sludge-calc land --target-biomass 12000
    sludge-calc sweep fcr --mode land --start 0.8 --stop 1.6 --step 0.1
    sludge-calc --help
"""

import logging
from pathlib import Path

import typer

from sludge.calculators import sweep as build_sweep
from sludge.common.log_utils import configure_logging
from sludge.config import DEFAULT_CONFIG
from sludge.models.enums import CalculatorMode, ParamGroup, SweepVariable
from sludge.models.params import SweepRange
from sludge.outputs import CSVOutputStrategy, area_summary, biomass_summary
from sludge.runner import run_assessment
from sludge.store import ParameterStore

app = typer.Typer(help="Sustainable biomass and spreading area calculator for RAS sludge")

# (group, field) in the order edits are applied; ts_sludge comes
# before vs_sludge so an explicit VS overrides the derived one.
PARAMETER_OPTIONS: list[tuple[ParamGroup, str]] = [
    (ParamGroup.DIGESTATE, "ts_percent"),
    (ParamGroup.DIGESTATE, "n_tot_percent_ts"),
    (ParamGroup.AGRONOMIC, "max_nitrogen_load"),
    (ParamGroup.AGRONOMIC, "single_intervention_load"),
    (ParamGroup.MIXTURE, "r_ratio"),
    (ParamGroup.MIXTURE, "ts_inoculum"),
    (ParamGroup.MIXTURE, "vs_inoculum"),
    (ParamGroup.MIXTURE, "ts_sludge"),
    (ParamGroup.MIXTURE, "vs_sludge"),
    (ParamGroup.BIOMASS, "sludge_production_rate"),
    (ParamGroup.BIOMASS, "fcr"),
]

TS_PERCENT = typer.Option(None, "--ts-percent", help="Digestate total solids (%)")
N_TOT_PERCENT_TS = typer.Option(None, "--n-tot", help="Digestate total nitrogen (% of TS)")
MAX_NITROGEN_LOAD = typer.Option(None, "--max-n", help="Nitrogen ceiling (kg N/ha/yr)")
SINGLE_INTERVENTION_LOAD = typer.Option(
    None, "--event-load", help="Digestate per spreading event (t/ha)"
)
R_RATIO = typer.Option(None, "--r-ratio", "-r", help="Inoculum/substrate ratio on VS")
TS_INOCULUM = typer.Option(None, "--ts-inoculum", help="Inoculum total solids (%)")
VS_INOCULUM = typer.Option(None, "--vs-inoculum", help="Inoculum volatile solids (%)")
TS_SLUDGE = typer.Option(None, "--ts-sludge", help="Sludge total solids (%), derives VS sludge")
VS_SLUDGE = typer.Option(None, "--vs-sludge", help="Sludge volatile solids (%)")
SLUDGE_PRODUCTION_RATE = typer.Option(
    None, "--production-rate", "-p", help="Sludge production (kg TS / kg feed)"
)
FCR = typer.Option(None, "--fcr", help="Feed conversion ratio (kg feed / kg biomass)")
TARGET_BIOMASS = typer.Option(None, "--target-biomass", "-b", help="Fish biomass (kg)")
OUTPUT_DIR = typer.Option(
    None, "--output-dir", "-o", help="Write results and sensitivity sweeps as CSV here"
)


def build_store(
    edits: dict[str, float | None], target_biomass: float | None = None
) -> ParameterStore:
    """Apply the given option values to a store holding the default snapshot."""
    store = ParameterStore(defaults=DEFAULT_CONFIG.defaults)
    for group, field in PARAMETER_OPTIONS:
        value = edits.get(field)
        if value is not None:
            store.on_field_change(group, field, value)
    if target_biomass is not None:
        store.set_target_biomass(target_biomass)
    return store


def echo_rows(rows: list[tuple[str, str]]) -> None:
    width = max(len(label) for label, _ in rows)
    for label, value in rows:
        typer.echo(f"{label:<{width}}  {value}")


def write_outputs(mode: CalculatorMode, store: ParameterStore, output_dir: Path) -> None:
    frames = run_assessment(mode, store.snapshot, DEFAULT_CONFIG)
    paths = CSVOutputStrategy().write(frames, output_dir, prefix=mode.value)
    for path in paths:
        typer.echo(f"Wrote {path}")


@app.callback()
def main(
    log_level: str = typer.Option(
        DEFAULT_CONFIG.log_level, "--log-level", help="Log level (DEBUG, INFO, WARNING, ...)"
    ),
):
    """Sustainable biomass and spreading area calculator for RAS sludge."""
    # Leave logging alone when a host application has already configured it
    if not logging.getLogger().handlers:
        configure_logging(log_level)


@app.command()
def biomass(
    ts_percent: float | None = TS_PERCENT,
    n_tot_percent_ts: float | None = N_TOT_PERCENT_TS,
    max_nitrogen_load: float | None = MAX_NITROGEN_LOAD,
    single_intervention_load: float | None = SINGLE_INTERVENTION_LOAD,
    r_ratio: float | None = R_RATIO,
    ts_inoculum: float | None = TS_INOCULUM,
    vs_inoculum: float | None = VS_INOCULUM,
    ts_sludge: float | None = TS_SLUDGE,
    vs_sludge: float | None = VS_SLUDGE,
    sludge_production_rate: float | None = SLUDGE_PRODUCTION_RATE,
    fcr: float | None = FCR,
    output_dir: Path | None = OUTPUT_DIR,
):
    """Calculate the fish biomass sustainable per hectare under the nitrogen cap."""
    edits = locals().copy()
    store = build_store(edits)

    results = store.compute_biomass()
    echo_rows(biomass_summary(results, store.snapshot.agronomic.max_nitrogen_load))

    if output_dir is not None:
        write_outputs(CalculatorMode.BIOMASS, store, output_dir)


@app.command()
def land(
    target_biomass: float | None = TARGET_BIOMASS,
    ts_percent: float | None = TS_PERCENT,
    n_tot_percent_ts: float | None = N_TOT_PERCENT_TS,
    max_nitrogen_load: float | None = MAX_NITROGEN_LOAD,
    r_ratio: float | None = R_RATIO,
    ts_inoculum: float | None = TS_INOCULUM,
    vs_inoculum: float | None = VS_INOCULUM,
    ts_sludge: float | None = TS_SLUDGE,
    vs_sludge: float | None = VS_SLUDGE,
    sludge_production_rate: float | None = SLUDGE_PRODUCTION_RATE,
    fcr: float | None = FCR,
    output_dir: Path | None = OUTPUT_DIR,
):
    """Calculate the spreading area needed for the nitrogen of a fish biomass."""
    edits = locals().copy()
    store = build_store(edits, target_biomass)

    results = store.compute_area()
    snapshot = store.snapshot
    echo_rows(
        area_summary(results, snapshot.target_biomass, snapshot.agronomic.max_nitrogen_load)
    )

    if output_dir is not None:
        write_outputs(CalculatorMode.LAND, store, output_dir)


@app.command()
def sweep(
    variable: SweepVariable = typer.Argument(..., help="Parameter to sweep"),
    mode: CalculatorMode = typer.Option(
        CalculatorMode.BIOMASS, "--mode", "-m", help="Calculator whose output is swept"
    ),
    start: float | None = typer.Option(None, "--start", help="First sample"),
    stop: float | None = typer.Option(None, "--stop", help="Last sample"),
    step: float | None = typer.Option(None, "--step", help="Sample increment"),
    target_biomass: float | None = TARGET_BIOMASS,
    r_ratio: float | None = R_RATIO,
    ts_sludge: float | None = TS_SLUDGE,
    fcr: float | None = FCR,
):
    """Print a sensitivity sweep of one parameter, one "label<TAB>value" row per sample."""
    store = build_store({"r_ratio": r_ratio, "ts_sludge": ts_sludge, "fcr": fcr}, target_biomass)

    configured = DEFAULT_CONFIG.sweeps.range_for(variable)
    try:
        sweep_range = SweepRange(
            start=configured.start if start is None else start,
            stop=configured.stop if stop is None else stop,
            step=configured.step if step is None else step,
        )
        points = build_sweep(variable, sweep_range, store.snapshot, mode=mode).points()
    except ValueError as e:
        raise typer.BadParameter(str(e)) from e

    if mode is CalculatorMode.BIOMASS:
        unit, decimals = "kg/ha/yr", DEFAULT_CONFIG.sweeps.biomass_decimals
    else:
        unit, decimals = "ha", DEFAULT_CONFIG.sweeps.area_decimals
    typer.echo(f"{variable.value}\t{unit}")
    for point in points:
        typer.echo(f"{point.label}\t{point.y:.{decimals}f}")


if __name__ == "__main__":
    app()
