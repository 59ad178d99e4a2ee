from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import typer

from .config import resolve_parameters
from .core import BuildParams, StripBatchBuilder
from .feasibility import InfeasibleRequestError, clamp_quantity
from .logging_setup import make_console, setup_logging
from .render import strip_panel
from .serialize import build_run_meta, emit_report_json, emit_strips_json, load_strips_json
from .verify import validate_strip, verify_batch
from .version import __version__

app = typer.Typer(help="Balanced 1-90 bingo strip generator CLI")

logger = logging.getLogger(__name__)


@app.callback(invoke_without_command=True)
def common_options(
    ctx: typer.Context,
    version: bool = typer.Option(
        False, "--version", help="Show application version and exit", is_eager=True
    ),
) -> None:
    if version:
        typer.echo(__version__)
        raise typer.Exit(0)
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit(0)


def _build_params(resolved: dict) -> BuildParams:
    seed_cfg = resolved.get("seed") or {}
    seed_value = seed_cfg.get("value")
    return BuildParams(
        count=clamp_quantity(resolved.get("count")),
        seed=None if seed_value is None else int(seed_value),
        rng_engine=str(seed_cfg.get("engine") or "py_random"),
        with_codes=bool(resolved.get("with_codes", True)),
        code_digits=int(resolved.get("code_digits", 4)),
        attempt_floor=int(resolved.get("attempt_floor", 2000)),
        attempts_per_strip=int(resolved.get("attempts_per_strip", 200)),
        validity_date=resolved.get("validity_date") or None,
    )


def _resolve(config: str, overrides: dict) -> tuple:
    resolved, params_hash, _cfg_path = resolve_parameters(
        config_path_str=config, cli_overrides=overrides
    )
    setup_logging(
        level=str(resolved.get("log_level", "INFO")),
        log_file=resolved.get("log_file"),
        json_format=(str(resolved.get("log_format", "text")) == "json"),
        colors=str(resolved.get("colors", "auto")),
    )
    return resolved, params_hash


def _collect_overrides(**options: object) -> dict:
    overrides = {}
    for key, value in options.items():
        if value is None:
            continue
        overrides[key.replace("__", ".")] = value
    return overrides


@app.command()
def run(
    config: str = typer.Option(None, "--config", help="Path to config file (YAML/JSON)"),
    count: Optional[int] = typer.Option(None, "--count", "-n", help="Number of strips (1-9999)"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible output"),
    rng_engine: str = typer.Option(None, "--rng-engine", help="py_random|numpy_pcg64"),
    codes: Optional[bool] = typer.Option(None, "--codes/--no-codes", help="Attach a unique code to each card"),
    code_digits: Optional[int] = typer.Option(None, "--code-digits", help="Width of card codes"),
    validity_date: str = typer.Option(None, "--validity-date", help="Expiry date YYYY-MM-DD"),
    out_strips: str = typer.Option(None, "--out-strips", help="strips.json output path"),
    out_report: str = typer.Option(None, "--out-report", help="report.json output path"),
    log_file: str = typer.Option(None, "--log-file", help="Log file path"),
    colors: str = typer.Option(None, "--colors", help="auto|always|never"),
    log_level: str = typer.Option(None, "--log-level", help="DEBUG|INFO|WARN|ERROR"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Resolve params and exit"),
    force: bool = typer.Option(False, "--force", help="Overwrite outputs if they exist"),
    no_mkdirs: bool = typer.Option(False, "--no-mkdirs", help="Do not create parent directories"),
) -> None:
    """Generate a batch of unique strips and write strips.json and report.json."""

    overrides = _collect_overrides(
        count=count,
        seed__value=seed,
        seed__engine=rng_engine,
        with_codes=codes,
        code_digits=code_digits,
        validity_date=validity_date,
        out_strips=out_strips,
        out_report=out_report,
        log_file=log_file,
        colors=colors,
        log_level=log_level,
    )
    resolved, params_hash = _resolve(config, overrides)
    params = _build_params(resolved)

    if dry_run:
        typer.echo(f"Strips: {params.count}")
        typer.echo(f"Params hash: {params_hash}")
        raise typer.Exit(0)

    try:
        result = StripBatchBuilder().build(params)
    except InfeasibleRequestError as exc:
        logger.error("%s", exc)
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2)

    for warning in result.warnings:
        typer.echo(f"Warning: {warning}", err=True)

    report = verify_batch(result.strips, codes=result.codes)
    run_meta = build_run_meta(
        app_version=__version__,
        params_hash=params_hash,
        seed=params.seed,
        rng_engine=params.rng_engine,
    )

    out_strips_path = Path(resolved.get("out_strips") or "strips.json")
    out_report_path = Path(resolved.get("out_report") or "report.json")
    try:
        emit_strips_json(
            out_strips_path,
            strips=result.strips,
            run_meta=run_meta,
            codes=result.codes,
            validity_date=result.validity_date,
            mkdirs=(not no_mkdirs),
            overwrite=force,
        )
        emit_report_json(out_report_path, report=report, mkdirs=(not no_mkdirs), overwrite=force)
    except FileExistsError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=1)

    typer.echo(
        f"Generated {len(result.strips)} strips ({sum(len(s) for s in result.strips)} cards) "
        f"in {result.metrics.total_time:.2f}s, {result.metrics.attempts} attempts "
        f"({result.metrics.attempts_per_strip:.1f} per accepted strip)"
    )
    typer.echo(f"Output files: {out_strips_path}, {out_report_path}")

    raise typer.Exit(code=0 if report["ok"] else 1)


@app.command()
def verify(
    strips: str = typer.Option(..., "--strips", help="Path to strips.json"),
    out_report: str = typer.Option(None, "--out-report", help="Write the report to this path"),
    force: bool = typer.Option(False, "--force", help="Overwrite the report if it exists"),
) -> None:
    """Re-validate strips from a strips.json file."""
    setup_logging(level="WARNING")
    path = Path(strips)
    if not path.exists():
        typer.echo(f"Error: file not found: {path}", err=True)
        raise typer.Exit(code=2)
    try:
        loaded, codes, _validity = load_strips_json(path)
    except ValueError as exc:
        typer.echo(f"Error: {exc}", err=True)
        raise typer.Exit(code=2)

    report = verify_batch(loaded, codes=codes)
    for entry in report["strips"]:  # type: ignore[union-attr]
        status = "OK" if entry["ok"] else (
            f"INVALID missing={entry['missing']} duplicates={entry['duplicates']}"
        )
        typer.echo(f"Strip #{entry['id']}: {status}")
    uniqueness = report["uniqueness"]
    typer.echo(f"Repeated cards: {uniqueness['card_collisions']}")  # type: ignore[index]
    if codes is not None:
        typer.echo(f"Repeated codes: {uniqueness['code_collisions']}")  # type: ignore[index]

    if out_report:
        emit_report_json(Path(out_report), report=report, mkdirs=True, overwrite=force)

    raise typer.Exit(code=0 if report["ok"] else 1)


@app.command()
def show(
    strips: str = typer.Option(None, "--strips", help="Show strips from a strips.json file"),
    count: int = typer.Option(1, "--count", "-n", help="Strips to generate when no file is given"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible output"),
    validity_date: str = typer.Option(None, "--validity-date", help="Expiry date YYYY-MM-DD"),
    colors: str = typer.Option("auto", "--colors", help="auto|always|never"),
) -> None:
    """Print strips as ticket grids."""
    setup_logging(level="WARNING", colors=colors)
    if strips:
        path = Path(strips)
        if not path.exists():
            typer.echo(f"Error: file not found: {path}", err=True)
            raise typer.Exit(code=2)
        try:
            loaded, codes, file_validity = load_strips_json(path)
        except ValueError as exc:
            typer.echo(f"Error: {exc}", err=True)
            raise typer.Exit(code=2)
        validity_date = validity_date or file_validity
    else:
        result = StripBatchBuilder().build(
            BuildParams(count=clamp_quantity(count), seed=seed, validity_date=validity_date)
        )
        loaded, codes = result.strips, result.codes

    console = make_console(colors)
    all_ok = True
    for idx, strip in enumerate(loaded, start=1):
        validation = validate_strip(strip)
        all_ok = all_ok and validation.ok
        console.print(
            strip_panel(
                strip,
                index=idx,
                validation=validation,
                codes=codes[idx - 1] if codes else None,
                expires=validity_date,
            )
        )
    raise typer.Exit(code=0 if all_ok else 1)


def main(_argv: list[str] | None = None) -> int:
    try:
        app(standalone_mode=True)
        return 0
    except SystemExit as e:
        return int(e.code) if e.code is not None else 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
