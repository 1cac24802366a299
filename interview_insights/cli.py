"""
Interview Insights — CLI entry point.

All commands follow this pattern:
  1. Load ``AppConfig`` via ``load_config()``.
  2. Configure logging.
  3. Load and validate inputs.
  4. Assemble the presentation tree.
  5. Report result to stdout.

Install and run::

    pip install -e .
    interview-insights --help
    interview-insights validate-config
    interview-insights classify 78
    interview-insights analyze data/payloads/interview_42.json
    interview-insights analyze --section training --format json
    interview-insights export data/payloads/interview_42.json --out out/qa.csv --format csv
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

app = typer.Typer(
    name="interview-insights",
    help="Interview analysis dashboard engine: score badges, explanations and section views.",
    add_completion=False,
)

_SECTIONS = ("qa", "training", "all")


# ── Helpers ───────────────────────────────────────────────────────────────────

def _load_config_or_exit(config_path: Optional[str] = None):
    """Load AppConfig, printing a friendly error and exiting on failure."""
    from interview_insights.config import load_config

    try:
        cfg_path = Path(config_path) if config_path else None
        return load_config(cfg_path)
    except FileNotFoundError as exc:
        typer.echo(f"[ERROR] {exc}", err=True)
        raise typer.Exit(code=1)
    except Exception as exc:
        typer.echo(f"[ERROR] Config validation failed: {exc}", err=True)
        raise typer.Exit(code=1)


def _configure_logging(config):
    """Set up logging from config."""
    from interview_insights.utils.logging import configure_logging
    configure_logging(config.logging)


def _load_dashboard_or_exit(payload_file: Optional[str], config):
    """Resolve, load, validate and assemble a payload; exit 1 on any failure."""
    from pydantic import ValidationError

    from interview_insights.assembly.dashboard import build_dashboard
    from interview_insights.reporting.reader import (
        find_latest_payload,
        load_payload_json,
        parse_payload,
    )

    if payload_file:
        path: Optional[Path] = Path(payload_file)
    else:
        path = find_latest_payload(Path(config.data.payload_dir))
        if path is None:
            typer.echo(
                f"[ERROR] No payload given and none found in {config.data.payload_dir}",
                err=True,
            )
            raise typer.Exit(code=1)

    raw = load_payload_json(path)
    if raw is None:
        typer.echo(f"[ERROR] Could not read a JSON object from: {path}", err=True)
        raise typer.Exit(code=1)

    try:
        payload = parse_payload(raw)
    except ValidationError as exc:
        typer.echo(f"[ERROR] Payload failed validation ({exc.error_count()} error(s)):", err=True)
        for err in exc.errors()[:5]:
            loc = ".".join(str(part) for part in err["loc"])
            typer.echo(f"  {loc}: {err['msg']}", err=True)
        if exc.error_count() > 5:
            typer.echo(f"  ... and {exc.error_count() - 5} more.", err=True)
        raise typer.Exit(code=1)

    return build_dashboard(payload, config.display)


def _check_section(section: str) -> str:
    section = section.lower()
    if section not in _SECTIONS:
        typer.echo(
            f"[ERROR] --section must be one of {', '.join(_SECTIONS)}, got '{section}'.",
            err=True,
        )
        raise typer.Exit(code=1)
    return section


# ── Commands ──────────────────────────────────────────────────────────────────

@app.command("validate-config")
def validate_config(
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file (default: config/default.toml).",
    ),
    show_full: bool = typer.Option(
        False,
        "--full",
        help="Print full config including all fields.",
    ),
) -> None:
    """Validate the configuration file and print parsed values.

    Exits with code 1 if the config fails validation.
    """
    config = _load_config_or_exit(config_path)

    typer.echo("Configuration validated successfully.")
    typer.echo("")
    typer.echo(f"  Answer preview:   {config.display.answer_preview_chars} chars")
    typer.echo(f"  Payload dir:      {config.data.payload_dir}")
    typer.echo(f"  Output dir:       {config.data.output_dir}")
    typer.echo(f"  Log level:        {config.logging.level}")
    typer.echo(f"  Debug mode:       {config.debug}")

    if show_full:
        typer.echo("")
        typer.echo("Full config (JSON):")
        typer.echo(json.dumps(config.model_dump(), indent=2, default=str))

    typer.echo("")
    typer.echo("[OK] Config valid.")


@app.command("classify")
def classify_score(
    score: int = typer.Argument(..., help="Score to classify (0-100)."),
) -> None:
    """Print the tier, colour and badge label for one score."""
    from interview_insights.scoring.tiers import score_badge

    badge = score_badge(score)
    typer.echo(f"  Score: {badge.score}")
    typer.echo(f"  Tier:  {badge.tier}")
    typer.echo(f"  Color: {badge.color}")
    typer.echo(f"  Label: {badge.label}")


@app.command("analyze")
def analyze(
    payload_file: Optional[str] = typer.Argument(
        None,
        help="Payload JSON file. Defaults to the newest file in config.data.payload_dir.",
    ),
    section: str = typer.Option(
        "all",
        "--section",
        "-s",
        help="Which section to show: qa, training or all.",
    ),
    output_format: str = typer.Option(
        "text",
        "--format",
        help="Output format: text (terminal layout) or json (presentation tree).",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Validate a payload and print its presentation tree.

    \b
    Examples:
      interview-insights analyze payload.json
      interview-insights analyze payload.json --section qa --format json
    """
    from interview_insights.reporting.formatters import format_qa_analysis, format_training

    section = _check_section(section)
    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    dashboard = _load_dashboard_or_exit(payload_file, config)

    if output_format == "json":
        if section == "qa":
            data = dashboard.qa_analysis.to_dict()
        elif section == "training":
            data = dashboard.training.to_dict()
        else:
            data = dashboard.to_dict()
        typer.echo(json.dumps(data, indent=2, ensure_ascii=False, default=str))
        return

    if output_format != "text":
        typer.echo(f"[ERROR] --format must be text or json, got '{output_format}'.", err=True)
        raise typer.Exit(code=1)

    if section in ("qa", "all"):
        typer.echo(format_qa_analysis(dashboard.qa_analysis))
    if section in ("training", "all"):
        typer.echo(format_training(dashboard.training))


@app.command("export")
def export(
    payload_file: Optional[str] = typer.Argument(
        None,
        help="Payload JSON file. Defaults to the newest file in config.data.payload_dir.",
    ),
    out: Optional[str] = typer.Option(
        None,
        "--out",
        "-o",
        help="Destination file. Defaults to <output_dir>/<section>_export.<format>.",
    ),
    section: str = typer.Option(
        "all",
        "--section",
        "-s",
        help="Which section to export: qa, training or all (json only).",
    ),
    output_format: str = typer.Option(
        "json",
        "--format",
        help="json (presentation tree) or csv (one row per answer / recommendation).",
    ),
    config_path: Optional[str] = typer.Option(
        None,
        "--config",
        help="Path to TOML config file.",
    ),
) -> None:
    """Write the presentation tree to a JSON or flat CSV file.

    CSV export needs a single section: ``--section qa`` gives one row per
    candidate answer, ``--section training`` one row per recommendation.
    """
    from interview_insights.reporting.export import (
        QA_EXPORT_FIELDS,
        TRAINING_EXPORT_FIELDS,
        export_to_csv,
        export_to_json,
        flatten_qa_analysis_for_export,
        flatten_training_for_export,
    )

    section = _check_section(section)
    if output_format not in ("json", "csv"):
        typer.echo(f"[ERROR] --format must be json or csv, got '{output_format}'.", err=True)
        raise typer.Exit(code=1)
    if output_format == "csv" and section == "all":
        typer.echo("[ERROR] CSV export needs --section qa or --section training.", err=True)
        raise typer.Exit(code=1)

    config = _load_config_or_exit(config_path)
    _configure_logging(config)

    dashboard = _load_dashboard_or_exit(payload_file, config)
    out_path = (
        Path(out) if out
        else Path(config.data.output_dir) / f"{section}_export.{output_format}"
    )

    if output_format == "json":
        if section == "qa":
            written = export_to_json(dashboard.qa_analysis.to_dict(), out_path)
        elif section == "training":
            written = export_to_json(dashboard.training.to_dict(), out_path)
        else:
            written = export_to_json(dashboard.to_dict(), out_path)
    elif section == "qa":
        rows = flatten_qa_analysis_for_export(dashboard.qa_analysis)
        written = export_to_csv(rows, out_path, fieldnames=QA_EXPORT_FIELDS)
    else:
        rows = flatten_training_for_export(dashboard.training)
        written = export_to_csv(rows, out_path, fieldnames=TRAINING_EXPORT_FIELDS)

    typer.echo(f"[OK] Exported {section} ({output_format}) to: {written}")


if __name__ == "__main__":
    app()
