"""Command line entry point.

Usage:
    # Parse résumés and print the normalized records as JSON
    resume-pipeline parse cv.pdf letter.docx

    # Write one JSON file per résumé instead
    resume-pipeline parse cv.pdf --output-dir out/

    # Recompute totalExperience of previously normalized records
    resume-pipeline recalculate out/*.json
"""

import json
import sys
from pathlib import Path
from typing import Annotated, Optional

import typer

from resume_pipeline.config.settings import Settings
from resume_pipeline.experience.calculator import ExperienceCalculator
from resume_pipeline.logging.logger import Log
from resume_pipeline.processor.exceptions import FileReadError
from resume_pipeline.processor.file_loader import FileLoader
from resume_pipeline.processor.processor import build_processor

app = typer.Typer(
    help="Turn résumé documents (PDF, DOC, DOCX) into normalized structured records.",
    add_completion=False,
)


def _setup() -> Settings:
    settings = Settings()
    Log.configure(settings.log_level, stream=sys.stderr)
    return settings


def _dump(payload: object) -> str:
    return json.dumps(payload, ensure_ascii=False, indent=2)


@app.callback(invoke_without_command=True)
def main(ctx: typer.Context) -> None:
    """Show help by default when no command is provided."""
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("parse")
def parse_command(
    paths: Annotated[
        list[Path],
        typer.Argument(help="Résumé files to parse"),
    ],
    output_dir: Annotated[
        Optional[Path],
        typer.Option(
            "--output-dir",
            "-o",
            help="Write <name>.json per résumé into this directory instead of stdout",
        ),
    ] = None,
) -> None:
    """Parse résumé documents into normalized JSON records."""
    settings = _setup()
    processor = build_processor(settings)
    loader = FileLoader()

    payloads: list[dict[str, object]] = []
    unreadable = 0
    for path in paths:
        try:
            document = loader.load(path)
        except FileReadError as exc:
            Log.error(str(exc))
            typer.secho(f"Skipping {path}: {exc}", fg=typer.colors.RED, err=True)
            unreadable += 1
            continue

        payload = processor.process(document).to_payload()
        if output_dir is None:
            payloads.append(payload)
            continue
        output_dir.mkdir(parents=True, exist_ok=True)
        target = output_dir / f"{path.stem}.json"
        target.write_text(_dump(payload), encoding="utf-8")
        typer.echo(f"{path} -> {target} ({payload['status']})")

    if output_dir is None:
        typer.echo(_dump(payloads[0] if len(payloads) == 1 else payloads))
    if unreadable:
        raise typer.Exit(code=1)


def _recalculate_record(record: dict[str, object], calculator: ExperienceCalculator) -> bool:
    """Update ``totalExperience`` in place. Returns True when it changed."""
    experience = record.get("experience")
    entries = experience if isinstance(experience, list) else []
    total = calculator.calculate(entries)
    changed = record.get("totalExperience") != total
    record["totalExperience"] = total
    return changed


@app.command("recalculate")
def recalculate_command(
    paths: Annotated[
        list[Path],
        typer.Argument(help="JSON files holding one record or a list of records"),
    ],
    dry_run: Annotated[
        bool,
        typer.Option("--dry-run", help="Report changes without writing files"),
    ] = False,
) -> None:
    """Recompute totalExperience of previously normalized records."""
    _setup()
    calculator = ExperienceCalculator()
    updated = 0
    failed = 0

    for path in paths:
        try:
            data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            typer.secho(f"Skipping {path}: {exc}", fg=typer.colors.RED, err=True)
            failed += 1
            continue

        records = data if isinstance(data, list) else [data]
        changed = 0
        for record in records:
            if not isinstance(record, dict):
                continue
            before = record.get("totalExperience")
            if _recalculate_record(record, calculator):
                changed += 1
                typer.echo(f"{path}: {record.get('name', '')}: {before} -> {record['totalExperience']}")
        if changed and not dry_run:
            path.write_text(_dump(data), encoding="utf-8")
        updated += changed

    typer.echo(f"Updated {updated} record(s)" + (" (dry run)" if dry_run else ""))
    if failed:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
