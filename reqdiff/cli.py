"""CLI entry point: reqdiff.

Usage:
    reqdiff requirements-old.txt requirements.txt
    reqdiff a.txt b.txt --filter changed
    reqdiff a.txt b.txt --json
    reqdiff a.txt b.txt --fail-on-change    # exit 3 if anything differs
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click
import structlog

from reqdiff.core.logging import setup_logging
from reqdiff.differ import diff
from reqdiff.parser import parse
from reqdiff.report import STATUS_NAMES, DiffRow, summarize, to_rows

log = structlog.get_logger("reqdiff.cli")

EXIT_CHANGED = 3

_HEADERS = ("Package", "Status", "File A version", "File B version")

_STATUS_LABELS = {
    "added": "Added",
    "removed": "Removed",
    "changed": "Changed",
    "same": "Unchanged",
}


def _read(path: str) -> str:
    return Path(path).read_text(encoding="utf-8-sig", errors="replace")


def _format_summary(counts: dict[str, int]) -> str:
    parts = [f"All ({counts['all']})"]
    parts.extend(f"{label} ({counts[key]})" for key, label in _STATUS_LABELS.items())
    return "  ".join(parts)


def _format_table(rows: list[DiffRow]) -> list[str]:
    cells = [
        (r.name, _STATUS_LABELS[r.status.value], r.from_version, r.to_version)
        for r in rows
    ]
    widths = [len(h) for h in _HEADERS]
    for row in cells:
        widths = [max(w, len(c)) for w, c in zip(widths, row)]

    def fmt(row: tuple[str, ...]) -> str:
        return "  ".join(c.ljust(w) for c, w in zip(row, widths)).rstrip()

    lines = [fmt(_HEADERS), fmt(tuple("-" * w for w in widths))]
    lines.extend(fmt(row) for row in cells)
    return lines


@click.command()
@click.argument("file_a", type=click.Path(exists=True, dir_okay=False))
@click.argument("file_b", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--filter",
    "status",
    type=click.Choice(STATUS_NAMES),
    default="all",
    show_default=True,
    help="Only show packages with this status",
)
@click.option("--json", "as_json", is_flag=True, help="Output as JSON")
@click.option(
    "--fail-on-change",
    is_flag=True,
    help=f"Exit with status {EXIT_CHANGED} if any package was added, removed or changed",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(
    file_a: str,
    file_b: str,
    status: str,
    as_json: bool,
    fail_on_change: bool,
    verbose: bool,
) -> None:
    """Compare two requirements files: FILE_A (original) and FILE_B (updated)."""
    setup_logging("DEBUG" if verbose else None)

    text_a, text_b = _read(file_a), _read(file_b)
    if not text_a.strip() and not text_b.strip():
        click.echo("Nothing to compare: both manifests are empty.")
        return

    result = diff(parse(text_a), parse(text_b))
    log.info("cli.compared", file_a=file_a, file_b=file_b, total=result.total)

    if result.total == 0:
        click.echo(
            "No packages found. Check that the content is valid requirements.txt format.",
            err=True,
        )
        return

    rows = to_rows(result, status)
    counts = summarize(result)

    if as_json:
        payload = {"summary": counts, "rows": [r.to_dict() for r in rows]}
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        click.echo(_format_summary(counts))
        click.echo()
        for line in _format_table(rows):
            click.echo(line)

    if fail_on_change and result.has_changes:
        sys.exit(EXIT_CHANGED)


if __name__ == "__main__":
    main()
