"""Command line interface for inspecting and applying change reports."""

from __future__ import annotations

from pathlib import Path

import typer

from artifact_writer.records import load_report
from artifact_writer.utils.logging import configure_logging, get_logger
from artifact_writer.writers.direct import DirectWriter

configure_logging()
LOG = get_logger(__name__)

app = typer.Typer(add_completion=False)


@app.command()
def summary(report: Path = typer.Argument(..., help="Report written by a recording writer")) -> None:
    """Print the changes listed in a report."""
    codegen = load_report(report)
    typer.echo(f"changed: {len(codegen.changed)}")
    for update in codegen.changed:
        typer.echo(f"  M {update.path}")
    typer.echo(f"removed: {len(codegen.removed)}")
    for deletion in codegen.removed:
        typer.echo(f"  D {deletion.path}")


@app.command()
def apply(report: Path = typer.Argument(..., help="Report written by a recording writer")) -> None:
    """Replay a reviewed report onto the filesystem."""
    codegen = load_report(report)
    writer = DirectWriter()
    for deletion in codegen.removed:
        writer.remove(deletion.path)
    for update in codegen.changed:
        writer.write_if_changed(update.path, update.data.encode("utf-8"))
    writer.finalize()
    LOG.info("Applied change report", extra={"report": str(report)})
    typer.echo(f"Applied {len(codegen.changed)} changes and {len(codegen.removed)} removals")


@app.command()
def check(report: Path = typer.Argument(..., help="Report written by a recording writer")) -> None:
    """Exit non-zero when the report lists any change."""
    codegen = load_report(report)
    if codegen.is_empty:
        typer.echo("Generated artifacts are up to date")
        return
    typer.echo(
        f"Generated artifacts are out of date: {len(codegen.changed)} changed, {len(codegen.removed)} removed"
    )
    raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
