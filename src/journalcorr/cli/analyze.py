"""Analysis CLI commands.

Commands:
    journalcorr analyze events
    journalcorr analyze table pizza
    journalcorr analyze correlate "brushed teeth"
    journalcorr analyze rank --threshold 0.1 --sort --format json
    journalcorr analyze synthesize peanuts-no-teeth --with peanuts --without "brushed teeth"

All commands read the journal given by ``--journal``, falling back to the
configured ``journal_path`` and then to the bundled reference journal.
Synthesized events live only for the duration of the command.
"""

import json
import logging
from pathlib import Path
from typing import Any, List, NoReturn, Optional

import typer
import yaml
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from journalcorr.analysis import (
    CorrelationAnalyzer,
    CorrelationResult,
    all_of,
    has_event,
    lacks_event,
)
from journalcorr.configuration.settings import DEFAULT_CONFIG_PATH, bootstrap_settings
from journalcorr.errors import JournalCorrError, format_error_for_cli
from journalcorr.journal import JournalEntry, load_journal, load_reference_journal

logger = logging.getLogger(__name__)

console = Console()

analyze_app = typer.Typer(help="Correlate journal events with the outcome flag")

FORMATS = ("table", "json", "yaml")


def _load_analyzer(journal: Optional[Path], config_path: Path) -> CorrelationAnalyzer:
    """Resolve settings and journal into an analyzer."""
    settings = bootstrap_settings(path=config_path, persist=False)
    journal_path = journal or settings.journal_path

    entries: List[JournalEntry]
    if journal_path is not None:
        logger.debug(f"Loading journal from {journal_path}")
        entries = load_journal(journal_path)
    else:
        logger.debug("Loading bundled reference journal")
        entries = load_reference_journal()

    return CorrelationAnalyzer(entries, settings.analysis.to_config())


def _check_format(format_output: str) -> None:
    if format_output not in FORMATS:
        console.print(f"[red]Invalid format: {format_output}[/red]")
        console.print(f"Valid: {', '.join(FORMATS)}")
        raise typer.Exit(1)


def _fail(error: JournalCorrError) -> NoReturn:
    console.print(escape(format_error_for_cli(error)), style="red", highlight=False)
    raise typer.Exit(1)


def _emit(payload: Any, format_output: str) -> bool:
    """Print JSON/YAML payloads; returns False for table output."""
    if format_output == "json":
        typer.echo(json.dumps(payload, indent=2))
        return True
    if format_output == "yaml":
        typer.echo(yaml.dump(payload, default_flow_style=False, sort_keys=False))
        return True
    return False


def _results_table(results: List[CorrelationResult], title: str) -> Table:
    table = Table(title=title)
    table.add_column("Event", style="cyan")
    table.add_column("Phi", justify="right")
    table.add_column("Counts (n00, n01, n10, n11)", justify="right")

    for result in results:
        if result.degenerate:
            phi = "[yellow]undefined[/yellow]"
        elif result.coefficient > 0:
            phi = f"[green]{result.coefficient:+.4f}[/green]"
        else:
            phi = f"[red]{result.coefficient:+.4f}[/red]"
        table.add_row(escape(result.event), phi, str(result.table))
    return table


JournalOption = typer.Option(None, "--journal", "-j", help="Journal JSON file")
ConfigOption = typer.Option(DEFAULT_CONFIG_PATH, "--config", help="Path to config file")
FormatOption = typer.Option("table", "--format", help="Output format: table, json, or yaml")


@analyze_app.command("events")
def events_command(
    journal: Optional[Path] = JournalOption,
    config_path: Path = ConfigOption,
    format_output: str = FormatOption,
) -> None:
    """List distinct events in order of first appearance."""
    _check_format(format_output)
    try:
        analyzer = _load_analyzer(journal, config_path)
        events = analyzer.vocabulary()
    except JournalCorrError as e:
        _fail(e)

    if _emit({"events": events, "total": len(events)}, format_output):
        return

    table = Table(title=f"Journal Events ({len(events)} total)")
    table.add_column("#", justify="right", style="dim")
    table.add_column("Event", style="cyan")
    for i, event in enumerate(events, 1):
        table.add_row(str(i), escape(event))
    console.print(table)


@analyze_app.command("table")
def table_command(
    event: str = typer.Argument(..., help="Event name"),
    journal: Optional[Path] = JournalOption,
    config_path: Path = ConfigOption,
    format_output: str = FormatOption,
) -> None:
    """Show the contingency table of an event against the outcome."""
    _check_format(format_output)
    try:
        analyzer = _load_analyzer(journal, config_path)
        counts = analyzer.table(event)
    except JournalCorrError as e:
        _fail(e)

    if _emit({"event": event, "table": counts.as_list(), "total": counts.total}, format_output):
        return

    table = Table(title=f"Contingency table: {escape(event)}")
    table.add_column("")
    table.add_column("No outcome", justify="right")
    table.add_column("Outcome", justify="right")
    table.add_row("Event absent", str(counts.n00), str(counts.n10))
    table.add_row("Event present", str(counts.n01), str(counts.n11))
    console.print(table)


@analyze_app.command("correlate")
def correlate_command(
    event: str = typer.Argument(..., help="Event name"),
    journal: Optional[Path] = JournalOption,
    config_path: Path = ConfigOption,
    format_output: str = FormatOption,
) -> None:
    """Compute the phi coefficient of one event."""
    _check_format(format_output)
    try:
        analyzer = _load_analyzer(journal, config_path)
        result = analyzer.correlate(event)
    except JournalCorrError as e:
        _fail(e)

    if _emit(result.model_dump(mode="json"), format_output):
        return
    console.print(_results_table([result], title=f"Correlation: {escape(event)}"))


@analyze_app.command("rank")
def rank_command(
    threshold: Optional[float] = typer.Option(
        None, "--threshold", "-t", min=0.0, max=1.0, help="Keep events with |phi| above this"
    ),
    sort: bool = typer.Option(
        False, "--sort", "-s", help="Order strongest first instead of first appearance"
    ),
    journal: Optional[Path] = JournalOption,
    config_path: Path = ConfigOption,
    format_output: str = FormatOption,
) -> None:
    """Rank every event by its correlation with the outcome."""
    _check_format(format_output)
    try:
        analyzer = _load_analyzer(journal, config_path)
        results = analyzer.rank(
            threshold=threshold, sort_by_magnitude=True if sort else None
        )
    except JournalCorrError as e:
        _fail(e)

    effective = analyzer.config.threshold if threshold is None else threshold
    payload = {
        "threshold": effective,
        "results": [r.model_dump(mode="json") for r in results],
        "total": len(results),
    }
    if _emit(payload, format_output):
        return

    if not results:
        console.print(f"[yellow]No events with |phi| > {effective}[/yellow]")
        return
    console.print(
        _results_table(results, title=f"Events with |phi| > {effective} ({len(results)} total)")
    )


@analyze_app.command("synthesize")
def synthesize_command(
    name: str = typer.Argument(..., help="Name of the derived event"),
    with_events: Optional[List[str]] = typer.Option(
        None, "--with", "-w", help="Event the entry must have (repeatable)"
    ),
    without_events: Optional[List[str]] = typer.Option(
        None, "--without", "-x", help="Event the entry must not have (repeatable)"
    ),
    journal: Optional[Path] = JournalOption,
    config_path: Path = ConfigOption,
    format_output: str = FormatOption,
) -> None:
    """Derive an event from existing ones and correlate it."""
    _check_format(format_output)
    with_events = with_events or []
    without_events = without_events or []
    if not with_events and not without_events:
        console.print("[red]Give at least one --with or --without event[/red]")
        raise typer.Exit(1)

    predicate = all_of(
        *[has_event(e) for e in with_events],
        *[lacks_event(e) for e in without_events],
    )
    try:
        analyzer = _load_analyzer(journal, config_path)
        result = analyzer.synthesize(name, predicate)
    except JournalCorrError as e:
        _fail(e)

    if _emit(result.model_dump(mode="json"), format_output):
        return
    console.print(_results_table([result], title=f"Derived event: {escape(name)}"))
