"""ABOUTME: CLI entry point for typecoverage commands.
ABOUTME: Provides analyze and chart commands via Typer."""

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from typecoverage.config import load_roster
from typecoverage.coverage import (
    Classification,
    TeamAnalysis,
    TypedEntity,
    VulnerabilityStatus,
    analyze_team,
    format_multiplier,
)
from typecoverage.logs import init_logging
from typecoverage.settings import settings
from typecoverage.utils.type_chart import TYPE_CHART, TYPES

app = typer.Typer(
    name="typecoverage",
    help="Team type coverage and weakness analysis.",
    no_args_is_help=True,
)

console = Console()

_CLASS_STYLES = {
    Classification.WEAK: "red",
    Classification.NEUTRAL: "yellow",
    Classification.RESIST: "green",
}

_STATUS_STYLES = {
    VulnerabilityStatus.IMMUNE: "blue",
    VulnerabilityStatus.CRITICAL: "red",
    VulnerabilityStatus.MODERATE: "dark_orange",
    VulnerabilityStatus.GOOD: "green",
    VulnerabilityStatus.NEUTRAL: "white",
}


@app.callback()
def main() -> None:
    """Initialize logging from the project config when present."""
    if settings.logging_config_path.exists():
        init_logging(settings.logging_config_path)


def _parse_members(members: list[str]) -> list[TypedEntity]:
    """Parse "Type" or "Type/Type" arguments, optionally prefixed with "Name="."""
    roster: list[TypedEntity] = []
    for raw in members:
        name, sep, typing = raw.partition("=")
        if sep:
            roster.append(TypedEntity.from_string(typing, name=name.strip() or None))
        else:
            roster.append(TypedEntity.from_string(raw))
    return roster


def _print_members(analysis: TeamAnalysis) -> None:
    table = Table(title="Member matchups (damage taken)")
    table.add_column("Member")
    for attack in TYPES:
        table.add_column(attack.abbreviation, justify="center")

    for member in analysis.members:
        table.add_row(member.label(), *(format_multiplier(m) for m in member.defensive))

    console.print(table)


def _print_analysis(analysis: TeamAnalysis, verbose: bool) -> None:
    if analysis.coverage.is_empty:
        console.print("[yellow]Roster is empty: no coverage data.[/]")
        console.print(analysis.summary)
        return

    if verbose:
        _print_members(analysis)

    table = Table(title="Team coverage")
    table.add_column("Type")
    table.add_column("Offense", justify="right")
    table.add_column("Defense", justify="right")
    table.add_column("Class")
    table.add_column("Weak", justify="right")
    table.add_column("Resist", justify="right")
    table.add_column("Immune", justify="right")
    table.add_column("Status")

    for t, label, vuln in zip(TYPES, analysis.classifications, analysis.vulnerabilities, strict=True):
        class_style = _CLASS_STYLES[label]
        status_style = _STATUS_STYLES[vuln.status]
        table.add_row(
            t.display_name,
            format_multiplier(analysis.coverage.offensive_against(t)),
            format_multiplier(analysis.coverage.defensive_against(t)),
            f"[{class_style}]{label}[/]",
            str(vuln.weak_count),
            str(vuln.resist_count),
            str(vuln.immune_count),
            f"[{status_style}]{vuln.status.value}[/]",
        )

    console.print(table)
    console.print(f"[bold]{analysis.summary}[/]")
    for line in analysis.suggestions:
        console.print(f"  - {line}")


@app.command()
def analyze(
    members: list[str] | None = typer.Argument(None, help='Members as "Type", "Type/Type", or "Name=Type/Type"'),
    roster: Path | None = typer.Option(None, "--roster", "-r", help="Load the roster from a YAML file"),
    threshold: int | None = typer.Option(
        None, "--threshold", "-t", min=1, help="Weak members needed for a critical weakness"
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show per-member matchups"),
) -> None:
    """Analyze offensive coverage and defensive weaknesses of a roster."""
    try:
        entities = load_roster(roster) if roster is not None else _parse_members(members or [])
    except OSError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(1) from None
    except ValueError as e:
        console.print(f"[red]Error:[/] {escape(str(e))}")
        raise typer.Exit(1) from None

    analysis = analyze_team(entities, threshold=threshold)
    _print_analysis(analysis, verbose)


@app.command()
def chart() -> None:
    """Print the 18x18 effectiveness table (rows attack, columns defend)."""
    table = Table(title="Type effectiveness")
    table.add_column("ATK \\ DEF")
    for defend in TYPES:
        table.add_column(defend.abbreviation, justify="center")

    for attack in TYPES:
        table.add_row(attack.abbreviation, *(format_multiplier(m) for m in TYPE_CHART.row(attack)))

    console.print(table)


if __name__ == "__main__":
    app()
