"""Command-line interface for openlrae."""

import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from openlrae import __version__, config
from openlrae.analysis import AnalysisEngine, RiskAnalysisResult
from openlrae.bok import (
    Compatibility,
    ComponentWeight,
    License,
    LinkType,
    Obsolescence,
    Redistribution,
    RiskCategory,
    Spreading,
    Trend,
    Verbosity,
    get_knowledge_base,
)
from openlrae.errors import OpenLRAEError
from openlrae.i18n import Language, Messages
from openlrae.loader import load_project
from openlrae.model import Project
from openlrae.reporting import SECTIONS, report_as_json, report_as_text
from openlrae.samples import example_project

app = typer.Typer(
    name="openlrae",
    help="Open source license risk analysis for software projects",
    add_completion=False,
)
console = Console()


def version_callback(value: bool):
    if value:
        console.print(f"openlrae version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug messages"),
):
    """OpenLRAE - open source license risk analysis."""
    level = logging.DEBUG if verbose else config.get_log_level()
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def _parse_verbosity(raw: Optional[str]) -> Verbosity:
    if raw is None:
        return config.get_verbosity()
    try:
        return Verbosity(raw.upper())
    except ValueError:
        console.print(f"[red]Invalid verbosity: {raw}. Use essential, rich or detailed[/red]")
        raise typer.Exit(1)


def _run(project: Project, language: Language) -> list[RiskAnalysisResult]:
    engine = AnalysisEngine.with_all_analysers(project, language=language)
    return engine.analyse()


def _emit(
    project: Project,
    results: list[RiskAnalysisResult],
    verbosity: Verbosity,
    language: Language,
    output_json: bool,
    plain: bool,
    output: Optional[Path],
):
    if output_json:
        report = report_as_json(project, results, verbosity)
    elif plain or output:
        report = report_as_text(project, results, verbosity, language)
    else:
        _display_results(project, results, verbosity, language)
        return

    if output:
        output.write_text(report, encoding="utf-8")
        console.print(f"[green]Report written to {output}[/green]")
    else:
        typer.echo(report)


@app.command()
def analyse(
    project_file: Path = typer.Argument(..., help="Project definition (JSON or YAML)"),
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
    plain: bool = typer.Option(False, "--plain", "-p", help="Output as plain text"),
    verbosity: Optional[str] = typer.Option(None, "--verbosity", help="essential, rich or detailed"),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Report language (en, es)"),
    output: Optional[Path] = typer.Option(None, "--output", "-o", help="Write the report to a file"),
):
    """Analyse the license risks of a project definition file."""
    if not project_file.exists():
        console.print(f"[red]File {project_file} cannot be found[/red]")
        raise typer.Exit(1)
    if not project_file.is_file():
        console.print(f"[red]{project_file} is not a file[/red]")
        raise typer.Exit(1)

    level = _parse_verbosity(verbosity)
    lang = Language.from_locale(language) if language else config.get_language()
    try:
        project = load_project(project_file)
        results = _run(project, lang)
    except (OpenLRAEError, OSError) as e:
        console.print(f"[red]There was a problem analysing {project_file}: {e}[/red]")
        raise typer.Exit(1)

    _emit(project, results, level, lang, output_json, plain, output)


@app.command()
def example(
    output_json: bool = typer.Option(False, "--json", "-j", help="Output as JSON"),
    plain: bool = typer.Option(False, "--plain", "-p", help="Output as plain text"),
    verbosity: Optional[str] = typer.Option(None, "--verbosity", help="essential, rich or detailed"),
    language: Optional[str] = typer.Option(None, "--language", "-l", help="Report language (en, es)"),
):
    """Analyse a built-in sample project."""
    level = _parse_verbosity(verbosity)
    lang = Language.from_locale(language) if language else config.get_language()
    project = example_project()
    _emit(project, _run(project, lang), level, lang, output_json, plain, None)


def _risk_color(value: float) -> str:
    if value >= 0.67:
        return "red"
    elif value >= 0.33:
        return "orange1"
    elif value > 0.0:
        return "yellow"
    else:
        return "green"


def _display_results(
    project: Project,
    results: list[RiskAnalysisResult],
    verbosity: Verbosity,
    language: Language,
):
    """Display results in a formatted way."""
    msg = Messages(language).get
    licenses = ", ".join(lic.value for lic in project.licenses)
    console.print(Panel(
        f"{msg('report.licenses')}: [bold]{licenses}[/bold]\n"
        f"{msg('report.redistribution')}: {msg(f'redistribution.{project.redistribution.value}')}",
        title=f"[bold]{project.name}-{project.version}[/bold]",
    ))

    bindings = Table(title=msg("report.bindings"))
    bindings.add_column("Component", style="cyan")
    bindings.add_column("License", style="magenta")
    bindings.add_column("Link")
    bindings.add_column(msg("report.contribution"), justify="right")
    for binding in project.bindings:
        bindings.add_row(
            f"{binding.component.name}-{binding.component.version}",
            binding.license.value,
            msg(f"link.{binding.link.value}"),
            f"{binding.contribution:g}",
        )
    console.print(bindings)

    summary = Table(title=msg("report.risk_analysis"))
    summary.add_column("Risk", style="cyan")
    summary.add_column("Value", justify="right")
    summary.add_column("Exposure", justify="right")
    summary.add_column("Impact", justify="right")
    for result in results:
        color = _risk_color(result.value)
        summary.add_row(
            result.title,
            f"[bold {color}]{result.value:.4f}[/bold {color}]",
            f"{result.exposure:.4f}",
            f"{result.impact:.4f}",
        )
    console.print(summary)

    for result in results:
        data = result.to_dict(verbosity)
        if not any(data[section] for section in SECTIONS):
            continue
        color = _risk_color(result.value)
        body = []
        for section in SECTIONS:
            if data[section]:
                body.append(f"[bold]{msg(f'report.{section}')}:[/bold]")
                body.extend(f"  • {text}" for text in data[section])
        console.print(Panel("\n".join(body), title=result.title, border_style=color))


@app.command()
def info():
    """Show what the knowledge base supports."""
    kb = get_knowledge_base()

    def listing(title: str, rows):
        table = Table(title=title)
        table.add_column("Value", style="cyan")
        table.add_column("Description")
        for name, description in rows:
            table.add_row(name, description)
        console.print(table)

    messages = Messages(config.get_language())
    listing("Supported risks", [
        (category.value, messages.get(f"risk.{category.value}"))
        for category in RiskCategory
    ])
    listing("Licenses for components", [(lic.value, lic.full_name) for lic in License.for_components()])
    listing("Licenses for projects", [(lic.value, lic.full_name) for lic in License.for_projects()])
    listing("Link types", [(link.value, link.description) for link in LinkType])
    listing("Redistributions", [(r.value, r.description) for r in Redistribution])
    listing("Compatibilities", [(c.value, f"{c.score:.2f} - {c.description}") for c in Compatibility])
    listing("Component weights", [(w.value, f"{w.weight:.2f} - {w.description}") for w in ComponentWeight])
    listing("Obsolescences", [(o.value, f"{o.score:.2f} - {o.description}") for o in Obsolescence])
    listing("Spreadings", [(s.value, f"{s.score:.2f} - {s.description}") for s in Spreading])
    listing("Trends", [(t.value, f"{t.score:.2f} - {t.description}") for t in Trend])

    table = kb.compatibilities
    console.print(
        f"\n[bold]Compatibility coverage:[/bold] {len(table):,} of "
        f"{table.theoretical_size():,} combinations ({table.coverage:.1%})"
    )


@app.command()
def combinations(
    unsupported: bool = typer.Option(False, "--unsupported", "-u", help="List the combinations not covered yet"),
):
    """List license combinations the knowledge base can (or cannot) analyse."""
    table = get_knowledge_base().compatibilities
    console.print("COMPONENT_LICENSE (LINK) --> PROJECT_LICENSE (REDISTRIBUTION)")
    count = 0
    for component_license, link, project_license, redistribution in table.combinations(supported=not unsupported):
        count += 1
        console.print(
            f"{count}- Component: {component_license.value} ({link.value}) --> "
            f"Project: {project_license.value} ({redistribution.value})",
            highlight=False,
        )
    label = "unsupported" if unsupported else "supported"
    console.print(f"\n[bold]{count:,} {label} combinations[/bold]")


if __name__ == "__main__":
    app()
