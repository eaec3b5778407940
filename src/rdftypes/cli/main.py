"""rdftypes CLI application.

This module provides the command-line interface for rdftypes,
built with Typer.
"""

import json
from pathlib import Path
from typing import Annotated, Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from rdftypes._version import __version__
from rdftypes.core.exceptions import ConfigurationError, RdfTypeValidationError
from rdftypes.core.types import FileSet
from rdftypes.validate.rules import RdfTypeRuleEngine, ValidationVerdict
from rdftypes.validate.validator import RdfTypeValidator, raise_for_verdict

app = typer.Typer(
    name="rdftypes",
    help="rdf:type rule checks for repository file sets",
    no_args_is_help=True,
)
console = Console()

EXIT_INVALID = 1
EXIT_CONFIG = 2

ConfigOption = Annotated[
    Optional[Path],
    typer.Option("--config", "-c", help="Rule file (defaults to the app or bundled rules)"),
]


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"rdftypes v{__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        typer.Option(
            "--version",
            "-v",
            help="Show version and exit",
            callback=version_callback,
            is_eager=True,
        ),
    ] = False,
) -> None:
    """rdftypes - rdf:type rule checks for repository file sets."""
    pass


def _engine(config: Optional[Path]) -> RdfTypeRuleEngine:
    try:
        engine = RdfTypeRuleEngine(config_path=config)
        engine.load_rules()
    except ConfigurationError as e:
        console.print(f"[red]Error: {e}[/red]")
        raise typer.Exit(EXIT_CONFIG)
    return engine


def _print_verdict(verdict: ValidationVerdict, label: str) -> None:
    if verdict.is_valid:
        console.print(f"[green]{label}: valid[/green]")
        return

    table = Table(title=f"{label}: invalid")
    table.add_column("Finding", style="cyan")
    table.add_column("rdf:types", style="red")
    for category, tags in verdict.findings():
        table.add_row(category, ", ".join(tags))
    console.print(table)


@app.command()
def rules(config: ConfigOption = None) -> None:
    """Show the rdf:type rules in effect."""
    engine = _engine(config)
    rule_set = engine.load_rules()

    table = Table(title=f"rdf:type rules ({engine.config_file_path})")
    table.add_column("rdf:type", style="cyan")
    table.add_column("Required", style="green")
    table.add_column("Multiple", style="green")
    for rule in rule_set:
        table.add_row(rule.type_tag, "yes" if rule.required else "no", "yes" if rule.allow_multiple else "no")

    console.print(table)


@app.command()
def check(
    types: Annotated[
        Optional[list[str]],
        typer.Argument(help="rdf:type of each file in the file set (none for an empty file set)"),
    ] = None,
    config: ConfigOption = None,
    strict: Annotated[bool, typer.Option(help="Report only the first violated category")] = False,
    as_json: Annotated[bool, typer.Option("--json", help="Print the verdict as JSON")] = False,
) -> None:
    """Check one file set given as a list of rdf:types."""
    engine = _engine(config)
    verdict = engine.evaluate(types or [])

    if strict:
        try:
            raise_for_verdict(verdict)
        except RdfTypeValidationError as e:
            if as_json:
                typer.echo(json.dumps({"valid": False, "category": e.category, "tags": e.tags}, indent=2))
            else:
                console.print(f"[red]{e.category}: {', '.join(e.tags)}[/red]")
            raise typer.Exit(EXIT_INVALID)
        if as_json:
            typer.echo(json.dumps({"valid": True}, indent=2))
        else:
            console.print("[green]valid[/green]")
        return

    if as_json:
        typer.echo(json.dumps(verdict.to_dict(), indent=2))
    else:
        _print_verdict(verdict, "file set")

    if not verdict.is_valid:
        raise typer.Exit(EXIT_INVALID)


@app.command("check-file")
def check_file(
    path: Annotated[Path, typer.Argument(help="JSON file with a file set or a list of file sets")],
    config: ConfigOption = None,
    output: Annotated[Optional[Path], typer.Option(help="Output file for the report")] = None,
) -> None:
    """Check file sets stored in a JSON file."""
    if not path.exists():
        console.print(f"[red]Error: Path not found: {path}[/red]")
        raise typer.Exit(EXIT_CONFIG)

    try:
        with open(path, "r", encoding="utf-8") as f:
            data = json.load(f)
        file_sets = [FileSet.from_dict(d) for d in (data if isinstance(data, list) else [data])]
    except ValueError as e:
        console.print(f"[red]Error: Invalid file set data in {escape(str(path))}: {escape(str(e))}[/red]")
        raise typer.Exit(EXIT_CONFIG)

    validator = RdfTypeValidator(engine=_engine(config))
    report = {}
    for file_set in file_sets:
        verdict = validator.check(file_set)
        report[file_set.id] = verdict.to_dict()
        _print_verdict(verdict, file_set.title or file_set.id)

    invalid = sum(1 for v in report.values() if not v["valid"])
    console.print(f"\nChecked {len(file_sets)} file sets, {invalid} invalid")

    if output:
        with open(output, "w", encoding="utf-8") as f:
            json.dump(report, f, indent=2)
        console.print(f"[green]Report saved to {output}[/green]")

    if invalid:
        raise typer.Exit(EXIT_INVALID)


if __name__ == "__main__":
    app()
