"""Main CLI entry point for the American Generator.

Provides profile generation, an interactive lock-and-regenerate session,
and consistency checks from the command line.
"""

from pathlib import Path
import json
import logging
import sys

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from american_generator import __version__
from american_generator.engine.profile_store import ProfileSnapshot, ProfileStore
from american_generator.engine.validation_engine import ProfileValidator, ValidationResult
from american_generator.exceptions import AmericanGeneratorError
from american_generator.generators.profile_generator import ProfileGenerator
from american_generator.profiles.base import DISPLAY_ORDER, format_profile
from american_generator.settings.base import GeneratorSettings
from american_generator.settings.loader import SettingsLoader, load_settings

console = Console()

SESSION_HELP = (
    "[bold]r[/bold] regenerate  "
    "[bold]l FIELD[/bold] lock/unlock  "
    "[bold]c[/bold] copy all  "
    "[bold]j[/bold] json  "
    "[bold]q[/bold] quit"
)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


def _build_generator(config: str | None, seed: int | None) -> ProfileGenerator:
    settings = load_settings(config)
    return ProfileGenerator(settings=settings, seed=seed)


def _fail(error: Exception, verbose: bool) -> None:
    console.print(f"[red]Error: {escape(str(error))}[/red]")
    if verbose:
        import traceback
        console.print(traceback.format_exc())
    sys.exit(1)


@click.group()
@click.version_option(version=__version__, prog_name="american-gen")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """American Generator - Random US profiles with field-level locks.

    Generate a fictitious person, lock the fields you want to keep, and
    regenerate the rest.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    _configure_logging(verbose)


@cli.command()
@click.option("--count", "-n", type=click.IntRange(min=1), default=1, help="Number of profiles")
@click.option("--seed", "-s", type=int, help="Random seed for reproducibility")
@click.option("--config", "-c", type=click.Path(exists=True), help="Settings YAML file")
@click.option("--format", "-f", "output_format", type=click.Choice(["text", "json"]), default="text", help="Output format")
@click.option("--output", "-o", type=click.Path(), help="Output file (stdout if not specified)")
@click.pass_context
def generate(
    ctx: click.Context,
    count: int,
    seed: int | None,
    config: str | None,
    output_format: str,
    output: str | None,
) -> None:
    """Generate one or more profiles."""
    verbose = ctx.obj.get("verbose", False)

    try:
        generator = _build_generator(config, seed)
        profiles = generator.generate_many(count)

        if output_format == "json":
            rendered = json.dumps([p.to_dict() for p in profiles], indent=2)
        else:
            rendered = "\n\n".join(format_profile(p) for p in profiles)

        if output:
            Path(output).write_text(rendered + "\n")
            console.print(f"[green]Wrote {count} profile(s) to {output}[/green]")
        else:
            click.echo(rendered)

    except Exception as e:
        _fail(e, verbose)


@cli.command()
@click.option("--seed", "-s", type=int, help="Random seed for reproducibility")
@click.option("--config", "-c", type=click.Path(exists=True), help="Settings YAML file")
@click.pass_context
def session(ctx: click.Context, seed: int | None, config: str | None) -> None:
    """Start an interactive lock-and-regenerate session.

    \b
    Commands:
      r, regenerate     Draw new values for every unlocked field
      l, lock FIELD     Lock or unlock a field (e.g. "l firstName")
      c, copy           Print all fields as "label: value" lines
      j, json           Print the profile as JSON
      q, quit           Leave the session
    """
    verbose = ctx.obj.get("verbose", False)

    try:
        store = ProfileStore.initialize(generator=_build_generator(config, seed))
    except Exception as e:
        _fail(e, verbose)
        return

    _render_snapshot(store.snapshot())
    console.print(SESSION_HELP)

    while True:
        command = click.prompt("Command", default="r", show_default=False).strip()
        action, _, argument = command.partition(" ")
        action = action.lower()
        argument = argument.strip()

        try:
            if action in ("q", "quit", "exit"):
                break
            elif action in ("r", "regenerate"):
                store.regenerate()
                _render_snapshot(store.snapshot())
            elif action in ("l", "lock", "unlock"):
                if not argument:
                    console.print("[yellow]Usage: l FIELD[/yellow]")
                    continue
                store.toggle_lock(argument)
                _render_snapshot(store.snapshot())
            elif action in ("c", "copy"):
                click.echo(store.export_text())
            elif action in ("j", "json"):
                click.echo(json.dumps(store.current.to_dict(), indent=2))
            elif action in ("h", "help", "?"):
                console.print(SESSION_HELP)
            else:
                console.print(f"[yellow]Unknown command: {escape(action)}[/yellow]")
                console.print(SESSION_HELP)
        except AmericanGeneratorError as e:
            console.print(f"[red]Error: {escape(str(e))}[/red]")


@cli.command()
@click.option("--count", "-n", type=click.IntRange(min=1), default=25, help="Number of profiles to check")
@click.option("--seed", "-s", type=int, help="Random seed for reproducibility")
@click.option("--config", "-c", type=click.Path(exists=True), help="Settings YAML file")
@click.pass_context
def validate(ctx: click.Context, count: int, seed: int | None, config: str | None) -> None:
    """Generate profiles and check them for consistency."""
    verbose = ctx.obj.get("verbose", False)

    try:
        generator = _build_generator(config, seed)
        validator = ProfileValidator(settings=generator.settings)
        result = validator.validate_profiles(generator.stream(count))
    except Exception as e:
        _fail(e, verbose)
        return

    _print_validation_result(result)
    if not result.valid:
        sys.exit(1)


@cli.command()
@click.pass_context
def fields(ctx: click.Context) -> None:
    """List the profile fields that can be locked."""
    table = Table(title="Profile Fields")
    table.add_column("#", justify="right")
    table.add_column("Field", style="cyan")
    table.add_column("Attribute")
    table.add_column("Label")

    for position, field in enumerate(DISPLAY_ORDER, start=1):
        table.add_row(str(position), field.value, field.attribute, field.label)

    console.print(table)


@cli.command()
@click.option("--output", "-o", type=click.Path(), default="american-gen.yaml", help="Output file path")
@click.option("--min-age", type=int, default=18, help="Youngest age a birthdate may represent")
@click.option("--max-age", type=int, default=80, help="Oldest age a birthdate may represent")
@click.option("--date-format", default="%m/%d/%Y", help="strftime pattern for birthdates")
@click.pass_context
def init_config(
    ctx: click.Context,
    output: str,
    min_age: int,
    max_age: int,
    date_format: str,
) -> None:
    """Initialize a new settings file.

    Creates a template settings YAML file.
    """
    verbose = ctx.obj.get("verbose", False)

    try:
        settings = GeneratorSettings(min_age=min_age, max_age=max_age, date_format=date_format)
        SettingsLoader().save_file(settings, output)
    except Exception as e:
        _fail(e, verbose)
        return

    console.print(f"[green]Created settings: {output}[/green]")


def _render_snapshot(snapshot: ProfileSnapshot) -> None:
    """Print the profile with its lock flags."""
    table = Table(title="Random American", show_lines=False)
    table.add_column("Field", style="bold", justify="right")
    table.add_column("Value")
    table.add_column("Key", style="dim")
    table.add_column("Lock")

    for field in DISPLAY_ORDER:
        locked = snapshot.locks[field]
        table.add_row(
            field.label,
            snapshot.current.get(field),
            field.value,
            "[cyan]locked[/cyan]" if locked else "-",
        )

    console.print(table)


def _print_validation_result(result: ValidationResult) -> None:
    """Print validation results."""
    status = "[green]VALID[/green]" if result.valid else "[red]INVALID[/red]"
    console.print(Panel.fit(
        f"Profiles checked: {result.validated_count}\n"
        f"Errors: {result.error_count}\n"
        f"Warnings: {result.warning_count}",
        title=f"Validation {status}",
    ))

    for issue in result.issues:
        color = {
            "error": "red",
            "warning": "yellow",
            "info": "blue",
        }.get(issue.severity.value, "white")

        console.print(f"  [{color}]{issue.severity.value.upper()}[/{color}]: {issue.message}")
        if issue.path:
            console.print(f"    Path: {issue.path}")


if __name__ == "__main__":
    cli()
