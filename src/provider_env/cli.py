from __future__ import annotations

from pathlib import Path

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from provider_env.environment import EnvFileError, load_environment
from provider_env.runner import RunnerError, parse_command, run_with_env
from provider_env.validator import (
    ConfigurationError,
    check_environment,
    describe_environment,
    format_violations,
    validate,
)

app = typer.Typer(help="Provider Env: startup checks for assistant provider credentials")
console = Console(soft_wrap=True)

ENV_FILE_OPTION = typer.Option(None, "--env-file", help="Dotenv file filling unset variables")


def _print_error(message: str) -> None:
    console.print(f"[red]{escape(message)}[/red]")


def _load(env_file: Path | None) -> dict[str, str]:
    try:
        return load_environment(env_file)
    except EnvFileError as exc:
        _print_error(str(exc))
        raise typer.Exit(code=1) from exc


@app.command("check")
def check(
    env_file: Path | None = ENV_FILE_OPTION,
    as_json: bool = typer.Option(False, "--json", help="Print the report as JSON"),
) -> None:
    """Validate provider selection and credentials."""
    report = check_environment(_load(env_file))

    if as_json:
        typer.echo(report.model_dump_json(indent=2))
    elif report.ok:
        console.print(f"[green]environment valid for provider:[/green] {report.provider}")
    else:
        _print_error(format_violations(report.violations))

    if not report.ok:
        raise typer.Exit(code=1)


@app.command("status")
def status(env_file: Path | None = ENV_FILE_OPTION) -> None:
    """Show which provider variables are set, without their values."""
    table = Table(title="Provider variables")
    table.add_column("Variable")
    table.add_column("Role")
    table.add_column("Set")

    for item in describe_environment(_load(env_file)):
        marker = "[green]yes[/green]" if item.present else "[dim]no[/dim]"
        table.add_row(item.name, item.role, marker)

    console.print(table)


@app.command("run")
def run_command(
    command: str = typer.Argument(..., help="Command string to execute"),
    env_file: Path | None = ENV_FILE_OPTION,
) -> None:
    """Validate the environment, then run a command with it."""
    env = _load(env_file)
    try:
        validate(env)
        code = run_with_env(parse_command(command), env)
        raise typer.Exit(code=code)

    except (ConfigurationError, RunnerError) as exc:
        _print_error(str(exc))
        raise typer.Exit(code=1) from exc


if __name__ == "__main__":
    app()
