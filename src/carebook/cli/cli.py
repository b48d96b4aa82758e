"""Typer CLI entrypoint for Carebook."""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from carebook.cli.bootstrap import (
    bootstrap_workspace,
    build_model,
    configure_logging,
    default_workspace_dir,
    load_config,
    persist_model,
    resolve_data_file,
)
from carebook.cli.rendering import CliRenderer
from carebook.commands.types import CommandStatus
from carebook.runtime.facade import RuntimeFacade

app = typer.Typer(help="Carebook CLI")
_CONSOLE = Console()

_WorkspaceOption = Annotated[
    Path | None,
    typer.Option(file_okay=False, dir_okay=True, help="Carebook workspace root."),
]
_ConfigOption = Annotated[
    Path | None,
    typer.Option(
        file_okay=True,
        dir_okay=False,
        help="Path to global Carebook config YAML/JSON file.",
    ),
]


def _build_runtime() -> RuntimeFacade:
    """Build runtime facade for CLI commands.

    Returns:
        Runtime facade with built-in command registry.
    """
    return RuntimeFacade()


@app.command("init")
def init_command(
    workspace_dir: _WorkspaceOption = None,
    config_file: _ConfigOption = None,
    overwrite_config: Annotated[
        bool,
        typer.Option(
            "--overwrite-config",
            help="Overwrite existing config file with default template.",
        ),
    ] = False,
) -> None:
    """Initialize Carebook workspace files and directories.

    Args:
        workspace_dir: Optional workspace root override.
        config_file: Optional global config file path override.
        overwrite_config: Whether to overwrite existing config payload.
    """
    configure_logging()
    effective_workspace_dir = workspace_dir or default_workspace_dir()
    effective_config_file, actions = bootstrap_workspace(
        workspace_dir=effective_workspace_dir,
        config_file=config_file,
        overwrite_config=overwrite_config,
    )
    table = Table(title="Carebook Init", show_header=True, header_style="bold cyan")
    table.add_column("Resource", style="bold")
    table.add_column("Status", style="green")
    for resource, status in actions:
        table.add_row(resource, status)
    _CONSOLE.print(table)
    _CONSOLE.print(
        Panel(
            f"Workspace: {effective_workspace_dir}\nConfig: {effective_config_file}",
            title="Initialized",
            border_style="green",
            expand=True,
        )
    )


@app.command("run")
def run_command(
    text: Annotated[str, typer.Argument(help="Single command line to execute.")],
    workspace_dir: _WorkspaceOption = None,
    config_file: _ConfigOption = None,
) -> None:
    """Execute one command line and print its result.

    Args:
        text: Raw command line.
        workspace_dir: Optional workspace root override.
        config_file: Optional global config file path override.

    Raises:
        Exit: Raised with command status code for shell integration.
    """
    effective_workspace_dir = workspace_dir or default_workspace_dir()
    config = load_config(
        workspace_dir=effective_workspace_dir,
        config_file=config_file,
        console=_CONSOLE,
    )
    configure_logging(config.logging.level)
    data_file = resolve_data_file(config, effective_workspace_dir)
    model = build_model(data_file=data_file, console=_CONSOLE)
    runtime = _build_runtime()

    result = runtime.handle_input(text, model)
    if config.storage.autosave and runtime.is_mutation(result):
        persist_model(model, data_file, console=_CONSOLE)
    CliRenderer(console=_CONSOLE, display=config.display).render(result)
    raise typer.Exit(code=0 if result.status == CommandStatus.OK else 1)


@app.command("repl")
def repl_command(
    workspace_dir: _WorkspaceOption = None,
    config_file: _ConfigOption = None,
) -> None:
    """Run interactive command loop against the address book.

    Args:
        workspace_dir: Optional workspace root override.
        config_file: Optional global config file path override.
    """
    effective_workspace_dir = workspace_dir or default_workspace_dir()
    config = load_config(
        workspace_dir=effective_workspace_dir,
        config_file=config_file,
        console=_CONSOLE,
    )
    configure_logging(config.logging.level)
    data_file = resolve_data_file(config, effective_workspace_dir)
    model = build_model(data_file=data_file, console=_CONSOLE)
    runtime = _build_runtime()
    renderer = CliRenderer(console=_CONSOLE, display=config.display)
    _CONSOLE.print("Carebook REPL. Type 'help' for commands or 'exit'.", style="cyan")

    while True:
        try:
            raw = typer.prompt("carebook")
        except (EOFError, KeyboardInterrupt, typer.Abort):
            _CONSOLE.print("\nbye", style="yellow")
            break

        text = raw.strip()
        if text.lower() in {"exit", "quit", "exit()", "quit()"}:
            _CONSOLE.print("bye", style="yellow")
            break
        if not text:
            continue

        result = runtime.handle_input(raw, model)
        if config.storage.autosave and runtime.is_mutation(result):
            persist_model(model, data_file, console=_CONSOLE)
        renderer.render(result)

    if not config.storage.autosave:
        persist_model(model, data_file, console=_CONSOLE)


if __name__ == "__main__":
    app()
