"""CLI bootstrap/runtime lifecycle helpers."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from rich.console import Console
from rich.logging import RichHandler

from carebook.config import (
    CarebookGlobalConfig,
    GlobalConfigError,
    LogLevel,
    load_global_config,
)
from carebook.model import AddressBook, Model
from carebook.storage import (
    StoreDecodeError,
    StoreSchemaVersionError,
    load_address_book,
    recover_corrupt_store,
    save_address_book,
)

_LOGGING_CONFIGURED = False


def configure_logging(level: LogLevel = LogLevel.WARNING) -> None:
    """Configure Rich-backed logging once for CLI commands.

    Args:
        level: Root log level applied on first call.
    """
    global _LOGGING_CONFIGURED  # noqa: PLW0603
    if _LOGGING_CONFIGURED:
        return
    logging.basicConfig(
        level=level.value,
        format="%(message)s",
        handlers=[RichHandler(show_path=False, rich_tracebacks=True)],
    )
    _LOGGING_CONFIGURED = True


def default_workspace_dir() -> Path:
    """Return default workspace directory.

    Returns:
        Workspace path under the current directory.
    """
    workspace = Path.cwd() / ".carebook"
    workspace.mkdir(parents=True, exist_ok=True)
    return workspace


def default_global_config_file(workspace_dir: Path) -> Path:
    """Return default global config path for a workspace.

    Args:
        workspace_dir: Workspace directory path.

    Returns:
        Existing YAML or JSON config path, else the YAML path.
    """
    workspace_dir.mkdir(parents=True, exist_ok=True)
    yaml_path = workspace_dir / "config.yaml"
    json_path = workspace_dir / "config.json"
    if yaml_path.exists():
        return yaml_path
    if json_path.exists():
        return json_path
    return yaml_path


def bootstrap_workspace(
    *,
    workspace_dir: Path,
    config_file: Path | None = None,
    overwrite_config: bool = False,
) -> tuple[Path, tuple[tuple[str, str], ...]]:
    """Bootstrap local Carebook workspace artifacts.

    Args:
        workspace_dir: Workspace directory path.
        config_file: Optional config path override.
        overwrite_config: Whether to overwrite existing config payload.

    Returns:
        Effective config path and action rows.
    """
    effective_config_file = config_file or default_global_config_file(workspace_dir)
    actions: list[tuple[str, str]] = []
    existed = workspace_dir.exists()
    workspace_dir.mkdir(parents=True, exist_ok=True)
    actions.append(("workspace_dir", "exists" if existed else "created"))

    config_existed = effective_config_file.exists()
    if not config_existed or overwrite_config:
        effective_config_file.parent.mkdir(parents=True, exist_ok=True)
        payload = CarebookGlobalConfig().model_dump(mode="json")
        effective_config_file.write_text(
            yaml.safe_dump(payload, sort_keys=False),
            encoding="utf-8",
        )
        actions.append(
            (
                "config_file",
                "overwritten" if config_existed and overwrite_config else "created",
            )
        )
    else:
        actions.append(("config_file", "exists"))

    config = load_global_config(effective_config_file)
    data_file = resolve_data_file(config, workspace_dir)
    if data_file.exists():
        actions.append(("data_file", "exists"))
    else:
        save_address_book(AddressBook(), data_file)
        actions.append(("data_file", "created"))
    return effective_config_file, tuple(actions)


def load_config(
    *, workspace_dir: Path, config_file: Path | None, console: Console
) -> CarebookGlobalConfig:
    """Load config with yellow-warning fallback to defaults.

    Args:
        workspace_dir: Workspace directory path.
        config_file: Optional config file path.
        console: Rich console for config warnings.

    Returns:
        Loaded or default config.
    """
    effective_config_file = config_file or default_global_config_file(workspace_dir)
    try:
        return load_global_config(effective_config_file)
    except GlobalConfigError as exc:
        console.print(
            f"[yellow]Global config at {effective_config_file} is invalid; "
            "falling back to defaults.[/yellow]"
        )
        console.print(f"[yellow]Reason: {exc}[/yellow]")
        return CarebookGlobalConfig()


def resolve_data_file(config: CarebookGlobalConfig, workspace_dir: Path) -> Path:
    """Resolve configured address book path against the workspace.

    Args:
        config: Loaded config.
        workspace_dir: Workspace directory path.

    Returns:
        Absolute or workspace-relative data file path.
    """
    data_file = Path(config.storage.data_file)
    if data_file.is_absolute():
        return data_file
    return workspace_dir / data_file


def build_model(*, data_file: Path, console: Console) -> Model:
    """Load address book into a model, recovering from corrupt files.

    Args:
        data_file: Address book persistence path.
        console: Rich console for recovery messaging.

    Returns:
        Model over the loaded or a new empty address book.
    """
    try:
        return Model(load_address_book(data_file))
    except FileNotFoundError:
        return Model(AddressBook())
    except (StoreDecodeError, StoreSchemaVersionError) as exc:
        backup = recover_corrupt_store(data_file)
        if backup is not None:
            console.print(
                f"[yellow]Address book file was invalid. Moved to {backup}.[/yellow]"
            )
        console.print(f"[yellow]Reason: {exc}[/yellow]")
        return Model(AddressBook())


def persist_model(model: Model, data_file: Path, *, console: Console) -> None:
    """Persist address book with user-visible error reporting.

    Args:
        model: Model whose address book is persisted.
        data_file: Persistence target path.
        console: Rich console for error rendering.
    """
    try:
        save_address_book(model.address_book, data_file)
    except OSError as exc:
        console.print(
            f"[bold red]Failed to save address book to {data_file}: {exc}[/bold red]"
        )
