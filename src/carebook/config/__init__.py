"""Global Carebook configuration loading."""

from carebook.config.global_config import (
    CarebookGlobalConfig,
    DisplaySettings,
    GlobalConfigError,
    LoggingSettings,
    LogLevel,
    StorageSettings,
    load_global_config,
)

__all__ = [
    "CarebookGlobalConfig",
    "DisplaySettings",
    "GlobalConfigError",
    "LogLevel",
    "LoggingSettings",
    "StorageSettings",
    "load_global_config",
]
