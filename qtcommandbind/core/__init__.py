"""
Core - Command abstraction and application infrastructure.

Provides:
- ICommand / RelayCommand / CommandArgs: Command pattern for view binding
- ObserverEvent: Lightweight observer used for can-execute notifications
- ConfigManager: Configuration with persistence
- setup_logging: Loguru sink configuration
"""
from .events import ObserverEvent
from .exceptions import BindingError, UnsupportedViewError
from .config import ConfigManager, AppConfig, GeneralSettings, BindingSettings
from .commands import ICommand, RelayCommand, CommandArgs

__all__ = [
    "ObserverEvent",
    "BindingError",
    "UnsupportedViewError",
    "ConfigManager",
    "AppConfig",
    "GeneralSettings",
    "BindingSettings",
    "ICommand",
    "RelayCommand",
    "CommandArgs",
]
