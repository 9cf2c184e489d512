"""
Command abstraction for view binding.

Provides:
- ICommand: Executable action with a can-execute guard
- RelayCommand: Command relaying to plain callables
- CommandArgs: Argument bundle passed by slider bindings
"""
from .base import ICommand, CommandArgs
from .relay import RelayCommand

__all__ = [
    "ICommand",
    "CommandArgs",
    "RelayCommand",
]
