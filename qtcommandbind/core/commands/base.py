"""
Command Pattern - Base Interfaces.

Provides:
- ICommand: Action with a can-execute guard, bindable to views
- CommandArgs: Arguments delivered by slider-style bindings
"""
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Union

from ..events import ObserverEvent


@dataclass
class CommandArgs:
    """
    Arguments for a command fired by a slider-style control.

    Created fresh for every value change event.

    Attributes:
        parameter: Caller-supplied context, constant for the binding's lifetime.
        progress: Slider value at the moment of the event.
    """
    parameter: Any = None
    progress: Union[int, float] = 0


class ICommand(ABC):
    """
    Executable action guarded by a can-execute predicate.

    Bindings call can_execute() before every execute(); the same argument
    is passed to both calls.

    Example:
        class SaveCommand(ICommand):
            def can_execute(self, parameter) -> bool:
                return parameter is not None

            def execute(self, parameter) -> None:
                parameter.save()
    """

    def __init__(self):
        self.can_execute_changed = ObserverEvent("CanExecuteChanged")

    @abstractmethod
    def can_execute(self, parameter: Any) -> bool:
        """Return True if the command may run with this parameter."""
        pass

    @abstractmethod
    def execute(self, parameter: Any) -> None:
        """Run the command."""
        pass

    def raise_can_execute_changed(self) -> None:
        """Notify bindings that can_execute() may now answer differently."""
        self.can_execute_changed.emit(self)
