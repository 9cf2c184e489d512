from typing import Any, Callable, Optional
from .base import ICommand


class RelayCommand(ICommand):
    """
    Command that relays control to delegates.

    Example:
        volume = RelayCommand(
            lambda args: player.set_volume(args.progress),
            can_execute=lambda args: not player.muted,
        )
    """

    def __init__(
        self,
        execute: Callable[[Any], Any],
        can_execute: Optional[Callable[[Any], bool]] = None
    ):
        if execute is None:
            raise ValueError("execute delegate is required")
        super().__init__()
        self._execute = execute
        self._can_execute = can_execute

    def can_execute(self, parameter: Any) -> bool:
        if self._can_execute is None:
            return True
        return bool(self._can_execute(parameter))

    def execute(self, parameter: Any) -> None:
        self._execute(parameter)
