"""
Command Binding Lifecycle.

A CommandBinding attaches one command to one view at a time:

    Unbound --bind()--> Bound --unbind()--> Unbound

The view-specific event wiring is delegated to a ViewCommandBinder
created for the binding (ClickCommandBinder by default).
"""
from typing import Any, Callable, Optional, Set, Tuple

from loguru import logger
from PySide6.QtCore import QObject

from qtcommandbind.core.commands import ICommand
from qtcommandbind.ui.mvvm.binders import ClickCommandBinder, ViewCommandBinder

BinderFactory = Callable[["CommandBinding"], ViewCommandBinder]


class CommandBinding:
    """
    Binds a command to a single view and unbinds it later.

    Args:
        view_id: Object name of the target view (informational for direct
            bindings, used for lookup by CommandBindingHandler).
        binder_cls: Factory called with this binding to create its binder.
        tag: Free-form tag for the binding.
        sync_enabled_state: Keep view.isEnabled() in step with
            command.can_execute().
        member_name: View-model member the command came from, when the
            binding was declared with @command_binding.

    Example:
        binding = CommandBinding("saveButton")
        binding.bind(save_command, save_button, parameter=document)
        ...
        binding.unbind()
    """

    # Bound instances, kept alive for as long as their view is attached
    _active: Set["CommandBinding"] = set()

    def __init__(
        self,
        view_id: str = "",
        binder_cls: BinderFactory = ClickCommandBinder,
        tag: Optional[str] = None,
        sync_enabled_state: bool = False,
        member_name: Optional[str] = None
    ):
        self.view_id = view_id
        self.tag = tag
        self.sync_enabled_state = sync_enabled_state
        self.member_name = member_name
        self._command: Optional[ICommand] = None
        self._view: Optional[QObject] = None
        self._parameter: Any = None
        self._view_was_enabled = True
        self.binder: ViewCommandBinder = binder_cls(self)

    @property
    def command(self) -> Optional[ICommand]:
        return self._command

    @property
    def view(self) -> Optional[QObject]:
        return self._view

    @property
    def parameter(self) -> Any:
        return self._parameter

    @property
    def is_bound(self) -> bool:
        return self._command is not None and self._view is not None

    def bind(self, command: ICommand, view: QObject, parameter: Any = None) -> bool:
        """
        Attach the command to the view.

        While bound, the binding is kept alive by the view it is attached
        to, so callers may drop the returned object. It is released by
        unbind() or when the view is destroyed.

        Returns:
            True if bound; False when already bound, when command or view
            is None, or when the binder does not support the view.
        """
        if self._command is not None:
            logger.debug(f"Binding '{self.view_id}' already bound; unbind first")
            return False
        if command is None or view is None:
            return False
        if not self.binder.is_supported_view(view):
            return False

        self._view = view
        self._command = command
        self._parameter = parameter

        self.binder.on_bind_view(view)
        view.destroyed.connect(self._on_view_destroyed)
        CommandBinding._active.add(self)

        if self.sync_enabled_state:
            self._view_was_enabled = view.isEnabled()
            event = getattr(command, "can_execute_changed", None)
            if event is not None:
                event.connect(self._on_can_execute_changed)
            self.update_enabled_state()

        logger.debug(f"Bound {type(command).__name__} to {type(view).__name__} '{self.view_id}'")
        return True

    def unbind(self) -> None:
        """Detach from the current view. No-op when not bound."""
        if self._command is None or self._view is None:
            return

        view = self._view
        self.binder.on_unbind_view(view)
        try:
            view.destroyed.disconnect(self._on_view_destroyed)
        except RuntimeError as e:
            logger.debug(f"Binding '{self.view_id}': destroyed disconnect skipped: {e}")

        if self.sync_enabled_state:
            # Hand the view back in the enabled state it had before binding
            view.setEnabled(self._view_was_enabled)

        logger.debug(f"Unbound {type(self._command).__name__} from '{self.view_id}'")
        self._release()

    @classmethod
    def active_bindings(cls) -> Tuple["CommandBinding", ...]:
        """Bindings currently attached to a view."""
        return tuple(cls._active)

    def _on_view_destroyed(self, *args) -> None:
        if self._view is None:
            return
        # Qt removed the view's connections; only the bookkeeping remains
        self.binder.release_view(self._view)
        logger.debug(f"View '{self.view_id}' destroyed; binding released")
        self._release()

    def _release(self) -> None:
        if self.sync_enabled_state:
            event = getattr(self._command, "can_execute_changed", None)
            if event is not None:
                event.disconnect(self._on_can_execute_changed)
        CommandBinding._active.discard(self)
        self._command = None
        self._view = None

    def execute_command(self, args: Any) -> bool:
        """
        Run the bound command if its guard allows it.

        An unbound binding (no command) cannot execute. Errors raised by
        the command propagate to the caller.

        Returns:
            True if execute() was called.
        """
        command = self._command
        if command is None:
            return False
        if not command.can_execute(args):
            return False
        command.execute(args)
        return True

    def update_enabled_state(self) -> None:
        """Set the view's enabled flag from the command's guard."""
        if not self.is_bound:
            return
        enabled = bool(self._command.can_execute(self.binder.command_args(self._view)))
        self._view.setEnabled(enabled)

    def _on_can_execute_changed(self, *args) -> None:
        self.update_enabled_state()

    def __repr__(self) -> str:
        state = "bound" if self.is_bound else "unbound"
        return f"<CommandBinding '{self.view_id}' {type(self.binder).__name__} {state}>"
