"""
Command Binding Helpers.

Direct binding of a command to a widget, and declarative bindings on
ViewModel command properties.

Usage:
    from qtcommandbind.ui.mvvm.binding import bind_command, command_binding

    # Direct
    binding = bind_command(vm.save, self.save_button, parameter=document)

    # Declarative (resolved by CommandBindingHandler.bind_commands)
    class PlayerViewModel:
        @property
        @command_binding("volumeSlider", binder_cls=SliderCommandBinder)
        def change_volume(self):
            return self._change_volume
"""
from dataclasses import dataclass
from typing import Any, Callable, Dict, List, Optional

from loguru import logger
from PySide6.QtCore import QObject

from qtcommandbind.core.commands import ICommand
from qtcommandbind.core.exceptions import BindingError, UnsupportedViewError
from qtcommandbind.ui.mvvm.binders import ClickCommandBinder
from qtcommandbind.ui.mvvm.command_binding import BinderFactory, CommandBinding

_DECLARATIONS_ATTR = "__command_bindings__"


@dataclass(frozen=True)
class CommandBindingDeclaration:
    """A view a ViewModel command property binds to."""
    member_name: str
    view_id: str
    binder_cls: BinderFactory = ClickCommandBinder
    tag: Optional[str] = None


def bind_command(
    command: ICommand,
    view: QObject,
    parameter: Any = None,
    binder_cls: BinderFactory = ClickCommandBinder,
    sync_enabled_state: bool = False
) -> CommandBinding:
    """
    Bind a command to a widget.

    Args:
        command: Command to run when the widget fires.
        view: Target widget (e.g., QPushButton, QSlider).
        parameter: Extra argument for the command.
        binder_cls: Binder factory; use SliderCommandBinder for sliders.
        sync_enabled_state: Keep the widget enabled flag in step with
            command.can_execute().

    Returns:
        The bound CommandBinding; call unbind() on it to detach. The binding
        stays attached until then (or until the view is destroyed) even if
        the result is not kept.

    Raises:
        BindingError: If command or view is None.
        UnsupportedViewError: If the binder cannot attach to the view.

    Example:
        bind_command(vm.set_volume, self.volume_slider, "volume",
                     binder_cls=SliderCommandBinder)
    """
    if command is None:
        raise BindingError("Command cannot be None upon binding")
    if view is None:
        raise BindingError("View cannot be None upon binding")

    binding = CommandBinding(
        view_id=view.objectName(),
        binder_cls=binder_cls,
        sync_enabled_state=sync_enabled_state,
    )
    if not binding.binder.is_supported_view(view):
        raise UnsupportedViewError(view, type(binding.binder).__name__)

    binding.bind(command, view, parameter)
    return binding


def command_binding(
    view_id: str,
    binder_cls: BinderFactory = ClickCommandBinder,
    tag: Optional[str] = None
) -> Callable:
    """
    Declare that a ViewModel command getter binds to the view named view_id.

    Apply beneath @property. Stack several to bind one command to several
    views.
    """
    def decorator(func: Callable) -> Callable:
        specs = list(getattr(func, _DECLARATIONS_ATTR, []))
        # Decorators apply bottom-up; keep declarations in source order
        specs.insert(0, (view_id, binder_cls, tag))
        setattr(func, _DECLARATIONS_ATTR, specs)
        return func
    return decorator


def declared_command_bindings(source_cls: type) -> List[CommandBindingDeclaration]:
    """
    Collect @command_binding declarations from a class and its bases.

    Members overridden in a subclass replace the base declaration.
    """
    members: Dict[str, Any] = {}
    for klass in reversed(source_cls.__mro__):
        members.update(vars(klass))

    declarations: List[CommandBindingDeclaration] = []
    for name, member in members.items():
        getter = member.fget if isinstance(member, property) else member
        specs = getattr(getter, _DECLARATIONS_ATTR, None)
        if not specs:
            continue
        if not isinstance(member, property):
            logger.warning(f"@command_binding on '{source_cls.__name__}.{name}' ignored: not a property")
            continue
        for view_id, binder_cls, tag in specs:
            declarations.append(CommandBindingDeclaration(name, view_id, binder_cls, tag))
    return declarations
