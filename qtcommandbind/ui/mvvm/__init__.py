"""
MVVM Package - Command Binding for PySide6.

Provides:
- CommandBinding: Bind/unbind lifecycle of one command on one view.
- ClickCommandBinder / SliderCommandBinder: Event wiring per view type.
- bind_command(): Fail-fast direct binding helper.
- command_binding: Declarative bindings on ViewModel command properties.
- CommandBindingHandler: Per-source binding frames.
"""
from qtcommandbind.ui.mvvm.binders import (
    ViewCommandBinder,
    ClickCommandBinder,
    SliderCommandBinder,
)
from qtcommandbind.ui.mvvm.command_binding import CommandBinding
from qtcommandbind.ui.mvvm.binding import (
    bind_command,
    command_binding,
    declared_command_bindings,
    CommandBindingDeclaration,
)
from qtcommandbind.ui.mvvm.handler import CommandBindingHandler, BindingFrame

__all__ = [
    # Binders
    "ViewCommandBinder",
    "ClickCommandBinder",
    "SliderCommandBinder",

    # Lifecycle
    "CommandBinding",

    # Helpers
    "bind_command",
    "command_binding",
    "declared_command_bindings",
    "CommandBindingDeclaration",

    # Frames
    "CommandBindingHandler",
    "BindingFrame",
]
