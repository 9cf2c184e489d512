"""
View Binders - Route widget events to a binding's command.

A binder implements a three-operation contract used by CommandBinding:
- is_supported_view(view): can this binder attach to the view?
- on_bind_view(view): register the event handler
- on_unbind_view(view): remove it again (never raises)

Binders are composed rather than subclassed: SliderCommandBinder wraps a
fallback binder and only handles slider-style controls itself.

Usage:
    binding = CommandBinding("volumeSlider", binder_cls=SliderCommandBinder)
    binding.bind(volume_command, slider, parameter="volume")
    slider.setValue(40)   # -> volume_command.execute(CommandArgs("volume", 40))
"""
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Callable, Optional, Set, Tuple

from loguru import logger
from PySide6.QtCore import QObject
from PySide6.QtWidgets import QAbstractButton, QAbstractSlider

from qtcommandbind.core.commands import CommandArgs

if TYPE_CHECKING:
    from qtcommandbind.ui.mvvm.command_binding import CommandBinding


class ViewCommandBinder(ABC):
    """
    Base class for binders attaching one kind of widget event to a command.

    Keeps track of its own signal connections so that each bound view holds
    at most one registration per binder, and unbinding a view that was never
    bound is a no-op.

    Args:
        binding: Owning CommandBinding; supplies the parameter and runs the
            guarded command.
    """

    def __init__(self, binding: "CommandBinding"):
        self.binding = binding
        self._connections: Set[Tuple[int, str]] = set()

    @property
    def connection_count(self) -> int:
        """Number of signal connections currently held by this binder."""
        return len(self._connections)

    @abstractmethod
    def is_supported_view(self, view: QObject) -> bool:
        """Return True if this binder can attach to the view."""
        pass

    @abstractmethod
    def on_bind_view(self, view: QObject) -> None:
        """Register the event handler on the view."""
        pass

    @abstractmethod
    def on_unbind_view(self, view: QObject) -> None:
        """Remove the handler registered by on_bind_view()."""
        pass

    def command_args(self, view: QObject) -> Any:
        """
        Argument the command would receive for the view's current state.

        Used to evaluate can_execute() outside of an event, e.g. when
        syncing the view's enabled flag.
        """
        return self.binding.parameter

    def release_view(self, view: QObject) -> None:
        """
        Forget connections to a view whose C++ object is being destroyed.

        Qt already dropped those connections, so nothing is disconnected.
        """
        self._connections = {key for key in self._connections if key[0] != id(view)}

    def _connect(self, view: QObject, signal_name: str, slot: Callable) -> bool:
        key = (id(view), signal_name)
        if key in self._connections:
            logger.debug(f"{type(self).__name__}: {signal_name} already connected on {type(view).__name__}")
            return False
        getattr(view, signal_name).connect(slot)
        self._connections.add(key)
        return True

    def _disconnect(self, view: QObject, signal_name: str, slot: Callable) -> bool:
        key = (id(view), signal_name)
        if key not in self._connections:
            return False
        self._connections.discard(key)
        try:
            getattr(view, signal_name).disconnect(slot)
        except RuntimeError as e:
            # Underlying C++ widget already destroyed; its connections died with it
            logger.debug(f"{type(self).__name__}: disconnect {signal_name} skipped: {e}")
        return True


class ClickCommandBinder(ViewCommandBinder):
    """
    Binds a command to button clicks.

    Supports every QAbstractButton (QPushButton, QToolButton, QCheckBox,
    QRadioButton). Each click runs the guarded command with the binding's
    parameter.
    """

    def is_supported_view(self, view: QObject) -> bool:
        return isinstance(view, QAbstractButton)

    def on_bind_view(self, view: QObject) -> None:
        self._connect(view, "clicked", self._on_clicked)

    def on_unbind_view(self, view: QObject) -> None:
        self._disconnect(view, "clicked", self._on_clicked)

    def _on_clicked(self, checked: bool = False) -> None:
        self.binding.execute_command(self.binding.parameter)


class SliderCommandBinder(ViewCommandBinder):
    """
    Adds slider-style controls to the views a fallback binder supports.

    Sliders (QSlider, QDial, QScrollBar) invoke the command on every
    valueChanged with CommandArgs(parameter, progress=value). Every other
    view is delegated unchanged to the fallback binder, which defaults to
    ClickCommandBinder.

    Args:
        binding: Owning CommandBinding.
        fallback: Binder handling non-slider views.
    """

    def __init__(self, binding: "CommandBinding", fallback: Optional[ViewCommandBinder] = None):
        super().__init__(binding)
        self.fallback = fallback if fallback is not None else ClickCommandBinder(binding)

    @property
    def connection_count(self) -> int:
        return len(self._connections) + self.fallback.connection_count

    @staticmethod
    def is_slider(view: QObject) -> bool:
        return isinstance(view, QAbstractSlider)

    def is_supported_view(self, view: QObject) -> bool:
        return self.fallback.is_supported_view(view) or self.is_slider(view)

    def on_bind_view(self, view: QObject) -> None:
        if self.is_slider(view):
            self._connect(view, "valueChanged", self._on_progress_changed)
        else:
            self.fallback.on_bind_view(view)

    def on_unbind_view(self, view: QObject) -> None:
        if self.is_slider(view):
            self._disconnect(view, "valueChanged", self._on_progress_changed)
        else:
            self.fallback.on_unbind_view(view)

    def command_args(self, view: QObject) -> Any:
        if self.is_slider(view):
            return CommandArgs(parameter=self.binding.parameter, progress=view.value())
        return self.fallback.command_args(view)

    def release_view(self, view: QObject) -> None:
        super().release_view(view)
        self.fallback.release_view(view)

    def _on_progress_changed(self, value: int) -> None:
        args = CommandArgs(parameter=self.binding.parameter, progress=value)
        self.binding.execute_command(args)
