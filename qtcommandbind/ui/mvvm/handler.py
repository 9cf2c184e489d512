"""
Command Binding Handler.

Tracks the command bindings made on behalf of each source object (usually
a ViewModel) in a BindingFrame, so they can be reverted together when the
view goes away.

Usage:
    handler = CommandBindingHandler(config_manager.data)
    handler.bind_commands(vm, self)          # declared @command_binding views
    handler.bind_command_direct(vm, vm.reset, self.reset_button)
    ...
    handler.destroy(vm)                      # unbind everything for vm
"""
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from loguru import logger
from PySide6.QtCore import QObject

from qtcommandbind.core.commands import ICommand
from qtcommandbind.core.config import AppConfig
from qtcommandbind.ui.mvvm.binders import ClickCommandBinder
from qtcommandbind.ui.mvvm.binding import declared_command_bindings
from qtcommandbind.ui.mvvm.command_binding import BinderFactory, CommandBinding


@dataclass
class BindingFrame:
    """Command bindings owned by one source object."""
    source: Any
    command_bindings: List[CommandBinding] = field(default_factory=list)


class CommandBindingHandler:
    """
    Creates, tracks and reverts command bindings per source object.

    Args:
        config: Application config; binding.sync_enabled_state is applied
            to every binding created here.
    """

    def __init__(self, config: Optional[AppConfig] = None):
        self._config = config if config is not None else AppConfig()
        self._frames: Dict[int, BindingFrame] = {}

    @property
    def sync_enabled_state(self) -> bool:
        return self._config.binding.sync_enabled_state

    def get_binding_frame(self, source: Any) -> BindingFrame:
        """Get (or create) the binding frame for a source object."""
        frame = self._frames.get(id(source))
        if frame is None or frame.source is not source:
            frame = BindingFrame(source)
            self._frames[id(source)] = frame
        return frame

    def has_frame(self, source: Any) -> bool:
        frame = self._frames.get(id(source))
        return frame is not None and frame.source is source

    def bind_command_direct(
        self,
        source: Any,
        command: ICommand,
        view: QObject,
        parameter: Any = None,
        binder_cls: BinderFactory = ClickCommandBinder
    ) -> bool:
        """
        Bind a command to a specific view on behalf of source.

        Returns:
            True if a new binding was made; False for a None command, an
            existing (command, view) pair or an unsupported view.
        """
        if command is None or view is None:
            return False

        frame = self.get_binding_frame(source)
        if any(b.command is command and b.view is view for b in frame.command_bindings):
            return False

        binding = CommandBinding(
            view_id=view.objectName(),
            binder_cls=binder_cls,
            sync_enabled_state=self.sync_enabled_state,
        )
        if not binding.bind(command, view, parameter):
            return False

        frame.command_bindings.append(binding)
        return True

    def unbind_command_direct(self, source: Any, command: ICommand, view: QObject) -> bool:
        """Revert a binding made with bind_command_direct()."""
        if not self.has_frame(source):
            return False

        frame = self._frames[id(source)]
        for binding in frame.command_bindings:
            if binding.command is command and binding.view is view and binding.member_name is None:
                binding.unbind()
                frame.command_bindings.remove(binding)
                return True
        return False

    def bind_commands(self, source: Any, container: QObject) -> int:
        """
        Bind every @command_binding declared on source's class.

        Views are looked up by object name under container. The source
        object itself is passed as the command parameter.

        Returns:
            Number of bindings made.
        """
        frame = self.get_binding_frame(source)
        bound = 0

        for decl in declared_command_bindings(type(source)):
            command = getattr(source, decl.member_name, None)
            if command is None:
                logger.warning(f"Command '{decl.member_name}' on {type(source).__name__} is None; skipped")
                continue

            if any(b.member_name == decl.member_name and b.view_id == decl.view_id
                   and b.command is command for b in frame.command_bindings):
                continue

            view = self._find_view(container, decl.view_id)
            if view is None:
                logger.warning(f"View '{decl.view_id}' for command '{decl.member_name}' not found")
                continue

            binding = CommandBinding(
                view_id=decl.view_id,
                binder_cls=decl.binder_cls,
                tag=decl.tag,
                sync_enabled_state=self.sync_enabled_state,
                member_name=decl.member_name,
            )
            if binding.bind(command, view, source):
                frame.command_bindings.append(binding)
                bound += 1
            else:
                logger.warning(f"{type(view).__name__} '{decl.view_id}' rejected by {type(binding.binder).__name__}")

        logger.info(f"Bound {bound} declared command(s) for {type(source).__name__}")
        return bound

    def unbind_commands(self, source: Any) -> int:
        """Revert all declared bindings of source. Returns how many were reverted."""
        if not self.has_frame(source):
            return 0

        frame = self._frames[id(source)]
        declared = [b for b in frame.command_bindings if b.member_name is not None]
        for binding in declared:
            binding.unbind()
            frame.command_bindings.remove(binding)
        return len(declared)

    def destroy(self, source: Any) -> bool:
        """Revert every binding of source and forget its frame."""
        if not self.has_frame(source):
            return False

        frame = self._frames.pop(id(source))
        self._destroy_frame(frame)
        logger.info(f"Destroyed binding frame for {type(source).__name__}")
        return True

    def reset(self) -> None:
        """Revert all bindings of all sources."""
        for frame in self._frames.values():
            self._destroy_frame(frame)
        self._frames.clear()

    @staticmethod
    def _destroy_frame(frame: BindingFrame) -> None:
        for binding in frame.command_bindings:
            binding.unbind()
        frame.command_bindings.clear()

    @staticmethod
    def _find_view(container: QObject, view_id: str) -> Optional[QObject]:
        if container.objectName() == view_id:
            return container
        return container.findChild(QObject, view_id)
