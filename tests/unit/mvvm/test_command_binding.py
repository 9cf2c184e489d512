"""
Unit Tests for CommandBinding lifecycle.

Tests for:
- Unbound -> Bound -> Unbound transitions
- Guarded execution and the absent-command policy
- Enabled-state synchronization
"""
import pytest
from unittest.mock import MagicMock
from PySide6.QtWidgets import QLabel, QPushButton, QSlider

from qtcommandbind.core.commands import CommandArgs, RelayCommand
from qtcommandbind.ui.mvvm.binders import SliderCommandBinder
from qtcommandbind.ui.mvvm.command_binding import CommandBinding


class TestLifecycle:

    def test_starts_unbound(self, qapp):
        binding = CommandBinding("saveButton")
        assert not binding.is_bound
        assert binding.command is None
        assert binding.view is None

    def test_bind_stores_references(self, qapp, mock_command):
        binding = CommandBinding("saveButton")
        button = QPushButton()

        assert binding.bind(mock_command, button, parameter=42)
        assert binding.is_bound
        assert binding.command is mock_command
        assert binding.view is button
        assert binding.parameter == 42

    def test_bind_twice_rejected(self, qapp, mock_command):
        binding = CommandBinding("saveButton")
        binding.bind(mock_command, QPushButton())

        assert not binding.bind(mock_command, QPushButton())
        assert binding.binder.connection_count == 1

    def test_bind_unsupported_view(self, qapp, mock_command):
        binding = CommandBinding("title")
        assert not binding.bind(mock_command, QLabel())
        assert not binding.is_bound

    def test_bind_none_command(self, qapp):
        binding = CommandBinding("saveButton")
        assert not binding.bind(None, QPushButton())

    def test_unbind_clears_references(self, qapp, mock_command):
        binding = CommandBinding("saveButton")
        binding.bind(mock_command, QPushButton())
        binding.unbind()

        assert not binding.is_bound
        assert binding.command is None
        assert binding.view is None

    def test_unbind_when_unbound_is_noop(self, qapp):
        binding = CommandBinding("saveButton")
        binding.unbind()
        binding.unbind()
        assert not binding.is_bound

    def test_rebind_to_other_view(self, qapp, mock_command):
        binding = CommandBinding("saveButton")
        first, second = QPushButton(), QPushButton()
        binding.bind(mock_command, first)
        binding.unbind()
        binding.bind(mock_command, second)

        first.click()
        second.click()

        mock_command.execute.assert_called_once()


class TestExecuteCommand:

    def test_absent_command_cannot_execute(self, qapp):
        binding = CommandBinding("saveButton")
        assert binding.execute_command("anything") is False

    def test_guard_true_executes(self, qapp, mock_command):
        binding = CommandBinding("saveButton")
        binding.bind(mock_command, QPushButton())

        assert binding.execute_command("x") is True
        mock_command.execute.assert_called_once_with("x")

    def test_guard_false_skips(self, qapp, mock_command):
        mock_command.can_execute.return_value = False
        binding = CommandBinding("saveButton")
        binding.bind(mock_command, QPushButton())

        assert binding.execute_command("x") is False
        mock_command.execute.assert_not_called()

    def test_execute_error_propagates(self, qapp):
        def boom(args):
            raise RuntimeError("disk full")

        binding = CommandBinding("volumeSlider", binder_cls=SliderCommandBinder)
        binding.bind(RelayCommand(boom), QSlider())

        with pytest.raises(RuntimeError, match="disk full"):
            binding.execute_command(CommandArgs("volume", 10))


class TestEnabledStateSync:

    def test_disabled_when_guard_false(self, qapp):
        allowed = {"value": False}
        command = RelayCommand(MagicMock(), can_execute=lambda p: allowed["value"])
        button = QPushButton()
        binding = CommandBinding("saveButton", sync_enabled_state=True)

        binding.bind(command, button)
        assert not button.isEnabled()

        allowed["value"] = True
        command.raise_can_execute_changed()
        assert button.isEnabled()

    def test_slider_guard_sees_current_value(self, qapp):
        seen = []
        command = RelayCommand(MagicMock(), can_execute=lambda args: seen.append(args) or True)
        slider = QSlider()
        slider.setValue(30)
        binding = CommandBinding("volumeSlider", binder_cls=SliderCommandBinder, sync_enabled_state=True)

        binding.bind(command, slider, parameter="volume")

        assert seen == [CommandArgs("volume", 30)]
        assert slider.isEnabled()

    def test_unbind_stops_sync(self, qapp):
        allowed = {"value": True}
        command = RelayCommand(MagicMock(), can_execute=lambda p: allowed["value"])
        button = QPushButton()
        binding = CommandBinding("saveButton", sync_enabled_state=True)
        binding.bind(command, button)
        binding.unbind()

        allowed["value"] = False
        command.raise_can_execute_changed()

        assert button.isEnabled()
        assert command.can_execute_changed.subscriber_count == 0

    def test_unbind_restores_enabled_view(self, qapp):
        command = RelayCommand(MagicMock(), can_execute=lambda p: False)
        button = QPushButton()
        binding = CommandBinding("saveButton", sync_enabled_state=True)
        binding.bind(command, button)
        assert not button.isEnabled()

        binding.unbind()

        assert button.isEnabled()

    def test_unbind_keeps_view_disabled_before_binding(self, qapp):
        command = RelayCommand(MagicMock())
        button = QPushButton()
        button.setEnabled(False)
        binding = CommandBinding("saveButton", sync_enabled_state=True)
        binding.bind(command, button)
        assert button.isEnabled()

        binding.unbind()

        assert not button.isEnabled()

    def test_sync_off_leaves_view_alone(self, qapp, mock_command):
        mock_command.can_execute.return_value = False
        button = QPushButton()
        CommandBinding("saveButton").bind(mock_command, button)

        assert button.isEnabled()
        mock_command.can_execute.assert_not_called()
