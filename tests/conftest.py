import os

import pytest
from unittest.mock import MagicMock

# Widgets are created without a display
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from PySide6.QtWidgets import QApplication

from qtcommandbind.core.commands import ICommand
from qtcommandbind.core.events import ObserverEvent


@pytest.fixture(scope="session")
def qapp():
    """Ensure a QApplication exists for Qt widget tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def mock_command():
    """ICommand mock that can always execute."""
    command = MagicMock(spec=ICommand)
    command.can_execute.return_value = True
    command.can_execute_changed = ObserverEvent("CanExecuteChanged")
    return command
