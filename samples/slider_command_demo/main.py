"""
Slider Command Demo.

Demonstrates command binding for sliders and buttons:
- @command_binding declarations resolved by CommandBindingHandler
- SliderCommandBinder passing CommandArgs(parameter, progress)
- Enabled-state sync driven by can_execute()

Run with: python main.py
"""
import sys
from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QApplication, QMainWindow, QWidget, QVBoxLayout, QHBoxLayout,
    QLabel, QPushButton, QSlider, QDial, QGroupBox
)

from qtcommandbind.core.commands import CommandArgs, RelayCommand
from qtcommandbind.core.config import ConfigManager
from qtcommandbind.core.logging import setup_logging
from qtcommandbind.ui.mvvm import CommandBindingHandler, SliderCommandBinder, command_binding

# =============================================================================
# ViewModel
# =============================================================================

class MixerViewModel:
    """Volume/balance mixer with a mute toggle."""

    def __init__(self, status_label: QLabel):
        self.status_label = status_label
        self.muted = False
        self._set_volume = RelayCommand(self._on_volume, can_execute=lambda args: not self.muted)
        self._set_balance = RelayCommand(self._on_balance, can_execute=lambda args: not self.muted)
        self._toggle_mute = RelayCommand(self._on_toggle_mute)

    @property
    @command_binding("volumeSlider", binder_cls=SliderCommandBinder)
    def set_volume(self):
        return self._set_volume

    @property
    @command_binding("balanceDial", binder_cls=SliderCommandBinder)
    def set_balance(self):
        return self._set_balance

    @property
    @command_binding("muteButton")
    def toggle_mute(self):
        return self._toggle_mute

    def _on_volume(self, args: CommandArgs):
        self.status_label.setText(f"Volume: {args.progress}")

    def _on_balance(self, args: CommandArgs):
        self.status_label.setText(f"Balance: {args.progress - 50:+d}")

    def _on_toggle_mute(self, parameter):
        self.muted = not self.muted
        self.status_label.setText("Muted" if self.muted else "Unmuted")
        self._set_volume.raise_can_execute_changed()
        self._set_balance.raise_can_execute_changed()

# =============================================================================
# View
# =============================================================================

class MixerWindow(QMainWindow):

    def __init__(self, handler: CommandBindingHandler):
        super().__init__()
        self.setWindowTitle("Slider Command Demo")
        self.resize(420, 240)
        self.handler = handler

        central = QWidget()
        self.setCentralWidget(central)
        layout = QVBoxLayout(central)

        group = QGroupBox("Mixer")
        row = QHBoxLayout(group)

        volume = QSlider(Qt.Horizontal)
        volume.setObjectName("volumeSlider")
        volume.setRange(0, 100)
        row.addWidget(volume)

        balance = QDial()
        balance.setObjectName("balanceDial")
        balance.setRange(0, 100)
        balance.setValue(50)
        row.addWidget(balance)

        mute = QPushButton("Mute")
        mute.setObjectName("muteButton")
        row.addWidget(mute)

        layout.addWidget(group)
        self.status_label = QLabel("Move a control")
        layout.addWidget(self.status_label)

        self.vm = MixerViewModel(self.status_label)
        self.handler.bind_commands(self.vm, central)

    def closeEvent(self, event):
        self.handler.destroy(self.vm)
        super().closeEvent(event)

# =============================================================================
# Main
# =============================================================================

def main():
    config = ConfigManager("slider_demo.json")
    if not config.data.binding.sync_enabled_state:
        config.update("binding", "sync_enabled_state", True)
    setup_logging(config.data.general.debug_mode, config.data.general.log_dir or None)

    app = QApplication(sys.argv)
    window = MixerWindow(CommandBindingHandler(config.data))
    window.show()
    sys.exit(app.exec())

if __name__ == "__main__":
    main()
