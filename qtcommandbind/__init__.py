"""
qtcommandbind - Command binding for PySide6 views.

Attaches executable commands (action + can-execute guard) to Qt widgets:
buttons invoke on click, slider-style controls invoke on every value change.

Usage:
    from qtcommandbind.core.commands import RelayCommand
    from qtcommandbind.ui.mvvm import bind_command, SliderCommandBinder

    command = RelayCommand(lambda args: player.set_volume(args.progress))
    binding = bind_command(command, slider, "volume", binder_cls=SliderCommandBinder)
"""

__version__ = "0.1.0"
