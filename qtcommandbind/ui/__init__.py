"""
UI layer - command binding for PySide6 widgets.

Usage:
    from qtcommandbind.ui.mvvm import bind_command, SliderCommandBinder
"""
