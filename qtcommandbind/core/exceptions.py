"""Binding exceptions."""


class BindingError(Exception):
    """Raised when a command cannot be bound to a view."""
    pass


class UnsupportedViewError(BindingError):
    """Raised when no binder accepts the target view type."""

    def __init__(self, view, binder_name: str):
        self.view = view
        self.binder_name = binder_name
        super().__init__(
            f"{type(view).__name__} is not supported by {binder_name}"
        )
