"""Single-user task list rendered in the browser."""

__version__ = "0.1.0"
