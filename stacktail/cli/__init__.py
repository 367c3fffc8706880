from .console import console, error_console

name = "cli"

__all__ = [
    "console",
    "error_console",
]
