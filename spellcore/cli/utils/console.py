"""Rich console configuration and helpers."""

from rich.console import Console
from rich.theme import Theme

custom_theme = Theme(
    {
        "info": "cyan",
        "success": "green",
        "warning": "yellow",
        "error": "red bold",
        "word": "magenta",
        "misspelled": "red underline",
        "dim": "dim",
    }
)

console = Console(theme=custom_theme)

# Errors and log output go to stderr
error_console = Console(theme=custom_theme, stderr=True)
