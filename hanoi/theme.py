from rich.console import Console
from rich.theme import Theme

# Define a monochrome theme
monochrome_theme = Theme({
    "info": "dim",
    "warning": "bold",
    "error": "bold",
    "danger": "bold",

    "title": "bold",
    "table.header": "bold",
    "table.cell": "", # default color
    "mismatch": "bold reverse",
})

# Tables go to stdout, logs and errors to stderr
console = Console(theme=monochrome_theme, highlight=False)
err_console = Console(theme=monochrome_theme, highlight=False, stderr=True)
