from rich.console import Console

# event lines and stack outputs
console = Console(highlight=False)

# warnings that should not mix with the event log
error_console = Console(stderr=True, highlight=False)
