import sys

import typer


def read_secret(label: str = "GitHub token") -> str:
    """Prompt for a token without echo, or read it from piped stdin."""
    if sys.stdin.isatty():
        return typer.prompt(label, hide_input=True).strip()
    return sys.stdin.read().strip()
