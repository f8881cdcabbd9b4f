"""CLI error handling: wrap commands to report errors instead of tracebacks."""

from functools import wraps

import typer
from click.exceptions import Exit

from ghswitch.errors import GhSwitchError


def error_feedback(f):
    """Wrap command to catch exceptions and report them before exiting.

    Domain errors carry their own context and are echoed as-is. Anything
    else is prefixed with its kind. Either way the command exits with 1.
    """

    @wraps(f)
    def wrapper(*args, **kwargs):
        try:
            return f(*args, **kwargs)
        except (SystemExit, Exit):
            raise
        except GhSwitchError as e:
            typer.echo(f"error: {e}", err=True)
            raise typer.Exit(1) from e
        except OSError as e:
            typer.echo(f"error: file error: {e}", err=True)
            raise typer.Exit(1) from e
        except Exception as e:
            typer.echo(f"error: {type(e).__name__}: {e}", err=True)
            raise typer.Exit(1) from e

    return wrapper
