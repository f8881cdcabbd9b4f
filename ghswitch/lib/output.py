import json
import logging
import os
from dataclasses import dataclass

import typer


@dataclass
class OutputFlags:
    json: bool = False
    quiet: bool = False


def init_context(ctx: typer.Context, json_output: bool = False, quiet_output: bool = False) -> None:
    ctx.obj = OutputFlags(json=json_output, quiet=quiet_output)


def _flags(ctx: typer.Context) -> OutputFlags:
    obj = ctx.find_root().obj
    return obj if isinstance(obj, OutputFlags) else OutputFlags()


def init_logging(verbose: bool = False) -> None:
    """Configure root logging once. --verbose wins over GHSWITCH_LOG_LEVEL."""
    if verbose:
        level = logging.DEBUG
    else:
        name = os.environ.get("GHSWITCH_LOG_LEVEL", "WARNING").upper()
        level = getattr(logging, name, logging.WARNING)
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


def emit(ctx: typer.Context, data, lines: list[str]) -> None:
    """Print a command's result: `data` as JSON under --json, else `lines`."""
    if _flags(ctx).json:
        typer.echo(json.dumps(data, indent=2))
        return
    for line in lines:
        typer.echo(line)


def note(ctx: typer.Context, msg: str) -> None:
    """Confirmation message, silenced by --quiet and --json."""
    flags = _flags(ctx)
    if not (flags.quiet or flags.json):
        typer.echo(msg)
