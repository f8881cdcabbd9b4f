import typer

from ghswitch import __version__, commands
from ghswitch.lib import config, output, prompt
from ghswitch.lib.errors import error_feedback

app = typer.Typer(
    invoke_without_command=True,
    no_args_is_help=False,
    add_completion=False,
    help="Switch GitHub auth tokens by profile.",
)


def _version_callback(value: bool):
    if value:
        typer.echo(f"gh-token-switch {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
@error_feedback
def common_options_callback(
    ctx: typer.Context,
    json_output: bool = typer.Option(False, "--json", "-j", help="Output in JSON format."),
    quiet_output: bool = typer.Option(
        False, "--quiet", "-q", help="Suppress non-essential output."
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug output to stderr."),
    version: bool = typer.Option(
        False, "--version", callback=_version_callback, is_eager=True, help="Show version."
    ),
):
    """Switch GitHub auth tokens by profile. Without a command, cycle to the next alias."""
    output.init_context(ctx, json_output, quiet_output)
    output.init_logging(verbose)

    if ctx.invoked_subcommand is None:
        _switch(ctx, None)


def _switch(ctx: typer.Context, alias: str | None) -> None:
    directory = config.load_directory()
    target = commands.use_token(directory, alias)
    output.emit(ctx, {"alias": target}, [target])


@app.command("set")
@error_feedback
def set_cmd(ctx: typer.Context, alias: str = typer.Argument(..., help="Profile alias.")):
    """Store/update token for a profile alias."""
    directory = config.load_directory()
    secret = prompt.read_secret()
    commands.set_token(directory, alias, secret)
    output.note(ctx, f"stored token for alias '{alias}'")


@app.command("use")
@error_feedback
def use_cmd(
    ctx: typer.Context,
    alias: str | None = typer.Argument(None, help="Alias to activate; cycles when omitted."),
):
    """Switch to a profile alias, or cycle when omitted."""
    _switch(ctx, alias)


@app.command("current")
@error_feedback
def current_cmd(ctx: typer.Context):
    """Show current active managed alias."""
    directory = config.load_directory()
    alias = commands.current_alias(directory)
    output.emit(ctx, {"alias": alias}, [alias or "unknown"])


@app.command("list")
@error_feedback
def list_cmd(ctx: typer.Context):
    """List profile aliases."""
    directory = config.load_directory()
    names = commands.list_aliases(directory)
    output.emit(ctx, names, names)


@app.command("rename")
@error_feedback
def rename_cmd(
    ctx: typer.Context,
    old: str = typer.Argument(..., help="Current alias."),
    new: str = typer.Argument(..., help="New alias."),
):
    """Rename an alias in keychain and config."""
    directory = config.load_directory()
    commands.rename_alias(directory, old, new)
    output.note(ctx, f"renamed '{old}' -> '{new}'")


@app.command("delete")
@error_feedback
def delete_cmd(ctx: typer.Context, alias: str = typer.Argument(..., help="Alias to delete.")):
    """Delete an alias from keychain and config."""
    directory = config.load_directory()
    commands.delete_alias(directory, alias)
    output.note(ctx, f"deleted '{alias}'")


def main() -> None:
    """Entry point for gh-token-switch command."""
    try:
        app()
    except SystemExit:
        raise
    except BaseException as e:
        raise SystemExit(1) from e
