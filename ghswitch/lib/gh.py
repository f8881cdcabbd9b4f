"""Read and install the active token through the gh CLI."""

import subprocess

from ghswitch.errors import InstallFailed, Unavailable

HOSTNAME = "github.com"


def read_active_secret() -> str:
    try:
        result = subprocess.run(["gh", "auth", "token"], capture_output=True, text=True)
    except OSError as e:
        raise Unavailable(f"failed to run 'gh auth token' (is gh installed?): {e}") from e

    if result.returncode != 0:
        raise Unavailable("'gh auth token' failed")
    return result.stdout


def install_secret(secret: str) -> None:
    """Log gh in with the given token.

    gh's own stdout and stderr go straight to the terminal so any prompt it
    shows stays visible.
    """
    cmd = ["gh", "auth", "login", "--hostname", HOSTNAME, "--with-token"]
    try:
        result = subprocess.run(cmd, input=secret, text=True)
    except OSError as e:
        raise InstallFailed(f"failed to run 'gh auth login' (is gh installed?): {e}") from e

    if result.returncode != 0:
        raise InstallFailed("'gh auth login --with-token' failed")
