import os
from pathlib import Path

APP_NAME = "gh-token-switch"


def config_home() -> Path:
    xdg = os.environ.get("XDG_CONFIG_HOME")
    if xdg:
        return Path(xdg).expanduser()
    return Path.home() / ".config"


def config_dir() -> Path:
    """Directory holding gh-token-switch state. GHSWITCH_CONFIG_DIR overrides it."""
    override = os.environ.get("GHSWITCH_CONFIG_DIR")
    if override:
        return Path(override).expanduser()
    return config_home() / APP_NAME


def config_file() -> Path:
    return config_dir() / "config.yaml"
