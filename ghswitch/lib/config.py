"""Load and save the alias directory as YAML."""

import logging
import os
import tempfile

import yaml

from ghswitch.errors import LoadError, SaveError
from ghswitch.models import AliasDirectory

from . import paths

logger = logging.getLogger(__name__)


def load_directory() -> AliasDirectory:
    """Load persisted state, returning an empty directory if none exists yet."""
    path = paths.config_file()
    if not path.exists():
        logger.debug(f"No state at {path}, starting empty")
        return AliasDirectory()

    try:
        with open(path) as f:
            raw = yaml.safe_load(f)
    except OSError as e:
        raise LoadError(f"failed to read config: {path}: {e}") from e
    except yaml.YAMLError as e:
        raise LoadError(f"failed to parse config: {path}: {e}") from e

    if raw is None:
        return AliasDirectory()
    if not isinstance(raw, dict):
        raise LoadError(f"failed to parse config: {path}: expected a mapping")

    try:
        return AliasDirectory.from_dict(raw)
    except ValueError as e:
        raise LoadError(f"failed to parse config: {path}: {e}") from e


def save_directory(directory: AliasDirectory) -> None:
    """Write state atomically so an interrupted save leaves the old file intact."""
    path = paths.config_file()
    body = yaml.safe_dump(directory.to_dict(), sort_keys=False, default_flow_style=False)

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=".config.", suffix=".tmp")
        try:
            with os.fdopen(fd, "w") as f:
                f.write(body)
            os.replace(tmp_name, path)
        except BaseException:
            if os.path.exists(tmp_name):
                os.unlink(tmp_name)
            raise
    except OSError as e:
        raise SaveError(f"failed to write config: {path}: {e}") from e

    logger.debug(f"Saved {len(directory.aliases)} aliases to {path}")
