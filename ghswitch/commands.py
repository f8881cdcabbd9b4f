"""Command operations.

Each operation takes the directory loaded at startup, mutates it in memory
and saves it at most once, after every external step it depends on has
succeeded. A failed keyring or gh call leaves the persisted state untouched.
"""

import logging

from ghswitch.errors import EmptySecret, InstallFailed, Unavailable
from ghswitch.lib import aliases, config, gh, keychain, notify
from ghswitch.models import AliasDirectory, record_secret

logger = logging.getLogger(__name__)


def set_token(directory: AliasDirectory, alias: str, secret: str) -> None:
    """Store or replace the token for `alias`."""
    secret = secret.strip()
    if not secret:
        raise EmptySecret("token is empty")

    keychain.put(alias, secret)
    record_secret(directory, alias, secret)
    config.save_directory(directory)
    logger.info(f"Stored token for '{alias}'")


def current_alias(directory: AliasDirectory) -> str | None:
    """Alias of the token gh is using now, or None if gh is unavailable or it is untracked."""
    try:
        active = gh.read_active_secret()
    except Unavailable as e:
        logger.debug(f"Active token unavailable: {e}")
        return None
    return aliases.resolve(directory, active)


def pick_next_alias(directory: AliasDirectory) -> str:
    return aliases.choose_next(directory.aliases, current_alias(directory))


def use_token(directory: AliasDirectory, alias: str | None = None) -> str:
    """Activate `alias`, or the next alias in cycle order when omitted.

    Returns the alias that was activated.
    """
    implicit_cycle = alias is None
    target = alias if alias is not None else pick_next_alias(directory)

    secret = keychain.get(target)

    try:
        gh.install_secret(secret)
    except InstallFailed:
        notify.maybe_notify(
            directory.notifications,
            implicit_cycle,
            "GitHub token switch failed",
            f"Failed switching to: {target}",
        )
        raise

    record_secret(directory, target, secret)
    directory.last_used_alias = target
    config.save_directory(directory)
    logger.info(f"Switched to '{target}'")

    notify.maybe_notify(
        directory.notifications,
        implicit_cycle,
        "GitHub token switched",
        f"Switched GitHub token: {target}",
    )
    return target


def list_aliases(directory: AliasDirectory) -> list[str]:
    return list(directory.aliases)


def rename_alias(directory: AliasDirectory, old: str, new: str) -> None:
    """Move the stored token from `old` to `new` and rename it in the directory."""
    aliases.check_rename(directory, old, new)

    secret = keychain.get(old)
    keychain.put(new, secret)
    keychain.delete(old)

    aliases.rename(directory, old, new)
    config.save_directory(directory)
    logger.info(f"Renamed '{old}' to '{new}'")


def delete_alias(directory: AliasDirectory, alias: str) -> None:
    keychain.discard(alias)
    aliases.delete(directory, alias)
    config.save_directory(directory)
    logger.info(f"Deleted '{alias}'")
