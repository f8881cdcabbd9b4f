"""Alias bookkeeping: which alias is active, which comes next, rename and delete."""

from collections.abc import Sequence

from ghswitch.errors import AliasExists, IdenticalNames, InsufficientAliases
from ghswitch.lib.hashing import fingerprint
from ghswitch.models import AliasDirectory


def resolve(directory: AliasDirectory, active_secret: str) -> str | None:
    """Return the alias whose fingerprint matches the active secret, if any."""
    tag = fingerprint(active_secret.strip())
    for alias, value in directory.fingerprints.items():
        if value == tag:
            return alias
    return None


def choose_next(aliases: Sequence[str], current: str | None) -> str:
    """Pick the alias after `current` in cycle order.

    With no current alias the first one is returned. An unknown current alias
    is treated as sitting at index 0, so the cycle still moves forward when the
    active alias was renamed or removed outside this tool.
    """
    if len(aliases) < 2:
        raise InsufficientAliases("need at least 2 aliases to cycle; add more with 'set <alias>'")

    if current is None:
        return aliases[0]

    try:
        idx = aliases.index(current)
    except ValueError:
        idx = 0
    return aliases[(idx + 1) % len(aliases)]


def check_rename(directory: AliasDirectory, old: str, new: str) -> None:
    if old == new:
        raise IdenticalNames("old and new alias are identical")
    if new in directory.aliases:
        raise AliasExists(f"alias '{new}' already exists")


def rename(directory: AliasDirectory, old: str, new: str) -> None:
    """Rename `old` to `new` in place, keeping its cycle position.

    Keyring entries are not touched; move the secret before calling this.
    """
    check_rename(directory, old, new)

    if old in directory.aliases:
        directory.aliases[directory.aliases.index(old)] = new
    else:
        directory.aliases.append(new)

    if old in directory.fingerprints:
        directory.fingerprints[new] = directory.fingerprints.pop(old)

    if directory.last_used_alias == old:
        directory.last_used_alias = new


def delete(directory: AliasDirectory, alias: str) -> None:
    """Forget `alias`. Deleting an unknown alias is a no-op."""
    directory.aliases = [a for a in directory.aliases if a != alias]
    directory.fingerprints.pop(alias, None)
    if directory.last_used_alias == alias:
        directory.last_used_alias = None
