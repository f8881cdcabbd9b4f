"""Token storage in the OS keyring, one entry per alias."""

import logging

import keyring
from keyring.errors import KeyringError, PasswordDeleteError

from ghswitch.errors import NotFound, StoreError

logger = logging.getLogger(__name__)

SERVICE = "github-cli-login-switcher"


def get(alias: str) -> str:
    try:
        secret = keyring.get_password(SERVICE, alias)
    except KeyringError as e:
        raise NotFound(f"no token found for alias '{alias}': {e}") from e

    if secret is None:
        raise NotFound(f"no token found for alias '{alias}'")
    return secret


def put(alias: str, secret: str) -> None:
    try:
        keyring.set_password(SERVICE, alias, secret)
    except KeyringError as e:
        raise StoreError(f"failed storing token for alias '{alias}': {e}") from e


def delete(alias: str) -> None:
    try:
        keyring.delete_password(SERVICE, alias)
    except KeyringError as e:
        raise StoreError(f"failed deleting alias '{alias}': {e}") from e


def discard(alias: str) -> None:
    """Delete the entry if present; failures are logged, not raised."""
    try:
        keyring.delete_password(SERVICE, alias)
    except PasswordDeleteError:
        logger.debug(f"No keyring entry to delete for '{alias}'")
    except KeyringError as e:
        logger.debug(f"Keyring delete failed for '{alias}': {e}")
