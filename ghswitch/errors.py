class GhSwitchError(Exception):
    """Base exception for gh-token-switch errors."""

    pass


class InsufficientAliases(GhSwitchError):
    """Raised when cycling is requested with fewer than two aliases."""

    pass


class IdenticalNames(GhSwitchError):
    """Raised when a rename targets the alias's current name."""

    pass


class AliasExists(GhSwitchError):
    """Raised when a rename targets an alias that is already defined."""

    pass


class EmptySecret(GhSwitchError):
    pass


class NotFound(GhSwitchError):
    """Raised when no secret is stored in the keyring for an alias."""

    pass


class StoreError(GhSwitchError):
    """Raised when the keyring refuses to store or delete a secret."""

    pass


class Unavailable(GhSwitchError):
    """Raised when the active token cannot be read from gh."""

    pass


class InstallFailed(GhSwitchError):
    """Raised when gh rejects the token being installed."""

    pass


class LoadError(GhSwitchError):
    """Raised when persisted state cannot be read or parsed."""

    pass


class SaveError(GhSwitchError):
    """Raised when persisted state cannot be written."""

    pass


class NotificationError(GhSwitchError):
    pass
