from dataclasses import asdict, dataclass, field

from ghswitch.lib.hashing import fingerprint


@dataclass
class NotificationConfig:
    enabled: bool = True
    only_when_no_tty: bool = True
    only_on_implicit_cycle: bool = True

    @classmethod
    def from_dict(cls, data: dict) -> "NotificationConfig":
        values = {}
        for name in ("enabled", "only_when_no_tty", "only_on_implicit_cycle"):
            if name not in data:
                continue
            if not isinstance(data[name], bool):
                raise ValueError(f"notifications.{name} must be true or false")
            values[name] = data[name]
        return cls(**values)


@dataclass
class AliasDirectory:
    """Known aliases in cycle order, plus what we remember about each.

    Invariants kept by the transforms in ghswitch.lib.aliases:
    - aliases has no duplicates
    - every fingerprints key is in aliases
    - last_used_alias is None or in aliases
    """

    aliases: list[str] = field(default_factory=list)
    fingerprints: dict[str, str] = field(default_factory=dict)
    notifications: NotificationConfig = field(default_factory=NotificationConfig)
    last_used_alias: str | None = None

    def to_dict(self) -> dict:
        data = asdict(self)
        if self.last_used_alias is None:
            del data["last_used_alias"]
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "AliasDirectory":
        """Build a directory from persisted data, defaulting any missing or null field.

        Fingerprints for unknown aliases are dropped and an unknown
        last_used_alias is cleared, so a hand-edited file still loads consistent.
        """
        aliases = data.get("aliases")
        if aliases is None:
            aliases = []
        if not isinstance(aliases, list) or not all(isinstance(a, str) for a in aliases):
            raise ValueError("aliases must be a list of names")

        fingerprints = data.get("fingerprints")
        if fingerprints is None:
            fingerprints = {}
        if not isinstance(fingerprints, dict) or not all(
            isinstance(k, str) and isinstance(v, str) for k, v in fingerprints.items()
        ):
            raise ValueError("fingerprints must map alias names to strings")

        notifications = data.get("notifications")
        if notifications is None:
            notifications = {}
        if not isinstance(notifications, dict):
            raise ValueError("notifications must be a mapping")

        last_used = data.get("last_used_alias")
        if last_used is not None and not isinstance(last_used, str):
            raise ValueError("last_used_alias must be a name")

        names = list(dict.fromkeys(aliases))
        if last_used not in names:
            last_used = None

        return cls(
            aliases=names,
            fingerprints={k: v for k, v in fingerprints.items() if k in names},
            notifications=NotificationConfig.from_dict(notifications),
            last_used_alias=last_used,
        )


def ensure_alias(directory: AliasDirectory, alias: str) -> None:
    if alias not in directory.aliases:
        directory.aliases.append(alias)


def record_secret(directory: AliasDirectory, alias: str, secret: str) -> None:
    """Track alias and remember the fingerprint of its secret."""
    ensure_alias(directory, alias)
    directory.fingerprints[alias] = fingerprint(secret.strip())
