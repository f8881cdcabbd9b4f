import hashlib

FINGERPRINT_LENGTH = 16


def sha256(content: str, length: int | None = None) -> str:
    """Hex SHA256 of the UTF-8 content, cut to `length` characters when given."""
    full_hash = hashlib.sha256(content.encode()).hexdigest()
    if length is None:
        return full_hash
    return full_hash[:length]


def fingerprint(secret: str) -> str:
    """Short tag used to recognise a token without keeping the token itself.

    Not an authentication primitive: only compared against tags this tool wrote.
    """
    return sha256(secret, FINGERPRINT_LENGTH)
