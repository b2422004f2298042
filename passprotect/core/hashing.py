import hashlib

PREFIX_LENGTH = 5


def digest(value: str, uppercase: bool = False) -> str:
    """SHA-1 of the UTF-8 encoded value as hex."""
    hexed = hashlib.sha1(value.encode("utf-8")).hexdigest()
    if uppercase:
        return hexed.upper()
    return hexed


def split_password_hash(password: str) -> tuple[str, str]:
    """
    Returns (prefix, suffix) of the uppercase password digest.
    Only the prefix is ever sent to the range endpoint.
    """
    sha1 = digest(password, uppercase=True)
    return sha1[:PREFIX_LENGTH], sha1[PREFIX_LENGTH:]


def email_cache_key(email: str, scope: str) -> str:
    return digest(f"{email}-{scope}")


def password_cache_key(password: str, scope: str) -> str:
    # Only a 5 char fragment of the password digest goes into the key
    prefix, _ = split_password_hash(password)
    return digest(f"{prefix}-{scope}")
