"""Password Hashing — salted hashes for admin account credentials.

Invariants:
    - Plaintext passwords are never persisted
    - Stored format is werkzeug's "<method>$<salt>$<hash>"
    - verify_password() is False for an empty password or a value that is not a hash
"""

from werkzeug.security import check_password_hash, generate_password_hash

HASH_SEPARATOR = "$"


def hash_password(password: str) -> str:
    """Hash a password with werkzeug's default method and a random salt."""
    if not password:
        raise ValueError("password cannot be empty")
    return generate_password_hash(password)


def verify_password(password: str, stored: str) -> bool:
    """Check a candidate password against a stored hash."""
    if not password or stored.count(HASH_SEPARATOR) < 2:
        return False
    return check_password_hash(stored, password)
