"""Salted password hashing.

The stored hash is the hex digest of ``password + salt``; verification
recomputes it and compares in constant time.
"""

from __future__ import annotations

import hashlib
import hmac

from werkzeug.security import gen_salt

from ..core.constants import DEFAULT_SALT_LENGTH, PASSWORD_HASH_ALGORITHM


def hash_password(password: str, salt: str) -> str:
    return hashlib.new(PASSWORD_HASH_ALGORITHM, (password + salt).encode("utf-8")).hexdigest()


def verify_password(candidate: str, stored_hash: str, stored_salt: str) -> bool:
    """Return True if `candidate` hashes to `stored_hash` with `stored_salt`.

    A mismatch (or a missing/corrupted stored value) is False, never an error.
    """
    if not isinstance(candidate, str) or not isinstance(stored_hash, str) or not isinstance(stored_salt, str):
        return False
    computed = hash_password(candidate, stored_salt)
    return hmac.compare_digest(computed.encode("utf-8"), stored_hash.encode("utf-8"))


def new_salt(length: int = DEFAULT_SALT_LENGTH) -> str:
    return gen_salt(length)
