"""
Password hashing helpers.

Passwords are hashed with PBKDF2‑HMAC using SHA‑256 and a random
per‑password salt.  The stored value contains the salt and the
derived key in hex, separated by ``$``.  The storage layer never sees
a plain text password.
"""

import hashlib
import hmac
import os

ITERATIONS = 100_000


def hash_password(password: str) -> str:
    """Hash a password using PBKDF2‑HMAC with SHA‑256.

    A 16‑byte random salt is generated for each password.

    Returns
    -------
    str
        Salt and hash concatenated with ``$``.
    """
    salt = os.urandom(16)
    dk = hashlib.pbkdf2_hmac("sha256", password.encode("utf-8"), salt, ITERATIONS)
    return f"{salt.hex()}${dk.hex()}"


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify a plain password against a stored salt+hash string."""
    try:
        salt_hex, hash_hex = hashed_password.split("$", 1)
        salt = bytes.fromhex(salt_hex)
        stored_hash = bytes.fromhex(hash_hex)
    except ValueError:
        return False
    dk = hashlib.pbkdf2_hmac("sha256", plain_password.encode("utf-8"), salt, ITERATIONS)
    return hmac.compare_digest(dk, stored_hash)
