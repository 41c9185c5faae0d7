"""
Password hashing for the ``user_data`` credential store.

Rows created by the earlier Node service hold raw bcrypt strings
(``$2b$10$...``) with a cost factor of 10.  New rows are written by
Django's bcrypt hasher at the same cost, prefixed with ``bcrypt$`` as
Django expects.  :func:`to_django_encoding` lets both formats verify
through :func:`django.contrib.auth.hashers.check_password`.
"""
from __future__ import annotations

from django.contrib.auth.hashers import BCryptPasswordHasher

LEGACY_BCRYPT_PREFIXES = ("$2a$", "$2b$", "$2y$")


class StaffBCryptPasswordHasher(BCryptPasswordHasher):
    """Plain bcrypt (no SHA256 pre-hash) at cost factor 10."""

    rounds = 10


def to_django_encoding(encoded: str) -> str:
    if encoded.startswith(LEGACY_BCRYPT_PREFIXES):
        return f"{StaffBCryptPasswordHasher.algorithm}${encoded}"
    return encoded
