"""Sealing of session data into tamper-proof cookie values.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from __future__ import annotations

import base64
import binascii
import json
import os
from functools import lru_cache
from typing import Any

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.ciphers.aead import AESGCM
from cryptography.hazmat.primitives.kdf.pbkdf2 import PBKDF2HMAC

IV_LENGTH = 12
KEY_LENGTH = 32
PBKDF2_ITERATIONS = 100_000
PBKDF2_SALT = b"WorkOS-Fresh-Session-Salt"

Password = str | dict[str, str]


def resolve_password(password: Password) -> str:
    """Return the password itself, or the first entry of a password map."""
    if isinstance(password, dict):
        if not password:
            raise ValueError("Password map must not be empty")
        return next(iter(password.values()))
    return password


@lru_cache(maxsize=16)
def _derive_key(password: str) -> bytes:
    kdf = PBKDF2HMAC(
        algorithm=hashes.SHA256(),
        length=KEY_LENGTH,
        salt=PBKDF2_SALT,
        iterations=PBKDF2_ITERATIONS,
    )
    return kdf.derive(password.encode("utf-8"))


def seal_data(data: Any, password: Password) -> str:
    """Encrypt JSON-serializable data into an opaque string.

    Args:
        data: Anything ``json.dumps`` accepts
        password: Cookie password, or a map of password IDs to passwords

    Returns:
        ``base64(iv || ciphertext)`` where the ciphertext carries its GCM tag.

    """
    key = _derive_key(resolve_password(password))
    iv = os.urandom(IV_LENGTH)
    ciphertext = AESGCM(key).encrypt(iv, json.dumps(data).encode("utf-8"), None)
    return base64.b64encode(iv + ciphertext).decode("ascii")


def unseal_data(sealed: str, password: Password) -> Any:
    """Decrypt a value produced by :func:`seal_data`.

    Raises:
        ValueError: If the value is malformed, was tampered with, or was sealed
            with another password

    """
    try:
        raw = base64.b64decode(sealed, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError("Sealed data is not valid base64") from e

    if len(raw) <= IV_LENGTH:
        raise ValueError("Sealed data is too short")

    key = _derive_key(resolve_password(password))
    try:
        plaintext = AESGCM(key).decrypt(raw[:IV_LENGTH], raw[IV_LENGTH:], None)
    except InvalidTag as e:
        raise ValueError("Failed to unseal data") from e
    return json.loads(plaintext)
