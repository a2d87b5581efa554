"""Tests for sealing session data.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from __future__ import annotations

import base64

import pytest
from workos_sdk import seal_data, unseal_data
from workos_sdk._sealing import IV_LENGTH, resolve_password

PASSWORD = "alongcookiesecretmadefortestingsessions"


def test_unseal_returns_sealed_data() -> None:
    """Sealed data comes back unchanged with the same password."""
    data = {"access_token": "at", "user": {"id": "user_01H"}, "n": [1, 2]}

    assert unseal_data(seal_data(data, PASSWORD), PASSWORD) == data


def test_sealed_value_layout() -> None:
    """The sealed value is base64 of a 12 byte IV, ciphertext and tag."""
    sealed = seal_data({"a": 1}, PASSWORD)

    raw = base64.b64decode(sealed)
    assert len(raw) == IV_LENGTH + len(b'{"a": 1}') + 16


def test_sealing_uses_a_fresh_iv() -> None:
    """Sealing the same data twice gives different values."""
    assert seal_data({"a": 1}, PASSWORD) != seal_data({"a": 1}, PASSWORD)


def test_wrong_password() -> None:
    """Another password cannot unseal the value."""
    sealed = seal_data({"a": 1}, PASSWORD)

    with pytest.raises(ValueError, match="unseal"):
        unseal_data(sealed, "anotherlongcookiesecretfortestingonly")


def test_tampered_value() -> None:
    """Flipping a ciphertext byte is detected."""
    raw = bytearray(base64.b64decode(seal_data({"a": 1}, PASSWORD)))
    raw[-1] ^= 0x01

    with pytest.raises(ValueError):
        unseal_data(base64.b64encode(bytes(raw)).decode(), PASSWORD)


@pytest.mark.parametrize("sealed", ["%%%not base64%%%", "", base64.b64encode(b"short").decode()])
def test_malformed_value(sealed: str) -> None:
    """Values that are not sealed data raise ValueError."""
    with pytest.raises(ValueError):
        unseal_data(sealed, PASSWORD)


def test_password_map_uses_first_entry() -> None:
    """A password map seals with its first password."""
    passwords = {"2": PASSWORD, "1": "olderlongcookiesecretfortestingonly"}

    sealed = seal_data({"a": 1}, passwords)

    assert resolve_password(passwords) == PASSWORD
    assert unseal_data(sealed, PASSWORD) == {"a": 1}


def test_empty_password_map() -> None:
    """An empty password map is rejected."""
    with pytest.raises(ValueError, match="empty"):
        seal_data({"a": 1}, {})
