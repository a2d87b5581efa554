"""Tests for webhook signature verification.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from __future__ import annotations

import hashlib
import hmac
import json
import time

import pytest
from workos_sdk import WorkOSClient
from workos_sdk.exceptions import SignatureVerificationError

SECRET = "whsec_test"
PAYLOAD = (
    '{"id":"event_01H","event":"dsync.user.created",'
    '"data":{"id":"directory_user_01H","first_name":"Zoë"},'
    '"created_at":"2024-01-01T00:00:00.000Z"}'
)


def _sign(payload: str, timestamp_ms: int, secret: str = SECRET) -> str:
    digest = hmac.new(
        secret.encode(), f"{timestamp_ms}.{payload}".encode(), hashlib.sha256
    ).hexdigest()
    return f"t={timestamp_ms}, v1={digest}"


@pytest.fixture
def webhooks(client: WorkOSClient):
    """Return the webhooks service."""
    return client.webhooks


def test_construct_event(webhooks) -> None:
    """A fresh, correctly signed payload becomes an Event."""
    header = _sign(PAYLOAD, int(time.time() * 1000))

    event = webhooks.construct_event(PAYLOAD, header, SECRET)

    assert event.event == "dsync.user.created"
    assert event.data["first_name"] == "Zoë"


def test_dict_payload_is_compactly_encoded(webhooks) -> None:
    """A decoded payload is re-encoded without spaces before hashing."""
    header = _sign(PAYLOAD, int(time.time() * 1000))

    assert webhooks.verify_header(json.loads(PAYLOAD), header, SECRET) is True


def test_bytes_payload(webhooks) -> None:
    """Raw request bodies can be verified as bytes."""
    header = _sign(PAYLOAD, int(time.time() * 1000))

    event = webhooks.construct_event(PAYLOAD.encode("utf-8"), header, SECRET)

    assert event.id == "event_01H"


def test_stale_timestamp(webhooks) -> None:
    """Signatures older than the tolerance are rejected."""
    header = _sign(PAYLOAD, int((time.time() - 181) * 1000))

    with pytest.raises(SignatureVerificationError, match="tolerance"):
        webhooks.verify_header(PAYLOAD, header, SECRET)


def test_custom_tolerance(webhooks) -> None:
    """The tolerance can be widened per call."""
    header = _sign(PAYLOAD, int((time.time() - 600) * 1000))

    assert webhooks.verify_header(PAYLOAD, header, SECRET, tolerance=3600) is True


def test_wrong_secret(webhooks) -> None:
    """A signature made with another secret does not match."""
    header = _sign(PAYLOAD, int(time.time() * 1000), secret="whsec_other")

    with pytest.raises(SignatureVerificationError, match="does not match"):
        webhooks.construct_event(PAYLOAD, header, SECRET)


def test_tampered_payload(webhooks) -> None:
    """Any change to the body invalidates the signature."""
    header = _sign(PAYLOAD, int(time.time() * 1000))

    with pytest.raises(SignatureVerificationError):
        webhooks.verify_header(PAYLOAD.replace("created", "deleted"), header, SECRET)


@pytest.mark.parametrize("header", ["", "t=123", "v1=abc", "garbage"])
def test_malformed_header(webhooks, header: str) -> None:
    """Headers without both parts are rejected."""
    with pytest.raises(SignatureVerificationError, match="Unable to extract"):
        webhooks.verify_header(PAYLOAD, header, SECRET)


def test_non_numeric_timestamp(webhooks) -> None:
    """The timestamp must be an integer number of milliseconds."""
    with pytest.raises(SignatureVerificationError, match="not a number"):
        webhooks.verify_header(PAYLOAD, "t=soon, v1=abc", SECRET)


def test_header_parts_in_any_order(webhooks) -> None:
    """Header parts are located by name."""
    timestamp, digest = webhooks.get_timestamp_and_signature_hash("v1=abc,t=42")

    assert (timestamp, digest) == ("42", "abc")


@pytest.mark.parametrize("digest", ["é", "zz", "v1"])
def test_non_hex_signature_does_not_match(webhooks, digest: str) -> None:
    """Signatures that are not ASCII hex fail verification instead of crashing."""
    header = f"t={int(time.time() * 1000)}, v1={digest}"

    with pytest.raises(SignatureVerificationError, match="does not match"):
        webhooks.verify_header(PAYLOAD, header, SECRET)


def test_payload_that_is_not_utf8(webhooks) -> None:
    """Undecodable request bodies fail verification."""
    header = _sign(PAYLOAD, int(time.time() * 1000))

    with pytest.raises(SignatureVerificationError, match="UTF-8"):
        webhooks.verify_header(b"\xff\xfe" + PAYLOAD.encode("utf-8"), header, SECRET)
