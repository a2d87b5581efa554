"""Webhook signature verification for WorkOS.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from __future__ import annotations

import hashlib
import hmac
import json
import time
from typing import Any

from ._serializers import deserialize
from .exceptions import SignatureVerificationError
from .models.event_models import Event

DEFAULT_TOLERANCE = 180


def _payload_to_string(payload: str | bytes | dict[str, Any]) -> str:
    if isinstance(payload, bytes):
        try:
            return payload.decode("utf-8")
        except UnicodeDecodeError as e:
            raise SignatureVerificationError("Payload is not valid UTF-8") from e
    if isinstance(payload, str):
        return payload
    return json.dumps(payload, separators=(",", ":"), ensure_ascii=False)


class WebhooksService:
    """Verifies and parses webhook deliveries. Makes no HTTP calls."""

    def get_timestamp_and_signature_hash(self, sig_header: str) -> tuple[str, str]:
        """Split a ``t=<ms>, v1=<hex>`` header into its two parts.

        Raises:
            SignatureVerificationError: If either part is missing

        """
        timestamp = signature_hash = ""
        for part in sig_header.split(","):
            key, _, value = part.strip().partition("=")
            if key == "t":
                timestamp = value
            elif key == "v1":
                signature_hash = value

        if not timestamp or not signature_hash:
            raise SignatureVerificationError(
                "Unable to extract timestamp and signature hash from header"
            )
        return timestamp, signature_hash

    def compute_signature(
        self,
        timestamp: str,
        payload: str | bytes | dict[str, Any],
        secret: str,
    ) -> str:
        """Compute the expected hex HMAC-SHA256 of ``"{timestamp}.{payload}"``."""
        unhashed = f"{timestamp}.{_payload_to_string(payload)}"
        return hmac.new(
            secret.encode("utf-8"), unhashed.encode("utf-8"), hashlib.sha256
        ).hexdigest()

    def verify_header(
        self,
        payload: str | bytes | dict[str, Any],
        sig_header: str,
        secret: str,
        tolerance: int = DEFAULT_TOLERANCE,
    ) -> bool:
        """Check a signature header against the payload.

        Returns:
            True when the signature is valid and fresh.

        Raises:
            SignatureVerificationError: If the header is malformed, stale or
                does not match

        """
        timestamp, signature_hash = self.get_timestamp_and_signature_hash(sig_header)

        try:
            issued_ms = int(timestamp)
        except ValueError as e:
            raise SignatureVerificationError("Timestamp is not a number") from e

        if time.time() * 1000 - issued_ms > tolerance * 1000:
            raise SignatureVerificationError(
                "Timestamp outside the tolerance zone"
            )

        expected = self.compute_signature(timestamp, payload, secret)
        if not hmac.compare_digest(
            expected.encode("utf-8"), signature_hash.encode("utf-8", "replace")
        ):
            raise SignatureVerificationError(
                "Signature hash does not match the expected signature hash for payload"
            )
        return True

    def construct_event(
        self,
        payload: str | bytes | dict[str, Any],
        sig_header: str,
        secret: str,
        tolerance: int = DEFAULT_TOLERANCE,
    ) -> Event:
        """Verify a webhook delivery and parse it into an Event.

        Args:
            payload: Raw request body, or the already decoded JSON object
            sig_header: Value of the ``WorkOS-Signature`` header
            secret: Webhook endpoint secret
            tolerance: Maximum accepted age of the signature, in seconds

        Returns:
            The verified event.

        """
        self.verify_header(payload, sig_header, secret, tolerance)
        data = json.loads(payload) if isinstance(payload, (str, bytes)) else payload
        return deserialize(Event, data)
