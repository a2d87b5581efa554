"""Multi-factor authentication service for WorkOS.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from __future__ import annotations

import logging

from ._base import BaseClient, RequestConfig
from ._serializers import deserialize
from .models.mfa_models import (
    Challenge,
    ChallengeFactorOptions,
    EnrollFactorOptions,
    Factor,
    FactorType,
    VerifyChallengeOptions,
    VerifyResponse,
    serialize_enroll_factor_options,
)

logger = logging.getLogger(__name__)


class MFAService:
    """Service for multi-factor authentication operations."""

    def __init__(self, client: BaseClient) -> None:
        """Initialize MFA service.

        Args:
            client: The base HTTP client

        """
        self._client = client

    async def enroll_factor(
        self,
        type: FactorType,  # noqa: A002
        *,
        phone_number: str | None = None,
        issuer: str | None = None,
        user: str | None = None,
    ) -> Factor:
        """Enroll a new authentication factor.

        Args:
            type: ``sms``, ``totp`` or ``generic_otp``
            phone_number: Phone number, required for SMS factors
            issuer: TOTP issuer shown in authenticator apps
            user: TOTP account name shown in authenticator apps

        Returns:
            The factor, with TOTP secrets when applicable.

        """
        options = EnrollFactorOptions(
            type=type, phone_number=phone_number, issuer=issuer, user=user
        )
        config = RequestConfig(json_data=serialize_enroll_factor_options(options))
        data = await self._client.request(
            "POST", "/auth/factors/enroll", config=config
        )
        return deserialize(Factor, data)

    async def challenge_factor(
        self,
        authentication_factor_id: str,
        *,
        sms_template: str | None = None,
    ) -> Challenge:
        """Create a challenge for an enrolled factor.

        Args:
            authentication_factor_id: Factor ID
            sms_template: Message template with a ``{{code}}`` placeholder

        Returns:
            The created challenge.

        """
        options = ChallengeFactorOptions(
            authentication_factor_id=authentication_factor_id,
            sms_template=sms_template,
        )
        payload = {}
        if options.sms_template:
            payload["sms_template"] = options.sms_template
        config = RequestConfig(json_data=payload)
        data = await self._client.request(
            "POST",
            f"/auth/factors/{options.authentication_factor_id}/challenge",
            config=config,
        )
        return deserialize(Challenge, data)

    async def verify_challenge(
        self,
        authentication_challenge_id: str,
        code: str,
    ) -> VerifyResponse:
        """Verify the code for a challenge.

        Args:
            authentication_challenge_id: Challenge ID
            code: One-time code entered by the user

        Returns:
            The challenge and whether the code was valid.

        """
        options = VerifyChallengeOptions(
            authentication_challenge_id=authentication_challenge_id, code=code
        )
        config = RequestConfig(json_data={"code": options.code})
        data = await self._client.request(
            "POST",
            f"/auth/challenges/{options.authentication_challenge_id}/verify",
            config=config,
        )
        return deserialize(VerifyResponse, data)

    async def verify_factor(
        self,
        authentication_challenge_id: str,
        code: str,
    ) -> VerifyResponse:
        """Verify the code for a challenge.

        Deprecated alias of :meth:`verify_challenge`.
        """
        logger.warning("WorkOS: `verify_factor` is deprecated. Use `verify_challenge`.")
        return await self.verify_challenge(authentication_challenge_id, code)

    async def get_factor(self, factor_id: str) -> Factor:
        """Get an authentication factor by ID."""
        data = await self._client.request("GET", f"/auth/factors/{factor_id}")
        return deserialize(Factor, data)

    async def delete_factor(self, factor_id: str) -> None:
        """Delete an authentication factor."""
        await self._client.request("DELETE", f"/auth/factors/{factor_id}")
