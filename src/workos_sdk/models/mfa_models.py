"""MFA (Multi-Factor Authentication) models for WorkOS.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

from typing import Any, Literal

from pydantic import model_validator

from .common import WorkOSModel

FactorType = Literal["generic_otp", "sms", "totp"]


class Sms(WorkOSModel):
    """SMS details of a factor."""

    phone_number: str


class Totp(WorkOSModel):
    """TOTP details of a factor. Secrets are only present right after enrollment."""

    issuer: str
    user: str
    qr_code: str | None = None
    secret: str | None = None
    uri: str | None = None


class Factor(WorkOSModel):
    """Authentication factor model."""

    object: Literal["authentication_factor"] = "authentication_factor"
    id: str
    type: FactorType
    sms: Sms | None = None
    totp: Totp | None = None
    user_id: str | None = None
    created_at: str
    updated_at: str


class Challenge(WorkOSModel):
    """Authentication challenge model."""

    object: Literal["authentication_challenge"] = "authentication_challenge"
    id: str
    authentication_factor_id: str
    expires_at: str | None = None
    code: str | None = None
    created_at: str
    updated_at: str


class VerifyResponse(WorkOSModel):
    """Challenge verification response model."""

    challenge: Challenge
    valid: bool


class EnrollFactorOptions(WorkOSModel):
    """Enroll factor request model."""

    type: FactorType
    phone_number: str | None = None
    issuer: str | None = None
    user: str | None = None

    @model_validator(mode="after")
    def _check_type_fields(self) -> "EnrollFactorOptions":
        if self.type == "sms" and not self.phone_number:
            raise ValueError("'phone_number' is required for sms factors")
        if self.type == "totp" and not (self.issuer and self.user):
            raise ValueError("'issuer' and 'user' are required for totp factors")
        return self


class ChallengeFactorOptions(WorkOSModel):
    """Challenge factor request model."""

    authentication_factor_id: str
    sms_template: str | None = None


class VerifyChallengeOptions(WorkOSModel):
    """Verify challenge request model."""

    authentication_challenge_id: str
    code: str


def serialize_enroll_factor_options(options: EnrollFactorOptions) -> dict[str, Any]:
    """Render enrollment options, renaming TOTP fields for the wire."""
    payload: dict[str, Any] = {"type": options.type}
    if options.type == "sms":
        payload["phone_number"] = options.phone_number
    elif options.type == "totp":
        payload["totp_issuer"] = options.issuer
        payload["totp_user"] = options.user
    return payload


def deserialize_enroll_factor_options(data: dict[str, Any]) -> EnrollFactorOptions:
    """Read enrollment options back from their wire form."""
    return EnrollFactorOptions(
        type=data["type"],
        phone_number=data.get("phone_number"),
        issuer=data.get("totp_issuer"),
        user=data.get("totp_user"),
    )
