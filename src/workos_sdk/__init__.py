"""
WorkOS Python SDK

Async Python client library for the WorkOS API.
Provides type-safe access to organizations, SSO, directory sync,
MFA, fine-grained authorization, audit logs, webhooks and AuthKit
user management, plus sealed-cookie session helpers.
"""

from ._base import VERSION
from ._pagination import AutoPaginatable
from ._sealing import seal_data, unseal_data
from ._session import Session
from .client import WorkOSClient
from .exceptions import *
from .models import *

__version__ = VERSION
__author__ = "WorkOS SDK Team"

__all__ = [
    "AutoPaginatable",
    "Session",
    "WorkOSClient",
    "seal_data",
    "unseal_data",
    # Exceptions
    "BadRequestError",
    "ConflictError",
    "GenericServerError",
    "NetworkError",
    "NoApiKeyProvidedError",
    "NotFoundError",
    "OAuthError",
    "RateLimitExceededError",
    "SignatureVerificationError",
    "TimeoutError",
    "UnauthorizedError",
    "UnprocessableEntityError",
    "WorkOSError",
    # Models
    "AuditLogEvent",
    "AuditLogExport",
    "AuditLogSchema",
    "AuthenticateWithSessionCookieResponse",
    "AuthenticationResponse",
    "CheckResult",
    "CheckWarrant",
    "Connection",
    "Directory",
    "DirectoryGroup",
    "DirectoryUser",
    "Event",
    "Factor",
    "Invitation",
    "ListResponse",
    "Organization",
    "OrganizationDomain",
    "OrganizationMembership",
    "PasswordlessSession",
    "Profile",
    "ProfileAndToken",
    "RefreshSessionResponse",
    "Resource",
    "SessionOptions",
    "Subject",
    "User",
    "Warrant",
    "WriteWarrantOptions",
]
