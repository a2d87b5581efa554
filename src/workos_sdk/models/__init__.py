"""WorkOS SDK models package.

Copyright (c) 2025 WorkOS SDK. All rights reserved.
"""

# Import from domain-specific model files
from .audit_log_models import (
    AuditLogActor,
    AuditLogContext,
    AuditLogEvent,
    AuditLogExport,
    AuditLogSchema,
    AuditLogSchemaActor,
    AuditLogSchemaTarget,
    AuditLogTarget,
)
from .common import (
    DeletedResponse,
    ListMetadata,
    ListResponse,
    Order,
    PaginationOptions,
    WorkOSModel,
)
from .directory_sync_models import (
    Directory,
    DirectoryGroup,
    DirectoryUser,
    DirectoryUserEmail,
)
from .event_models import Event
from .fga_models import (
    CheckResult,
    CheckWarrant,
    QueryResult,
    Resource,
    ResourceRef,
    Subject,
    Warrant,
    WarrantToken,
    WriteWarrantOptions,
)
from .mfa_models import Challenge, Factor, Sms, Totp, VerifyResponse
from .organization_models import (
    DomainData,
    Organization,
    OrganizationDomain,
    Role,
)
from .passwordless_models import PasswordlessSession, PortalLinkIntent
from .sso_models import Connection, ConnectionDomain, Profile, ProfileAndToken
from .user_management_models import (
    AccessTokenClaims,
    AuthenticateWithSessionCookieResponse,
    AuthenticationFactorEnrollment,
    AuthenticationResponse,
    EmailVerification,
    Identity,
    Impersonator,
    Invitation,
    MagicAuth,
    OrganizationMembership,
    PasswordReset,
    RefreshSessionResponse,
    SessionCookieData,
    SessionOptions,
    User,
)

__all__ = [
    # Common
    "DeletedResponse",
    "ListMetadata",
    "ListResponse",
    "Order",
    "PaginationOptions",
    "WorkOSModel",
    # Organizations
    "DomainData",
    "Organization",
    "OrganizationDomain",
    "Role",
    # SSO
    "Connection",
    "ConnectionDomain",
    "Profile",
    "ProfileAndToken",
    # Directory Sync
    "Directory",
    "DirectoryGroup",
    "DirectoryUser",
    "DirectoryUserEmail",
    # MFA
    "Challenge",
    "Factor",
    "Sms",
    "Totp",
    "VerifyResponse",
    # FGA
    "CheckResult",
    "CheckWarrant",
    "QueryResult",
    "Resource",
    "ResourceRef",
    "Subject",
    "Warrant",
    "WarrantToken",
    "WriteWarrantOptions",
    # Audit logs
    "AuditLogActor",
    "AuditLogContext",
    "AuditLogEvent",
    "AuditLogExport",
    "AuditLogSchema",
    "AuditLogSchemaActor",
    "AuditLogSchemaTarget",
    "AuditLogTarget",
    # Events and webhooks
    "Event",
    # Passwordless and portal
    "PasswordlessSession",
    "PortalLinkIntent",
    # User management
    "AccessTokenClaims",
    "AuthenticateWithSessionCookieResponse",
    "AuthenticationFactorEnrollment",
    "AuthenticationResponse",
    "EmailVerification",
    "Identity",
    "Impersonator",
    "Invitation",
    "MagicAuth",
    "OrganizationMembership",
    "PasswordReset",
    "RefreshSessionResponse",
    "SessionCookieData",
    "SessionOptions",
    "User",
]
