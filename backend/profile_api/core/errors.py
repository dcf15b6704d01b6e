"""Error Hierarchy — typed, categorized exceptions for all profile API failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Request errors (400-level) are recoverable; collaborator errors (500-level) are critical
    - to_response() produces the REST envelope consumed by the global handlers
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with ProfileApiError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    RESOURCE_NOT_FOUND = "resource_not_found"
    SERVICE_UNAVAILABLE = "service_unavailable"
    DATABASE = "database"
    INTERNAL = "internal"
    CONFLICT = "conflict"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    version_id: str | None = None
    profile_id: str | None = None
    resource_address: str | None = None
    debug_info: dict[str, Any] | None = None


class ProfileApiError(Exception):
    """Base exception for all profile API errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "version_id": self.context.version_id,
                    "profile_id": self.context.profile_id,
                    "resource_address": self.context.resource_address,
                },
            }
        }


# ─── Request Errors (400-level) ─────────────────────────────────

class BadInputError(ProfileApiError):
    """Request payload is malformed or inconsistent with the addressed resource."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "BAD_INPUT", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class ResourceNotFoundError(ProfileApiError):
    """Requested resource does not exist."""
    def __init__(
        self, resource_type: str, resource_id: str, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"{resource_type} '{resource_id}' not found",
            "RESOURCE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, context, 404,
        )


class ProfileFileNotFoundError(ProfileApiError):
    """Profile has no content for the requested configuration file."""
    def __init__(
        self,
        file_name: str,
        profile_id: str,
        version_id: str,
        context: ErrorContext | None = None,
    ):
        ctx = context or ErrorContext()
        ctx.version_id = version_id
        ctx.profile_id = profile_id
        super().__init__(
            f"No file: {file_name} for profile: {profile_id} version: {version_id}",
            "FILE_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )
        self.file_name = file_name


class ProfileInUseError(ProfileApiError):
    """Non-forced delete of a profile still assigned to containers."""
    def __init__(
        self, profile_id: str, container_ids: list[str], context: ErrorContext | None = None,
    ):
        super().__init__(
            f"Profile '{profile_id}' is assigned to containers: {', '.join(container_ids)}",
            "PROFILE_IN_USE", ErrorCategory.CONFLICT,
            ErrorSeverity.ERROR, context, 409,
        )
        self.container_ids = container_ids


# ─── Collaborator Errors (500-level) ────────────────────────────

class ServiceUnavailableError(ProfileApiError):
    """A required collaborator reference is absent."""
    def __init__(self, service_name: str, context: ErrorContext | None = None):
        super().__init__(
            f"Required service '{service_name}' is not available",
            "SERVICE_UNAVAILABLE", ErrorCategory.SERVICE_UNAVAILABLE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.service_name = service_name


class DatabaseError(ProfileApiError):
    """Database operation failed."""
    def __init__(self, message: str, operation: str, context: ErrorContext | None = None):
        super().__init__(
            f"Database {operation} failed: {message}",
            "DATABASE_ERROR", ErrorCategory.DATABASE,
            ErrorSeverity.CRITICAL, context, 503,
        )
        self.operation = operation
