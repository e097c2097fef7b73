"""Service error hierarchy.

Every error renders as the same JSON envelope:

    {"code": <http status>, "message": <summary>, "error": <detail>}
"""

from __future__ import annotations

from typing import Any

from sqlalchemy.exc import NoResultFound


class ProfileServiceError(Exception):
    """Base class for all errors surfaced to API callers."""

    code: str = "internal_error"
    status_code: int = 500
    message: str = "Internal server error"

    def __init__(self, error: str | None = None, *, message: str | None = None) -> None:
        self.message = message or self.message
        self.error = error if error is not None else self.message
        super().__init__(self.error)

    def to_response(self) -> dict[str, Any]:
        return {
            "code": self.status_code,
            "message": self.message,
            "error": self.error,
        }


class ValidationError(ProfileServiceError):
    code = "validation_error"
    status_code = 400
    message = "Invalid request"


class ParseError(ValidationError):
    code = "parse_error"
    message = "Error parsing request"


class NotSupportedDistributionError(ValidationError):
    code = "not_supported_distribution"
    message = "not supported distribution"


class UnsupportedCloudTypeError(ValidationError):
    code = "unsupported_cloud_type"
    message = "Error during convert profile"

    def __init__(self, cloud: str) -> None:
        super().__init__(f"Not supported cloud type: {cloud}")


class ReservedProfileError(ValidationError):
    code = "reserved_profile"


class DefaultsLoadError(ValidationError):
    code = "defaults_unavailable"
    message = "Error during reading defaults"


class ProfileAlreadyExistsError(ValidationError):
    # Reported as 400 rather than 409; existing clients key on it
    code = "conflict"
    message = "Cluster profile with the given name is already exists, please update not create profile"


class ProfileLookupError(ValidationError):
    code = "lookup_error"
    message = "Error during getting profile"


class NotFoundError(ProfileServiceError):
    code = "not_found"
    status_code = 404
    message = "Resource not found"


class ProfileNotFoundError(NotFoundError):
    message = "Profile not found"


class PersistenceError(ProfileServiceError):
    code = "persistence_error"
    status_code = 500
    message = "Error during persist cluster profile"


def lookup_error(exc: Exception) -> ProfileServiceError:
    """Translate a failed profile lookup into the error reported to callers."""
    if isinstance(exc, NoResultFound):
        return ProfileNotFoundError(str(exc))
    return ProfileLookupError(str(exc))
