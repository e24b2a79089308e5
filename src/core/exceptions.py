"""Custom exceptions and error codes."""

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    """Standardized error codes for the API."""

    # Authentication errors (401)
    UNAUTHORIZED = "UNAUTHORIZED"
    INVALID_TOKEN = "INVALID_TOKEN"
    TOKEN_EXPIRED = "TOKEN_EXPIRED"
    INVALID_PASSKEY = "INVALID_PASSKEY"

    # Authorization errors (403)
    FORBIDDEN = "FORBIDDEN"

    # Not found errors (404)
    HEADER_NOT_FOUND = "HEADER_NOT_FOUND"
    INTRODUCTION_NOT_FOUND = "INTRODUCTION_NOT_FOUND"
    PROJECT_DETAILS_NOT_FOUND = "PROJECT_DETAILS_NOT_FOUND"
    SKILL_NOT_FOUND = "SKILL_NOT_FOUND"
    PROJECT_NOT_FOUND = "PROJECT_NOT_FOUND"
    SERVICE_NOT_FOUND = "SERVICE_NOT_FOUND"
    WORK_EXPERIENCE_NOT_FOUND = "WORK_EXPERIENCE_NOT_FOUND"
    TECHNOLOGY_NOT_FOUND = "TECHNOLOGY_NOT_FOUND"
    EMPTY_COLLECTION = "EMPTY_COLLECTION"

    # Storage errors
    BLOB_NOT_FOUND = "BLOB_NOT_FOUND"
    INVALID_UPLOAD_TOKEN = "INVALID_UPLOAD_TOKEN"
    UPLOAD_ALREADY_COMPLETED = "UPLOAD_ALREADY_COMPLETED"
    UPLOAD_REJECTED = "UPLOAD_REJECTED"

    # Validation errors (400)
    VALIDATION_ERROR = "VALIDATION_ERROR"
    MISSING_ICON_SOURCE = "MISSING_ICON_SOURCE"
    INVALID_DATE_RANGE = "INVALID_DATE_RANGE"
    INVALID_DELIMITED_VALUE = "INVALID_DELIMITED_VALUE"

    # Rate limiting (429)
    RATE_LIMIT_EXCEEDED = "RATE_LIMIT_EXCEEDED"

    # Server errors (500)
    INTERNAL_ERROR = "INTERNAL_ERROR"
    DATABASE_ERROR = "DATABASE_ERROR"


class AppException(Exception):
    """Base application exception."""

    def __init__(
        self,
        error_code: ErrorCode,
        message: str,
        status_code: int = 400,
        details: Any | None = None,
    ) -> None:
        self.error_code = error_code
        self.message = message
        self.status_code = status_code
        self.details = details
        super().__init__(self.message)


class AuthenticationError(AppException):
    """Authentication failed."""

    def __init__(
        self,
        message: str = "Authentication required",
        error_code: ErrorCode = ErrorCode.UNAUTHORIZED,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=401,
        )


class AuthorizationError(AppException):
    """Authorization failed."""

    def __init__(self, message: str = "Access denied") -> None:
        super().__init__(
            error_code=ErrorCode.FORBIDDEN,
            message=message,
            status_code=403,
        )


class InvalidPasskeyError(AuthenticationError):
    """Admin passkey did not match."""

    def __init__(self) -> None:
        super().__init__(
            message="Invalid admin passkey",
            error_code=ErrorCode.INVALID_PASSKEY,
        )


class HeaderNotFoundError(AppException):
    """Header not found."""

    def __init__(self, header_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.HEADER_NOT_FOUND,
            message=f"Header not found: {header_id}",
            status_code=404,
            details={"header_id": header_id},
        )


class IntroductionNotFoundError(AppException):
    """Introduction not found."""

    def __init__(self, introduction_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.INTRODUCTION_NOT_FOUND,
            message=f"Introduction not found: {introduction_id}",
            status_code=404,
            details={"introduction_id": introduction_id},
        )


class ProjectDetailsNotFoundError(AppException):
    """Section copy record not found."""

    def __init__(self, details_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROJECT_DETAILS_NOT_FOUND,
            message=f"Project details not found: {details_id}",
            status_code=404,
            details={"project_details_id": details_id},
        )


class SkillNotFoundError(AppException):
    """Skill not found."""

    def __init__(self, skill_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.SKILL_NOT_FOUND,
            message=f"Skill not found: {skill_id}",
            status_code=404,
            details={"skill_id": skill_id},
        )


class ProjectNotFoundError(AppException):
    """Project not found."""

    def __init__(self, project_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.PROJECT_NOT_FOUND,
            message=f"Project not found: {project_id}",
            status_code=404,
            details={"project_id": project_id},
        )


class ServiceNotFoundError(AppException):
    """Service offering not found."""

    def __init__(self, service_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.SERVICE_NOT_FOUND,
            message=f"Service not found: {service_id}",
            status_code=404,
            details={"service_id": service_id},
        )


class WorkExperienceNotFoundError(AppException):
    """Work experience not found."""

    def __init__(self, work_experience_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.WORK_EXPERIENCE_NOT_FOUND,
            message=f"Work experience not found: {work_experience_id}",
            status_code=404,
            details={"work_experience_id": work_experience_id},
        )


class TechnologyNotFoundError(AppException):
    """Technology not found."""

    def __init__(self, technology_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.TECHNOLOGY_NOT_FOUND,
            message=f"Technology not found: {technology_id}",
            status_code=404,
            details={"technology_id": technology_id},
        )


class EmptyCollectionError(AppException):
    """A 'latest record' operation ran against an empty collection."""

    def __init__(self, message: str) -> None:
        super().__init__(
            error_code=ErrorCode.EMPTY_COLLECTION,
            message=message,
            status_code=404,
        )


class BlobNotFoundError(AppException):
    """Storage reference does not point at a stored blob."""

    def __init__(self, storage_id: str, status_code: int = 400) -> None:
        super().__init__(
            error_code=ErrorCode.BLOB_NOT_FOUND,
            message=f"Stored file not found: {storage_id}",
            status_code=status_code,
            details={"storage_id": storage_id},
        )


class InvalidUploadTokenError(AppException):
    """Upload URL token is expired, tampered with or for another purpose."""

    def __init__(self) -> None:
        super().__init__(
            error_code=ErrorCode.INVALID_UPLOAD_TOKEN,
            message="Upload URL is invalid or has expired",
            status_code=400,
        )


class UploadAlreadyCompletedError(AppException):
    """Upload URL was already used."""

    def __init__(self, storage_id: str) -> None:
        super().__init__(
            error_code=ErrorCode.UPLOAD_ALREADY_COMPLETED,
            message="This upload URL has already been used",
            status_code=409,
            details={"storage_id": storage_id},
        )


class UploadRejectedError(AppException):
    """Upload body is empty, too large or lacks a content type."""

    def __init__(self, message: str, status_code: int = 400) -> None:
        super().__init__(
            error_code=ErrorCode.UPLOAD_REJECTED,
            message=message,
            status_code=status_code,
        )


class DomainValidationError(AppException):
    """A cross-field rule failed after merging a create or update."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.VALIDATION_ERROR,
        details: Any | None = None,
    ) -> None:
        super().__init__(
            error_code=error_code,
            message=message,
            status_code=400,
            details=details,
        )


class MissingIconSourceError(DomainValidationError):
    """Skill has neither an icon URL nor an uploaded icon file."""

    def __init__(self) -> None:
        super().__init__(
            message="Either icon_url or icon_file must be provided",
            error_code=ErrorCode.MISSING_ICON_SOURCE,
        )


class InvalidDateRangeError(DomainValidationError):
    """Work experience end date is missing or precedes the start date."""

    def __init__(self, message: str) -> None:
        super().__init__(
            message=message,
            error_code=ErrorCode.INVALID_DATE_RANGE,
            details={"field": "end_date"},
        )


class InvalidDelimitedValueError(DomainValidationError):
    """A list item contains the delimiter it is about to be joined with."""

    def __init__(self, item: str, delimiter: str) -> None:
        super().__init__(
            message=f"Item {item!r} must not contain the delimiter {delimiter!r}",
            error_code=ErrorCode.INVALID_DELIMITED_VALUE,
            details={"item": item, "delimiter": delimiter},
        )
