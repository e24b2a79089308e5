"""Common Pydantic schemas shared across the API."""

from datetime import datetime, timezone
from typing import Annotated, Any, ClassVar

from pydantic import (
    AfterValidator,
    BaseModel,
    BeforeValidator,
    HttpUrl,
    TypeAdapter,
    ValidationError,
    model_validator,
)

from core.exceptions import InvalidDelimitedValueError
from domain.entities.delimited import BULLET_DELIMITER, CSV_DELIMITER, join_items


class ErrorResponse(BaseModel):
    """Standardized error response."""

    error_code: str
    message: str
    details: Any | None = None


class MessageResponse(BaseModel):
    """Simple message response."""

    message: str


_http_url: TypeAdapter[HttpUrl] = TypeAdapter(HttpUrl)


def _check_url(value: str) -> str:
    try:
        _http_url.validate_python(value)
    except ValidationError as e:
        raise ValueError("must be a valid http(s) URL") from e
    return value


def _to_naive_utc(value: datetime) -> datetime:
    if value.tzinfo is not None:
        return value.astimezone(timezone.utc).replace(tzinfo=None)
    return value


def _joiner(delimiter: str) -> Any:
    def join(value: Any) -> Any:
        if isinstance(value, list):
            try:
                return join_items([str(item) for item in value], delimiter)
            except InvalidDelimitedValueError as e:
                raise ValueError(e.message) from e
        return value

    return join


# URL kept exactly as sent; HttpUrl only validates it
UrlStr = Annotated[str, AfterValidator(_check_url)]

# Stored without tzinfo, in UTC
UtcDatetime = Annotated[datetime, AfterValidator(_to_naive_utc)]

# Accept either a list or the already-joined string
CsvText = Annotated[str, BeforeValidator(_joiner(CSV_DELIMITER))]
BulletText = Annotated[str, BeforeValidator(_joiner(BULLET_DELIMITER))]


class PatchModel(BaseModel):
    """Base for partial-update bodies.

    Only fields present in the request are applied. Fields named in
    ``non_nullable`` may be omitted but not sent as null.
    """

    non_nullable: ClassVar[frozenset[str]] = frozenset()

    @model_validator(mode="after")
    def reject_null_required(self) -> "PatchModel":
        nulled = sorted(
            name
            for name in self.non_nullable & self.model_fields_set
            if getattr(self, name) is None
        )
        if nulled:
            raise ValueError(f"Fields cannot be null: {', '.join(nulled)}")
        return self

    def changes(self) -> dict[str, Any]:
        """Return only the fields the client sent."""
        return self.model_dump(exclude_unset=True)
