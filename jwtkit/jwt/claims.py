"""The claims contract shared by every JWT payload type."""

from datetime import UTC, datetime
from typing import Annotated, Any, Self, TypeVar

from pydantic import (
    BaseModel,
    BeforeValidator,
    ConfigDict,
    PlainSerializer,
    SerializationInfo,
    SerializerFunctionWrapHandler,
    model_serializer,
)

from jwtkit.codec import base64url


def as_instant(value: Any) -> datetime:
    """Interpret a claim value as an aware UTC instant.

    Accepts datetimes (naive ones are taken as UTC) and numeric seconds
    since the Unix epoch. Raises ``ValueError`` for anything else.
    """
    if isinstance(value, datetime):
        if value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        try:
            return datetime.fromtimestamp(value, tz=UTC)
        except (OverflowError, OSError, ValueError) as exc:
            raise ValueError(f"Timestamp out of range: {value!r}") from exc
    raise ValueError(f"Not a NumericDate: {value!r}")


def _parse_numeric_date(value: Any) -> Any:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return as_instant(value)
    return value


def _to_numeric_date(value: datetime) -> int | float:
    seconds = as_instant(value).timestamp()
    if seconds.is_integer():
        return int(seconds)
    return seconds


NumericDate = Annotated[
    datetime,
    BeforeValidator(_parse_numeric_date),
    PlainSerializer(_to_numeric_date, when_used="json"),
]
"""A datetime carried on the wire as seconds since the epoch."""


def _listify(value: Any) -> Any:
    if isinstance(value, str):
        return [value]
    return value


Audience = Annotated[list[str], BeforeValidator(_listify)]
"""The "aud" claim; a single string on the wire is read as a one-item list."""


class Claims(BaseModel):
    """Base for JWT payloads.

    Subclasses declare whichever fields they need. The standard claims
    are read through the accessor methods below, which return ``None``
    when a subclass does not declare (or does not set) the field, so
    validation skips it.

    Example::

        class AdminClaims(Claims):
            sub: str
            is_admin: bool
            exp: NumericDate | None = None
    """

    model_config = ConfigDict(populate_by_name=True)

    def expiration(self) -> Any:
        """The "exp" claim, or None."""
        return getattr(self, "exp", None)

    def not_before(self) -> Any:
        """The "nbf" claim, or None."""
        return getattr(self, "nbf", None)

    def issued_at(self) -> Any:
        """The "iat" claim, or None."""
        return getattr(self, "iat", None)

    def issuer(self) -> str | None:
        """The "iss" claim, or None."""
        return getattr(self, "iss", None)

    def audience(self) -> list[str] | None:
        """The "aud" claim as a list, or None."""
        return _listify(getattr(self, "aud", None))

    def to_json(self) -> bytes:
        """Serialize every set field as JSON, dates as NumericDate."""
        return self.model_dump_json(by_alias=True, exclude_none=True).encode()

    def encode(self) -> str:
        """Serialize to JSON and base64url-encode."""
        return base64url.encode(self.to_json())

    @classmethod
    def from_json(cls, data: bytes | str) -> Self:
        """Build a claims object from its JSON form."""
        return cls.model_validate_json(data)


ClaimsT = TypeVar("ClaimsT", bound=Claims)


class ClaimsMap(Claims):
    """Schemaless claims: every JSON member is kept as given."""

    model_config = ConfigDict(extra="allow")

    def __getitem__(self, name: str) -> Any:
        return self.to_dict()[name]

    def __contains__(self, name: object) -> bool:
        return name in self.to_dict()

    def get(self, name: str, default: Any = None) -> Any:
        """Return a claim value, or default when absent."""
        return self.to_dict().get(name, default)

    def to_dict(self) -> dict[str, Any]:
        """All claims as a plain dict."""
        return dict(self.model_extra or {})

    @model_serializer(mode="wrap")
    def serialize_numeric_dates(
        self, handler: SerializerFunctionWrapHandler, info: SerializationInfo
    ) -> dict[str, Any]:
        data = handler(self)
        if info.mode_is_json():
            for name, value in (self.model_extra or {}).items():
                if isinstance(value, datetime) and name in data:
                    data[name] = _to_numeric_date(value)
        return data
