"""JOSE header of a JSON Web Token."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from jwtkit.codec import base64url


class Header(BaseModel):
    """JOSE header fields (RFC 7515 section 4.1, RFC 7519 section 5).

    ``alg`` cannot be passed to the constructor: it is written by
    ``JWT.sign`` with the name of the signer used, and filled in when a
    token is decoded. Unknown header parameters are ignored on decode.
    """

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    typ: str | None = "JWT"
    alg: str | None = None
    jku: str | None = None
    jwk: dict[str, Any] | None = None
    kid: str | None = None
    x5u: str | None = None
    x5c: list[str] | None = None
    x5t: str | None = None
    x5t_s256: str | None = Field(default=None, alias="x5t#S256")
    cty: str | None = None
    crit: list[str] | None = None

    def __init__(self, **data: Any) -> None:
        if "alg" in data:
            raise TypeError("Header.alg is set by the signer, not by the caller")
        super().__init__(**data)

    def to_json(self) -> bytes:
        """Serialize with wire field names, omitting absent fields."""
        return self.model_dump_json(by_alias=True, exclude_none=True).encode()

    def encode(self) -> str:
        """Serialize to JSON and base64url-encode."""
        return base64url.encode(self.to_json())

    @classmethod
    def from_json(cls, data: bytes | str) -> "Header":
        """Build a header from its JSON form; an absent "typ" stays absent."""
        header = cls.model_validate_json(data)
        if "typ" not in header.model_fields_set:
            header.typ = None
        return header
