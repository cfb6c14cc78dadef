"""Ready-made claim sets for common token profiles."""

from pydantic import BaseModel

from jwtkit.jwt.claims import Audience, Claims, NumericDate


class ClaimsStandardJWT(Claims):
    """The registered claim names of RFC 7519 section 4.1."""

    iss: str | None = None
    sub: str | None = None
    aud: Audience | None = None
    exp: NumericDate | None = None
    nbf: NumericDate | None = None
    iat: NumericDate | None = None
    jti: str | None = None


class AddressClaim(BaseModel):
    """OpenID Connect "address" claim (Core 1.0 section 5.1.1)."""

    formatted: str | None = None
    street_address: str | None = None
    locality: str | None = None
    region: str | None = None
    postal_code: str | None = None
    country: str | None = None


class ClaimsOpenID(Claims):
    """OpenID Connect ID token claims (Core 1.0 sections 2 and 5.1)."""

    iss: str
    sub: str
    aud: Audience
    exp: NumericDate
    iat: NumericDate
    auth_time: NumericDate | None = None
    nonce: str | None = None
    acr: str | None = None
    amr: list[str] | None = None
    azp: str | None = None

    name: str | None = None
    given_name: str | None = None
    family_name: str | None = None
    middle_name: str | None = None
    nickname: str | None = None
    preferred_username: str | None = None
    profile: str | None = None
    picture: str | None = None
    website: str | None = None
    email: str | None = None
    email_verified: bool | None = None
    gender: str | None = None
    birthdate: str | None = None
    zoneinfo: str | None = None
    locale: str | None = None
    phone_number: str | None = None
    phone_number_verified: bool | None = None
    address: AddressClaim | None = None
    updated_at: NumericDate | None = None


class ClaimsMicroProfile(Claims):
    """Eclipse MicroProfile JWT RBAC claims."""

    iss: str
    sub: str
    exp: NumericDate
    iat: NumericDate
    jti: str
    upn: str
    preferred_username: str | None = None
    groups: list[str]
