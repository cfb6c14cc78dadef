"""The JWT envelope: one header plus one claims object."""

import logging
from datetime import datetime
from typing import Generic

from jwtkit.codec import base64url
from jwtkit.core.errors import FailedVerificationError, InvalidJWTStringError
from jwtkit.jwt.claims import ClaimsT
from jwtkit.jwt.header import Header
from jwtkit.jwt.signer import JWTSigner
from jwtkit.jwt.validation import ValidateClaimsResult, validate_time_claims
from jwtkit.jwt.verifier import JWTVerifier

logger = logging.getLogger(__name__)


def split_segments(jwt_string: str) -> tuple[bytes, bytes]:
    """Return the decoded header and claims segments of a compact JWT.

    Two segments (unsigned) and three segments are accepted. Raises
    ``InvalidJWTStringError`` for any other shape or bad base64url.
    """
    segments = jwt_string.split(".")
    if len(segments) not in (2, 3):
        raise InvalidJWTStringError()
    try:
        return base64url.decode(segments[0]), base64url.decode(segments[1])
    except ValueError as exc:
        raise InvalidJWTStringError() from exc


def peek_header(jwt_string: str) -> Header:
    """Decode the header of a token without verifying anything."""
    header_data, _ = split_segments(jwt_string)
    return Header.from_json(header_data)


class JWT(Generic[ClaimsT]):
    """A JSON Web Token.

    Construct one from claims (and optionally a header) and call
    ``sign``; or build a verified instance from a token string with
    ``JWT.from_string``.

    Example::

        jwt = JWT(MyClaims(name="Kitura"))
        token = jwt.sign(JWTSigner.rs256(private_key))
        decoded = JWT.from_string(token, JWTVerifier.rs256(public_key), MyClaims)
    """

    def __init__(self, claims: ClaimsT, header: Header | None = None) -> None:
        self.header = header if header is not None else Header()
        self.claims = claims

    def sign(self, signer: JWTSigner) -> str:
        """Sign and serialize; ``header.alg`` becomes the signer's name."""
        header = self.header.model_copy(update={"alg": signer.name})
        header_segment = header.encode()
        claims_segment = self.claims.encode()
        self.header.alg = signer.name
        return signer.sign(header_segment, claims_segment)

    @classmethod
    def from_string(
        cls,
        jwt_string: str,
        verifier: JWTVerifier,
        claims_type: type[ClaimsT],
    ) -> "JWT[ClaimsT]":
        """Verify a token and decode it into ``claims_type``.

        Raises ``InvalidJWTStringError`` for malformed input and
        ``FailedVerificationError`` when the signature does not verify.
        JSON errors from the header or claims propagate unchanged.
        """
        header_data, claims_data = split_segments(jwt_string)
        if not verifier.verify(jwt_string):
            raise FailedVerificationError()
        header = Header.from_json(header_data)
        claims = claims_type.from_json(claims_data)
        return cls(claims, header)

    @staticmethod
    def verify(jwt_string: str, verifier: JWTVerifier) -> bool:
        """Check a token's signature with the given verifier."""
        return verifier.verify(jwt_string)

    @staticmethod
    def decode_unverified(
        jwt_string: str, claims_type: type[ClaimsT]
    ) -> "UnverifiedJWT[ClaimsT]":
        """Decode a token without checking its signature."""
        header_data, claims_data = split_segments(jwt_string)
        logger.debug("Decoding JWT without signature verification")
        return UnverifiedJWT(
            Header.from_json(header_data), claims_type.from_json(claims_data)
        )

    def validate_claims(
        self, leeway: float = 0, now: datetime | None = None
    ) -> ValidateClaimsResult:
        """Validate exp, nbf and iat with ``leeway`` seconds of clock skew."""
        return validate_time_claims(self.claims, leeway=leeway, now=now)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, JWT):
            return NotImplemented
        return self.header == other.header and self.claims == other.claims

    def __repr__(self) -> str:
        return f"JWT(header={self.header!r}, claims={self.claims!r})"


class UnverifiedJWT(Generic[ClaimsT]):
    """Header and claims read from a token whose signature was not checked.

    Deliberately not a ``JWT``: it cannot be re-signed or passed where a
    verified token is expected.
    """

    def __init__(self, header: Header, claims: ClaimsT) -> None:
        self.header = header
        self.claims = claims

    def __repr__(self) -> str:
        return f"UnverifiedJWT(header={self.header!r}, claims={self.claims!r})"
