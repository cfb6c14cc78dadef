"""Validation of the time-based registered claims."""

from datetime import UTC, datetime
from enum import StrEnum
from typing import Any

from jwtkit.jwt.claims import Claims, as_instant


class ValidateClaimsResult(StrEnum):
    """Outcome of ``validate_time_claims``; only SUCCESS means valid."""

    SUCCESS = "Success"
    INVALID_EXPIRATION = "Invalid Expiration claim"
    EXPIRED = "Expired token"
    INVALID_NOT_BEFORE = "Invalid Not Before claim"
    NOT_BEFORE = (
        "Token is not valid yet, Not Before claim is greater than the current time"
    )
    INVALID_ISSUED_AT = "Invalid Issued At claim"
    ISSUED_AT = "Issued At claim is greater than the current time"

    @property
    def description(self) -> str:
        """Human readable description of the result."""
        return self.value


def _epoch_seconds(value: Any) -> float | None:
    try:
        return as_instant(value).timestamp()
    except ValueError:
        return None


def validate_time_claims(
    claims: Claims,
    leeway: float = 0,
    now: datetime | None = None,
) -> ValidateClaimsResult:
    """Check exp, then nbf, then iat against the current time.

    The first failing check is reported. ``leeway`` (seconds) widens
    every window by the same amount. Comparisons use epoch seconds so
    dates at the edge of the datetime range cannot overflow.
    """
    current = (as_instant(now) if now is not None else datetime.now(UTC)).timestamp()

    exp = claims.expiration()
    if exp is not None:
        expires_at = _epoch_seconds(exp)
        if expires_at is None:
            return ValidateClaimsResult.INVALID_EXPIRATION
        if expires_at + leeway < current:
            return ValidateClaimsResult.EXPIRED

    nbf = claims.not_before()
    if nbf is not None:
        not_before = _epoch_seconds(nbf)
        if not_before is None:
            return ValidateClaimsResult.INVALID_NOT_BEFORE
        if not_before > current + leeway:
            return ValidateClaimsResult.NOT_BEFORE

    iat = claims.issued_at()
    if iat is not None:
        issued_at = _epoch_seconds(iat)
        if issued_at is None:
            return ValidateClaimsResult.INVALID_ISSUED_AT
        if issued_at > current + leeway:
            return ValidateClaimsResult.ISSUED_AT

    return ValidateClaimsResult.SUCCESS
