"""FastAPI dependency that authenticates requests with a bearer JWT."""

import logging
from typing import Generic

from fastapi import HTTPException, Request, status
from fastapi.security import HTTPBearer
from pydantic import ValidationError

from jwtkit.core.errors import JWTError
from jwtkit.core.settings import JWTSettings
from jwtkit.jwt.claims import ClaimsT
from jwtkit.jwt.coder import JWTDecoder
from jwtkit.jwt.token import JWT
from jwtkit.jwt.validation import ValidateClaimsResult

logger = logging.getLogger(__name__)


def _unauthorized(error: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=error,
        headers={"WWW-Authenticate": f'Bearer error="{error}"'},
    )


class JWTBearer(Generic[ClaimsT]):
    """Resolve the verified ``JWT`` of the request's bearer token.

    Usage::

        bearer = JWTBearer(JWTDecoder(JWTVerifier.rs256(public_key)), MyClaims)

        @app.get("/me")
        async def me(token: Annotated[JWT[MyClaims], Depends(bearer)]) -> ...
    """

    def __init__(
        self,
        decoder: JWTDecoder,
        claims_type: type[ClaimsT],
        settings: JWTSettings | None = None,
    ) -> None:
        self._decoder = decoder
        self._claims_type = claims_type
        self._settings = settings or JWTSettings()
        self._scheme = HTTPBearer(auto_error=False)

    def _check_policy(self, token: JWT[ClaimsT]) -> None:
        settings = self._settings
        if settings.validate_claims:
            result = token.validate_claims(leeway=settings.leeway)
            if result is not ValidateClaimsResult.SUCCESS:
                logger.info("Rejected bearer token: %s", result.description)
                raise _unauthorized("invalid_token")
        if settings.issuer and token.claims.issuer() != settings.issuer:
            logger.info("Rejected bearer token: issuer mismatch")
            raise _unauthorized("invalid_token")
        audience = token.claims.audience() or []
        if settings.audience and settings.audience not in audience:
            logger.info("Rejected bearer token: audience mismatch")
            raise _unauthorized("invalid_token")

    async def __call__(self, request: Request) -> JWT[ClaimsT]:
        credentials = await self._scheme(request)
        if credentials is None:
            raise _unauthorized("invalid_request")
        try:
            token = self._decoder.decode(credentials.credentials, self._claims_type)
        except (JWTError, ValidationError) as exc:
            logger.info("Rejected bearer token: %s", exc.__class__.__name__)
            raise _unauthorized("invalid_token") from exc
        self._check_policy(token)
        return token
