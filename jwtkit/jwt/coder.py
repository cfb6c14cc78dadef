"""Stream-style JWT encoder and decoder with optional key-ID dispatch."""

import logging
from collections.abc import Callable, Mapping
from typing import Any, Protocol, TypeVar, runtime_checkable

from jwtkit.core.errors import (
    FailedVerificationError,
    InvalidKeyIDError,
    InvalidUTF8DataError,
    JWTContainerError,
)
from jwtkit.jwt.claims import Claims, ClaimsT
from jwtkit.jwt.header import Header
from jwtkit.jwt.signer import JWTSigner
from jwtkit.jwt.token import JWT, split_segments
from jwtkit.jwt.verifier import JWTVerifier

logger = logging.getLogger(__name__)

T = TypeVar("T")

KeyIDToSigner = Callable[[str], JWTSigner | None]
KeyIDToVerifier = Callable[[str], JWTVerifier | None]

CONTAINER_KEYS = frozenset({"header", "claims"})


@runtime_checkable
class BodyEncoder(Protocol):
    """Turns a value into a request or response body."""

    def encode(self, value: Any) -> bytes: ...


@runtime_checkable
class BodyDecoder(Protocol):
    """Turns a request or response body into a value of the given type."""

    def decode(self, data: bytes | str, value_type: type[T]) -> Any: ...


def unpack_container(value: Any) -> tuple[Header | None, Claims]:
    """Split a value into its header and claims.

    Accepts a ``JWT``, a bare ``Claims`` object, or a mapping holding
    exactly the keys ``header`` and ``claims`` (``header`` optional).
    Anything else raises ``JWTContainerError``.
    """
    if isinstance(value, JWT):
        return value.header, value.claims
    if isinstance(value, Claims):
        return None, value
    if isinstance(value, Mapping):
        keys = set(value)
        if "claims" not in keys or not keys <= CONTAINER_KEYS:
            raise JWTContainerError(
                f"Expected keys {sorted(CONTAINER_KEYS)}, got {sorted(map(str, keys))}"
            )
        header = value.get("header")
        claims = value["claims"]
        if header is not None and not isinstance(header, Header):
            raise JWTContainerError("The 'header' entry must be a Header")
        if not isinstance(claims, Claims):
            raise JWTContainerError("The 'claims' entry must be a Claims instance")
        return header, claims
    raise JWTContainerError(
        f"JWTEncoder can only encode JWT tokens, not {type(value).__name__}"
    )


class JWTEncoder:
    """Signs JWTs with a fixed signer or one chosen by the `kid` header.

    Instances are immutable and safe to share between threads; the
    ``key_id_to_signer`` callback must itself be thread safe.
    """

    def __init__(
        self,
        signer: JWTSigner | None = None,
        *,
        key_id_to_signer: KeyIDToSigner | None = None,
        header: Header | None = None,
    ) -> None:
        if (signer is None) == (key_id_to_signer is None):
            raise ValueError("Pass exactly one of signer or key_id_to_signer")
        self._signer = signer
        self._key_id_to_signer = key_id_to_signer
        self._header = header

    def _resolve(self, header: Header) -> JWTSigner:
        if self._signer is not None:
            return self._signer
        assert self._key_id_to_signer is not None
        if header.kid is None:
            raise InvalidKeyIDError("The JWT header has no `kid` to select a signer")
        signer = self._key_id_to_signer(header.kid)
        if signer is None:
            raise InvalidKeyIDError()
        logger.debug("Resolved signer %s for kid %r", signer.name, header.kid)
        return signer

    def encode_to_string(self, value: Any) -> str:
        """Sign a JWT (or bare claims) and return the compact string."""
        own_header, claims = unpack_container(value)
        template = self._header if self._header is not None else own_header
        header = template.model_copy() if template is not None else Header()
        signer = self._resolve(header)
        header.alg = signer.name
        return signer.sign(header.encode(), claims.encode())

    def encode(self, value: Any) -> bytes:
        """Sign a JWT (or bare claims) and return the UTF-8 token bytes."""
        return self.encode_to_string(value).encode()


class JWTDecoder:
    """Verifies and decodes JWTs with a fixed verifier or one chosen by `kid`.

    There is no fallback: a token whose `kid` does not resolve is
    rejected, never decoded unverified.
    """

    def __init__(
        self,
        verifier: JWTVerifier | None = None,
        *,
        key_id_to_verifier: KeyIDToVerifier | None = None,
    ) -> None:
        if (verifier is None) == (key_id_to_verifier is None):
            raise ValueError("Pass exactly one of verifier or key_id_to_verifier")
        self._verifier = verifier
        self._key_id_to_verifier = key_id_to_verifier

    def _resolve(self, header: Header) -> JWTVerifier:
        if self._verifier is not None:
            return self._verifier
        assert self._key_id_to_verifier is not None
        if header.kid is None:
            raise InvalidKeyIDError("The JWT header has no `kid` to select a verifier")
        verifier = self._key_id_to_verifier(header.kid)
        if verifier is None:
            raise InvalidKeyIDError()
        logger.debug(
            "Resolved verifier %s for kid %r (alg %s)",
            verifier.name,
            header.kid,
            header.alg,
        )
        return verifier

    def decode(self, data: bytes | str, claims_type: type[ClaimsT]) -> JWT[ClaimsT]:
        """Verify a token and decode it into a ``JWT`` of ``claims_type``.

        Raises ``InvalidUTF8DataError``, ``InvalidJWTStringError``,
        ``InvalidKeyIDError`` or ``FailedVerificationError``; JSON errors
        in the header or claims propagate unchanged.
        """
        if isinstance(data, bytes):
            try:
                token = data.decode("utf-8")
            except UnicodeDecodeError as exc:
                raise InvalidUTF8DataError() from exc
        else:
            token = data
        header_data, claims_data = split_segments(token)
        header = Header.from_json(header_data)
        verifier = self._resolve(header)
        if not verifier.verify(token):
            raise FailedVerificationError()
        return JWT(claims_type.from_json(claims_data), header)
