"""HMAC-SHA2 adapter for HS256, HS384 and HS512."""

import logging

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hmac

from jwtkit.core.errors import UnsupportedAlgorithmError
from jwtkit.crypto.pem import KeyMaterial, to_bytes
from jwtkit.crypto.types import DigestWidth

logger = logging.getLogger(__name__)


class HMACAlgorithm:
    """Symmetric signer and verifier sharing one raw secret."""

    def __init__(self, key: KeyMaterial, digest: DigestWidth) -> None:
        self._key = to_bytes(key)
        self._digest = digest

    def _mac(self) -> hmac.HMAC:
        try:
            return hmac.HMAC(self._key, self._digest.hash_algorithm())
        except UnsupportedAlgorithm as exc:
            raise UnsupportedAlgorithmError(str(exc)) from exc

    def sign(self, data: bytes) -> bytes:
        """Compute the MAC of data."""
        mac = self._mac()
        mac.update(data)
        return mac.finalize()

    def verify(self, signature: bytes, data: bytes) -> bool:
        """Recompute the MAC and compare in constant time."""
        try:
            mac = self._mac()
        except UnsupportedAlgorithmError as exc:
            logger.error("Verification failed: %s", exc)
            return False
        mac.update(data)
        try:
            mac.verify(signature)
        except InvalidSignature:
            return False
        return True
