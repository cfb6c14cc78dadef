"""RSA signature adapters: PKCS#1 v1.5 (RS*) and PSS (PS*)."""

import logging

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from jwtkit.core.errors import (
    InvalidPrivateKeyError,
    InvalidPublicKeyError,
    JWTError,
    UnsupportedAlgorithmError,
)
from jwtkit.crypto.pem import (
    KeyMaterial,
    load_certificate_public_key,
    load_private_key,
    load_public_key,
)
from jwtkit.crypto.types import DigestWidth, RSAKeyType

logger = logging.getLogger(__name__)


class RSAAlgorithm:
    """RSA PKCS#1 v1.5 signer/verifier bound to one key and digest width.

    The key is parsed once at construction. Parse failures are kept and
    surfaced on ``sign`` (as a fresh copy of the load error) or turn ``verify`` into
    ``False``, so factories never raise on bad input.
    """

    def __init__(
        self,
        key: KeyMaterial,
        key_type: RSAKeyType,
        digest: DigestWidth,
    ) -> None:
        self._key_type = key_type
        self._digest = digest
        self._private_key: rsa.RSAPrivateKey | None = None
        self._public_key: rsa.RSAPublicKey | None = None
        self._load_error: JWTError | None = None
        try:
            self._load(key)
        except JWTError as exc:
            logger.debug("RSA %s could not be loaded: %s", key_type, exc)
            self._load_error = exc

    def _load(self, key: KeyMaterial) -> None:
        if self._key_type is RSAKeyType.PRIVATE_KEY:
            loaded = load_private_key(key)
            if not isinstance(loaded, rsa.RSAPrivateKey):
                raise InvalidPrivateKeyError("Private key is not an RSA key")
            self._private_key = loaded
            return
        if self._key_type is RSAKeyType.CERTIFICATE:
            public = load_certificate_public_key(key)
        else:
            public = load_public_key(key)
        if not isinstance(public, rsa.RSAPublicKey):
            raise InvalidPublicKeyError("Public key is not an RSA key")
        self._public_key = public

    def _padding(self) -> padding.AsymmetricPadding:
        return padding.PKCS1v15()

    def sign(self, data: bytes) -> bytes:
        """Sign data with the private key."""
        if self._private_key is None:
            error = self._load_error
            if error is not None and self._key_type is RSAKeyType.PRIVATE_KEY:
                raise type(error)(str(error)) from error
            raise InvalidPrivateKeyError()
        try:
            return self._private_key.sign(
                data, self._padding(), self._digest.hash_algorithm()
            )
        except UnsupportedAlgorithm as exc:
            raise UnsupportedAlgorithmError(str(exc)) from exc

    def verify(self, signature: bytes, data: bytes) -> bool:
        """Return True when the signature matches the data."""
        if self._public_key is None:
            return False
        try:
            self._public_key.verify(
                signature, data, self._padding(), self._digest.hash_algorithm()
            )
        except InvalidSignature:
            return False
        except (ValueError, UnsupportedAlgorithm) as exc:
            logger.error("Verification failed: %s", exc)
            return False
        return True


class RSAPSSAlgorithm(RSAAlgorithm):
    """RSASSA-PSS with MGF1 and a salt as long as the digest."""

    def _padding(self) -> padding.AsymmetricPadding:
        return padding.PSS(
            mgf=padding.MGF1(self._digest.hash_algorithm()),
            salt_length=padding.PSS.DIGEST_LENGTH,
        )
