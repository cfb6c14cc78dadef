"""ECDSA signature adapter for ES256, ES384 and ES512."""

import logging

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives.asymmetric import ec
from cryptography.hazmat.primitives.asymmetric.utils import (
    decode_dss_signature,
    encode_dss_signature,
)

from jwtkit.core.errors import (
    InvalidPrivateKeyError,
    InvalidPublicKeyError,
    JWTError,
    UnsupportedAlgorithmError,
)
from jwtkit.crypto.pem import KeyMaterial, load_private_key, load_public_key
from jwtkit.crypto.types import ECCurve, ECSignatureType

logger = logging.getLogger(__name__)


class ECDSASigner:
    """Signs with an EC private key on a fixed curve.

    Signatures are the fixed-width concatenation r || s unless
    ``signature_type`` asks for ASN.1 DER.
    """

    def __init__(
        self,
        key: KeyMaterial,
        curve: ECCurve,
        signature_type: ECSignatureType = ECSignatureType.RS,
    ) -> None:
        self._curve = curve
        self._signature_type = signature_type
        self._key: ec.EllipticCurvePrivateKey | None = None
        self._load_error: JWTError | None = None
        try:
            loaded = load_private_key(key)
            if not isinstance(loaded, ec.EllipticCurvePrivateKey):
                raise InvalidPrivateKeyError("Private key is not an EC key")
            if loaded.curve.name != curve.curve_name:
                raise InvalidPrivateKeyError(
                    f"Private key curve {loaded.curve.name} does not match {curve}"
                )
            self._key = loaded
        except JWTError as exc:
            logger.debug("EC private key could not be loaded: %s", exc)
            self._load_error = exc

    def sign(self, data: bytes) -> bytes:
        """Sign data, returning r || s or DER."""
        if self._key is None:
            error = self._load_error or InvalidPrivateKeyError()
            raise type(error)(str(error)) from self._load_error
        try:
            der = self._key.sign(data, ec.ECDSA(self._curve.digest.hash_algorithm()))
        except UnsupportedAlgorithm as exc:
            raise UnsupportedAlgorithmError(str(exc)) from exc
        if self._signature_type is ECSignatureType.ASN1:
            return der
        r, s = decode_dss_signature(der)
        size = self._curve.coordinate_size
        return r.to_bytes(size, "big") + s.to_bytes(size, "big")


class ECDSAVerifier:
    """Verifies ECDSA signatures with an EC public key on a fixed curve."""

    def __init__(
        self,
        key: KeyMaterial,
        curve: ECCurve,
        signature_type: ECSignatureType = ECSignatureType.RS,
    ) -> None:
        self._curve = curve
        self._signature_type = signature_type
        self._key: ec.EllipticCurvePublicKey | None = None
        try:
            loaded = load_public_key(key)
            if not isinstance(loaded, ec.EllipticCurvePublicKey):
                raise InvalidPublicKeyError("Public key is not an EC key")
            if loaded.curve.name != curve.curve_name:
                raise InvalidPublicKeyError(
                    f"Public key curve {loaded.curve.name} does not match {curve}"
                )
            self._key = loaded
        except JWTError as exc:
            logger.debug("EC public key could not be loaded: %s", exc)

    def _to_der(self, signature: bytes) -> bytes | None:
        if self._signature_type is ECSignatureType.ASN1:
            return signature
        size = self._curve.coordinate_size
        if len(signature) != 2 * size:
            return None
        r = int.from_bytes(signature[:size], "big")
        s = int.from_bytes(signature[size:], "big")
        return encode_dss_signature(r, s)

    def verify(self, signature: bytes, data: bytes) -> bool:
        """Return True when the signature matches the data."""
        if self._key is None:
            return False
        der = self._to_der(signature)
        if der is None:
            return False
        try:
            self._key.verify(der, data, ec.ECDSA(self._curve.digest.hash_algorithm()))
        except InvalidSignature:
            return False
        except (ValueError, UnsupportedAlgorithm) as exc:
            logger.error("Verification failed: %s", exc)
            return False
        return True
