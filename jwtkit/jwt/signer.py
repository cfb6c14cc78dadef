"""Named signers pairing a JWA algorithm name with a keyed adapter."""

import logging
from dataclasses import dataclass, field

from jwtkit.codec import base64url
from jwtkit.crypto.ecdsa import ECDSASigner
from jwtkit.crypto.hmac_sha import HMACAlgorithm
from jwtkit.crypto.none import NoneAlgorithm
from jwtkit.crypto.pem import KeyMaterial
from jwtkit.crypto.rsa import RSAAlgorithm, RSAPSSAlgorithm
from jwtkit.crypto.types import (
    AlgorithmFamily,
    DigestWidth,
    ECCurve,
    ECSignatureType,
    RSAKeyType,
    SignerAlgorithm,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JWTSigner:
    """Signs the encoded header and claims of a JWT.

    Build one with a factory such as ``JWTSigner.rs256(private_key)``.
    Instances hold no per-call state and can be shared across threads.
    """

    name: str
    family: AlgorithmFamily
    algorithm: SignerAlgorithm = field(repr=False)

    def sign(self, header: str, claims: str) -> str:
        """Return ``header.claims.signature`` (``header.claims`` for none)."""
        unsigned = f"{header}.{claims}"
        signature = self.algorithm.sign(unsigned.encode())
        logger.debug("Signed JWT with %s", self.name)
        if self.family is AlgorithmFamily.NONE:
            return unsigned
        return f"{unsigned}.{base64url.encode(signature)}"

    @classmethod
    def _rsa(cls, name: str, key: KeyMaterial, digest: DigestWidth) -> "JWTSigner":
        adapter = RSAAlgorithm(key, RSAKeyType.PRIVATE_KEY, digest)
        return cls(name, AlgorithmFamily.RSA_PKCS1, adapter)

    @classmethod
    def _pss(cls, name: str, key: KeyMaterial, digest: DigestWidth) -> "JWTSigner":
        adapter = RSAPSSAlgorithm(key, RSAKeyType.PRIVATE_KEY, digest)
        return cls(name, AlgorithmFamily.RSA_PSS, adapter)

    @classmethod
    def _ecdsa(
        cls,
        name: str,
        key: KeyMaterial,
        curve: ECCurve,
        signature_type: ECSignatureType,
    ) -> "JWTSigner":
        adapter = ECDSASigner(key, curve, signature_type)
        return cls(name, AlgorithmFamily.ECDSA, adapter)

    @classmethod
    def _hmac(cls, name: str, key: KeyMaterial, digest: DigestWidth) -> "JWTSigner":
        return cls(name, AlgorithmFamily.HMAC, HMACAlgorithm(key, digest))

    @classmethod
    def rs256(cls, private_key: KeyMaterial) -> "JWTSigner":
        """RSASSA-PKCS1-v1_5 using SHA-256."""
        return cls._rsa("RS256", private_key, DigestWidth.SHA256)

    @classmethod
    def rs384(cls, private_key: KeyMaterial) -> "JWTSigner":
        """RSASSA-PKCS1-v1_5 using SHA-384."""
        return cls._rsa("RS384", private_key, DigestWidth.SHA384)

    @classmethod
    def rs512(cls, private_key: KeyMaterial) -> "JWTSigner":
        """RSASSA-PKCS1-v1_5 using SHA-512."""
        return cls._rsa("RS512", private_key, DigestWidth.SHA512)

    @classmethod
    def ps256(cls, private_key: KeyMaterial) -> "JWTSigner":
        """RSASSA-PSS using SHA-256 and MGF1 with SHA-256."""
        return cls._pss("PS256", private_key, DigestWidth.SHA256)

    @classmethod
    def ps384(cls, private_key: KeyMaterial) -> "JWTSigner":
        """RSASSA-PSS using SHA-384 and MGF1 with SHA-384."""
        return cls._pss("PS384", private_key, DigestWidth.SHA384)

    @classmethod
    def ps512(cls, private_key: KeyMaterial) -> "JWTSigner":
        """RSASSA-PSS using SHA-512 and MGF1 with SHA-512."""
        return cls._pss("PS512", private_key, DigestWidth.SHA512)

    @classmethod
    def es256(
        cls,
        private_key: KeyMaterial,
        signature_type: ECSignatureType = ECSignatureType.RS,
    ) -> "JWTSigner":
        """ECDSA using P-256 and SHA-256."""
        return cls._ecdsa("ES256", private_key, ECCurve.P256, signature_type)

    @classmethod
    def es384(
        cls,
        private_key: KeyMaterial,
        signature_type: ECSignatureType = ECSignatureType.RS,
    ) -> "JWTSigner":
        """ECDSA using P-384 and SHA-384."""
        return cls._ecdsa("ES384", private_key, ECCurve.P384, signature_type)

    @classmethod
    def es512(
        cls,
        private_key: KeyMaterial,
        signature_type: ECSignatureType = ECSignatureType.RS,
    ) -> "JWTSigner":
        """ECDSA using P-521 and SHA-512."""
        return cls._ecdsa("ES512", private_key, ECCurve.P521, signature_type)

    @classmethod
    def hs256(cls, key: KeyMaterial) -> "JWTSigner":
        """HMAC using SHA-256."""
        return cls._hmac("HS256", key, DigestWidth.SHA256)

    @classmethod
    def hs384(cls, key: KeyMaterial) -> "JWTSigner":
        """HMAC using SHA-384."""
        return cls._hmac("HS384", key, DigestWidth.SHA384)

    @classmethod
    def hs512(cls, key: KeyMaterial) -> "JWTSigner":
        """HMAC using SHA-512."""
        return cls._hmac("HS512", key, DigestWidth.SHA512)

    @classmethod
    def none(cls) -> "JWTSigner":
        """Unsecured JWT: no signature segment is produced."""
        return cls("none", AlgorithmFamily.NONE, NoneAlgorithm())
