"""Named verifiers pairing a JWA algorithm name with a keyed adapter."""

import logging
from dataclasses import dataclass, field

from jwtkit.codec import base64url
from jwtkit.crypto.ecdsa import ECDSAVerifier
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
    VerifierAlgorithm,
)

logger = logging.getLogger(__name__)


def _rsa_key(
    public_key: KeyMaterial | None, certificate: KeyMaterial | None
) -> tuple[KeyMaterial, RSAKeyType]:
    if (public_key is None) == (certificate is None):
        raise ValueError("Pass exactly one of public_key or certificate")
    if certificate is not None:
        return certificate, RSAKeyType.CERTIFICATE
    assert public_key is not None
    return public_key, RSAKeyType.PUBLIC_KEY


@dataclass(frozen=True)
class JWTVerifier:
    """Checks the signature of an encoded JWT.

    The ``alg`` header of the token is not consulted: the caller decides
    which verifier runs. Only ``JWTVerifier.none()`` accepts unsigned
    tokens.
    """

    name: str
    family: AlgorithmFamily
    algorithm: VerifierAlgorithm = field(repr=False)

    def verify(self, jwt: str) -> bool:
        """Return True when the token's signature is valid for this key."""
        segments = jwt.split(".")
        if len(segments) == 2:
            signature = b""
        elif len(segments) == 3:
            try:
                signature = base64url.decode(segments[2])
            except ValueError:
                return False
        else:
            return False
        signed_input = f"{segments[0]}.{segments[1]}".encode()
        verified = self.algorithm.verify(signature, signed_input)
        outcome = "passed" if verified else "failed"
        logger.debug("%s verification %s", self.name, outcome)
        return verified

    @classmethod
    def _rsa(
        cls,
        name: str,
        public_key: KeyMaterial | None,
        certificate: KeyMaterial | None,
        digest: DigestWidth,
    ) -> "JWTVerifier":
        key, key_type = _rsa_key(public_key, certificate)
        return cls(name, AlgorithmFamily.RSA_PKCS1, RSAAlgorithm(key, key_type, digest))

    @classmethod
    def _pss(
        cls,
        name: str,
        public_key: KeyMaterial | None,
        certificate: KeyMaterial | None,
        digest: DigestWidth,
    ) -> "JWTVerifier":
        key, key_type = _rsa_key(public_key, certificate)
        adapter = RSAPSSAlgorithm(key, key_type, digest)
        return cls(name, AlgorithmFamily.RSA_PSS, adapter)

    @classmethod
    def _ecdsa(
        cls,
        name: str,
        key: KeyMaterial,
        curve: ECCurve,
        signature_type: ECSignatureType,
    ) -> "JWTVerifier":
        adapter = ECDSAVerifier(key, curve, signature_type)
        return cls(name, AlgorithmFamily.ECDSA, adapter)

    @classmethod
    def _hmac(cls, name: str, key: KeyMaterial, digest: DigestWidth) -> "JWTVerifier":
        return cls(name, AlgorithmFamily.HMAC, HMACAlgorithm(key, digest))

    @classmethod
    def rs256(
        cls,
        public_key: KeyMaterial | None = None,
        *,
        certificate: KeyMaterial | None = None,
    ) -> "JWTVerifier":
        """RSASSA-PKCS1-v1_5 using SHA-256, from a public key or certificate."""
        return cls._rsa("RS256", public_key, certificate, DigestWidth.SHA256)

    @classmethod
    def rs384(
        cls,
        public_key: KeyMaterial | None = None,
        *,
        certificate: KeyMaterial | None = None,
    ) -> "JWTVerifier":
        """RSASSA-PKCS1-v1_5 using SHA-384, from a public key or certificate."""
        return cls._rsa("RS384", public_key, certificate, DigestWidth.SHA384)

    @classmethod
    def rs512(
        cls,
        public_key: KeyMaterial | None = None,
        *,
        certificate: KeyMaterial | None = None,
    ) -> "JWTVerifier":
        """RSASSA-PKCS1-v1_5 using SHA-512, from a public key or certificate."""
        return cls._rsa("RS512", public_key, certificate, DigestWidth.SHA512)

    @classmethod
    def ps256(
        cls,
        public_key: KeyMaterial | None = None,
        *,
        certificate: KeyMaterial | None = None,
    ) -> "JWTVerifier":
        """RSASSA-PSS using SHA-256, from a public key or certificate."""
        return cls._pss("PS256", public_key, certificate, DigestWidth.SHA256)

    @classmethod
    def ps384(
        cls,
        public_key: KeyMaterial | None = None,
        *,
        certificate: KeyMaterial | None = None,
    ) -> "JWTVerifier":
        """RSASSA-PSS using SHA-384, from a public key or certificate."""
        return cls._pss("PS384", public_key, certificate, DigestWidth.SHA384)

    @classmethod
    def ps512(
        cls,
        public_key: KeyMaterial | None = None,
        *,
        certificate: KeyMaterial | None = None,
    ) -> "JWTVerifier":
        """RSASSA-PSS using SHA-512, from a public key or certificate."""
        return cls._pss("PS512", public_key, certificate, DigestWidth.SHA512)

    @classmethod
    def es256(
        cls,
        public_key: KeyMaterial,
        signature_type: ECSignatureType = ECSignatureType.RS,
    ) -> "JWTVerifier":
        """ECDSA using P-256 and SHA-256."""
        return cls._ecdsa("ES256", public_key, ECCurve.P256, signature_type)

    @classmethod
    def es384(
        cls,
        public_key: KeyMaterial,
        signature_type: ECSignatureType = ECSignatureType.RS,
    ) -> "JWTVerifier":
        """ECDSA using P-384 and SHA-384."""
        return cls._ecdsa("ES384", public_key, ECCurve.P384, signature_type)

    @classmethod
    def es512(
        cls,
        public_key: KeyMaterial,
        signature_type: ECSignatureType = ECSignatureType.RS,
    ) -> "JWTVerifier":
        """ECDSA using P-521 and SHA-512."""
        return cls._ecdsa("ES512", public_key, ECCurve.P521, signature_type)

    @classmethod
    def hs256(cls, key: KeyMaterial) -> "JWTVerifier":
        """HMAC using SHA-256."""
        return cls._hmac("HS256", key, DigestWidth.SHA256)

    @classmethod
    def hs384(cls, key: KeyMaterial) -> "JWTVerifier":
        """HMAC using SHA-384."""
        return cls._hmac("HS384", key, DigestWidth.SHA384)

    @classmethod
    def hs512(cls, key: KeyMaterial) -> "JWTVerifier":
        """HMAC using SHA-512."""
        return cls._hmac("HS512", key, DigestWidth.SHA512)

    @classmethod
    def none(cls) -> "JWTVerifier":
        """Accept every token without checking a signature."""
        return cls("none", AlgorithmFamily.NONE, NoneAlgorithm())
