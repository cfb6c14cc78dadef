"""Type definitions for signature algorithms, keys and adapters."""

from enum import IntEnum, StrEnum
from typing import Protocol

from cryptography.hazmat.primitives import hashes
from cryptography.hazmat.primitives.asymmetric import ec
from pydantic import BaseModel


class RSAKeyType(StrEnum):
    """How RSA key material is interpreted."""

    PRIVATE_KEY = "private_key"
    PUBLIC_KEY = "public_key"
    CERTIFICATE = "certificate"


class ECSignatureType(StrEnum):
    """Wire encoding of an ECDSA signature."""

    RS = "rs"
    ASN1 = "asn1"


class DigestWidth(IntEnum):
    """SHA-2 digest size used by an algorithm instance."""

    SHA256 = 256
    SHA384 = 384
    SHA512 = 512

    def hash_algorithm(self) -> hashes.HashAlgorithm:
        """Return a fresh cryptography hash object for this width."""
        if self is DigestWidth.SHA256:
            return hashes.SHA256()
        if self is DigestWidth.SHA384:
            return hashes.SHA384()
        return hashes.SHA512()


class ECCurve(StrEnum):
    """NIST curves paired with their JWA digest."""

    P256 = "P-256"
    P384 = "P-384"
    P521 = "P-521"

    def curve(self) -> ec.EllipticCurve:
        """Return the cryptography curve object."""
        if self is ECCurve.P256:
            return ec.SECP256R1()
        if self is ECCurve.P384:
            return ec.SECP384R1()
        return ec.SECP521R1()

    @property
    def curve_name(self) -> str:
        """Name of the curve as reported by cryptography key objects."""
        return self.curve().name

    @property
    def digest(self) -> DigestWidth:
        """Digest width mandated for this curve by RFC 7518."""
        return {
            ECCurve.P256: DigestWidth.SHA256,
            ECCurve.P384: DigestWidth.SHA384,
            ECCurve.P521: DigestWidth.SHA512,
        }[self]

    @property
    def coordinate_size(self) -> int:
        """Byte length of each of r and s in the raw signature form."""
        return (self.curve().key_size + 7) // 8


class AlgorithmFamily(StrEnum):
    """Closed set of signature algorithm families."""

    RSA_PKCS1 = "RSA-PKCS1"
    RSA_PSS = "RSA-PSS"
    ECDSA = "ECDSA"
    HMAC = "HMAC"
    NONE = "none"


class SignerAlgorithm(Protocol):
    """Produces a signature over raw bytes."""

    def sign(self, data: bytes) -> bytes: ...


class VerifierAlgorithm(Protocol):
    """Checks a signature over raw bytes; never raises on mismatch."""

    def verify(self, signature: bytes, data: bytes) -> bool: ...


class SigningKeyData(BaseModel):
    """An asymmetric keypair in PEM form with its key ID."""

    kid: str
    private_key_pem: str
    public_key_pem: str
