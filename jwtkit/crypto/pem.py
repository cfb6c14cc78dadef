"""Loading of PEM or DER encoded key material."""

from cryptography import x509
from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric.types import (
    PrivateKeyTypes,
    PublicKeyTypes,
)

from jwtkit.core.errors import (
    InvalidPrivateKeyError,
    InvalidPublicKeyError,
    MissingPEMHeadersError,
)

KeyMaterial = str | bytes

PEM_BOUNDARY = b"-----BEGIN"
_LOAD_ERRORS = (ValueError, TypeError, UnsupportedAlgorithm)


def to_bytes(material: KeyMaterial) -> bytes:
    """Return key material as bytes, UTF-8 encoding text."""
    if isinstance(material, str):
        return material.encode()
    return bytes(material)


def is_pem(data: bytes) -> bool:
    """Whether the data carries PEM armour."""
    return PEM_BOUNDARY in data


def load_private_key(material: KeyMaterial) -> PrivateKeyTypes:
    """Load an unencrypted private key from PEM text or DER bytes."""
    data = to_bytes(material)
    if is_pem(data):
        try:
            return serialization.load_pem_private_key(data, password=None)
        except _LOAD_ERRORS as exc:
            raise InvalidPrivateKeyError() from exc
    try:
        return serialization.load_der_private_key(data, password=None)
    except _LOAD_ERRORS as exc:
        raise MissingPEMHeadersError() from exc


def load_public_key(material: KeyMaterial) -> PublicKeyTypes:
    """Load a SubjectPublicKeyInfo (or PKCS#1 RSA) public key."""
    data = to_bytes(material)
    if is_pem(data):
        try:
            return serialization.load_pem_public_key(data)
        except _LOAD_ERRORS as exc:
            raise InvalidPublicKeyError() from exc
    try:
        return serialization.load_der_public_key(data)
    except _LOAD_ERRORS as exc:
        raise MissingPEMHeadersError() from exc


def load_certificate_public_key(material: KeyMaterial) -> PublicKeyTypes:
    """Extract the subject public key from an X.509 certificate."""
    data = to_bytes(material)
    if is_pem(data):
        try:
            certificate = x509.load_pem_x509_certificate(data)
        except _LOAD_ERRORS as exc:
            raise InvalidPublicKeyError() from exc
    else:
        try:
            certificate = x509.load_der_x509_certificate(data)
        except _LOAD_ERRORS as exc:
            raise MissingPEMHeadersError() from exc
    return certificate.public_key()
