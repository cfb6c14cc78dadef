"""Key pair, secret and certificate generation for signing."""

import secrets
from datetime import UTC, datetime, timedelta

import uuid_utils
from cryptography import x509
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa
from cryptography.x509.oid import NameOID

from jwtkit.crypto.pem import KeyMaterial, load_private_key
from jwtkit.crypto.types import DigestWidth, ECCurve, SigningKeyData

RSA_KEY_SIZE = 2048
RSA_PUBLIC_EXPONENT = 65537
HMAC_SECRET_BYTES = 32
CERTIFICATE_VALIDITY_DAYS = 365


def _to_key_data(
    private_key: rsa.RSAPrivateKey | ec.EllipticCurvePrivateKey,
) -> SigningKeyData:
    private_pem = private_key.private_bytes(
        encoding=serialization.Encoding.PEM,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    ).decode()
    public_pem = (
        private_key.public_key()
        .public_bytes(
            encoding=serialization.Encoding.PEM,
            format=serialization.PublicFormat.SubjectPublicKeyInfo,
        )
        .decode()
    )
    return SigningKeyData(
        kid=str(uuid_utils.uuid7()),
        private_key_pem=private_pem,
        public_key_pem=public_pem,
    )


def generate_rsa_keypair(key_size: int = RSA_KEY_SIZE) -> SigningKeyData:
    """Generate a new RSA keypair for RS*/PS* signing."""
    private_key = rsa.generate_private_key(
        public_exponent=RSA_PUBLIC_EXPONENT,
        key_size=key_size,
    )
    return _to_key_data(private_key)


def generate_ec_keypair(curve: ECCurve) -> SigningKeyData:
    """Generate a new EC keypair on the curve matching an ES* algorithm."""
    return _to_key_data(ec.generate_private_key(curve.curve()))


def generate_hmac_secret(n_bytes: int = HMAC_SECRET_BYTES) -> bytes:
    """Generate a random symmetric secret for HS* signing."""
    return secrets.token_bytes(n_bytes)


def private_key_to_der(private_pem: KeyMaterial) -> bytes:
    """Re-encode a PEM private key as PKCS#8 DER."""
    return load_private_key(private_pem).private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )


def create_self_signed_certificate(
    private_pem: KeyMaterial,
    common_name: str,
    valid_days: int = CERTIFICATE_VALIDITY_DAYS,
) -> str:
    """Issue a self-signed X.509 certificate (PEM) for a private key."""
    private_key = load_private_key(private_pem)
    if not isinstance(private_key, (rsa.RSAPrivateKey, ec.EllipticCurvePrivateKey)):
        raise TypeError("Certificates can only be issued for RSA or EC keys")
    name = x509.Name([x509.NameAttribute(NameOID.COMMON_NAME, common_name)])
    now = datetime.now(UTC)
    certificate = (
        x509.CertificateBuilder()
        .subject_name(name)
        .issuer_name(name)
        .public_key(private_key.public_key())
        .serial_number(x509.random_serial_number())
        .not_valid_before(now - timedelta(minutes=1))
        .not_valid_after(now + timedelta(days=valid_days))
        .sign(private_key, DigestWidth.SHA256.hash_algorithm())
    )
    return certificate.public_bytes(serialization.Encoding.PEM).decode()
