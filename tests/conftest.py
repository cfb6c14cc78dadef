"""Shared test fixtures for jwtkit."""

import pytest

from jwtkit.crypto.keys import (
    create_self_signed_certificate,
    generate_ec_keypair,
    generate_rsa_keypair,
)
from jwtkit.crypto.types import ECCurve, SigningKeyData


@pytest.fixture(scope="session")
def rsa_keys() -> SigningKeyData:
    """An RSA-2048 keypair shared by the session."""
    return generate_rsa_keypair()


@pytest.fixture(scope="session")
def other_rsa_keys() -> SigningKeyData:
    """A second, unrelated RSA keypair."""
    return generate_rsa_keypair()


@pytest.fixture(scope="session")
def rsa_certificate(rsa_keys: SigningKeyData) -> str:
    """A self-signed certificate for ``rsa_keys``."""
    return create_self_signed_certificate(rsa_keys.private_key_pem, "jwtkit-test")


@pytest.fixture(scope="session")
def ec256_keys() -> SigningKeyData:
    return generate_ec_keypair(ECCurve.P256)


@pytest.fixture(scope="session")
def ec384_keys() -> SigningKeyData:
    return generate_ec_keypair(ECCurve.P384)


@pytest.fixture(scope="session")
def ec521_keys() -> SigningKeyData:
    return generate_ec_keypair(ECCurve.P521)
