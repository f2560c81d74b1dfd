"""
Shared fixtures for Bouncer tests.
"""

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, rsa

PASSPHRASE = "correct horse battery staple"


def _public_pem(key) -> str:
    return key.public_key().public_bytes(
        serialization.Encoding.PEM,
        serialization.PublicFormat.SubjectPublicKeyInfo,
    ).decode("utf-8")


def _private_pem(key, passphrase=None) -> str:
    if passphrase:
        encryption = serialization.BestAvailableEncryption(passphrase.encode("utf-8"))
    else:
        encryption = serialization.NoEncryption()
    return key.private_bytes(
        serialization.Encoding.PEM,
        serialization.PrivateFormat.PKCS8,
        encryption,
    ).decode("utf-8")


@pytest.fixture(scope="session")
def rsa_key():
    return rsa.generate_private_key(public_exponent=65537, key_size=2048)


@pytest.fixture(scope="session")
def rsa_keys(rsa_key):
    """Unencrypted RSA key pair as (private_pem, public_pem)."""
    return _private_pem(rsa_key), _public_pem(rsa_key)


@pytest.fixture(scope="session")
def encrypted_rsa_keys(rsa_key):
    """Passphrase protected RSA key pair as (private_pem, public_pem, passphrase)."""
    return _private_pem(rsa_key, PASSPHRASE), _public_pem(rsa_key), PASSPHRASE


@pytest.fixture(scope="session")
def other_rsa_keys():
    """A second, unrelated RSA key pair."""
    key = rsa.generate_private_key(public_exponent=65537, key_size=2048)
    return _private_pem(key), _public_pem(key)


@pytest.fixture(scope="session")
def ec_keys():
    """Unencrypted P-256 key pair as (private_pem, public_pem)."""
    key = ec.generate_private_key(ec.SECP256R1())
    return _private_pem(key), _public_pem(key)
