"""DER codecs for asymmetric keys.

Public keys travel as X.509 SubjectPublicKeyInfo, private keys as unencrypted
PKCS#8. ``key_type`` names the expected JWK key family (RSA, EC or OKP); a
key of any other family is rejected even if the bytes themselves are valid.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed448, ed25519, rsa

from ..errors import DecodeError
from ..utils.logging import get_logger

log = get_logger()

# key_type -> (public key classes, private key classes)
_KEY_CLASSES: Dict[str, Tuple[tuple, tuple]] = {
    "RSA": ((rsa.RSAPublicKey,), (rsa.RSAPrivateKey,)),
    "EC": ((ec.EllipticCurvePublicKey,), (ec.EllipticCurvePrivateKey,)),
    "OKP": (
        (ed25519.Ed25519PublicKey, ed448.Ed448PublicKey),
        (ed25519.Ed25519PrivateKey, ed448.Ed448PrivateKey),
    ),
}


@dataclass(frozen=True)
class KeyPair:
    public_key: Any
    private_key: Any


def _classes(key_type: str) -> Tuple[tuple, tuple]:
    classes = _KEY_CLASSES.get(key_type.upper())
    if classes is None:
        raise DecodeError(f"unsupported key type {key_type!r}")
    return classes


def decode_public_key(data: bytes, key_type: str = "RSA"):
    expected, _ = _classes(key_type)
    try:
        key = serialization.load_der_public_key(data)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        log.debug("SubjectPublicKeyInfo decode failed: %s", e)
        raise DecodeError("malformed SubjectPublicKeyInfo") from e
    if not isinstance(key, expected):
        raise DecodeError(f"expected a {key_type.upper()} public key, got {type(key).__name__}")
    return key


def decode_private_key(data: bytes, key_type: str = "RSA"):
    _, expected = _classes(key_type)
    try:
        key = serialization.load_der_private_key(data, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as e:
        log.debug("PKCS#8 decode failed: %s", e)
        raise DecodeError("malformed or encrypted PKCS#8 private key") from e
    if not isinstance(key, expected):
        raise DecodeError(f"expected a {key_type.upper()} private key, got {type(key).__name__}")
    return key


def encode_public_key(key) -> bytes:
    return key.public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )


def encode_private_key(key) -> bytes:
    return key.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )


def load_key_pair(public_data: bytes, private_data: bytes, key_type: str = "RSA") -> KeyPair:
    """Decode both halves and check that they belong together."""
    public_key = decode_public_key(public_data, key_type)
    private_key = decode_private_key(private_data, key_type)
    if encode_public_key(private_key.public_key()) != encode_public_key(public_key):
        raise DecodeError("public key does not match private key")
    return KeyPair(public_key=public_key, private_key=private_key)


__all__ = [
    "KeyPair",
    "decode_public_key",
    "decode_private_key",
    "encode_public_key",
    "encode_private_key",
    "load_key_pair",
]
