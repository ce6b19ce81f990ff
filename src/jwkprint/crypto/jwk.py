"""Public JWK member extraction for RFC 7638 thumbprints.

Only the members the thumbprint algorithm requires are produced; the member
set is fixed per key type:

  RSA: e, kty, n            (RFC 7638 section 3.2)
  EC:  crv, kty, x, y       (RFC 7638 section 3.2)
  OKP: crv, kty, x          (RFC 8037 section 2)

Optional members such as kid, alg or use never take part in the hash.
"""
from __future__ import annotations

from typing import Any, Dict, Mapping, Tuple

from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed448, ed25519, rsa

from ..errors import EncodingError, UnsupportedKeyTypeError
from ..utils.logging import get_logger
from .digest import b64url_encode

log = get_logger()

_REQUIRED: Dict[str, Tuple[str, ...]] = {
    "RSA": ("e", "kty", "n"),
    "EC": ("crv", "kty", "x", "y"),
    "OKP": ("crv", "kty", "x"),
}

# cryptography curve name -> (JWK crv, coordinate length in bytes)
_EC_CURVES: Dict[str, Tuple[str, int]] = {
    "secp256r1": ("P-256", 32),
    "secp384r1": ("P-384", 48),
    "secp521r1": ("P-521", 66),
}

_PRIVATE_TYPES = (
    rsa.RSAPrivateKey,
    ec.EllipticCurvePrivateKey,
    ed25519.Ed25519PrivateKey,
    ed448.Ed448PrivateKey,
)


def required_members(kty: str) -> Tuple[str, ...]:
    try:
        return _REQUIRED[kty]
    except KeyError:
        raise UnsupportedKeyTypeError(f"no thumbprint member set for kty={kty!r}") from None


def int_to_base64url(value: int) -> str:
    """Big-endian, minimal-length octets of ``value`` in unpadded base64url.

    Zero is encoded as a single zero octet.
    """
    if value < 0:
        raise EncodingError("JWK integers must be non-negative")
    length = max(1, (value.bit_length() + 7) // 8)
    return b64url_encode(value.to_bytes(length, "big"))


def _rsa_members(key: rsa.RSAPublicKey) -> Dict[str, str]:
    numbers = key.public_numbers()
    return {
        "kty": "RSA",
        "n": int_to_base64url(numbers.n),
        "e": int_to_base64url(numbers.e),
    }


def _ec_members(key: ec.EllipticCurvePublicKey) -> Dict[str, str]:
    curve = _EC_CURVES.get(key.curve.name)
    if curve is None:
        raise UnsupportedKeyTypeError(f"unsupported EC curve {key.curve.name!r}")
    crv, size = curve
    numbers = key.public_numbers()
    # coordinates keep the full field size (RFC 7518 section 6.2.1.2)
    return {
        "kty": "EC",
        "crv": crv,
        "x": b64url_encode(numbers.x.to_bytes(size, "big")),
        "y": b64url_encode(numbers.y.to_bytes(size, "big")),
    }


def _okp_members(key, crv: str) -> Dict[str, str]:
    raw = key.public_bytes(
        encoding=serialization.Encoding.Raw,
        format=serialization.PublicFormat.Raw,
    )
    return {"kty": "OKP", "crv": crv, "x": b64url_encode(raw)}


def extract_parameters(public_key: Any) -> Dict[str, str]:
    """Return the required public JWK members of ``public_key``.

    Private keys are accepted and reduced to their public half. Keys with no
    defined member set (DSA, DH, X25519, unknown curves, ...) raise
    :class:`UnsupportedKeyTypeError`.
    """
    if isinstance(public_key, _PRIVATE_TYPES):
        public_key = public_key.public_key()
    if isinstance(public_key, rsa.RSAPublicKey):
        return _rsa_members(public_key)
    if isinstance(public_key, ec.EllipticCurvePublicKey):
        return _ec_members(public_key)
    if isinstance(public_key, ed25519.Ed25519PublicKey):
        return _okp_members(public_key, "Ed25519")
    if isinstance(public_key, ed448.Ed448PublicKey):
        return _okp_members(public_key, "Ed448")
    log.debug("no JWK member set for %s", type(public_key).__name__)
    raise UnsupportedKeyTypeError(f"unsupported key type {type(public_key).__name__}")


def thumbprint_parameters(jwk: Mapping[str, Any]) -> Dict[str, str]:
    """Reduce a full JWK to the members its thumbprint is computed over."""
    kty = jwk.get("kty")
    if not isinstance(kty, str):
        raise EncodingError("JWK has no 'kty' member")
    params = {}
    for name in required_members(kty):
        if name not in jwk:
            raise EncodingError(f"{kty} JWK is missing required member {name!r}")
        params[name] = jwk[name]
    return params


__all__ = [
    "extract_parameters",
    "thumbprint_parameters",
    "required_members",
    "int_to_base64url",
]
