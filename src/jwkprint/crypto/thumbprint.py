"""RFC 7638 JWK thumbprints.

    thumbprint = BASE64URL(SHA-256(canonical JSON of the required members))
"""
from __future__ import annotations

from typing import Any, Mapping

from .digest import sha256_b64url
from .jcs import canonical_json
from .jwk import extract_parameters, thumbprint_parameters


def compute_thumbprint(canonical: bytes) -> str:
    return sha256_b64url(canonical)


def thumbprint_of(public_key: Any) -> str:
    """Thumbprint of a ``cryptography`` public (or private) key."""
    return compute_thumbprint(canonical_json(extract_parameters(public_key)))


def thumbprint_of_jwk(jwk: Mapping[str, Any]) -> str:
    """Thumbprint of a JWK mapping; optional members like kid/alg are ignored."""
    return compute_thumbprint(canonical_json(thumbprint_parameters(jwk)))


__all__ = ["compute_thumbprint", "thumbprint_of", "thumbprint_of_jwk"]
