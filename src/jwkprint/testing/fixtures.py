"""Fixed key material for tests.

The resources next to this module never change between runs, so the
constants below can be asserted against directly:

  public.key       SubjectPublicKeyInfo (DER) of the RSA_2048 key
  cert.pem         self-signed X.509 certificate (PEM)
  cert.der         the same certificate (DER)
  cert.key         PKCS#8 (DER) private key of the certificate
  cert-public.key  SubjectPublicKeyInfo (DER) of the certificate key

Regenerate a key and its constants with ``jwkprint generate``.
"""
from __future__ import annotations

import os
from dataclasses import dataclass

from cryptography import x509

from .. import config
from ..crypto.certcodec import decode_certificate
from ..crypto.keycodec import KeyPair, decode_public_key, load_key_pair
from ..errors import DecodeError

# resources are a few KiB at most
MAX_RESOURCE_BYTES = 64 * 1024


@dataclass(frozen=True)
class FixtureConstants:
    n: str
    e: str
    kty: str
    thumbprint: str


RSA_2048 = FixtureConstants(
    n=(
        "pZsTKY41y_CwgJ0VX7BmmGs_7UprmXQMGPcnSbBeJAjZHA9SyyJKaWv4fNUdBIAX3Y2QoZixj50n"
        "QLyLv2ng3pvEoRL0sx9ZHgp5ndAjpIiVQ_8V01TTYCEDUc9ii7bjVkgFAb4ValZGFJZ54PcCnAHv"
        "Xi5g0ELORzGcTuRqHVAUckMV2otr0g0u_5bWMm6EMAbBrGQCgUGjbZQHjava1Y-5tHXZkPBahJ2L"
        "vKRqMmJUlr0anKuJJtJUG03DJYAxABv8YAaXFBnGw6kKJRpUFAC55ry4sp4kGy0NrK2TVWmZW9kS"
        "tniRv4RaJGI9aZGYwQy2kUykibBNmWEQUlIwIw"
    ),
    e="AQAB",
    kty="RSA",
    thumbprint="HnWjTDnyqlCrm6tZ-6wX-TrEXgRdeNu9G71gqxSO6o0",
)

N = RSA_2048.n
E = RSA_2048.e
KTY = RSA_2048.kty
THUMBPRINT = RSA_2048.thumbprint


def read_resource(name: str) -> bytes:
    path = os.path.join(config.FIXTURE_DIR, name)
    with open(path, "rb") as f:
        data = f.read(MAX_RESOURCE_BYTES + 1)
    if len(data) > MAX_RESOURCE_BYTES:
        raise DecodeError(f"fixture resource {name!r} exceeds {MAX_RESOURCE_BYTES} bytes")
    return data


def read_resource_text(name: str) -> str:
    """A resource decoded as UTF-8 text."""
    try:
        return read_resource(name).decode("utf-8")
    except UnicodeDecodeError as e:
        raise DecodeError(f"fixture resource {name!r} is not UTF-8 text") from e


def create_public_key():
    """The RSA_2048 public key; its thumbprint is THUMBPRINT."""
    return decode_public_key(read_resource("public.key"), KTY)


def create_key_pair() -> KeyPair:
    """RSA key pair of the fixture certificate."""
    return load_key_pair(read_resource("cert-public.key"), read_resource("cert.key"), "RSA")


def create_certificate() -> x509.Certificate:
    return decode_certificate(read_resource("cert.pem"))


__all__ = [
    "FixtureConstants",
    "RSA_2048",
    "N",
    "E",
    "KTY",
    "THUMBPRINT",
    "read_resource",
    "read_resource_text",
    "create_public_key",
    "create_key_pair",
    "create_certificate",
]
