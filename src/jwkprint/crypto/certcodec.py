from __future__ import annotations

from cryptography import x509
from cryptography.hazmat.primitives import serialization

from ..errors import DecodeError
from ..utils.logging import get_logger

log = get_logger()

PEM_HEADER = b"-----BEGIN CERTIFICATE-----"
DER_SEQUENCE = 0x30


def detect_encoding(data: bytes) -> str:
    """Return "pem" or "der"; anything else is a DecodeError."""
    if not isinstance(data, (bytes, bytearray)):
        raise DecodeError(f"certificate data must be bytes, got {type(data).__name__}")
    stripped = data.lstrip(b" \t\r\n")
    if stripped.startswith(PEM_HEADER):
        return "pem"
    if data[:1] == bytes([DER_SEQUENCE]):
        return "der"
    raise DecodeError("unsupported certificate encoding")


def decode_certificate(data: bytes) -> x509.Certificate:
    encoding = detect_encoding(data)
    data = bytes(data)
    try:
        if encoding == "pem":
            return x509.load_pem_x509_certificate(data)
        return x509.load_der_x509_certificate(data)
    except ValueError as e:
        log.debug("X.509 %s decode failed: %s", encoding, e)
        raise DecodeError(f"malformed {encoding.upper()} certificate") from e


def encode_certificate(cert: x509.Certificate, pem: bool = True) -> bytes:
    encoding = serialization.Encoding.PEM if pem else serialization.Encoding.DER
    return cert.public_bytes(encoding)


__all__ = ["decode_certificate", "detect_encoding", "encode_certificate"]
