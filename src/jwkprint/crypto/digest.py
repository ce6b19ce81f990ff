import base64
import binascii
import hashlib
import re

from ..errors import DecodeError

_B64URL_RE = re.compile(r"^[A-Za-z0-9_-]*$")


def b64url_encode(data: bytes) -> str:
    """Base64url encode without '=' padding."""
    return base64.urlsafe_b64encode(data).decode("ascii").rstrip("=")


def b64url_decode(text: str) -> bytes:
    if not _B64URL_RE.match(text) or len(text) % 4 == 1:
        raise DecodeError("invalid base64url value")
    try:
        return base64.urlsafe_b64decode(text + "=" * (-len(text) % 4))
    except binascii.Error as e:
        raise DecodeError("invalid base64url value") from e


def sha256_b64url(data: bytes) -> str:
    return b64url_encode(hashlib.sha256(data).digest())
