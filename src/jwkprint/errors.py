"""Error types raised by the thumbprint pipeline.

All of them derive from :class:`ThumbprintError`, so callers that only care
whether a fixture could be prepared can catch that one class.
"""


class ThumbprintError(Exception):
    """Base class for every error raised by jwkprint."""


class DecodeError(ThumbprintError, ValueError):
    """Key or certificate bytes are malformed, or of the wrong algorithm."""


class UnsupportedKeyTypeError(ThumbprintError, TypeError):
    """No canonical JWK member set is defined for the key's algorithm."""


class EncodingError(ThumbprintError, ValueError):
    """A parameter map violates the canonical form (missing member, non-string value)."""


__all__ = ["ThumbprintError", "DecodeError", "UnsupportedKeyTypeError", "EncodingError"]
