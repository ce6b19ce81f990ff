# Canonical JSON for JWK thumbprint input (RFC 7638 section 3).
# Members are flat string -> string pairs, so no number or nesting rules apply.
import json
from typing import Mapping

from ..errors import EncodingError


def _check_str(s, what: str) -> str:
    if not isinstance(s, str):
        raise EncodingError(f"JWK {what} must be strings, got {type(s).__name__}")
    return s


def _quote(s: str) -> str:
    # ensure_ascii=False: only '"', '\\' and control characters get escaped
    return json.dumps(s, ensure_ascii=False)


def canonical_json(params: Mapping[str, str]) -> bytes:
    try:
        # member names ordered by UTF-16 code units (RFC 8785 section 3.2.3)
        names = sorted(params.keys(), key=lambda k: _check_str(k, "member names").encode("utf-16-be"))
        members = [_quote(k) + ":" + _quote(_check_str(params[k], "member values")) for k in names]
        return ("{" + ",".join(members) + "}").encode("utf-8")
    except UnicodeEncodeError as e:
        raise EncodingError("JWK members must be valid Unicode text") from e


__all__ = ["canonical_json"]
