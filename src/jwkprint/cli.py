from __future__ import annotations

import argparse
import sys
from pathlib import Path

from cryptography.hazmat.primitives.asymmetric import rsa

from . import config
from .crypto.jwk import extract_parameters
from .crypto.keycodec import decode_public_key, encode_private_key, encode_public_key
from .crypto.thumbprint import thumbprint_of
from .errors import ThumbprintError
from .utils.logging import get_logger

log = get_logger()


def _print_constants(public_key) -> None:
    params = extract_parameters(public_key)
    # N, E (or CRV, X, Y), KTY, THUMBPRINT; nothing else goes to stdout
    for name in ("n", "e", "crv", "x", "y", "kty"):
        if name in params:
            print(f"{name.upper()} = {params[name]}")
    print(f"THUMBPRINT = {thumbprint_of(public_key)}")


def _key_size(value: str) -> int:
    size = int(value)
    if size < 1024:
        raise argparse.ArgumentTypeError("RSA key size must be at least 1024 bits")
    return size


def cmd_generate(args: argparse.Namespace) -> int:
    out = Path(args.out_dir)
    out.mkdir(parents=True, exist_ok=True)
    sk = rsa.generate_private_key(public_exponent=65537, key_size=args.key_size)
    (out / "public.key").write_bytes(encode_public_key(sk.public_key()))
    (out / "private.key").write_bytes(encode_private_key(sk))
    log.debug("wrote %s and %s", out / "public.key", out / "private.key")
    _print_constants(sk.public_key())
    return 0


def cmd_thumbprint(args: argparse.Namespace) -> int:
    key = decode_public_key(Path(args.path).read_bytes(), args.key_type)
    _print_constants(key)
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser("jwkprint")
    sub = p.add_subparsers(dest="cmd", required=True)

    p_gen = sub.add_parser("generate", help="generate an RSA fixture key pair and print its constants")
    p_gen.add_argument("--out-dir", dest="out_dir", default=".")
    p_gen.add_argument("--key-size", dest="key_size", type=_key_size, default=config.KEY_SIZE)
    p_gen.set_defaults(func=cmd_generate)

    p_tp = sub.add_parser("thumbprint", help="print the JWK constants of a SubjectPublicKeyInfo DER file")
    p_tp.add_argument("path")
    p_tp.add_argument("--key-type", dest="key_type", choices=["RSA", "EC", "OKP"], default="RSA")
    p_tp.set_defaults(func=cmd_thumbprint)

    args = p.parse_args(argv)
    try:
        return args.func(args)
    except (ThumbprintError, OSError, ValueError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
