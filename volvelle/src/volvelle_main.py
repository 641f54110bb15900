"""Terminal CLI for bech32/codex32 checksum residues."""

from __future__ import annotations

import argparse
from typing import List, Optional

import volvelle_view as view
from bech32_checksum import (
    BECH32M_TARGET,
    BECH32_TARGET,
    CODEX32_TARGET,
    bech32_encode,
    bech32_residue,
    codex32_encode,
    codex32_residue,
    split_hrp,
    verify_bech32,
    verify_codex32,
)
from fepoly import FePoly
from gf32 import Fe

CODEX32_HRP = "ms"


def _normalize_input(value: str) -> str:
    return "".join(value.split()).replace("-", "")


def _normalize_checksummed(value: str) -> str:
    """Drop whitespace, and group separators from the data part only.

    '-' is a legal HRP character, so the HRP is kept as typed.
    """
    compact = "".join(value.split())
    pos = compact.rfind("1")
    return compact[: pos + 1] + compact[pos + 1 :].replace("-", "")


def cmd_verify(args: argparse.Namespace) -> int:
    s = _normalize_checksummed(args.string)
    hrp, _ = split_hrp(s)
    if hrp == CODEX32_HRP:
        view.display_residue("Residue", codex32_residue(s))
        view.display_verification("codex32", verify_codex32(s), CODEX32_TARGET)
        return 0

    view.display_residue("Residue", bech32_residue(s))
    if verify_bech32(s, bech32m=True):
        view.display_verification("bech32m", True, BECH32M_TARGET)
    else:
        view.display_verification("bech32", verify_bech32(s), BECH32_TARGET)
    return 0


def cmd_hrp_residue(args: argparse.Namespace) -> int:
    if args.bech32:
        view.display_residue("bech32 HRP residue", FePoly.bech32_hrp_residue(args.hrp))
    else:
        view.display_residue("codex32 HRP residue", FePoly.codex32_hrp_residue(args.hrp))
    return 0


def cmd_checksum(args: argparse.Namespace) -> int:
    payload = _normalize_input(args.data)
    data = [Fe.from_char(c) for c in payload.upper()]
    if args.bech32 or args.bech32m:
        encoded = bech32_encode(args.hrp, data, bech32m=args.bech32m)
    else:
        encoded = codex32_encode(args.hrp, data)
    view.display_encoded(encoded, uppercase=payload.isupper())
    return 0


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="bech32/codex32 checksum residues")
    sub = parser.add_subparsers(dest="command", required=True)

    verify = sub.add_parser("verify", help="Compute the residue of a checksummed string.")
    verify.add_argument("string", help="Full bech32 or codex32 string, checksum included.")
    verify.set_defaults(func=cmd_verify)

    hrp_residue = sub.add_parser("hrp-residue", help="Compute the residue of an HRP.")
    hrp_residue.add_argument("hrp", help="Human-readable prefix, e.g. 'ms' or 'bc'.")
    hrp_residue.add_argument(
        "--bech32",
        action="store_true",
        help="Use the bech32 generator instead of the codex32 one.",
    )
    hrp_residue.set_defaults(func=cmd_hrp_residue)

    checksum = sub.add_parser("checksum", help="Append a checksum to a data part.")
    checksum.add_argument("hrp", help="Human-readable prefix.")
    checksum.add_argument("data", help="Data part in bech32 characters, without checksum.")
    kind = checksum.add_mutually_exclusive_group()
    kind.add_argument("--bech32", action="store_true", help="Append a bech32 checksum.")
    kind.add_argument("--bech32m", action="store_true", help="Append a bech32m checksum.")
    checksum.set_defaults(func=cmd_checksum)

    return parser.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> int:
    """CLI runner."""
    args = parse_args(argv)
    try:
        return args.func(args)
    except ValueError as exc:
        view.display_error(str(exc))
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
