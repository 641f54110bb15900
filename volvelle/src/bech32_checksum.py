"""Checksum creation and verification for whole bech32/codex32 strings."""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

from embit.bech32 import convertbits

from fepoly import BECH32_GENERATOR, CODEX32_GENERATOR, FePoly
from gf32 import Fe, ONE, ZERO


# Residues a valid string reduces to
BECH32_TARGET = FePoly(ONE)
BECH32M_TARGET = FePoly.from_str("4USV9R")
CODEX32_TARGET = FePoly.from_str("SECRETSHARE32")

# Longer codex32 strings use the 15-symbol long checksum
CODEX32_MAX_DATA_LEN = 93


class ChecksumFormatError(ValueError):
    """Raised when a string cannot be split into HRP and data symbols."""


def _is_single_case(value: str) -> bool:
    return value == value.lower() or value == value.upper()


def split_hrp(s: str) -> Tuple[str, List[Fe]]:
    """Split a checksummed string into its lower-case HRP and data symbols.

    The data symbols include the trailing checksum.

    Raises:
        ChecksumFormatError: On non-printable input, mixed case or a
            missing separator
        InvalidCharacterError: If the data part has a non-bech32 character
    """
    if any(ord(x) < 33 or ord(x) > 126 for x in s):
        raise ChecksumFormatError("Input contains invalid characters")
    if not _is_single_case(s):
        raise ChecksumFormatError("Input must be single-case")
    pos = s.rfind("1")
    if pos < 1:
        raise ChecksumFormatError("Input is missing the '1' separator")
    hrp = s[:pos].lower()
    data = [Fe.from_char(c) for c in s[pos + 1 :].upper()]
    return hrp, data


def residue(hrp: str, data: Iterable[Fe], generator: Sequence[Fe]) -> FePoly:
    """Reduce an HRP followed by data symbols modulo a generator."""
    return FePoly(FePoly.hrp_symbols(hrp) + list(data)).polymod(generator)


def codex32_residue(s: str) -> FePoly:
    hrp, data = split_hrp(s)
    return residue(hrp, data, CODEX32_GENERATOR)


def bech32_residue(s: str) -> FePoly:
    hrp, data = split_hrp(s)
    return residue(hrp, data, BECH32_GENERATOR)


def verify_codex32(s: str) -> bool:
    """Check a short codex32 string against the SECRETSHARE32 target."""
    hrp, data = split_hrp(s)
    if not len(CODEX32_GENERATOR) <= len(data) <= CODEX32_MAX_DATA_LEN:
        return False
    return residue(hrp, data, CODEX32_GENERATOR) == CODEX32_TARGET


def verify_bech32(s: str, bech32m: bool = False) -> bool:
    hrp, data = split_hrp(s)
    if len(data) < len(BECH32_GENERATOR):
        return False
    target = BECH32M_TARGET if bech32m else BECH32_TARGET
    return residue(hrp, data, BECH32_GENERATOR) == target


def _pad(poly: FePoly, length: int) -> List[Fe]:
    # Residues are normalized, so missing coefficients are leading zeros
    return [ZERO] * (length - len(poly)) + list(poly)


def create_checksum(
    hrp: str,
    data: Iterable[Fe],
    generator: Sequence[Fe],
    target: FePoly,
) -> List[Fe]:
    """Compute the checksum symbols that make hrp + data reduce to target.

    Returns:
        len(generator) symbols to append to data
    """
    length = len(generator)
    values = FePoly.hrp_symbols(hrp) + list(data) + [ZERO] * length
    remainder = FePoly(values).polymod(generator)
    return [r + t for r, t in zip(_pad(remainder, length), _pad(target, length))]


def _encode(hrp: str, data: List[Fe], checksum: List[Fe]) -> str:
    return hrp + "1" + "".join(fe.to_char() for fe in data + checksum).lower()


def codex32_encode(hrp: str, data: Iterable[Fe]) -> str:
    hrp = hrp.lower()
    data = list(data)
    checksum = create_checksum(hrp, data, CODEX32_GENERATOR, CODEX32_TARGET)
    return _encode(hrp, data, checksum)


def bech32_encode(hrp: str, data: Iterable[Fe], bech32m: bool = False) -> str:
    hrp = hrp.lower()
    data = list(data)
    target = BECH32M_TARGET if bech32m else BECH32_TARGET
    checksum = create_checksum(hrp, data, BECH32_GENERATOR, target)
    return _encode(hrp, data, checksum)


def payload_to_symbols(payload: bytes) -> List[Fe]:
    """Pack bytes into 5-bit symbols, zero-padding the last one."""
    return [Fe(v) for v in convertbits(payload, 8, 5)]


def symbols_to_payload(symbols: Iterable[Fe]) -> bytes:
    """Unpack 5-bit symbols into bytes.

    Raises:
        ChecksumFormatError: If the trailing padding is longer than 4 bits
            or non-zero
    """
    values = convertbits([fe.value for fe in symbols], 5, 8, False)
    if values is None:
        raise ChecksumFormatError("Symbols do not unpack to whole bytes")
    return bytes(values)
