"""Polynomials over GF(32) and the bech32/codex32 checksum reduction.

A polynomial is an ordered list of field elements. For the checksum
routines index 0 is the earliest-received symbol, i.e. the coefficient of
the highest power of x, which is also the side leading zeros are stripped
from.

The reduction ("polymod") is the shift register both BIP-173 and BIP-93
describe: it divides the input by a monic generator polynomial and keeps
the remainder, one symbol at a time.
"""

from __future__ import annotations

from typing import Iterable, Iterator, List, Sequence, Union

from gf32 import Fe, ONE, ZERO


# Codex32 generator, x^13 coefficient omitted (BIP-93 ms32_polymod GEN[0])
CODEX32_GENERATOR = tuple(
    Fe(v) for v in (25, 27, 17, 8, 0, 25, 25, 25, 31, 27, 24, 16, 16)
)

# Bech32 generator, x^6 coefficient omitted (BIP-173 GEN[0])
BECH32_GENERATOR = tuple(Fe(v) for v in (29, 22, 20, 21, 29, 18))


class FePoly:
    """A polynomial with coefficients in GF(32)."""

    __slots__ = ("_coeffs",)

    def __init__(self, coeffs: Union[Fe, Iterable[Fe], None] = None) -> None:
        if coeffs is None:
            self._coeffs: List[Fe] = []
        elif isinstance(coeffs, Fe):
            self._coeffs = [coeffs]
        else:
            self._coeffs = list(coeffs)
        for fe in self._coeffs:
            if not isinstance(fe, Fe):
                raise TypeError(f"FePoly coefficients must be Fe, got {type(fe).__name__}")

    @classmethod
    def from_str(cls, s: str) -> "FePoly":
        """Parse a string of upper-case bech32 characters."""
        return cls(Fe.from_char(c) for c in s)

    @classmethod
    def from_list(cls, values: Iterable[int]) -> "FePoly":
        return cls(Fe.from_bin(v) for v in values)

    def to_list(self) -> List[int]:
        return [fe.value for fe in self._coeffs]

    def coefficient(self, idx: int) -> Fe:
        """Return coefficient idx, or zero past the end of the polynomial."""
        if 0 <= idx < len(self._coeffs):
            return self._coeffs[idx]
        return ZERO

    def __iter__(self) -> Iterator[Fe]:
        return iter(self._coeffs)

    def __len__(self) -> int:
        return len(self._coeffs)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FePoly):
            return NotImplemented
        return self._coeffs == other._coeffs

    def __hash__(self) -> int:
        return hash(tuple(self._coeffs))

    def __str__(self) -> str:
        return "".join(fe.to_char() for fe in self._coeffs)

    def __repr__(self) -> str:
        return f"FePoly({str(self)!r})"

    def normalized(self) -> "FePoly":
        """Return a copy with leading zero coefficients dropped."""
        for i, fe in enumerate(self._coeffs):
            if fe != ZERO:
                return FePoly(self._coeffs[i:])
        return FePoly()

    def polymod(self, generator: Sequence[Fe]) -> "FePoly":
        """Reduce this polynomial modulo a monic generator.

        Args:
            generator: Generator coefficients below the leading term, highest
                degree first (CODEX32_GENERATOR, BECH32_GENERATOR, ...)

        Returns:
            The normalized residue as a new polynomial

        Raises:
            ValueError: If the generator is empty
        """
        length = len(generator)
        if length == 0:
            raise ValueError("Generator polynomial must have at least one coefficient")

        residue = [ZERO] * length
        for fe in self._coeffs:
            # Multiply residue by x
            carry = residue[0]
            residue = residue[1:]
            # Add next symbol
            residue.append(fe)
            # Replace carry*x^L by carry*generator
            if carry != ZERO:
                residue = [r + carry * g for r, g in zip(residue, generator)]

        return FePoly(residue).normalized()

    def codex32_polymod(self) -> "FePoly":
        """Reduce modulo the codex32 generator polynomial."""
        return self.polymod(CODEX32_GENERATOR)

    def bech32_polymod(self) -> "FePoly":
        """Reduce modulo the bech32 generator polynomial."""
        return self.polymod(BECH32_GENERATOR)

    @staticmethod
    def hrp_symbols(hrp: Union[str, bytes]) -> List[Fe]:
        """Expand a human-readable prefix into checksum input symbols.

        The expansion is a leading 1, the high 3 bits of every byte, a 0
        separator, then the low 5 bits of every byte.
        """
        raw = hrp.encode("utf-8") if isinstance(hrp, str) else bytes(hrp)
        symbols = [ONE]
        symbols.extend(Fe(b >> 5) for b in raw)
        symbols.append(ZERO)
        symbols.extend(Fe(b & 0x1F) for b in raw)
        return symbols

    @classmethod
    def hrp_residue(cls, hrp: Union[str, bytes], generator: Sequence[Fe]) -> "FePoly":
        """Residue of a human-readable prefix, padded by len(generator) zeros."""
        symbols = cls.hrp_symbols(hrp)
        symbols.extend([ZERO] * len(generator))
        return cls(symbols).polymod(generator)

    @classmethod
    def codex32_hrp_residue(cls, hrp: Union[str, bytes]) -> "FePoly":
        return cls.hrp_residue(hrp, CODEX32_GENERATOR)

    @classmethod
    def bech32_hrp_residue(cls, hrp: Union[str, bytes]) -> "FePoly":
        return cls.hrp_residue(hrp, BECH32_GENERATOR)
