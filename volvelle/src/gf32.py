"""GF(32) field elements for bech32 and codex32 checksums.

This module implements arithmetic on single elements of GF(32) = GF(2^5),
the field both bech32 (BIP-173) and codex32 (BIP-93) compute their
checksums over.

Field specification:
- Polynomial: x^5 + x^3 + 1 (irreducible over GF(2), bit mask 0b101001)
- Field elements: 0-31 (5-bit integers)
- Each element is written as one character of the bech32 alphabet

Reference: https://github.com/bitcoin/bips/blob/master/bip-0093.mediawiki
"""

from __future__ import annotations

from dataclasses import dataclass


# Bech32 alphabet in binary order: ALPHABET[i] is the character for value i
ALPHABET = "QPZRY9X8GF2TVDW0S3JN54KHCE6MUA7L"

# Reverse mapping: character -> value
ALPHABET_REV = {c: i for i, c in enumerate(ALPHABET)}

# x^5 + x^3 + 1
FIELD_MASK = 32 + 8 + 1


class InvalidCharacterError(ValueError):
    """Raised when a character is not part of the bech32 alphabet."""

    def __init__(self, char: str) -> None:
        super().__init__(f"invalid bech32 character {char!r}")
        self.char = char


@dataclass(frozen=True)
class Fe:
    """A single element of GF(32)."""

    value: int

    def __post_init__(self) -> None:
        if type(self.value) is not int or not 0 <= self.value <= 31:
            raise ValueError(f"Field element must be 0-31, got {self.value!r}")

    @classmethod
    def zero(cls) -> "Fe":
        """Additive identity."""
        return cls(0)

    @classmethod
    def one(cls) -> "Fe":
        """Multiplicative identity."""
        return cls(1)

    @classmethod
    def from_bin(cls, n: int) -> "Fe":
        """Build a field element from its 5-bit binary value."""
        return cls(n)

    @classmethod
    def from_char(cls, ch: str) -> "Fe":
        """Convert a bech32 character to a field element.

        Only the 32 upper-case alphabet characters are accepted; callers
        handling lower-case strings normalize the case first.

        Raises:
            InvalidCharacterError: If ch is not in the alphabet
        """
        try:
            return cls(ALPHABET_REV[ch])
        except (KeyError, TypeError):
            raise InvalidCharacterError(ch) from None

    def to_char(self) -> str:
        return ALPHABET[self.value]

    def __str__(self) -> str:
        return self.to_char()

    def __int__(self) -> int:
        return self.value

    def __add__(self, other: object) -> "Fe":
        if not isinstance(other, Fe):
            return NotImplemented
        return Fe(self.value ^ other.value)

    # Characteristic 2: subtraction is addition
    __sub__ = __add__

    def __mul__(self, other: object) -> "Fe":
        """Carry-less multiplication reduced by x^5 + x^3 + 1."""
        if not isinstance(other, Fe):
            return NotImplemented
        a = self.value
        b = other.value
        ret = 0
        while a > 0:
            if a & 1:
                ret ^= b
            a >>= 1
            b <<= 1
            if b & 32:
                b ^= FIELD_MASK
        return Fe(ret)

    def __pow__(self, n: int) -> "Fe":
        """Raise to an integer power by square-and-multiply.

        Negative exponents invert first, so 0 ** -n raises ZeroDivisionError.
        """
        if n < 0:
            return self.inverse() ** -n
        ret = ONE
        base = self
        while n > 0:
            if n & 1:
                ret = ret * base
            base = base * base
            n >>= 1
        return ret

    def inverse(self) -> "Fe":
        """Multiplicative inverse.

        The multiplicative group has order 31, so inv(a) = a^30.

        Raises:
            ZeroDivisionError: If the element is zero
        """
        if self.value == 0:
            raise ZeroDivisionError("Zero has no multiplicative inverse")
        return self ** 30

    def __truediv__(self, other: object) -> "Fe":
        if not isinstance(other, Fe):
            return NotImplemented
        if other.value == 0:
            raise ZeroDivisionError("Division by zero in GF(32)")
        return self * other.inverse()


ZERO = Fe(0)
ONE = Fe(1)
