"""Codex32 share strings with possibly unreadable symbols."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, List, Optional

from bech32_checksum import residue
from fepoly import CODEX32_GENERATOR, FePoly
from gf32 import Fe

UNKNOWN_MARKERS = "?_"


@dataclass
class Share:
    """Data part of a codex32 share; None marks an unknown symbol."""

    symbols: List[Optional[Fe]] = field(default_factory=list)

    @classmethod
    def from_str(cls, s: str) -> "Share":
        symbols: List[Optional[Fe]] = []
        for c in "".join(s.split()).upper():
            symbols.append(None if c in UNKNOWN_MARKERS else Fe.from_char(c))
        return cls(symbols)

    def __str__(self) -> str:
        return "".join("_" if fe is None else fe.to_char() for fe in self.symbols)

    def __len__(self) -> int:
        return len(self.symbols)

    def __iter__(self) -> Iterator[Optional[Fe]]:
        return iter(self.symbols)

    def is_complete(self) -> bool:
        return all(fe is not None for fe in self.symbols)

    def unknown_positions(self) -> List[int]:
        return [i for i, fe in enumerate(self.symbols) if fe is None]

    def to_poly(self) -> FePoly:
        """Return the share as a polynomial.

        Raises:
            ValueError: If any symbol is still unknown
        """
        missing = self.unknown_positions()
        if missing:
            positions = ", ".join(str(i) for i in missing)
            raise ValueError(f"Share has unknown symbols at position(s): {positions}")
        return FePoly(self.symbols)

    def residue(self, hrp: str = "ms") -> FePoly:
        """Codex32 residue of the share mixed with its HRP."""
        return residue(hrp.lower(), self.to_poly(), CODEX32_GENERATOR)
