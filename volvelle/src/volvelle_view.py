"""Terminal output helpers for the volvelle CLI."""

from __future__ import annotations

from fepoly import FePoly


def display_error(message: str) -> None:
    print(f"Error: {message}")


def display_residue(label: str, residue: FePoly) -> None:
    """Print a residue as characters and as 5-bit values."""
    rendered = str(residue) or "(zero)"
    values = " ".join(str(v) for v in residue.to_list())
    print(f"{label}: {rendered}")
    if values:
        print(f"  values: {values}")


def display_verification(kind: str, valid: bool, target: FePoly) -> None:
    if valid:
        print(f"Valid {kind} checksum (residue {target}).")
    else:
        print(f"Invalid {kind} checksum: expected residue {target}.")


def display_encoded(encoded: str, uppercase: bool = False) -> None:
    print(encoded.upper() if uppercase else encoded)
