"""Tests for GF(32) polynomials and the polymod shift register.

Tests verify:
1. Construction, zero-padded coefficient access, normalization
2. polymod against known reductions and the packed-integer reference
   implementations of BIP-93 and BIP-173
3. HRP expansion and HRP residues
"""

from __future__ import annotations

import sys
from pathlib import Path

from embit import bech32 as embit_bech32

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from fepoly import BECH32_GENERATOR, CODEX32_GENERATOR, FePoly  # noqa: E402
from gf32 import ONE, ZERO, Fe  # noqa: E402


def ms32_polymod(values):
    """Packed-integer codex32 polymod from the BIP-93 reference."""
    gen = [
        0x19DC500CE73FDE210,
        0x1BFAE00DEF77FE529,
        0x1FBD920FFFE7BEE52,
        0x1739640BDEEE3FDAD,
        0x07729A039CFC75F5A,
    ]
    residue = 0x23181B3
    for v in values:
        b = residue >> 60
        residue = (residue & 0x0FFFFFFFFFFFFFFF) << 5 ^ v
        for i in range(5):
            residue ^= gen[i] if ((b >> i) & 1) else 0
    return residue


def unpack(residue: int, length: int) -> FePoly:
    """Split a packed residue into 5-bit digits, most significant first."""
    digits = [(residue >> 5 * (length - 1 - i)) & 31 for i in range(length)]
    return FePoly.from_list(digits).normalized()


def sample_data(n: int, step: int = 7, offset: int = 3) -> list[Fe]:
    return [Fe((step * i + offset) % 32) for i in range(n)]


def test_construction():
    assert list(FePoly()) == []
    assert list(FePoly(Fe(5))) == [Fe(5)]
    assert FePoly([Fe(1), Fe(2)]).to_list() == [1, 2]
    assert FePoly.from_str("QPZ").to_list() == [0, 1, 2]
    assert FePoly.from_list([3, 4]) == FePoly([Fe(3), Fe(4)])
    assert str(FePoly.from_list([16, 25])) == "SE"

    try:
        FePoly([1, 2])
        raise AssertionError("Should have raised TypeError for int coefficients")
    except TypeError:
        pass

    print("test_construction: PASS")


def test_construction_copies_input():
    source = [Fe(1), Fe(2)]
    poly = FePoly(source)
    source.append(Fe(3))
    assert len(poly) == 2

    print("test_construction_copies_input: PASS")


def test_coefficient_out_of_range_is_zero():
    poly = FePoly.from_list([7, 9])
    assert poly.coefficient(0) == Fe(7)
    assert poly.coefficient(1) == Fe(9)
    assert poly.coefficient(2) == ZERO
    assert poly.coefficient(1000) == ZERO
    assert FePoly().coefficient(0) == ZERO

    print("test_coefficient_out_of_range_is_zero: PASS")


def test_normalized_strips_leading_zeros():
    assert FePoly.from_list([0, 0, 3, 0, 1]).normalized().to_list() == [3, 0, 1]
    assert FePoly.from_list([0, 0, 0]).normalized() == FePoly()
    poly = FePoly.from_list([0, 5])
    poly.normalized()
    assert poly.to_list() == [0, 5]

    print("test_normalized_strips_leading_zeros: PASS")


def test_polymod_zero_input():
    for generator in (CODEX32_GENERATOR, BECH32_GENERATOR):
        zeros = FePoly([ZERO] * len(generator))
        assert zeros.polymod(generator) == FePoly()
    assert FePoly().codex32_polymod() == FePoly()

    print("test_polymod_zero_input: PASS")


def test_polymod_short_input_is_unchanged():
    poly = FePoly.from_list([0, 4, 9, 31])
    assert poly.codex32_polymod() == poly.normalized()
    assert poly.bech32_polymod() == poly.normalized()

    print("test_polymod_short_input_is_unchanged: PASS")


def test_polymod_leading_term_folds_into_generator():
    """x^L reduces to the generator's lower coefficients."""
    for generator in (CODEX32_GENERATOR, BECH32_GENERATOR):
        x_l = FePoly([ONE] + [ZERO] * len(generator))
        assert x_l.polymod(generator) == FePoly(generator).normalized()

    print("test_polymod_leading_term_folds_into_generator: PASS")


def test_polymod_does_not_mutate():
    poly = FePoly(sample_data(30))
    before = poly.to_list()
    poly.codex32_polymod()
    poly.bech32_polymod()
    assert poly.to_list() == before

    print("test_polymod_does_not_mutate: PASS")


def test_polymod_custom_generators():
    # x + 7: reducing x gives 7
    assert FePoly([ONE, ZERO]).polymod([Fe(7)]) == FePoly(Fe(7))

    try:
        FePoly([ONE]).polymod([])
        raise AssertionError("Should have raised ValueError for empty generator")
    except ValueError:
        pass

    print("test_polymod_custom_generators: PASS")


def test_codex32_polymod_matches_reference():
    prefix = [Fe(v) for v in (1, 3, 3, 0, 13, 19)]
    for n in (0, 5, 13, 45, 71):
        for step in (1, 7, 11):
            data = sample_data(n, step=step)
            ours = FePoly(prefix + data).codex32_polymod()
            theirs = unpack(ms32_polymod([fe.value for fe in data]), 13)
            assert ours == theirs, f"mismatch for n={n} step={step}"

    print("test_codex32_polymod_matches_reference: PASS")


def test_bech32_polymod_matches_reference():
    for hrp in ("bc", "tb", "a", "abcdef"):
        for n in (0, 6, 20, 39):
            data = sample_data(n, step=5, offset=1)
            ours = FePoly(FePoly.hrp_symbols(hrp) + data).bech32_polymod()
            values = embit_bech32.bech32_hrp_expand(hrp) + [fe.value for fe in data]
            theirs = unpack(embit_bech32.bech32_polymod(values), 6)
            assert ours == theirs, f"mismatch for hrp={hrp} n={n}"

    print("test_bech32_polymod_matches_reference: PASS")


def test_hrp_symbols():
    assert [fe.value for fe in FePoly.hrp_symbols("ms")] == [1, 3, 3, 0, 13, 19]
    assert FePoly.hrp_symbols(b"ms") == FePoly.hrp_symbols("ms")
    assert [fe.value for fe in FePoly.hrp_symbols("")] == [1, 0]

    print("test_hrp_symbols: PASS")


def test_hrp_residue_matches_reference_start_state():
    """BIP-93 starts ms32_polymod from the residue of the 'ms' prefix."""
    start = unpack(0x23181B3, 13)
    assert FePoly(FePoly.hrp_symbols("ms")).codex32_polymod() == start

    # The padded HRP residue is the start state shifted by x^13
    shifted = FePoly(list(start) + [ZERO] * 13).codex32_polymod()
    assert FePoly.codex32_hrp_residue("ms") == shifted

    print("test_hrp_residue_matches_reference_start_state: PASS")


def test_hrp_residue_is_deterministic():
    for hrp in ("ms", "bc", "tb", "an83characterlonghumanreadablepart"):
        assert FePoly.codex32_hrp_residue(hrp) == FePoly.codex32_hrp_residue(hrp)
        assert FePoly.bech32_hrp_residue(hrp) == FePoly.bech32_hrp_residue(hrp)
        assert len(FePoly.codex32_hrp_residue(hrp)) <= 13
        assert len(FePoly.bech32_hrp_residue(hrp)) <= 6
    assert FePoly.bech32_hrp_residue("bc") != FePoly.bech32_hrp_residue("tb")

    print("test_hrp_residue_is_deterministic: PASS")


def main():
    """Run all tests."""
    test_construction()
    test_construction_copies_input()
    test_coefficient_out_of_range_is_zero()
    test_normalized_strips_leading_zeros()
    test_polymod_zero_input()
    test_polymod_short_input_is_unchanged()
    test_polymod_leading_term_folds_into_generator()
    test_polymod_does_not_mutate()
    test_polymod_custom_generators()
    test_codex32_polymod_matches_reference()
    test_bech32_polymod_matches_reference()
    test_hrp_symbols()
    test_hrp_residue_matches_reference_start_state()
    test_hrp_residue_is_deterministic()
    print("\nAll FePoly tests passed!")


if __name__ == "__main__":
    main()
