"""
affine_crypto.modular — arithmetic core tests
=============================================
Run with:  python -m pytest tests/ -v
"""

import sys
import os
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import pytest
from affine_crypto.modular import (
    MODULUS, extended_gcd, gcd, is_coprime, mod_inverse, norm,
)

UNITS = (1, 3, 5, 7, 9, 11, 15, 17, 19, 21, 23, 25)

# ── gcd ──────────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("a, b, expected", [
    (5, 26, 1), (4, 26, 2), (13, 26, 13), (0, 26, 26), (26, 0, 26),
    (-4, 26, 2), (27, 26, 1),
])
def test_gcd(a, b, expected):
    assert gcd(a, b) == expected

def test_coprime_residues_are_the_units():
    assert tuple(a for a in range(MODULUS) if is_coprime(a)) == UNITS

# ── extended Euclid ──────────────────────────────────────────────────────────
@pytest.mark.parametrize("a, b", [(5, 26), (26, 5), (4, 26), (17, 26), (240, 46), (0, 7)])
def test_extended_gcd_bezout_identity(a, b):
    g, u, v = extended_gcd(a, b)
    assert g == gcd(a, b)
    assert a * u + b * v == g

def test_extended_gcd_known_coefficients():
    assert extended_gcd(5, 26) == (1, -5, 1)

# ── modular inverse ──────────────────────────────────────────────────────────
@pytest.mark.parametrize("a", UNITS)
def test_mod_inverse_is_inverse(a):
    inv = mod_inverse(a)
    assert 0 <= inv < MODULUS
    assert (a * inv) % MODULUS == 1

def test_mod_inverse_known_values():
    assert mod_inverse(5) == 21
    assert mod_inverse(1) == 1
    assert mod_inverse(25) == 25
    assert mod_inverse(3, 7) == 5

@pytest.mark.parametrize("a", [0, 2, 4, 13, 26])
def test_mod_inverse_rejects_non_units(a):
    with pytest.raises(ValueError):
        mod_inverse(a)

# ── normalization ────────────────────────────────────────────────────────────
@pytest.mark.parametrize("r, expected", [
    (-26, 0), (-1, 25), (0, 0), (25, 25),
    (26, 0), (-27, 25), (-52, 0), (-25, 1), (105, 1),
])
def test_norm_boundaries(r, expected):
    assert norm(r) == expected

def test_norm_matches_python_modulo():
    for r in range(-100, 100):
        assert norm(r) == r % MODULUS
