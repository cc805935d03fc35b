"""
Modular arithmetic over Z/26
============================
The only part of the Affine cipher with real correctness requirements:

  gcd            — key legality (A must be a unit mod 26)
  extended_gcd   — Bézout coefficients (u, v) with a*u + m*v = gcd(a, m)
  mod_inverse    — A⁻¹ in [0, m), derived from u
  norm           — folds any integer, negative ones included, into [0, m)

All functions are pure and take plain ints.
"""

from typing import Tuple

MODULUS = 26


# -----------------------------------------------------------------------------

# GCD / EXTENDED EUCLID

# -----------------------------------------------------------------------------

def gcd(a: int, b: int) -> int:
    """Greatest common divisor, always non-negative."""
    a, b = abs(a), abs(b)
    while b:
        a, b = b, a % b
    return a


def extended_gcd(a: int, b: int) -> Tuple[int, int, int]:
    """
    Iterative extended Euclidean algorithm.

    Returns (g, u, v) such that a*u + b*v == g == gcd(a, b).
    Keeps the pairs (old_r, r), (old_u, u), (old_v, v) and advances
    them together on each quotient step.
    """
    old_r, r = a, b
    old_u, u = 1, 0
    old_v, v = 0, 1
    while r != 0:
        q = old_r // r
        old_r, r = r, old_r - q * r
        old_u, u = u, old_u - q * u
        old_v, v = v, old_v - q * v
    if old_r < 0:
        old_r, old_u, old_v = -old_r, -old_u, -old_v
    return old_r, old_u, old_v


def is_coprime(a: int, m: int = MODULUS) -> bool:
    return gcd(a, m) == 1


# -----------------------------------------------------------------------------

# INVERSE / NORMALIZATION

# -----------------------------------------------------------------------------

def mod_inverse(a: int, m: int = MODULUS) -> int:
    """
    Multiplicative inverse of `a` modulo `m`, in [0, m).
    Raises ValueError if `a` is not a unit mod `m`.
    """
    g, u, _ = extended_gcd(a, m)
    if g != 1:
        raise ValueError(f"{a} has no inverse modulo {m} (gcd={g}).")
    return ((u % m) + m) % m


def norm(r: int, m: int = MODULUS) -> int:
    """
    Canonical residue of `r` in [0, m).

    Negative input: m - (|r| mod m), or 0 when |r| is a multiple of m.
    norm(-26) == 0, norm(-1) == 25, norm(0) == 0, norm(25) == 25.
    """
    if r < 0:
        rem = (-r) % m
        return m - rem if rem != 0 else 0
    return r % m
