"""
affine_crypto
=============
Classical Affine substitution cipher over a 26-symbol alphabet.

    E(x) = (A*x + B) mod 26        D(y) = A⁻¹ * (y - B) mod 26

Modules:
    modular   — gcd, extended Euclid, modular inverse, residue normalization
    alphabet  — Alphabet (symbol <-> residue), default ENGLISH A–Z
    affine    — key validation, residue transforms, contexts, text layer

License: Apache 2.0
"""

__version__ = "1.0.0"

from .alphabet import ENGLISH, Alphabet, UnknownCharacterError
from .modular  import extended_gcd, gcd, mod_inverse, norm
from .affine   import (
    AffineCipher,
    DecryptionContext,
    EncryptionContext,
    InvalidKeyError,
    KeyPair,
    decode,
    decrypt,
    encode,
    encrypt,
    is_valid_multiplier,
    valid_multipliers,
    validate,
)

__all__ = [
    "ENGLISH",
    "Alphabet",
    "UnknownCharacterError",
    "extended_gcd",
    "gcd",
    "mod_inverse",
    "norm",
    "AffineCipher",
    "DecryptionContext",
    "EncryptionContext",
    "InvalidKeyError",
    "KeyPair",
    "decode",
    "decrypt",
    "encode",
    "encrypt",
    "is_valid_multiplier",
    "valid_multipliers",
    "validate",
]
