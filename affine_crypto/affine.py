"""
Affine Substitution Cipher
==========================
Monoalphabetic cipher keyed by a pair (A, B):

    E(x) = (A*x + B) mod 26
    D(y) = A⁻¹ * (y - B) mod 26

A must be coprime to 26, otherwise E is not a bijection and D does
not exist. Only 12 multipliers qualify, so the whole keyspace is
12 * 26 = 312 keys — trivially brute-forced. Educational baseline.

Key legality is checked when a KeyPair is built, so every
EncryptionContext / DecryptionContext in existence can decode.
Text handling: input is upper-cased and stripped of whitespace,
output is lower-case. Any other symbol outside the alphabet raises
UnknownCharacterError.
"""

import logging
from typing import Tuple

from .alphabet import ENGLISH, Alphabet, UnknownCharacterError
from .modular import MODULUS, gcd, is_coprime, mod_inverse, norm

logger = logging.getLogger(__name__)


class InvalidKeyError(ValueError):
    """Multiplier not coprime to modulus."""


# -----------------------------------------------------------------------------

# KEY VALIDATION

# -----------------------------------------------------------------------------

def validate(a: int) -> None:
    """Raise InvalidKeyError unless gcd(a, 26) == 1."""
    g = gcd(a, MODULUS)
    if g != 1:
        raise InvalidKeyError(
            f"Multiplier {a} not coprime to modulus {MODULUS} (gcd={g})."
        )


def is_valid_multiplier(a: int) -> bool:
    return is_coprime(a, MODULUS)


def valid_multipliers() -> Tuple[int, ...]:
    """The units of Z/26: 1, 3, 5, 7, 9, 11, 15, 17, 19, 21, 23, 25."""
    return tuple(a for a in range(MODULUS) if is_valid_multiplier(a))


class KeyPair:
    """
    Validated (A, B) key. Both components are reduced mod 26 first,
    so A=27 is the same key as A=1.
    """

    __slots__ = ("_a", "_b")

    def __init__(self, a: int, b: int):
        for name, value in (("A", a), ("B", b)):
            if isinstance(value, bool) or not isinstance(value, int):
                raise TypeError(f"Key component {name} must be an int.")
        a, b = a % MODULUS, b % MODULUS
        validate(a)
        self._a = a
        self._b = b

    @property
    def a(self) -> int:
        return self._a

    @property
    def b(self) -> int:
        return self._b

    def __iter__(self):
        return iter((self._a, self._b))

    def __eq__(self, other):
        if not isinstance(other, KeyPair):
            return NotImplemented
        return (self._a, self._b) == (other._a, other._b)

    def __hash__(self):
        return hash((self._a, self._b))

    def __repr__(self):
        return f"KeyPair(a={self._a}, b={self._b})"


# -----------------------------------------------------------------------------

# RESIDUE TRANSFORMS

# -----------------------------------------------------------------------------

def encode(x: int, key: KeyPair) -> int:
    return (key.a * x + key.b) % MODULUS


def decode(y: int, key: KeyPair) -> int:
    return norm(mod_inverse(key.a, MODULUS) * (y - key.b))


class EncryptionContext:
    """Forward map for one key over one alphabet."""

    __slots__ = ("_key", "_alphabet")

    def __init__(self, key: KeyPair, alphabet: Alphabet = ENGLISH):
        validate(key.a)
        self._key = key
        self._alphabet = alphabet
        logger.debug(f"EncryptionContext a={key.a} b={key.b}")

    @property
    def key(self) -> KeyPair:
        return self._key

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    def apply(self, x: int) -> int:
        return encode(x, self._key)

    def inverse(self) -> "DecryptionContext":
        return DecryptionContext(self._key, self._alphabet)

    def __repr__(self):
        return f"EncryptionContext({self._key!r})"


class DecryptionContext:
    """Inverse map; A⁻¹ is computed once here rather than per symbol."""

    __slots__ = ("_key", "_alphabet", "_a_inv")

    def __init__(self, key: KeyPair, alphabet: Alphabet = ENGLISH):
        validate(key.a)
        self._key = key
        self._alphabet = alphabet
        self._a_inv = mod_inverse(key.a, MODULUS)
        logger.debug(f"DecryptionContext a={key.a} b={key.b} a_inv={self._a_inv}")

    @property
    def key(self) -> KeyPair:
        return self._key

    @property
    def alphabet(self) -> Alphabet:
        return self._alphabet

    @property
    def a_inverse(self) -> int:
        return self._a_inv

    def apply(self, y: int) -> int:
        return norm(self._a_inv * (y - self._key.b))

    def __repr__(self):
        return f"DecryptionContext({self._key!r})"


# -----------------------------------------------------------------------------

# TEXT LAYER

# -----------------------------------------------------------------------------

def _prepare(text: str) -> str:
    """Upper-case symbol by symbol, dropping whitespace.

    A symbol whose upper case is more than one character ('ß' -> 'SS')
    is rejected rather than expanded.
    """
    out = []
    for ch in text:
        if ch.isspace():
            continue
        upper = ch.upper()
        if len(upper) != 1:
            raise UnknownCharacterError(ch)
        out.append(upper)
    return "".join(out)


def encrypt(text: str, ctx: EncryptionContext) -> str:
    """Encrypt text; whitespace dropped, result lower-case."""
    alphabet = ctx.alphabet
    out = [alphabet.char_at(ctx.apply(alphabet.position_of(ch)))
           for ch in _prepare(text)]
    logger.debug(f"encrypt: {len(text)} chars in, {len(out)} out")
    return "".join(out).lower()


def decrypt(text: str, ctx: DecryptionContext) -> str:
    """Decrypt text; whitespace dropped, result lower-case."""
    alphabet = ctx.alphabet
    out = [alphabet.char_at(ctx.apply(alphabet.position_of(ch)))
           for ch in _prepare(text)]
    logger.debug(f"decrypt: {len(text)} chars in, {len(out)} out")
    return "".join(out).lower()


class AffineCipher:
    """Affine cipher bound to one (A, B) key."""

    def __init__(self, a: int, b: int, alphabet: Alphabet = ENGLISH):
        """Raises InvalidKeyError if A is not coprime to 26."""
        self._enc = EncryptionContext(KeyPair(a, b), alphabet)
        self._dec = self._enc.inverse()

    @property
    def key(self) -> KeyPair:
        return self._enc.key

    def encrypt(self, plaintext: str) -> str:
        return encrypt(plaintext, self._enc)

    def decrypt(self, ciphertext: str) -> str:
        return decrypt(ciphertext, self._dec)

    def __repr__(self):
        return f"AffineCipher(a={self.key.a}, b={self.key.b})"
