"""
Canonical alphabet
==================
Maps symbols to their canonical positions (residues) and back.

An Alphabet is an immutable value passed into each cipher context;
there is no process-wide table. ENGLISH is the default A–Z ordering.
"""

from .modular import MODULUS


class UnknownCharacterError(ValueError):
    """Raised when a symbol is not part of the alphabet."""

    def __init__(self, char: str):
        super().__init__(f"Character {char!r} is not in the alphabet.")
        self.char = char


class Alphabet:
    """
    Ordered set of exactly MODULUS distinct symbols.

    The text layer upper-cases input and lower-cases output, so every
    symbol must be a non-whitespace upper-case character that survives
    that round trip.
    """

    MODULUS = MODULUS

    __slots__ = ("_chars", "_positions")

    def __init__(self, chars: str):
        if len(chars) != self.MODULUS:
            raise ValueError(
                f"Alphabet must have {self.MODULUS} symbols, got {len(chars)}."
            )
        if len(set(chars)) != len(chars):
            raise ValueError("Alphabet symbols must be distinct.")
        for ch in chars:
            if ch.isspace() or ch.upper() != ch or ch.lower().upper() != ch:
                raise ValueError(f"Alphabet symbol {ch!r} must be upper-case, non-whitespace.")
        self._chars = chars
        self._positions = {ch: i for i, ch in enumerate(chars)}

    @property
    def chars(self) -> str:
        return self._chars

    def position_of(self, char: str) -> int:
        try:
            return self._positions[char]
        except KeyError:
            raise UnknownCharacterError(char) from None

    def char_at(self, residue: int) -> str:
        if not 0 <= residue < self.MODULUS:
            raise IndexError(f"Residue {residue} outside [0, {self.MODULUS}).")
        return self._chars[residue]

    def __len__(self):
        return len(self._chars)

    def __contains__(self, char):
        return char in self._positions

    def __eq__(self, other):
        if not isinstance(other, Alphabet):
            return NotImplemented
        return self._chars == other._chars

    def __hash__(self):
        return hash(self._chars)

    def __repr__(self):
        return f"Alphabet({self._chars!r})"


ENGLISH = Alphabet("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
