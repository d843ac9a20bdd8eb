"""
Base64 alphabets.

Each alphabet keeps two fixed-size tables: ``symbols`` maps a 6-bit value
to its symbol byte, ``values`` maps any byte to its 6-bit value, PAD_VALUE
for the padding symbol or INVALID_VALUE when the byte is not part of the
alphabet.
"""
from dataclasses import dataclass, field
from typing import Tuple

PAD_SYMBOL = ord('=')
PAD_VALUE = 64
INVALID_VALUE = -1
ALPHABET_SIZE = 64

_COMMON_SYMBOLS = b'ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789'


@dataclass(frozen=True)
class Alphabet:
    """
    A 64-symbol alphabet plus padding.

    Example:
        >>> STANDARD.symbol(62)
        43
        >>> STANDARD.value(ord('/'))
        63
    """
    name: str
    symbols: bytes
    pad: int = PAD_SYMBOL
    values: Tuple[int, ...] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if len(self.symbols) != ALPHABET_SIZE:
            raise ValueError(
                f"Alphabet {self.name!r} needs {ALPHABET_SIZE} symbols, got {len(self.symbols)}"
            )
        if len(set(self.symbols) | {self.pad}) != ALPHABET_SIZE + 1:
            raise ValueError(f"Alphabet {self.name!r} contains duplicate symbols")

        values = [INVALID_VALUE] * 256
        for value, symbol in enumerate(self.symbols):
            values[symbol] = value
        values[self.pad] = PAD_VALUE
        object.__setattr__(self, 'values', tuple(values))

    def symbol(self, value: int) -> int:
        """Return the symbol byte for a 6-bit value."""
        return self.symbols[value]

    def value(self, symbol: int) -> int:
        """Return the value of a symbol byte (PAD_VALUE, or INVALID_VALUE)."""
        return self.values[symbol]


STANDARD = Alphabet('Base64', _COMMON_SYMBOLS + b'+/')
URL_SAFE = Alphabet('Base64url', _COMMON_SYMBOLS + b'-_')
