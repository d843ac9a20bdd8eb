"""
Translation units.

A TranslationUnit binds one input buffer to one Settings instance and
translates it to the opposite representation exactly once:

    >>> unit = TranslationUnit(b"d2FpZnU=", Settings.for_decoding())
    >>> unit.translate()
    b'waifu'

Base64 and Base64url share one codec; only the alphabet tables differ.
"""
from typing import Callable, Dict, Optional

from .alphabet import Alphabet, INVALID_VALUE, PAD_VALUE, STANDARD, URL_SAFE
from .exceptions import (
    AlphabetValidationError,
    LengthValidationError,
    PaddingValidationError,
    TranslationStateError,
    UnsupportedBaseError,
)
from .logging import get_logger
from .settings import Base, EncodeMode, Settings

logger = get_logger(__name__)

ALPHABETS: Dict[Base, Alphabet] = {
    Base.BASE64: STANDARD,
    Base.BASE64URL: URL_SAFE,
}


def encode_base64(data: bytes, alphabet: Alphabet = STANDARD) -> bytes:
    """
    Encode arbitrary bytes with a Base64 alphabet.

    Args:
        data: Raw bytes
        alphabet: Alphabet to encode with

    Returns:
        Encoded symbols, padded to a multiple of 4
    """
    symbols = alphabet.symbols
    pad = alphabet.pad
    encoded = bytearray()

    for start in range(0, len(data), 3):
        group = data[start:start + 3]
        missing = 3 - len(group)

        block = group[0] << 16
        if missing < 2:
            block |= group[1] << 8
        if missing < 1:
            block |= group[2]

        encoded.append(symbols[block >> 18])
        encoded.append(symbols[(block >> 12) & 0x3F])
        encoded.append(pad if missing == 2 else symbols[(block >> 6) & 0x3F])
        encoded.append(pad if missing >= 1 else symbols[block & 0x3F])

    return bytes(encoded)


def decode_base64(data: bytes, alphabet: Alphabet = STANDARD) -> bytes:
    """
    Decode Base64 symbols back to raw bytes.

    Padding is accepted only as the last one or two symbols of the final
    group.

    Args:
        data: Encoded symbols
        alphabet: Alphabet the symbols belong to

    Returns:
        Decoded bytes

    Raises:
        LengthValidationError: Length is not a multiple of 4
        AlphabetValidationError: A symbol is not part of the alphabet
        PaddingValidationError: Padding appears in an illegal position
    """
    if len(data) % 4 != 0:
        raise LengthValidationError(
            f"Number of bytes for {alphabet.name} is not a multiple of 4 (got {len(data)})",
            length=len(data)
        )

    values = alphabet.values
    last_group = len(data) - 4
    decoded = bytearray()

    for start in range(0, len(data), 4):
        group = [values[symbol] for symbol in data[start:start + 4]]

        for offset, value in enumerate(group):
            if value == INVALID_VALUE:
                symbol = data[start + offset]
                raise AlphabetValidationError(
                    f"Non {alphabet.name}-alphabet character {chr(symbol)!r} "
                    f"encountered at position {start + offset}",
                    symbol=symbol,
                    position=start + offset
                )

        first, second, third, fourth = group
        if first == PAD_VALUE or second == PAD_VALUE:
            position = start if first == PAD_VALUE else start + 1
            raise PaddingValidationError(
                f"Padding not allowed at position {position}", position=position
            )
        third_is_padding = third == PAD_VALUE
        fourth_is_padding = fourth == PAD_VALUE
        if third_is_padding and not fourth_is_padding:
            raise PaddingValidationError(
                f"Padding at position {start + 2} must be followed by padding",
                position=start + 2
            )
        if fourth_is_padding and start != last_group:
            raise PaddingValidationError(
                f"Padding at position {start + 3} is not at the end of the input",
                position=start + 3
            )

        block = (first << 18) | (second << 12)
        if not third_is_padding:
            block |= third << 6
        if not fourth_is_padding:
            block |= fourth

        decoded.append(block >> 16)
        if not third_is_padding:
            decoded.append((block >> 8) & 0xFF)
        if not fourth_is_padding:
            decoded.append(block & 0xFF)

    return bytes(decoded)


Codec = Callable[[bytes, Alphabet], bytes]

DECODERS: Dict[Base, Codec] = {
    Base.BASE64: decode_base64,
    Base.BASE64URL: decode_base64,
}

ENCODERS: Dict[Base, Codec] = {
    Base.BASE64: encode_base64,
    Base.BASE64URL: encode_base64,
}


class TranslationUnit:
    """
    A unit for en- or decoding one byte buffer.

    The unit's settings and input can't be changed after creation. If the
    unit is created for encoding the data is treated as arbitrary bytes,
    if it is created for decoding the data is treated as encoded symbols.
    """

    def __init__(self, data: bytes, settings: Optional[Settings] = None):
        """
        Create a translation unit.

        Args:
            data: Input buffer
            settings: Base and direction (defaults to Base64 encoding)
        """
        self._settings = settings or Settings.default()
        self._decoded_data: Optional[bytes] = None
        self._encoded_data: Optional[bytes] = None

        if self._settings.encode_mode is EncodeMode.DECODE:
            self._encoded_data = bytes(data)
        else:
            self._decoded_data = bytes(data)

        logger.debug(
            "Created %s unit (%s, %d bytes)",
            self._settings.encode_mode.value, self._settings.base, len(data)
        )

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def base(self) -> Base:
        """Base used for de-/encoding."""
        return self._settings.base

    @property
    def encode_mode(self) -> EncodeMode:
        return self._settings.encode_mode

    @property
    def decoded_data(self) -> Optional[bytes]:
        """Raw bytes, or None if not yet decoded."""
        return self._decoded_data

    @property
    def encoded_data(self) -> Optional[bytes]:
        """
        Encoded symbols, or None if not yet encoded.

        Every byte corresponds to a symbol of the unit's alphabet.
        """
        return self._encoded_data

    @property
    def is_translated(self) -> bool:
        return self._decoded_data is not None and self._encoded_data is not None

    @property
    def output(self) -> bytes:
        """
        Buffer produced by translate().

        Raises:
            TranslationStateError: If the unit has not been translated
        """
        if self.encode_mode is EncodeMode.DECODE:
            result = self._decoded_data
        else:
            result = self._encoded_data
        if result is None:
            raise TranslationStateError("Translation unit has not been translated yet")
        return result

    def translate(self) -> bytes:
        """
        Translate the unit's data.

        The first successful call computes the result, later calls return
        it without recomputing.

        Returns:
            The produced buffer (see output)

        Raises:
            TranslationError: If the data can't be translated
        """
        if self.encode_mode is EncodeMode.DECODE:
            if self._decoded_data is None:
                self._decoded_data = self._dispatch(DECODERS, self._require(self._encoded_data))
            return self._decoded_data

        if self._encoded_data is None:
            self._encoded_data = self._dispatch(ENCODERS, self._require(self._decoded_data))
        return self._encoded_data

    def _dispatch(self, codecs: Dict[Base, Codec], data: bytes) -> bytes:
        """Run the codec registered for the unit's base."""
        codec = codecs.get(self.base)
        if codec is None:
            raise UnsupportedBaseError(
                f"{self.base} {self.encode_mode.value} is not yet implemented!",
                base=self.base
            )
        result = codec(data, ALPHABETS[self.base])
        logger.debug(
            "%s: %d bytes -> %d bytes",
            self.encode_mode.value, len(data), len(result)
        )
        return result

    @staticmethod
    def _require(data: Optional[bytes]) -> bytes:
        if data is None:
            raise TranslationStateError("Translation unit has no source buffer")
        return data

    def __repr__(self) -> str:
        state = 'translated' if self.is_translated else 'pending'
        return f"TranslationUnit({self.base}, {self.encode_mode.value}, {state})"
