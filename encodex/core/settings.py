"""
Translation settings.

Describes which base alphabet a translation unit uses and in which
direction it translates. Settings are immutable.
"""
from dataclasses import dataclass
from enum import Enum


class Base(Enum):
    """
    Available base encodings.

    Only BASE64 and BASE64URL have codecs. The remaining variants are
    accepted here and rejected when a unit is translated.
    """
    BASE64 = 'Base64'
    BASE64URL = 'Base64url'
    BASE32 = 'Base32'
    BASE32HEX = 'Base32hex'
    BASE16 = 'Base16'
    GUESS = 'Guess'

    def __str__(self) -> str:
        return self.value


class EncodeMode(Enum):
    """Translation direction."""
    ENCODE = 'encode'
    DECODE = 'decode'


@dataclass(frozen=True)
class Settings:
    """
    Configuration of a translation unit.

    Example:
        >>> settings = Settings.for_decoding(Base.BASE64URL)
        >>> settings.encode_mode
        <EncodeMode.DECODE: 'decode'>
    """
    base: Base = Base.BASE64
    encode_mode: EncodeMode = EncodeMode.ENCODE

    def __post_init__(self):
        if not isinstance(self.base, Base):
            raise TypeError(f"base must be a Base, got {type(self.base).__name__}")
        if not isinstance(self.encode_mode, EncodeMode):
            raise TypeError(
                f"encode_mode must be an EncodeMode, got {type(self.encode_mode).__name__}"
            )

    @classmethod
    def default(cls) -> 'Settings':
        """Create default settings (Base64, encode)."""
        return cls()

    @classmethod
    def for_encoding(cls, base: Base = Base.BASE64) -> 'Settings':
        """Create settings for encoding with the given base."""
        return cls(base=base, encode_mode=EncodeMode.ENCODE)

    @classmethod
    def for_decoding(cls, base: Base = Base.BASE64) -> 'Settings':
        """Create settings for decoding with the given base."""
        return cls(base=base, encode_mode=EncodeMode.DECODE)
