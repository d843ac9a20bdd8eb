"""
encodex - En-/decoder for Base encodings as defined by RFC 4648.

Usage:
    >>> from encodex import TranslationUnit, Settings, Base
    >>>
    >>> unit = TranslationUnit(b"d2FpZnU=", Settings.for_decoding(Base.BASE64))
    >>> unit.translate()
    b'waifu'
"""
import logging

from .core import (
    TranslationUnit,
    Base,
    EncodeMode,
    Settings,
    Alphabet,
    STANDARD,
    URL_SAFE,
    InputSource,
    encode_base64,
    decode_base64,
    EncodexException,
    TranslationError,
    LengthValidationError,
    AlphabetValidationError,
    PaddingValidationError,
    UnsupportedBaseError,
    TranslationStateError,
    InputError,
    InputReadError,
)

__version__ = '0.2.0'
__description__ = 'En-/Decoder for Base64 and Base64url encodings as defined by RFC 4648.'


def setup_logging(level=logging.INFO):
    """
    Configure logging for encodex modules.

    Args:
        level: Logging level (default: logging.INFO)
    """
    loggers = [
        'encodex',
        'encodex.core.translation',
        'encodex.core.input',
        'encodex.cli',
    ]

    for logger_name in loggers:
        logger = logging.getLogger(logger_name)
        logger.setLevel(level)
        logger.propagate = True


__all__ = [
    'TranslationUnit',
    'Base',
    'EncodeMode',
    'Settings',
    'Alphabet',
    'STANDARD',
    'URL_SAFE',
    'InputSource',
    'encode_base64',
    'decode_base64',
    'EncodexException',
    'TranslationError',
    'LengthValidationError',
    'AlphabetValidationError',
    'PaddingValidationError',
    'UnsupportedBaseError',
    'TranslationStateError',
    'InputError',
    'InputReadError',
    'setup_logging',
    '__version__',
]
