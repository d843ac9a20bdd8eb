"""
Core translation module.

Provides the translation units, alphabets and settings used by the CLI.
"""
from .alphabet import Alphabet, STANDARD, URL_SAFE, PAD_VALUE
from .exceptions import (
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
from .input import InputSource
from .settings import Base, EncodeMode, Settings
from .translation import TranslationUnit, encode_base64, decode_base64

__all__ = [
    # Translation
    'TranslationUnit',
    'encode_base64',
    'decode_base64',

    # Configuration
    'Base',
    'EncodeMode',
    'Settings',

    # Alphabets
    'Alphabet',
    'STANDARD',
    'URL_SAFE',
    'PAD_VALUE',

    # Input
    'InputSource',

    # Exceptions
    'EncodexException',
    'TranslationError',
    'LengthValidationError',
    'AlphabetValidationError',
    'PaddingValidationError',
    'UnsupportedBaseError',
    'TranslationStateError',
    'InputError',
    'InputReadError',
]
