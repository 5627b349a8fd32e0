"""
Dollcode Package
Reversible text encoding that writes every codepoint as a bijective base-3
numeral in three configurable glyphs
"""

from .constants import (
    DEFAULT_CHAR1,
    DEFAULT_CHAR2,
    DEFAULT_CHAR3,
    DEFAULT_SEPARATOR,
    MAX_CODEPOINT,
    REPLACEMENT_CHARACTER
)

from .charset import CharacterSet, DEFAULT_CHARSET, validate_charset

from .numeral import encode_number, decode_group

from .codec import DecodeResult, DollcodeCodec, encode, decode

from .config import load_charset_from_env

__all__ = [
    # Constants
    'DEFAULT_CHAR1',
    'DEFAULT_CHAR2',
    'DEFAULT_CHAR3',
    'DEFAULT_SEPARATOR',
    'MAX_CODEPOINT',
    'REPLACEMENT_CHARACTER',

    # Character sets
    'CharacterSet',
    'DEFAULT_CHARSET',
    'validate_charset',

    # Numeral codec
    'encode_number',
    'decode_group',

    # Text codec
    'DecodeResult',
    'DollcodeCodec',
    'encode',
    'decode',

    # Configuration
    'load_charset_from_env'
]
