"""
Dollcode Text Codec
Encodes text one codepoint at a time and decodes separator-delimited groups,
recovering from malformed groups instead of failing
"""

import logging
from typing import Any, Dict, NamedTuple

from .charset import CharacterSet, DEFAULT_CHARSET, validate_charset
from .constants import MAX_CODEPOINT, REPLACEMENT_CHARACTER
from .numeral import encode_number, decode_group

logger = logging.getLogger(__name__)


class DecodeResult(NamedTuple):
    """Decoded text together with a count of groups that could not be decoded."""

    text: str
    has_errors: bool
    error_count: int

    def to_dict(self) -> Dict[str, Any]:
        return {
            'text': self.text,
            'hasErrors': self.has_errors,
            'errorCount': self.error_count
        }


def encode(text: str, charset: CharacterSet = DEFAULT_CHARSET) -> str:
    """
    Encode text as dollcode.

    Every codepoint becomes one group, and every group is followed by the
    separator, including the last one.

    Args:
        text: Text to encode
        charset: Character set to write with (default: DEFAULT_CHARSET)

    Returns:
        str: Encoded text, or an empty string for empty input
    """
    if not text:
        return ''

    groups = [encode_number(ord(char), charset) for char in text]

    return charset.separator.join(groups) + charset.separator


def decode(dollcode: str, charset: CharacterSet = DEFAULT_CHARSET) -> DecodeResult:
    """
    Decode dollcode back to text.

    Empty fragments between separators are skipped. A group that contains
    foreign symbols or decodes past U+10FFFF is replaced with U+FFFD and
    counted; decoding always continues with the next group.

    Args:
        dollcode: Encoded text
        charset: Character set it was written with (default: DEFAULT_CHARSET)

    Returns:
        DecodeResult: Decoded text and error tally
    """
    if not dollcode:
        return DecodeResult('', False, 0)

    if charset.separator:
        fragments = dollcode.split(charset.separator)
    else:
        fragments = list(dollcode)
    groups = [group for group in fragments if group]

    chars = []
    error_count = 0
    for index, group in enumerate(groups):
        codepoint = decode_group(group, charset)

        if codepoint is not None and 0 <= codepoint <= MAX_CODEPOINT:
            chars.append(chr(codepoint))
        else:
            logger.debug(f"Invalid group {index}: {group!r}")
            chars.append(REPLACEMENT_CHARACTER)
            error_count += 1

    if error_count:
        logger.debug(f"Decoded {len(groups)} groups with {error_count} error(s)")

    return DecodeResult(''.join(chars), error_count > 0, error_count)


class DollcodeCodec:
    """
    Encoder/decoder bound to a single character set.

    The character set is not validated on construction; call is_valid()
    first when it comes from user input.
    """

    def __init__(self, charset: CharacterSet = DEFAULT_CHARSET):
        """
        Initialize codec.

        Args:
            charset: Character set to use (default: DEFAULT_CHARSET)
        """
        self.charset = charset

    def is_valid(self) -> bool:
        return validate_charset(self.charset)

    def encode(self, text: str) -> str:
        return encode(text, self.charset)

    def decode(self, dollcode: str) -> DecodeResult:
        return decode(dollcode, self.charset)

    def __repr__(self):
        return f"DollcodeCodec({self.charset!r})"
