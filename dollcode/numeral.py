"""
Bijective Base-3 Numeral Codec
Converts a single codepoint to and from a run of digit symbols
"""

from typing import Optional

from .charset import CharacterSet
from .constants import DIGIT_BASE


def encode_number(number: int, charset: CharacterSet) -> str:
    """
    Convert a non-negative integer to bijective base-3 using digit values 1-3.

    Zero has no bijective representation and is written as a single char1.

    Args:
        number: Integer to convert
        charset: Character set supplying the digit symbols

    Returns:
        str: Digit symbols, most significant first
    """
    if number < 0:
        raise ValueError(f"Cannot encode negative number: {number}")

    if number == 0:
        return charset.char1

    symbols = (charset.char1, charset.char2, charset.char3)

    result = []
    while number > 0:
        digit = number % DIGIT_BASE or DIGIT_BASE
        result.append(symbols[digit - 1])
        number = (number - digit) // DIGIT_BASE

    return ''.join(reversed(result))


def decode_group(group: str, charset: CharacterSet) -> Optional[int]:
    """
    Convert a run of digit symbols back to an integer.

    Symbols are matched in the fixed order char3, char2, char1 at each
    position, regardless of their lengths.

    Args:
        group: Separator-free run of digit symbols
        charset: Character set supplying the digit symbols

    Returns:
        int: Decoded integer, or None if the group is empty or contains
        anything that is not a digit symbol
    """
    if not group:
        return None

    digits = charset.digits()

    result = 0
    position = 0
    while position < len(group):
        for symbol, value in digits:
            # Empty symbols never match
            if symbol and group.startswith(symbol, position):
                position += len(symbol)
                break
        else:
            return None

        result = result * DIGIT_BASE + value

    return result
