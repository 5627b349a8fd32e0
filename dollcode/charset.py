"""
Character Set Definition
The four configurable symbols of a dollcode alphabet and their validation
"""

from typing import Dict, NamedTuple

from .constants import DEFAULT_CHAR1, DEFAULT_CHAR2, DEFAULT_CHAR3, DEFAULT_SEPARATOR


class CharacterSet(NamedTuple):
    """
    Symbols used to write digit values 1, 2, 3 and the group separator.

    Each symbol may be any non-empty string, not just a single character.
    Instances are immutable and safe to share between callers.
    """

    char1: str
    char2: str
    char3: str
    separator: str

    @classmethod
    def from_dict(cls, values: Dict[str, str]) -> 'CharacterSet':
        """
        Build a character set from a mapping, filling gaps from the default set.

        Args:
            values: Mapping with any of 'char1', 'char2', 'char3', 'separator'

        Returns:
            CharacterSet: New character set
        """
        return cls(
            char1=values.get('char1', DEFAULT_CHARSET.char1),
            char2=values.get('char2', DEFAULT_CHARSET.char2),
            char3=values.get('char3', DEFAULT_CHARSET.char3),
            separator=values.get('separator', DEFAULT_CHARSET.separator)
        )

    def to_dict(self) -> Dict[str, str]:
        return self._asdict()

    def digits(self):
        """Digit symbols paired with their values, in match priority order."""
        return ((self.char3, 3), (self.char2, 2), (self.char1, 1))


DEFAULT_CHARSET = CharacterSet(
    char1=DEFAULT_CHAR1,
    char2=DEFAULT_CHAR2,
    char3=DEFAULT_CHAR3,
    separator=DEFAULT_SEPARATOR
)


def validate_charset(charset: CharacterSet) -> bool:
    """
    Check that a character set has non-empty, pairwise distinct symbols.

    Symbols that are prefixes of one another are accepted; decoding resolves
    them by trying char3, then char2, then char1.

    Args:
        charset: Character set to check

    Returns:
        bool: True if the set is usable, False otherwise
    """
    char1, char2, char3, separator = charset

    # All symbols present
    if not char1 or not char2 or not char3 or not separator:
        return False

    # Digits distinct
    if char1 == char2 or char1 == char3 or char2 == char3:
        return False

    # Separator distinct from digits
    if separator in (char1, char2, char3):
        return False

    return True
