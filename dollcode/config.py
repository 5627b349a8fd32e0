"""
Character Set Configuration
Builds a character set from DOLLCODE_* environment variables (or a .env file)
"""

import os
import re
from typing import Mapping, Optional

from .charset import CharacterSet, DEFAULT_CHARSET, validate_charset
from .constants import ENV_CHAR1, ENV_CHAR2, ENV_CHAR3, ENV_SEPARATOR

_ESCAPE_PATTERN = re.compile(r'\\u([0-9a-fA-F]{4})|\\U([0-9a-fA-F]{8})')


def unescape_symbol(value: str) -> str:
    """
    Expand \\uXXXX and \\UXXXXXXXX escapes in a configured symbol.

    Lets invisible symbols such as the zero-width joiner be written in a
    .env file. Other backslashes are left alone.

    Args:
        value: Raw value from the environment

    Returns:
        str: Value with escapes replaced by the characters they name
    """
    return _ESCAPE_PATTERN.sub(lambda match: chr(int(match.group(1) or match.group(2), 16)), value)


def load_charset_from_env(
    environ: Optional[Mapping[str, str]] = None,
    overrides: Optional[Mapping[str, Optional[str]]] = None,
    validate: bool = True
) -> CharacterSet:
    """
    Create a character set from environment variables.

    Unset variables fall back to the default symbol for that slot. Values in
    overrides (e.g. from command-line flags) win over the environment.

    Args:
        environ: Mapping to read from (default: os.environ)
        overrides: Mapping of 'char1'/'char2'/'char3'/'separator' to values;
            None values are ignored
        validate: Reject sets that fail validate_charset (default: True)

    Returns:
        CharacterSet: Character set, validated unless validate is False

    Raises:
        ValueError: If validate is set and the character set is not valid
    """
    if environ is None:
        environ = os.environ

    env_names = {
        'char1': ENV_CHAR1,
        'char2': ENV_CHAR2,
        'char3': ENV_CHAR3,
        'separator': ENV_SEPARATOR
    }

    values = {}
    for field, env_name in env_names.items():
        raw = environ.get(env_name)
        if overrides and overrides.get(field) is not None:
            raw = overrides[field]
        if raw is not None:
            values[field] = unescape_symbol(raw)

    charset = CharacterSet.from_dict(values) if values else DEFAULT_CHARSET

    if validate and not validate_charset(charset):
        raise ValueError(
            f"Invalid character set: {charset.to_dict()}. "
            "All four symbols must be non-empty and distinct. "
            f"Please check {', '.join(env_names.values())} in your .env file."
        )

    return charset
