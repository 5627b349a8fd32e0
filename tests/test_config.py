"""
Unit Tests for environment-driven character set configuration
"""

import pytest

from dollcode import CharacterSet, DEFAULT_CHARSET, load_charset_from_env
from dollcode.config import unescape_symbol


class TestUnescapeSymbol:
    """Tests for unescape_symbol."""

    def test_short_escape(self):
        assert unescape_symbol('\\u200d') == '\N{ZERO WIDTH JOINER}'

    def test_long_escape(self):
        assert unescape_symbol('\\U0001F389') == '\U0001F389'

    def test_plain_value_unchanged(self):
        assert unescape_symbol('|') == '|'
        assert unescape_symbol('a\\b') == 'a\\b'


class TestLoadCharsetFromEnv:
    """Tests for load_charset_from_env."""

    def test_empty_environment_gives_default(self):
        assert load_charset_from_env({}) == DEFAULT_CHARSET

    def test_reads_all_variables(self):
        environ = {
            'DOLLCODE_CHAR1': '1',
            'DOLLCODE_CHAR2': '2',
            'DOLLCODE_CHAR3': '3',
            'DOLLCODE_SEPARATOR': '|',
        }
        assert load_charset_from_env(environ) == CharacterSet('1', '2', '3', '|')

    def test_partial_environment(self):
        """Should keep default symbols for unset variables."""
        charset = load_charset_from_env({'DOLLCODE_SEPARATOR': '\\u00b7'})
        assert charset.separator == '·'
        assert charset.char1 == DEFAULT_CHARSET.char1

    def test_overrides_win(self):
        environ = {'DOLLCODE_SEPARATOR': '|'}
        charset = load_charset_from_env(environ, overrides={'separator': '/', 'char1': None})
        assert charset.separator == '/'
        assert charset.char1 == DEFAULT_CHARSET.char1

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv('DOLLCODE_CHAR1', 'x')
        assert load_charset_from_env().char1 == 'x'

    def test_invalid_set_raises(self):
        """Should refuse a separator that equals a digit glyph."""
        with pytest.raises(ValueError, match="Invalid character set"):
            load_charset_from_env({'DOLLCODE_SEPARATOR': DEFAULT_CHARSET.char1})

    def test_empty_symbol_raises(self):
        with pytest.raises(ValueError):
            load_charset_from_env({'DOLLCODE_CHAR2': ''})

    def test_validation_can_be_skipped(self):
        """Should hand back an invalid set when asked not to validate."""
        charset = load_charset_from_env({'DOLLCODE_CHAR2': ''}, validate=False)
        assert charset.char2 == ''
