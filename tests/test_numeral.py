"""
Unit Tests for the bijective base-3 numeral codec
"""

import pytest

from dollcode import CharacterSet, DEFAULT_CHARSET, MAX_CODEPOINT, encode_number, decode_group


class TestEncodeNumber:
    """Tests for encode_number."""

    def test_zero_is_single_char1(self, digit_charset):
        assert encode_number(0, digit_charset) == '1'

    @pytest.mark.parametrize('number,expected', [
        (1, '1'),
        (2, '2'),
        (3, '3'),
        (4, '11'),
        (12, '33'),
        (13, '111'),
        (65, '1332'),
        (72, '2123'),
        (105, '3213'),
    ])
    def test_known_values(self, digit_charset, number, expected):
        assert encode_number(number, digit_charset) == expected

    def test_default_glyphs(self):
        """Should map 'A' (65) to block glyphs."""
        assert encode_number(65, DEFAULT_CHARSET) == '▖▌▌▘'

    def test_rejects_negative(self, digit_charset):
        with pytest.raises(ValueError):
            encode_number(-1, digit_charset)

    def test_never_contains_separator(self, digit_charset):
        for number in range(0, 2000, 7):
            assert '|' not in encode_number(number, digit_charset)


class TestDecodeGroup:
    """Tests for decode_group."""

    @pytest.mark.parametrize('group,expected', [
        ('1', 1),
        ('3', 3),
        ('11', 4),
        ('1332', 65),
        ('3213', 105),
    ])
    def test_known_values(self, digit_charset, group, expected):
        assert decode_group(group, digit_charset) == expected

    def test_inverts_encode_number(self, digit_charset):
        """Should recover every number from its encoding."""
        for number in list(range(1, 500)) + [0xFFFF, 0x1F389, MAX_CODEPOINT]:
            assert decode_group(encode_number(number, digit_charset), digit_charset) == number

    def test_empty_group(self, digit_charset):
        assert decode_group('', digit_charset) is None

    def test_foreign_symbol(self, digit_charset):
        """Should fail the whole group, not return a partial value."""
        assert decode_group('13x2', digit_charset) is None
        assert decode_group('garbage', digit_charset) is None

    def test_multi_character_symbols(self):
        charset = CharacterSet(char1='<1>', char2='<2>', char3='<3>', separator=' / ')
        assert decode_group('<1><3><3><2>', charset) == 65
        assert decode_group('<1><3', charset) is None

    def test_fixed_match_priority(self):
        """Should try char3, then char2, then char1 at each position."""
        charset = CharacterSet(char1='a', char2='aa', char3='aaa', separator='|')
        # 'aaa' + 'a' -> 3, 1
        assert decode_group('aaaa', charset) == 3 * 3 + 1
        # 'aaa' + 'aa' -> 3, 2
        assert decode_group('aaaaa', charset) == 3 * 3 + 2

    def test_overlong_group_still_decodes(self, digit_charset):
        """Range checking is left to the text codec."""
        assert decode_group('3' * 20, digit_charset) > MAX_CODEPOINT
