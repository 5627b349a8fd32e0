"""
Dollcode Constants
Glyphs and numeric limits shared by the numeral and text codecs
"""

# Digit glyphs of the default character set (Unicode block elements)
DEFAULT_CHAR1 = '\N{QUADRANT LOWER LEFT}'  # ▖
DEFAULT_CHAR2 = '\N{QUADRANT UPPER LEFT}'  # ▘
DEFAULT_CHAR3 = '\N{LEFT HALF BLOCK}'  # ▌

# Group separator of the default character set (zero-width joiner)
DEFAULT_SEPARATOR = '\N{ZERO WIDTH JOINER}'

# Bijective base-3: digit values are 1, 2 and 3, there is no zero digit
DIGIT_BASE = 3

# Highest Unicode scalar value
MAX_CODEPOINT = 0x10FFFF

# Substituted for every group that fails to decode
REPLACEMENT_CHARACTER = '\N{REPLACEMENT CHARACTER}'

# Environment variables read by dollcode.config
ENV_CHAR1 = 'DOLLCODE_CHAR1'
ENV_CHAR2 = 'DOLLCODE_CHAR2'
ENV_CHAR3 = 'DOLLCODE_CHAR3'
ENV_SEPARATOR = 'DOLLCODE_SEPARATOR'
ENV_LOG_LEVEL = 'DOLLCODE_LOG_LEVEL'
