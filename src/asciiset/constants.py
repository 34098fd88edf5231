"""Bank geometry and the bit patterns of the standard sets.

A set is split into two banks of 64 codepoints each: the low bank holds
codepoints 0-63, the high bank holds 64-127. Within a bank, bit ``i`` of
the mask encodes codepoint ``bank_start + i``.
"""

ASCII_LIMIT = 128
BANK_BITS = 64
WORD_MASK = (1 << BANK_BITS) - 1

# '0'-'9' are codepoints 48-57, low bank
DIGITS_LO = 0x03FF_0000_0000_0000

# 'A'-'Z' are codepoints 65-90, high bank bits 1-26
UPPER_CASE_HI = 0x0000_0000_07FF_FFFE

# 'a'-'z' are codepoints 97-122, high bank bits 33-58
LOWER_CASE_HI = 0x07FF_FFFE_0000_0000
