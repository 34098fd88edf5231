"""Tests for rejection of non-ASCII input on the insertion paths."""

import unittest

from asciiset import AsciiSet, InvalidCharacter


class TestInvalidCharacter(unittest.TestCase):
    def test_is_a_value_error(self):
        """Callers catching ValueError also catch InvalidCharacter."""
        with self.assertRaises(ValueError):
            AsciiSet().insert_byte(128)

    def test_carries_codepoint(self):
        with self.assertRaises(InvalidCharacter) as ctx:
            AsciiSet().insert_char("\xe9")
        assert ctx.exception.codepoint == 0xE9

    def test_message_and_repr(self):
        error = InvalidCharacter(0x80)
        assert str(error) == "only ASCII chars allowed, got U+0080"
        assert repr(error) == "InvalidCharacter(U+0080)"

    def test_negative_value_message(self):
        assert str(InvalidCharacter(-1)) == "only ASCII chars allowed, got -1"


class TestStrictInsertion(unittest.TestCase):
    """Insertion rejects non-ASCII input for every set state."""

    states = (
        AsciiSet(),
        AsciiSet.letters(),
        AsciiSet.digits(),
        AsciiSet().complement(),
    )

    def test_insert_byte_rejects_out_of_range(self):
        for state in self.states:
            for value in (128, 200, 255, 1000, -1):
                s = state.copy()
                with self.assertRaises(InvalidCharacter):
                    s.insert_byte(value)
                assert s == state

    def test_insert_char_rejects_non_ascii(self):
        for state in self.states:
            for char in ("\x80", "\xe9", "\xff", "☃", "\U0001f600"):
                s = state.copy()
                with self.assertRaises(InvalidCharacter):
                    s.insert_char(char)
                assert s == state

    def test_insert_accepts_full_ascii_range(self):
        s = AsciiSet()
        for code in range(128):
            s.insert_byte(code)
        assert s == AsciiSet().complement()

    def test_insert_char_requires_single_character(self):
        with self.assertRaises(TypeError):
            AsciiSet().insert_char("ab")

    def test_from_chars_rejects_non_ascii(self):
        with self.assertRaises(InvalidCharacter):
            AsciiSet.from_chars("caf\xe9")

    def test_from_ranges_rejects_non_ascii_end(self):
        with self.assertRaises(InvalidCharacter):
            AsciiSet.from_ranges([("a", "\x80")])

    def test_queries_never_raise(self):
        s = AsciiSet.letters()
        for code in (-5, 128, 255, 10**6):
            assert s.contains_byte(code) is False
        assert s.contains_char("\U0001f600") is False
