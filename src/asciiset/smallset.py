"""Fixed-size bitset for testing membership in a set of ASCII characters.

An ``AsciiSet`` always occupies two 64-bit words regardless of how many
characters it holds, so a membership test is a shift and a mask instead of
a chain of comparisons or a dict/frozenset lookup. Tokenizer hot loops
build their character classes once at import time and then only query.

Querying is permissive: any byte or character may be tested and values
outside the ASCII range simply report ``False``. Inserting is strict:
adding a non-ASCII value raises ``InvalidCharacter``.

Usage:
    from asciiset import AsciiSet

    ident_start = AsciiSet.letters() | AsciiSet.from_chars("_$")
    ident_part = ident_start | AsciiSet.digits()

    if ident_start.contains_char(text[pos]):
        ...
"""

from __future__ import annotations

from collections.abc import Callable, Iterable

from .constants import ASCII_LIMIT, BANK_BITS, DIGITS_LO, LOWER_CASE_HI, UPPER_CASE_HI, WORD_MASK
from .errors import InvalidCharacter


class AsciiSet:
    """Set of ASCII codepoints stored as a low bank (0-63) and a high bank (64-127).

    Equality and hashing are by value. Instances are meant to be treated as
    immutable once built; ``insert_byte``/``insert_char`` exist for
    incremental construction and are the only mutators.
    """

    __slots__ = ("_hi", "_lo")

    def __init__(self, lo_mask: int = 0, hi_mask: int = 0) -> None:
        self._lo = int(lo_mask) & WORD_MASK
        self._hi = int(hi_mask) & WORD_MASK

    @classmethod
    def new(cls) -> AsciiSet:
        """Return the empty set."""
        return cls()

    @property
    def lo_mask(self) -> int:
        """Bitmask for codepoints 0 through 63."""
        return self._lo

    @property
    def hi_mask(self) -> int:
        """Bitmask for codepoints 64 through 127."""
        return self._hi

    # ---- membership ----

    def _contains(self, code: int) -> bool:
        if code < 0:
            return False
        if code < BANK_BITS:
            mask = self._lo
        elif code < ASCII_LIMIT:
            mask = self._hi
        else:
            mask = 0
        return (mask >> (code % BANK_BITS)) & 1 == 1

    def contains_char(self, c: str) -> bool:
        """Test whether the single character ``c`` is a member."""
        return self._contains(ord(c))

    def contains_byte(self, c: int) -> bool:
        """Test whether the byte value ``c`` is a member."""
        return self._contains(c)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, int):
            return self._contains(item)
        if isinstance(item, str):
            return self._contains(ord(item))
        return False

    # ---- insertion ----

    def insert_byte(self, c: int) -> None:
        """Add the byte value ``c``.

        Raises:
            InvalidCharacter: if ``c`` falls outside the ASCII range
        """
        if c < 0 or c >= ASCII_LIMIT:
            raise InvalidCharacter(c)
        if c < BANK_BITS:
            self._lo |= 1 << c
        else:
            self._hi |= 1 << (c - BANK_BITS)

    def insert_char(self, c: str) -> None:
        """Add the single character ``c``.

        Raises:
            InvalidCharacter: if ``c`` is not ASCII
        """
        self.insert_byte(ord(c))

    # ---- construction ----

    @classmethod
    def from_ranges(cls, ranges: Iterable[tuple[str, str]]) -> AsciiSet:
        """Build the union of inclusive ``(start, end)`` character ranges.

        Only the upper endpoint of each range is checked against the ASCII
        range. A range whose start lies after its end contributes nothing,
        which also covers a non-ASCII start paired with an ASCII end.

        Raises:
            InvalidCharacter: if any range ends outside the ASCII range

        Example:
            >>> s = AsciiSet.from_ranges([("a", "e"), ("A", "E")])
            >>> s.contains_char("b"), s.contains_char("f")
            (True, False)
        """
        ret = cls()
        for start, end in ranges:
            high = ord(end)
            if high >= ASCII_LIMIT:
                raise InvalidCharacter(high)
            for code in range(ord(start), high + 1):
                ret.insert_byte(code)
        return ret

    @classmethod
    def from_fn(cls, predicate: Callable[[str], object]) -> AsciiSet:
        """Build the set of ASCII characters for which ``predicate`` is true.

        The predicate is called exactly once per codepoint, 0 through 127 in
        ascending order.
        """
        ret = cls()
        for code in range(ASCII_LIMIT):
            if predicate(chr(code)):
                ret.insert_byte(code)
        return ret

    @classmethod
    def from_chars(cls, chars: Iterable[str]) -> AsciiSet:
        """Build the set of characters yielded by ``chars`` (a str works).

        Raises:
            InvalidCharacter: on the first non-ASCII character
        """
        ret = cls()
        for c in chars:
            ret.insert_char(c)
        return ret

    # ---- algebra ----

    def union(self, other: AsciiSet) -> AsciiSet:
        return AsciiSet(self._lo | other._lo, self._hi | other._hi)

    def intersection(self, other: AsciiSet) -> AsciiSet:
        return AsciiSet(self._lo & other._lo, self._hi & other._hi)

    def difference(self, other: AsciiSet) -> AsciiSet:
        """Return the characters in this set but not in ``other``."""
        return self.intersection(other.complement())

    def complement(self) -> AsciiSet:
        """Return every ASCII character not in this set."""
        return AsciiSet(~self._lo & WORD_MASK, ~self._hi & WORD_MASK)

    def __or__(self, other: object) -> AsciiSet:
        if not isinstance(other, AsciiSet):
            return NotImplemented
        return self.union(other)

    def __and__(self, other: object) -> AsciiSet:
        if not isinstance(other, AsciiSet):
            return NotImplemented
        return self.intersection(other)

    def __sub__(self, other: object) -> AsciiSet:
        if not isinstance(other, AsciiSet):
            return NotImplemented
        return self.difference(other)

    def __invert__(self) -> AsciiSet:
        return self.complement()

    # ---- standard sets ----

    @classmethod
    def lower_case_letters(cls) -> AsciiSet:
        return cls(0, LOWER_CASE_HI)

    @classmethod
    def upper_case_letters(cls) -> AsciiSet:
        return cls(0, UPPER_CASE_HI)

    @classmethod
    def letters(cls) -> AsciiSet:
        return cls.lower_case_letters().union(cls.upper_case_letters())

    @classmethod
    def digits(cls) -> AsciiSet:
        return cls(DIGITS_LO, 0)

    # ---- value semantics ----

    def copy(self) -> AsciiSet:
        return AsciiSet(self._lo, self._hi)

    def __copy__(self) -> AsciiSet:
        return self.copy()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AsciiSet):
            return NotImplemented
        return self._lo == other._lo and self._hi == other._hi

    def __hash__(self) -> int:
        return hash((self._lo, self._hi))

    def __repr__(self) -> str:
        return f"AsciiSet(lo_mask={self._lo:#018x}, hi_mask={self._hi:#018x})"
