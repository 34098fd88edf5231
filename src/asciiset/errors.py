class InvalidCharacter(ValueError):
    """Raised when a non-ASCII value is inserted into an AsciiSet."""

    def __init__(self, codepoint):
        self.codepoint = codepoint
        super().__init__(f"only ASCII chars allowed, got {self._describe()}")

    def _describe(self):
        if self.codepoint < 0:
            return str(self.codepoint)
        return f"U+{self.codepoint:04X}"

    def __repr__(self):
        return f"InvalidCharacter({self._describe()})"
