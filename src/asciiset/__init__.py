from .errors import InvalidCharacter
from .smallset import AsciiSet

__all__ = [
    "AsciiSet",
    "InvalidCharacter",
]
