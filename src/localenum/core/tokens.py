"""Separator tokens: validated regex fragments for grouping and decimal marks.

A locale's separators are written as regex fragments rather than plain
characters because several glyphs often play the same role: French and Swiss
texts use any of a handful of space variants for grouping, Swiss German texts
use an apostrophe or one of its look-alikes. A fragment is either an escaped
single character (``\\,``) or a bracketed class (``['\\u0384\\u2019]``).

SeparatorToken wraps such a fragment once, at configuration-load time, and
rejects anything that would corrupt a generated validation pattern.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field

from localenum.diagnostics import ErrorTemplate, SeparatorTokenError

__all__ = ["SeparatorToken"]

# Characters a separator may never match; they belong to the number itself.
_RESERVED_CHARACTERS: str = "0123456789+-"


@dataclass(frozen=True, slots=True)
class SeparatorToken:
    """Immutable, validated separator regex fragment.

    Attributes:
        fragment: Regex fragment spliced verbatim into validation patterns
        regex: The fragment compiled on its own (used for substitutions)

    Raises:
        SeparatorTokenError: If the fragment does not compile, matches the
            empty string, or matches an ASCII digit or sign character

    Example:
        >>> SeparatorToken(r"\\,").remove("1,234,567")
        '1234567'
        >>> SeparatorToken.one_of(".", ",").matches("1,5")
        True
    """

    fragment: str
    regex: re.Pattern[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        try:
            compiled = re.compile(self.fragment)
        except (re.error, TypeError) as e:
            raise SeparatorTokenError(
                ErrorTemplate.token_invalid(str(self.fragment), str(e))
            ) from e

        if compiled.fullmatch("") is not None:
            raise SeparatorTokenError(ErrorTemplate.token_matches_empty(self.fragment))

        for ch in _RESERVED_CHARACTERS:
            if compiled.search(ch) is not None:
                raise SeparatorTokenError(
                    ErrorTemplate.token_matches_digit(self.fragment, ch)
                )

        object.__setattr__(self, "regex", compiled)

    @classmethod
    def literal(cls, character: str) -> SeparatorToken:
        """Build a token matching exactly ``character`` (regex-escaped)."""
        return cls(re.escape(character))

    @classmethod
    def one_of(cls, *characters: str) -> SeparatorToken:
        """Build a bracketed class token matching any of ``characters``."""
        body = "".join(_escape_in_class(ch) for ch in characters)
        return cls(f"[{body}]")

    @classmethod
    def coerce(cls, value: SeparatorToken | str) -> SeparatorToken:
        """Return ``value`` unchanged if already a token, else wrap it."""
        if isinstance(value, SeparatorToken):
            return value
        return cls(value)

    def matches(self, text: str) -> bool:
        """Return True if the token occurs anywhere in ``text``."""
        return self.regex.search(text) is not None

    def remove(self, text: str) -> str:
        """Delete every occurrence of the token from ``text``."""
        return self.regex.sub("", text)

    def replace(self, text: str, replacement: str) -> str:
        """Replace every occurrence of the token with a literal string."""
        # Callable replacement: the literal is never parsed for backreferences
        return self.regex.sub(lambda _: replacement, text)

    def __str__(self) -> str:
        return self.fragment


def _escape_in_class(character: str) -> str:
    if character in "\\]^-[":
        return "\\" + character
    return character
