"""Per-locale number configuration.

LocaleNumberConfig is the immutable triple the core works from: the
thousands-separator token, the decimal-separator token and the grouping
style. It is the only locale knowledge the pattern builder and the
normalizer ever see.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from localenum.diagnostics import ErrorTemplate, LocaleConfigError

from .tokens import SeparatorToken

__all__ = ["LocaleNumberConfig", "PatternKey"]

type PatternKey = tuple[str, str, bool]


@dataclass(frozen=True, slots=True, init=False)
class LocaleNumberConfig:
    """Immutable number configuration for one locale.

    Accepts SeparatorToken instances or raw regex fragments; fragments are
    validated immediately so malformed tables fail at load time.

    Attributes:
        thousands: Token delimiting digit groups in the integer part
        decimal: Token between integer and fractional parts
        indian: True for Indian grouping (3 digits, then groups of 2)

    Raises:
        SeparatorTokenError: If either fragment is not a safe regex fragment
        LocaleConfigError: If both separators are the same fragment

    Example:
        >>> config = LocaleNumberConfig(SeparatorToken.literal("."), ",")
        >>> config.thousands.fragment, config.decimal.fragment
        ('\\\\.', ',')
    """

    thousands: SeparatorToken
    decimal: SeparatorToken
    indian: bool

    def __init__(
        self,
        thousands: SeparatorToken | str,
        decimal: SeparatorToken | str,
        indian: bool = False,
    ) -> None:
        thousands_token = SeparatorToken.coerce(thousands)
        decimal_token = SeparatorToken.coerce(decimal)
        if thousands_token.fragment == decimal_token.fragment:
            raise LocaleConfigError(
                ErrorTemplate.separators_identical(thousands_token.fragment)
            )
        object.__setattr__(self, "thousands", thousands_token)
        object.__setattr__(self, "decimal", decimal_token)
        object.__setattr__(self, "indian", bool(indian))

    @property
    def cache_key(self) -> PatternKey:
        """Key identifying the validation patterns built from this config."""
        return (self.thousands.fragment, self.decimal.fragment, self.indian)
