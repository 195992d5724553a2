from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from itertools import repeat
from typing import Callable, Iterable, NamedTuple, Optional

from suite_money.domain.monetary.currency import CurrencyLike
from suite_money.utils.numeric_tools import DecimalLike, as_decimal
from suite_money.utils.rounding import RoundingStrategy, round_decimal


class FormattingError(ValueError):
    """Raised when a template cannot be rendered. $token holds the offending token text."""

    def __init__(self, token: str, message: str):
        self.token = token
        super().__init__(message)


class UnterminatedTokenError(FormattingError):
    """Raised when a `{` in a template has no matching `}`."""

    def __init__(self, token: str):
        super().__init__(token, f"Unterminated token in template: '{token}'")


class InvalidTokenError(FormattingError):
    """Raised when a template token is empty or has an unknown name."""

    def __init__(self, token: str):
        super().__init__(token, f"Invalid token in template: '{token}'")


# region Template tokens

# Each renderer takes (amount_text, symbol, code)
_TOKEN_RENDERERS: dict[str, Callable[[str, str, str], str]] = {
    "a": lambda amount, symbol, code: amount,
    "s": lambda amount, symbol, code: symbol,
    "c": lambda amount, symbol, code: code,
    "s|c": lambda amount, symbol, code: symbol or code,
    # Code fallbacks carry a space so the amount does not touch the code
    "s|c_": lambda amount, symbol, code: symbol or f"{code} ",
    "_c|s": lambda amount, symbol, code: symbol or f" {code}",
    "s|_c": lambda amount, symbol, code: symbol or f" {code}",
}

TEMPLATE_TOKENS: tuple[str, ...] = tuple(_TOKEN_RENDERERS)


class TemplateSegment(NamedTuple):
    """Piece of a parsed template: literal text, or the name of a token."""

    text: str
    is_token: bool


def parse_template(template: str) -> list[TemplateSegment]:
    """Split $template into literal and token segments.

    Tokens are written as `{name}`. Text outside tokens, including a lone `}`, is literal.

    Args:
        template: Template such as "-{s|c_}{a}".

    Returns:
        Segments in template order.

    Raises:
        UnterminatedTokenError: If a `{` has no matching `}`.
        InvalidTokenError: If a token is empty or not one of `TEMPLATE_TOKENS`.
    """
    segments: list[TemplateSegment] = []
    position = 0
    while position < len(template):
        start = template.find("{", position)
        if start == -1:
            segments.append(TemplateSegment(template[position:], False))
            break

        if start > position:
            segments.append(TemplateSegment(template[position:start], False))

        end = template.find("}", start + 1)
        if end == -1:
            raise UnterminatedTokenError(template[start:])

        name = template[start + 1 : end]
        if name not in _TOKEN_RENDERERS:
            raise InvalidTokenError(template[start : end + 1])

        segments.append(TemplateSegment(name, True))
        position = end + 1

    return segments


# endregion


@dataclass(frozen=True)
class Formatter:
    """Template-driven renderer of monetary amounts.

    All fields are plain data with defaults; a formatter holds no other state and can be
    shared freely.

    Attributes:
        decimal_places: Fractional digits to render. None means the currency's minor units.
        rounding_strategy: Rule used to round to $decimal_places.
        decimal_separator: Text between whole and fractional digits.
        digit_group_size: Uniform size of digit groups; 0 disables grouping.
        digit_groupings: Explicit group sizes read right-to-left, e.g. (3, 2, 2).
            Digits left over after the last size stay in one ungrouped chunk.
            Overrides $digit_group_size when set; an empty tuple disables grouping.
        digit_group_separator: Text between digit groups.
        positive_template: Template for amounts above zero.
        negative_template: Template for amounts below zero. The sign is only ever
            rendered by the template.
        zero_template: Template for zero amounts; falls back to $positive_template.

    Template tokens:
        {a}     grouped, rounded amount without sign
        {s}     currency symbol (may be empty)
        {c}     currency code
        {s|c}   symbol, or code when the symbol is empty
        {s|c_}  symbol, or code followed by a space
        {_c|s}  symbol, or a space followed by code
        {s|_c}  same as {_c|s}
    """

    decimal_places: Optional[int] = None
    rounding_strategy: RoundingStrategy = RoundingStrategy.HALF_EVEN
    decimal_separator: str = "."
    digit_group_size: int = 3
    digit_groupings: Optional[tuple[int, ...]] = None
    digit_group_separator: str = ","
    positive_template: str = "{s|c_}{a}"
    negative_template: str = "-{s|c_}{a}"
    zero_template: Optional[str] = None

    def __post_init__(self):
        # Raise: $decimal_places is optional, but must be a non-negative int when present
        if self.decimal_places is not None and (isinstance(self.decimal_places, bool) or not isinstance(self.decimal_places, int) or self.decimal_places < 0):
            raise ValueError(f"$decimal_places must be None or a non-negative integer, but provided value is: {self.decimal_places}")

        if not isinstance(self.rounding_strategy, RoundingStrategy):
            raise TypeError(f"$rounding_strategy must be a RoundingStrategy, but provided value is: {self.rounding_strategy}")

        # Raise: $digit_group_size must be a non-negative int
        if isinstance(self.digit_group_size, bool) or not isinstance(self.digit_group_size, int) or self.digit_group_size < 0:
            raise ValueError(f"$digit_group_size must be a non-negative integer, but provided value is: {self.digit_group_size}")

        if self.digit_groupings is not None:
            groupings = tuple(self.digit_groupings)
            # Raise: every explicit group must hold at least one digit
            if any(isinstance(size, bool) or not isinstance(size, int) or size <= 0 for size in groupings):
                raise ValueError(f"$digit_groupings must contain only positive integers, but provided value is: {self.digit_groupings}")
            object.__setattr__(self, "digit_groupings", groupings)

        for field_name in ("decimal_separator", "digit_group_separator", "positive_template", "negative_template"):
            if not isinstance(getattr(self, field_name), str):
                raise TypeError(f"${field_name} must be a string, but provided value is: {getattr(self, field_name)!r}")

        if self.zero_template is not None and not isinstance(self.zero_template, str):
            raise TypeError(f"$zero_template must be None or a string, but provided value is: {self.zero_template!r}")

    def with_options(self, **changes) -> Formatter:
        """Return a copy of this formatter with the given fields replaced."""
        return dataclasses.replace(self, **changes)

    def format_amount(self, amount: DecimalLike, default_decimal_places: int) -> str:
        """Round and group $amount into an unsigned, fixed-precision numeric string.

        The result has no sign and no currency marks, e.g. "1,234,567.89".

        Args:
            amount: Amount to render.
            default_decimal_places: Decimal places used when $decimal_places is not set,
                normally the currency's minor units.

        Returns:
            Grouped amount string.

        Raises:
            ValueError: If $amount is not a finite number.
        """
        decimal_places = self._resolve_decimal_places(default_decimal_places)
        rounded = round_decimal(self._to_decimal(amount), decimal_places, self.rounding_strategy)
        return self._render_rounded(rounded, decimal_places)

    def format(self, amount: DecimalLike, currency: CurrencyLike) -> str:
        """Render $amount in $currency using the sign-dependent template.

        Args:
            amount: Amount to render.
            currency: Static currency class or currency handle.

        Returns:
            Rendered text, e.g. "-$1,234.50" or "XXX 1,234.00".

        Raises:
            UnterminatedTokenError: If the selected template has a `{` without `}`.
            InvalidTokenError: If the selected template has an empty or unknown token.
            ValueError: If $amount is not a finite number.
        """
        decimal_places = self._resolve_decimal_places(currency.minor_units)
        rounded = round_decimal(self._to_decimal(amount), decimal_places, self.rounding_strategy)

        segments = parse_template(self._select_template(rounded))
        amount_text = self._render_rounded(rounded, decimal_places)
        symbol = currency.symbol or ""

        parts = []
        for segment in segments:
            if segment.is_token:
                parts.append(_TOKEN_RENDERERS[segment.text](amount_text, symbol, currency.code))
            else:
                parts.append(segment.text)
        return "".join(parts)

    # region Helpers

    def _resolve_decimal_places(self, default_decimal_places: int) -> int:
        if self.decimal_places is not None:
            return self.decimal_places
        return default_decimal_places

    def _select_template(self, rounded: Decimal) -> str:
        # Zero is checked first so that a negative zero renders with the zero template
        if rounded.is_zero():
            return self.zero_template if self.zero_template is not None else self.positive_template
        if rounded.is_signed():
            return self.negative_template
        return self.positive_template

    def _render_rounded(self, rounded: Decimal, decimal_places: int) -> str:
        # Fixed-point notation never uses an exponent; the sign belongs to the template
        digits = format(rounded, "f").lstrip("-").strip()
        whole, _, fraction = digits.partition(".")

        grouped_whole = self.digit_group_separator.join(self._group_whole_digits(whole))
        if decimal_places == 0:
            return grouped_whole

        return f"{grouped_whole}{self.decimal_separator}{fraction.ljust(decimal_places, '0')}"

    def _group_sizes(self) -> Iterable[int]:
        if self.digit_groupings is not None:
            return self.digit_groupings
        if self.digit_group_size > 0:
            return repeat(self.digit_group_size)
        return ()

    def _group_whole_digits(self, whole: str) -> list[str]:
        groups: list[str] = []
        group_end = len(whole)
        for size in self._group_sizes():
            if size >= group_end:
                break
            groups.append(whole[group_end - size : group_end])
            group_end -= size

        if group_end > 0:
            groups.append(whole[:group_end])

        # Groups were collected right-to-left
        groups.reverse()
        return groups

    @staticmethod
    def _to_decimal(amount: DecimalLike) -> Decimal:
        try:
            return as_decimal(amount)
        except (ValueError, TypeError, InvalidOperation) as e:
            raise ValueError(f"Cannot format $amount ({amount}) because it cannot be converted to Decimal") from e

    # endregion


DEFAULT_FORMATTER = Formatter()
