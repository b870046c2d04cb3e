"""Value Objects shared across the domain.

Value Objects are immutable and compared by value, not identity.
They encapsulate validation so invalid values can never exist: the
``create`` factories and direct construction run the same checks.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from babel.numbers import format_currency

from optimus.domain.exceptions import (
    CurrencyMismatchError,
    DomainValidationError,
    InvalidPriceError,
    InvalidProductNameError,
    InvalidQuantityError,
)

DEFAULT_CURRENCY = "EUR"
DEFAULT_LOCALE = "fr-FR"
DEFAULT_LOW_STOCK_THRESHOLD = 10
MAX_PRODUCT_NAME_LENGTH = 200


def _is_whole_number(value: object) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _round_half_up(value: Decimal) -> int:
    return int(value.quantize(Decimal("1"), rounding=ROUND_HALF_UP))


@dataclass(frozen=True)
class Money:
    """Monetary amount stored as integer cents with an ISO 4217 currency.

    Integer cents keep every sum and difference exact. Rounding only
    happens when a decimal amount is converted in (``from_float``) or
    when multiplying by a non-integer factor.
    """

    amount_in_cents: int
    currency: str = DEFAULT_CURRENCY

    def __post_init__(self) -> None:
        if not _is_whole_number(self.amount_in_cents) or self.amount_in_cents < 0:
            raise InvalidPriceError(self.amount_in_cents)
        if (
            not isinstance(self.currency, str)
            or len(self.currency) != 3
            or not self.currency.isascii()
            or not self.currency.isalpha()
        ):
            raise DomainValidationError(
                f"Currency must be a 3-letter ISO 4217 code, got {self.currency!r}",
                currency=self.currency,
            )
        object.__setattr__(self, "currency", self.currency.upper())

    # --- Factories ------------------------------------------------------------

    @classmethod
    def create(cls, amount_in_cents: int, currency: str = DEFAULT_CURRENCY) -> Money:
        return cls(amount_in_cents, currency)

    @classmethod
    def from_float(
        cls,
        amount: float | int | str | Decimal,
        currency: str = DEFAULT_CURRENCY,
    ) -> Money:
        """Build from an amount in currency units, e.g. ``15.99`` -> 1599 cents.

        Goes through ``str`` so binary float noise (``15.99 * 100 ==
        1598.9999...``) never leaks into the cent value.
        """
        try:
            cents = Decimal(str(amount)) * 100
        except (InvalidOperation, ValueError) as exc:
            raise InvalidPriceError(amount) from exc
        if not cents.is_finite():
            raise InvalidPriceError(amount)
        return cls.create(_round_half_up(cents), currency)

    # --- Accessors ------------------------------------------------------------

    @property
    def cents(self) -> int:
        return self.amount_in_cents

    @property
    def amount(self) -> Decimal:
        return Decimal(self.amount_in_cents) / 100

    def to_float(self) -> float:
        return self.amount_in_cents / 100

    # --- Arithmetic -----------------------------------------------------------

    def add(self, other: Money) -> Money:
        self._assert_same_currency(other)
        return Money.create(self.amount_in_cents + other.amount_in_cents, self.currency)

    def subtract(self, other: Money) -> Money:
        """Raises InvalidPriceError if the result would be negative."""
        self._assert_same_currency(other)
        return Money.create(self.amount_in_cents - other.amount_in_cents, self.currency)

    def multiply(self, factor: int | float | Decimal) -> Money:
        if isinstance(factor, bool) or not isinstance(factor, (int, float, Decimal)):
            raise TypeError(
                f"Can only multiply Money by a number, got {type(factor).__name__}"
            )
        result = Decimal(self.amount_in_cents) * Decimal(str(factor))
        if not result.is_finite():
            raise InvalidPriceError(factor)
        return Money.create(_round_half_up(result), self.currency)

    def equals(self, other: Money) -> bool:
        return self == other

    __add__ = add
    __sub__ = subtract
    __mul__ = multiply

    def __lt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount_in_cents < other.amount_in_cents

    def __le__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount_in_cents <= other.amount_in_cents

    def __gt__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount_in_cents > other.amount_in_cents

    def __ge__(self, other: Money) -> bool:
        self._assert_same_currency(other)
        return self.amount_in_cents >= other.amount_in_cents

    # --- Display --------------------------------------------------------------

    def format(self, locale: str = DEFAULT_LOCALE) -> str:
        """Locale-aware currency string, e.g. ``"15,99 €"`` for fr-FR.

        Accepts both ``fr-FR`` and ``fr_FR`` tags.
        """
        return format_currency(self.amount, self.currency, locale=locale.replace("-", "_"))

    def __str__(self) -> str:
        return f"{self.amount:.2f} {self.currency}"

    # --- Internal helpers -----------------------------------------------------

    def _assert_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise CurrencyMismatchError(self.currency, other.currency)


@dataclass(frozen=True)
class Quantity:
    """A non-negative whole number of units.

    Zero is allowed (an empty shelf); negative or fractional values are not.
    """

    value: int

    def __post_init__(self) -> None:
        if not _is_whole_number(self.value) or self.value < 0:
            raise InvalidQuantityError(self.value)

    @classmethod
    def create(cls, amount: int) -> Quantity:
        return cls(amount)

    def add(self, other: Quantity) -> Quantity:
        return Quantity.create(self.value + other.value)

    def subtract(self, other: Quantity) -> Quantity:
        """Raises InvalidQuantityError if the result would be negative."""
        return Quantity.create(self.value - other.value)

    __add__ = add
    __sub__ = subtract

    def is_sufficient_for(self, requested: Quantity) -> bool:
        return self.value >= requested.value

    def is_low_stock(self, threshold: int = DEFAULT_LOW_STOCK_THRESHOLD) -> bool:
        return self.value < threshold

    def equals(self, other: Quantity) -> bool:
        return self == other

    def __str__(self) -> str:
        return str(self.value)


@dataclass(frozen=True, eq=False)
class ProductName:
    """Trimmed, non-empty product name of at most 200 characters.

    Two names are equal regardless of case: "Tomate" == "TOMATE".
    """

    value: str

    def __post_init__(self) -> None:
        if not isinstance(self.value, str):
            raise InvalidProductNameError(self.value)
        trimmed = self.value.strip()
        if not trimmed or len(trimmed) > MAX_PRODUCT_NAME_LENGTH:
            raise InvalidProductNameError(self.value)
        object.__setattr__(self, "value", trimmed)

    @classmethod
    def create(cls, name: str) -> ProductName:
        return cls(name)

    def equals(self, other: ProductName) -> bool:
        return self == other

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ProductName):
            return NotImplemented
        return self.value.casefold() == other.value.casefold()

    def __hash__(self) -> int:
        return hash(self.value.casefold())

    def __str__(self) -> str:
        return self.value
