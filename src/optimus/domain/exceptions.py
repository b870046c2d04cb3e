"""Domain-level exceptions.

Two families of errors exist:

- validation errors: a value object was given malformed scalar input
  (negative cents, fractional quantity, empty name)
- business-rule errors: the input is well-formed but violates a rule
  of the domain (out of stock, illegal status transition)

Every error carries a machine-readable ``code`` and a ``kind`` so callers
can branch on the family without isinstance checks, plus a ``details``
dict with the rule-specific fields.
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorKind(Enum):
    VALIDATION = "VALIDATION"
    BUSINESS_RULE = "BUSINESS_RULE"


class DomainError(Exception):
    """Base class for all domain errors."""

    kind: ErrorKind

    def __init__(self, message: str, code: str, **details: Any) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.details = details


class DomainValidationError(DomainError):
    """Malformed input to a value object."""

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, **details: Any) -> None:
        super().__init__(message, "DOMAIN_VALIDATION_ERROR", **details)


class BusinessRuleError(DomainError):
    """Valid data that violates a domain rule."""

    kind = ErrorKind.BUSINESS_RULE


# ---------------------------------------------------------------------------
# Validation errors
# ---------------------------------------------------------------------------


class InvalidQuantityError(DomainValidationError):

    def __init__(self, quantity: object) -> None:
        super().__init__(
            f"Invalid quantity: {quantity!r}. Must be a non-negative integer.",
            quantity=quantity,
        )
        self.quantity = quantity


class InvalidPriceError(DomainValidationError):

    def __init__(self, price: object) -> None:
        super().__init__(
            f"Invalid price: {price!r}. Must be a non-negative whole number of cents.",
            price=price,
        )
        self.price = price


class InvalidProductNameError(DomainValidationError):

    def __init__(self, name: object) -> None:
        super().__init__(
            f"Invalid product name: {name!r}. Must be 1 to 200 characters.",
            name=name,
        )
        self.name = name


# ---------------------------------------------------------------------------
# Business-rule errors
# ---------------------------------------------------------------------------


class OutOfStockError(BusinessRuleError):

    def __init__(self, product_id: int, requested: int, available: int) -> None:
        super().__init__(
            f"Insufficient stock for product {product_id}: "
            f"requested {requested}, available {available}",
            "OUT_OF_STOCK",
            product_id=product_id,
            requested=requested,
            available=available,
        )
        self.product_id = product_id
        self.requested = requested
        self.available = available


class CurrencyMismatchError(BusinessRuleError):

    def __init__(self, left: str, right: str) -> None:
        super().__init__(
            f"Cannot operate on different currencies: {left} and {right}",
            "CURRENCY_MISMATCH",
            left=left,
            right=right,
        )


class InvalidStatusTransitionError(BusinessRuleError):

    def __init__(self, message: str, order_id: int, current_status: str) -> None:
        super().__init__(
            message,
            "INVALID_STATUS_TRANSITION",
            order_id=order_id,
            current_status=current_status,
        )
        self.order_id = order_id
        self.current_status = current_status


class SupplierNotEligibleError(BusinessRuleError):

    def __init__(self, supplier_id: int, supplier_name: str) -> None:
        super().__init__(
            f"Supplier '{supplier_name}' cannot receive orders "
            f"(must be active and approved)",
            "SUPPLIER_NOT_ELIGIBLE",
            supplier_id=supplier_id,
        )
        self.supplier_id = supplier_id


class EntityNotFoundError(BusinessRuleError):
    """A requested entity does not exist."""

    def __init__(self, entity: str, entity_id: object) -> None:
        super().__init__(
            f"{entity} #{entity_id} not found",
            "ENTITY_NOT_FOUND",
            entity=entity,
            entity_id=entity_id,
        )
