"""Domain value objects with validation.

Immutable value objects that enforce business constraints.
"""

from src.domain.value_objects.money import CurrencyMismatchError, Money

__all__ = [
    "CurrencyMismatchError",
    "Money",
]
