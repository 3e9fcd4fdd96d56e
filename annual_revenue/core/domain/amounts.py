"""
RevenueAmounts — централизованный модуль приведения денежных сумм

Единственный допустимый способ превратить входное значение (int, float,
строку, Decimal) в сумму дневной выручки.

ЗАПРЕЩЕНО считать деньги во float: float → str → Decimal.
"""

from decimal import Decimal, InvalidOperation
from typing import Final, Union

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Нулевая сумма (default для пустых/нулевых рядов)
ZERO_AMOUNT: Final[Decimal] = Decimal(0)

AmountLike = Union[Decimal, int, float, str]


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidRevenueAmount(ValueError):
    """Сумма не может быть приведена к конечному Decimal (NaN/Inf/мусор)."""

    pass


# =============================================================================
# ПРИВЕДЕНИЕ И ВАЛИДАЦИЯ
# =============================================================================


def is_finite_amount(value: Decimal) -> bool:
    """
    Проверка, является ли Decimal конечным (не NaN, не Infinity).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение конечное
    """
    return value.is_finite()


def to_revenue_amount(value: AmountLike) -> Decimal:
    """
    Приведение суммы к конечному Decimal.

    float конвертируется через str(), чтобы 0.1 стал Decimal("0.1"),
    а не двоичным приближением.

    Args:
        value: Decimal, int, float или строка

    Returns:
        Конечный Decimal

    Raises:
        InvalidRevenueAmount: bool, NaN/Infinity, нечисловая строка, прочие типы

    Examples:
        >>> to_revenue_amount(5000)
        Decimal('5000')
        >>> to_revenue_amount(0.1)
        Decimal('0.1')
        >>> to_revenue_amount("2500.50")
        Decimal('2500.50')
    """
    # bool является подклассом int, но не суммой
    if isinstance(value, bool):
        raise InvalidRevenueAmount(f"Revenue amount cannot be a bool: {value!r}")

    if isinstance(value, Decimal):
        amount = value
    elif isinstance(value, int):
        amount = Decimal(value)
    elif isinstance(value, float):
        amount = Decimal(str(value))
    elif isinstance(value, str):
        try:
            amount = Decimal(value.strip())
        except InvalidOperation:
            raise InvalidRevenueAmount(f"Revenue amount is not a number: {value!r}") from None
    else:
        raise InvalidRevenueAmount(
            f"Unsupported revenue amount type {type(value).__name__}: {value!r}"
        )

    if not is_finite_amount(amount):
        raise InvalidRevenueAmount(f"Revenue amount contains NaN/Infinity: {value!r}")

    return amount
