"""
Numerical Safeguards — безопасная денежная арифметика на Decimal

Модуль обеспечивает численную устойчивость денежных операций:
- Безопасное деление с fallback вместо деления на ноль
- Округление до копеек (banker's rounding, как Math.Round по умолчанию)

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Деление на ноль никогда не происходит (возвращается fallback)
2. Все операции детерминированы и воспроизводимы (Decimal, без float)
"""

from decimal import ROUND_HALF_EVEN, Decimal, getcontext, localcontext
from typing import Final

from annual_revenue.core.domain.amounts import ZERO_AMOUNT

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Количество знаков после запятой для валюты
CURRENCY_DECIMAL_PLACES: Final[int] = 2


# =============================================================================
# БЕЗОПАСНОЕ ДЕЛЕНИЕ
# =============================================================================


def safe_divide(
    numerator: Decimal,
    denominator: Decimal | int,
    fallback: Decimal = ZERO_AMOUNT,
) -> Decimal:
    """
    Безопасное деление Decimal с защитой от деления на ноль.

    Для денег epsilon-защита не нужна: Decimal точен, поэтому fallback
    возвращается только при знаменателе, в точности равном нулю.

    Args:
        numerator: Числитель
        denominator: Знаменатель (сумма или количество дней)
        fallback: Значение при нулевом знаменателе (default: 0)

    Returns:
        numerator / denominator или fallback

    Examples:
        >>> safe_divide(Decimal(10), 4)
        Decimal('2.5')
        >>> safe_divide(Decimal(10), 0)
        Decimal('0')
    """
    if denominator == 0:
        return fallback

    return Decimal(numerator) / Decimal(denominator)


# =============================================================================
# ОКРУГЛЕНИЕ
# =============================================================================


def required_precision(amount: Decimal, places: int = CURRENCY_DECIMAL_PLACES) -> int:
    """
    Точность контекста, достаточная для amount с places знаками после запятой.

    Стандартный контекст (28 цифр) не вмещает, например, 1e27 с копейками:
    quantize в нём падает с InvalidOperation.

    Examples:
        >>> required_precision(Decimal("2500"))
        28
        >>> required_precision(Decimal("1e27"))
        31
    """
    return max(getcontext().prec, amount.adjusted() + places + 2)


def round_currency(amount: Decimal, places: int = CURRENCY_DECIMAL_PLACES) -> Decimal:
    """
    Округление суммы до заданного числа знаков (ROUND_HALF_EVEN).

    Args:
        amount: Исходная сумма
        places: Количество знаков после запятой (default: 2)

    Returns:
        Округлённая сумма

    Raises:
        ValueError: если places < 0

    Examples:
        >>> round_currency(Decimal("3583.3333"))
        Decimal('3583.33')
        >>> round_currency(Decimal("0.125"))
        Decimal('0.12')
        >>> round_currency(Decimal("0.135"))
        Decimal('0.14')
    """
    if places < 0:
        raise ValueError(f"places must be non-negative, got {places}")

    quantum = Decimal(1).scaleb(-places)
    with localcontext() as ctx:
        ctx.prec = required_precision(amount, places)
        return amount.quantize(quantum, rounding=ROUND_HALF_EVEN)
