"""
Revenue Statistics — годовая статистика дневной выручки

Модуль вычисляет по ряду дневных выручек за год:
- минимальную дневную выручку (без дней с нулевой выручкой)
- максимальную дневную выручку (без дней с нулевой выручкой)
- количество дней, выручка которых строго выше среднегодовой

ФОРМУЛЫ:
    average = Σ revenue_d / (N - days_without_revenue)
    days_above_average = |{d : revenue_d > average}|

ПОЛИТИКА ВЫРОЖДЕННЫХ СЛУЧАЕВ:
1. Пустой ряд → (0, 0, 0), деление не выполняется
2. Все дни нулевые → (0, 0, 0), average = 0 через safe_divide fallback,
   второй проход не выполняется
3. Отрицательные суммы допустимы, арифметика одинакова для любого знака

Сложность O(n): два линейных прохода. Функция чистая.
"""

import logging
from decimal import Decimal
from enum import Enum
from typing import Final, Iterable, Iterator, Optional, Sequence

from annual_revenue.core.domain.amounts import (
    ZERO_AMOUNT,
    AmountLike,
    InvalidRevenueAmount,
    to_revenue_amount,
)
from annual_revenue.core.domain.revenue_statistics import (
    DailyRevenueSeries,
    RevenueStatisticsResult,
)
from annual_revenue.core.math.numerical_safeguards import safe_divide

logger = logging.getLogger(__name__)

# =============================================================================
# КОНСТАНТЫ
# =============================================================================

# Исключать дни без выручки из min/max/average по умолчанию
IGNORE_DAYS_WITHOUT_REVENUE_DEFAULT: Final[bool] = True


class ScanOrder(str, Enum):
    """Порядок обхода дней. На результат не влияет."""

    FORWARD = "forward"
    TWO_POINTER = "two_pointer"  # слева и справа к середине


# =============================================================================
# ОБХОД ИНДЕКСОВ
# =============================================================================


def iter_day_indices(length: int, scan_order: ScanOrder = ScanOrder.FORWARD) -> Iterator[int]:
    """
    Индексы дней в заданном порядке обхода, каждый ровно один раз.

    Args:
        length: Количество дней
        scan_order: FORWARD (0..N-1) или TWO_POINTER (0, N-1, 1, N-2, ...)

    Yields:
        Индексы дней

    Examples:
        >>> list(iter_day_indices(5, ScanOrder.TWO_POINTER))
        [0, 4, 1, 3, 2]
        >>> list(iter_day_indices(4, ScanOrder.TWO_POINTER))
        [0, 3, 1, 2]
    """
    if length < 0:
        raise ValueError(f"length must be non-negative, got {length}")

    if scan_order == ScanOrder.FORWARD:
        yield from range(length)
        return

    left, right = 0, length - 1
    while left < right:
        yield left
        yield right
        left += 1
        right -= 1

    # Нечётная длина: средний день
    if left == right:
        yield left


def _normalize(revenues: Iterable[AmountLike] | DailyRevenueSeries) -> tuple[Decimal, ...]:
    if isinstance(revenues, DailyRevenueSeries):
        return revenues.revenues
    # Строка итерируема посимвольно, но рядом не является
    if isinstance(revenues, (str, bytes)):
        raise InvalidRevenueAmount(
            f"Daily revenues must be a sequence of amounts, not a string: {revenues!r}"
        )
    return tuple(to_revenue_amount(value) for value in revenues)


def _is_counted(revenue: Decimal, ignore_days_without_revenue: bool) -> bool:
    return revenue != 0 or not ignore_days_without_revenue


# =============================================================================
# СРЕДНЕЕ И ПРЕВЫШЕНИЯ
# =============================================================================


def compute_annual_average(
    revenues: Sequence[AmountLike] | DailyRevenueSeries,
    ignore_days_without_revenue: bool = IGNORE_DAYS_WITHOUT_REVENUE_DEFAULT,
) -> Decimal:
    """
    Среднегодовая дневная выручка.

    Если учитываемых дней нет (пустой ряд или все дни нулевые при
    ignore_days_without_revenue=True), возвращает 0.

    Args:
        revenues: Дневные выручки
        ignore_days_without_revenue: Исключать нулевые дни из знаменателя

    Returns:
        Среднее по учитываемым дням или 0
    """
    amounts = _normalize(revenues)
    counted = [r for r in amounts if _is_counted(r, ignore_days_without_revenue)]
    return safe_divide(sum(counted, ZERO_AMOUNT), len(counted))


def count_days_above_average(
    revenues: Sequence[AmountLike] | DailyRevenueSeries,
    average: Decimal,
) -> int:
    """
    Количество дней со строгим превышением среднего.

    Сравнение единообразное: нулевые дни отдельно не исключаются.

    Args:
        revenues: Дневные выручки
        average: Порог (среднегодовая выручка)

    Returns:
        Количество дней с revenue > average
    """
    amounts = _normalize(revenues)
    return sum(1 for revenue in amounts if revenue > average)


# =============================================================================
# ГОДОВАЯ СТАТИСТИКА
# =============================================================================


def compute_revenue_statistics(
    revenues: Sequence[AmountLike] | DailyRevenueSeries,
    ignore_days_without_revenue: bool = IGNORE_DAYS_WITHOUT_REVENUE_DEFAULT,
    scan_order: ScanOrder = ScanOrder.FORWARD,
) -> RevenueStatisticsResult:
    """
    Годовая статистика дневной выручки.

    Первый проход: min/max (seed от первого учитываемого дня), сумма,
    количество дней без выручки. Второй проход: количество дней выше
    среднего. Если учитываемых дней нет, второй проход пропускается.

    Args:
        revenues: Дневные выручки (последовательность или DailyRevenueSeries)
        ignore_days_without_revenue: Исключать нулевые дни из min/max/average
        scan_order: Порядок обхода (на результат не влияет)

    Returns:
        RevenueStatisticsResult

    Raises:
        InvalidRevenueAmount: если элемент не приводится к конечному Decimal

    Examples:
        >>> result = compute_revenue_statistics([0, 0, 5000, 2500, 3250])
        >>> (result.lowest_revenue, result.highest_revenue, result.days_above_average)
        (Decimal('2500'), Decimal('5000'), 1)
    """
    amounts = _normalize(revenues)
    days_count = len(amounts)

    lowest: Optional[Decimal] = None
    highest: Optional[Decimal] = None
    total = ZERO_AMOUNT
    days_without_revenue = 0

    for index in iter_day_indices(days_count, scan_order):
        revenue = amounts[index]

        if not _is_counted(revenue, ignore_days_without_revenue):
            days_without_revenue += 1
            continue

        if lowest is None or revenue < lowest:
            lowest = revenue
        if highest is None or revenue > highest:
            highest = revenue

        total += revenue

    counted_days = days_count - days_without_revenue

    if counted_days == 0:
        # Нет учитываемых дней: average не определено, превышений нет
        average = ZERO_AMOUNT
        days_above_average = 0
    else:
        average = safe_divide(total, counted_days)
        days_above_average = count_days_above_average(amounts, average)

    logger.debug(
        "Revenue statistics: days=%d without_revenue=%d total=%s average=%s "
        "lowest=%s highest=%s above_average=%d",
        days_count,
        days_without_revenue,
        total,
        average,
        lowest,
        highest,
        days_above_average,
    )

    return RevenueStatisticsResult(
        lowest_revenue=lowest if lowest is not None else ZERO_AMOUNT,
        highest_revenue=highest if highest is not None else ZERO_AMOUNT,
        days_above_average=days_above_average,
    )
