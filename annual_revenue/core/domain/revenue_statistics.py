"""
Revenue Statistics — модели ряда дневной выручки и годовой статистики

Immutable Pydantic модели:
- DailyRevenueSeries: ряд дневных выручек за год (вход расчёта)
- RevenueStatisticsResult: результат расчёта (min, max, дни выше среднего)

Полная совместимость с JSON Schema (contracts/schema/revenue_statistics.json)
через RevenueStatisticsResult.to_contract().
"""

from collections.abc import Iterable
from decimal import Decimal
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

from .amounts import to_revenue_amount


# =============================================================================
# DAILY REVENUE SERIES
# =============================================================================


class DailyRevenueSeries(BaseModel):
    """
    Ряд дневных выручек за год.

    Длина произвольная (не обязательно 365). Каждый элемент приводится
    к конечному Decimal через to_revenue_amount.

    Immutable модель (frozen=True).
    """

    revenues: tuple[Decimal, ...] = Field(
        default=(), description="Дневные выручки в порядке дней"
    )

    model_config = {"frozen": True}

    @field_validator("revenues", mode="before")
    @classmethod
    def coerce_revenues(cls, v: Any) -> tuple[Decimal, ...]:
        """Приведение каждого элемента к Decimal (NaN/Inf запрещены)."""
        if isinstance(v, (str, bytes)) or not isinstance(v, Iterable):
            raise ValueError(
                f"revenues must be a sequence of amounts, got {type(v).__name__}"
            )
        return tuple(to_revenue_amount(value) for value in v)

    def __len__(self) -> int:
        return len(self.revenues)

    def to_contract(self) -> Dict[str, Any]:
        """JSON-совместимое представление ряда (суммы как строки)."""
        return {"revenues": [format(revenue, "f") for revenue in self.revenues]}

    def statistics(self, ignore_days_without_revenue: bool = True) -> "RevenueStatisticsResult":
        """Годовая статистика ряда (см. compute_revenue_statistics)."""
        from annual_revenue.core.math.revenue_statistics import compute_revenue_statistics

        return compute_revenue_statistics(
            self, ignore_days_without_revenue=ignore_days_without_revenue
        )


# =============================================================================
# REVENUE STATISTICS RESULT
# =============================================================================


class RevenueStatisticsResult(BaseModel):
    """
    Годовая статистика дневной выручки.

    Immutable модель (frozen=True). Создаётся один раз расчётом,
    identity определяется только значениями полей.

    Инвариант: lowest_revenue <= highest_revenue. Для пустого ряда или ряда
    из одних нулей оба поля равны 0.
    """

    lowest_revenue: Decimal = Field(
        ..., allow_inf_nan=False, description="Минимальная дневная выручка (без нулевых дней)"
    )
    highest_revenue: Decimal = Field(
        ..., allow_inf_nan=False, description="Максимальная дневная выручка (без нулевых дней)"
    )
    days_above_average: int = Field(
        ..., ge=0, description="Количество дней с выручкой строго выше среднегодовой"
    )

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_bounds(self) -> "RevenueStatisticsResult":
        """Проверка lowest_revenue <= highest_revenue."""
        if self.lowest_revenue > self.highest_revenue:
            raise ValueError(
                f"lowest_revenue ({self.lowest_revenue}) must be <= "
                f"highest_revenue ({self.highest_revenue})"
            )
        return self

    # Presentation -----------------------------------------------------------

    def friendly_lowest_revenue(self, locale: Optional[str] = None) -> str:
        """Минимальная выручка как локализованная валютная строка."""
        from annual_revenue.reporting.currency import format_revenue

        return format_revenue(self.lowest_revenue, locale=locale)

    def friendly_highest_revenue(self, locale: Optional[str] = None) -> str:
        """Максимальная выручка как локализованная валютная строка."""
        from annual_revenue.reporting.currency import format_revenue

        return format_revenue(self.highest_revenue, locale=locale)

    def to_contract(self) -> Dict[str, Any]:
        """
        JSON-совместимое представление (суммы как строки, без потери точности).

        Returns:
            dict, валидный по схеме revenue_statistics
        """
        return {
            "lowest_revenue": format(self.lowest_revenue, "f"),
            "highest_revenue": format(self.highest_revenue, "f"),
            "days_above_average": self.days_above_average,
        }
