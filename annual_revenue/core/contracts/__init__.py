"""
Contract Validation Module

Модуль для валидации JSON контрактов Annual Revenue.
"""

from .validators import (
    ContractValidator,
    DailyRevenueSeriesValidator,
    RevenueStatisticsValidator,
    SchemaLoader,
    validate_daily_revenue_series,
    validate_revenue_statistics,
)

__all__ = [
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "DailyRevenueSeriesValidator",
    "RevenueStatisticsValidator",
    # Functions
    "validate_daily_revenue_series",
    "validate_revenue_statistics",
]
