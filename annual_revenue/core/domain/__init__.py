"""
Domain models and value objects.

Contains the daily revenue series, the statistics result and amount coercion.
"""

from annual_revenue.core.domain.amounts import (
    ZERO_AMOUNT,
    AmountLike,
    InvalidRevenueAmount,
    is_finite_amount,
    to_revenue_amount,
)
from annual_revenue.core.domain.revenue_statistics import (
    DailyRevenueSeries,
    RevenueStatisticsResult,
)

__all__ = [
    # Amounts module
    "ZERO_AMOUNT",
    "AmountLike",
    "InvalidRevenueAmount",
    "is_finite_amount",
    "to_revenue_amount",
    # Revenue statistics models
    "DailyRevenueSeries",
    "RevenueStatisticsResult",
]
