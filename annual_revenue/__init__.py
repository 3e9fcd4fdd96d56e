"""
Annual Revenue — годовая статистика дневной выручки.

Минимальная/максимальная дневная выручка и количество дней выше
среднегодовой, с форматированием в локальную валюту.
"""

from annual_revenue.core.domain import DailyRevenueSeries, RevenueStatisticsResult
from annual_revenue.core.math import compute_revenue_statistics

__version__ = "1.0.0"

__all__ = [
    "DailyRevenueSeries",
    "RevenueStatisticsResult",
    "compute_revenue_statistics",
]
