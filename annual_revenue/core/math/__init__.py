"""
Core math modules для Annual Revenue

Денежная арифметика на Decimal и расчёт годовой статистики выручки.
"""

# Numerical Safeguards
from annual_revenue.core.math.numerical_safeguards import (
    CURRENCY_DECIMAL_PLACES,
    required_precision,
    round_currency,
    safe_divide,
)

# Revenue Statistics
from annual_revenue.core.math.revenue_statistics import (
    IGNORE_DAYS_WITHOUT_REVENUE_DEFAULT,
    ScanOrder,
    compute_annual_average,
    compute_revenue_statistics,
    count_days_above_average,
    iter_day_indices,
)

__all__ = [
    # Numerical Safeguards — Constants
    "CURRENCY_DECIMAL_PLACES",
    # Numerical Safeguards — Functions
    "required_precision",
    "round_currency",
    "safe_divide",
    # Revenue Statistics — Constants
    "IGNORE_DAYS_WITHOUT_REVENUE_DEFAULT",
    # Revenue Statistics — Types
    "ScanOrder",
    # Revenue Statistics — Functions
    "compute_annual_average",
    "compute_revenue_statistics",
    "count_days_above_average",
    "iter_day_indices",
]
