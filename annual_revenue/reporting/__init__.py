"""Reporting: представление годовой статистики (валюта, текстовый отчёт)."""

from .currency import (
    DEFAULT_LOCALE,
    CurrencyFormatConfig,
    UnsupportedLocale,
    currency_for_locale,
    format_revenue,
    render_statistics_report,
    resolve_locale,
)

__all__ = [
    "DEFAULT_LOCALE",
    "CurrencyFormatConfig",
    "UnsupportedLocale",
    "currency_for_locale",
    "format_revenue",
    "render_statistics_report",
    "resolve_locale",
]
