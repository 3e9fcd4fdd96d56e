"""
Currency Formatting — представление сумм как локализованных валютных строк

Слой представления поверх RevenueStatisticsResult:
- округление до 2 знаков (ROUND_HALF_EVEN)
- символ валюты и разделители по локали (Babel / CLDR)
- валюта по умолчанию выводится из территории локали (pt_BR → BRL)

Расчёт статистики от этого модуля не зависит.
"""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal, localcontext
from typing import Final, Optional

from babel import Locale, UnknownLocaleError
from babel.numbers import format_currency, get_territory_currencies

from annual_revenue.core.domain.revenue_statistics import RevenueStatisticsResult
from annual_revenue.core.math.numerical_safeguards import (
    CURRENCY_DECIMAL_PLACES,
    required_precision,
    round_currency,
)

# =============================================================================
# КОНФИГУРАЦИЯ
# =============================================================================

# Локаль по умолчанию: отчёт выводится для pt-BR
DEFAULT_LOCALE: Final[str] = "pt_BR"

REPORT_TITLE: Final[str] = "*Estatísticas Anual de Faturamento Diário*"
LOWEST_REVENUE_LABEL: Final[str] = "Menor Faturamento Diário do Ano"
HIGHEST_REVENUE_LABEL: Final[str] = "Maior Faturamento Diário do Ano"
DAYS_ABOVE_AVERAGE_LABEL: Final[str] = "Número de Dias que o Faturamento superou a Média Anual"


class UnsupportedLocale(ValueError):
    """Локаль неизвестна CLDR или по ней нельзя определить валюту."""

    pass


@dataclass(frozen=True)
class CurrencyFormatConfig:
    """Конфигурация форматирования валюты.

    - locale: идентификатор локали ('pt_BR', 'pt-br', 'en-US', ...)
    - currency: ISO 4217 код; None → текущая валюта территории локали
    - decimal_places: знаков после запятой при округлении
    """
    locale: str = DEFAULT_LOCALE
    currency: Optional[str] = None
    decimal_places: int = CURRENCY_DECIMAL_PLACES


# =============================================================================
# ЛОКАЛЬ И ВАЛЮТА
# =============================================================================


def resolve_locale(name: str) -> Locale:
    """
    Разбор идентификатора локали в формате 'pt_BR' или 'pt-br'.

    Raises:
        UnsupportedLocale: если локаль пустая, некорректная или неизвестна CLDR
    """
    if not name or not name.strip():
        raise UnsupportedLocale("Locale identifier must not be empty")

    identifier = name.strip().replace("-", "_")
    try:
        return Locale.parse(identifier)
    except (UnknownLocaleError, ValueError) as e:
        raise UnsupportedLocale(f"Unsupported locale {name!r}: {e}") from e


def currency_for_locale(locale: Locale, on: Optional[date] = None) -> str:
    """
    Текущая валюта территории локали (pt_BR → 'BRL').

    Raises:
        UnsupportedLocale: если у локали нет территории или валюты
    """
    if not locale.territory:
        raise UnsupportedLocale(
            f"Locale {locale} has no territory; pass an explicit currency"
        )

    currencies = get_territory_currencies(locale.territory, start_date=on or date.today())
    if not currencies:
        raise UnsupportedLocale(f"No currency in use for territory {locale.territory}")

    return currencies[0]


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_revenue(
    amount: Decimal,
    config: Optional[CurrencyFormatConfig] = None,
    locale: Optional[str] = None,
) -> str:
    """
    Сумма как локализованная валютная строка.

    Args:
        amount: Сумма
        config: Конфигурация форматирования (default: CurrencyFormatConfig())
        locale: Переопределение локали из config

    Returns:
        Строка вида 'R$ 2.500,00' (pt_BR) или '$2,500.00' (en_US)

    Raises:
        UnsupportedLocale: если локаль неизвестна или валюту нельзя определить
    """
    config = config or CurrencyFormatConfig()
    babel_locale = resolve_locale(locale or config.locale)
    currency = config.currency or currency_for_locale(babel_locale)

    rounded = round_currency(Decimal(amount), config.decimal_places)
    # Babel квантует в текущем контексте Decimal
    with localcontext() as ctx:
        ctx.prec = required_precision(rounded, config.decimal_places)
        return format_currency(rounded, currency, locale=babel_locale)


def render_statistics_report(
    result: RevenueStatisticsResult,
    config: Optional[CurrencyFormatConfig] = None,
) -> str:
    """Текстовый отчёт по годовой статистике (три строки после заголовка)."""
    config = config or CurrencyFormatConfig()

    return (
        f"{REPORT_TITLE}\n\n"
        f"{LOWEST_REVENUE_LABEL}\t\t{format_revenue(result.lowest_revenue, config)}\n"
        f"{HIGHEST_REVENUE_LABEL}\t\t{format_revenue(result.highest_revenue, config)}\n"
        f"{DAYS_ABOVE_AVERAGE_LABEL}\t\t{result.days_above_average} dia(s)"
    )
