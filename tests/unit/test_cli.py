"""
Тесты для demonstration entry point (python -m annual_revenue)
"""

import pytest

from annual_revenue.__main__ import SAMPLE_DAILY_REVENUES, build_parser, main


class TestCli:
    """Тесты main(): отчёт, флаги, ошибки ввода."""

    def test_sample_report(self, capsys):
        """Без аргументов используется встроенный пример ряда."""
        assert main([]) == 0

        out = capsys.readouterr().out
        assert "Menor Faturamento Diário do Ano" in out
        assert "2.500,00" in out
        assert "5.000,00" in out
        assert out.rstrip().endswith("1 dia(s)")

    def test_amounts_and_locale(self, capsys):
        assert main(["10", "20", "30", "40", "--locale", "en-US"]) == 0

        out = capsys.readouterr().out
        assert "$10.00" in out
        assert "$40.00" in out
        assert out.rstrip().endswith("2 dia(s)")

    def test_include_zero_days(self, capsys):
        assert main([*SAMPLE_DAILY_REVENUES, "--include-zero-days", "--locale", "en_US"]) == 0

        out = capsys.readouterr().out
        assert "Menor Faturamento Diário do Ano\t\t$0.00" in out
        assert out.rstrip().endswith("3 dia(s)")

    def test_explicit_currency(self, capsys):
        assert main(["100", "--locale", "en_US", "--currency", "EUR"]) == 0
        assert "€100.00" in capsys.readouterr().out

    def test_large_amount(self, capsys):
        """Принятая большая сумма не роняет отчёт."""
        assert main(["1e27", "5", "--locale", "en-US"]) == 0

        out = capsys.readouterr().out
        assert "$1,000,000,000,000,000,000,000,000,000.00" in out
        assert "$5.00" in out
        assert out.rstrip().endswith("1 dia(s)")

    def test_invalid_amount_exits_with_usage_error(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["100", "abc"])

        assert exc_info.value.code == 2
        assert "invalid amount" in capsys.readouterr().err

    def test_unknown_locale_exits_with_usage_error(self):
        with pytest.raises(SystemExit) as exc_info:
            main(["100", "--locale", "xx-YY"])

        assert exc_info.value.code == 2

    def test_parser_defaults(self):
        args = build_parser().parse_args([])
        assert args.amounts == []
        assert args.locale == "pt_BR"
        assert args.currency is None
        assert args.include_zero_days is False
        assert args.log_level == "WARNING"
