"""Tests for the financial_summary_cli adapter."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

from src.adapters import financial_summary_cli
from src.domain.exceptions import FinancialQueryError
from src.domain.models import (
    FinancialFilters,
    FinancialSummary,
    PeriodBreakdown,
    PeriodBucket,
)


def _patch_container(monkeypatch, summary_use_case, breakdown_use_case):
    adapter = MagicMock()
    monkeypatch.setattr(financial_summary_cli, "get_app_logger", MagicMock)
    monkeypatch.setattr(financial_summary_cli, "get_usage_logger", MagicMock)
    monkeypatch.setattr(
        financial_summary_cli,
        "build_settings",
        lambda: "settings",
    )
    monkeypatch.setattr(
        financial_summary_cli,
        "build_database_adapter",
        lambda settings: adapter,
    )
    monkeypatch.setattr(
        financial_summary_cli,
        "build_financial_summary_use_case",
        lambda settings, db_port: summary_use_case,
    )
    monkeypatch.setattr(
        financial_summary_cli,
        "build_period_breakdown_use_case",
        lambda settings, db_port: breakdown_use_case,
    )
    return adapter


def test_main_prints_summary_and_breakdown(monkeypatch, capsys) -> None:
    """The CLI should read filters from the env and print the report."""
    monkeypatch.setenv("FINANCE_COMPANY_ID", "c1")
    monkeypatch.delenv("FINANCE_USER_ID", raising=False)
    monkeypatch.setenv("FINANCE_START_DATE", "2024-01-01")
    monkeypatch.setenv("FINANCE_END_DATE", "not-a-date")
    monkeypatch.setenv("FINANCE_PERIOD_COUNT", "2")
    monkeypatch.delenv("FINANCE_GRANULARITY", raising=False)

    summary_use_case = MagicMock()
    summary_use_case.execute.return_value = FinancialSummary(
        total_income=Decimal("170"),
        total_expenses=Decimal("30"),
        net_profit=Decimal("140"),
        income_count=3,
        expense_count=1,
    )
    breakdown_use_case = MagicMock()
    breakdown_use_case.execute.return_value = PeriodBreakdown(
        granularity="month",
        buckets=[
            PeriodBucket(
                label="Feb 24",
                start=date(2024, 2, 1),
                income=Decimal("0"),
                expenses=Decimal("0"),
            ),
            PeriodBucket(
                label="Mar 24",
                start=date(2024, 3, 1),
                income=Decimal("170"),
                expenses=Decimal("30"),
            ),
        ],
    )
    adapter = _patch_container(
        monkeypatch,
        summary_use_case,
        breakdown_use_case,
    )

    exit_code = financial_summary_cli.main()

    assert exit_code == 0
    adapter.dispose.assert_called_once_with()
    expected_filters = FinancialFilters(
        company_id="c1",
        start_date=date(2024, 1, 1),
    )
    summary_use_case.execute.assert_called_once_with(expected_filters)
    breakdown_use_case.execute.assert_called_once_with(
        expected_filters,
        period_count=2,
        granularity="month",
    )
    captured = capsys.readouterr()
    assert "net_profit=140" in captured.out
    assert "Mar 24: income=170, expenses=30" in captured.out
    assert "Averages: income=85.00, expenses=15.00" in captured.out


def test_main_returns_error_code_on_query_failure(monkeypatch, capsys) -> None:
    """Read failures are logged and reported through the exit code."""
    summary_use_case = MagicMock()
    summary_use_case.execute.side_effect = FinancialQueryError("down")
    adapter = _patch_container(monkeypatch, summary_use_case, MagicMock())

    exit_code = financial_summary_cli.main()

    assert exit_code == 1
    adapter.dispose.assert_called_once_with()
    assert capsys.readouterr().out == ""


def test_main_returns_error_code_without_database_url(monkeypatch) -> None:
    """Missing configuration is reported instead of raising."""
    _patch_container(monkeypatch, MagicMock(), MagicMock())

    def _missing():
        raise RuntimeError("Missing environment variable: SUPABASE_DB_URL")

    monkeypatch.setattr(financial_summary_cli, "build_settings", _missing)

    assert financial_summary_cli.main() == 1
