"""Tests for the command line adapters."""

from datetime import datetime
from unittest.mock import MagicMock

from bucket_budget.adapters import advance_periods_cli, budget_report_cli
from bucket_budget.application.use_cases import (
    AddCategoryUseCase,
    AddExpenseUseCase,
    AddStreamUseCase,
    SetDistributionUseCase,
)


def test_advance_periods_cli_prints_boundaries(
    monkeypatch,
    capsys,
    dining_budget,
    clock,
):
    fake_logger = MagicMock()
    fake_usage_logger = MagicMock()
    clock.set(datetime(2024, 5, 21, 9, 0))
    monkeypatch.setattr(advance_periods_cli, "build_budget", lambda: dining_budget)
    monkeypatch.setattr(advance_periods_cli, "get_app_logger", lambda: fake_logger)
    monkeypatch.setattr(
        advance_periods_cli,
        "get_usage_logger",
        lambda: fake_usage_logger,
    )

    advance_periods_cli.main()

    out = capsys.readouterr().out
    assert "Month rolled over: no (open month 2024-05-01)" in out
    assert "Week reset: yes (open week 2024-05-20)" in out
    fake_usage_logger.info.assert_called_once()
    fake_logger.info.assert_called()


def test_render_report_lists_every_section(budget, logger):
    AddStreamUseCase(budget, logger=logger).execute(
        "MSCI",
        "4161.45",
        stream_id="msci",
    )
    SetDistributionUseCase(budget, logger=logger).execute(
        "msci",
        {"wolcc": 10, "savings": 5, "investments": 60, "taxes": 5, "spending": 20},
    )
    AddCategoryUseCase(budget, logger=logger).execute(
        "Dining & Drinks",
        "spending",
        goal=500,
        weekly_limit="116.28",
        is_tracked=True,
        category_id="dining",
    )
    AddExpenseUseCase(budget, logger=logger).execute("dining", "25.50")

    lines = budget_report_cli.render_report(budget)

    assert lines[0] == "Distributions"
    assert "savings=208.07" in lines[1]
    assert "unallocated=0.00" in lines[1]
    assert lines[2].startswith("  Totals: wolcc=416.15")
    assert "Monthly overview" in lines
    assert "  Dining & Drinks [spending]: spent 25.50 of 500.00" in "\n".join(lines)
    assert lines[-2] == "Weekly tracking"
    assert lines[-1] == (
        "  Dining & Drinks: spent 25.50 of 116.28, safe to spend today 18.16"
    )


def test_report_cli_prints_report(monkeypatch, capsys, dining_budget):
    monkeypatch.setattr(budget_report_cli, "build_budget", lambda: dining_budget)

    budget_report_cli.main()

    out = capsys.readouterr().out
    assert "Monthly overview" in out
    assert "safe to spend today 9.57" in out
