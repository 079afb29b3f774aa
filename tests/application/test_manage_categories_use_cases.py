"""Tests for category creation, edits, goals and weekly limits."""

from decimal import Decimal

import pytest

from bucket_budget.application.use_cases.list_categories import (
    ListCategoriesUseCase,
)
from bucket_budget.application.use_cases.manage_categories import (
    AddCategoryUseCase,
    SetGoalUseCase,
    SetWeeklyLimitUseCase,
    UpdateCategoryUseCase,
)
from bucket_budget.domain.errors import CategoryNotFound, InvalidCategory


def test_add_category_starts_with_empty_aggregates(budget, logger) -> None:
    category = AddCategoryUseCase(budget, logger=logger).execute(
        " Rent ",
        "wolcc",
        goal="1200",
    )

    assert category.id == "id-1"
    assert category.name == "Rent"
    assert category.is_tracked is False
    assert category.this_month.goal == Decimal("1200.00")
    assert category.this_month.spent == Decimal("0")
    assert category.last_month == Decimal("0")
    logger.info.assert_called_once()


@pytest.mark.parametrize(
    "name, bucket, goal, weekly_limit",
    [
        ("", "spending", 0, 0),
        ("Rent", "housing", 0, 0),
        ("Rent", "wolcc", -1, 0),
        ("Rent", "wolcc", 0, "lots"),
    ],
)
def test_add_category_rejects_invalid_fields(
    budget,
    logger,
    name,
    bucket,
    goal,
    weekly_limit,
) -> None:
    with pytest.raises(InvalidCategory):
        AddCategoryUseCase(budget, logger=logger).execute(
            name,
            bucket,
            goal=goal,
            weekly_limit=weekly_limit,
        )

    assert budget.categories.all_categories() == []
    logger.warning.assert_called_once()


def test_add_category_rejects_duplicate_id(dining_budget, logger) -> None:
    with pytest.raises(InvalidCategory):
        AddCategoryUseCase(dining_budget, logger=logger).execute(
            "Dining again",
            "spending",
            category_id="dining",
        )

    assert dining_budget.categories.get("dining").name == "Dining & Drinks"


def test_list_categories_keeps_creation_order(budget, logger) -> None:
    add = AddCategoryUseCase(budget, logger=logger)
    for name in ["Rent", "Groceries", "Fuel"]:
        add.execute(name, "spending")
    UpdateCategoryUseCase(budget, logger=logger).execute("id-1", name="Home")

    views = ListCategoriesUseCase(budget).execute()

    assert [view.name for view in views] == ["Home", "Groceries", "Fuel"]


def test_monthly_view_reports_remaining_and_progress(dining_budget) -> None:
    [view] = ListCategoriesUseCase(dining_budget).execute()

    assert view.last_month == Decimal("668.14")
    assert view.remaining == Decimal("214.55")
    assert view.progress == Decimal("0.5709")
    assert view.over_goal is False


def test_update_category_changes_bucket(dining_budget, logger) -> None:
    category = UpdateCategoryUseCase(dining_budget, logger=logger).execute(
        "dining",
        bucket="wolcc",
    )

    assert category.bucket == "wolcc"
    assert category.this_month.spent == Decimal("285.45")


def test_update_category_rejects_bad_bucket_atomically(
    dining_budget,
    logger,
) -> None:
    with pytest.raises(InvalidCategory):
        UpdateCategoryUseCase(dining_budget, logger=logger).execute(
            "dining",
            name="Eating out",
            bucket="fun",
        )

    assert dining_budget.categories.get("dining").name == "Dining & Drinks"


def test_set_goal_keeps_spend(dining_budget, logger) -> None:
    category = SetGoalUseCase(dining_budget, logger=logger).execute(
        "dining",
        "250",
    )

    assert category.this_month.goal == Decimal("250.00")
    assert dining_budget.monthly.view("dining").over_goal is True


def test_set_goal_rejects_negative_value(dining_budget, logger) -> None:
    with pytest.raises(InvalidCategory) as excinfo:
        SetGoalUseCase(dining_budget, logger=logger).execute("dining", -5)

    assert excinfo.value.details["category_id"] == "dining"
    assert dining_budget.monthly.view("dining").goal == Decimal("500.00")


def test_set_goal_unknown_category(budget, logger) -> None:
    with pytest.raises(CategoryNotFound):
        SetGoalUseCase(budget, logger=logger).execute("ghost", 10)


def test_set_weekly_limit_updates_safe_to_spend(dining_budget, logger) -> None:
    SetWeeklyLimitUseCase(dining_budget, logger=logger).execute(
        "dining",
        "168.45",
    )

    view = dining_budget.weekly.view("dining")
    assert view.weekly_limit == Decimal("168.45")
    assert view.safe_to_spend_today == Decimal("20.00")
