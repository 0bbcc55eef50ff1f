"""
Test suite for the use-cases.
Repositories are mocked so only the orchestration is exercised.
"""

import pytest
import os
import sys
from unittest.mock import MagicMock
from datetime import date
from decimal import Decimal

# Ensure the project root is on sys.path
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import use_cases  # noqa: E402
from errors import ConflictError, NotFoundError  # noqa: E402
from models import Expense, SpendingLimit  # noqa: E402
from repositories import ExpenseRepository, SpendingLimitRepository  # noqa: E402


def make_limit(limit_id='l-1', monthly_limit=Decimal('1000'), user_id='user-123', month=1, year=2025):
    return SpendingLimit(id=limit_id, user_id=user_id, monthly_limit=monthly_limit, month=month, year=year)


@pytest.fixture
def expenses():
    return MagicMock(spec=ExpenseRepository)


@pytest.fixture
def limits():
    return MagicMock(spec=SpendingLimitRepository)


class TestExpenseUseCases:

    def test_create_expense_delegates(self, expenses):
        """create_expense should pass the data straight to the repository."""
        created = Expense(id='expense-1', amount=Decimal('50'), description='Groceries', category='Food',
                          date=date(2025, 1, 15), user_id='user-123')
        expenses.create.return_value = created

        result = use_cases.create_expense(
            expenses, amount=Decimal('50'), description='Groceries', category='Food',
            date=date(2025, 1, 15), user_id='user-123',
        )

        expenses.create.assert_called_once_with(
            amount=Decimal('50'), description='Groceries', category='Food',
            date=date(2025, 1, 15), user_id='user-123',
        )
        assert result == created

    def test_get_monthly_expenses(self, expenses):
        expenses.find_by_month.return_value = []
        assert use_cases.get_monthly_expenses(expenses, 'user-123', 1, 2025) == []
        expenses.find_by_month.assert_called_once_with('user-123', 1, 2025)

    def test_get_expense_missing(self, expenses):
        expenses.find_by_id.return_value = None
        with pytest.raises(NotFoundError):
            use_cases.get_expense(expenses, 'missing')


class TestSpendingSummary:

    def test_summary_uses_month_expenses_and_limit(self, expenses, limits):
        expenses.find_by_month.return_value = [
            Expense(id='a', amount=Decimal('100'), description='', category='Food', date=date(2025, 1, 2), user_id='user-123'),
            Expense(id='b', amount=Decimal('500'), description='', category='Rent', date=date(2025, 1, 3), user_id='user-123'),
        ]
        limits.find_by_user_and_month.return_value = make_limit()

        summary = use_cases.get_spending_summary(expenses, limits, 'user-123', 1, 2025)

        limits.find_by_user_and_month.assert_called_once_with('user-123', 1, 2025)
        assert summary.total_spent == 600
        assert summary.remaining_budget == 400
        assert summary.percentage_used == 60

    def test_summary_without_limit(self, expenses, limits):
        expenses.find_by_month.return_value = []
        limits.find_by_user_and_month.return_value = None

        summary = use_cases.get_spending_summary(expenses, limits, 'user-123', 1, 2025)
        assert summary.total_spent == 0
        assert summary.spending_limit is None


class TestSetSpendingLimit:

    def test_creates_when_missing(self, limits):
        limits.upsert.return_value = (make_limit(), True)

        limit, created = use_cases.set_spending_limit(limits, 'user-123', Decimal('1000'), 1, 2025)

        assert created is True
        assert limit.monthly_limit == 1000
        limits.upsert.assert_called_once_with(
            user_id='user-123', monthly_limit=Decimal('1000'), month=1, year=2025,
        )

    def test_replaces_existing(self, limits):
        """A second limit for the same month should come back as replaced, not created."""
        limits.upsert.return_value = (make_limit(monthly_limit=Decimal('800')), False)

        limit, created = use_cases.set_spending_limit(limits, 'user-123', Decimal('800'), 1, 2025)

        assert created is False
        assert limit.id == 'l-1'
        limits.create.assert_not_called()


class TestUpdateSpendingLimit:

    def test_missing(self, limits):
        limits.update.side_effect = NotFoundError('Spending limit not found')
        with pytest.raises(NotFoundError):
            use_cases.update_spending_limit(limits, 'missing', monthly_limit=Decimal('1'))

    def test_conflict_propagates(self, limits):
        limits.update.side_effect = ConflictError('A spending limit already exists for that month')
        with pytest.raises(ConflictError):
            use_cases.update_spending_limit(limits, 'l-1', month=2)

    def test_delegates(self, limits):
        limits.update.return_value = make_limit(monthly_limit=Decimal('10'))

        limit = use_cases.update_spending_limit(limits, 'l-1', monthly_limit=Decimal('10'))

        limits.update.assert_called_once_with('l-1', monthly_limit=Decimal('10'))
        assert limit.monthly_limit == 10
