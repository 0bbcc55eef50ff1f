import logging

from errors import NotFoundError
from summary import calculate_summary

logger = logging.getLogger(__name__)


def create_expense(expenses, amount, description, category, date, user_id):
    expense = expenses.create(
        amount=amount,
        description=description,
        category=category,
        date=date,
        user_id=user_id,
    )
    logger.info("Created expense %s for user %s (%.2f)", expense.id, user_id, amount)
    return expense


def get_monthly_expenses(expenses, user_id, month, year):
    return expenses.find_by_month(user_id, month, year)


def get_all_expenses(expenses, user_id):
    return expenses.find_all(user_id)


def get_expense(expenses, expense_id):
    expense = expenses.find_by_id(expense_id)
    if expense is None:
        logger.warning("Expense %s not found", expense_id)
        raise NotFoundError("Expense not found")
    return expense


def update_expense(expenses, expense_id, **changes):
    expense = expenses.update(expense_id, **changes)
    logger.info("Updated expense %s (%s)", expense_id, ", ".join(sorted(changes)) or "no changes")
    return expense


def delete_expense(expenses, expense_id):
    expenses.delete(expense_id)
    logger.info("Deleted expense %s", expense_id)


def get_spending_summary(expenses, limits, user_id, month, year):
    """Summarize one user's month: its expenses against its spending limit."""
    monthly = expenses.find_by_month(user_id, month, year)
    limit = limits.find_by_user_and_month(user_id, month, year)
    return calculate_summary(monthly, limit)


def set_spending_limit(limits, user_id, monthly_limit, month, year):
    """Create the month's limit, or replace the amount of the existing one.

    Returns ``(limit, created)`` so callers can tell the two cases apart.
    """
    limit, created = limits.upsert(user_id=user_id, monthly_limit=monthly_limit, month=month, year=year)
    logger.info(
        "%s spending limit %s for %s %02d/%d",
        "Created" if created else "Replaced", limit.id, user_id, month, year,
    )
    return limit, created


def get_spending_limit(limits, user_id, month, year):
    limit = limits.find_by_user_and_month(user_id, month, year)
    if limit is None:
        raise NotFoundError("Spending limit not found")
    return limit


def update_spending_limit(limits, limit_id, **changes):
    """Raises ConflictError when the change would give a month a second limit."""
    limit = limits.update(limit_id, **changes)
    logger.info("Updated spending limit %s", limit_id)
    return limit


def delete_spending_limit(limits, limit_id):
    limits.delete(limit_id)
    logger.info("Deleted spending limit %s", limit_id)
