from decimal import Decimal

from models import SpendingSummary


def total_spent(expenses):
    return sum((expense.amount for expense in expenses), Decimal('0'))


def calculate_summary(expenses, limit=None):
    """Total the given expenses and compare them against an optional limit.

    The remaining budget goes negative on overspend and the percentage may
    exceed 100. A zero limit reports 0% used instead of dividing by zero.
    """
    spent = total_spent(expenses)
    if limit is None:
        return SpendingSummary(total_spent=spent)

    monthly_limit = limit.monthly_limit
    percentage = spent * 100 / monthly_limit if monthly_limit else Decimal('0')
    return SpendingSummary(
        total_spent=spent,
        spending_limit=monthly_limit,
        remaining_budget=monthly_limit - spent,
        percentage_used=percentage,
    )
