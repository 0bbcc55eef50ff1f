from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


def _as_float(value):
    return float(value) if value is not None else None


@dataclass(frozen=True)
class Expense:
    id: str
    amount: Decimal
    description: str
    category: str
    date: date
    user_id: str

    def to_dict(self):
        return {
            "id": self.id,
            "amount": float(self.amount),
            "description": self.description,
            "category": self.category,
            "date": self.date.isoformat(),
            "userId": self.user_id,
        }


@dataclass(frozen=True)
class SpendingLimit:
    id: str
    user_id: str
    monthly_limit: Decimal
    month: int  # 1-12
    year: int

    def to_dict(self):
        return {
            "id": self.id,
            "userId": self.user_id,
            "monthlyLimit": float(self.monthly_limit),
            "month": self.month,
            "year": self.year,
        }


@dataclass(frozen=True)
class SpendingSummary:
    """Derived from a month's expenses and limit; never stored."""

    total_spent: Decimal
    spending_limit: Optional[Decimal] = None
    remaining_budget: Optional[Decimal] = None
    percentage_used: Optional[Decimal] = None

    def to_dict(self):
        return {
            "totalSpent": _as_float(self.total_spent),
            "spendingLimit": _as_float(self.spending_limit),
            "remainingBudget": _as_float(self.remaining_budget),
            "percentageUsed": _as_float(self.percentage_used),
        }
