"""Repository ports and their in-memory implementations.

Use-cases only talk to ``ExpenseRepository`` and ``SpendingLimitRepository``;
the in-memory classes are what ``Config.init_stores`` wires in today.
"""

import threading
import uuid
from abc import ABC, abstractmethod
from dataclasses import fields, replace
from typing import List, Optional, Tuple

from errors import ConflictError, NotFoundError
from models import Expense, SpendingLimit


class ExpenseRepository(ABC):

    @abstractmethod
    def create(self, amount, description, category, date, user_id) -> Expense:
        pass

    @abstractmethod
    def find_all(self, user_id) -> List[Expense]:
        pass

    @abstractmethod
    def find_by_month(self, user_id, month, year) -> List[Expense]:
        pass

    @abstractmethod
    def find_by_id(self, expense_id) -> Optional[Expense]:
        pass

    @abstractmethod
    def update(self, expense_id, **changes) -> Expense:
        pass

    @abstractmethod
    def delete(self, expense_id) -> None:
        pass


class SpendingLimitRepository(ABC):

    @abstractmethod
    def create(self, user_id, monthly_limit, month, year) -> SpendingLimit:
        pass

    @abstractmethod
    def upsert(self, user_id, monthly_limit, month, year) -> Tuple[SpendingLimit, bool]:
        """Create the month's limit or replace its amount; returns ``(limit, created)``."""

    @abstractmethod
    def find_by_user_and_month(self, user_id, month, year) -> Optional[SpendingLimit]:
        pass

    @abstractmethod
    def find_by_id(self, limit_id) -> Optional[SpendingLimit]:
        pass

    @abstractmethod
    def update(self, limit_id, **changes) -> SpendingLimit:
        pass

    @abstractmethod
    def delete(self, limit_id) -> None:
        pass


class _InMemoryStore:
    """Records keyed by id in insertion order, guarded by a single lock."""

    record_type = None
    not_found_message = "Record not found"

    def __init__(self):
        self._records = {}
        self._lock = threading.Lock()

    def _add(self, **data):
        with self._lock:
            record = self.record_type(id=str(uuid.uuid4()), **data)
            self._records[record.id] = record
            return record

    def _select(self, predicate):
        with self._lock:
            return [record for record in self._records.values() if predicate(record)]

    def find_by_id(self, record_id):
        with self._lock:
            return self._records.get(record_id)

    def update(self, record_id, **changes):
        allowed = {f.name for f in fields(self.record_type)} - {"id"}
        unknown = set(changes) - allowed
        if unknown:
            raise ValueError(f"Unknown fields: {', '.join(sorted(unknown))}")

        with self._lock:
            current = self._records.get(record_id)
            if current is None:
                raise NotFoundError(self.not_found_message)
            updated = replace(current, **changes)
            self._check_update(updated)
            self._records[record_id] = updated
            return updated

    def _check_update(self, updated):
        """Called with the lock held, before an update is stored."""

    def delete(self, record_id):
        with self._lock:
            self._records.pop(record_id, None)

    def __len__(self):
        with self._lock:
            return len(self._records)


class InMemoryExpenseRepository(_InMemoryStore, ExpenseRepository):
    record_type = Expense
    not_found_message = "Expense not found"

    def create(self, amount, description, category, date, user_id):
        return self._add(
            amount=amount,
            description=description,
            category=category,
            date=date,
            user_id=user_id,
        )

    def find_all(self, user_id):
        return self._select(lambda e: e.user_id == user_id)

    def find_by_month(self, user_id, month, year):
        # month is 1-indexed, same as datetime.date.month
        return self._select(
            lambda e: e.user_id == user_id and e.date.month == month and e.date.year == year
        )


class InMemorySpendingLimitRepository(_InMemoryStore, SpendingLimitRepository):
    record_type = SpendingLimit
    not_found_message = "Spending limit not found"

    def create(self, user_id, monthly_limit, month, year):
        return self._add(user_id=user_id, monthly_limit=monthly_limit, month=month, year=year)

    def find_by_user_and_month(self, user_id, month, year):
        with self._lock:
            return self._find_locked(user_id, month, year)

    def upsert(self, user_id, monthly_limit, month, year):
        with self._lock:
            existing = self._find_locked(user_id, month, year)
            if existing is not None:
                updated = replace(existing, monthly_limit=monthly_limit)
                self._records[existing.id] = updated
                return updated, False

            limit = SpendingLimit(
                id=str(uuid.uuid4()),
                user_id=user_id,
                monthly_limit=monthly_limit,
                month=month,
                year=year,
            )
            self._records[limit.id] = limit
            return limit, True

    def _find_locked(self, user_id, month, year):
        for limit in self._records.values():
            if limit.user_id == user_id and limit.month == month and limit.year == year:
                return limit
        return None

    def _check_update(self, updated):
        clash = self._find_locked(updated.user_id, updated.month, updated.year)
        if clash is not None and clash.id != updated.id:
            raise ConflictError("A spending limit already exists for that month")
