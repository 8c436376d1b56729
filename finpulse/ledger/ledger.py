"""
Expense Ledger

Owns the in-memory expense list, the entry form fields and the two
running totals shown on the dashboard.

GUARANTEES:
- savings + total_expenses == initial_savings after every operation
- The list and both totals change together, inside one method call
- Missing or malformed input changes nothing

The category breakdown is never stored. It is derived from the current
list every time it is asked for, so it cannot go stale.
"""

import time
from decimal import Decimal, InvalidOperation
from typing import Callable, Optional

from finpulse.config import LedgerSettings, get_settings
from finpulse.models.expense import CategoryTotal, ExpenseCategory, ExpenseRecord


def _epoch_millis() -> int:
    return time.time_ns() // 1_000_000


def parse_amount(amount_text: Optional[str]) -> Optional[Decimal]:
    """
    Parse the amount field.

    Accepts what a numeric form field accepts: an optional sign, digits,
    a decimal point and an exponent. Returns None for empty, non-numeric
    or non-finite text.
    """
    if amount_text is None:
        return None
    text = str(amount_text).strip()
    # Decimal() also takes "1_000"; a number input never produces it
    if not text or "_" in text:
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        return None
    if not value.is_finite():
        return None
    return value


class Ledger:
    """
    In-memory expense ledger for one session.

    Usage:
        ledger = Ledger()
        record = ledger.add_expense("250", ExpenseCategory.FOOD)
        ledger.delete_expense(record.id)
    """

    def __init__(
        self,
        settings: Optional[LedgerSettings] = None,
        clock: Callable[[], int] = _epoch_millis,
    ):
        """
        Initialize an empty ledger.

        Args:
            settings: Starting savings and form defaults
            clock: Returns the current time in epoch milliseconds, used for ids
        """
        self._settings = settings or get_settings().ledger
        self._clock = clock
        self._last_id = 0

        self.initial_savings: Decimal = self._settings.initial_savings
        self.expenses: list[ExpenseRecord] = []
        self.savings: Decimal = self.initial_savings
        self.total_expenses: Decimal = Decimal("0")

        # Entry form
        self.pending_amount: str = ""
        self.pending_category: ExpenseCategory = self._settings.default_category

    def __len__(self) -> int:
        return len(self.expenses)

    @property
    def has_expenses(self) -> bool:
        return len(self.expenses) > 0

    def set_pending_amount(self, text: str) -> None:
        self.pending_amount = text

    def set_pending_category(self, category: ExpenseCategory) -> None:
        self.pending_category = ExpenseCategory(category)

    def _next_id(self) -> int:
        # Timestamp based, bumped when two adds land in the same millisecond
        new_id = max(self._clock(), self._last_id + 1)
        self._last_id = new_id
        return new_id

    def get_expense(self, expense_id: int) -> Optional[ExpenseRecord]:
        for expense in self.expenses:
            if expense.id == expense_id:
                return expense
        return None

    def add_expense(
        self,
        amount_text: Optional[str] = None,
        category: Optional[ExpenseCategory] = None,
    ) -> Optional[ExpenseRecord]:
        """
        Add an expense from the entry form.

        Args:
            amount_text: Amount as typed. Defaults to the pending amount field.
            category: Selected category. Defaults to the pending category.

        Returns:
            The new record, or None if the amount was empty or not a number.
        """
        if amount_text is None:
            amount_text = self.pending_amount
        if category is None:
            category = self.pending_category

        amount = parse_amount(amount_text)
        if amount is None:
            return None

        record = ExpenseRecord(
            id=self._next_id(),
            amount=amount,
            category=ExpenseCategory(category),
        )

        self.expenses = [*self.expenses, record]
        self.total_expenses += record.amount
        self.savings -= record.amount
        self.pending_amount = ""

        return record

    def delete_expense(self, expense_id: int) -> Optional[ExpenseRecord]:
        """
        Remove an expense and give its amount back to savings.

        Returns:
            The removed record, or None if no record has that id.
        """
        record = self.get_expense(expense_id)
        if record is None:
            return None

        self.expenses = [e for e in self.expenses if e.id != expense_id]
        self.total_expenses -= record.amount
        self.savings += record.amount

        return record

    def category_breakdown(self) -> dict[str, Decimal]:
        """
        Sum amounts per category.

        Categories appear in the order they first occur in the list.
        An empty ledger gives an empty dict.
        """
        breakdown: dict[str, Decimal] = {}
        for expense in self.expenses:
            name = expense.category.value
            breakdown[name] = breakdown.get(name, Decimal("0")) + expense.amount
        return breakdown

    def category_totals(self) -> list[CategoryTotal]:
        """The breakdown as name/value rows."""
        return [
            CategoryTotal(name=name, value=value)
            for name, value in self.category_breakdown().items()
        ]
