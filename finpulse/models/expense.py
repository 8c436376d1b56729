"""
Core Data Models for FinPulse

These models define the schemas for everything the dashboard keeps in memory.
They are designed to:
1. Make an expense record immutable once created
2. Restrict categories to the fixed set shown in the entry form
3. Keep money exact (Decimal), so a delete undoes an add to the last digit

DESIGN DECISION: Records are frozen Pydantic models. The ledger replaces
its list on every change, it never edits a record in place.
"""

from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from pydantic import (
    BaseModel,
    ConfigDict,
    Field,
    field_validator,
)


# =============================================================================
# ENUMS - Finite set of valid values
# =============================================================================

class ExpenseCategory(str, Enum):
    """
    Supported expense categories.

    The values are the labels shown in the entry form and the chart,
    in the order the form lists them.
    """
    FOOD = "Food"
    TRANSPORT = "Transport"
    GROCERY = "Grocery"
    PERSONAL = "Personal"
    OTHERS = "Others"


class Screen(str, Enum):
    """Which page the application is showing."""
    LOGIN = "login"
    DASHBOARD = "dashboard"


# =============================================================================
# LEDGER MODELS
# =============================================================================

def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ExpenseRecord(BaseModel):
    """
    One user-entered expense.

    CRITICAL: Records are never mutated after creation.
    Deleting a record removes it from the ledger, nothing else.
    """
    model_config = ConfigDict(frozen=True)

    id: int = Field(
        ...,
        description="Unique, strictly increasing identifier (epoch milliseconds based)"
    )
    amount: Decimal = Field(
        ...,
        description="Expense magnitude in display currency units"
    )
    category: ExpenseCategory = Field(
        ...,
        description="Expense category"
    )
    created_at: datetime = Field(
        default_factory=_utcnow,
        description="When the expense was added (UTC)"
    )

    @field_validator('amount')
    @classmethod
    def validate_finite(cls, v: Decimal) -> Decimal:
        """NaN and infinity would poison the running totals."""
        if not v.is_finite():
            raise ValueError(f"Amount must be a finite number, got {v}")
        return v


class CategoryTotal(BaseModel):
    """Summed amount for one category, as fed to the breakdown chart."""

    name: str
    value: Decimal


# =============================================================================
# SESSION MODELS
# =============================================================================

class LoginOutcome(BaseModel):
    """Result of a single login attempt."""

    success: bool = Field(
        ...,
        description="Did the credentials match?"
    )
    screen: Screen = Field(
        ...,
        description="Screen to show after the attempt"
    )
