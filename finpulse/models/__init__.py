"""
Data Models Package

This package contains all Pydantic models used in FinPulse.
"""

from finpulse.models.expense import (
    CategoryTotal,
    ExpenseCategory,
    ExpenseRecord,
    LoginOutcome,
    Screen,
)
from finpulse.models.audit import (
    AuditEvent,
    AuditEventBuilder,
    AuditEventType,
    AuditSeverity,
)

__all__ = [
    # Expense models
    "CategoryTotal",
    "ExpenseCategory",
    "ExpenseRecord",
    "LoginOutcome",
    "Screen",
    # Audit models
    "AuditEvent",
    "AuditEventBuilder",
    "AuditEventType",
    "AuditSeverity",
]
