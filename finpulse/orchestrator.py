"""
Main Orchestrator for FinPulse

This module ties the components together and defines the two flows
the front-end drives:
1. Session (login form → dashboard, logout → login form)
2. Ledger (add expense, delete expense, breakdown)

DESIGN DECISION: The two flows share no state. Logging out only moves
the screen back to the login form; the ledger keeps its expenses and a
later login in the same browser session picks them up again.
"""

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

import plotly.graph_objects as go

from finpulse.audit import AuditLogger
from finpulse.config import Settings, get_settings
from finpulse.ledger import Ledger, build_breakdown_figure
from finpulse.models.expense import (
    ExpenseCategory,
    ExpenseRecord,
    LoginOutcome,
    Screen,
)
from finpulse.session import SessionGate


class SessionFlow:
    """
    Orchestrates login and logout.

    Flow:
    1. User types into the username/password fields
    2. Submit → SessionGate compares against the fixed credentials
    3. Success → dashboard; failure → stay on the form with the error shown
    4. Logout → back to the form
    """

    def __init__(
        self,
        gate: Optional[SessionGate] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._gate = gate or SessionGate()
        self._audit_logger = audit_logger
        self._screen = Screen.LOGIN
        self._username: Optional[str] = None

    @property
    def gate(self) -> SessionGate:
        return self._gate

    @property
    def screen(self) -> Screen:
        return self._screen

    @property
    def is_logged_in(self) -> bool:
        return self._screen == Screen.DASHBOARD

    def login(
        self,
        identifier: Optional[str] = None,
        secret: Optional[str] = None,
    ) -> LoginOutcome:
        """Submit the login form and move to the screen the outcome names."""
        outcome = self._gate.attempt_login(identifier, secret)
        self._screen = outcome.screen

        if outcome.success:
            self._username = self._gate.identifier
            if self._audit_logger:
                self._audit_logger.log_login_succeeded(username=self._username)

        return outcome

    def logout(self) -> None:
        """Return to the login screen. Ledger state is left untouched."""
        if self._audit_logger and self._username is not None:
            self._audit_logger.log_logged_out(username=self._username)
        self._username = None
        self._screen = Screen.LOGIN


class LedgerFlow:
    """
    Orchestrates changes to the expense ledger.

    Every successful change is audited. Ignored input is audited at
    debug level and never reported to the user.
    """

    def __init__(
        self,
        ledger: Optional[Ledger] = None,
        audit_logger: Optional[AuditLogger] = None,
    ):
        self._ledger = ledger or Ledger()
        self._audit_logger = audit_logger

    @property
    def ledger(self) -> Ledger:
        return self._ledger

    def add_expense(
        self,
        amount_text: Optional[str] = None,
        category: Optional[ExpenseCategory] = None,
    ) -> Optional[ExpenseRecord]:
        """
        Add an expense from the entry form.

        Returns:
            The new record, or None if the amount was missing or malformed.
        """
        submitted = self._ledger.pending_amount if amount_text is None else amount_text
        record = self._ledger.add_expense(amount_text, category)

        if self._audit_logger:
            if record is None:
                self._audit_logger.log_expense_add_ignored(amount_text=str(submitted))
            else:
                self._audit_logger.log_expense_added(
                    expense_id=record.id,
                    amount=str(record.amount),
                    category=record.category.value,
                )

        return record

    def delete_expense(self, expense_id: int) -> Optional[ExpenseRecord]:
        """
        Delete an expense by id.

        Returns:
            The removed record, or None if the id was not present.
        """
        record = self._ledger.delete_expense(expense_id)

        if self._audit_logger:
            if record is None:
                self._audit_logger.log_expense_delete_ignored(expense_id=expense_id)
            else:
                self._audit_logger.log_expense_deleted(
                    expense_id=record.id,
                    amount=str(record.amount),
                    category=record.category.value,
                )

        return record

    def breakdown(self) -> dict[str, Decimal]:
        return self._ledger.category_breakdown()

    def breakdown_figure(self, currency_symbol: str = "") -> Optional[go.Figure]:
        """
        Build the breakdown chart for the current expenses.

        Returns None when there is nothing to chart. A failure while
        building the figure is audited and re-raised.
        """
        try:
            return build_breakdown_figure(self._ledger, currency_symbol=currency_symbol)
        except Exception as e:
            if self._audit_logger:
                self._audit_logger.log_error(
                    error_type="chart_build_failed",
                    error_message=str(e),
                    details={"categories": list(self._ledger.category_breakdown())},
                )
            raise


@dataclass
class AppComponents:
    """Everything one browser session needs."""

    session_flow: SessionFlow
    ledger_flow: LedgerFlow
    audit_logger: AuditLogger
    settings: Settings

    @property
    def screen(self) -> Screen:
        return self.session_flow.screen


def create_app_components(
    settings: Optional[Settings] = None,
) -> AppComponents:
    """
    Factory function to create all application components.

    Call once per browser session; nothing here is shared between sessions.

    Args:
        settings: Settings to build from. Defaults to the cached settings.
    """
    settings = settings or get_settings()
    audit_logger = AuditLogger()

    session_flow = SessionFlow(
        gate=SessionGate(settings.auth),
        audit_logger=audit_logger,
    )
    ledger_flow = LedgerFlow(
        ledger=Ledger(settings.ledger),
        audit_logger=audit_logger,
    )

    return AppComponents(
        session_flow=session_flow,
        ledger_flow=ledger_flow,
        audit_logger=audit_logger,
        settings=settings,
    )
