"""Tests for the expense ledger, its formatting and its chart."""

from decimal import Decimal

import pytest

from finpulse.config import LedgerSettings
from finpulse.ledger import (
    CHART_COLORS,
    Ledger,
    breakdown_chart_data,
    build_breakdown_figure,
    format_amount,
    format_currency,
    parse_amount,
)
from finpulse.models.expense import ExpenseCategory


@pytest.fixture
def ledger():
    return Ledger(LedgerSettings())


def _state(ledger):
    return list(ledger.expenses), ledger.savings, ledger.total_expenses


class TestParseAmount:
    """Tests for amount field parsing."""

    @pytest.mark.parametrize("text,expected", [
        ("250", Decimal("250")),
        ("12.5", Decimal("12.5")),
        ("  40 ", Decimal("40")),
        ("1e3", Decimal("1000")),
        ("0.1", Decimal("0.1")),
    ])
    def test_numeric_text(self, text, expected):
        assert parse_amount(text) == expected

    @pytest.mark.parametrize("text", [
        None, "", "   ", "abc", "nan", "inf", "-inf", "1_000", "0x10",
    ])
    def test_unusable_text(self, text):
        assert parse_amount(text) is None

    def test_returns_exact_decimal(self):
        value = parse_amount("0.1")
        assert isinstance(value, Decimal)
        assert value + parse_amount("0.2") == Decimal("0.3")


class TestLedgerInitialState:

    def test_starts_empty(self, ledger):
        assert ledger.expenses == []
        assert len(ledger) == 0
        assert ledger.has_expenses is False
        assert ledger.savings == 500000
        assert ledger.total_expenses == 0
        assert ledger.pending_amount == ""
        assert ledger.pending_category == ExpenseCategory.FOOD

    def test_initial_savings_from_settings(self):
        ledger = Ledger(LedgerSettings(initial_savings=Decimal("1000")))
        assert ledger.savings == Decimal("1000")
        assert ledger.initial_savings == Decimal("1000")


class TestAddExpense:

    def test_add_updates_list_and_totals(self, ledger):
        record = ledger.add_expense("250", ExpenseCategory.FOOD)

        assert record is not None
        assert record.amount == Decimal("250")
        assert record.category == ExpenseCategory.FOOD
        assert ledger.expenses == [record]
        assert ledger.total_expenses == Decimal("250")
        assert ledger.savings == Decimal("499750")

    def test_running_totals_across_adds_and_deletes(self, ledger):
        added = []
        deleted = Decimal("0")
        for amount in ["100", "50.5", "0.25", "1200"]:
            added.append(ledger.add_expense(amount, ExpenseCategory.OTHERS))
            expected = sum(r.amount for r in added) - deleted
            assert ledger.total_expenses == expected
            assert ledger.savings == 500000 - ledger.total_expenses

        ledger.delete_expense(added[1].id)
        deleted += added[1].amount
        assert ledger.total_expenses == sum(r.amount for r in added) - deleted
        assert ledger.savings + ledger.total_expenses == ledger.initial_savings

    def test_fractional_totals_are_exact(self, ledger):
        amounts = ["0.1", "0.2", "0.3"]
        for amount in amounts:
            ledger.add_expense(amount, ExpenseCategory.FOOD)

        assert ledger.total_expenses == Decimal("0.6")
        assert ledger.savings == Decimal("499999.4")
        assert format_amount(ledger.total_expenses) == "0.6"

    def test_insertion_order_preserved(self, ledger):
        first = ledger.add_expense("1", ExpenseCategory.PERSONAL)
        second = ledger.add_expense("2", ExpenseCategory.FOOD)
        assert [e.id for e in ledger.expenses] == [first.id, second.id]

    def test_empty_amount_is_noop(self, ledger):
        ledger.add_expense("10", ExpenseCategory.FOOD)
        before = _state(ledger)

        for category in ExpenseCategory:
            assert ledger.add_expense("", category) is None

        assert _state(ledger) == before

    def test_non_numeric_amount_is_noop(self, ledger):
        before = _state(ledger)
        assert ledger.add_expense("twelve", ExpenseCategory.FOOD) is None
        assert _state(ledger) == before

    def test_uses_pending_fields(self, ledger):
        ledger.set_pending_amount("75")
        ledger.set_pending_category(ExpenseCategory.TRANSPORT)

        record = ledger.add_expense()

        assert record.amount == Decimal("75")
        assert record.category == ExpenseCategory.TRANSPORT

    def test_clears_pending_amount_but_keeps_category(self, ledger):
        ledger.set_pending_amount("75")
        ledger.set_pending_category("Grocery")
        ledger.add_expense()

        assert ledger.pending_amount == ""
        assert ledger.pending_category == ExpenseCategory.GROCERY

    def test_noop_keeps_pending_amount(self, ledger):
        ledger.set_pending_amount("abc")
        ledger.add_expense()
        assert ledger.pending_amount == "abc"

    def test_ids_strictly_increase_within_same_millisecond(self):
        ledger = Ledger(LedgerSettings(), clock=lambda: 1_700_000_000_000)
        ids = [ledger.add_expense("1", ExpenseCategory.FOOD).id for _ in range(3)]
        assert ids == [1_700_000_000_000, 1_700_000_000_001, 1_700_000_000_002]

    def test_ids_follow_clock(self):
        ticks = iter([1000, 5000])
        ledger = Ledger(LedgerSettings(), clock=lambda: next(ticks))
        assert ledger.add_expense("1", ExpenseCategory.FOOD).id == 1000
        assert ledger.add_expense("1", ExpenseCategory.FOOD).id == 5000


class TestDeleteExpense:

    def test_delete_is_inverse_of_add(self, ledger):
        ledger.add_expense("300", ExpenseCategory.GROCERY)
        before = _state(ledger)

        record = ledger.add_expense("45.5", ExpenseCategory.FOOD)
        removed = ledger.delete_expense(record.id)

        assert removed == record
        assert _state(ledger) == before

    def test_delete_restores_fractional_totals_exactly(self, ledger):
        ledger.add_expense("0.1", ExpenseCategory.FOOD)
        before = _state(ledger)

        record = ledger.add_expense("0.2", ExpenseCategory.FOOD)
        ledger.delete_expense(record.id)

        assert _state(ledger) == before
        assert ledger.total_expenses == Decimal("0.1")
        assert ledger.savings + ledger.total_expenses == ledger.initial_savings

    def test_delete_unknown_id_is_noop(self, ledger):
        ledger.add_expense("10", ExpenseCategory.FOOD)
        before = _state(ledger)

        assert ledger.delete_expense(-1) is None
        assert _state(ledger) == before

    def test_delete_twice(self, ledger):
        record = ledger.add_expense("10", ExpenseCategory.FOOD)
        ledger.delete_expense(record.id)
        assert ledger.delete_expense(record.id) is None
        assert ledger.total_expenses == 0
        assert ledger.savings == 500000

    def test_get_expense(self, ledger):
        record = ledger.add_expense("10", ExpenseCategory.FOOD)
        assert ledger.get_expense(record.id) == record
        assert ledger.get_expense(record.id + 1) is None


class TestCategoryBreakdown:

    def test_groups_in_first_occurrence_order(self, ledger):
        ledger.add_expense("50", ExpenseCategory.FOOD)
        ledger.add_expense("30", ExpenseCategory.FOOD)
        ledger.add_expense("20", ExpenseCategory.TRANSPORT)

        breakdown = ledger.category_breakdown()

        assert breakdown == {"Food": Decimal("80"), "Transport": Decimal("20")}
        assert list(breakdown) == ["Food", "Transport"]

    def test_order_follows_list_not_enum(self, ledger):
        ledger.add_expense("5", ExpenseCategory.OTHERS)
        ledger.add_expense("5", ExpenseCategory.FOOD)
        assert list(ledger.category_breakdown()) == ["Others", "Food"]

    def test_empty_ledger(self, ledger):
        assert ledger.category_breakdown() == {}
        assert ledger.category_totals() == []

    def test_reflects_deletes(self, ledger):
        food = ledger.add_expense("50", ExpenseCategory.FOOD)
        ledger.add_expense("20", ExpenseCategory.TRANSPORT)
        ledger.delete_expense(food.id)
        assert ledger.category_breakdown() == {"Transport": Decimal("20")}

    def test_category_totals_rows(self, ledger):
        ledger.add_expense("50", ExpenseCategory.PERSONAL)
        totals = ledger.category_totals()
        assert len(totals) == 1
        assert totals[0].name == "Personal"
        assert totals[0].value == Decimal("50")


class TestFormatting:

    @pytest.mark.parametrize("value,expected", [
        (Decimal("500000"), "500,000"),
        (Decimal("499750.00"), "499,750"),
        (Decimal("1234.5"), "1,234.5"),
        (Decimal("0.125"), "0.125"),
        (Decimal("0"), "0"),
        (Decimal("-20"), "-20"),
        (Decimal("1234567.891"), "1,234,567.891"),
        (Decimal("499999.7"), "499,999.7"),
    ])
    def test_format_amount(self, value, expected):
        assert format_amount(value) == expected

    def test_format_currency(self):
        assert format_currency(Decimal("500000"), "₹") == "₹500,000"
        assert format_currency(Decimal("12.5"), "$") == "$12.5"

    def test_format_currency_default_symbol(self):
        assert format_currency(Decimal("1000")) == "₹1,000"


class TestBreakdownChart:

    def test_chart_data_colors(self, ledger):
        ledger.add_expense("50", ExpenseCategory.FOOD)
        ledger.add_expense("20", ExpenseCategory.TRANSPORT)

        rows = breakdown_chart_data(ledger)

        assert rows == [
            {"name": "Food", "value": Decimal("50"), "color": CHART_COLORS[0]},
            {"name": "Transport", "value": Decimal("20"), "color": CHART_COLORS[1]},
        ]

    def test_colors_follow_breakdown_order(self, ledger):
        for category in reversed(list(ExpenseCategory)):
            ledger.add_expense("1", category)

        rows = breakdown_chart_data(ledger)

        assert [r["name"] for r in rows] == ["Others", "Personal", "Grocery", "Transport", "Food"]
        assert [r["color"] for r in rows] == CHART_COLORS

    def test_empty_ledger_has_no_figure(self, ledger):
        assert breakdown_chart_data(ledger) == []
        assert build_breakdown_figure(ledger) is None

    def test_figure_matches_breakdown(self, ledger):
        ledger.add_expense("50", ExpenseCategory.FOOD)
        ledger.add_expense("30", ExpenseCategory.FOOD)
        ledger.add_expense("20", ExpenseCategory.TRANSPORT)

        fig = build_breakdown_figure(ledger, currency_symbol="₹")

        pie = fig.data[0]
        assert list(pie.labels) == ["Food", "Transport"]
        assert list(pie.values) == [80.0, 20.0]
        assert list(pie.marker.colors) == CHART_COLORS[:2]
