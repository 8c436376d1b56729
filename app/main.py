"""
Streamlit Frontend for FinPulse

Two pages:
1. Login - username/password form with an inline error line
2. Dashboard - savings and expense tiles, breakdown chart,
   entry form and the expense list

All state lives in one AppComponents object per browser session,
kept in st.session_state. Widgets only read from it and call into it.
"""

import streamlit as st

from finpulse.audit import configure_logging
from finpulse.config import get_settings, validate_all_settings
from finpulse.ledger import format_currency
from finpulse.models.expense import ExpenseCategory, Screen
from finpulse.orchestrator import AppComponents, create_app_components


settings = get_settings()

# Page configuration
st.set_page_config(
    page_title=settings.app.app_title,
    page_icon="💰",
    layout="centered",
)

# Custom CSS for the tiles
st.markdown("""
<style>
    .stButton>button {
        width: 100%;
    }
    .tile {
        padding: 20px;
        background-color: #166534;
        border-radius: 10px;
        margin: 10px 0;
    }
    .tile h3 {
        color: #ffffff;
        margin: 0;
    }
    .tile .savings {
        font-size: 1.8em;
        font-weight: bold;
        color: #4ade80;
    }
    .tile .expenses {
        font-size: 1.8em;
        font-weight: bold;
        color: #f87171;
    }
    .login-error {
        color: #ef4444;
        text-align: center;
    }
</style>
""", unsafe_allow_html=True)


def get_components() -> AppComponents:
    """Get or create this browser session's components."""
    if "components" not in st.session_state:
        configure_logging(settings.app.log_level)
        st.session_state.components = create_app_components(settings)
    return st.session_state.components


def main():
    """Main application entry point."""
    components = get_components()

    render_settings_status()

    if components.screen == Screen.DASHBOARD:
        render_dashboard_page(components)
    else:
        render_login_page(components)


def render_settings_status():
    """Show whether each settings group loaded, in the sidebar."""
    status = validate_all_settings()

    st.sidebar.markdown("### Configuration")

    groups = [
        ("Login", "auth"),
        ("Ledger", "ledger"),
        ("Application", "app"),
    ]

    for name, key in groups:
        if status.get(key, False):
            st.sidebar.success(f"✅ {name} settings loaded")
        else:
            error = status.get(f"{key}_error", "Not configured")
            st.sidebar.error(f"❌ {name} settings invalid - {error}")


def render_login_page(components: AppComponents):
    """Render the login form."""
    session_flow = components.session_flow
    gate = session_flow.gate

    st.title(f"{components.settings.app.app_title} Login")

    if gate.has_error:
        st.markdown(
            f'<p class="login-error">{gate.error}</p>',
            unsafe_allow_html=True,
        )

    st.text_input(
        "Username",
        value=gate.identifier,
        key="login_identifier",
        on_change=lambda: gate.set_identifier(st.session_state.login_identifier),
    )
    st.text_input(
        "Password",
        value=gate.secret,
        type="password",
        key="login_secret",
        on_change=lambda: gate.set_secret(st.session_state.login_secret),
    )

    if st.button("Login", type="primary"):
        session_flow.login(
            st.session_state.login_identifier,
            st.session_state.login_secret,
        )
        st.rerun()


def _on_add_expense(components: AppComponents):
    ledger_flow = components.ledger_flow
    ledger_flow.ledger.set_pending_amount(st.session_state.amount_input)
    ledger_flow.ledger.set_pending_category(st.session_state.category_input)
    ledger_flow.add_expense()
    # Widget state may only be written from a callback
    st.session_state.amount_input = ledger_flow.ledger.pending_amount


def render_dashboard_page(components: AppComponents):
    """Render the expense dashboard."""
    session_flow = components.session_flow
    ledger_flow = components.ledger_flow
    ledger = ledger_flow.ledger
    symbol = components.settings.ledger.currency_symbol

    col1, col2 = st.columns([4, 1])
    with col1:
        st.title(f"{components.settings.app.app_title} Dashboard")
    with col2:
        st.button("Logout", on_click=session_flow.logout)

    st.subheader(f"Welcome, {components.settings.app.welcome_name} !")

    # Totals
    col1, col2 = st.columns(2)
    with col1:
        st.markdown(f"""
        <div class="tile">
            <h3>Total Savings</h3>
            <p class="savings">{format_currency(ledger.savings, symbol)}</p>
        </div>
        """, unsafe_allow_html=True)
    with col2:
        st.markdown(f"""
        <div class="tile">
            <h3>Monthly Expenses</h3>
            <p class="expenses">{format_currency(ledger.total_expenses, symbol)}</p>
        </div>
        """, unsafe_allow_html=True)

    # Breakdown chart
    st.markdown("### Expense Breakdown")
    try:
        fig = ledger_flow.breakdown_figure(currency_symbol=symbol)
    except Exception as e:
        st.error(f"Could not draw the expense breakdown: {str(e)}")
    else:
        if fig is None:
            st.caption("No expenses to display.")
        else:
            st.plotly_chart(fig, use_container_width=True)

    # Entry form
    st.markdown("### Add Expense")
    if "amount_input" not in st.session_state:
        st.session_state.amount_input = ledger.pending_amount

    col1, col2, col3 = st.columns([3, 2, 1])
    with col1:
        st.text_input(
            "Amount",
            placeholder="Amount in INR",
            key="amount_input",
            label_visibility="collapsed",
        )
    with col2:
        categories = list(ExpenseCategory)
        st.selectbox(
            "Category",
            options=categories,
            index=categories.index(ledger.pending_category),
            format_func=lambda c: c.value,
            key="category_input",
            label_visibility="collapsed",
        )
    with col3:
        st.button(
            "Add",
            type="primary",
            on_click=_on_add_expense,
            args=(components,),
        )

    # Expense list
    st.markdown("### Expense List")
    if not ledger.has_expenses:
        st.caption("No expenses added yet.")
        return

    for expense in ledger.expenses:
        col1, col2 = st.columns([4, 1])
        with col1:
            st.markdown(
                f"{expense.category.value}: {format_currency(expense.amount, symbol)}"
            )
        with col2:
            st.button(
                "Delete",
                key=f"delete_{expense.id}",
                on_click=ledger_flow.delete_expense,
                args=(expense.id,),
            )


if __name__ == "__main__":
    main()
