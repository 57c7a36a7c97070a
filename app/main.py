"""
Streamlit Frontend for the School Accounting System

Browser version of the account menu: view balance, credit, debit,
plus the transaction history the console menu does not show.

DESIGN PRINCIPLES:
1. One ledger per browser session
2. The page only changes state through credit, debit and reset
3. Every refusal is shown with the unchanged balance
"""

import streamlit as st

from accounting.config import get_settings, validate_all_settings
from accounting.ledger import AccountingSystem
from accounting.models.transaction import OperationResult
from accounting.orchestrator import create_app_components
from accounting.validation import InvalidAmountError


# Page configuration
st.set_page_config(
    page_title="School Accounting System",
    page_icon="🏦",
    layout="wide",
    initial_sidebar_state="expanded",
)

# Custom CSS for better UX
st.markdown("""
<style>
    .stButton>button {
        width: 100%;
        margin-top: 10px;
    }
    .success-box {
        padding: 20px;
        background-color: #d4edda;
        border-radius: 10px;
        border-left: 5px solid #28a745;
        margin: 10px 0;
    }
    .error-box {
        padding: 20px;
        background-color: #f8d7da;
        border-radius: 10px;
        border-left: 5px solid #dc3545;
        margin: 10px 0;
    }
</style>
""", unsafe_allow_html=True)


def get_accounting_system() -> AccountingSystem:
    """Get or create this session's ledger."""
    if "accounting_system" not in st.session_state:
        system, _ = create_app_components()
        st.session_state.accounting_system = system
        st.session_state.last_result = None
    return st.session_state.accounting_system


def money(amount) -> str:
    return f"{get_settings().ledger.currency_symbol}{amount:,.2f}"


def main():
    """Main application entry point."""
    system = get_accounting_system()

    # Sidebar navigation
    st.sidebar.title("🏦 School Accounting")
    st.sidebar.markdown("---")

    page = st.sidebar.radio(
        "Navigate to:",
        ["💵 Account", "📜 History", "⚙️ Settings"],
        index=0,
    )

    st.sidebar.markdown("---")
    st.sidebar.markdown(
        """
        **How to use:**
        1. Check the current balance
        2. Credit money in or debit money out
        3. Review every change under History

        Debits larger than the balance are refused.
        """
    )

    if page == "💵 Account":
        render_account_page(system)
    elif page == "📜 History":
        render_history_page(system)
    elif page == "⚙️ Settings":
        render_settings_page()


def render_result(result: OperationResult):
    """Show the outcome of the last credit or debit."""
    if result.success:
        st.markdown(f"""
        <div class="success-box">
            <h4>✅ Done</h4>
            <p>{result.message}</p>
        </div>
        """, unsafe_allow_html=True)
    else:
        st.markdown(f"""
        <div class="error-box">
            <h4>❌ Not applied</h4>
            <p>{result.error}</p>
            <p><strong>Balance unchanged:</strong> {money(result.balance)}</p>
        </div>
        """, unsafe_allow_html=True)


def render_account_page(system: AccountingSystem):
    """Render the balance / credit / debit page."""
    st.title("💵 Account")

    st.metric("Current Balance", money(system.get_balance()))

    col1, col2 = st.columns(2)

    with col1:
        with st.form("credit_form", clear_on_submit=True):
            credit_amount = st.text_input(
                "Credit amount",
                placeholder="e.g. 500.00",
                help="Money coming into the account",
            )
            if st.form_submit_button("➕ Credit Account", type="primary"):
                st.session_state.last_result = system.credit(credit_amount)
                st.rerun()

    with col2:
        with st.form("debit_form", clear_on_submit=True):
            debit_amount = st.text_input(
                "Debit amount",
                placeholder="e.g. 200.00",
                help="Money leaving the account",
            )
            if st.form_submit_button("➖ Debit Account", type="primary"):
                st.session_state.last_result = system.debit(debit_amount)
                st.rerun()

    if st.session_state.get("last_result") is not None:
        render_result(st.session_state.last_result)

    st.markdown("---")

    with st.expander("🔄 Reset Account"):
        st.warning("Reset discards the whole transaction history.")
        with st.form("reset_form"):
            new_balance = st.text_input(
                "New opening balance",
                value=str(get_settings().ledger.initial_balance),
            )
            if st.form_submit_button("Reset"):
                try:
                    system.reset(new_balance)
                except InvalidAmountError as e:
                    st.error(f"Reset refused: {e}")
                else:
                    st.session_state.last_result = None
                    st.rerun()


def render_history_page(system: AccountingSystem):
    """Render the transaction history page."""
    st.title("📜 Transaction History")

    history = system.get_transaction_history()
    if not history:
        st.info("No transactions yet. Credit or debit the account to get started.")
        return

    rows = [
        {
            "When (UTC)": txn.timestamp.strftime("%Y-%m-%d %H:%M:%S"),
            "Type": txn.type.value,
            "Amount": money(txn.amount),
            "Previous Balance": money(txn.previous_balance),
            "New Balance": money(txn.new_balance),
        }
        for txn in history
    ]
    st.dataframe(rows, use_container_width=True, hide_index=True)
    st.caption(f"{len(history)} transactions")


def render_settings_page():
    """Render the settings page."""
    st.title("⚙️ Settings")

    st.markdown("### Configuration Status")

    status = validate_all_settings()

    sections = [
        ("Ledger defaults", "ledger"),
        ("Application", "app"),
    ]

    for name, key in sections:
        if status.get(key, False):
            st.success(f"✅ {name} - OK")
        else:
            error = status.get(f"{key}_error", "Not configured")
            st.error(f"❌ {name} - {error}")

    if status.get("ledger", False):
        ledger_settings = get_settings().ledger
        st.markdown(f"**Opening balance:** {money(ledger_settings.initial_balance)}")

    st.markdown("---")
    st.markdown(
        "Defaults can be changed through environment variables or a `.env` file, "
        "e.g. `LEDGER_INITIAL_BALANCE=500.00` or `LEDGER_CURRENCY_SYMBOL=€`."
    )


if __name__ == "__main__":
    main()
