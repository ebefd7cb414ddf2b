import streamlit as st
import matplotlib.pyplot as plt

from config.rules import DEFAULT_RULES
from mortgage.calculations import amortization_schedule
from persistence.state_io import (
    ERRORS_KEY,
    INPUTS_KEY,
    LOAD_ERRORS_KEY,
    RESULT_KEY,
    run_analysis,
    save_current_inputs,
)
from state import reset_inputs

from .models import AnalysisResult
from .projection import projection_frame


def _fmt_eur(value: float) -> str:
    return f"€{value:,.0f}"


def _section_status(errors: dict, fields: list[str], ok_text: str) -> None:
    section_errors = [errors[f] for f in fields if f in errors]
    if section_errors:
        st.error("\n".join([f"• {err}" for err in section_errors]))
    elif errors:
        st.success(ok_text)


# Whole-number widgets; every other numeric field keeps its decimals
INTEGER_FIELDS = {"intended_length_of_stay"}


def _widget_value(name: str, value):
    if value in (None, ""):
        return None
    if name in INTEGER_FIELDS:
        return int(float(value))
    return float(value)


def _number(label: str, inputs: dict, name: str, step: float, help: str | None = None):
    value = _widget_value(name, inputs.get(name))
    if name in INTEGER_FIELDS:
        return st.number_input(
            label,
            value=value,
            step=int(step),
            help=help,
        )
    return st.number_input(
        label,
        value=value,
        step=float(step),
        format="%.2f",
        help=help,
    )


def _select(label: str, inputs: dict, name: str, options: list[str]):
    current = inputs.get(name)
    return st.selectbox(
        label,
        options,
        index=options.index(current) if current in options else None,
        placeholder="Select…",
    )


def _render_inputs(inputs: dict, errors: dict) -> dict:
    st.subheader("Personal Situation")

    with st.expander("ℹ️ About this section", expanded=False):
        st.markdown("""
**Age** – Buyers younger than 35 purchasing their first home pay no transfer tax.

**Annual Income** – Gross yearly household income. Used for the rent allowance (huurtoeslag) check.

**Household Size** – Needed only when you are eligible for rent allowance; the income limit depends on it.
""")

    age = _number("Age", inputs, "age", 1.0)
    annual_income = _number("Annual Gross Income (€)", inputs, "annual_income", 1000.0)
    employment_status = _select(
        "Employment Status", inputs, "employment_status", ["employed", "self-employed", "other"]
    )
    household_size = _select("Household Size", inputs, "household_size", ["single", "couple"])
    _section_status(
        errors,
        ["age", "annual_income", "employment_status", "household_size"],
        "✓ Personal inputs valid",
    )

    st.markdown("### Finances")
    savings = _number("Savings (€)", inputs, "savings", 1000.0)
    current_rental_expenses = _number("Current Rent (€/month)", inputs, "current_rental_expenses", 25.0)
    max_mortgage = _number(
        "Mortgage Amount (€)",
        inputs,
        "max_mortgage",
        5000.0,
        help="The financed amount. It is also taken as the assessed value of the property.",
    )
    overbid_amount = _number(
        "Overbid (€)",
        inputs,
        "overbid_amount",
        1000.0,
        help="Paid from savings on top of the mortgaged value.",
    )
    _section_status(
        errors,
        ["savings", "current_rental_expenses", "max_mortgage", "overbid_amount"],
        "✓ Financial inputs valid",
    )

    st.markdown("### Rates & Taxes")

    with st.expander("ℹ️ About rates & taxes", expanded=False):
        st.markdown(f"""
**Interest Rate** – Fixed annual rate on a {DEFAULT_RULES.mortgage_term_years}-year annuity mortgage.

**Mortgage Interest Deduction** – When eligible, interest paid is deducted at your marginal tax rate.

**Eigenwoningforfait (EWF)** – {DEFAULT_RULES.ewf_rate * 100:.2f}% of the property value per year, always added to the cost of owning.

**Transfer Tax** – Percentage of the property value, waived for first-time buyers under {DEFAULT_RULES.waiver_age_limit:g}.
""")

    interest_rate = _number("Interest Rate (%)", inputs, "interest_rate", 0.05)
    marginal_tax_rate = _number("Marginal Tax Rate (%)", inputs, "marginal_tax_rate", 1.0)
    property_transfer_tax_percentage = _number(
        "Transfer Tax (%)", inputs, "property_transfer_tax_percentage", 0.5
    )
    other_upfront_costs_percentage = _number(
        "Other Upfront Costs (%)", inputs, "other_upfront_costs_percentage", 0.5
    )
    maintenance_percentage = _number("Maintenance (% per year)", inputs, "maintenance_percentage", 0.1)
    is_first_time_buyer = st.checkbox("First-time buyer", value=bool(inputs.get("is_first_time_buyer", False)))
    mid_eligible = st.checkbox("Eligible for mortgage interest deduction", value=bool(inputs.get("mid_eligible", True)))
    is_eligible_for_huurtoeslag = st.checkbox(
        "Eligible for rent allowance (huurtoeslag)",
        value=bool(inputs.get("is_eligible_for_huurtoeslag", False)),
    )
    _section_status(
        errors,
        [
            "interest_rate",
            "marginal_tax_rate",
            "property_transfer_tax_percentage",
            "other_upfront_costs_percentage",
            "maintenance_percentage",
            "is_first_time_buyer",
            "mid_eligible",
            "is_eligible_for_huurtoeslag",
        ],
        "✓ Rate & tax inputs valid",
    )

    st.markdown("### Long-Term Outlook")
    intended_length_of_stay = _number("Intended Stay (years)", inputs, "intended_length_of_stay", 1)
    property_appreciation_rate = _number(
        "Property Appreciation (% per year)", inputs, "property_appreciation_rate", 0.5
    )
    estimated_selling_costs_percentage = _number(
        "Selling Costs (%)", inputs, "estimated_selling_costs_percentage", 0.5
    )
    _section_status(
        errors,
        ["intended_length_of_stay", "property_appreciation_rate", "estimated_selling_costs_percentage"],
        "✓ Outlook inputs valid",
    )

    return {
        "age": age,
        "annual_income": annual_income,
        "employment_status": employment_status,
        "household_size": household_size,
        "savings": savings,
        "current_rental_expenses": current_rental_expenses,
        "max_mortgage": max_mortgage,
        "overbid_amount": overbid_amount,
        "interest_rate": interest_rate,
        "marginal_tax_rate": marginal_tax_rate,
        "property_transfer_tax_percentage": property_transfer_tax_percentage,
        "other_upfront_costs_percentage": other_upfront_costs_percentage,
        "maintenance_percentage": maintenance_percentage,
        "is_first_time_buyer": is_first_time_buyer,
        "mid_eligible": mid_eligible,
        "is_eligible_for_huurtoeslag": is_eligible_for_huurtoeslag,
        "intended_length_of_stay": intended_length_of_stay,
        "property_appreciation_rate": property_appreciation_rate,
        "estimated_selling_costs_percentage": estimated_selling_costs_percentage,
    }


def _render_projection_charts(result: AnalysisResult) -> None:
    df = projection_frame(result.projection)
    years = df.index

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(years, df["Cumulative Renting Cost"], label="Cumulative Rent Paid", linewidth=2)
    ax.plot(years, df["Net Ownership Cost"], label="Net Cost of Owning", linewidth=2)
    ax.plot(years, df["Cumulative Buying Cost"], label="Cash Spent on Owning", linewidth=2, linestyle="--")
    if result.breakeven_point is not None:
        ax.axvline(result.breakeven_point, color="#2e7d32", linestyle=":", label="Breakeven")
    ax.set_title("Buying vs. Renting Over Time")
    ax.set_xlabel("Year")
    ax.set_ylabel("Euros")
    ax.grid(True, linestyle="--", alpha=0.6)
    ax.legend()
    st.pyplot(fig)

    inputs = result.inputs
    schedule = amortization_schedule(
        inputs.max_mortgage,
        inputs.interest_rate,
        DEFAULT_RULES.mortgage_term_years,
        result.gross_monthly_mortgage,
        years=inputs.intended_length_of_stay,
    )

    fig, ax = plt.subplots(figsize=(10, 6))
    ax.plot(years, df["Property Value"], label="Property Value", linewidth=2)
    ax.plot(years, df["Equity"], label="Equity", linewidth=2)
    ax.plot(years, df["Remaining Principal"], label="Remaining Mortgage (flat split)", linewidth=2)
    if not schedule.empty:
        ax.plot(
            schedule["Year"],
            schedule["Ending Balance"],
            label="Remaining Mortgage (full amortization)",
            linewidth=2,
            linestyle="--",
        )
    ax.set_title("Property Value & Equity")
    ax.set_xlabel("Year")
    ax.set_ylabel("Euros")
    ax.grid(True, linestyle="--", alpha=0.6)
    ax.legend()
    st.pyplot(fig)

    st.dataframe(df.style.format("€{:,.0f}"), width="stretch")


def _render_results(result: AnalysisResult) -> None:
    verdict_color = "#2e7d32" if result.breakeven_point is not None else "#c62828"
    st.markdown(
        f"<h3 style='color:{verdict_color}'>{result.verdict()}</h3>",
        unsafe_allow_html=True,
    )
    if result.investment_breakeven_point is not None:
        st.caption(
            f"Selling in Year {result.investment_breakeven_point} would return all cash spent on owning."
        )

    st.markdown("#### The Starting Line: Your Upfront Investment")
    cols = st.columns(3)
    cols[0].metric("Total Upfront Costs", _fmt_eur(result.total_upfront_costs))
    cols[1].metric(
        "Transfer Tax",
        _fmt_eur(result.transfer_tax_cost),
        help="Waived for first-time buyers under 35." if result.transfer_tax_waived else None,
    )
    cols[2].metric("Remaining Savings", _fmt_eur(result.remaining_savings))
    if result.remaining_savings < 0:
        st.warning("Upfront costs exceed your savings.")

    st.markdown("#### The Daily Race: Net Monthly Cost Comparison")
    cols = st.columns(3)
    cols[0].metric(
        "Net Monthly Buy Cost",
        _fmt_eur(result.total_net_monthly_buying_cost),
        delta=f"{result.monthly_cost_differential:,.0f} vs rent",
        delta_color="inverse",
    )
    cols[1].metric("Net Monthly Rent Cost", _fmt_eur(result.net_monthly_rental_cost))
    cols[2].metric("Monthly Equity Gained", _fmt_eur(result.monthly_equity_accumulation))

    st.markdown(f"""
| Monthly breakdown | Amount |
|---|---|
| Mortgage (interest + principal) | €{result.gross_monthly_mortgage:,.2f} |
| of which interest | €{result.monthly_interest:,.2f} |
| of which principal | €{result.monthly_principal:,.2f} |
| Maintenance | €{result.monthly_maintenance:,.2f} |
| Interest deduction | −€{result.monthly_tax_benefit:,.2f} |
| Eigenwoningforfait | €{result.monthly_ewf_cost:,.2f} |
| Rent allowance | −€{result.huurtoeslag_amount:,.2f} |
""")

    stay = result.inputs.intended_length_of_stay
    st.markdown(f"#### The Finish Line: {stay}-Year Financial Projection")
    st.metric("Realized Value on Sale", _fmt_eur(result.realized_value_on_sale))
    st.caption(
        "Principal repayment uses the first month's interest/principal split for every year, "
        "so equity from repayment is understated compared with a full amortization schedule."
    )
    _render_projection_charts(result)


def render_analysis():
    inputs = st.session_state[INPUTS_KEY]
    errors = st.session_state.get(ERRORS_KEY, {})

    load_errors = st.session_state.get(LOAD_ERRORS_KEY)
    if load_errors:
        st.warning("Saved inputs could not be restored: " + "; ".join(load_errors.values()))

    left, right = st.columns([1.05, 1.25], gap="large")

    with left:
        raw = _render_inputs(inputs, errors)

        with st.form("calculate_form"):
            calculate = st.form_submit_button("Calculate", type="primary")

        if calculate:
            run_analysis(raw)
            st.rerun()

        if errors:
            st.error("**Cannot calculate:** Fix the errors above before proceeding.")

        button_cols = st.columns(3)
        with button_cols[0]:
            st.button("Load example", on_click=reset_inputs, kwargs={"example": True})
        with button_cols[1]:
            st.button("Clear", on_click=reset_inputs)
        with button_cols[2]:
            if st.button("Save", key="save_analysis_inputs"):
                try:
                    save_path = save_current_inputs()
                    st.success(f"Saved to {save_path}")
                except Exception as exc:
                    st.error(f"Save failed: {exc}")

    with right:
        result = st.session_state.get(RESULT_KEY)
        if result is None:
            st.subheader("Awaiting Your Analysis")
            st.caption("Fill in the form and press Calculate to compare buying with renting.")
        else:
            _render_results(result)
