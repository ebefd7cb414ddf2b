import streamlit as st
from dotenv import load_dotenv

from analysis.ui import render_analysis
from config.rules import DEFAULT_RULES
from config.settings import configure_logging
from persistence.state_io import auto_load_inputs
from state import init_state

# ---------------------------------------------
# Load environment variables (.env)
# ---------------------------------------------
load_dotenv()
configure_logging()


def render_math():
    st.markdown(f"""
**Mortgage payment (annuity, {DEFAULT_RULES.mortgage_term_years} years):**

- Monthly rate: i = annual rate / 12
- Payments: n = {DEFAULT_RULES.mortgage_term_months}
- Payment = M × i(1+i)^n / ((1+i)^n − 1), or M / n at 0%

**Net monthly cost of buying:**

- Mortgage payment + maintenance − interest deduction + eigenwoningforfait
- Eigenwoningforfait = {DEFAULT_RULES.ewf_rate * 100:.2f}% of the property value per year

**Net monthly cost of renting:**

- Rent − rent allowance (allowance only below €{DEFAULT_RULES.subsidy_rent_limit:,.0f} rent and the income limit)

**Projection (per year):**

- Cash spent on buying starts at the upfront costs and grows by 12 × net monthly buying cost
- Principal repaid uses the first month's split for every year (an approximation)
- Net cost of owning = cash spent − (value − mortgage − selling costs)
- Breakeven: first year net cost of owning drops below rent paid
""")


# -----------------------------
# Streamlit UI
# -----------------------------
st.set_page_config(page_title="Rent vs. Buy Planner", layout="wide")

st.title("Rent vs. Buy Planner")
st.caption("Analyse the net monthly costs of buying vs. renting and see your equity grow.")

init_state()
auto_load_inputs()

with st.expander("Show the math & assumptions", expanded=False):
    render_math()

render_analysis()

st.caption(
    "Disclaimer: This is an analysis for comparison, not financial advice. "
    "Consult with a certified financial advisor."
)
