import streamlit as st

from persistence.state_io import ERRORS_KEY, INPUTS_KEY, RESULT_KEY

# Sample scenario behind the "Load example" button
EXAMPLE_INPUTS = {
    "age": 30,
    "annual_income": 65000,
    "employment_status": "employed",
    "savings": 30000,
    "current_rental_expenses": 1600,
    "max_mortgage": 350000,
    "overbid_amount": 25000,
    "interest_rate": 4.2,
    "property_transfer_tax_percentage": 0,
    "other_upfront_costs_percentage": 3,
    "maintenance_percentage": 1,
    "is_first_time_buyer": True,
    "marginal_tax_rate": 37,
    "mid_eligible": True,
    "intended_length_of_stay": 10,
    "property_appreciation_rate": 2.5,
    "estimated_selling_costs_percentage": 2,
    "is_eligible_for_huurtoeslag": False,
    "household_size": "single",
}

# "Clear" keeps the flag defaults and blanks everything else
EMPTY_INPUTS = {
    "is_first_time_buyer": False,
    "mid_eligible": True,
    "is_eligible_for_huurtoeslag": False,
}


def init_state(session=None):
    state = st.session_state if session is None else session

    if INPUTS_KEY not in state:
        state[INPUTS_KEY] = dict(EMPTY_INPUTS)

    if RESULT_KEY not in state:
        state[RESULT_KEY] = None

    if ERRORS_KEY not in state:
        state[ERRORS_KEY] = {}

    if "analysis_expanded" not in state:
        state["analysis_expanded"] = True


def reset_inputs(example: bool = False, session=None):
    state = st.session_state if session is None else session
    state[INPUTS_KEY] = dict(EXAMPLE_INPUTS if example else EMPTY_INPUTS)
    state[RESULT_KEY] = None
    state[ERRORS_KEY] = {}
