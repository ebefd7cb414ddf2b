from analysis import compute, validate
from persistence.state_io import ERRORS_KEY, INPUTS_KEY, RESULT_KEY
from state import EMPTY_INPUTS, EXAMPLE_INPUTS, init_state, reset_inputs


def test_init_state_defaults():
    session = {}
    init_state(session)
    assert session[INPUTS_KEY] == EMPTY_INPUTS
    assert session[RESULT_KEY] is None
    assert session[ERRORS_KEY] == {}


def test_init_state_keeps_existing():
    session = {INPUTS_KEY: {"age": 50}}
    init_state(session)
    assert session[INPUTS_KEY] == {"age": 50}


def test_example_scenario_is_valid():
    outcome = validate(EXAMPLE_INPUTS)
    assert outcome.ok, outcome.errors
    result = compute(outcome.profile)
    # 30-year-old first-time buyer: no transfer tax
    assert result.transfer_tax_cost == 0
    assert len(result.projection) == 10


def test_reset_inputs():
    session = {RESULT_KEY: object(), ERRORS_KEY: {"age": "x"}}
    reset_inputs(example=True, session=session)
    assert session[INPUTS_KEY] == EXAMPLE_INPUTS
    assert session[INPUTS_KEY] is not EXAMPLE_INPUTS
    assert session[RESULT_KEY] is None

    reset_inputs(session=session)
    assert session[INPUTS_KEY] == EMPTY_INPUTS
    assert session[ERRORS_KEY] == {}


def test_cleared_form_reports_required_fields():
    errors = validate(EMPTY_INPUTS).errors
    assert errors["age"] == "Age is required."
    assert errors["employment_status"] == "Employment status is required."
    assert "overbid_amount" not in errors
