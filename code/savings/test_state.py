import pytest

from savings.schemas import FormInputs
from savings.state import (
    INVALID_INPUT_MESSAGE,
    CalculatorSession,
    DisplayMode,
    FormState,
    ResultState,
)
from savings.utils import ParseError


def _fill(session, target="10000", duration="12", income="2000"):
    session.form.set_field("target_savings", target)
    session.form.set_field("duration_months", duration)
    session.form.set_field("monthly_income", income)


def test_form_starts_empty():
    assert FormState().get_all() == FormInputs("", "", "")


def test_set_field_touches_one_field():
    form = FormState()
    form.set_field("durationMonths", "12")
    form.set_field("monthly_income", "abc")
    assert form.get_all() == FormInputs(target_savings="", duration_months="12", monthly_income="abc")


def test_set_field_unknown_name():
    with pytest.raises(KeyError):
        FormState().set_field("bonus", "1")


def test_result_state_starts_empty():
    state = ResultState()
    assert state.get() is None
    assert not state.has_result


def test_display_mode_toggle_twice():
    session = CalculatorSession(dark=True)
    _fill(session)
    result_set = session.calculate()
    assert session.mode.toggle() is False
    assert session.mode.toggle() is True
    assert session.mode.get() is True
    assert session.result.get() is result_set


def test_display_mode_default_dark():
    assert DisplayMode().is_dark


def test_calculate_stores_result():
    session = CalculatorSession()
    _fill(session)
    result_set = session.calculate()
    assert session.result.get() is result_set
    assert result_set.percents == (80, 50, 30, 20, 10)


def test_failed_calculate_keeps_previous_result():
    session = CalculatorSession()
    _fill(session)
    first = session.calculate()
    session.form.set_field("target_savings", "abc")
    with pytest.raises(ParseError):
        session.calculate()
    assert session.result.get() is first


def test_failed_first_calculate_leaves_no_result():
    session = CalculatorSession()
    result_set, error = session.calculate_or_error()
    assert result_set is None
    assert error == INVALID_INPUT_MESSAGE
    assert not session.result.has_result


def test_calculate_or_error_success():
    session = CalculatorSession()
    _fill(session)
    result_set, error = session.calculate_or_error()
    assert error is None
    assert session.result.get() is result_set


def test_set_fields_then_calculate_uses_latest_values():
    session = CalculatorSession()
    _fill(session, target="abc")
    session.form.set_fields({"targetSavings": "10000", "monthly_income": "2000"})
    assert session.form.get_all() == FormInputs("10000", "12", "2000")
    result_set, error = session.calculate_or_error()
    assert error is None
    assert result_set.inputs.target == 10000.0


def test_set_fields_rejects_unknown_name_without_partial_update():
    form = FormState()
    with pytest.raises(KeyError):
        form.set_fields({"target_savings": "1", "bonus": "2"})
    assert form.get_all() == FormInputs()
