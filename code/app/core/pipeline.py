from dataclasses import asdict

from loguru import logger

from app.config import DEFAULT_DARK
from savings.state import CalculatorSession

from .models import CalculateRequest, CalculateResponse, ParsedInputsOut, Scenario, ScenarioCard
from .tools import build_view


def session_from_request(payload: CalculateRequest) -> CalculatorSession:
    session = CalculatorSession(dark=DEFAULT_DARK if payload.dark is None else payload.dark)
    session.form.set_field("target_savings", payload.target_savings)
    session.form.set_field("duration_months", payload.duration_months)
    session.form.set_field("monthly_income", payload.monthly_income)
    return session


def run_calculation(payload: CalculateRequest) -> CalculateResponse:
    """Run one calculation for an API caller. ParseError propagates."""
    session = session_from_request(payload)
    result_set = session.calculate()
    cards = build_view(result_set)
    logger.debug(f"Built {len(cards)} scenario cards")

    return CalculateResponse(
        inputs=ParsedInputsOut(**asdict(result_set.inputs)),
        scenarios=[Scenario(**asdict(s)) for s in result_set],
        cards=[ScenarioCard(**card) for card in cards],
        dark=session.mode.get(),
    )
