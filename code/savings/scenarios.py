import math
from typing import Optional, Tuple

from loguru import logger

from .schemas import FormInputs, ParsedInputs, ResultSet, ScenarioRecord
from .utils import parse_inputs, round_half_up, safe_div

SAVINGS_PERCENTAGES: Tuple[int, ...] = (80, 50, 30, 20, 10)
WEEKS_PER_MONTH = 4
DAYS_PER_MONTH = 30


def _percentage_of_target(total_savings: float, target: float) -> Optional[float]:
    # Undefined for a zero target, and for a target so small the ratio overflows.
    ratio = safe_div(total_savings, target)
    if ratio is None or not math.isfinite(ratio * 100):
        return None
    return ratio * 100


def compute_scenario(percent: int, parsed: ParsedInputs) -> ScenarioRecord:
    monthly_savings = parsed.income * percent / 100
    total_savings = monthly_savings * parsed.duration
    percentage = _percentage_of_target(total_savings, parsed.target)
    monthly_budget = parsed.income - monthly_savings
    return ScenarioRecord(
        percent=percent,
        monthly_savings=round_half_up(monthly_savings, 2),
        total_savings=round_half_up(total_savings, 2),
        percentage_of_target=None if percentage is None else round_half_up(percentage, 1),
        monthly_budget=round_half_up(monthly_budget, 2),
        weekly_budget=round_half_up(monthly_budget / WEEKS_PER_MONTH, 2),
        daily_budget=round_half_up(monthly_budget / DAYS_PER_MONTH, 2),
        # compared before rounding so the flag never disagrees with the raw total
        reaches_target=total_savings >= parsed.target,
    )


def compute_parsed(parsed: ParsedInputs) -> ResultSet:
    scenarios = tuple(compute_scenario(p, parsed) for p in SAVINGS_PERCENTAGES)
    logger.debug(
        f"Computed {len(scenarios)} scenarios for target={parsed.target} "
        f"duration={parsed.duration} income={parsed.income}"
    )
    return ResultSet(inputs=parsed, scenarios=scenarios)


def compute(inputs: FormInputs) -> ResultSet:
    """
    Parse the raw form values and build the five savings scenarios.

    Raises ParseError (before any scenario is built) when a field is not a
    valid number. Records come back in SAVINGS_PERCENTAGES order.
    """
    return compute_parsed(parse_inputs(inputs))
