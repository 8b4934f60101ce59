import math
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Dict, List, Optional

from .schemas import FormInputs, ParsedInputs


FIELD_ALIASES: Dict[str, str] = {
    "targetSavings": "target_savings",
    "durationMonths": "duration_months",
    "monthlyIncome": "monthly_income",
}
FIELD_NAMES = ("target_savings", "duration_months", "monthly_income")

# Bounds keep every derived total finite: 1e15 * 1200 months stays far below float overflow.
MAX_AMOUNT = 1e15
MAX_DURATION_MONTHS = 1200


class ParseError(ValueError):
    """Raised when one or more form fields are not valid numbers."""

    def __init__(self, fields):
        self.fields = tuple(fields)
        super().__init__(f"Invalid numeric input for: {', '.join(self.fields)}")


def normalize_field_name(name: str) -> str:
    key = FIELD_ALIASES.get(name, name)
    if key not in FIELD_NAMES:
        raise KeyError(name)
    return key


def round_half_up(value: float, ndigits: int = 2) -> float:
    # Decimal(value) keeps the exact binary value, so 1.005 rounds to 1.0.
    if not math.isfinite(value):
        return value
    exact = Decimal(value)
    quantum = Decimal(1).scaleb(-ndigits)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, exact.adjusted() + ndigits + 2)
        return float(exact.quantize(quantum, rounding=ROUND_HALF_UP))


def safe_div(a: float, b: float, default=None):
    if b == 0:
        return default
    return a / b


def _clean(raw: str) -> Optional[str]:
    if not isinstance(raw, str):
        return None
    text = raw.strip()
    # float()/int() accept "1_000"; form input does not.
    if "_" in text:
        return None
    return text


def parse_float(raw: str, limit: float = MAX_AMOUNT) -> Optional[float]:
    text = _clean(raw)
    if text is None:
        return None
    try:
        value = float(text)
    except ValueError:
        return None
    if not math.isfinite(value) or abs(value) > limit:
        return None
    return value


def parse_int(raw: str, limit: int = MAX_DURATION_MONTHS) -> Optional[int]:
    text = _clean(raw)
    if text is None:
        return None
    try:
        value = int(text)
    except ValueError:
        return None
    if abs(value) > limit:
        return None
    return value


def parse_inputs(inputs: FormInputs) -> ParsedInputs:
    target = parse_float(inputs.target_savings)
    duration = parse_int(inputs.duration_months)
    income = parse_float(inputs.monthly_income)

    failed: List[str] = []
    if target is None:
        failed.append("target_savings")
    if duration is None:
        failed.append("duration_months")
    if income is None:
        failed.append("monthly_income")
    if failed:
        raise ParseError(failed)
    return ParsedInputs(target=target, duration=duration, income=income)
