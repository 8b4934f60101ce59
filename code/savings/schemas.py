from dataclasses import dataclass, field
from typing import Optional, Tuple


@dataclass(frozen=True)
class FormInputs:
    target_savings: str = ""
    duration_months: str = ""
    monthly_income: str = ""


@dataclass(frozen=True)
class ParsedInputs:
    target: float
    duration: int
    income: float


@dataclass(frozen=True)
class ScenarioRecord:
    percent: int
    monthly_savings: float
    total_savings: float
    # None when the target is zero and the ratio is undefined.
    percentage_of_target: Optional[float]
    monthly_budget: float
    weekly_budget: float
    daily_budget: float
    reaches_target: bool


@dataclass(frozen=True)
class ResultSet:
    inputs: ParsedInputs
    scenarios: Tuple[ScenarioRecord, ...] = field(default_factory=tuple)

    def __iter__(self):
        return iter(self.scenarios)

    def __len__(self) -> int:
        return len(self.scenarios)

    @property
    def percents(self) -> Tuple[int, ...]:
        return tuple(s.percent for s in self.scenarios)
