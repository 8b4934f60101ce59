from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field


class CalculateRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True, coerce_numbers_to_str=True)

    target_savings: str = Field(default="", alias="targetSavings")
    duration_months: str = Field(default="", alias="durationMonths")
    monthly_income: str = Field(default="", alias="monthlyIncome")
    dark: Optional[bool] = None


class Scenario(BaseModel):
    percent: int
    monthly_savings: float
    total_savings: float
    percentage_of_target: Optional[float] = None
    monthly_budget: float
    weekly_budget: float
    daily_budget: float
    reaches_target: bool


class ScenarioCard(BaseModel):
    title: str
    status_label: str
    status_color: str
    monthly_savings: str
    total_caption: str
    total_savings: str
    progress_text: str
    progress_width: float = Field(ge=0, le=100)
    monthly_budget: str
    weekly_budget: str
    daily_budget: str


class ParsedInputsOut(BaseModel):
    target: float
    duration: int
    income: float


class CalculateResponse(BaseModel):
    inputs: ParsedInputsOut
    scenarios: List[Scenario]
    cards: List[ScenarioCard]
    dark: bool


class ParseErrorDetail(BaseModel):
    message: str
    fields: List[str]
