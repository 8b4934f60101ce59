from typing import Dict, List, Optional

from app.config import CURRENCY_LABEL
from savings.schemas import ResultSet, ScenarioRecord

PROGRESS_MIN = 0.0
PROGRESS_MAX = 100.0

STATUS_LABELS = {
    True: "Reaches Target",
    False: "Below Target",
}
STATUS_COLORS = {
    True: "#22c55e",
    False: "#ef4444",
}

THEMES: Dict[bool, Dict[str, str]] = {
    True: {
        "background": "linear-gradient(to top right, #312e81, #581c87, #111827)",
        "card": "#1f2937",
        "text": "#ffffff",
        "input": "#1f2937",
        "border": "#4b5563",
        "toggle_icon": "☀️",
    },
    False: {
        "background": "linear-gradient(to top right, #ffffff, #f3f4f6, #d1d5db)",
        "card": "#ffffff",
        "text": "#1f2937",
        "input": "#ffffff",
        "border": "#d1d5db",
        "toggle_icon": "🌙",
    },
}


def clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(value, hi))


def format_money(value: float, currency: Optional[str] = None) -> str:
    return f"{currency or CURRENCY_LABEL} {value:.2f}"


def status_label(reaches_target: bool) -> str:
    return STATUS_LABELS[bool(reaches_target)]


def status_color(reaches_target: bool) -> str:
    return STATUS_COLORS[bool(reaches_target)]


def progress_text(percentage_of_target: Optional[float]) -> str:
    if percentage_of_target is None:
        return "n/a of target"
    return f"{percentage_of_target:.1f}% of target"


def progress_width(percentage_of_target: Optional[float]) -> float:
    # An undefined percentage only happens for a zero target, which is always met.
    if percentage_of_target is None:
        return PROGRESS_MAX
    return clamp(percentage_of_target, PROGRESS_MIN, PROGRESS_MAX)


def theme_for(dark: bool) -> Dict[str, str]:
    return THEMES[bool(dark)]


def build_card(record: ScenarioRecord, duration: int, currency: Optional[str] = None) -> Dict[str, object]:
    return {
        "title": f"{record.percent}% Savings",
        "status_label": status_label(record.reaches_target),
        "status_color": status_color(record.reaches_target),
        "monthly_savings": format_money(record.monthly_savings, currency),
        "total_caption": f"Total After {duration} months",
        "total_savings": format_money(record.total_savings, currency),
        "progress_text": progress_text(record.percentage_of_target),
        "progress_width": progress_width(record.percentage_of_target),
        "monthly_budget": format_money(record.monthly_budget, currency),
        "weekly_budget": format_money(record.weekly_budget, currency),
        "daily_budget": format_money(record.daily_budget, currency),
    }


def build_view(result_set: ResultSet, currency: Optional[str] = None) -> List[Dict[str, object]]:
    return [build_card(s, result_set.inputs.duration, currency) for s in result_set]
