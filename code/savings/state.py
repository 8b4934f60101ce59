from dataclasses import replace
from typing import Dict, Optional, Tuple

from loguru import logger

from .scenarios import compute
from .schemas import FormInputs, ResultSet
from .utils import ParseError, normalize_field_name

INVALID_INPUT_MESSAGE = "Please fill all fields correctly."


class FormState:
    """Raw text of the three form fields, edited one field at a time."""

    def __init__(self, inputs: Optional[FormInputs] = None):
        self._inputs = inputs or FormInputs()

    def set_field(self, name: str, value: str) -> None:
        key = normalize_field_name(name)
        self._inputs = replace(self._inputs, **{key: value})

    def set_fields(self, values: Dict[str, str]) -> None:
        updates = {normalize_field_name(name): value for name, value in values.items()}
        self._inputs = replace(self._inputs, **updates)

    def get_all(self) -> FormInputs:
        return self._inputs


class ResultState:
    def __init__(self):
        self._result: Optional[ResultSet] = None

    def set(self, result_set: ResultSet) -> None:
        self._result = result_set

    def get(self) -> Optional[ResultSet]:
        return self._result

    @property
    def has_result(self) -> bool:
        return self._result is not None


class DisplayMode:
    def __init__(self, dark: bool = True):
        self._dark = dark

    def toggle(self) -> bool:
        self._dark = not self._dark
        return self._dark

    def get(self) -> bool:
        return self._dark

    @property
    def is_dark(self) -> bool:
        return self._dark


class CalculatorSession:
    """One page session: form values, last result and display mode."""

    def __init__(self, dark: bool = True):
        self.form = FormState()
        self.result = ResultState()
        self.mode = DisplayMode(dark=dark)

    def calculate(self) -> ResultSet:
        snapshot = self.form.get_all()
        try:
            result_set = compute(snapshot)
        except ParseError as e:
            logger.warning(f"Calculation rejected: {e}")
            raise
        self.result.set(result_set)
        logger.info(
            f"Calculated {len(result_set)} scenarios "
            f"(target={result_set.inputs.target}, months={result_set.inputs.duration})"
        )
        return result_set

    def calculate_or_error(self) -> Tuple[Optional[ResultSet], Optional[str]]:
        try:
            return self.calculate(), None
        except ParseError:
            return None, INVALID_INPUT_MESSAGE
