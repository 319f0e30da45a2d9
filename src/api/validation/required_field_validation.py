from typing import Any, Mapping, Optional

from src.api.error import InvalidParamError, MissingParamError, PresentationError
from .protocols import Validation


class RequiredFieldValidation(Validation):
    """Field must be present, non-empty text"""

    def __init__(self, field_name: str):
        self.field_name = field_name

    def validate(self, input: Mapping[str, Any]) -> Optional[PresentationError]:
        value = input.get(self.field_name)
        if value is None or value == "":
            return MissingParamError(self.field_name)
        if not isinstance(value, str):
            return InvalidParamError(self.field_name)
        return None
