from typing import Any, Mapping, Optional

from src.api.error import PasswordMismatchError, PresentationError
from .protocols import Validation


class CompareFieldsValidation(Validation):
    """Second field must equal the first; the failure names the second one"""

    def __init__(self, field_name: str, field_to_compare_name: str):
        self.field_name = field_name
        self.field_to_compare_name = field_to_compare_name

    def validate(self, input: Mapping[str, Any]) -> Optional[PresentationError]:
        if input.get(self.field_name) != input.get(self.field_to_compare_name):
            return PasswordMismatchError(self.field_to_compare_name)
        return None
