from typing import Any, Mapping, Optional

from src.api.error import InvalidParamError, PresentationError
from .protocols import EmailValidator, Validation


class EmailValidation(Validation):
    def __init__(self, field_name: str, email_validator: EmailValidator):
        self.field_name = field_name
        self.email_validator = email_validator

    def validate(self, input: Mapping[str, Any]) -> Optional[PresentationError]:
        if not self.email_validator.is_valid(input.get(self.field_name)):
            return InvalidParamError(self.field_name)
        return None
