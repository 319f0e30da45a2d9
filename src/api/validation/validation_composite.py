from typing import Any, List, Mapping, Optional

from src.api.error import PresentationError
from .protocols import Validation


class ValidationComposite(Validation):
    """Runs validations in order and stops at the first failure"""

    def __init__(self, validations: List[Validation]):
        self.validations = validations

    def validate(self, input: Mapping[str, Any]) -> Optional[PresentationError]:
        for validation in self.validations:
            error = validation.validate(input)
            if error:
                return error
        return None
