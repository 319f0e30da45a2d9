from abc import ABC, abstractmethod
from typing import Any, Mapping, Optional

from src.api.error import PresentationError


class Validation(ABC):
    """A single input check; returns the failure as a value, never raises"""

    @abstractmethod
    def validate(self, input: Mapping[str, Any]) -> Optional[PresentationError]:
        pass


class EmailValidator(ABC):
    @abstractmethod
    def is_valid(self, email: str) -> bool:
        pass
