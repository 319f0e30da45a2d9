import copy
import json
from pathlib import Path
from typing import Any, Dict, Optional

DATA_FILE = Path(__file__).parent / "test_data.json"


class TestDataLoader:
    """Request payloads and seed documents shared by integration tests"""

    __test__ = False

    _data: Optional[Dict[str, Any]] = None

    @classmethod
    def load(cls) -> Dict[str, Any]:
        if cls._data is None:
            with open(DATA_FILE) as f:
                cls._data = json.load(f)
        return cls._data

    @classmethod
    def get(cls, key: str) -> Any:
        if key not in cls.load():
            raise KeyError(f"No test data named '{key}' in {DATA_FILE.name}")
        return cls.load()[key]

    @classmethod
    def get_copy(cls, key: str) -> Any:
        # Tests mutate payloads freely
        return copy.deepcopy(cls.get(key))
