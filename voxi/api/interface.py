from abc import ABC, abstractmethod
from typing import Dict, Any

class InsightAPIError(Exception):
    """Raised when the analytics service cannot produce a response."""

class InsightSource(ABC):
    @abstractmethod
    def fetch(self, question: str) -> Dict[str, Any]:
        """
        Answer a question.
        Returns:
            The decoded JSON payload, e.g. {"result": [{"topic": "Billing", "count": 42}]}
        Raises:
            InsightAPIError: the request failed or the body was not JSON.
        """
        pass
