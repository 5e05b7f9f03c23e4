import requests
from typing import Dict, Any, Optional

from .interface import InsightSource, InsightAPIError
from .questions import resolve_request
from voxi.utils import get_logger

logger = get_logger(__name__)

class HttpInsightClient(InsightSource):
    def __init__(self, base_url: str, timeout: float = 30.0, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def url_for(self, endpoint: str) -> str:
        return f"{self.base_url}/{endpoint}"

    def fetch(self, question: str) -> Dict[str, Any]:
        request = resolve_request(question)
        url = self.url_for(request.endpoint)
        logger.info(f"POST {url} for question: {question!r}")

        try:
            response = self.session.post(
                url,
                json=request.payload,
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error(f"API call failed: {e}")
            raise InsightAPIError(str(e)) from e

        if not 200 <= response.status_code < 300:
            logger.error(f"API call failed: {url} returned {response.status_code}")
            raise InsightAPIError(f"HTTP error! status: {response.status_code}")

        try:
            data = response.json()
        except ValueError as e:
            logger.error(f"Response from {url} is not JSON: {e}")
            raise InsightAPIError(f"Invalid JSON response from {request.endpoint}") from e

        logger.debug(f"Response keys: {list(data) if isinstance(data, dict) else type(data).__name__}")
        return data
