from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from voxi.api.interface import InsightSource, InsightAPIError
from voxi.utils import get_logger

logger = get_logger(__name__)

@dataclass
class DashboardState:
    """Transient page state. Lives for one browser session, nothing is persisted."""
    query: str = ""
    current_question: str = ""
    show_response: bool = False
    is_loading: bool = False
    response: Optional[Dict[str, Any]] = None
    error: str = ""
    # bumped on every request so views can tell answers apart
    revision: int = field(default=0, compare=False)

    def submit(self, question: str, source: InsightSource) -> bool:
        """
        Ask one question and store the outcome. Blank questions are ignored
        and leave the state untouched. Returns True if a request was made.
        """
        if not question or not question.strip():
            return False

        self.current_question = question
        self.is_loading = True
        self.show_response = True
        self.error = ""
        self.revision += 1
        logger.info(f"Sending question: {question!r}")

        try:
            self.response = source.fetch(question)
        except InsightAPIError as e:
            self.error = str(e) or "An unknown error occurred"
            self.response = None
        finally:
            self.is_loading = False

        self.query = ""
        return True

    def reset(self):
        self.show_response = False
        self.current_question = ""
        self.query = ""
        self.response = None
        self.error = ""

    def insight_text(self) -> str:
        insight = (self.response or {}).get("insight") if isinstance(self.response, dict) else None
        return insight or f'Analysis results for: "{self.current_question}"'
