from voxi.api.interface import InsightSource, InsightAPIError
from voxi.state import DashboardState

class FakeSource(InsightSource):
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def fetch(self, question):
        self.calls.append(question)
        if self.error:
            raise self.error
        return self.response

def test_blank_question_is_ignored():
    source = FakeSource(response={"result": []})
    state = DashboardState(query="   ")
    assert state.submit("   ", source) is False
    assert state.submit("", source) is False
    assert source.calls == []
    assert not state.show_response
    assert state.query == "   "

def test_successful_submit():
    source = FakeSource(response={"insight": "Billing dominates."})
    state = DashboardState(query="Top topics?", error="old")
    assert state.submit("Top topics?", source) is True

    assert source.calls == ["Top topics?"]
    assert state.current_question == "Top topics?"
    assert state.show_response
    assert not state.is_loading
    assert state.error == ""
    assert state.query == ""
    assert state.response == {"insight": "Billing dominates."}
    assert state.insight_text() == "Billing dominates."

def test_failed_submit_keeps_message_and_clears_response():
    state = DashboardState(response={"result": [{"topic": "A", "count": 1}]})
    state.submit("Top topics?", FakeSource(error=InsightAPIError("HTTP error! status: 502")))

    assert state.error == "HTTP error! status: 502"
    assert state.response is None
    assert not state.is_loading
    assert state.show_response

def test_error_without_message_gets_generic_text():
    state = DashboardState()
    state.submit("q", FakeSource(error=InsightAPIError()))
    assert state.error == "An unknown error occurred"

def test_insight_fallback_text():
    state = DashboardState()
    state.submit("Peak hours?", FakeSource(response={"peak_hour": {}}))
    assert state.insight_text() == 'Analysis results for: "Peak hours?"'

def test_reset():
    state = DashboardState()
    state.submit("q", FakeSource(response={"a": 1}))
    state.reset()
    assert state == DashboardState()

def test_revision_changes_per_request():
    state = DashboardState()
    source = FakeSource(response={"a": 1})
    state.submit("q", source)
    first = state.revision
    state.submit("q", source)
    assert state.revision == first + 1
    state.submit("  ", source)
    assert state.revision == first + 1
