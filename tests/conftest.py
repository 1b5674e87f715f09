import pytest

from analyzer_client.api.client import PendingFile
from analyzer_client.api.schemas import AnalysisResult, LogEntry
from analyzer_client.core.session import AnalyzerSession

SAMPLE_RESULT = {
    "summary": ["ok"],
    "ratings": {"risk_score": 2, "opportunity_score": 7},
    "clauses": {"risk": [], "opportunity": ["clause1"], "neutral": []},
    "anomalies": [],
}

SAMPLE_LOGS = [{"id": 1, "request": "r1", "response": "resp1", "timestamp": "t1"}]


class FakeClient:
    """Records calls and replays canned outcomes (a value or an exception)."""

    def __init__(self):
        self.upload_calls = []
        self.log_calls = 0
        self.upload_outcome = AnalysisResult.model_validate(SAMPLE_RESULT)
        self.logs_outcome = [LogEntry.model_validate(e) for e in SAMPLE_LOGS]
        self.on_call = None

    async def aupload_documents(self, files):
        self.upload_calls.append([f.name for f in files])
        if self.on_call:
            self.on_call()
        if isinstance(self.upload_outcome, Exception):
            raise self.upload_outcome
        return self.upload_outcome

    async def alist_logs(self):
        self.log_calls += 1
        if self.on_call:
            self.on_call()
        if isinstance(self.logs_outcome, Exception):
            raise self.logs_outcome
        return self.logs_outcome


def make_file(name: str, content: bytes = b"data") -> PendingFile:
    return PendingFile(name=name, content=content)


@pytest.fixture
def fake_client():
    return FakeClient()


@pytest.fixture
def session(fake_client):
    return AnalyzerSession(fake_client)
