"""
DocumentAnalysisClient HTTP 边界测试（requests 通过 mock 替换）
"""
import asyncio
from unittest.mock import Mock, patch

import pytest
import requests

from analyzer_client.api.client import (
    AnalysisServiceError,
    DocumentAnalysisClient,
    PendingFile,
    ServiceErrorKind,
)

from .conftest import SAMPLE_LOGS, SAMPLE_RESULT

BASE_URL = "https://analyzer.example.com"


def fake_response(payload=None, status_code=200, json_error=None):
    response = Mock()
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.text = "" if payload is None else str(payload)
    if json_error is not None:
        response.json.side_effect = json_error
    else:
        response.json.return_value = payload
    return response


@pytest.fixture
def client():
    return DocumentAnalysisClient(BASE_URL + "/", timeout=30)


@pytest.fixture
def mock_request():
    with patch("analyzer_client.api.client.requests.request") as mocked:
        yield mocked


class TestUploadDocuments:
    def test_posts_one_files_part_per_pending_file(self, client, mock_request):
        mock_request.return_value = fake_response(SAMPLE_RESULT)
        files = [
            PendingFile("a.pdf", b"A", "application/pdf"),
            PendingFile("a.pdf", b"A"),
        ]

        result = client.upload_documents(files)

        args, kwargs = mock_request.call_args
        assert args == ("POST", f"{BASE_URL}/upload-documents/")
        assert kwargs["timeout"] == 30
        assert kwargs["files"] == [
            ("files", ("a.pdf", b"A", "application/pdf")),
            ("files", ("a.pdf", b"A", "application/octet-stream")),
        ]
        assert result.summary == ["ok"]
        assert result.ratings.risk_score == 2
        assert result.clauses.opportunity == ["clause1"]

    def test_non_success_status_is_server_rejected(self, client, mock_request):
        mock_request.return_value = fake_response({"detail": "bad"}, status_code=500)

        with pytest.raises(AnalysisServiceError) as excinfo:
            client.upload_documents([PendingFile("a.pdf", b"A")])

        assert excinfo.value.kind is ServiceErrorKind.SERVER_REJECTED
        assert excinfo.value.status_code == 500

    def test_connection_failure_is_transport(self, client, mock_request):
        mock_request.side_effect = requests.ConnectionError("refused")

        with pytest.raises(AnalysisServiceError) as excinfo:
            client.upload_documents([PendingFile("a.pdf", b"A")])

        assert excinfo.value.kind is ServiceErrorKind.TRANSPORT

    def test_timeout_is_transport(self, client, mock_request):
        mock_request.side_effect = requests.Timeout("slow")

        with pytest.raises(AnalysisServiceError) as excinfo:
            client.upload_documents([PendingFile("a.pdf", b"A")])

        assert excinfo.value.kind is ServiceErrorKind.TRANSPORT

    def test_non_json_body_is_malformed(self, client, mock_request):
        mock_request.return_value = fake_response(json_error=ValueError("no json"))

        with pytest.raises(AnalysisServiceError) as excinfo:
            client.upload_documents([PendingFile("a.pdf", b"A")])

        assert excinfo.value.kind is ServiceErrorKind.MALFORMED

    def test_missing_summary_is_malformed(self, client, mock_request):
        payload = {k: v for k, v in SAMPLE_RESULT.items() if k != "summary"}
        mock_request.return_value = fake_response(payload)

        with pytest.raises(AnalysisServiceError) as excinfo:
            client.upload_documents([PendingFile("a.pdf", b"A")])

        assert excinfo.value.kind is ServiceErrorKind.MALFORMED

    def test_async_wrapper(self, client, mock_request):
        mock_request.return_value = fake_response(SAMPLE_RESULT)

        result = asyncio.run(client.aupload_documents([PendingFile("a.pdf", b"A")]))

        assert result.ratings.opportunity_score == 7


class TestListLogs:
    def test_returns_entries_in_backend_order(self, client, mock_request):
        payload = SAMPLE_LOGS + [{"id": "x-2", "request": "r2", "response": "resp2", "timestamp": "t0"}]
        mock_request.return_value = fake_response(payload)

        entries = client.list_logs()

        args, _ = mock_request.call_args
        assert args == ("GET", f"{BASE_URL}/logs/")
        assert [e.id for e in entries] == [1, "x-2"]
        assert entries[0].request == "r1"

    def test_empty_list(self, client, mock_request):
        mock_request.return_value = fake_response([])
        assert client.list_logs() == []

    def test_object_instead_of_list_is_malformed(self, client, mock_request):
        mock_request.return_value = fake_response({"logs": []})

        with pytest.raises(AnalysisServiceError) as excinfo:
            client.list_logs()

        assert excinfo.value.kind is ServiceErrorKind.MALFORMED

    def test_async_wrapper(self, client, mock_request):
        mock_request.return_value = fake_response(SAMPLE_LOGS)

        entries = asyncio.run(client.alist_logs())

        assert len(entries) == 1


def test_base_url_required():
    with pytest.raises(ValueError):
        DocumentAnalysisClient("")


def test_trailing_slash_stripped(client):
    assert client.base_url == BASE_URL


def test_error_kinds_documented():
    assert ServiceErrorKind.__doc__
    assert {k.value for k in ServiceErrorKind} == {"transport", "server_rejected", "malformed"}
