from dataclasses import replace

import pytest
from fastapi.testclient import TestClient

import talkhis.analyzer as analyzer
import talkhis.app as app_module
from talkhis.engine import SummaryEngine
from talkhis.segmenter import segment

ENGLISH = (
    "Technology companies are investing heavily in new data centers this year. "
    "The new facilities will support cloud services and machine learning workloads. "
    "Local officials expect hundreds of construction jobs in the coming months. "
    "Energy use remains a concern for residents living near the sites."
)

ARABIC = "الطقس جميل اليوم في المدينة. يجب أن نحافظ على البيئة. ذهب الأطفال إلى الحديقة. الحديقة كبيرة وجميلة."


@pytest.fixture
def client(monkeypatch):
    engine = SummaryEngine(max_sentences=10)
    monkeypatch.setattr(analyzer, "get_default_engine", lambda: engine)
    monkeypatch.setattr(app_module, "get_default_engine", lambda: engine)
    return TestClient(app_module.app)


def test_healthz(client):
    resp = client.get("/healthz")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok", "enhanced": False}


def test_summarize_json(client):
    resp = client.post("/summarize", json={"content": ENGLISH, "sentence_count": 2})
    assert resp.status_code == 200
    body = resp.json()
    assert body["ok"] is True
    assert body["sentence_count"] == 2
    assert body["summary"]
    assert "latency_ms" in body


def test_summarize_empty(client):
    resp = client.post("/summarize", json={"content": "  "})
    assert resp.status_code == 400
    assert resp.json()["error"] == "content_is_empty"


def test_summarize_projection_conflict(client):
    resp = client.post("/summarize", json={
        "content": ENGLISH,
        "response_structure": {"include": ["summary"], "exclude": ["topics"]},
    })
    assert resp.status_code == 400
    assert resp.json()["error"] == "invalid_response_structure"


def test_summarize_projection_include(client):
    resp = client.post("/summarize", json={"content": ENGLISH, "response_structure": ["summary"]})
    assert resp.status_code == 200
    assert set(resp.json()) == {"ok", "summary", "latency_ms"}


def test_summarize_form(client):
    resp = client.post("/summarize", data={
        "content": ENGLISH, "sentence_count": "1", "title": "T", "include_image": "false",
    })
    assert resp.status_code == 200
    body = resp.json()
    assert body["ok"] is True
    assert body["sentence_count"] == 1
    assert body["title"] == "T"
    assert "image" not in body
    assert len(segment(body["summary"], "en")) == 1


def test_summarize_form_structure(client):
    resp = client.post("/summarize", data={"content": ENGLISH, "response_structure": '{"include": ["summary"]}'})
    assert set(resp.json()) == {"ok", "summary", "latency_ms"}
    resp = client.post("/summarize", data={"content": ENGLISH, "response_structure": "summary, words"})
    assert set(resp.json()) == {"ok", "summary", "words", "latency_ms"}


def test_summarize_missing_key_is_client_error(client, monkeypatch):
    monkeypatch.setattr(analyzer, "settings", replace(analyzer.settings, gemini_api_key=""))
    resp = client.post("/summarize", json={"content": ENGLISH, "use_ai": True})
    assert resp.status_code == 400
    assert resp.json()["error"] == "missing_gemini_api_key"


def test_summarize_pipeline_failure_is_server_error(client, monkeypatch):
    def broken(content):
        raise RuntimeError("cleaner crashed")

    monkeypatch.setattr(analyzer, "clean_text", broken)
    resp = client.post("/summarize", json={"content": ENGLISH})
    assert resp.status_code == 500
    assert resp.json()["error"] == "summarization_failed"


def test_summarize_arabic(client):
    resp = client.post("/summarize/arabic", json={"text": ARABIC, "sentence_count": 2})
    assert resp.status_code == 200
    assert resp.json()["ok"] is True
    assert resp.json()["summary"]


def test_summarize_arabic_form(client):
    resp = client.post("/summarize/arabic", data={"text": ARABIC, "sentence_count": "1"})
    assert resp.status_code == 200
    assert len(segment(resp.json()["summary"], "ar")) == 1
