import pytest

import talkhis.analyzer as analyzer
from talkhis.ai_summarizer import GeminiConfig
from talkhis.errors import AISummaryError, ResponseStructureError
from talkhis.segmenter import segment

ENGLISH = (
    "Technology companies are investing heavily in new data centers this year. "
    "The new facilities will support cloud services and machine learning workloads. "
    "Local officials expect hundreds of construction jobs in the coming months. "
    "Energy use remains a concern for residents living near the sites. "
    "In conclusion, the expansion must balance growth with environmental care."
)

ARABIC = (
    "هذا مثال لفقرة باللغة العربية. تحتوي على عدة جمل يجب تحليلها. "
    "يجب على الملخص استخراج أهم المعلومات وإرجاع ملخص مع البيانات الوصفية."
)

HTML = """
<h1>Test Article</h1>
<p>This is a paragraph in an HTML document. It contains information that should be extracted.</p>
<img src="https://example.com/image.jpg" />
<p>Second paragraph with additional information.</p>
"""


def run(content, **kwargs):
    kwargs.setdefault("engine", analyzer.SummaryEngine(max_sentences=10))
    return analyzer.summarize(content, **kwargs)


def test_english_result():
    result = run(ENGLISH, sentence_count=2)
    assert result["ok"] is True
    assert result["language"] == "en"
    assert result["language_name"] == "English"
    assert "Technology" in result["topics"]
    assert result["words"] > 0
    assert result["sentences"] == 5
    assert result["strategy"] == "extractive"
    assert len(segment(result["summary"], "en")) == 2


def test_arabic_result():
    result = run(ARABIC)
    assert result["ok"] is True
    assert result["language"] == "ar"
    assert result["language_name"] == "Arabic"
    assert "بيانات" in result["topics"]
    assert result["summary"]


def test_html_content():
    result = run(HTML)
    assert result["ok"] is True
    assert result["title"] == "Test Article"
    assert result["image"] == "https://example.com/image.jpg"
    assert result["summary"]


def test_custom_title_and_sentence_count():
    text = ("This is a test paragraph. It has multiple sentences. Each with different information. "
            "The summarizer should respect the sentenceCount option.")
    result = run(text, sentence_count=2, title="Custom Title")
    assert result["title"] == "Custom Title"
    assert len(segment(result["summary"], "en")) <= 2


def test_short_content_is_its_own_summary():
    result = run("Short note. Nothing else.")
    assert result["summary"] == "Short note. Nothing else."
    assert result["difficulty"] == "easy"
    assert result["related_topics"] == []


def test_sentence_count_adjustment_is_reported():
    result = run(ENGLISH, sentence_count=50)
    assert result["sentence_count"] == 10
    assert result["sentence_count_adjusted"] is True
    result = run(ENGLISH, sentence_count=3)
    assert result["sentence_count_adjusted"] is False


def test_image_can_be_skipped():
    assert "image" not in run(HTML, include_image=False)


def test_max_length_cuts_summary():
    result = run(ENGLISH, sentence_count=5, max_length=40)
    assert len(result["summary"]) <= 40


def test_projection_include():
    result = run(ENGLISH, response_structure={"include": ["summary"]})
    assert set(result) == {"ok", "summary"}


def test_projection_conflict_raises():
    with pytest.raises(ResponseStructureError):
        run(ENGLISH, response_structure={"include": ["summary"], "exclude": ["topics"]})


def test_ai_without_key_is_a_failure_result():
    result = run(ENGLISH, use_ai=True, gemini=GeminiConfig(api_key=""))
    assert result["ok"] is False
    assert result["error"] == "missing_gemini_api_key"


def test_ai_summary_used_when_available(monkeypatch):
    monkeypatch.setattr(analyzer, "summarize_with_gemini", lambda text, n, cfg: "AI written summary.")
    result = run(ENGLISH, use_ai=True, gemini=GeminiConfig(api_key="k"))
    assert result["summary"] == "AI written summary."
    assert result["strategy"] == "ai"


def test_ai_failure_falls_back_to_engine(monkeypatch):
    def boom(text, n, cfg):
        raise AISummaryError("quota exceeded")

    monkeypatch.setattr(analyzer, "summarize_with_gemini", boom)
    result = run(ENGLISH, use_ai=True, gemini=GeminiConfig(api_key="k"), sentence_count=2)
    assert result["ok"] is True
    assert result["strategy"] == "extractive"
    assert len(segment(result["summary"], "en")) == 2


def test_unexpected_error_returns_failure_record(monkeypatch):
    def broken(content):
        raise RuntimeError("cleaner crashed")

    monkeypatch.setattr(analyzer, "clean_text", broken)
    result = run(ENGLISH)
    assert result["ok"] is False
    assert result["error"] == "summarization_failed"
    assert result["summary"] == ""


def test_summarize_arabic_direct():
    text = "الطقس جميل اليوم في المدينة. يجب أن نحافظ على البيئة. ذهب الأطفال إلى الحديقة. الحديقة كبيرة وجميلة."
    summary = analyzer.summarize_arabic(text, 2, engine=analyzer.SummaryEngine())
    assert len(segment(summary, "ar")) == 2
