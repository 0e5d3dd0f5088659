# talkhis/analyzer.py — خط التحليل الكامل: تنظيف، لغة، تلخيص، مشاعر، مواضيع، إحصاءات
from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any, Dict, Optional

from .ai_summarizer import GeminiConfig, is_gemini_config_valid, summarize_with_gemini
from .config import settings
from .engine import SummaryEngine
from .errors import AISummaryError
from .language import detect_language, get_language_name
from .projection import filter_response, validate_structure
from .providers import NO_ENHANCEMENTS, detect_capabilities
from .segmenter import AR, resolve_language
from .sentiment import analyze_sentiment, get_sentiment_label
from .stats import count_sentences, count_words, difficulty_label, difficulty_score, reading_time_minutes
from .text_cleaning import clean_text, extract_image_from_html, extract_title_from_html
from .topics import extract_topics, suggest_related_topics

log = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_default_engine() -> SummaryEngine:
    """محرك العملية: فحص المكتبات الاختيارية مرة واحدة فقط"""
    capability = detect_capabilities() if settings.enhancements else NO_ENHANCEMENTS
    return SummaryEngine(capability=capability)


def _failure(error: str, message: str) -> Dict[str, Any]:
    return {
        "ok": False,
        "error": error,
        "message": message,
        "language": "en",
        "summary": "",
        "sentiment": "neutral",
        "topics": [],
        "words": 0,
        "reading_time": 0,
        "difficulty": "medium",
    }


def _gemini_from_settings() -> GeminiConfig:
    return GeminiConfig(
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
        timeout=settings.ai_timeout,
    )


def summarize(content: str, title: Optional[str] = None, sentence_count: Optional[int] = None,
              include_image: bool = True, min_length: Optional[int] = None,
              max_length: Optional[int] = None, response_structure=None, use_ai: bool = False,
              gemini: Optional[GeminiConfig] = None,
              engine: Optional[SummaryEngine] = None) -> Dict[str, Any]:
    """
    يلخص ويحلل نصًا أو HTML ويعيد قاموس النتيجة.
    الخطأ الوحيد الذي يخرج من هنا هو ResponseStructureError؛ أي فشل آخر
    يرجع كنتيجة ok=False.
    """
    validate_structure(response_structure)
    engine = engine or get_default_engine()
    min_length = settings.min_length if min_length is None else min_length
    max_length = settings.max_length if max_length is None else max_length
    requested = settings.sentence_count if sentence_count is None else sentence_count
    applied, adjusted = engine.clamp_sentence_count(requested)
    if adjusted:
        log.info(f"sentence_count adjusted from {requested!r} to {applied}")

    if use_ai:
        gemini = gemini or _gemini_from_settings()
        if not is_gemini_config_valid(gemini):
            return filter_response(
                _failure("missing_gemini_api_key", "use_ai requires a Gemini API key"),
                response_structure,
            )

    try:
        cleaned = clean_text(content or "")
        detected = detect_language(cleaned)
        language = detected.language
        core_language = resolve_language(language)
        short = len(cleaned) < min_length

        strategy = "extractive"
        if short:
            summary = cleaned
        else:
            summary = ""
            if use_ai:
                try:
                    summary = summarize_with_gemini(cleaned, applied, gemini)
                    strategy = "ai"
                except AISummaryError as e:
                    log.warning(f"AI summary failed, using extractive engine: {e}")
            if not summary:
                summary = engine.summarize_by_language(cleaned, core_language, applied)
        if max_length and len(summary) > max_length:
            summary = summary[:max_length].rstrip()

        topics = extract_topics(cleaned)
        sentiment = analyze_sentiment(cleaned)
        result: Dict[str, Any] = {
            "ok": True,
            "title": title or extract_title_from_html(content or "") or "",
            "summary": summary,
            "language": language,
            "language_name": get_language_name(language),
            "sentiment": get_sentiment_label(sentiment.score),
            "topics": topics,
            "related_topics": [] if short else suggest_related_topics(topics),
            "words": count_words(cleaned),
            "sentences": count_sentences(cleaned),
            "reading_time": reading_time_minutes(cleaned),
            "difficulty": "easy" if short else difficulty_label(cleaned),
            "difficulty_score": difficulty_score(cleaned),
            "strategy": strategy,
            "sentence_count": applied,
            "sentence_count_adjusted": adjusted,
        }
        if include_image:
            result["image"] = extract_image_from_html(content or "")
    except Exception as e:
        log.exception("Summarization error")
        return filter_response(_failure("summarization_failed", str(e)), response_structure)

    return filter_response(result, response_structure)


def summarize_arabic(text: str, sentence_count: int = 5, engine: Optional[SummaryEngine] = None) -> str:
    """استدعاء مباشر للمحرك بسياسة العربية"""
    engine = engine or get_default_engine()
    applied, _ = engine.clamp_sentence_count(sentence_count)
    return engine.summarize_by_language(text, AR, applied)
