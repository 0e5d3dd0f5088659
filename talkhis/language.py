# talkhis/language.py — كشف لغة النص
from __future__ import annotations

import logging
from dataclasses import dataclass

from langdetect import DetectorFactory, detect_langs
from langdetect.lang_detect_exception import LangDetectException

from .segmenter import AR, EN
from .utils import is_arabic

log = logging.getLogger(__name__)

# نتائج langdetect عشوائية بدون بذرة ثابتة
DetectorFactory.seed = 0

LANGUAGE_NAMES = {
    "ar": "Arabic",
    "en": "English",
    "fr": "French",
    "es": "Spanish",
    "de": "German",
    "zh": "Chinese",
    "ru": "Russian",
    "ja": "Japanese",
}


@dataclass(frozen=True)
class LanguageDetectionResult:
    language: str
    confidence: float


def detect_language(text: str) -> LanguageDetectionResult:
    """وجود حروف عربية يكفي؛ وإلا نسأل langdetect ثم الإنجليزية كافتراض"""
    if is_arabic(text):
        return LanguageDetectionResult(AR, 0.9)
    if not text or not text.strip():
        return LanguageDetectionResult(EN, 0.5)
    try:
        results = detect_langs(text)
        if results:
            best = results[0]
            return LanguageDetectionResult(best.lang, float(best.prob))
    except LangDetectException as e:
        log.info(f"langdetect could not decide: {e}")
    return LanguageDetectionResult(EN, 0.5)


def get_language_name(code: str) -> str:
    return LANGUAGE_NAMES.get(code, "Unknown")
