# -*- coding: utf-8 -*-
# تحليل المشاعر (VADER للإنجليزية، قاموس صغير للعربية)
from __future__ import annotations

import logging
from dataclasses import dataclass

from vaderSentiment.vaderSentiment import SentimentIntensityAnalyzer

from .normalizer import normalize_token
from .segmenter import AR
from .utils import is_arabic

log = logging.getLogger(__name__)

_ARABIC_POSITIVE_RAW = [
    "جيد", "ممتاز", "رائع", "جميل", "سعيد", "سعادة", "نجاح", "ناجح", "نجح", "فوز", "تقدم",
    "تحسن", "أفضل", "مفيد", "إيجابي", "حب", "أحب", "شكرا", "فرح", "مذهل", "قوي", "آمن",
]
_ARABIC_NEGATIVE_RAW = [
    "سيء", "سيئ", "فشل", "فاشل", "حزين", "حزن", "خسارة", "خسر", "مشكلة", "أزمة", "خطر",
    "ضعيف", "سلبي", "كره", "أسوأ", "غضب", "ألم", "كارثة", "فساد", "تراجع", "قلق", "حرب",
]

ARABIC_POSITIVE = frozenset(normalize_token(w, AR) for w in _ARABIC_POSITIVE_RAW)
ARABIC_NEGATIVE = frozenset(normalize_token(w, AR) for w in _ARABIC_NEGATIVE_RAW)

_vader = None


@dataclass(frozen=True)
class SentimentResult:
    score: float
    comparative: float


NEUTRAL = SentimentResult(0.0, 0.0)


def _analyzer() -> SentimentIntensityAnalyzer:
    global _vader
    if _vader is None:
        _vader = SentimentIntensityAnalyzer()
    return _vader


def _strip_article(token: str) -> str:
    # "النجاح" -> "نجاح"
    for prefix in ("وال", "بال", "فال", "لل", "ال"):
        if token.startswith(prefix) and len(token) - len(prefix) >= 2:
            return token[len(prefix):]
    return token


def analyze_arabic_sentiment(text: str) -> SentimentResult:
    tokens = [normalize_token(t, AR) for t in text.split()]
    tokens = [t for t in tokens if t]
    if not tokens:
        return NEUTRAL
    pos = neg = 0
    for tok in tokens:
        base = _strip_article(tok)
        if tok in ARABIC_POSITIVE or base in ARABIC_POSITIVE:
            pos += 1
        elif tok in ARABIC_NEGATIVE or base in ARABIC_NEGATIVE:
            neg += 1
    score = pos - neg
    return SentimentResult(float(score), score / len(tokens))


def analyze_english_sentiment(text: str) -> SentimentResult:
    scores = _analyzer().polarity_scores(text)
    compound = scores.get("compound", 0.0)
    words = len(text.split()) or 1
    return SentimentResult(compound, compound / words)


def analyze_sentiment(text: str) -> SentimentResult:
    """عند أي خطأ نعيد نتيجة محايدة"""
    if not text or not text.strip():
        return NEUTRAL
    try:
        if is_arabic(text):
            return analyze_arabic_sentiment(text)
        return analyze_english_sentiment(text)
    except Exception as e:
        log.warning(f"sentiment analysis error: {e}")
        return NEUTRAL


def get_sentiment_label(score: float) -> str:
    if score > 0: return "positive"
    if score < 0: return "negative"
    return "neutral"
