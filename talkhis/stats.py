# -*- coding: utf-8 -*-
# عدد الكلمات والجمل، زمن القراءة، ومستوى الصعوبة
import math

from .text_cleaning import extract_sentences

WORDS_PER_MINUTE = 200


def count_words(text: str) -> int:
    return len((text or "").split())


def count_sentences(text: str) -> int:
    return len(extract_sentences(text or ""))


def reading_time_minutes(text: str) -> int:
    """دقيقة واحدة على الأقل"""
    return max(1, math.ceil(count_words(text) / WORDS_PER_MINUTE))


def difficulty_label(text: str) -> str:
    words = count_words(text)
    if not words:
        return "medium"
    avg = len(text) / words
    if avg < 4.5:
        return "easy"
    if avg > 6:
        return "hard"
    return "medium"


def difficulty_score(text: str) -> float:
    """بين 0 (سهل) و 1 (صعب)"""
    words = (text or "").split()
    if not words:
        return 0.5
    avg_word = sum(len(w) for w in words) / len(words)
    avg_sentence = len(words) / (count_sentences(text) or 1)
    complex_ratio = sum(1 for w in words if len(w) > 6) / len(words)
    score = (avg_word / 10) * 0.3 + (avg_sentence / 30) * 0.3 + complex_ratio * 0.4
    return round(max(0.0, min(1.0, score)), 3)
