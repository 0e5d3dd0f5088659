# -*- coding: utf-8 -*-
# استخراج المواضيع واقتراح مواضيع مرتبطة
from __future__ import annotations

import logging
import re
from typing import Dict, List

from .utils import is_arabic

log = logging.getLogger(__name__)

ENGLISH_TOPICS = [
    "Technology", "Science", "Health", "Politics", "Business", "Economy",
    "Entertainment", "Sports", "Education", "Environment", "Art", "Music",
    "Food", "Travel", "Fashion", "Lifestyle", "Religion", "History",
    "JavaScript", "Programming", "Web", "Development", "Software", "Data",
    "AI", "Machine Learning", "Blockchain", "Cryptocurrency", "Finance",
]

ARABIC_TOPICS = [
    "تكنولوجيا", "علوم", "صحة", "سياسة", "أعمال", "اقتصاد",
    "ترفيه", "رياضة", "تعليم", "بيئة", "فن", "موسيقى",
    "طعام", "سفر", "أزياء", "نمط الحياة", "دين", "تاريخ",
    "جافاسكريبت", "برمجة", "ويب", "تطوير", "برمجيات", "بيانات",
    "ذكاء اصطناعي", "تعلم آلي", "بلوكتشين", "عملات رقمية", "مالية",
]

RELATED_TOPICS: Dict[str, List[str]] = {
    "Technology": ["Programming", "Web", "Software", "Data", "AI"],
    "Science": ["Health", "Environment", "Technology", "Data"],
    "Programming": ["JavaScript", "Web", "Development", "Software"],
    "Business": ["Economy", "Finance", "Cryptocurrency"],
    "AI": ["Machine Learning", "Data", "Technology"],
    "تكنولوجيا": ["برمجة", "ويب", "برمجيات", "بيانات", "ذكاء اصطناعي"],
    "علوم": ["صحة", "بيئة", "تكنولوجيا", "بيانات"],
    "برمجة": ["جافاسكريبت", "ويب", "تطوير", "برمجيات"],
    "أعمال": ["اقتصاد", "مالية", "عملات رقمية"],
    "ذكاء اصطناعي": ["تعلم آلي", "بيانات", "تكنولوجيا"],
}

_ENGLISH_PATTERNS = {t: re.compile(r"\b" + re.escape(t) + r"\b", re.I) for t in ENGLISH_TOPICS}


def extract_topics(text: str, limit: int = 5) -> List[str]:
    """
    المواضيع المذكورة في النص بترتيب القائمة.
    الإنجليزية بحدود الكلمة ("AI" لا تطابق "said")، العربية كنص جزئي
    لأن الكلمة قد تأتي مع "ال" أو حروف الجر.
    """
    if not text or not text.strip():
        return []
    try:
        if is_arabic(text):
            found = [t for t in ARABIC_TOPICS if t in text]
        else:
            found = [t for t in ENGLISH_TOPICS if _ENGLISH_PATTERNS[t].search(text)]
        return found[:limit]
    except Exception as e:
        log.warning(f"topic extraction error: {e}")
        return []


def suggest_related_topics(topics: List[str], limit: int = 3) -> List[str]:
    if not topics:
        return []
    present = {t.lower() for t in topics}
    related: List[str] = []
    for topic in topics:
        key = next((k for k in RELATED_TOPICS if k.lower() == topic.lower()), None)
        if key is None:
            continue
        for cand in RELATED_TOPICS[key]:
            if cand.lower() not in present and cand not in related:
                related.append(cand)
    return related[:limit]
