# talkhis/scorer.py — تقييم أهمية الجمل (تكرار الكلمات + الموقع + عبارات الإبراز)
"""
تقييم الجمل لكل لغة.

الخطوات بالترتيب (ولا نغيّره):
  1) جدول تكرار الكلمات الموحّدة في المستند كله
  2) جملة أقصر من الحد الأدنى للكلمات => الدرجة 0 (تبقى في مكانها)
  3) مجموع التكرارات / عدد الكلمات
  3ب) السياسة المحسّنة (عربي فقط): + عدد الأسماء * 0.5
  4) مضاعِف الموقع (أول/آخر جملة، ثم أول نسبة من المستند)
  5) مضاعِف عبارات الإبراز، مرة واحدة فقط لأول عبارة مطابقة

لا يغيّر ترتيب الجمل ولا يرمي أخطاء: أي فشل في مكتبة خارجية يرجع إلى
التقطيع البسيط لتلك الجملة فقط.
"""
from __future__ import annotations

import logging
import re
from collections import Counter
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from .normalizer import filter_tokens, normalize
from .providers import NO_ENHANCEMENTS, EnhancementCapability, EnhancementProvider
from .segmenter import AR, EN, Sentence, resolve_language
from .utils import strip_harakat

log = logging.getLogger(__name__)

NOUN_WEIGHT = 0.5

ENGLISH_MARKERS = (
    "in conclusion", "in summary", "to summarize", "most importantly", "it is essential",
    "must", "essential", "crucial", "critical", "important", "key", "significant",
    "therefore", "as a result", "consequently", "overall", "in short",
)

ARABIC_MARKERS = (
    "من أهم", "يجب", "ضروري", "أساسي", "مهم", "خلاصة",
    "نتيجة", "إنّ", "إن", "لذلك", "وبالتالي",
)

# القائمة الموسعة للسياسة المحسّنة
ARABIC_MARKERS_EXTENDED = ARABIC_MARKERS + (
    "وخلاصة القول", "باختصار", "بشكل أساسي", "من الجدير بالذكر", "لا بد من",
    "من الضروري", "حيث أن", "بالإضافة إلى ذلك", "وعلاوة على ذلك",
)


@dataclass(frozen=True)
class ScoredSentence(Sentence):
    score: float = 0.0


@dataclass(frozen=True)
class LanguageProfile:
    language: str
    min_tokens: int
    first_boost: float
    last_boost: float
    lead_ratio: float
    lead_boost: float
    markers: Tuple[str, ...]
    marker_boost: float
    enhanced_markers: Tuple[str, ...]
    enhanced_marker_boost: float


PROFILES: Dict[str, LanguageProfile] = {
    EN: LanguageProfile(
        language=EN, min_tokens=3,
        first_boost=1.25, last_boost=1.25,
        lead_ratio=0.1, lead_boost=1.1,
        markers=ENGLISH_MARKERS, marker_boost=1.15,
        enhanced_markers=ENGLISH_MARKERS, enhanced_marker_boost=1.15,
    ),
    # النص العربي التفسيري يقدّم الفكرة الرئيسية في أوله
    AR: LanguageProfile(
        language=AR, min_tokens=2,
        first_boost=1.5, last_boost=1.3,
        lead_ratio=0.2, lead_boost=1.2,
        markers=ARABIC_MARKERS, marker_boost=1.25,
        enhanced_markers=ARABIC_MARKERS_EXTENDED, enhanced_marker_boost=1.3,
    ),
}


def get_profile(language: str) -> LanguageProfile:
    return PROFILES[resolve_language(language)]


# ===== عبارات الإبراز =====
_ARABIC_EDGE = r"[\s،؛؟.,!?:;()\"'«»]"


def _marker_pattern(marker: str, language: str) -> re.Pattern:
    if language == AR:
        # حدود الكلمة في العربية: مسافة أو ترقيم أو طرف النص
        return re.compile(r"(?:^|(?<=" + _ARABIC_EDGE + r"))" + re.escape(strip_harakat(marker))
                          + r"(?=" + _ARABIC_EDGE + r"|$)")
    return re.compile(r"\b" + re.escape(marker) + r"\b", re.IGNORECASE)


_PATTERNS: Dict[Tuple[str, str], re.Pattern] = {}


def _compiled(marker: str, language: str) -> re.Pattern:
    key = (language, marker)
    if key not in _PATTERNS:
        _PATTERNS[key] = _marker_pattern(marker, language)
    return _PATTERNS[key]


def find_marker(text: str, language: str, enhanced: bool = False) -> Optional[str]:
    """أول عبارة إبراز موجودة في الجملة أو None"""
    profile = get_profile(language)
    markers = profile.enhanced_markers if enhanced else profile.markers
    haystack = strip_harakat(text) if profile.language == AR else text
    for marker in markers:
        if _compiled(marker, profile.language).search(haystack):
            return marker
    return None


def marker_boost(text: str, language: str, enhanced: bool = False) -> float:
    """المضاعِف لا يتراكم: عبارة واحدة أو عشر = نفس المضاعِف"""
    if find_marker(text, language, enhanced) is None:
        return 1.0
    profile = get_profile(language)
    return profile.enhanced_marker_boost if enhanced else profile.marker_boost


def position_boost(index: int, total: int, language: str) -> float:
    profile = get_profile(language)
    if index == 0:
        return profile.first_boost
    if index == total - 1:
        return profile.last_boost
    if index < total * profile.lead_ratio:
        return profile.lead_boost
    return 1.0


# ===== جدول التكرار =====
def build_frequency_table(token_lists: Sequence[Sequence[str]]) -> Counter:
    """جدول لمستند واحد فقط؛ يبنى من جديد في كل استدعاء"""
    freq = Counter()
    for tokens in token_lists:
        freq.update(tokens)
    return freq


def _density(tokens: Sequence[str], freq: Counter) -> float:
    return sum(freq.get(t, 0) for t in tokens) / (len(tokens) or 1)


# ===== استخراج الكلمات =====
def _enhanced_tokens(sentence: Sentence, provider: EnhancementProvider) -> Tuple[List[str], int]:
    """(كلمات موحّدة، عدد الأسماء). أي خطأ من المكتبة => تقطيع بالمسافات"""
    try:
        raw = provider.tokenize(sentence.text)
    except Exception as e:
        log.debug(f"{provider.name} tokenize failed on sentence {sentence.index}: {e}")
        return normalize(sentence.text, AR), 0

    nouns = 0
    if provider.supports_pos:
        try:
            nouns = sum(1 for tag in provider.pos_tag(raw) if provider.is_noun(tag))
        except Exception as e:
            log.debug(f"{provider.name} pos_tag failed on sentence {sentence.index}: {e}")
            nouns = 0
    return filter_tokens(raw, AR), nouns


def _score_all(sentences: Sequence[Sentence], token_lists: List[List[str]], language: str,
               nouns: Optional[List[int]] = None, enhanced: bool = False) -> List[ScoredSentence]:
    profile = get_profile(language)
    freq = build_frequency_table(token_lists)
    total = len(sentences)
    out = []
    for i, sent in enumerate(sentences):
        tokens = token_lists[i]
        if len(tokens) < profile.min_tokens:
            out.append(ScoredSentence(text=sent.text, index=sent.index, score=0.0))
            continue
        score = _density(tokens, freq)
        if nouns is not None:
            score += nouns[i] * NOUN_WEIGHT
        score *= position_boost(i, total, profile.language)
        score *= marker_boost(sent.text, profile.language, enhanced)
        out.append(ScoredSentence(text=sent.text, index=sent.index, score=score))
    return out


def score_basic(sentences: Sequence[Sentence], language: str) -> List[ScoredSentence]:
    token_lists = [normalize(s.text, language) for s in sentences]
    return _score_all(sentences, token_lists, language)


def score_enhanced(sentences: Sequence[Sentence], provider: EnhancementProvider) -> List[ScoredSentence]:
    token_lists, nouns = [], []
    for sent in sentences:
        tokens, noun_count = _enhanced_tokens(sent, provider)
        token_lists.append(tokens)
        nouns.append(noun_count)
    return _score_all(sentences, token_lists, AR, nouns=nouns, enhanced=True)


def score_sentences(sentences: Sequence[Sentence], language: str,
                    capability: EnhancementCapability = NO_ENHANCEMENTS) -> List[ScoredSentence]:
    """
    يعيد جملة مقيّمة لكل جملة مدخلة بنفس الترتيب.
    السياسة المحسّنة للعربية فقط وعند توفر مزوّد.
    """
    language = resolve_language(language)
    if not sentences:
        return []
    if language == AR and capability is not None and capability.has_enhanced():
        return score_enhanced(sentences, capability.primary)
    return score_basic(sentences, language)
