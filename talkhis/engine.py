# talkhis/engine.py — واجهة محرك التلخيص الاستخراجي حسب اللغة
"""
المسار:  Start -> Segmented -> (ShortCircuit | Scored -> Selected) -> Joined
وعند أي خطأ غير متوقع:  Failed -> FallbackTruncate

المحرك لا يرمي أخطاء أبدًا؛ أسوأ حالة أن يعيد النص الأصلي كما هو.
"""
from __future__ import annotations

import logging
from typing import Optional, Sequence, Tuple

from .config import settings
from .providers import EnhancementCapability, EnhancementProvider
from .scorer import score_sentences
from .segmenter import segment, resolve_language
from .selector import join_sentences, select_sentences
from .utils import clamp

log = logging.getLogger(__name__)


def truncate_fallback(text: str, sentence_count: int) -> str:
    """تقسيم بدائي على النقاط؛ آخر حل قبل إرجاع النص كما هو"""
    try:
        truncated = ".".join(text.split(".")[:sentence_count]).strip()
    except Exception:
        truncated = ""
    return truncated or text


class SummaryEngine:
    """
    المزوّدات الاختيارية تُمرَّر صراحة (providers أو capability جاهزة).
    بدونها يعمل المحرك بالسياسة الأساسية، وهذا هو الوضع الافتراضي.
    """

    def __init__(self, providers: Optional[Sequence[EnhancementProvider]] = None,
                 capability: Optional[EnhancementCapability] = None,
                 max_sentences: Optional[int] = None):
        if capability is None:
            capability = EnhancementCapability.from_providers(providers)
        self.capability = capability
        self.max_sentences = max(1, max_sentences or settings.max_sentences)

    @property
    def enhanced(self) -> bool:
        return self.capability.has_enhanced()

    def clamp_sentence_count(self, requested) -> Tuple[int, bool]:
        """يعيد (العدد المعتمد، هل تم تعديل الطلب؟)"""
        try:
            value = int(requested)
        except (TypeError, ValueError):
            return min(settings.sentence_count, self.max_sentences), True
        applied = clamp(value, 1, self.max_sentences)
        return applied, applied != value

    def summarize_by_language(self, text: str, language: str, sentence_count: int) -> str:
        if not text or not text.strip():
            return ""
        language = resolve_language(language)
        try:
            sentences = segment(text, language)
            if len(sentences) <= sentence_count:
                return join_sentences(sentences)
            scored = score_sentences(sentences, language, self.capability)
            return join_sentences(select_sentences(scored, sentence_count))
        except Exception as e:
            log.warning(f"summarize_by_language({language}) failed, truncating: {e}")
            return truncate_fallback(text, sentence_count)
