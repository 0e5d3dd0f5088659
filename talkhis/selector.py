# -*- coding: utf-8 -*-
# اختيار أفضل k جمل ثم إعادتها لترتيبها الأصلي
from __future__ import annotations

from typing import List, Sequence

from .scorer import ScoredSentence
from .segmenter import Sentence


def select_sentences(scored: Sequence[ScoredSentence], k: int) -> List[Sentence]:
    """
    - عدد الجمل <= k: نعيدها كلها بترتيبها.
    - غير ذلك: ترتيب تنازلي حسب الدرجة (sorted ثابت، فالتعادل يحفظ الترتيب الأصلي)
      ثم أول k ثم ترتيب تصاعدي حسب الفهرس.
    لا نتحقق من k هنا؛ المحرك هو المسؤول عن ضبطه.
    """
    if len(scored) <= k:
        return sorted(scored, key=lambda s: s.index)
    ranked = sorted(scored, key=lambda s: s.score, reverse=True)
    return sorted(ranked[:max(k, 0)], key=lambda s: s.index)


def join_sentences(sentences: Sequence[Sentence]) -> str:
    return " ".join(s.text for s in sentences)
