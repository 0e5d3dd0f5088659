# talkhis/providers.py — مكتبات العربية الاختيارية (تحليل صرفي / تقطيع)
"""
مزوّدات تحسين اختيارية للنص العربي.

لا يحتاج المحرك أيًا منها ليعمل؛ إن توفرت يحسّن التقطيع ويضيف عدد الأسماء
إلى درجة الجملة. يتم فحص المكتبات مرة واحدة عند بدء العملية عبر
detect_capabilities()، والنتيجة قيمة ثابتة تمرَّر إلى المحرك.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from types import MappingProxyType
from typing import List, Mapping, Optional, Sequence, Tuple

log = logging.getLogger(__name__)


class EnhancementProvider:
    """واجهة موحدة: tokenize إجباري، pos_tag اختياري"""

    name = "base"
    supports_pos = False

    def tokenize(self, sentence: str) -> List[str]:
        raise NotImplementedError

    def pos_tag(self, tokens: Sequence[str]) -> List[str]:
        return []

    def is_noun(self, tag: str) -> bool:
        return bool(tag) and tag.lower().startswith("noun")

    @classmethod
    def load(cls) -> Optional["EnhancementProvider"]:
        """يحاول تهيئة المكتبة؛ يعيد None عند الفشل"""
        return None


class CamelToolsProvider(EnhancementProvider):
    """CAMeL Tools: تقطيع + وسم أقسام الكلام عبر MLE disambiguator"""

    name = "camel_tools"
    supports_pos = True

    def __init__(self, word_tokenize, tagger):
        self._word_tokenize = word_tokenize
        self._tagger = tagger

    def tokenize(self, sentence: str) -> List[str]:
        return list(self._word_tokenize(sentence))

    def pos_tag(self, tokens: Sequence[str]) -> List[str]:
        return [str(t) for t in self._tagger.tag(list(tokens))]

    @classmethod
    def load(cls) -> Optional["CamelToolsProvider"]:
        try:
            from camel_tools.tokenizers.word import simple_word_tokenize
            from camel_tools.disambig.mle import MLEDisambiguator
            from camel_tools.tagger.default import DefaultTagger

            mle = MLEDisambiguator.pretrained()
            return cls(simple_word_tokenize, DefaultTagger(mle, "pos"))
        except Exception as e:
            log.info(f"camel_tools not available: {e}")
            return None


class PyArabicProvider(EnhancementProvider):
    """PyArabic: تقطيع فقط، بدون أقسام كلام"""

    name = "pyarabic"

    def __init__(self, araby):
        self._araby = araby

    def tokenize(self, sentence: str) -> List[str]:
        return list(self._araby.tokenize(sentence))

    @classmethod
    def load(cls) -> Optional["PyArabicProvider"]:
        try:
            from pyarabic import araby
            return cls(araby)
        except Exception as e:
            log.info(f"pyarabic not available: {e}")
            return None


# الترتيب = الأفضلية (التحليل الصرفي أولًا)
KNOWN_PROVIDERS = (CamelToolsProvider, PyArabicProvider)


@dataclass(frozen=True)
class EnhancementCapability:
    providers: Tuple[EnhancementProvider, ...] = ()
    loaded: Mapping[str, bool] = field(default_factory=dict)

    def __post_init__(self):
        # نسخة للقراءة فقط: القدرة لا تتغير بعد التهيئة
        object.__setattr__(self, "providers", tuple(self.providers))
        object.__setattr__(self, "loaded", MappingProxyType(dict(self.loaded)))

    @classmethod
    def from_providers(cls, providers: Optional[Sequence[EnhancementProvider]] = None) -> "EnhancementCapability":
        providers = tuple(p for p in (providers or ()) if p is not None)
        return cls(providers=providers, loaded={p.name: True for p in providers})

    def has_enhanced(self) -> bool:
        return len(self.providers) > 0

    @property
    def primary(self) -> Optional[EnhancementProvider]:
        return self.providers[0] if self.providers else None


NO_ENHANCEMENTS = EnhancementCapability()


def probe_providers(candidates=KNOWN_PROVIDERS) -> EnhancementCapability:
    """يجرب كل مكتبة على حدة ويسجل النجاح/الفشل بصمت"""
    found, loaded = [], {}
    for provider_cls in candidates:
        provider = provider_cls.load()
        loaded[provider_cls.name] = provider is not None
        if provider is not None:
            found.append(provider)
    log.info(f"Arabic enhancements: {loaded}")
    return EnhancementCapability(providers=tuple(found), loaded=loaded)


@lru_cache(maxsize=1)
def detect_capabilities() -> EnhancementCapability:
    """مرة واحدة لكل عملية"""
    return probe_providers()
