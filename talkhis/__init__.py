# talkhis/__init__.py — واجهة موحدة لمحرك التلخيص ثنائي اللغة

from .analyzer import summarize, summarize_arabic, get_default_engine
from .engine import SummaryEngine
from .errors import (
    TalkhisError,
    ConfigurationError,
    ResponseStructureError,
    AISummaryError,
)
from .normalizer import normalize, normalize_token
from .projection import filter_response
from .providers import (
    EnhancementCapability,
    EnhancementProvider,
    CamelToolsProvider,
    PyArabicProvider,
    detect_capabilities,
)
from .scorer import ScoredSentence, score_sentences
from .segmenter import AR, EN, Sentence, segment, resolve_language
from .selector import select_sentences
from .topics import extract_topics
from .utils import is_arabic

__version__ = "1.2.13"
