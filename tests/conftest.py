import pytest

from talkhis.engine import SummaryEngine
from talkhis.providers import EnhancementProvider


class WhitespaceNounProvider(EnhancementProvider):
    """كل كلمة اسم: يكفي لاختبار مسار الوسم"""

    name = "fake_pos"
    supports_pos = True

    def tokenize(self, sentence):
        return sentence.split()

    def pos_tag(self, tokens):
        return ["noun"] * len(tokens)


class TokenizeOnlyProvider(EnhancementProvider):
    name = "fake_tokenizer"

    def tokenize(self, sentence):
        return sentence.split()


class BrokenProvider(EnhancementProvider):
    name = "broken"
    supports_pos = True

    def tokenize(self, sentence):
        raise RuntimeError("backend exploded")

    def pos_tag(self, tokens):
        raise RuntimeError("backend exploded")


@pytest.fixture
def engine():
    return SummaryEngine(max_sentences=10)


@pytest.fixture
def noun_provider():
    return WhitespaceNounProvider()


@pytest.fixture
def tokenizer_provider():
    return TokenizeOnlyProvider()


@pytest.fixture
def broken_provider():
    return BrokenProvider()
