"""
Shared fixtures and text builders for the analyzer tests.
"""

import pytest

from app.config import Settings

FILLER = ["alpha", "bravo", "charlie", "delta", "echo", "foxtrot", "golf", "hotel", "india", "juliet"]


def _build_body(total_words: int, sentence_words: int = 10, paragraph_sentences: int = 5) -> str:
    """Build filler prose with a fixed number of words per sentence and sentences per paragraph."""
    assert total_words % sentence_words == 0
    sentences = []
    for i in range(total_words // sentence_words):
        words = [FILLER[(i + j) % len(FILLER)] for j in range(sentence_words)]
        sentences.append(" ".join(words) + ".")

    paragraphs = [
        " ".join(sentences[i:i + paragraph_sentences])
        for i in range(0, len(sentences), paragraph_sentences)
    ]
    return "\n\n".join(paragraphs)


@pytest.fixture
def build_body():
    """Filler prose builder: build_body(total_words, sentence_words=10, paragraph_sentences=5)."""
    return _build_body


@pytest.fixture
def test_settings():
    """Settings with defaults only (no .env lookup)."""
    return Settings(_env_file=None)
