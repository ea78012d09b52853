import pytest

from agents.analyzer_agent import calculate_seo_score, check_heading_structure
from agents.strategist_agent import generate_seo_suggestions
from services.estimators import (
    analyze_text_statistics,
    calculate_goal_progress,
    calculate_pages,
    estimate_reading_level,
    estimate_reading_time,
    estimate_speaking_time,
)
from services.grammar_checker import check_basic_grammar
from services.html_parser import build_heading_tree, extract_headings
from services.keyword_density import analyze_keyword_density
from services.text_stats import (
    average_sentence_length,
    count_characters,
    count_paragraphs,
    count_sentences,
    count_words,
    find_longest_sentence,
)

SAMPLE = (
    "<h1>Garden Notes</h1>\n"
    "Their  garden is larger then ours. Its soil is rich!\n\n"
    "<h3>Watering</h3>\n"
    "Water the garden early, before the heat of the day sets in? Yes."
)

ANALYZERS = [
    count_words,
    count_characters,
    count_sentences,
    count_paragraphs,
    average_sentence_length,
    find_longest_sentence,
    estimate_reading_time,
    estimate_speaking_time,
    calculate_pages,
    estimate_reading_level,
    analyze_text_statistics,
    calculate_goal_progress,
    analyze_keyword_density,
    check_basic_grammar,
    extract_headings,
    check_heading_structure,
    calculate_seo_score,
    generate_seo_suggestions,
]


@pytest.mark.parametrize("analyzer", ANALYZERS, ids=lambda f: f.__name__)
def test_same_text_same_result(analyzer):
    assert analyzer(SAMPLE) == analyzer(SAMPLE)


def test_heading_tree_is_repeatable():
    headings = extract_headings(SAMPLE)
    assert build_heading_tree(headings) == build_heading_tree(headings)
    assert headings == extract_headings(SAMPLE)
