# services/tips_catalog.py

from __future__ import annotations

from typing import List

from models.tip_models import WritingTip

ALL_CATEGORIES = "all"

WRITING_TIPS: List[WritingTip] = [
    WritingTip(
        id=1,
        title="Their, There, or They're?",
        description="Common homophones that are often confused",
        category="Grammar",
        body=[
            "Their - possessive form of they (Their books are on the table)",
            "There - refers to a place or introduces a sentence (There is a book on the table)",
            "They're - contraction of \"they are\" (They're going to the library)",
        ],
        example="They're bringing their books over there.",
    ),
    WritingTip(
        id=2,
        title="Active vs. Passive Voice",
        description="Writing with active voice is generally clearer and more direct",
        category="Style",
        body=[
            "Passive Voice: The ball was thrown by John.",
            "Active Voice: John threw the ball.",
            "Active voice is typically more direct and engaging for the reader.",
        ],
        example=(
            "The team completed the project ahead of schedule. "
            "This result impressed the client greatly."
        ),
    ),
    WritingTip(
        id=3,
        title="Commonly Misspelled Words",
        description="Words that frequently cause spelling errors",
        category="Spelling",
        body=[
            "Accommodate (not acommodate)",
            "Definitely (not definately)",
            "Separate (not seperate)",
            "Occurrence (not occurence)",
            "Necessary (not neccessary)",
        ],
        example="It is definitely necessary to accommodate everyone separately at the occurrence.",
    ),
    WritingTip(
        id=4,
        title="Comma Usage",
        description="Common rules for using commas correctly",
        category="Punctuation",
        body=[
            "Lists: Use commas to separate items in a list (apples, oranges, and bananas)",
            "Joining clauses: Use commas with coordinating conjunctions "
            "(I went to the store, and I bought milk)",
            "Introductory phrases: Use commas after introductory phrases "
            "(After the party, we went home)",
        ],
        example="After finishing work, I went to the store, bought some milk, and headed home.",
    ),
    WritingTip(
        id=5,
        title="Sentence Fragments",
        description="How to avoid incomplete sentences in your writing",
        category="Grammar",
        body=[
            "Fragment: Because I was late.",
            "Complete: I missed the bus because I was late.",
            "A complete sentence needs a subject and a verb, and must express a complete thought.",
        ],
        example=(
            "I missed the deadline. Because I forgot to set my alarm. "
            "This was a problem for the whole team."
        ),
    ),
    WritingTip(
        id=6,
        title="Transition Words",
        description="Words that help connect ideas and improve flow",
        category="Style",
        body=[
            "Addition: furthermore, moreover, additionally",
            "Contrast: however, nevertheless, on the other hand",
            "Result: therefore, consequently, as a result",
            "Conclusion: in conclusion, finally, to summarize",
        ],
        example=(
            "The project was challenging. However, the team persevered. "
            "As a result, we completed it on time. "
            "In conclusion, good teamwork leads to success."
        ),
    ),
]


def search_tips(query: str = "", category: str = ALL_CATEGORIES) -> List[WritingTip]:
    """
    タイトル / 説明文に query を含み（大文字小文字は無視）、
    カテゴリが一致する tip をカタログ順に返す。
    category がちょうど "all"（小文字）のときだけ全カテゴリ扱い。
    """
    needle = query.lower()
    wanted = category.lower()

    results: List[WritingTip] = []
    for tip in WRITING_TIPS:
        matches_search = needle in tip.title.lower() or needle in tip.description.lower()
        matches_category = category == ALL_CATEGORIES or tip.category.lower() == wanted
        if matches_search and matches_category:
            results.append(tip)
    return results
