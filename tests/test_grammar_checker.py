from services.grammar_checker import check_basic_grammar


def test_double_space_and_homophone():
    issues = check_basic_grammar("Hello  world its fine")
    assert [(i.type, i.position) for i in issues] == [("spacing", 5), ("grammar", 13)]
    assert issues[0].suggestion == "Remove extra space"
    assert issues[1].suggestion == "Check 'its' vs 'it's' usage"


def test_empty_text():
    assert check_basic_grammar("") == []


def test_spacing_issues_come_first_then_sets_in_order():
    issues = check_basic_grammar("to  their")
    assert [i.position for i in issues] == [2, 4, 0]
    assert [i.type for i in issues] == ["spacing", "grammar", "grammar"]
    assert issues[1].suggestion == "Verify 'there', 'their', or 'they're' usage"
    assert issues[2].suggestion == "Verify 'to', 'too', or 'two' usage"


def test_each_occurrence_is_flagged():
    issues = check_basic_grammar("your car and you're late, your call")
    assert [i.position for i in issues] == [0, 13, 26]
    assert all(i.suggestion == "Check 'your' vs 'you're' usage" for i in issues)


def test_contraction_matches():
    issues = check_basic_grammar("it's here")
    assert len(issues) == 1
    assert issues[0].position == 0


def test_word_boundaries_and_case():
    # "tomorrow" and "Its" are not flagged
    assert check_basic_grammar("Its tomorrow") == []


def test_newline_runs_count_as_spacing():
    issues = check_basic_grammar("end.\n\nNext")
    assert [(i.type, i.position) for i in issues] == [("spacing", 4)]
