from services.html_parser import build_heading_tree, extract_headings


def as_pairs(headings):
    return [(h.level, h.text) for h in headings]


def test_extract_headings_in_document_order():
    text = "<h1>Title</h1>\nintro\n<h2> Sub </h2>\n<h3>Deep</h3>"
    assert as_pairs(extract_headings(text)) == [(1, "Title"), (2, "Sub"), (3, "Deep")]


def test_mismatched_tags_are_skipped():
    assert extract_headings("<h1>Title</h2>") == []
    assert extract_headings("<h2>text</h3> and <h4>ok</h4>")[0].text == "ok"


def test_case_insensitive_tags():
    assert as_pairs(extract_headings("<H3>Upper</h3>")) == [(3, "Upper")]


def test_headings_must_close_on_the_same_line():
    assert extract_headings("<h2>Line\nbreak</h2>") == []


def test_levels_outside_range_are_ignored():
    assert extract_headings("<h7>Nope</h7><h0>No</h0>") == []


def test_build_heading_tree():
    headings = extract_headings(
        "<h1>Root</h1><h2>A</h2><h3>A.1</h3><h2>B</h2>"
    )
    tree = build_heading_tree(headings)
    assert len(tree) == 1
    root = tree[0]
    assert [child.text for child in root.children] == ["A", "B"]
    assert [child.text for child in root.children[0].children] == ["A.1"]


def test_build_heading_tree_without_parent_makes_roots():
    tree = build_heading_tree(extract_headings("<h2>Sub</h2><h1>Main</h1>"))
    assert [node.text for node in tree] == ["Sub", "Main"]
