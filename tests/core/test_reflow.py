from json2markdown.core.reflow import has_sentence_break, split_at_period


def test_abbreviated_title_is_not_a_break() -> None:
    text = "Dr. Smith went home. He was tired."
    assert split_at_period(text) == "Dr. Smith went home.\n\nHe was tired."


def test_initials_stay_together() -> None:
    out = split_at_period("He moved to the U. S. Army base. Then he left.")
    assert "U. S." in out
    assert out.endswith("\n\nThen he left.")


def test_text_without_break_is_returned_unchanged() -> None:
    for text in ("Hello world", "Ends with a period.", "pi is 3.14 roughly"):
        assert split_at_period(text, 3) is text


def test_paragraphs_are_indented() -> None:
    assert split_at_period("One. Two.", 2, indent_spaces=2) == "    One.\n\n    Two."


def test_newlines_count_as_whitespace() -> None:
    assert split_at_period("One.\nTwo.") == "One.\n\nTwo."


def test_surrounding_whitespace_is_trimmed() -> None:
    assert split_at_period("  One.   Two.  ") == "One.\n\nTwo."


def test_has_sentence_break() -> None:
    assert has_sentence_break("First. Second")
    assert not has_sentence_break("Mr. Jones")
    assert not has_sentence_break("Prof. Xavier")
    assert not has_sentence_break("A. B. C.")
