import pytest

from chordslides.editing import SECTION_TAGS, wrap_selection
from chordslides.exceptions import EmptySelectionError, UnknownSectionError
from chordslides.parser import parse_chordpro


def test_wrap_selection():
    text, cursor = wrap_selection("a\nb\nc", 2, 3, "chorus")
    assert text == "a\n{start_of_chorus}\nb\n{end_of_chorus}\nc"
    assert text[:cursor].endswith("{end_of_chorus}")
    assert text[cursor:] == "\nc"


def test_wrap_whole_text():
    text, cursor = wrap_selection("la la", 0, 5, "verse")
    assert text == "{start_of_verse}\nla la\n{end_of_verse}"
    assert cursor == len(text)


def test_wrapped_text_parses_to_section():
    for tag in SECTION_TAGS:
        text, _ = wrap_selection("la [G]la", 0, 8, tag)
        (slide,) = parse_chordpro(text).slides
        assert slide.group.split()[0].replace("-", "").lower() == tag


def test_empty_selection_refused():
    with pytest.raises(EmptySelectionError):
        wrap_selection("a\nb", 1, 1, "verse")


def test_unknown_tag_refused():
    with pytest.raises(UnknownSectionError):
        wrap_selection("a", 0, 1, "solo")


def test_unknown_tag_is_value_error():
    with pytest.raises(ValueError):
        wrap_selection("a", 0, 1, "solo")
