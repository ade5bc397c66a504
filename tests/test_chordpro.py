from chordslides.formatters.chordpro import ChordProFormatter, to_chordpro
from chordslides.models import Metadata, Song

BODY = "{start_of_verse}\nAmazing [G]grace, how [C]sweet the sound\n{end_of_verse}\n"


def _render(**kwargs) -> str:
    return ChordProFormatter().render(Song(text=BODY, metadata=Metadata(**kwargs)))


# ---------------------------------------------------------------------------
# Metadata directives
# ---------------------------------------------------------------------------


def test_no_metadata_returns_text_unchanged():
    assert _render() == BODY


def test_title_and_artist_in_output():
    out = _render(title="Amazing Grace", artist="John Newton")
    assert out.startswith("{title: Amazing Grace}\n{artist: John Newton}\n\n")


def test_renamed_directives():
    out = _render(bpm="72", notes="Capo 2")
    assert "{tempo: 72}" in out
    assert "{comment: Capo 2}" in out
    assert "{bpm:" not in out


def test_fixed_directive_order():
    out = _render(
        notes="n", bpm="90", key="G", year="1779", ccli="22025",
        copyright="PD", composer="trad", author="Newton", artist="a", title="t",
    )
    header = out[: out.index("\n\n")].splitlines()
    assert header == [
        "{title: t}",
        "{artist: a}",
        "{author: Newton}",
        "{composer: trad}",
        "{copyright: PD}",
        "{ccli: 22025}",
        "{year: 1779}",
        "{key: G}",
        "{tempo: 90}",
        "{comment: n}",
    ]


def test_fields_without_directive_are_omitted():
    assert _render(name="Grace", number="12", publisher="Hymnal") == BODY


def test_single_blank_separator_line():
    out = _render(key="G")
    assert out == "{key: G}\n\n" + BODY


# ---------------------------------------------------------------------------
# Body round trip
# ---------------------------------------------------------------------------


def test_body_preserved_after_header():
    text = "  [G]odd   spacing\n\n\n# comment kept\n{random}"
    out = to_chordpro(Metadata(title="x", key="A"), text)
    prefix = "{title: x}\n{key: A}\n\n"
    assert out.startswith(prefix)
    assert out[len(prefix):] == text


def test_empty_body():
    assert to_chordpro(Metadata(title="x"), "") == "{title: x}\n\n"


# ---------------------------------------------------------------------------
# Filename
# ---------------------------------------------------------------------------


def test_filename_prefers_title():
    formatter = ChordProFormatter()
    assert formatter.filename(Metadata(title="Amazing Grace", name="Grace")) == "amazing-grace.chordpro"


def test_filename_falls_back_to_name():
    assert ChordProFormatter().filename(Metadata(name="Grace")) == "grace.chordpro"


def test_filename_fallback():
    assert ChordProFormatter().filename(Metadata()) == "song.chordpro"
