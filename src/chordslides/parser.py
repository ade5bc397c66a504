"""ChordPro text → slides.

Implements the single forward pass that turns ChordPro-like text into an
ordered list of :class:`~chordslides.models.Slide` objects:

  1. classify_line()   — METADATA / SECTION_START / SECTION_END / DIRECTIVE /
                          COMMENT / BLANK / CONTENT
  2. extract_chords()  — strip ``[Chord]`` markers, keep their offsets
  3. ChordProParser    — group content lines into labelled sections

Directives found along the way are not applied to anything: they are
returned as metadata deltas in the :class:`~chordslides.models.ParseResult`
and the caller merges them into its own metadata.
"""

import logging
import re
from enum import Enum, auto

from .models import Chord, Metadata, ParseResult, Slide, SlideLine, Song

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Regexes
# ---------------------------------------------------------------------------

# {title: Amazing Grace}, {t: ...}, {tempo: 90}, {c: Capo 2}
METADATA_RE = re.compile(
    r"\{(title|t|artist|composer|author|copyright|ccli|key|year|tempo|bpm|comment|c)"
    r":\s*([^}]+)\}",
    re.IGNORECASE,
)

# {start_of_verse}, {verse: 2}, {start_of_verse: 2}, {c}, {pre-chorus}
SECTION_START_RE = re.compile(
    r"\{(?:start_of_)?"
    r"(verse|chorus|bridge|pre-?chorus|intro|outro|tag|interlude|v|c|b)"
    r"(?::\s*(\d+))?\}",
    re.IGNORECASE,
)

# {end_of_verse}, {eoc}
SECTION_END_RE = re.compile(
    r"\{(?:end_of_)?"
    r"(verse|chorus|bridge|pre-?chorus|intro|outro|tag|interlude|eov|eoc|eob)\}",
    re.IGNORECASE,
)

# A line that is nothing but one {...} group
DIRECTIVE_ONLY_RE = re.compile(r"^\{[^}]+\}$")

# Inline chord marker: [G], [Am7], [D/F#]
CHORD_MARKER_RE = re.compile(r"\[([^\]]+)\]")

# ---------------------------------------------------------------------------
# Lookup tables
# ---------------------------------------------------------------------------

# Directive keyword (lowercase) → Metadata field
METADATA_FIELDS = {
    "title": "title",
    "t": "title",
    "artist": "artist",
    "composer": "composer",
    "author": "author",
    "copyright": "copyright",
    "ccli": "ccli",
    "key": "key",
    "year": "year",
    "tempo": "bpm",
    "bpm": "bpm",
    "comment": "notes",
    "c": "notes",
}

# Section keyword (lowercase) → label
SECTION_NAMES = {
    "verse": "Verse",
    "v": "Verse",
    "chorus": "Chorus",
    "c": "Chorus",
    "bridge": "Bridge",
    "b": "Bridge",
    "prechorus": "Pre-Chorus",
    "pre-chorus": "Pre-Chorus",
    "intro": "Intro",
    "outro": "Outro",
    "tag": "Tag",
    "interlude": "Interlude",
}

# Sections that occur once per song and are labelled without a number
UNNUMBERED_SECTIONS = frozenset(
    {"Chorus", "Bridge", "Pre-Chorus", "Intro", "Outro", "Tag", "Interlude"}
)


# ---------------------------------------------------------------------------
# LineType
# ---------------------------------------------------------------------------


class LineType(Enum):
    METADATA = auto()  # {title: ...}, {key: G}
    SECTION_START = auto()  # {start_of_chorus}, {verse: 2}
    SECTION_END = auto()  # {end_of_verse}, {eoc}
    DIRECTIVE = auto()  # any other line made of a single {...}
    COMMENT = auto()  # "# ..."
    BLANK = auto()  # empty or whitespace only
    CONTENT = auto()  # lyrics, with or without [Chord] markers


def classify_line(line: str) -> LineType:
    """Classify a single line of ChordPro text.

    Directives are checked in the fixed order metadata → section start →
    section end, so a line only ever lands in one category.
    """
    if METADATA_RE.search(line):
        return LineType.METADATA
    if SECTION_START_RE.search(line):
        return LineType.SECTION_START
    if SECTION_END_RE.search(line):
        return LineType.SECTION_END
    stripped = line.strip()
    if not stripped:
        return LineType.BLANK
    if line.startswith("#"):
        return LineType.COMMENT
    if DIRECTIVE_ONLY_RE.match(stripped):
        return LineType.DIRECTIVE
    return LineType.CONTENT


# ---------------------------------------------------------------------------
# Line helpers
# ---------------------------------------------------------------------------


def parse_metadata_directive(line: str) -> dict[str, str]:
    """Return the metadata delta for a METADATA line.

    A title also sets the display name.
    """
    m = METADATA_RE.search(line)
    if not m:
        return {}
    name = METADATA_FIELDS[m.group(1).lower()]
    value = m.group(2).strip()
    if name == "title":
        return {"title": value, "name": value}
    return {name: value}


def parse_section_directive(line: str) -> tuple[str, str | None]:
    """Return ``(label, explicit_number)`` for a SECTION_START line."""
    m = SECTION_START_RE.search(line)
    if not m:
        raise ValueError(f"Not a section directive: {line!r}")
    return SECTION_NAMES[m.group(1).lower()], m.group(2)


def extract_chords(line: str) -> SlideLine:
    """Strip ``[Chord]`` markers from *line* and anchor each chord to its offset.

    Each chord's ``pos`` is the length of the plain text that precedes it,
    i.e. the index of the character the chord sits on.  Surrounding
    whitespace is kept as-is.

    Example::

        extract_chords("Amazing [G]grace")
        # SlideLine(text="Amazing grace", chords=[Chord(pos=8, key="G")])
    """
    parts: list[str] = []
    chords: list[Chord] = []
    length = 0
    last = 0

    for m in CHORD_MARKER_RE.finditer(line):
        before = line[last:m.start()]
        parts.append(before)
        length += len(before)
        chords.append(Chord(pos=length, key=m.group(1)))
        last = m.end()

    parts.append(line[last:])
    return SlideLine(text="".join(parts), chords=chords)


# ---------------------------------------------------------------------------
# Parser
# ---------------------------------------------------------------------------


class ChordProParser:
    """Turn ChordPro text into metadata deltas plus an ordered list of slides."""

    def parse(self, text: str) -> ParseResult:
        """Parse *text* from scratch.

        Algorithm
        ---------
        1. Metadata directives are collected as deltas; they never open or
           close a section.
        2. A section start closes the open section and opens a new one.  Verse
           labels are numbered from an explicit ``{verse: N}`` or from a
           per-label counter local to this call.
        3. A section end closes the open section.
        4. A content line opens an implicit numbered verse if no section is
           open, and is added to the open section.
        5. A blank line closes the open section once it holds any lines.
        6. Comments and unknown ``{...}`` lines are dropped.

        A section only becomes a slide if at least one of its lines has text
        or chords.
        """
        result = ParseResult()
        counters: dict[str, int] = {}
        label: str | None = None
        buffer: list[SlideLine] = []

        def next_number(name: str) -> str:
            counters[name] = counters.get(name, 0) + 1
            return str(counters[name])

        def finalize() -> None:
            if label is None or not buffer:
                return
            lines = [line for line in buffer if not line.is_empty]
            if lines:
                result.slides.append(Slide(group=label, lines=lines))
                logger.debug("Slide %r with %d line(s)", label, len(lines))
            buffer.clear()

        for line in text.splitlines():
            lt = classify_line(line)

            if lt == LineType.METADATA:
                result.metadata.update(parse_metadata_directive(line))
                continue

            if lt == LineType.SECTION_START:
                finalize()
                name, number = parse_section_directive(line)
                if name in UNNUMBERED_SECTIONS:
                    label = name
                else:
                    label = f"{name} {number or next_number(name)}"
                continue

            if lt == LineType.SECTION_END:
                finalize()
                label = None
                continue

            if lt == LineType.BLANK:
                if buffer:
                    finalize()
                    label = None
                continue

            if lt in (LineType.COMMENT, LineType.DIRECTIVE):
                continue

            # LineType.CONTENT
            if label is None:
                label = f"Verse {next_number('Verse')}"
            buffer.append(extract_chords(line))

        finalize()
        logger.debug(
            "Parsed %d slide(s), %d metadata field(s)", len(result.slides), len(result.metadata)
        )
        return result


def parse_chordpro(text: str) -> ParseResult:
    """Shortcut for ``ChordProParser().parse(text)``."""
    return ChordProParser().parse(text)


def parse_song(text: str, metadata: Metadata | None = None) -> Song:
    """Parse *text* into a :class:`~chordslides.models.Song`.

    Directives found in the text are merged over a copy of *metadata*; the
    caller's instance is left untouched.
    """
    result = parse_chordpro(text)
    merged = metadata.copy() if metadata else Metadata()
    merged.update(result.metadata)
    return Song(text=text, metadata=merged, slides=result.slides)
