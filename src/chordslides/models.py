import uuid
from dataclasses import dataclass, field, fields, replace


def _chord_id() -> str:
    return uuid.uuid4().hex[:8]


@dataclass
class Metadata:
    """Descriptive song attributes.  Unset fields are empty strings, never None."""

    name: str = ""  # display name, also set by a title directive
    number: str = ""
    title: str = ""
    artist: str = ""
    author: str = ""
    composer: str = ""
    publisher: str = ""
    copyright: str = ""
    ccli: str = ""
    year: str = ""
    key: str = ""
    bpm: str = ""
    notes: str = ""

    def update(self, deltas: dict[str, str]) -> None:
        """Merge *deltas* (field name → value) into this instance.

        Names that are not metadata fields are ignored.
        """
        known = {f.name for f in fields(self)}
        for name, value in deltas.items():
            if name in known:
                setattr(self, name, value)

    def copy(self) -> "Metadata":
        return replace(self)


@dataclass
class Chord:
    """A chord symbol anchored at an offset into its line's plain text."""

    pos: int
    key: str  # chord symbol, e.g. "Am7"
    id: str = field(default_factory=_chord_id)

    def to_dict(self) -> dict:
        return {"id": self.id, "pos": self.pos, "key": self.key}


@dataclass
class SlideLine:
    """Display text with chord markers removed, plus the chords that sat on it."""

    text: str
    chords: list[Chord] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.text.strip() and not self.chords


@dataclass
class Slide:
    """A labelled group of lines: "Verse 1", "Chorus", ..."""

    group: str
    lines: list[SlideLine] = field(default_factory=list)

    @property
    def section_type(self) -> str:
        return self.group.split(" ")[0]


@dataclass
class ParseResult:
    """What one parse produces: metadata deltas found in directives, and the slides."""

    metadata: dict[str, str] = field(default_factory=dict)
    slides: list[Slide] = field(default_factory=list)


@dataclass
class Song:
    """Raw ChordPro text together with its metadata and parsed slides."""

    text: str
    metadata: Metadata = field(default_factory=Metadata)
    slides: list[Slide] = field(default_factory=list)

