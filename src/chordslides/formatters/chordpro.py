"""ChordPro export.

The exported file is the song's metadata written as directives, a blank
line, and then the original text unchanged.  Slides are not re-serialized:
chord markers and section directives already in the text are kept as typed.

Metadata field → directive
--------------------------

+---------------+----------------------+
| Field         | Directive            |
+===============+======================+
| ``title``     | ``{title: ...}``     |
| ``artist``    | ``{artist: ...}``    |
| ``author``    | ``{author: ...}``    |
| ``composer``  | ``{composer: ...}``  |
| ``copyright`` | ``{copyright: ...}`` |
| ``ccli``      | ``{ccli: ...}``      |
| ``year``      | ``{year: ...}``      |
| ``key``       | ``{key: ...}``       |
| ``bpm``       | ``{tempo: ...}``     |
| ``notes``     | ``{comment: ...}``   |
+---------------+----------------------+

Empty fields are left out.

Usage::

    from chordslides.formatters.chordpro import ChordProFormatter
    formatter = ChordProFormatter()
    text = formatter.render(song)
    Path(formatter.filename(song.metadata)).write_text(text)
"""

import logging

from ..models import Metadata, Song
from .base import Formatter

logger = logging.getLogger(__name__)

# (Metadata field, directive keyword), in output order
_DIRECTIVES = [
    ("title", "title"),
    ("artist", "artist"),
    ("author", "author"),
    ("composer", "composer"),
    ("copyright", "copyright"),
    ("ccli", "ccli"),
    ("year", "year"),
    ("key", "key"),
    ("bpm", "tempo"),
    ("notes", "comment"),
]


def to_chordpro(metadata: Metadata, text: str) -> str:
    """Return metadata directives followed by *text* verbatim."""
    parts = [
        f"{{{directive}: {getattr(metadata, field)}}}\n"
        for field, directive in _DIRECTIVES
        if getattr(metadata, field)
    ]
    if parts:
        parts.append("\n")
    logger.debug("Writing %d metadata directive(s)", max(len(parts) - 1, 0))
    return "".join(parts) + text


class ChordProFormatter(Formatter):
    """Render a :class:`~chordslides.models.Song` to a ``.chordpro`` file."""

    name = "chordpro"
    extension = ".chordpro"

    def render(self, song: Song) -> str:
        return to_chordpro(song.metadata, song.text)
