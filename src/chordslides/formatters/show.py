"""Show-document export.

Builds the JSON document a presentation tool imports as a ``.show`` file:
one slide entry per :class:`~chordslides.models.Slide`, and a single
"Default" layout that lists the slides in song order.

Section colours
---------------

+----------------+-------------+
| Section type   | Colour      |
+================+=============+
| ``Verse``      | ``#5825f5`` |
| ``Chorus``     | ``#f5258a`` |
| ``Bridge``     | ``#25f58a`` |
| ``Pre-Chorus`` | ``#f58a25`` |
| ``Intro``      | ``#258af5`` |
| ``Outro``      | ``#8a25f5`` |
| ``Tag``        | ``#f5d825`` |
| ``Interlude``  | ``#25f5d8`` |
| anything else  | ``#5825f5`` |
+----------------+-------------+
"""

import json
import logging
import secrets
import string
import time
from typing import Callable

from ..models import Metadata, Slide, SlideLine, Song
from .base import Formatter

logger = logging.getLogger(__name__)

SECTION_COLORS = {
    "Verse": "#5825f5",
    "Chorus": "#f5258a",
    "Bridge": "#25f58a",
    "Pre-Chorus": "#f58a25",
    "Intro": "#258af5",
    "Outro": "#8a25f5",
    "Tag": "#f5d825",
    "Interlude": "#25f5d8",
}
DEFAULT_COLOR = "#5825f5"

FALLBACK_NAME = "Untitled"
RESOLUTION = {"width": 1920, "height": 1080}
ITEM_STYLE = "top:120px;left:50px;height:840px;width:1820px;"
ITEM_ALIGN = "align-items:center;"
LINE_ALIGN = "text-align:center;"
TEXT_STYLE = "font-size:100px;"

_ID_ALPHABET = string.ascii_lowercase + string.digits


class IdGenerator:
    """Hands out ``<prefix>_<9 chars>`` identifiers, never the same one twice."""

    def __init__(self, length: int = 9):
        self.length = length
        self._issued: set[str] = set()

    def __call__(self, prefix: str) -> str:
        while True:
            suffix = "".join(secrets.choice(_ID_ALPHABET) for _ in range(self.length))
            ident = f"{prefix}_{suffix}"
            if ident not in self._issued:
                self._issued.add(ident)
                return ident


def _now_ms() -> int:
    return int(time.time() * 1000)


def _render_line(line: SlideLine) -> dict:
    return {
        "align": LINE_ALIGN,
        "text": [{"value": line.text, "style": TEXT_STYLE}],
        "chords": [chord.to_dict() for chord in line.chords],
    }


def _render_slide(slide: Slide) -> dict:
    section_type = slide.section_type
    return {
        "group": slide.group,
        "color": SECTION_COLORS.get(section_type, DEFAULT_COLOR),
        "settings": {"resolution": dict(RESOLUTION)},
        "notes": "",
        "items": [
            {
                "type": "text",
                "lines": [_render_line(line) for line in slide.lines],
                "style": ITEM_STYLE,
                "align": ITEM_ALIGN,
                "auto": False,
                "chords": {"enabled": False},
            }
        ],
        "globalGroup": section_type.lower(),
    }


class ShowFormatter(Formatter):
    """Render a :class:`~chordslides.models.Song` to a ``.show`` JSON document."""

    name = "show"
    extension = ".show"

    def __init__(self, clock: Callable[[], int] = _now_ms):
        self.clock = clock

    def build(self, metadata: Metadata, slides: list[Slide]) -> dict:
        """Return the show document for *slides* as a plain dict."""
        new_id = IdGenerator()
        timestamp = self.clock()
        layout_id = new_id("layout")

        slide_entries: dict[str, dict] = {}
        for slide in slides:
            slide_entries[new_id("slide")] = _render_slide(slide)

        logger.debug("Built show document with %d slide(s)", len(slide_entries))
        return {
            "name": metadata.name or metadata.title or FALLBACK_NAME,
            "category": None,
            "settings": {"activeLayout": layout_id, "template": None},
            "timestamps": {"created": timestamp, "modified": timestamp, "used": None},
            "meta": {
                "number": metadata.number,
                "title": metadata.title,
                "artist": metadata.artist,
                "author": metadata.author,
                "composer": metadata.composer,
                "publisher": metadata.publisher,
                "copyright": metadata.copyright,
                "CCLI": metadata.ccli,
                "year": metadata.year,
                "key": metadata.key,
            },
            "slides": slide_entries,
            "layouts": {
                layout_id: {
                    "name": "Default",
                    "notes": metadata.notes,
                    "slides": [{"id": slide_id} for slide_id in slide_entries],
                }
            },
            "media": {},
        }

    def render(self, song: Song) -> str:
        return json.dumps(self.build(song.metadata, song.slides), indent=2, ensure_ascii=False)

    def stem(self, metadata: Metadata) -> str:
        return metadata.name or metadata.title


def to_show_document(metadata: Metadata, slides: list[Slide]) -> dict:
    """Shortcut for ``ShowFormatter().build(metadata, slides)``."""
    return ShowFormatter().build(metadata, slides)
