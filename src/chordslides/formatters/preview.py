"""Plain-text slide preview with chords printed above the lyrics.

Example::

    [Verse 1]
            G          C
    Amazing grace, how sweet the sound
"""

from ..models import Song, SlideLine
from .base import Formatter


def render_chord_row(line: SlideLine) -> str:
    """Return a row with each chord symbol placed above its ``pos``.

    When chords sit closer together than their symbols are wide, later
    symbols are pushed right so that at least one space separates them.
    """
    row = ""
    for chord in line.chords:
        gap = chord.pos - len(row)
        if row and gap < 1:
            gap = 1
        row += " " * max(gap, 0) + chord.key
    return row


class PreviewFormatter(Formatter):
    """Render a :class:`~chordslides.models.Song` as readable slide text."""

    name = "preview"
    extension = ".txt"

    def __init__(self, show_chords: bool = True):
        self.show_chords = show_chords

    @classmethod
    def from_options(cls, **options) -> "PreviewFormatter":
        return cls(show_chords=options.get("show_chords", True))

    def render(self, song: Song) -> str:
        blocks: list[str] = []
        for slide in song.slides:
            rows = [f"[{slide.group}]"]
            for line in slide.lines:
                if self.show_chords and line.chords:
                    rows.append(render_chord_row(line))
                rows.append(line.text)
            blocks.append("\n".join(rows))
        if not blocks:
            return ""
        return "\n\n".join(blocks) + "\n"
