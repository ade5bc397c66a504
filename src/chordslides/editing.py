"""Text edits the song editor applies to raw ChordPro text."""

from .exceptions import EmptySelectionError, UnknownSectionError

SECTION_TAGS = ("verse", "chorus", "bridge", "prechorus", "intro", "outro", "tag", "interlude")


def wrap_selection(text: str, start: int, end: int, tag: str) -> tuple[str, int]:
    """Wrap ``text[start:end]`` in ``{start_of_<tag>}`` / ``{end_of_<tag>}`` directives.

    Returns the new text and the cursor offset just past the wrapped block.

    Raises EmptySelectionError if the selection is empty, and
    UnknownSectionError if *tag* is not one of :data:`SECTION_TAGS`.
    """
    if tag not in SECTION_TAGS:
        raise UnknownSectionError(tag)
    selected = text[start:end]
    if not selected:
        raise EmptySelectionError()

    wrapped = f"{{start_of_{tag}}}\n{selected}\n{{end_of_{tag}}}"
    return text[:start] + wrapped + text[end:], start + len(wrapped)
