class ChordSlidesError(Exception):
    """Base exception for chordslides."""


class UnsupportedFileError(ChordSlidesError):
    """Raised when a source file does not have a ChordPro-like extension."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Unsupported file type: {path}")


class UnsupportedFormatError(ChordSlidesError):
    """Raised when no formatter matches the requested output format."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"No formatter found for format: {name}")


class EmptySelectionError(ChordSlidesError):
    """Raised when a section tag is applied to an empty selection."""

    def __init__(self):
        super().__init__("Please select some text first")


class UnknownSectionError(ChordSlidesError, ValueError):
    """Raised when a section tag is not one the editor offers."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Unknown section tag: {tag}")
