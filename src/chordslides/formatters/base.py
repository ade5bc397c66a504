import re
from abc import ABC, abstractmethod

from ..models import Metadata, Song


def slugify(text: str) -> str:
    """Convert a string to a lowercase hyphenated slug suitable for filenames."""
    text = text.lower()
    text = re.sub(r"[^\w\s-]", "", text)   # drop punctuation
    text = re.sub(r"[\s_]+", "-", text)     # spaces/underscores → hyphens
    text = re.sub(r"-{2,}", "-", text)      # collapse multiple hyphens
    return text.strip("-")


class Formatter(ABC):
    """Abstract base class for all output formats."""

    name: str
    extension: str

    @classmethod
    def can_handle(cls, name: str) -> bool:
        """Return True if this formatter produces the named format."""
        return name.lower() == cls.name

    @classmethod
    def from_options(cls, **options) -> "Formatter":
        """Build a formatter from CLI options, ignoring the ones it has no use for."""
        return cls()

    @abstractmethod
    def render(self, song: Song) -> str:
        """Return the file contents for *song*."""

    def stem(self, metadata: Metadata) -> str:
        """Preferred base name for the output file, before slugifying."""
        return metadata.title or metadata.name

    def filename(self, metadata: Metadata) -> str:
        """Suggested file name, derived from the song's metadata."""
        return f"{slugify(self.stem(metadata)) or 'song'}{self.extension}"
