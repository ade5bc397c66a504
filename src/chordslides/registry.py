from .exceptions import UnsupportedFormatError
from .formatters.base import Formatter
from .formatters.chordpro import ChordProFormatter
from .formatters.preview import PreviewFormatter
from .formatters.show import ShowFormatter

_FORMATTERS: list[type[Formatter]] = [
    ShowFormatter,
    ChordProFormatter,
    PreviewFormatter,
]

FORMAT_NAMES = [cls.name for cls in _FORMATTERS]


def get_formatter(name: str, **options) -> Formatter:
    """Return an instantiated formatter for the named output format.

    Each formatter picks the options it understands
    (``show_chords`` for the preview).

    Raises UnsupportedFormatError if no formatter matches.
    """
    for cls in _FORMATTERS:
        if cls.can_handle(name):
            return cls.from_options(**options)
    raise UnsupportedFormatError(name)
