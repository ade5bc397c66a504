"""Remembers the last song, metadata and UI language between runs.

State is kept in a small JSON file::

    {"language": "en", "metadata": {"title": "...", ...}, "text": "..."}
"""

import json
import logging
from dataclasses import asdict, dataclass, field
from pathlib import Path

from .models import Metadata

logger = logging.getLogger(__name__)

LANGUAGES = ("en", "fr")


@dataclass
class SessionState:
    language: str = "en"
    metadata: Metadata = field(default_factory=Metadata)
    text: str = ""


class SessionStore:
    """JSON-file backed :class:`SessionState`."""

    def __init__(self, path: str | Path):
        self.path = Path(path)

    def load(self) -> SessionState:
        """Return the saved state, or defaults if there is nothing usable on disk."""
        if not self.path.exists():
            return SessionState()
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, ValueError) as exc:
            logger.warning("Ignoring unreadable session file %s: %s", self.path, exc)
            return SessionState()
        if not isinstance(data, dict):
            logger.warning("Ignoring malformed session file %s", self.path)
            return SessionState()

        language = data.get("language")
        metadata = Metadata()
        if isinstance(data.get("metadata"), dict):
            metadata.update({k: str(v) for k, v in data["metadata"].items() if v is not None})
        text = data.get("text")
        return SessionState(
            language=language if language in LANGUAGES else "en",
            metadata=metadata,
            text=text if isinstance(text, str) else "",
        )

    def save(self, state: SessionState) -> None:
        payload = {
            "language": state.language,
            "metadata": asdict(state.metadata),
            "text": state.text,
        }
        self.path.write_text(json.dumps(payload, indent=2, ensure_ascii=False), encoding="utf-8")
        logger.debug("Saved session to %s", self.path)
