"""File-based storage for the quote-of-the-day rotation."""

import json
import logging
from pathlib import Path

from cadence.core.picker import QUOTE_WINDOW, QuoteRotation

logger = logging.getLogger(__name__)


class FileRotationStore:
    """Persists QuoteRotation state between runs as a small JSON file."""

    def __init__(self, path: Path | str, window_size: int = QUOTE_WINDOW):
        self.path = Path(path).expanduser()
        self.window_size = window_size

    def load(self) -> QuoteRotation:
        """Load rotation state, starting fresh if the file is missing or unreadable."""
        if not self.path.exists():
            return QuoteRotation(window_size=self.window_size)
        try:
            return QuoteRotation.from_dict(json.loads(self.path.read_text()), self.window_size)
        except (json.JSONDecodeError, ValueError, TypeError, AttributeError) as e:
            logger.warning(f"Resetting unreadable quote state {self.path}: {e}")
            return QuoteRotation(window_size=self.window_size)

    def save(self, rotation: QuoteRotation) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(rotation.to_dict()))
