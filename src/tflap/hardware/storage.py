"""File-backed high score persistence."""

import logging
from pathlib import Path

from tflap.hardware.base import HighScoreStore

logger = logging.getLogger(__name__)


class FileHighScoreStore(HighScoreStore):
    """
    Keeps the high score as a decimal integer in a plain text file.

    A path of None disables persistence: loads return 0 and saves are
    ignored.
    """

    def __init__(self, path: Path | None) -> None:
        self.path = path

    def load(self) -> int:
        if self.path is None:
            return 0

        try:
            content = self.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.debug(f"No high score loaded from {self.path}: {e}")
            return 0

        content = content.strip()
        if not content.isascii() or not content.isdigit():
            logger.debug(f"Ignoring malformed high score in {self.path}: {content!r}")
            return 0

        try:
            return int(content)
        except ValueError as e:
            # Past the interpreter's integer string limit
            logger.debug(f"Ignoring oversized high score in {self.path}: {e}")
            return 0

    def save(self, value: int) -> None:
        if self.path is None:
            return

        try:
            self.path.write_text(str(value), encoding="utf-8")
        except OSError as e:
            logger.debug(f"Failed to save high score to {self.path}: {e}")
            return

        logger.info(f"Saved high score {value} to {self.path}")
