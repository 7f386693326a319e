from pathlib import Path
from typing import Iterator
import logging

from rental_tracker.config import Settings, settings as default_settings
from rental_tracker.utils.exceptions import PersistenceException, MalformedRecordException

logger = logging.getLogger(__name__)


# ─── Append-only Log File ──────────────────────────────────────────────────────
class LogFile:
    """
    One entity type's on-disk log: a UTF-8 text file of delimited lines.

    Every append opens, writes and closes the file. Nothing is ever
    rewritten or compacted. OSError is wrapped in PersistenceException so
    callers only deal with the application's own exception taxonomy.
    """

    def __init__(self, path: Path, encoding: str = "utf-8"):
        self.path     = Path(path)
        self.encoding = encoding

    def exists(self) -> bool:
        return self.path.is_file()

    def append(self, line: str) -> None:
        try:
            with open(self.path, "a", encoding=self.encoding, newline="\n") as fh:
                fh.write(line + "\n")
        except OSError as e:
            raise PersistenceException(f"Error saving to {self.path}: {e}") from e

    def read_lines(self) -> Iterator[tuple[int, bytes]]:
        """
        Yield (line number, raw line) pairs. A missing file yields nothing.

        Lines stay undecoded here so one bad byte only costs its own line;
        see decode().
        """
        if not self.exists():
            return
        try:
            with open(self.path, "rb") as fh:
                lines = fh.read().splitlines()
        except OSError as e:
            raise PersistenceException(f"Error loading {self.path}: {e}") from e

        for lineno, raw in enumerate(lines, start=1):
            yield lineno, raw

    def decode(self, raw: bytes) -> str:
        try:
            return raw.decode(self.encoding)
        except UnicodeDecodeError as e:
            raise MalformedRecordException(f"not valid {self.encoding}: {e.reason}") from e

    def __repr__(self):
        return f"<LogFile path={self.path}>"


# ─── Health Check ──────────────────────────────────────────────────────────────
def check_data_dir(config: Settings | None = None) -> bool:
    """Verify the data directory exists and is writable. Used at startup."""
    config = config or default_settings
    data_dir = Path(config.DATA_DIR)
    if not data_dir.is_dir():
        logger.error(f"Data directory {data_dir} does not exist")
        return False
    probe = data_dir / ".write_check"
    try:
        probe.touch()
        probe.unlink()
        return True
    except OSError as e:
        logger.error(f"Data directory {data_dir} is not writable: {e}")
        return False
