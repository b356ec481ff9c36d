from __future__ import annotations
from pathlib import Path
from typing import Iterable, Optional, Tuple
import logging
import random
import threading

logger = logging.getLogger(__name__)

# Top-level data/ of the checkout; not shipped in a regular install
DATA_PATH = Path(__file__).resolve().parents[3] / "data"
DEFAULT_STAR_NAMES_PATH = DATA_PATH / "namelists" / "star_names.txt"


class NameTableError(Exception):
    """Raised when the name list cannot be loaded or holds no names."""
    pass


class NameTable:
    """
    Read-only list of names, either given up front or read lazily from a
    newline-separated text file on first access. The first load is guarded by
    a lock so concurrent callers see a single, fully loaded table.
    """

    def __init__(self, path: Optional[Path] = None, names: Optional[Iterable[str]] = None):
        if path is None and names is None:
            raise ValueError("NameTable needs either a path or a list of names.")
        self._path = Path(path) if path is not None else None
        self._lock = threading.Lock()
        self._names: Optional[Tuple[str, ...]] = None
        if names is not None:
            self._names = self._clean(names, source="<list>")

    @staticmethod
    def _clean(lines: Iterable[str], source: str) -> Tuple[str, ...]:
        names = tuple(line.strip() for line in lines if line.strip())
        if not names:
            raise NameTableError(f"Name list '{source}' contains no names.")
        return names

    def _load(self) -> Tuple[str, ...]:
        try:
            text = self._path.read_text(encoding="utf-8")
        except OSError as e:
            raise NameTableError(f"Could not read name list '{self._path}': {e}") from e
        names = self._clean(text.splitlines(), source=str(self._path))
        logger.info("Loaded %d names from %s", len(names), self._path)
        return names

    @property
    def names(self) -> Tuple[str, ...]:
        if self._names is None:
            with self._lock:
                if self._names is None:
                    self._names = self._load()
        return self._names

    def __len__(self) -> int:
        return len(self.names)

    def choice(self, rng: random.Random) -> str:
        """Picks one name uniformly. The same name may be handed out more than once."""
        return rng.choice(self.names)


_default_table: Optional[NameTable] = None
_default_table_lock = threading.Lock()


def default_name_table() -> NameTable:
    """Returns the process-wide star name table, created on first use."""
    global _default_table
    if _default_table is None:
        with _default_table_lock:
            if _default_table is None:
                _default_table = NameTable(path=DEFAULT_STAR_NAMES_PATH)
    return _default_table
