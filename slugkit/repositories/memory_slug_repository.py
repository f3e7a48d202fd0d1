# slugkit/repositories/memory_slug_repository.py
import threading
from typing import Any, Dict, Optional, Tuple


class InMemorySlugRepository:
    """Local / test store: {(table, column): {slug: key}}."""

    def __init__(self):
        self._rows: Dict[Tuple[str, str], Dict[str, Any]] = {}
        self._lock = threading.Lock()

    def add(self, table: str, column: str, slug: str, key: Any = None) -> None:
        with self._lock:
            self._rows.setdefault((table, column), {})[slug] = key

    def remove(self, table: str, column: str, slug: str) -> None:
        with self._lock:
            self._rows.get((table, column), {}).pop(slug, None)

    def exists(
        self,
        table: str,
        column: str,
        candidate: str,
        exclude_key: Optional[Any] = None,
    ) -> bool:
        with self._lock:
            col = self._rows.get((table, column), {})
            if candidate not in col:
                return False
            if exclude_key is None:
                return True
            return str(col[candidate]) != str(exclude_key)
