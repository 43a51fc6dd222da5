# core/cache.py
import threading
from typing import Any, Callable, Dict, List, Optional


class RouteCache:
    """
    Append-only key -> value store scoped to one batch.
    Safe for concurrent readers/writers; on a key collision the last write wins,
    which is fine because values for the same key are computed identically.
    """

    def __init__(self):
        self._store: Dict[str, Any] = {}
        self._lock = threading.Lock()

    def get(self, key: str) -> Optional[Any]:
        with self._lock:
            return self._store.get(key)

    def set(self, key: str, val: Any) -> None:
        with self._lock:
            self._store[key] = val

    def get_or_set(self, key: str, creator: Callable[[], Any]) -> Any:
        hit = self.get(key)
        if hit is not None:
            return hit
        # creator runs outside the lock; it may do network I/O
        val = creator()
        self.set(key, val)
        return val

    def clear(self) -> None:
        with self._lock:
            self._store.clear()

    def stats(self) -> Dict[str, Any]:
        with self._lock:
            keys: List[str] = list(self._store.keys())
        return {"size": len(keys), "keys": keys}

    def __len__(self) -> int:
        with self._lock:
            return len(self._store)

    def __contains__(self, key: str) -> bool:
        with self._lock:
            return key in self._store
