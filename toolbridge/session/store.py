"""Key-value stores for session data.

Two backends are provided: an in-memory dict for a single process and a
JSON file that survives restarts.
"""

import json
import logging
from pathlib import Path
from typing import Any, Protocol

from toolbridge.config import Settings

logger = logging.getLogger(__name__)


class SessionStore(Protocol):
    """Minimal get/set/delete storage contract."""

    def get(self, key: str) -> Any | None: ...

    def set(self, key: str, value: Any) -> None: ...

    def delete(self, key: str) -> None: ...


class MemorySessionStore:
    """Process-local store."""

    def __init__(self):
        self._data: dict[str, Any] = {}

    def get(self, key: str) -> Any | None:
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value

    def delete(self, key: str) -> None:
        self._data.pop(key, None)


class JsonFileSessionStore:
    """Store persisted as a single JSON document on disk."""

    def __init__(self, path: Path):
        self.path = Path(path)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self._data: dict[str, Any] = {}
        self._load()

    def _load(self):
        """Load stored values from disk."""
        if not self.path.exists():
            return
        try:
            with open(self.path) as f:
                data = json.load(f)
            if isinstance(data, dict):
                self._data = data
            else:
                logger.warning(f"Ignoring session file with unexpected content: {self.path}")
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Failed to load session file {self.path}: {e}")

    def _save(self):
        """Write stored values to disk."""
        with open(self.path, "w") as f:
            json.dump(self._data, f, indent=2)

    def get(self, key: str) -> Any | None:
        return self._data.get(key)

    def set(self, key: str, value: Any) -> None:
        self._data[key] = value
        self._save()

    def delete(self, key: str) -> None:
        if self._data.pop(key, None) is not None:
            self._save()


def create_session_store(settings: Settings) -> SessionStore:
    """Build the store selected by ``session_backend``."""
    backend = settings.session_backend.lower()
    if backend == "memory":
        return MemorySessionStore()
    if backend == "file":
        return JsonFileSessionStore(Path(settings.session_path))
    raise ValueError(
        f"Unknown session backend '{settings.session_backend}'. Use 'memory' or 'file'."
    )
