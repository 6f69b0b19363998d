# storage.py
# Key/value persistence for favorites + stats (the app's "local storage").

from __future__ import annotations

import json
import logging
import os
import random
import tempfile
import threading
from pathlib import Path
from typing import Any, Dict, List, Optional, Protocol

from roaster import InsultGenerator, Stats

logger = logging.getLogger(__name__)

# -----------------------------
# CONFIG
# -----------------------------
DATA_DIR = Path(__file__).parent / "data"
STATE_PATH = DATA_DIR / "roaster_state.json"

FAVORITES_KEY = "favorites"
STATS_KEY = "stats"

# one lock for every JsonFileStore: sessions build their own store on the same file
_WRITE_LOCK = threading.Lock()


# -----------------------------
# STORES
# -----------------------------
class KeyValueStore(Protocol):
    def load(self, key: str) -> Optional[str]: ...

    def save(self, key: str, value: str) -> None: ...


class MemoryStore:
    """Dict-backed store. Used by tests."""

    def __init__(self, initial: Optional[Dict[str, str]] = None) -> None:
        self.data: Dict[str, str] = dict(initial or {})

    def load(self, key: str) -> Optional[str]:
        return self.data.get(key)

    def save(self, key: str, value: str) -> None:
        self.data[key] = value


class JsonFileStore:
    """
    All keys live in one JSON object on disk. Values are kept as JSON text,
    the same way a browser's localStorage holds them.
    """

    def __init__(self, path: Path = STATE_PATH) -> None:
        self.path = Path(path)

    def _read_all(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as exc:
            logger.warning("Ignoring unreadable state file %s: %s", self.path, exc)
            return {}
        if not isinstance(raw, dict):
            logger.warning("Ignoring state file %s: expected an object", self.path)
            return {}
        return {str(k): v for k, v in raw.items() if isinstance(v, str)}

    def load(self, key: str) -> Optional[str]:
        return self._read_all().get(key)

    def save(self, key: str, value: str) -> None:
        # Streamlit runs each browser session in its own thread
        with _WRITE_LOCK:
            payload = self._read_all()
            payload[key] = value
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self.path.parent,
                prefix=self.path.stem + ".",
                suffix=".tmp",
                delete=False,
            ) as fh:
                fh.write(json.dumps(payload, ensure_ascii=False, indent=2))
                tmp = fh.name
            try:
                os.replace(tmp, self.path)
            except OSError:
                os.unlink(tmp)
                raise
        logger.debug("Wrote %s to %s", key, self.path)


# -----------------------------
# LOAD / PERSIST
# -----------------------------
def _load_json(store: KeyValueStore, key: str) -> Any:
    text = store.load(key)
    if text is None:
        return None
    try:
        return json.loads(text)
    except (TypeError, json.JSONDecodeError):
        logger.warning("Stored %r is not valid JSON; using defaults", key)
        return None


def load_favorites(store: KeyValueStore) -> List[str]:
    raw = _load_json(store, FAVORITES_KEY)
    if not isinstance(raw, list):
        return []
    return [x for x in raw if isinstance(x, str)]


def load_stats(store: KeyValueStore) -> Stats:
    return Stats.from_dict(_load_json(store, STATS_KEY))


def persist(store: KeyValueStore, generator: InsultGenerator) -> None:
    store.save(FAVORITES_KEY, json.dumps(generator.favorites, ensure_ascii=False))
    store.save(STATS_KEY, json.dumps(generator.stats.to_dict()))


def hydrate(store: KeyValueStore, rng: Any = random) -> InsultGenerator:
    """Build a generator from stored state and write back on every change."""
    generator = InsultGenerator(
        favorites=load_favorites(store),
        stats=load_stats(store),
        rng=rng,
    )
    generator.subscribe(lambda g: persist(store, g))
    return generator
