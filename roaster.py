# roaster.py
# Phrase generation, usage stats and the generator state machine.
# No Streamlit here: app.py drives it, storage.py persists it.

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Callable, Iterable, List, Optional, Tuple

# -----------------------------
# DATA
# -----------------------------
ADJECTIVES: Tuple[str, ...] = (
    "Rusty",
    "Jammed-up",
    "Overclocked",
    "Scrapheap",
    "Grease-soaked",
    "Wobbly",
    "Faulty",
    "Oil-leaking",
    "Sparking",
    "Misfiring",
    "Cheaply-built",
    "Clogged",
)

NOUNS: Tuple[str, ...] = (
    "Gear grinder",
    "Circuit-sniffer",
    "Wireback",
    "Servo-brain",
    "Bolt muncher",
    "Oil slurper",
    "Scrap pile",
    "Toaster",
    "Tin can",
    "Metalhead",
    "Clank-stack",
    "Fuse-blower",
)

PLACEHOLDER = "Click below to roast a clanker!"
BATCH_READY = "Batch of insults ready!"
BATCH_SIZE = 10


# -----------------------------
# GENERATION
# -----------------------------
def generate_one(rng: Any = random) -> str:
    """One adjective + one noun, each drawn uniformly and independently."""
    return f"{rng.choice(ADJECTIVES)} {rng.choice(NOUNS)}!"


def generate_batch(n: int = BATCH_SIZE, rng: Any = random) -> List[str]:
    return [generate_one(rng) for _ in range(n)]


# -----------------------------
# STATS
# -----------------------------
def _count(value: object) -> int:
    # bool is an int subclass; a stored true/false is not a count
    if isinstance(value, bool) or not isinstance(value, int):
        return 0
    return max(value, 0)


@dataclass
class Stats:
    generated: int = 0
    saved: int = 0
    streak: int = 0
    best_streak: int = 0

    def record_generated(self, amount: int = 1) -> None:
        self.generated += amount
        self.streak += amount
        if self.streak > self.best_streak:
            self.best_streak = self.streak

    def record_saved(self, amount: int = 1) -> None:
        self.saved += amount

    def reset_streak(self) -> None:
        self.streak = 0

    def to_dict(self) -> dict:
        return {
            "generated": self.generated,
            "saved": self.saved,
            "streak": self.streak,
            "bestStreak": self.best_streak,
        }

    @classmethod
    def from_dict(cls, obj: object) -> "Stats":
        """Best-effort rebuild from a stored dict; bad fields fall back to 0."""
        if not isinstance(obj, dict):
            return cls()
        stats = cls(
            generated=_count(obj.get("generated")),
            saved=_count(obj.get("saved")),
            streak=_count(obj.get("streak")),
            best_streak=_count(obj.get("bestStreak")),
        )
        stats.best_streak = max(stats.best_streak, stats.streak)
        return stats


# -----------------------------
# GENERATOR STATE
# -----------------------------
Observer = Callable[["InsultGenerator"], None]


def _clean_favorites(items: Iterable[str]) -> List[str]:
    seen = set()
    out: List[str] = []
    for x in items:
        if x and x != PLACEHOLDER and x not in seen:
            out.append(x)
            seen.add(x)
    return out


class InsultGenerator:
    """
    Holds the display text, the current batch, favorites and stats.

    Every state transition ends by notifying subscribers with the generator
    itself. A rejected save is not a transition and notifies nobody.
    """

    def __init__(
        self,
        favorites: Optional[Iterable[str]] = None,
        stats: Optional[Stats] = None,
        rng: Any = random,
    ) -> None:
        self.rng = rng
        self.display_text = PLACEHOLDER
        self.batch: List[str] = []
        self.favorites: List[str] = _clean_favorites(favorites or [])
        self.stats = stats if stats is not None else Stats()
        self._observers: List[Observer] = []

    def subscribe(self, callback: Observer) -> None:
        if callback not in self._observers:
            self._observers.append(callback)

    def unsubscribe(self, callback: Observer) -> None:
        if callback in self._observers:
            self._observers.remove(callback)

    def _notify(self) -> None:
        for callback in list(self._observers):
            callback(self)

    def can_save(self) -> bool:
        text = self.display_text
        return bool(text) and text != PLACEHOLDER and text not in self.favorites

    # Actions

    def generate(self) -> str:
        self.display_text = generate_one(self.rng)
        self.batch = []
        self.stats.record_generated(1)
        self._notify()
        return self.display_text

    def rapid_fire(self) -> List[str]:
        self.batch = generate_batch(BATCH_SIZE, self.rng)
        self.display_text = BATCH_READY
        self.stats.record_generated(BATCH_SIZE)
        self._notify()
        return list(self.batch)

    def save_favorite(self) -> bool:
        if not self.can_save():
            return False
        self.favorites.append(self.display_text)
        self.stats.record_saved()
        self._notify()
        return True

    def reset_streak(self) -> None:
        self.stats.reset_streak()
        self._notify()
