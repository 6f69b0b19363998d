"""Tests for app - the Streamlit page driven through AppTest."""

from pathlib import Path

import pytest
from streamlit.testing.v1 import AppTest

import storage

APP_PATH = str(Path(__file__).resolve().parent.parent / "app.py")


@pytest.fixture
def at(tmp_path, monkeypatch):
    monkeypatch.setattr(storage, "STATE_PATH", tmp_path / "state.json")
    app = AppTest.from_file(APP_PATH, default_timeout=30)
    app.run()
    return app


def click(app, label):
    button = next(b for b in app.button if b.label == label)
    button.click().run()


def markdown_text(app):
    return "\n".join(m.value for m in app.markdown)


class TestPage:
    def test_fresh_start(self, at):
        assert not at.exception
        assert "Click below to roast a clanker!" in markdown_text(at)
        assert "Favorite Roasts" not in markdown_text(at)
        g = at.session_state["generator"]
        assert g.stats.to_dict() == {"generated": 0, "saved": 0, "streak": 0, "bestStreak": 0}

    def test_generate_then_save(self, at, tmp_path):
        click(at, "🔄 Generate")
        click(at, "⭐ Save")
        click(at, "⭐ Save")

        assert not at.exception
        g = at.session_state["generator"]
        assert g.stats.generated == 1
        assert g.stats.saved == 1
        assert len(g.favorites) == 1
        assert "Favorite Roasts" in markdown_text(at)
        assert (tmp_path / "state.json").exists()

    def test_roast_animation_flips_on_new_text(self, at):
        assert 'class="roast roast-in-a"' in markdown_text(at)

        click(at, "📜 Rapid-Fire (10)")
        assert 'class="roast roast-in-b"' in markdown_text(at)

        # same text again: keep the keyframes so it does not replay
        click(at, "📜 Rapid-Fire (10)")
        assert 'class="roast roast-in-b"' in markdown_text(at)

        click(at, "🔄 Generate")
        assert 'class="roast roast-in-a"' in markdown_text(at)

    def test_rapid_fire_and_reset(self, at):
        click(at, "📜 Rapid-Fire (10)")
        click(at, "Reset Streak")

        g = at.session_state["generator"]
        assert len(g.batch) == 10
        assert "Batch of insults ready!" in markdown_text(at)
        assert g.stats.streak == 0
        assert g.stats.best_streak == 10
