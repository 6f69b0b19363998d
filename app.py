# app.py
# Run:
#   .\.venv\Scripts\Activate.ps1
#   pip install -e .
#   streamlit run app.py

from __future__ import annotations

import logging
from typing import List

import streamlit as st

from charts import pie_figure
from roaster import InsultGenerator
from storage import STATE_PATH, JsonFileStore, hydrate

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


# -----------------------------
# STREAMLIT CONFIG + STATE INIT
# -----------------------------
st.set_page_config(page_title="Droid Insult Generator", page_icon="🤖", layout="centered")

if "generator" not in st.session_state:
    st.session_state.generator = hydrate(JsonFileStore(STATE_PATH))


def gen() -> InsultGenerator:
    return st.session_state.generator


# -----------------------------
# STYLE
# -----------------------------
st.markdown(
    """
<style>
.stApp { background: linear-gradient(135deg, #111827 0%, #000000 50%, #1f2937 100%); color: #fff; }
.block-container { padding-top: 2.2rem; padding-bottom: 2.0rem; max-width: 720px; }

.h1 {
  font-size: 1.9rem; font-weight: 900; text-align: center;
  color: #facc15; margin: 0.2rem 0 1.2rem 0;
}

@keyframes roast-in-a {
  from { opacity: 0; transform: translateY(-20px); }
  to   { opacity: 1; transform: translateY(0); }
}
@keyframes roast-in-b {
  from { opacity: 0; transform: translateY(-20px); }
  to   { opacity: 1; transform: translateY(0); }
}
.roast { font-size: 1.3rem; text-align: center; margin-bottom: 1rem; }
.roast.roast-in-a { animation: roast-in-a 0.3s ease-out; }
.roast.roast-in-b { animation: roast-in-b 0.3s ease-out; }

.batch, .favs {
  background: #374151; border-radius: 14px; padding: 14px 18px;
  margin-bottom: 1rem; text-align: center;
}
.batch div, .favs div { padding: 3px 0; }
.favs { max-height: 12rem; overflow-y: auto; }

.card-title { font-size: 1.1rem; margin-bottom: 0.5rem; }
.card-title.stats { color: #60a5fa; }
.card-title.chart { color: #c084fc; }
.section-title { font-size: 1.25rem; font-weight: 800; color: #fde047; margin: 16px 0 8px 0; }

div.stButton > button {
  border-radius: 14px !important;
  font-weight: 800 !important;
}
</style>
""",
    unsafe_allow_html=True,
)


# -----------------------------
# UI COMPONENTS
# -----------------------------
def _safe(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


def roast_animation(text: str) -> str:
    """Flip between two identical keyframes each time the roast text changes."""
    ss = st.session_state
    if ss.get("roast_shown") != text:
        ss.roast_shown = text
        ss.roast_flips = ss.get("roast_flips", -1) + 1
    return "roast-in-b" if ss.roast_flips % 2 else "roast-in-a"


def roast_box(text: str) -> None:
    # the element is patched in place; only a new animation-name restarts it
    anim = roast_animation(text)
    st.markdown(
        f'<div class="roast {anim}">{_safe(text)}</div>',
        unsafe_allow_html=True,
    )


def phrase_block(phrases: List[str], css_class: str) -> None:
    rows = "".join(f"<div>{_safe(p)}</div>" for p in phrases)
    st.markdown(f'<div class="{css_class}">{rows}</div>', unsafe_allow_html=True)


def action_row() -> None:
    c1, c2, c3 = st.columns(3)
    with c1:
        if st.button("🔄 Generate", use_container_width=True, type="primary"):
            gen().generate()
            st.rerun()
    with c2:
        if st.button("📜 Rapid-Fire (10)", use_container_width=True):
            gen().rapid_fire()
            st.rerun()
    with c3:
        if st.button("⭐ Save", use_container_width=True):
            if gen().save_favorite():
                st.rerun()


def stats_card() -> None:
    stats = gen().stats
    st.markdown('<div class="card-title stats">📊 Personal Stats</div>', unsafe_allow_html=True)
    st.write(f"🔥 Generated: {stats.generated}")
    st.write(f"⭐ Saved: {stats.saved}")
    st.write(f"⚡ Current Streak: {stats.streak}")
    st.write(f"🏆 Best Streak: {stats.best_streak}")
    if st.button("Reset Streak"):
        gen().reset_streak()
        st.rerun()


def chart_card() -> None:
    st.markdown('<div class="card-title chart">📊 Visual Breakdown</div>', unsafe_allow_html=True)
    st.plotly_chart(
        pie_figure(gen().stats),
        use_container_width=True,
        config={"displayModeBar": False},
    )


# -----------------------------
# PAGE
# -----------------------------
def page_main() -> None:
    g = gen()

    st.markdown('<div class="h1">🤖 Droid Insult Generator</div>', unsafe_allow_html=True)
    roast_box(g.display_text)

    if g.batch:
        phrase_block(g.batch, "batch")

    action_row()

    left, right = st.columns(2)
    with left:
        with st.container(border=True):
            stats_card()
    with right:
        with st.container(border=True):
            chart_card()

    if g.favorites:
        st.markdown('<div class="section-title">⭐ Favorite Roasts</div>', unsafe_allow_html=True)
        phrase_block(g.favorites, "favs")


page_main()
