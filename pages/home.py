# Home tab: mood check-in, goal, breathing guide, prompt, quote, songs, mood history.
import time

import streamlit as st
import pandas as pd

import advisor
import content
import entries
import stats
from errors import PersistenceFailure

LANGUAGES = ["English", "Hindi", "Telugu", "Tamil", "Spanish"]


@st.cache_data(ttl=3600, show_spinner=False)
def _quote() -> str:
    return content.fetch_quote()


@st.cache_data(ttl=3600, show_spinner=False)
def _songs(mood: str, language: str) -> list:
    return content.fetch_songs(mood, language)


def _greeting(hour: int) -> str:
    if hour < 12:
        return "Good Morning"
    if hour < 18:
        return "Good Afternoon"
    return "Good Evening"


def _render_breathing(mood: str):
    phases = advisor.breathing_phases(mood)
    if st.button("Start one breathing cycle", key="breathe_btn"):
        slot = st.empty()
        for name, secs in phases:
            for left in range(secs, 0, -1):
                slot.markdown(f"### {name} … {left}")
                time.sleep(1)
        slot.markdown("### Well done 🌿")


def render(session):
    st.markdown(f"### {_greeting(time.localtime().tm_hour)} 👋")
    st.markdown("**How are you feeling right now?**")
    cols = st.columns(len(entries.MOODS))
    for i, m in enumerate(entries.MOODS):
        with cols[i]:
            if st.button(f"{m['emoji']} {m['label']}", key=f"mood_{m['label']}"):
                try:
                    session.activity.record_mood(m["label"])
                    st.session_state.current_mood = m["label"]
                    st.rerun()
                except PersistenceFailure as e:
                    st.error(str(e))

    mood = st.session_state.get("current_mood")
    g = advisor.guidance(mood)
    st.info(_quote())

    st.markdown("**Today's mood goal**")
    st.write(g["goal"])

    st.markdown("**Breathing guide**")
    p = g["breathingPattern"]
    st.write(g["breathingTip"])
    st.caption(f"Inhale {p['inhale']}s · hold {p['hold']}s · exhale {p['exhale']}s")
    _render_breathing(mood)

    st.markdown("**Journal prompt**")
    st.write(g["journalPrompt"])

    if mood:
        st.markdown(f"**Songs for feeling {mood.lower()}**")
        language = st.selectbox("Language", LANGUAGES, key="song_language")
        songs = _songs(mood, language)
        if not songs:
            st.caption("No songs right now. Try again later.")
        for s in songs:
            img_col, txt_col = st.columns([1, 4])
            with img_col:
                st.image(s["thumbnailUrl"])
            with txt_col:
                st.markdown(f"[{s['title']}]({s['playbackUrl']})")

    _render_history(session)


def _render_history(session):
    st.markdown("### Your mood history")
    try:
        history = session.activity.load()["moodHistory"]
    except PersistenceFailure as e:
        st.error(str(e))
        return
    if not history:
        st.caption("No moods tracked yet.")
        return

    counts = stats.mood_history_counts(history)
    df = pd.DataFrame([{"mood": k, "count": v} for k, v in counts.items()])
    st.bar_chart(df.set_index("mood"), y="count", x_label="Mood", y_label="Check-ins")
    for label, count in counts.items():
        tag = entries.get_mood(label)
        emoji = tag["emoji"] if tag else "💭"
        st.markdown(f"{emoji} **{label}**: {count} time{'s' if count != 1 else ''}")

    with st.expander(f"All check-ins ({len(history)})"):
        for item in history:
            tag = entries.get_mood(item["mood"])
            emoji = tag["emoji"] if tag else "💭"
            st.markdown(f"{emoji} **{item['mood']}** · {item['date']} {item.get('time', '')}")
