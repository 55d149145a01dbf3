# Insights tab: mood and sentiment split of diary entries.
import streamlit as st
import pandas as pd

import entries
import stats


def _chart(counts: dict, label: str):
    df = pd.DataFrame([{label: k, "count": v} for k, v in counts.items()])
    st.bar_chart(df.set_index(label), y="count", x_label=label.capitalize(), y_label="Entries")


def render(session):
    if not session.gate.unlocked:
        st.markdown("### Insights")
        st.caption("Unlock your diary on the **Diary** tab to see your insights.")
        return

    all_entries = session.diary().all()
    st.markdown("### Moods in your diary")
    if not all_entries:
        st.caption("Write a few diary entries to see insights here.")
        return

    moods = stats.mood_distribution(all_entries)
    _chart(moods, "mood")
    for label, count in moods.items():
        if count:
            emoji = entries.get_mood(label)["emoji"]
            st.markdown(f"{emoji} **{label}**: {count} time{'s' if count != 1 else ''}")

    st.markdown("### Sentiment")
    _chart(stats.sentiment_distribution(all_entries), "sentiment")
    st.caption(f"Journaling since {stats.first_entry_date(all_entries)}")
