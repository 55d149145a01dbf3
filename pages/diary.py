# Diary tab: passcode gate, entry editor, filters, entry list, sentiment stats, export.
import streamlit as st
import pandas as pd
from datetime import date, datetime

import auth
import content
import entries
import filters
import sentiment
import stats
from errors import InvalidEntry, OutOfRange, PersistenceFailure

SENTIMENT_FILTERS = ["All"] + list(sentiment.LABELS)
SENTIMENT_EMOJI = {sentiment.POSITIVE: "🙂", sentiment.NEGATIVE: "🙁", sentiment.NEUTRAL: "😐"}


def _render_gate(gate):
    if gate.state == auth.SETTING_NEW_PASSCODE:
        auth.render_change_passcode(gate)
    else:
        auth.render_unlock(gate)


def _render_editor(store):
    editing_id = st.session_state.get("editing_id")
    editing = None
    if editing_id:
        try:
            editing = store.all()[store.position_of(editing_id)]
        except OutOfRange:
            st.session_state.editing_id = None
            editing_id = None

    st.markdown("**Edit entry**" if editing else "**New entry**")
    # A new suffix after each save gives the editor fresh, empty widgets.
    key_suffix = f"{editing_id or 'new'}_{st.session_state.get('editor_round', 0)}"
    text = st.text_area(
        "Entry",
        value=editing["text"] if editing else "",
        max_chars=entries.MAX_TEXT_LENGTH,
        height=160,
        placeholder="Write your thoughts here...",
        key=f"diary_text_{key_suffix}",
        label_visibility="collapsed",
    )
    d_col, m_col = st.columns(2)
    with d_col:
        entry_date = st.date_input(
            "Date",
            value=entries.parse_date(editing["date"]) if editing else date.today(),
            key=f"diary_date_{key_suffix}",
        )
    with m_col:
        mood_index = entries.MOOD_LABELS.index(editing["mood"]) if editing else 0
        mood = st.selectbox(
            "Mood",
            entries.MOOD_LABELS,
            index=mood_index,
            format_func=lambda label: f"{entries.get_mood(label)['emoji']} {label}",
            key=f"diary_mood_{key_suffix}",
        )

    save_col, cancel_col = st.columns(2)
    with save_col:
        if st.button("Update entry" if editing else "Save entry", type="primary", key="diary_save"):
            try:
                if editing:
                    store.update(store.position_of(editing_id), text, entry_date, mood)
                    st.session_state.editing_id = None
                else:
                    store.save(text, entry_date, mood)
                st.session_state.editor_round = st.session_state.get("editor_round", 0) + 1
                st.rerun()
            except InvalidEntry as e:
                st.warning(str(e))
            except (OutOfRange, PersistenceFailure) as e:
                st.error(str(e))
    if editing:
        with cancel_col:
            if st.button("Cancel edit", key="diary_cancel_edit"):
                st.session_state.editing_id = None
                st.rerun()


def _render_entry(store, e):
    with st.container(border=True):
        st.markdown(
            f"**📅 {e['date']}** · {e['moodEmoji']} {e['mood']} · "
            f"{SENTIMENT_EMOJI.get(e['sentiment'], '')} {e['sentiment']}"
        )
        st.write(e["text"])
        edit_col, del_col = st.columns(2)
        with edit_col:
            if st.button("Edit", key=f"edit_{e['id']}"):
                st.session_state.editing_id = e["id"]
                st.rerun()
        with del_col:
            if st.button("Delete", key=f"del_{e['id']}"):
                st.session_state.delete_confirm = e["id"]
                st.rerun()
        if st.session_state.get("delete_confirm") == e["id"]:
            st.warning("Are you sure you want to delete this entry?")
            yes_col, no_col = st.columns(2)
            with yes_col:
                if st.button("Delete", key=f"del_yes_{e['id']}", type="primary"):
                    try:
                        store.delete(store.position_of(e["id"]))
                        if st.session_state.get("editing_id") == e["id"]:
                            st.session_state.editing_id = None
                    except (OutOfRange, PersistenceFailure) as err:
                        st.error(str(err))
                    st.session_state.delete_confirm = None
                    st.rerun()
            with no_col:
                if st.button("Cancel", key=f"del_no_{e['id']}"):
                    st.session_state.delete_confirm = None
                    st.rerun()


def _render_stats(all_entries):
    dist = stats.sentiment_distribution(all_entries)
    c1, c2, c3, c4 = st.columns(4)
    c1.metric("Entries", len(all_entries))
    c2.metric("Positive", dist[sentiment.POSITIVE])
    c3.metric("Negative", dist[sentiment.NEGATIVE])
    c4.metric("Neutral", dist[sentiment.NEUTRAL])
    st.caption(f"First entry: {stats.first_entry_date(all_entries)}")
    if all_entries:
        df = pd.DataFrame([{"sentiment": k, "count": v} for k, v in dist.items()])
        st.bar_chart(df.set_index("sentiment"), y="count", x_label="Sentiment", y_label="Entries")


def render(session):
    gate = session.gate
    if not gate.unlocked:
        _render_gate(gate)
        return

    store = session.diary()
    if "diary_quote" not in st.session_state:
        st.session_state.diary_quote = content.random_diary_quote()
    st.caption(f"“{st.session_state.diary_quote}”")

    _render_editor(store)

    all_entries = store.all()
    with st.expander("Diary stats"):
        _render_stats(all_entries)

    st.markdown("### Your entries")
    f_col, d_col = st.columns(2)
    with f_col:
        chosen = st.selectbox("Sentiment", SENTIMENT_FILTERS, key="filter_sentiment")
    with d_col:
        date_query = st.text_input("Search by date", placeholder="e.g. 3/14", key="filter_date")
    shown = filters.apply(
        all_entries,
        sentiment=None if chosen == "All" else chosen,
        date_substring=date_query,
    )
    if not shown:
        st.caption("No entries yet." if not all_entries else "No entries match these filters.")
    for e in shown:
        _render_entry(store, e)

    st.download_button(
        "Export entries",
        data=store.export(),
        file_name=f"journal-entries-{datetime.now().strftime('%Y-%m-%d')}.txt",
        mime="text/plain",
        key="diary_export",
        disabled=not all_entries,
    )
