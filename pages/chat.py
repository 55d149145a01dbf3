# MindMate tab: simple supportive chat.
import streamlit as st
from datetime import datetime

import bot


def _now() -> str:
    return datetime.now().strftime("%H:%M")


def _send(text: str):
    text = (text or "").strip()
    if not text:
        return
    st.session_state.chat.append({"isBot": False, "text": text, "time": _now(), "suggestion": None})
    r = bot.reply(text)
    st.session_state.chat.append({"isBot": True, "text": r["text"], "time": _now(), "suggestion": r["suggestion"]})


def render():
    if "chat" not in st.session_state:
        st.session_state.chat = [{"isBot": True, "text": bot.GREETING, "time": _now(), "suggestion": None}]

    st.markdown("### MindMate")
    st.caption("Your mental health companion")
    for msg in st.session_state.chat:
        with st.chat_message("assistant" if msg["isBot"] else "user"):
            st.write(msg["text"])
            st.caption(msg["time"])

    last = st.session_state.chat[-1]
    if last["isBot"] and last["suggestion"]:
        cols = st.columns(len(last["suggestion"]))
        for i, s in enumerate(last["suggestion"]):
            with cols[i]:
                if st.button(s, key=f"suggest_{len(st.session_state.chat)}_{i}"):
                    _send(s)
                    st.rerun()

    message = st.chat_input("Type how you feel...")
    if message:
        _send(message)
        st.rerun()
