# Mood Journal entry point: config, CSS, session, account screen, login streak, tab routing.
import streamlit as st
from pathlib import Path

import accounts
import config
import db
from entries import EntryStore
from errors import PersistenceFailure
from session import DiarySession

APP_NAME = "Mood Journal"
TAGLINE = "Track your mood, keep a private diary"
FOOTER_TEXT = "Your diary is protected by a passcode and stays on this device."
NAV_TABS = ["Home", "Diary", "Insights", "Profile", "MindMate"]

st.set_page_config(
    page_title=APP_NAME,
    page_icon="📔",
    layout="centered",
    initial_sidebar_state="collapsed",
)
_css_path = Path(__file__).resolve().parent / "styles.css"
if _css_path.exists():
    st.markdown(f"<style>\n{_css_path.read_text()}\n</style>", unsafe_allow_html=True)

if "logging_configured" not in st.session_state:
    config.configure_logging()
    st.session_state.logging_configured = True

if "page" not in st.session_state:
    st.session_state.page = "Home"


# One store per process so concurrent browser sessions share a single writer.
@st.cache_resource
def _shared_store():
    storage = db.Storage()
    return storage, EntryStore(storage)


def _load_session() -> DiarySession | None:
    if "diary_session" not in st.session_state:
        try:
            storage, store = _shared_store()
            st.session_state.diary_session = DiarySession(storage, store)
        except PersistenceFailure as e:
            st.error(f"Could not open your journal: {e}")
            return None
    return st.session_state.diary_session


# Runs on every rerun; repeats within a day leave streak and points alone.
def _record_login(session: DiarySession) -> None:
    try:
        st.session_state.activity = session.record_login()
    except PersistenceFailure as e:
        st.warning(f"Could not update your streak: {e}")


def _render_header(session: DiarySession):
    top_col1, top_col2 = st.columns([3, 1])
    activity = st.session_state.get("activity") or {}
    with top_col1:
        st.markdown(f"# {APP_NAME}")
        st.markdown(f'<p class="tagline">{TAGLINE}</p>', unsafe_allow_html=True)
    with top_col2:
        streak_col, lock_col = st.columns([1, 1])
        with streak_col:
            st.markdown(f"**🔥 {activity.get('streak', 0)}**")
        with lock_col:
            if session.gate.unlocked and st.button("🔒 Lock", key="lock_btn"):
                session.gate.lock()
                st.rerun()
    with st.container(key="nav_tabs"):
        tab_cols = st.columns(len(NAV_TABS))
        for i, tab in enumerate(NAV_TABS):
            with tab_cols[i]:
                is_active = st.session_state.page == tab
                if st.button(tab, key=f"nav_{tab}", type="primary" if is_active else "secondary"):
                    st.session_state.page = tab
                    st.rerun()
    st.markdown('<hr class="nav-tabs-separator" />', unsafe_allow_html=True)


def _render_account_screen(session: DiarySession) -> None:
    st.markdown(f"# {APP_NAME}")
    st.markdown(f'<p class="tagline">{TAGLINE}</p>', unsafe_allow_html=True)
    mode = st.radio("Account", ["Log in", "Sign up"], horizontal=True, label_visibility="collapsed", key="account_mode")
    if mode == "Log in":
        accounts.render_login(session.accounts)
    else:
        accounts.render_sign_up(session.accounts)


def main():
    session = _load_session()
    if session is None:
        return
    try:
        user = session.accounts.current_user()
    except PersistenceFailure as e:
        st.error(f"Could not read your account: {e}")
        return
    if user is None:
        _render_account_screen(session)
        return
    _record_login(session)
    _render_header(session)
    page = st.session_state.page
    if page == "Home":
        from pages import home
        home.render(session)
    elif page == "Diary":
        from pages import diary
        diary.render(session)
    elif page == "Insights":
        from pages import insights
        insights.render(session)
    elif page == "Profile":
        from pages import profile
        profile.render(session)
    else:
        from pages import chat
        chat.render()
    st.caption(FOOTER_TEXT)


if __name__ == "__main__":
    main()
