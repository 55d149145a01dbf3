# Profile tab: streak, points, achievement level, weekly check-ins, account and logout.
import streamlit as st
import pandas as pd
from datetime import date

import stats
from errors import PersistenceFailure

LEGENDARY_STREAK = 30


def render(session):
    try:
        activity = session.activity.load()
    except PersistenceFailure as e:
        st.error(str(e))
        return

    streak, points = activity["streak"], activity["points"]
    st.markdown("### My journal profile")
    st.markdown(f"**Level:** {stats.achievement_level(streak)}")

    s_col, p_col = st.columns(2)
    with s_col:
        st.metric("Day streak", streak)
        st.progress(min(streak, LEGENDARY_STREAK) / LEGENDARY_STREAK)
        st.caption("🔥 Max streak!" if streak >= LEGENDARY_STREAK else f"{LEGENDARY_STREAK - streak} days to legendary")
        st.caption(f"+{stats.bonus_points(streak)} bonus points")
    with p_col:
        st.metric("Total points", points)
        progress = stats.reward_progress(points)
        if progress["unlocked"]:
            st.caption(f"Unlocked {progress['unlocked']} rewards")
        else:
            st.caption(f"{progress['toNext']} to next reward")
        st.caption(f"Daily: {points} · Streak: {stats.bonus_points(streak)}")

    last = activity.get("lastLoginDate")
    st.caption(f"Last check-in: {date.fromisoformat(last).strftime('%b %d') if last else '--'}")

    st.markdown("### This week's moods")
    weekly = stats.weekly_mood_stats(activity["moodHistory"], date.today())
    if weekly:
        df = pd.DataFrame([{"mood": k, "count": v} for k, v in weekly.items()])
        st.bar_chart(df.set_index("mood"), y="count", x_label="Mood", y_label="Check-ins")
    else:
        st.caption("No mood check-ins this week. Pick a mood on the Home tab.")
    st.caption(f"Total check-ins: {len(activity['moodHistory'])}")

    _render_account(session)


def _render_account(session):
    st.markdown("### Account")
    try:
        user = session.accounts.current_user()
    except PersistenceFailure as e:
        st.error(str(e))
        return
    if user:
        st.markdown(f"**{user['name']}** · {user['email']}")
        st.caption(f"Age {user['age']} · {user['gender']}")
    if st.button("Log out", key="logout_btn"):
        try:
            session.log_out()
            st.rerun()
        except PersistenceFailure as e:
            st.error(str(e))
