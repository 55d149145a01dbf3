# Mood guidance: daily goal, breathing pattern and journal prompt per mood.
import copy

GUIDANCE = {
    "happy": {
        "goal": "🌟 Share your joy with someone today!",
        "breathingPattern": {"inhale": 4, "hold": 2, "exhale": 4},
        "breathingTip": "✨ Do a gratitude breath: inhale joy, exhale thanks",
        "journalPrompt": "Capture this happy moment in detail to revisit later",
    },
    "sad": {
        "goal": "🌤 Try taking a short walk outside to lift your spirit",
        "breathingPattern": {"inhale": 4, "hold": 5, "exhale": 6},
        "breathingTip": "🫁 Breathe in for 4 seconds, hold for 5, out for 6. Repeat 3 times",
        "journalPrompt": "Write about what might be causing your sadness and one small thing that could help",
    },
    "angry": {
        "goal": "🧊 Pause and count to 10. Let calmness return",
        "breathingPattern": {"inhale": 4, "hold": 0, "exhale": 6},
        "breathingTip": "🔥 Take 5 deep belly breaths, slowly and mindfully",
        "journalPrompt": "Write about what triggered your anger and how you might respond differently",
    },
    "calm": {
        "goal": "🍃 Protect this calm: take ten quiet minutes for yourself",
        "breathingPattern": {"inhale": 4, "hold": 4, "exhale": 4},
        "breathingTip": "🌊 Box breathing: in for 4, hold for 4, out for 4",
        "journalPrompt": "What helped you feel settled today, and how can you come back to it?",
    },
    "depressed": {
        "goal": "🧩 Break tasks into small pieces and celebrate each one",
        "breathingPattern": {"inhale": 5, "hold": 2, "exhale": 7},
        "breathingTip": "🧘 Focus on your breath. Inhale slowly, exhale gently",
        "journalPrompt": "List three things you appreciate about yourself, no matter how small",
    },
    "thoughts": {
        "goal": "📝 Write down what keeps circling in your mind",
        "breathingPattern": {"inhale": 4, "hold": 4, "exhale": 6},
        "breathingTip": "🌬 Breathe slowly and let each thought pass like a cloud",
        "journalPrompt": "What thought has been on your mind most today, and what is it asking of you?",
    },
    "default": {
        "goal": "🎯 Do one kind thing for yourself today",
        "breathingPattern": {"inhale": 4, "hold": 4, "exhale": 6},
        "breathingTip": "🌿 Breathe deep and slow to refresh your mind",
        "journalPrompt": "Reflect on something you learned about yourself recently",
    },
}


def guidance(mood: str | None) -> dict:
    key = (mood or "").strip().lower()
    return copy.deepcopy(GUIDANCE.get(key) or GUIDANCE["default"])


def breathing_phases(mood: str | None) -> list[tuple[str, int]]:
    """Inhale/hold/exhale steps for one breathing cycle; zero-length holds are skipped."""
    p = guidance(mood)["breathingPattern"]
    steps = [("Breathe In", p["inhale"]), ("Hold", p["hold"]), ("Breathe Out", p["exhale"])]
    return [(name, secs) for name, secs in steps if secs > 0]
