# Keyword sentiment for diary entries: substring hits per word list, ties are Neutral.
POSITIVE = "Positive"
NEGATIVE = "Negative"
NEUTRAL = "Neutral"
LABELS = (POSITIVE, NEGATIVE, NEUTRAL)

POSITIVE_WORDS = ("happy", "joy", "great", "awesome", "amazing", "love", "wonderful")
NEGATIVE_WORDS = ("sad", "angry", "bad", "hate", "terrible", "awful", "depressed")


def _hits(lower: str, words) -> int:
    # Each word counts once no matter how often it appears.
    return sum(1 for w in words if w in lower)


def classify(text: str) -> str:
    lower = (text or "").lower()
    pos = _hits(lower, POSITIVE_WORDS)
    neg = _hits(lower, NEGATIVE_WORDS)
    if pos > neg:
        return POSITIVE
    if neg > pos:
        return NEGATIVE
    return NEUTRAL
