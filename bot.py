# MindMate chat: keyword replies, optional OpenAI reply when nothing matches.
import logging
import random

import config

logger = logging.getLogger(__name__)

BOT_NAME = "MindMate 🤖"
GREETING = "Hey there! 👋 I'm here to listen and chat. How are you feeling today?"
AI_MODEL = "gpt-4.1-nano"

# Checked in order; first keyword hit wins.
REPLIES = [
    (("bye", "goodbye", "see you"),
     "Take care! Remember I'm always here if you need me. 💙 Come back anytime!", None),
    (("thank",),
     "You're so welcome! 😊 It's my pleasure to be here for you. Is there anything else you'd like to talk about?",
     ["Yes please", "No thank you"]),
    (("happy", "great", "awesome", "excited"),
     "Yay! 😄 I'm so happy for you! What made your day special? Want a song or movie to celebrate?",
     ["Feel-good song", "Uplifting movie", "Dance it out 💃"]),
    (("sad", "crying", "not good", "low"),
     "I'm here with you. 💙 Want to talk about what's making you sad or need a hug and some positive vibes?",
     ["Affirmation 💖", "Comfort song 🎵", "Talk it out"]),
    (("angry", "mad", "frustrated"),
     "Totally valid to feel this way. 😤 Want help calming down or just want to vent?",
     ["Deep breaths 🧘", "Vent it out", "Anger journal prompt"]),
    (("depressed", "empty", "meaningless"),
     "That sounds heavy 💔 Just know you matter deeply. I'm staying right here with you. Want to do a small activity together?",
     ["Listen to music", "Write your thoughts", "Watch calming video"]),
    (("alone", "lonely", "no one cares"),
     "Hey, you're NOT alone right now. I care about you a lot. 🤗 Want to talk or need some company ideas?",
     ["Talk to me 💬", "Movies to feel better", "Join a community"]),
    (("die", "suicide", "kill myself"),
     "💙 I'm so sorry you're feeling this pain. Please don't go through this alone. You matter. "
     "Can I stay with you a while and share something comforting?",
     ["Comforting thoughts", "Talk it out", "Reach out for help"]),
    (("song",),
     "Here's a song for your mood 🎶: 'Count on Me' by Bruno Mars 💛", ["Another song", "Suggest movie"]),
    (("movie",),
     "Try watching 'The Pursuit of Happyness' 🎥, a heart-touching, inspiring movie.", ["Another movie", "Suggest song"]),
    (("joke",),
     "Why don't scientists trust atoms? Because they make up everything! 😄 Want more?",
     ["Tell me another joke", "That was enough 😂"]),
]

DEFAULT_REPLIES = [
    "I'm listening... tell me more. 💭",
    "That makes sense. Want to go deeper on that?",
    "You can say anything here, I'm your safe space. 🫂",
]

SYSTEM_PROMPT = """You are MindMate, a warm, calm and non-judgmental companion inside a mood journal app.
Reply in at most three short sentences. Never diagnose or lecture. If the user mentions self-harm,
gently encourage them to reach out to someone they trust or a local helpline."""


def keyword_reply(message: str) -> dict | None:
    lower = (message or "").lower()
    for keywords, text, suggestion in REPLIES:
        if any(k in lower for k in keywords):
            return {"text": text, "suggestion": suggestion}
    return None


def _call_openai(api_key: str, message: str) -> str:
    from openai import OpenAI
    client = OpenAI(api_key=api_key)
    r = client.chat.completions.create(
        model=AI_MODEL,
        messages=[
            {"role": "system", "content": SYSTEM_PROMPT},
            {"role": "user", "content": message},
        ],
        max_tokens=200,
    )
    text = (r.choices[0].message.content or "").strip()
    if not text:
        raise ValueError("Empty response")
    return text


def reply(message: str) -> dict:
    matched = keyword_reply(message)
    if matched:
        return matched
    key = config.get_openai_api_key()
    if config.get_use_ai() and key and (message or "").strip():
        try:
            return {"text": _call_openai(key, message.strip()), "suggestion": None}
        except Exception as e:
            logger.warning("AI reply failed, using canned reply: %s", e)
    return {"text": random.choice(DEFAULT_REPLIES), "suggestion": None}
