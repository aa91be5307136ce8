import random
from datetime import datetime

from sydney_assistant.types import RandomSource

WELCOME_MESSAGE = (
    "Hi! I'm Sydney, your AI trading assistant. I can help you analyze your "
    "trades, switch between sessions, and provide insights to improve your "
    "trading performance. How can I help you today?"
)

# (month, day) -> prefix
HOLIDAYS = {
    (12, 25): "🎄 Merry Christmas! ",
    (1, 1): "🎉 Happy New Year! ",
    (10, 31): "🎃 Happy Halloween! ",
    (2, 14): "💝 Happy Valentine's Day! ",
}

GREETING_TEMPLATES = (
    "{holiday}{time_greeting}, {user}! Ready to analyze your trades today?",
    "{holiday}{time_greeting}! I'm Sydney, here to help you improve your trading performance.",
    "{holiday}Hey {user}! {time_greeting}. Let's make today a profitable one!",
    "{holiday}{time_greeting}, {user}! I'm here to help you spot patterns and optimize your strategy.",
)


def time_of_day_greeting(hour: int) -> str:
    if hour < 12:
        return "Good morning"
    if hour < 17:
        return "Good afternoon"
    return "Good evening"


def build_greeting(
    email: str,
    now: datetime | None = None,
    rng: RandomSource | None = None,
) -> str:
    """
    Banner greeting for the dashboard.

    The user name is the local part of `email`. A holiday prefix is added on
    the dates in HOLIDAYS.
    """
    now = now or datetime.now()
    rng = rng if rng is not None else random.Random()

    template = GREETING_TEMPLATES[rng.randrange(len(GREETING_TEMPLATES))]
    return template.format(
        holiday=HOLIDAYS.get((now.month, now.day), ""),
        time_greeting=time_of_day_greeting(now.hour),
        user=email.split("@")[0],
    )
