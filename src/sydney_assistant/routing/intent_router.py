"""
Intent Router

Keyword-based classification of user utterances. Matching is case-insensitive;
extracted text keeps the caller's original casing.

The keyword chain is an ordered list of (predicate, intent) pairs evaluated
first-match-wins, so a message mentioning both "analysis" and "risk" resolves
to ANALYSIS.
"""
import re
from collections.abc import Callable, Sequence
from dataclasses import dataclass

import structlog

from sydney_assistant.models import TradingSession
from sydney_assistant.types import Intent, RouteDecision

logger = structlog.get_logger(__name__)

SESSION_SWITCH_PATTERN = re.compile(
    r"(?:load|switch to|open)\s+(?:the\s+)?(.+?)\s+session", re.IGNORECASE
)

SWITCH_ACKNOWLEDGMENT = (
    'I\'ve switched you to the "{name}" session. '
    "You can now view and manage trades for this session."
)


def _contains_any(*keywords: str) -> Callable[[str], bool]:
    def predicate(lowered: str) -> bool:
        return any(k in lowered for k in keywords)

    return predicate


INTENT_RULES: list[tuple[Callable[[str], bool], Intent]] = [
    (_contains_any("load", "switch"), Intent.SESSION_SWITCH),
    (_contains_any("analysis", "analyze"), Intent.ANALYSIS),
    (_contains_any("performance", "how am i doing"), Intent.PERFORMANCE),
    (_contains_any("risk", "management"), Intent.RISK_MANAGEMENT),
    (_contains_any("advice", "tips"), Intent.ADVICE),
]


@dataclass(frozen=True)
class SessionSwitchResult:
    """A resolved switch: the session to activate and the reply to show."""
    session: TradingSession
    response: str


def extract_session_name(utterance: str) -> str | None:
    """
    Pull the candidate session name out of "load/switch to/open [the] X session".

    Returns:
        The trimmed name in its original casing, or None when the phrasing
        does not match.
    """
    match = SESSION_SWITCH_PATTERN.search(utterance)
    if not match:
        return None
    name = match.group(1).strip()
    return name or None


def classify_keywords(utterance: str) -> Intent:
    lowered = utterance.lower()
    for predicate, intent in INTENT_RULES:
        if predicate(lowered):
            return intent
    return Intent.FALLBACK


def classify(utterance: str) -> RouteDecision:
    """
    Classify an utterance.

    Explicit session-switch phrasing takes priority and carries the extracted
    name; anything else goes through the ordered keyword chain.
    """
    session_name = extract_session_name(utterance)
    if session_name is not None:
        decision = RouteDecision(Intent.SESSION_SWITCH, session_name)
    else:
        decision = RouteDecision(classify_keywords(utterance))
    logger.debug(
        "intent_classified",
        intent=decision.intent.value,
        session_name=decision.session_name,
    )
    return decision


def find_session(
    name: str, sessions: Sequence[TradingSession]
) -> TradingSession | None:
    """
    First session whose name contains `name`, case-insensitively.

    Overlapping names ("BTC" vs "BTC Scalping"/"BTC Swing") resolve to the
    first one in collection order.
    """
    needle = name.lower()
    return next((s for s in sessions if needle in s.name.lower()), None)


def resolve_session_switch(
    utterance: str, sessions: Sequence[TradingSession]
) -> SessionSwitchResult | None:
    """
    Match explicit switch phrasing against the known sessions.

    Returns:
        The switch result on a match, None when the phrasing is absent or no
        session matches (the caller then falls back to keyword routing).
    """
    decision = classify(utterance)
    if decision.session_name is None:
        return None

    session = find_session(decision.session_name, sessions)
    if session is None:
        logger.info("session_switch_unmatched", candidate=decision.session_name)
        return None

    return SessionSwitchResult(
        session=session,
        response=SWITCH_ACKNOWLEDGMENT.format(name=session.name),
    )
