from sydney_assistant.routing.intent_router import (
    INTENT_RULES,
    SessionSwitchResult,
    classify,
    classify_keywords,
    extract_session_name,
    find_session,
    resolve_session_switch,
)

__all__ = [
    "INTENT_RULES",
    "SessionSwitchResult",
    "classify",
    "classify_keywords",
    "extract_session_name",
    "find_session",
    "resolve_session_switch",
]
