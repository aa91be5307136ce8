from sydney_assistant.ai.base import (
    AssistantUnavailableError,
    BaseAssistantProvider,
    ModelResponse,
)
from sydney_assistant.ai.local import LocalAssistantProvider

__all__ = [
    "AssistantUnavailableError",
    "BaseAssistantProvider",
    "LocalAssistantProvider",
    "ModelResponse",
]
