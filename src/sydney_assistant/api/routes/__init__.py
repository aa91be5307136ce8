from sydney_assistant.api.routes.chat import ChatRouter
from sydney_assistant.api.routes.summary import SummaryRouter

__all__ = ["ChatRouter", "SummaryRouter"]
