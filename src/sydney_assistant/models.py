"""
Records supplied by the journal's persistence layer.

The assistant only reads these; unknown fields sent by the caller are ignored.
"""
from datetime import datetime
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from sydney_assistant.types import EntrySide


class Trade(BaseModel):
    """One recorded position with its realized result."""

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    id: str | None = None
    symbol: str | None = None
    profit_loss: float
    entry_side: EntrySide
    comments: str | None = None


class TradingSession(BaseModel):
    """A named trading context with capital tracking."""

    model_config = ConfigDict(extra="ignore", allow_inf_nan=False)

    id: str
    name: str
    initial_capital: float
    current_capital: float


class HistoryMessage(BaseModel):
    model_config = ConfigDict(extra="ignore")

    content: str
    sender: Literal["user", "sydney"]
    timestamp: datetime | None = Field(default=None)
