"""
Type definitions for the assistant engine.
Everything here is derived per call and never persisted.
"""
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path
from typing import Protocol

import yaml


class Intent(str, Enum):
    """Purpose of a user utterance"""
    SESSION_SWITCH = "session_switch"
    ANALYSIS = "analysis"
    PERFORMANCE = "performance"
    RISK_MANAGEMENT = "risk_management"
    ADVICE = "advice"
    FALLBACK = "fallback"


class EntrySide(str, Enum):
    LONG = "Long"
    SHORT = "Short"


class RandomSource(Protocol):
    """Anything that can pick an index in range(stop)."""

    def randrange(self, stop: int) -> int: ...


@dataclass(frozen=True)
class RouteDecision:
    """
    Result of classifying an utterance.

    Attributes:
        intent: Classified intent
        session_name: Candidate session name, only set when the utterance
            matched the explicit "load/switch to/open ... session" phrasing
    """
    intent: Intent
    session_name: str | None = None


@dataclass(frozen=True)
class TradeStatistics:
    """
    Aggregate metrics over a trade collection.

    Averages are sign-normalised (both >= 0). Ratios that would need a zero
    denominator are None rather than inf/nan.
    """
    total_trades: int
    winning_trades: int
    losing_trades: int
    win_rate: float
    net_profit_loss: float
    average_win: float
    average_loss: float
    risk_reward: float | None
    roi: float | None
    long_trades: int
    short_trades: int
    long_bias: bool
    short_bias: bool
    revenge_flagged: bool

    @classmethod
    def empty(cls) -> "TradeStatistics":
        return cls(
            total_trades=0,
            winning_trades=0,
            losing_trades=0,
            win_rate=0.0,
            net_profit_loss=0.0,
            average_win=0.0,
            average_loss=0.0,
            risk_reward=None,
            roi=None,
            long_trades=0,
            short_trades=0,
            long_bias=False,
            short_bias=False,
            revenge_flagged=False,
        )


@dataclass(frozen=True)
class ChatThresholds:
    strong_win_rate: float = 60.0
    min_trades_for_journal_tip: int = 10
    recent_window: int = 5
    min_trades_for_patterns: int = 3


@dataclass(frozen=True)
class SummaryThresholds:
    strong_win_rate: float = 60.0
    weak_win_rate: float = 50.0
    reliable_sample_size: int = 10
    sufficient_history: int = 20
    directional_bias_share: float = 0.8
    flagged_comment_term: str = "revenge"


@dataclass(frozen=True)
class Thresholds:
    """
    Numeric cut-offs for the chat and summary templates.

    Loaded from parameters.yaml; the dataclass defaults mirror the bundled file.
    """
    chat: ChatThresholds = field(default_factory=ChatThresholds)
    summary: SummaryThresholds = field(default_factory=SummaryThresholds)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "Thresholds":
        with open(path, encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}

        chat_cfg = config.get("chat", {})
        analysis = chat_cfg.get("analysis", {})
        performance = chat_cfg.get("performance", {})
        chat = ChatThresholds(
            strong_win_rate=float(analysis.get("strong_win_rate", 60.0)),
            min_trades_for_journal_tip=int(analysis.get("min_trades_for_journal_tip", 10)),
            recent_window=int(performance.get("recent_window", 5)),
            min_trades_for_patterns=int(performance.get("min_trades_for_patterns", 3)),
        )

        summary_cfg = config.get("summary", {})
        summary = SummaryThresholds(
            strong_win_rate=float(summary_cfg.get("strong_win_rate", 60.0)),
            weak_win_rate=float(summary_cfg.get("weak_win_rate", 50.0)),
            reliable_sample_size=int(summary_cfg.get("reliable_sample_size", 10)),
            sufficient_history=int(summary_cfg.get("sufficient_history", 20)),
            directional_bias_share=float(summary_cfg.get("directional_bias_share", 0.8)),
            flagged_comment_term=str(summary_cfg.get("flagged_comment_term", "revenge")),
        )
        return cls(chat=chat, summary=summary)
