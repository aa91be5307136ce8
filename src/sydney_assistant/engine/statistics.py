"""
Trade statistics - deterministic aggregation over a trade collection.

Recomputed on every call; nothing is cached between requests.
"""
import math
from collections.abc import Sequence

import pandas as pd

from sydney_assistant.models import Trade
from sydney_assistant.types import EntrySide, SummaryThresholds, TradeStatistics


def trades_frame(trades: Sequence[Trade]) -> pd.DataFrame:
    """
    Build a DataFrame with one row per trade, in caller order.

    Columns: profit_loss, entry_side, comments
    """
    return pd.DataFrame(
        {
            "profit_loss": [float(t.profit_loss) for t in trades],
            "entry_side": [t.entry_side.value for t in trades],
            "comments": [t.comments or "" for t in trades],
        }
    )


def win_rate(trades: Sequence[Trade]) -> float:
    """Share of trades with a positive result, on a 0-100 scale (0 when empty)."""
    if not trades:
        return 0.0
    pnl = trades_frame(trades)["profit_loss"]
    return float((pnl > 0).sum() / len(pnl) * 100)


def net_profit_loss(trades: Sequence[Trade]) -> float:
    if not trades:
        return 0.0
    return float(trades_frame(trades)["profit_loss"].sum())


def recent_trades(trades: Sequence[Trade], limit: int = 5) -> list[Trade]:
    """
    Leading `limit` trades. The caller supplies most-recent-first order;
    the collection is not re-sorted here.
    """
    return list(trades[:limit])


def recent_profit_loss(trades: Sequence[Trade], limit: int = 5) -> float:
    return net_profit_loss(recent_trades(trades, limit))


def return_on_capital(net_pl: float, initial_capital: float | None) -> float | None:
    """
    ROI in percent of initial capital.

    Formula: ROI = net_pl / initial_capital × 100

    Returns None when the initial capital is missing or zero, or when either
    input or the result is not finite.
    """
    if not initial_capital or not math.isfinite(initial_capital):
        return None
    roi = net_pl / initial_capital * 100
    return roi if math.isfinite(roi) else None


def compute_statistics(
    trades: Sequence[Trade],
    initial_capital: float | None = None,
    thresholds: SummaryThresholds | None = None,
) -> TradeStatistics:
    """
    Compute the full statistics snapshot.

    Break-even trades count towards the total but neither wins nor losses.

    Args:
        trades: Trade collection in caller order
        initial_capital: Session starting capital, used for ROI
        thresholds: Bias share and flagged comment term

    Returns:
        TradeStatistics; TradeStatistics.empty() for an empty collection
    """
    if not trades:
        return TradeStatistics.empty()

    thresholds = thresholds or SummaryThresholds()
    frame = trades_frame(trades)
    pnl = frame["profit_loss"]
    total = len(frame)

    wins = pnl[pnl > 0]
    losses = pnl[pnl < 0]

    average_win = float(wins.mean()) if len(wins) else 0.0
    average_loss = abs(float(losses.mean())) if len(losses) else 0.0
    risk_reward = average_win / average_loss if average_loss > 0 else None

    net_pl = float(pnl.sum())

    sides = frame["entry_side"]
    long_trades = int((sides == EntrySide.LONG.value).sum())
    short_trades = int((sides == EntrySide.SHORT.value).sum())
    bias_cutoff = total * thresholds.directional_bias_share

    term = thresholds.flagged_comment_term.lower()
    revenge_flagged = bool(
        frame["comments"].str.lower().str.contains(term, regex=False).any()
    )

    return TradeStatistics(
        total_trades=total,
        winning_trades=len(wins),
        losing_trades=len(losses),
        win_rate=len(wins) / total * 100,
        net_profit_loss=net_pl,
        average_win=average_win,
        average_loss=average_loss,
        risk_reward=risk_reward,
        roi=return_on_capital(net_pl, initial_capital),
        long_trades=long_trades,
        short_trades=short_trades,
        long_bias=long_trades > bias_cutoff,
        short_bias=short_trades > bias_cutoff,
        revenge_flagged=revenge_flagged,
    )


def format_currency(value: float) -> str:
    return f"${value:.2f}"


def format_percent(value: float) -> str:
    return f"{value:.1f}%"


def format_ratio(value: float | None) -> str:
    return "N/A" if value is None else f"{value:.2f}"
