"""
Session summary rendering.

Both the primary and the offline summary take their numbers from
compute_statistics, so the two always agree for the same input.
"""
import re
from collections.abc import Sequence

from sydney_assistant.engine.statistics import (
    compute_statistics,
    format_currency,
    format_percent,
    format_ratio,
)
from sydney_assistant.models import Trade, TradingSession
from sydney_assistant.types import SummaryThresholds, TradeStatistics

WHITESPACE = re.compile(r"\s+")

EMPTY_SESSION_SUMMARY = """## {name} - Session Summary

This session is just getting started! No trades have been recorded yet.

**Next Steps:**
- Add your first trade to begin tracking performance
- Set clear goals for this trading session
- Consider your risk management strategy

I'll provide detailed insights once you have some trading data to analyze."""


def _format_roi(roi: float | None) -> str:
    return "N/A" if roi is None else f"{roi:.2f}%"


def _key_insights(stats: TradeStatistics, cfg: SummaryThresholds) -> list[str]:
    return [
        "✅ Strong win rate indicates good trade selection"
        if stats.win_rate >= cfg.strong_win_rate
        else "⚠️ Win rate could be improved - review entry criteria",
        "✅ Profitable session - maintaining positive momentum"
        if stats.net_profit_loss > 0
        else "⚠️ Session showing losses - consider risk management review",
        "✅ Good sample size for reliable analysis"
        if stats.total_trades >= cfg.reliable_sample_size
        else "📈 Building trade history for better insights",
    ]


def _behavioral_patterns(stats: TradeStatistics) -> list[str]:
    patterns = []
    if stats.revenge_flagged:
        patterns.append("⚠️ Possible revenge trading detected in comments")
    if stats.long_bias:
        patterns.append("📊 Heavy bias toward long positions")
    if stats.short_bias:
        patterns.append("📊 Heavy bias toward short positions")
    return patterns or ["✅ No concerning patterns detected"]


def _recommendations(stats: TradeStatistics, cfg: SummaryThresholds) -> list[str]:
    return [
        "- Focus on improving trade selection and entry timing"
        if stats.win_rate < cfg.weak_win_rate
        else "- Maintain current trade selection discipline",
        "- Consider tighter stop losses or wider profit targets"
        if stats.average_loss > stats.average_win
        else "- Good risk/reward management",
        "- Continue building trade history for more reliable patterns"
        if stats.total_trades < cfg.sufficient_history
        else "- Sufficient data for pattern analysis",
    ]


def render_summary(
    session: TradingSession,
    trades: Sequence[Trade],
    thresholds: SummaryThresholds | None = None,
) -> str:
    """
    Render the full markdown session report.

    Args:
        session: Session being summarised
        trades: Its trades, in caller order
        thresholds: Cut-offs for the conditional lines

    Returns:
        Markdown text; the onboarding block when there are no trades
    """
    if not trades:
        return EMPTY_SESSION_SUMMARY.format(name=session.name)

    cfg = thresholds or SummaryThresholds()
    stats = compute_statistics(trades, session.initial_capital, cfg)

    lines = [
        f"## {session.name} - AI Generated Summary",
        "",
        "**📊 Performance Overview**",
        f"- **Total Trades:** {stats.total_trades}",
        f"- **Win Rate:** {format_percent(stats.win_rate)} "
        f"({stats.winning_trades}W / {stats.losing_trades}L)",
        f"- **Net P/L:** {format_currency(stats.net_profit_loss)}",
        f"- **ROI:** {_format_roi(stats.roi)}",
        "",
        "**💰 Trade Analysis**",
        f"- **Average Win:** {format_currency(stats.average_win)}",
        f"- **Average Loss:** {format_currency(stats.average_loss)}",
        f"- **Risk/Reward Ratio:** {format_ratio(stats.risk_reward)}",
        "",
        "**🎯 Key Insights**",
        *_key_insights(stats, cfg),
        "",
        "**🔍 Behavioral Patterns**",
        *_behavioral_patterns(stats),
        "",
        "**💡 Recommendations**",
        *_recommendations(stats, cfg),
        "",
        "*Generated by Sydney AI Assistant*",
    ]
    return "\n".join(lines)


def render_offline_summary(
    session: TradingSession, trades: Sequence[Trade]
) -> str:
    """Shorter summary used when the assistant cannot be reached."""
    stats = compute_statistics(trades, session.initial_capital)

    if stats.total_trades == 0:
        analysis = "No trades recorded yet. Start trading to see detailed analysis!"
    else:
        analysis = (
            f"This session has {stats.total_trades} trades with a net P/L of "
            f"{format_currency(stats.net_profit_loss)} and a win rate of "
            f"{format_percent(stats.win_rate)}."
        )

    return f"""## {session.name} - Session Summary

**Performance Overview:**
- Total Trades: {stats.total_trades}
- Initial Capital: {format_currency(session.initial_capital)}
- Current Capital: {format_currency(session.current_capital)}

**Analysis:**
{analysis}

*Summary generated offline due to connection issues*"""


def summary_filename(session: TradingSession) -> str:
    return f"{WHITESPACE.sub('_', session.name)}_summary.md"
