"""
Response Generator

Renders the chat reply for a classified intent from the caller's session and
trade data. Pure and synchronous: latency belongs to the provider, and the
random tip/fallback pick goes through an injected RNG.
"""
import random
from collections.abc import Sequence

import structlog

from sydney_assistant.engine.statistics import (
    format_currency,
    format_percent,
    net_profit_loss,
    recent_profit_loss,
    recent_trades,
    win_rate,
)
from sydney_assistant.models import HistoryMessage, Trade, TradingSession
from sydney_assistant.types import Intent, RandomSource, Thresholds

logger = structlog.get_logger(__name__)


SESSION_SWITCH_INSTRUCTIONS = (
    "I can help you switch sessions! Just tell me the session name, "
    "like 'Load the BTC session' or 'Switch to Apple Scalping'."
)

NO_TRADES_ANALYSIS = (
    "I don't see any trades in your current session yet. Once you add some "
    "trades, I can provide detailed analysis of your performance, patterns, "
    "and suggestions for improvement."
)

NO_TRADES_PERFORMANCE = (
    "You haven't recorded any trades yet in this session. Start adding your "
    "trades and I'll help you track your performance!"
)

RISK_MANAGEMENT_GUIDE = """Here are some key risk management principles:

🛡️ **Position Sizing:**
• Never risk more than 1-2% of your account per trade
• Use consistent position sizes based on your risk tolerance

📊 **Risk/Reward:**
• Aim for at least 1:2 risk-to-reward ratio
• Set stop losses before entering trades

🎯 **Diversification:**
• Don't put all capital in one trade or asset
• Spread risk across different opportunities

💭 **Psychology:**
• Stick to your trading plan
• Don't revenge trade after losses
• Take breaks when emotions run high"""

TRADING_TIPS = (
    "Keep a detailed trading journal - your comments in trades are valuable for pattern recognition.",
    "Focus on process over profits. Good process leads to consistent results.",
    "Review your trades weekly to identify what's working and what isn't.",
    "Don't overtrade - quality over quantity always wins.",
    "Set daily/weekly loss limits to protect your capital.",
    "Celebrate small wins and learn from every loss.",
    "Stay disciplined with your entry and exit rules.",
)

ADVICE_TEMPLATE = """💡 **Trading Tip:** {tip}

Remember, successful trading is about consistency and continuous improvement. I'm here to help you analyze your patterns and make better decisions!"""

FALLBACK_RESPONSES = (
    "I'm here to help you improve your trading! Ask me about your performance, risk management, or trading strategies.",
    "I can analyze your trades, help you spot patterns, and provide personalized advice. What would you like to know?",
    "Let me know if you'd like me to review your recent trades or provide some trading insights!",
    "I'm Sydney, your AI trading assistant. I can help with analysis, session management, and trading advice. How can I assist you?",
    "Feel free to ask me about your trading performance, patterns in your trades, or general trading advice!",
)


class ResponseGenerator:
    """
    Template-based reply renderer.

    Attributes:
        rng: Random source used for tip and fallback selection
        thresholds: Numeric cut-offs for the analysis/performance templates
    """

    def __init__(
        self,
        rng: RandomSource | None = None,
        thresholds: Thresholds | None = None,
    ) -> None:
        self.rng = rng if rng is not None else random.Random()
        self.thresholds = thresholds or Thresholds()
        self.logger = logger.bind(component="response_generator")

    def respond(
        self,
        intent: Intent,
        utterance: str,
        session: TradingSession | None,
        trades: Sequence[Trade],
        history: Sequence[HistoryMessage] = (),
    ) -> str:
        """
        Render the reply for `intent`.

        `session` may be None when no session is active; the caller then
        supplies no trades, so nothing here reads its capital fields.
        `utterance` and `history` are context only.
        """
        handlers = {
            Intent.SESSION_SWITCH: self.session_switch,
            Intent.ANALYSIS: self.analysis,
            Intent.PERFORMANCE: self.performance,
            Intent.RISK_MANAGEMENT: self.risk_management,
            Intent.ADVICE: self.advice,
            Intent.FALLBACK: self.fallback,
        }
        self.logger.debug(
            "rendering_response",
            intent=intent.value,
            trades=len(trades),
            history=len(history),
            has_session=session is not None,
        )
        return handlers[intent](trades)

    def session_switch(self, _: Sequence[Trade]) -> str:
        return SESSION_SWITCH_INSTRUCTIONS

    def analysis(self, trades: Sequence[Trade]) -> str:
        if not trades:
            return NO_TRADES_ANALYSIS

        cfg = self.thresholds.chat
        rate = win_rate(trades)
        total_pl = net_profit_loss(trades)

        win_rate_insight = (
            "• Great win rate! You're showing strong trade selection."
            if rate > cfg.strong_win_rate
            else "• Consider reviewing your entry criteria to improve win rate."
        )
        pl_insight = (
            "• Positive performance - keep up the good work!"
            if total_pl > 0
            else "• Focus on risk management and position sizing."
        )
        data_tip = (
            "Build more data for better analysis"
            if len(trades) < cfg.min_trades_for_journal_tip
            else "Consider keeping a trading journal for pattern recognition"
        )

        return f"""Here's your trading analysis:

📊 **Performance Overview:**
• Total Trades: {len(trades)}
• Win Rate: {format_percent(rate)}
• Net P/L: {format_currency(total_pl)}

🎯 **Key Insights:**
{win_rate_insight}
{pl_insight}

💡 **Suggestions:**
• {data_tip}
• Monitor your emotional state in trade comments
• Review your best and worst performing trades"""

    def performance(self, trades: Sequence[Trade]) -> str:
        if not trades:
            return NO_TRADES_PERFORMANCE

        cfg = self.thresholds.chat
        recent = recent_trades(trades, cfg.recent_window)
        recent_pl = recent_profit_loss(trades, cfg.recent_window)
        positive = recent_pl > 0

        tone = "positive" if positive else "challenging"
        nudge = (
            "Keep up the momentum!"
            if positive
            else "Consider taking a step back and reviewing your strategy."
        )
        direction = "gains" if positive else "losses"
        patterns = (
            "I can see some patterns forming - would you like me to analyze them?"
            if len(recent) >= cfg.min_trades_for_patterns
            else "Add more trades for better pattern analysis."
        )

        return (
            f"Your recent performance looks {tone}. {nudge}\n\n"
            f"Your last {len(recent)} trades show {direction} of "
            f"{format_currency(abs(recent_pl))}. {patterns}"
        )

    def risk_management(self, _: Sequence[Trade]) -> str:
        return RISK_MANAGEMENT_GUIDE

    def advice(self, _: Sequence[Trade]) -> str:
        tip = TRADING_TIPS[self.rng.randrange(len(TRADING_TIPS))]
        return ADVICE_TEMPLATE.format(tip=tip)

    def fallback(self, _: Sequence[Trade]) -> str:
        return FALLBACK_RESPONSES[self.rng.randrange(len(FALLBACK_RESPONSES))]
