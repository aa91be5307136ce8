"""Tests for the trade statistics snapshot."""

import math

import pytest
from pydantic import ValidationError

from conftest import make_trade
from sydney_assistant.engine.statistics import (
    compute_statistics,
    format_currency,
    format_percent,
    format_ratio,
    net_profit_loss,
    recent_profit_loss,
    recent_trades,
    return_on_capital,
    win_rate,
)
from sydney_assistant.models import Trade, TradingSession
from sydney_assistant.types import SummaryThresholds, TradeStatistics


class TestComputeStatistics:
    def test_empty_collection(self):
        assert compute_statistics([], 1000.0) == TradeStatistics.empty()

    def test_counts_exclude_break_even(self, mixed_trades):
        stats = compute_statistics(mixed_trades, 1000.0)
        assert stats.total_trades == 6
        assert stats.winning_trades == 3
        assert stats.losing_trades == 2
        assert stats.winning_trades + stats.losing_trades <= stats.total_trades
        assert stats.win_rate == pytest.approx(50.0)

    def test_averages_are_sign_normalised(self, mixed_trades):
        stats = compute_statistics(mixed_trades, 1000.0)
        assert stats.average_win == pytest.approx(230.0 / 3)
        assert stats.average_loss == pytest.approx(50.0)
        assert stats.risk_reward == pytest.approx((230.0 / 3) / 50.0)

    def test_roi(self):
        stats = compute_statistics([make_trade(50.0), make_trade(-20.0)], 100.0)
        assert stats.net_profit_loss == pytest.approx(30.0)
        assert f"{stats.roi:.2f}" == "30.00"

    def test_zero_capital_gives_no_roi(self):
        stats = compute_statistics([make_trade(50.0)], 0.0)
        assert stats.roi is None

    def test_no_losses_gives_no_risk_reward(self):
        stats = compute_statistics([make_trade(10.0), make_trade(0.0)], 100.0)
        assert stats.average_loss == 0.0
        assert stats.risk_reward is None

    def test_all_losses(self):
        stats = compute_statistics([make_trade(-10.0), make_trade(-30.0)], 100.0)
        assert stats.win_rate == 0.0
        assert stats.average_win == 0.0
        assert stats.average_loss == pytest.approx(20.0)
        assert stats.risk_reward == pytest.approx(0.0)

    def test_revenge_flag_is_case_insensitive(self, mixed_trades):
        assert compute_statistics(mixed_trades).revenge_flagged is True
        assert compute_statistics([make_trade(1.0, comments="calm")]).revenge_flagged is False

    def test_flagged_term_from_thresholds(self):
        trades = [make_trade(1.0, comments="FOMO entry")]
        cfg = SummaryThresholds(flagged_comment_term="fomo")
        assert compute_statistics(trades, thresholds=cfg).revenge_flagged is True

    def test_long_bias_needs_more_than_eighty_percent(self):
        four_of_five = [make_trade(1.0, "Long")] * 4 + [make_trade(1.0, "Short")]
        assert compute_statistics(four_of_five).long_bias is False

        five_of_six = [make_trade(1.0, "Long")] * 5 + [make_trade(1.0, "Short")]
        stats = compute_statistics(five_of_six)
        assert stats.long_bias is True
        assert stats.short_bias is False

    def test_short_bias(self):
        stats = compute_statistics([make_trade(-1.0, "Short")] * 3)
        assert stats.short_bias is True
        assert stats.long_trades == 0
        assert stats.short_trades == 3

    @pytest.mark.parametrize(
        "pnls",
        [[0.0], [1.0], [-1.0], [5.0, -5.0, 0.0, 2.5], [-0.01] * 7],
    )
    def test_win_rate_bounds(self, pnls):
        stats = compute_statistics([make_trade(p) for p in pnls], 100.0)
        assert 0.0 <= stats.win_rate <= 100.0
        assert not math.isnan(stats.win_rate)

    def test_idempotent(self, mixed_trades):
        assert compute_statistics(mixed_trades, 1000.0) == compute_statistics(
            mixed_trades, 1000.0
        )


class TestHelpers:
    def test_win_rate_empty(self):
        assert win_rate([]) == 0.0

    def test_net_profit_loss_empty(self):
        assert net_profit_loss([]) == 0.0

    def test_recent_trades_keeps_caller_order(self, mixed_trades):
        recent = recent_trades(mixed_trades, 5)
        assert [t.profit_loss for t in recent] == [120.0, -40.0, 0.0, 80.0, -60.0]

    def test_recent_profit_loss(self, mixed_trades):
        assert recent_profit_loss(mixed_trades) == pytest.approx(100.0)

    def test_return_on_capital(self):
        assert return_on_capital(30.0, 100.0) == pytest.approx(30.0)
        assert return_on_capital(30.0, None) is None

    @pytest.mark.parametrize(
        "net_pl, capital",
        [
            (30.0, float("nan")),
            (30.0, float("inf")),
            (float("nan"), 100.0),
            (1e10, 1e-310),
        ],
    )
    def test_return_on_capital_non_finite(self, net_pl, capital):
        assert return_on_capital(net_pl, capital) is None

    def test_formatters(self):
        assert format_currency(-20.0) == "$-20.00"
        assert format_percent(66.6666) == "66.7%"
        assert format_ratio(None) == "N/A"
        assert format_ratio(1.5) == "1.50"


class TestNonFiniteInputs:
    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_trade_rejects_non_finite_profit_loss(self, value):
        with pytest.raises(ValidationError):
            Trade(profit_loss=value, entry_side="Long")

    @pytest.mark.parametrize("field", ["initial_capital", "current_capital"])
    def test_session_rejects_non_finite_capital(self, field):
        values = {"id": "s", "name": "S", "initial_capital": 100.0, "current_capital": 100.0}
        values[field] = float("nan")
        with pytest.raises(ValidationError):
            TradingSession(**values)

    def test_overflowing_roi_is_none(self):
        stats = compute_statistics([make_trade(1e10)], 1e-310)
        assert stats.roi is None
