"""Weekly ledger aggregation and derived views."""

from datetime import date, timedelta

import pytest

from BackEnd.repos import stats_repo
from BackEnd.repos.stats_repo import DailyStat
from BackEnd.services.stats_service import StatsService, current_streak


TODAY = date(2026, 3, 11)


def days_ago(n):
    return (TODAY - timedelta(days=n)).isoformat()


def seed(store, *entries):
    stats_repo.save_ledger(store, [DailyStat(d, s, m) for d, s, m in entries])


@pytest.fixture
def stats(store, clock):
    return StatsService(store, now=clock)


class TestRecord:
    def test_same_day_accumulates(self, stats):
        stats.record_completed_focus_session(25 * 60)
        stats.record_completed_focus_session(15 * 60)
        [entry] = stats.get_weekly_data()
        assert entry.date == "2026-03-11"
        assert entry.sessions == 2
        assert entry.minutes == pytest.approx(40)

    def test_new_day_appends(self, stats, clock):
        stats.record_completed_focus_session(600)
        clock.advance(days=1)
        stats.record_completed_focus_session(300)
        data = stats.get_weekly_data()
        assert [(e.date, e.sessions) for e in data] == [("2026-03-11", 1), ("2026-03-12", 1)]

    def test_write_prunes_old_entries(self, store, stats):
        seed(store, (days_ago(10), 4, 100.0), (days_ago(2), 2, 50.0))
        stats.record_completed_focus_session(60)
        dates = [e.date for e in stats.get_weekly_data()]
        assert days_ago(10) not in dates
        assert days_ago(2) in dates

    def test_window_is_today_and_six_days_back(self, store, stats):
        seed(store, (days_ago(7), 1, 25.0), (days_ago(6), 1, 25.0))
        stats.record_completed_focus_session(60)
        dates = [e.date for e in stats.get_weekly_data()]
        assert dates == [days_ago(6), days_ago(0)]

    def test_corrupt_ledger_starts_fresh(self, store, stats):
        store.set("weeklyData", "[{\"date\": 5}]")
        stats.record_completed_focus_session(120)
        [entry] = stats.get_weekly_data()
        assert entry.sessions == 1
        assert entry.minutes == pytest.approx(2)


class TestStreak:
    def test_three_consecutive_days(self):
        entries = [DailyStat(days_ago(n), 1, 25.0) for n in (0, 1, 2)]
        assert current_streak(entries, TODAY) == 3

    def test_gap_caps_streak(self):
        entries = [DailyStat(days_ago(n), 1, 25.0) for n in (0, 1, 3, 4)]
        assert current_streak(entries, TODAY) == 2

    def test_chain_ending_yesterday_counts(self):
        entries = [DailyStat(days_ago(n), 1, 25.0) for n in (1, 2)]
        assert current_streak(entries, TODAY) == 2

    def test_chain_ending_two_days_ago_is_zero(self):
        entries = [DailyStat(days_ago(2), 1, 25.0)]
        assert current_streak(entries, TODAY) == 0

    def test_empty(self):
        assert current_streak([], TODAY) == 0

    def test_order_irrelevant(self, store, stats):
        seed(store, (days_ago(1), 1, 25.0), (days_ago(0), 2, 50.0), (days_ago(2), 1, 25.0))
        assert stats.current_streak() == 3


class TestSummary:
    def test_weekly_summary(self, store, stats):
        seed(store, (days_ago(0), 2, 50.0), (days_ago(1), 4, 100.0), (days_ago(3), 3, 75.0))
        summary = stats.weekly_summary()
        assert summary["total_sessions"] == 9
        assert summary["total_minutes"] == pytest.approx(225)
        assert summary["best_day"].date == days_ago(1)
        assert summary["daily_average"] == pytest.approx(3.0)
        assert summary["streak"] == 2

    def test_empty_summary(self, stats):
        summary = stats.weekly_summary()
        assert summary["best_day"] is None
        assert summary["daily_average"] == 0.0
        assert summary["total_sessions"] == 0

    def test_week_series_zero_filled(self, store, stats):
        seed(store, (days_ago(0), 1, 25.0), (days_ago(3), 2, 40.0))
        series = stats.week_series()
        assert [d for d, _ in series] == [days_ago(n) for n in range(6, -1, -1)]
        assert series[-1][1] == pytest.approx(25)
        assert series[3][1] == pytest.approx(40)
        assert sum(m for _, m in series) == pytest.approx(65)

    def test_weekly_data_sorted_by_date(self, store, stats):
        seed(store, (days_ago(0), 1, 1.0), (days_ago(4), 1, 1.0), (days_ago(2), 1, 1.0))
        assert [e.date for e in stats.get_weekly_data()] == [days_ago(4), days_ago(2), days_ago(0)]

    def test_reset_empties_ledger(self, store, stats):
        stats.record_completed_focus_session(60)
        stats.reset()
        assert stats.get_weekly_data() == []
