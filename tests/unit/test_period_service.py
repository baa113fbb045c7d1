"""Tests for period resolution."""
import pytest
from datetime import datetime


class TestResolveDaily:
    """Tests for daily periods."""

    def test_daily_bounds(self):
        """Test the day runs from midnight to the last microsecond."""
        from worklog.models.report import PeriodKind
        from worklog.services.period_service import resolve_period

        period = resolve_period(datetime(2024, 3, 1, 15, 30), PeriodKind.DAILY)

        assert period.start == datetime(2024, 3, 1, 0, 0)
        assert period.end == datetime(2024, 3, 1, 23, 59, 59, 999999)
        assert period.label == "1 March 2024"


class TestResolveWeekly:
    """Tests for weekly periods."""

    def test_weekly_starts_monday(self):
        """Test a Wednesday resolves to Monday through Sunday."""
        from worklog.models.report import PeriodKind
        from worklog.services.period_service import resolve_period

        period = resolve_period(datetime(2024, 3, 20, 12), PeriodKind.WEEKLY)

        assert period.start == datetime(2024, 3, 18)
        assert period.end == datetime(2024, 3, 24, 23, 59, 59, 999999)
        assert period.label == "Week of 18 to 24 March 2024"

    def test_weekly_on_sunday(self):
        """Test Sunday belongs to the week that started the Monday before."""
        from worklog.models.report import PeriodKind
        from worklog.services.period_service import resolve_period

        period = resolve_period(datetime(2024, 3, 24, 23, 0), PeriodKind.WEEKLY)

        assert period.start == datetime(2024, 3, 18)

    def test_weekly_across_month(self):
        """Test a week spanning two months."""
        from worklog.models.report import PeriodKind
        from worklog.services.period_service import resolve_period

        period = resolve_period(datetime(2024, 3, 1), PeriodKind.WEEKLY)

        assert period.start == datetime(2024, 2, 26)
        assert period.end.date() == datetime(2024, 3, 3).date()


class TestResolveBiweekly:
    """Tests for the fixed fortnight split."""

    def test_first_half(self):
        """Test days 1-15 resolve to the first half ending 23:59:59 on the 15th."""
        from worklog.models.report import PeriodKind
        from worklog.services.period_service import resolve_period

        period = resolve_period(datetime(2024, 3, 15, 23, 30), PeriodKind.BIWEEKLY)

        assert period.start == datetime(2024, 3, 1)
        assert period.end == datetime(2024, 3, 15, 23, 59, 59)
        assert period.label == "Fortnight of 1 to 15 March 2024"

    def test_second_half(self):
        """Test day 16 onwards resolves to the second half."""
        from worklog.models.report import PeriodKind
        from worklog.services.period_service import resolve_period

        period = resolve_period(datetime(2024, 3, 16, 0, 0), PeriodKind.BIWEEKLY)

        assert period.start == datetime(2024, 3, 16)
        assert period.end == datetime(2024, 3, 31, 23, 59, 59, 999999)

    @pytest.mark.parametrize("now,last_day", [
        (datetime(2023, 2, 20), 28),
        (datetime(2024, 2, 20), 29),
        (datetime(2024, 4, 30), 30),
        (datetime(2024, 12, 31), 31),
    ])
    def test_second_half_month_lengths(self, now, last_day):
        """Test the second half ends on the last day of each month length."""
        from worklog.models.report import PeriodKind
        from worklog.services.period_service import resolve_period

        period = resolve_period(now, PeriodKind.BIWEEKLY)

        assert period.start.day == 16
        assert period.end.day == last_day
        assert period.end.month == now.month

    def test_membership_around_split(self):
        """Test entries just before and after midnight of the 15th fall in different halves."""
        from worklog.models.report import PeriodKind
        from worklog.services.period_service import resolve_period

        late_15th = datetime(2024, 3, 15, 23, 30)
        early_16th = datetime(2024, 3, 16, 0, 30)

        second_half = resolve_period(datetime(2024, 3, 20), PeriodKind.BIWEEKLY)
        first_half = resolve_period(datetime(2024, 3, 10), PeriodKind.BIWEEKLY)

        assert not second_half.contains(late_15th)
        assert second_half.contains(early_16th)
        assert first_half.contains(late_15th)
        assert not first_half.contains(early_16th)


class TestResolveMonthly:
    """Tests for monthly periods."""

    def test_monthly_bounds(self):
        """Test the month runs from the 1st to the end of the last day."""
        from worklog.models.report import PeriodKind
        from worklog.services.period_service import resolve_period

        period = resolve_period(datetime(2024, 2, 10), PeriodKind.MONTHLY)

        assert period.start == datetime(2024, 2, 1)
        assert period.end == datetime(2024, 2, 29, 23, 59, 59, 999999)
        assert period.label == "February 2024"

    def test_kind_accepts_string(self):
        """Test plain strings are accepted for the kind."""
        from worklog.models.report import PeriodKind
        from worklog.services.period_service import resolve_period

        assert resolve_period(datetime(2024, 2, 10), "monthly").kind is PeriodKind.MONTHLY

    def test_contains_inclusive(self):
        """Test both bounds belong to the period."""
        from worklog.models.report import PeriodKind
        from worklog.services.period_service import resolve_period

        period = resolve_period(datetime(2024, 2, 10), PeriodKind.MONTHLY)

        assert period.contains(period.start)
        assert period.contains(period.end)
        assert not period.contains(datetime(2024, 3, 1))
