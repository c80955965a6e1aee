from __future__ import annotations

from paydays.core.frequency import PAY_FREQUENCIES, payday_noun, periods_per_year


def test_known_keys():
    assert {f.key: f.periods for f in PAY_FREQUENCIES} == {
        "daily": 365,
        "weekly": 52,
        "biweekly": 26,
        "monthly": 12,
    }
    assert payday_noun("daily") == "day"
    assert payday_noun("biweekly") == "biweekly paycheck"


def test_unrecognized_keys_fall_back_to_monthly():
    assert periods_per_year("Daily") == 12
    assert periods_per_year(" weekly") == 12
    assert periods_per_year("fortnightly") == 12
    assert periods_per_year(None) == 12
    assert payday_noun("MONTHLY") == "paycheck"
